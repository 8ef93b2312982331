"""Unit tests for TemplateStore class."""

import pytest
from pathlib import Path
from jinja2 import TemplateNotFound

from vitae.contexts.rendering.template_store import DocumentTemplate, TemplateStore

TEMPLATES_PATH = Path(__file__).parent.parent / "fixtures" / "templates"


@pytest.mark.unit
def test_template_store_init():
    """Test TemplateStore initialization."""
    store = TemplateStore(TEMPLATES_PATH)
    assert store.templates_path.exists()
    assert store._cache == {}


@pytest.mark.unit
def test_get_template_with_css():
    """Test loading a template that ships a stylesheet."""
    store = TemplateStore(TEMPLATES_PATH)
    template = store.get_template("classic")

    assert isinstance(template, DocumentTemplate)
    assert template.name == "classic"
    assert "{FULL_NAME}" in template.html
    assert ".resume" in template.css


@pytest.mark.unit
def test_get_template_without_css():
    """Test loading a template with no style.css."""
    store = TemplateStore(TEMPLATES_PATH)
    template = store.get_template("plain")

    assert template.css is None
    assert "Dear Hiring Manager" in template.html


@pytest.mark.unit
def test_template_caching():
    """Test that templates are cached after first load."""
    store = TemplateStore(TEMPLATES_PATH)

    template1 = store.get_template("classic")
    assert store.is_cached("classic")

    template2 = store.get_template("classic")
    assert template1 is template2


@pytest.mark.unit
def test_get_template_not_found():
    """Test error handling for missing template."""
    store = TemplateStore(TEMPLATES_PATH)

    with pytest.raises(TemplateNotFound) as exc_info:
        store.get_template("nonexistent")

    assert "nonexistent" in str(exc_info.value)
    assert not store.is_cached("nonexistent")


@pytest.mark.unit
def test_get_template_rejects_paths_outside_store():
    """Names cannot escape the store directory."""
    store = TemplateStore(TEMPLATES_PATH)

    with pytest.raises(TemplateNotFound):
        store.get_template("../documents")


@pytest.mark.unit
def test_get_template_path():
    """Test getting template file path."""
    store = TemplateStore(TEMPLATES_PATH)
    path = store.get_template_path("classic")

    assert isinstance(path, Path)
    assert path.name == "template.html"
    assert path.parent.name == "classic"


@pytest.mark.unit
def test_list_templates():
    store = TemplateStore(TEMPLATES_PATH)

    assert store.list_templates() == ["classic", "plain"]


@pytest.mark.unit
def test_list_templates_missing_directory(tmp_path):
    store = TemplateStore(tmp_path / "missing")

    assert store.list_templates() == []


@pytest.mark.unit
def test_clear_cache():
    """Test cache clearing."""
    store = TemplateStore(TEMPLATES_PATH)

    store.get_template("classic")
    assert len(store._cache) == 1

    store.clear_cache()
    assert len(store._cache) == 0


@pytest.mark.unit
def test_template_markup_is_returned_raw(tmp_path):
    """Jinja2 only reads the source; Jinja syntax in a template is not evaluated."""
    template_dir = tmp_path / "jinja_like"
    template_dir.mkdir()
    (template_dir / "template.html").write_text("{{ not_rendered }} {NAME}", encoding="utf-8")

    store = TemplateStore(tmp_path)

    assert store.get_template("jinja_like").html == "{{ not_rendered }} {NAME}"
