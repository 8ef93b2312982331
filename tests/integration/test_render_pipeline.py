"""
Integration tests for document rendering.
Tests: document -> placeholder map -> rendered template -> styled HTML.
"""

import importlib.util
import sys
from pathlib import Path

import pytest
from jinja2 import TemplateNotFound
from loguru import logger
from typer.testing import CliRunner

from vitae.contexts.rendering import (
    PLACEHOLDER_PATTERN,
    TemplateStore,
    generate_document_html,
    render,
    render_document_file,
)
from vitae.contexts.templating import InvalidDocumentStructureError, project

FIXTURES_PATH = Path(__file__).parent.parent / "fixtures"
DOCUMENTS_PATH = FIXTURES_PATH / "documents"
TEMPLATES_PATH = FIXTURES_PATH / "templates"
CLI_PATH = Path(__file__).parent.parent.parent / "scripts" / "render_document.py"


@pytest.fixture(autouse=True)
def reset_logger():
    """CLI commands reconfigure loguru sinks onto CliRunner streams; restore stderr."""
    yield
    logger.remove()
    logger.add(sys.stderr)


def _load_cli(logs_path: Path):
    """Import scripts/render_document.py as a module with logs redirected."""
    spec = importlib.util.spec_from_file_location("render_document", CLI_PATH)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    module.LOGS_PATH = logs_path
    return module


@pytest.mark.integration
def test_end_to_end_greeting():
    """Known keys substituted, unknown key stripped, trailing space kept."""
    template = "Hello {NAME} {SURNAME}, skills: {SKILLS}. {UNUSED_TAG}"
    document = {
        "personal": {"fullName": "Ana Mwangi"},
        "skills": [{"name": "SQL"}, {"name": "Go"}],
    }

    assert render(template, project(document)) == "Hello Ana Mwangi, skills: SQL, Go. "


@pytest.mark.integration
def test_generate_document_html_with_css():
    result = generate_document_html(
        {"personal": {"fullName": "Ana Mwangi"}},
        "<h1>{FULL_NAME}</h1>{PORTFOLIO_LINK}",
        css="h1 { color: navy; }",
    )

    assert result.html == "<style>h1 { color: navy; }</style><h1>Ana Mwangi</h1>"
    assert result.placeholders["NAME"] == "Ana"
    assert result.unknown_placeholders == ["PORTFOLIO_LINK"]


@pytest.mark.integration
def test_render_document_file_classic(tmp_path):
    store = TemplateStore(TEMPLATES_PATH)
    output_path = tmp_path / "out" / "jane.html"

    result = render_document_file(
        DOCUMENTS_PATH / "jane_doe.yaml", "classic", output_path=output_path, store=store
    )

    html = output_path.read_text(encoding="utf-8")
    assert html == result.html
    assert result.output_path == output_path

    assert html.startswith("<style>.resume { font-family: Georgia, serif; }")
    assert "<h1>Jane Mary Doe</h1>" in html
    assert "Nairobi, Nairobi County | +254 700 000 000 | jane@example.com" in html
    assert "<h3>Senior Engineer - Acme</h3><p>2021 to 2024</p>" in html
    assert "<h3>Engineer - Globex</h3><p>2018 to 2021</p>" in html
    assert "BSc in Computer Science, University of Nairobi (2014 - 2018)" in html
    assert "SQL, Python, Airflow" in html
    assert "English: Fluent, Swahili: Native" in html
    assert "John Smith (john@acme.example)" in html
    assert "<footer></footer>" in html
    assert PLACEHOLDER_PATTERN.search(html) is None
    assert result.unknown_placeholders == ["PORTFOLIO_LINK"]


@pytest.mark.integration
def test_render_document_file_without_css():
    store = TemplateStore(TEMPLATES_PATH)

    result = render_document_file(
        DOCUMENTS_PATH / "jane_doe.yaml", "classic", store=store, include_css=False
    )

    assert not result.html.startswith("<style>")
    assert result.output_path is None


@pytest.mark.integration
def test_render_cover_letter_template():
    store = TemplateStore(TEMPLATES_PATH)

    result = render_document_file(DOCUMENTS_PATH / "ana_mwangi.json", "plain", store=store)

    assert "My name is Ana Mwangi and I work as a . Skills: SQL, Go." in result.html
    assert result.html.rstrip().endswith("Regards,\nAna Mwangi")


@pytest.mark.integration
def test_render_document_file_errors():
    store = TemplateStore(TEMPLATES_PATH)

    with pytest.raises(TemplateNotFound):
        render_document_file(DOCUMENTS_PATH / "jane_doe.yaml", "missing", store=store)

    with pytest.raises(InvalidDocumentStructureError):
        render_document_file(DOCUMENTS_PATH / "list_root.yaml", "classic", store=store)


@pytest.mark.integration
def test_cli_render_to_file(tmp_path):
    cli = _load_cli(tmp_path / "logs")
    output_path = tmp_path / "jane.html"

    result = CliRunner().invoke(
        cli.app,
        [
            "render",
            str(DOCUMENTS_PATH / "jane_doe.yaml"),
            "classic",
            "-o",
            str(output_path),
            "-t",
            str(TEMPLATES_PATH),
        ],
    )

    assert result.exit_code == 0, result.output
    assert "<h1>Jane Mary Doe</h1>" in output_path.read_text(encoding="utf-8")
    assert (tmp_path / "logs").exists()


@pytest.mark.integration
def test_cli_render_missing_template(tmp_path):
    cli = _load_cli(tmp_path / "logs")

    result = CliRunner().invoke(
        cli.app,
        ["render", str(DOCUMENTS_PATH / "jane_doe.yaml"), "missing", "-t", str(TEMPLATES_PATH)],
    )

    assert result.exit_code == 1


@pytest.mark.integration
def test_cli_render_to_stdout_keeps_logs_on_stderr(tmp_path):
    cli = _load_cli(tmp_path / "logs")

    result = CliRunner().invoke(
        cli.app,
        ["render", str(DOCUMENTS_PATH / "ana_mwangi.json"), "plain", "-t", str(TEMPLATES_PATH)],
    )

    assert result.exit_code == 0, result.output
    assert result.stdout.startswith("Dear Hiring Manager,\n")
    assert result.stdout.rstrip().endswith("Regards,\nAna Mwangi")
    assert "[render]" not in result.stdout
    assert "Rendered" in result.stderr
    assert "Log:" in result.stderr


@pytest.mark.integration
def test_cli_malformed_document(tmp_path):
    cli = _load_cli(tmp_path / "logs")
    runner = CliRunner()
    document = str(DOCUMENTS_PATH / "malformed.yaml")

    result = runner.invoke(cli.app, ["render", document, "plain", "-t", str(TEMPLATES_PATH)])
    assert result.exit_code == 1
    assert "could not be parsed" in result.stderr
    assert result.exception is None or isinstance(result.exception, SystemExit)

    result = runner.invoke(cli.app, ["project", document])
    assert result.exit_code == 1
    assert "could not be parsed" in result.stderr


@pytest.mark.integration
def test_cli_project(tmp_path):
    cli = _load_cli(tmp_path / "logs")

    result = CliRunner().invoke(
        cli.app, ["project", str(DOCUMENTS_PATH / "ana_mwangi.json"), "--non-empty"]
    )

    assert result.exit_code == 0, result.output
    assert "SURNAME: Mwangi" in result.output
    assert "SKILL_2: Go" in result.output
    assert "WORK_EXPERIENCE" not in result.output


@pytest.mark.integration
def test_cli_catalog(tmp_path):
    cli = _load_cli(tmp_path / "logs")
    runner = CliRunner()

    result = runner.invoke(cli.app, ["catalog", "--category", "personal"])
    assert result.exit_code == 0, result.output
    assert "`{SURNAME}`" in result.output

    result = runner.invoke(cli.app, ["catalog", "--category", "hobbies"])
    assert result.exit_code == 1


@pytest.mark.integration
def test_cli_check(tmp_path):
    cli = _load_cli(tmp_path / "logs")
    runner = CliRunner()

    result = runner.invoke(cli.app, ["check", str(TEMPLATES_PATH / "plain" / "template.html")])
    assert result.exit_code == 0, result.output

    result = runner.invoke(cli.app, ["check", str(TEMPLATES_PATH / "classic" / "template.html")])
    assert result.exit_code == 1
    assert "{PORTFOLIO_LINK}" in result.output


@pytest.mark.integration
def test_cli_list(tmp_path):
    cli = _load_cli(tmp_path / "logs")

    result = CliRunner().invoke(cli.app, ["list", "-t", str(TEMPLATES_PATH)])

    assert result.exit_code == 0, result.output
    assert "classic (+css)" in result.output
    assert "plain" in result.output
