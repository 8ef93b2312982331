"""
Render Orchestration

Ties the templating and rendering contexts together:
document model -> placeholder map -> rendered body -> styled HTML.

The pure core (project, render) does not log; this module does.
"""

import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Union

from vitae.contexts.rendering.logger import _log_info, log_render_result
from vitae.contexts.rendering.renderer import compose_styles, find_placeholders, render
from vitae.contexts.rendering.template_store import TemplateStore
from vitae.contexts.templating.document_data_structure import DocumentModel, load_document
from vitae.contexts.templating.placeholder_catalog import is_valid_placeholder
from vitae.contexts.templating.projector import project


@dataclass
class RenderResult:
    """Result from generate_document_html() or render_document_file()."""

    html: str
    placeholders: Dict[str, str] = field(default_factory=dict)
    # Template tokens that no document can fill (stripped from output)
    unknown_placeholders: List[str] = field(default_factory=list)
    output_path: Optional[Path] = None
    time_s: float = 0.0


def check_template(template_html: str) -> List[str]:
    """
    Find template tokens that are not in the placeholder catalog.

    Such tokens are valid syntax but can never be filled, so they always render
    as "". Typically a typo ({JOBTITLE_1}) or an index past a section cap.

    Returns:
        Undocumented keys in first-appearance order
    """
    return [key for key in find_placeholders(template_html) if not is_valid_placeholder(key)]


def generate_document_html(
    document: Union[DocumentModel, Mapping[str, Any]],
    template_html: str,
    css: Optional[str] = None,
) -> RenderResult:
    """
    Project a document and render it into a template.

    Args:
        document: DocumentModel or producer mapping
        template_html: Template body with {KEY} placeholders
        css: Optional stylesheet, prepended as a <style> block

    Returns:
        RenderResult with final HTML, the placeholder map used, and any
        undocumented placeholders found in the template
    """
    start_time = time.time()

    placeholders = project(document)
    body = render(template_html, placeholders)
    result = RenderResult(
        html=compose_styles(body, css),
        placeholders=placeholders,
        unknown_placeholders=check_template(template_html),
    )

    result.time_s = time.time() - start_time
    log_render_result(result, result.time_s)
    return result


def render_document_file(
    document_path: Path,
    template_name: str,
    output_path: Optional[Path] = None,
    store: Optional[TemplateStore] = None,
    include_css: bool = True,
) -> RenderResult:
    """
    Render a document file with a named template from the store.

    Args:
        document_path: YAML or JSON document file
        template_name: Name of the template in the store
        output_path: Where to write the HTML (not written when None)
        store: TemplateStore to load from (default: store at VITAE_TEMPLATES_PATH)
        include_css: Prepend the template's stylesheet when it has one

    Returns:
        RenderResult (output_path set when the HTML was written)

    Raises:
        FileNotFoundError: If document_path does not exist
        InvalidDocumentStructureError: If the document root is not a mapping
        TemplateNotFound: If the template is not in the store
    """
    if store is None:
        store = TemplateStore()

    _log_info(f"Rendering {document_path.name} with template '{template_name}'")

    document = load_document(document_path)

    template = store.get_template(template_name)
    result = generate_document_html(
        document, template.html, css=template.css if include_css else None
    )

    if output_path is not None:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(result.html, encoding="utf-8")
        result.output_path = output_path
        _log_info(f"  Output: {output_path}")

    return result
