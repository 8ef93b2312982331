"""
Rendering Context

Responsibilities:
- Loads HTML templates and stylesheets from the template store
- Substitutes placeholder maps into templates and strips leftover tokens
- Composes stylesheets with rendered bodies into final HTML

Owns: Token grammar, substitution and cleanup passes, template loading
Never: Decides what a placeholder's value is
"""

from vitae.contexts.rendering.pipeline import (
    RenderResult,
    check_template,
    generate_document_html,
    render_document_file,
)
from vitae.contexts.rendering.renderer import (
    PLACEHOLDER_PATTERN,
    compose_styles,
    find_placeholders,
    render,
)
from vitae.contexts.rendering.template_store import DocumentTemplate, TemplateStore

__all__ = [
    # Core
    "PLACEHOLDER_PATTERN",
    "render",
    "find_placeholders",
    "compose_styles",
    # Template store
    "TemplateStore",
    "DocumentTemplate",
    # Orchestration
    "RenderResult",
    "generate_document_html",
    "render_document_file",
    "check_template",
]
