"""
Templating Context

Responsibilities:
- Represents resume/cover-letter content as a structured document model
- Loads document models from producer mappings and YAML/JSON files
- Projects document models into the flat placeholder namespace
- Documents the placeholder namespace (placeholder catalog)

Owns: Document model, placeholder namespace, projection rules
Never: Touches template markup
"""

from vitae.contexts.templating.document_data_structure import (
    DocumentModel,
    load_document,
)
from vitae.contexts.templating.exceptions import InvalidDocumentStructureError
from vitae.contexts.templating.placeholder_catalog import (
    PLACEHOLDER_CATALOG,
    PlaceholderSpec,
    format_catalog_markdown,
    get_all_placeholders,
    get_placeholders_by_category,
    is_valid_placeholder,
)
from vitae.contexts.templating.projector import project

__all__ = [
    # Document model
    "DocumentModel",
    "load_document",
    "InvalidDocumentStructureError",
    # Projection
    "project",
    # Catalog
    "PLACEHOLDER_CATALOG",
    "PlaceholderSpec",
    "format_catalog_markdown",
    "get_all_placeholders",
    "get_placeholders_by_category",
    "is_valid_placeholder",
]
