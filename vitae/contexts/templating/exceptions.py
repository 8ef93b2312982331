"""Custom exceptions for templating context."""

from pathlib import Path
from typing import Optional


class InvalidDocumentStructureError(ValueError):
    """
    Exception raised when a document source does not have a usable root.

    Field-level problems never raise (they degrade to empty strings during
    projection). This is reserved for inputs that are not a mapping at all,
    e.g. a YAML file whose root is a list or a scalar, or that does not parse.

    Attributes:
        message: Error description
        source_path: Path of the offending document file, if loaded from disk
        actual_type: Name of the type found at the document root
    """

    def __init__(
        self,
        message: str,
        source_path: Optional[Path] = None,
        actual_type: Optional[str] = None,
    ):
        self.message = message
        self.source_path = source_path
        self.actual_type = actual_type

        parts = [message]

        if source_path:
            parts.append(f"\nDocument: {source_path}")

        if actual_type:
            parts.append(f"Found root of type: {actual_type}")

        super().__init__("\n".join(parts))
