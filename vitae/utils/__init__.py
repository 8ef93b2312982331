"""
Shared utilities for VITAE.

Common functionality used across contexts:
- Logger configuration
- Text coercion helpers
"""

from vitae.utils.text_processing import as_text, as_text_list

__all__ = ["as_text", "as_text_list"]
