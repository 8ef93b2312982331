"""
Templating context logger.

Provides logging interface for templating context with automatic [template] prefix.
All templating modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path

from loguru import logger

CONTEXT_PREFIX = "[template]"


# Wrapper functions with automatic [template] prefix


def _log_info(message: str) -> None:
    """Log info message with [template] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [template] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


def log_document_loaded(document_path: Path, section_counts: dict) -> None:
    """Log which sections a loaded document provides."""
    _log_info(f"Loaded document {document_path.name}")
    _log_debug(f"Source: {document_path}")
    for section, count in section_counts.items():
        if count is None:
            _log_debug(f"  {section}: absent")
        else:
            _log_debug(f"  {section}: {count}")
