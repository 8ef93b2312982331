"""
Rendering context logger.

Provides logging interface for rendering context with automatic [render] prefix.
All rendering modules should import from this module, not from utils.logger directly.
"""

import os
from pathlib import Path
from typing import Optional, TextIO

from dotenv import load_dotenv
from loguru import logger

from vitae.utils.logger import setup_logger as _setup_logger

load_dotenv()

CONTEXT_PREFIX = "[render]"


def setup_rendering_logger(
    log_dir: Path,
    template_name: Optional[str] = None,
    console_sink: Optional[TextIO] = None,
) -> Path:
    """
    Setup logger for rendering context.

    Args:
        log_dir: Directory for this rendering session
        template_name: Template being rendered, recorded in the provenance header
        console_sink: Console stream (default: stdout; pass sys.stderr when the
                      rendered HTML itself goes to stdout)

    Returns:
        Path to log file

    Example:
        from vitae.contexts.rendering.logger import setup_rendering_logger

        log_file = setup_rendering_logger(log_dir, template_name="classic")
    """
    return _setup_logger(
        context_name="render",
        log_dir=log_dir,
        extra_provenance={
            "Template": template_name,
            "Templates path": os.getenv("VITAE_TEMPLATES_PATH", "templates"),
        },
        console_sink=console_sink,
    )


# Wrapper functions with automatic [render] prefix


def _log_info(message: str) -> None:
    """Log info message with [render] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [render] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [render] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [render] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


def log_render_result(result, elapsed_time: float) -> None:
    """
    Log a render result.

    Args:
        result: RenderResult from generate_document_html()
        elapsed_time: Time taken
    """
    filled = sum(1 for value in result.placeholders.values() if value)
    _log_debug(f"Projected {len(result.placeholders)} placeholders ({filled} non-empty)")

    if result.unknown_placeholders:
        _log_warning(
            f"Stripped {len(result.unknown_placeholders)} undocumented placeholders: "
            f"{', '.join(result.unknown_placeholders)}"
        )

    _log_success(f"Rendered {len(result.html)} characters ({elapsed_time:.3f}s)")
