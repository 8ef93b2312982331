"""
Shared loguru setup for VITAE contexts.

Each run gets a DEBUG log file plus a colorized INFO console sink, headed by a
provenance block. Context wrappers (the [render] / [template] prefixes) live in
contexts/{context}/logger.py.

The console sink defaults to stdout. Commands that emit a payload on stdout
(rendered HTML piped into a file) pass sys.stderr so log lines stay out of it.
"""

import sys
from pathlib import Path
from typing import Dict, Optional, TextIO

from dotenv import load_dotenv
from loguru import logger

load_dotenv()

LEVEL_COLORS = {
    "WARNING": "<yellow>",
    "ERROR": "<red>",
    "CRITICAL": "<bold><red>",
}

FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <7} | {message}"
CONSOLE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | <level>{level: <7}</level> | <level>{message}</level>"


def setup_logger(
    context_name: str,
    log_dir: Path,
    extra_provenance: Optional[Dict[str, object]] = None,
    level_colors: Optional[Dict[str, str]] = None,
    console_sink: Optional[TextIO] = None,
) -> Path:
    """
    Replace all loguru sinks with a log file and a console stream.

    Args:
        context_name: Context identifier, used as the log file stem ("render")
        log_dir: Directory for this logging session (created if missing)
        extra_provenance: Additional key-value pairs for the provenance header
        level_colors: Override default level colors (e.g., {"INFO": "<cyan>"})
        console_sink: Stream for console output (default: sys.stdout)

    Returns:
        Path to log file

    Example:
        log_file = setup_logger(
            "render",
            Path("outs/logs/render_20251114_123456"),
            extra_provenance={"Template": "classic"},
            console_sink=sys.stderr,
        )
    """
    log_dir.mkdir(exist_ok=True, parents=True)
    log_file = log_dir / f"{context_name}.log"

    logger.remove()

    for level_name, color in {**LEVEL_COLORS, **(level_colors or {})}.items():
        logger.level(level_name, color=color)

    logger.add(log_file, format=FILE_FORMAT, level="DEBUG")
    logger.add(
        console_sink if console_sink is not None else sys.stdout,
        format=CONSOLE_FORMAT,
        level="INFO",
        colorize=True,
    )

    log_provenance(extra_provenance)

    return log_file


def log_provenance(extra_context: Optional[Dict[str, object]] = None) -> None:
    """Log script, command line, working directory and Python version, plus extras."""
    logger.info("=" * 80)
    logger.info(f"Script: {sys.argv[0]}")
    logger.info(f"Command: {' '.join(sys.argv)}")
    logger.info(f"Working directory: {Path.cwd()}")
    logger.info(f"Python: {sys.version.split()[0]}")

    for key, value in (extra_context or {}).items():
        logger.info(f"{key}: {value}")

    logger.info("=" * 80)
