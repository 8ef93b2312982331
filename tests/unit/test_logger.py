"""Tests for the shared loguru setup."""

import io
import sys

import pytest
from loguru import logger

from vitae.utils.logger import setup_logger


@pytest.fixture(autouse=True)
def reset_logger():
    yield
    logger.remove()
    logger.add(sys.stderr)


@pytest.mark.unit
def test_setup_logger_console_sink(tmp_path):
    console = io.StringIO()

    log_file = setup_logger(
        "render", tmp_path / "logs", extra_provenance={"Template": "plain"}, console_sink=console
    )
    logger.info("[render] hello")
    logger.debug("[render] file only")

    assert log_file == tmp_path / "logs" / "render.log"
    assert "Template: plain" in console.getvalue()
    assert "[render] hello" in console.getvalue()
    assert "file only" not in console.getvalue()

    logger.remove()
    log_text = log_file.read_text(encoding="utf-8")
    assert "[render] hello" in log_text
    assert "[render] file only" in log_text
