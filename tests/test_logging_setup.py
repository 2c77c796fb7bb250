# tests/test_logging_setup.py

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from tuido.logging_setup import setup_logging


@pytest.fixture()
def target_logger():
    """Isolated logger so the real root logger (and pytest's capture) stay untouched."""
    log = logging.getLogger("tuido.tests.setup")
    log.propagate = False
    yield log
    for h in list(log.handlers):
        log.removeHandler(h)
        h.close()
    logging.captureWarnings(False)


def _flush(log: logging.Logger) -> None:
    for h in log.handlers:
        h.flush()


def test_setup_logging_writes_to_file(tmp_path: Path, target_logger: logging.Logger) -> None:
    log_file = tmp_path / "logs" / "tuido.log"
    target_logger.addHandler(logging.NullHandler())

    setup_logging(log_file, logging.DEBUG, logger=target_logger)
    target_logger.info("hello %s", "file")
    _flush(target_logger)

    text = log_file.read_text(encoding="utf-8")
    assert "INFO tuido.tests.setup: hello file" in text
    assert len(target_logger.handlers) == 1


def test_setup_logging_respects_level(tmp_path: Path, target_logger: logging.Logger) -> None:
    log_file = tmp_path / "tuido.log"

    setup_logging(log_file, logging.WARNING, logger=target_logger)
    target_logger.info("quiet")
    target_logger.warning("loud")
    _flush(target_logger)

    text = log_file.read_text(encoding="utf-8")
    assert "quiet" not in text
    assert "loud" in text
