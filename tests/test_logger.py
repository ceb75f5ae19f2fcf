from __future__ import annotations

import logging

import pytest

from typoradify.utils.logger import configure_logging


@pytest.fixture()
def clean_logger():
    logger = logging.getLogger("typoradify")
    saved = (logger.level, list(logger.handlers))
    logger.handlers.clear()
    yield logger
    for h in logger.handlers:
        h.close()
    logger.handlers[:] = saved[1]
    logger.setLevel(saved[0])


def test_configure_logging_writes_rotating_file(clean_logger, tmp_path):
    logger = configure_logging(logging.DEBUG, log_dir=tmp_path / "logs")

    assert logger is clean_logger
    assert logger.level == logging.DEBUG
    kinds = {type(h).__name__ for h in logger.handlers}
    assert kinds == {"RotatingFileHandler", "StreamHandler"}

    logging.getLogger("typoradify.core").info("hello from core")
    for h in logger.handlers:
        h.flush()
    assert "hello from core" in (tmp_path / "logs" / "typoradify.log").read_text(encoding="utf-8")


def test_configure_logging_is_idempotent(clean_logger, tmp_path):
    configure_logging(log_dir=tmp_path)
    configure_logging(logging.WARNING, log_dir=tmp_path)

    assert len(clean_logger.handlers) == 2
    assert clean_logger.level == logging.WARNING
