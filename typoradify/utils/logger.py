"""Application logging setup."""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from platformdirs import user_log_dir

from typoradify.utils.constants import APP_NAME

_LOG_FILE_NAME = "typoradify.log"
_ROOT_LOGGER = "typoradify"


def configure_logging(level: str | int = logging.INFO, log_dir: Path | None = None) -> logging.Logger:
    """Rotating file log in the user log dir plus stderr. Safe to call more than once."""
    logger = logging.getLogger(_ROOT_LOGGER)
    logger.setLevel(level)
    if logger.handlers:
        return logger

    directory = log_dir or Path(user_log_dir(APP_NAME, appauthor=False))
    directory.mkdir(parents=True, exist_ok=True)

    formatter = logging.Formatter(
        fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    handler = RotatingFileHandler(
        directory / _LOG_FILE_NAME,
        maxBytes=1_048_576,
        backupCount=3,
        encoding="utf-8",
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)

    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(formatter)
    logger.addHandler(stream_handler)

    logger.debug("Logging initialised; file at %s", handler.baseFilename)
    return logger
