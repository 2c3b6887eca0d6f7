from __future__ import annotations

import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import IO

from .json_formatter import JSONFormatter

LOGGER_NAME = "vaultconnect"
_CONFIGURED_ATTR = "_vaultconnect_json_logging"


def _parse_level(raw: str | int) -> int:
    if isinstance(raw, int):
        return raw
    level = getattr(logging, raw.strip().upper(), logging.INFO)
    return level if isinstance(level, int) else logging.INFO


def install_null_handler() -> logging.Logger:
    """Keep the library silent until the application opts in to output."""
    logger = logging.getLogger(LOGGER_NAME)
    if not any(isinstance(handler, logging.NullHandler) for handler in logger.handlers):
        logger.addHandler(logging.NullHandler())
    return logger


def configure_logging(
    level: str | int | None = None,
    *,
    stream: IO[str] | None = None,
    log_file: str | Path | None = None,
    max_bytes: int = 5_000_000,
    backup_count: int = 5,
) -> logging.Logger:
    """Attach JSON handlers to the ``vaultconnect`` logger. Safe to call repeatedly.

    ``level`` falls back to ``VAULTCONNECT_LOG_LEVEL`` and then INFO. Records go to
    ``stream`` (stderr by default) and, when ``log_file`` is given, to a rotating file.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(_parse_level(level if level is not None else os.getenv("VAULTCONNECT_LOG_LEVEL", "INFO")))
    logger.propagate = False

    formatter = JSONFormatter()

    if not any(
        getattr(handler, _CONFIGURED_ATTR, False) and not isinstance(handler, RotatingFileHandler)
        for handler in logger.handlers
    ):
        stream_handler = logging.StreamHandler(stream=stream or sys.stderr)
        stream_handler.setFormatter(formatter)
        setattr(stream_handler, _CONFIGURED_ATTR, True)
        logger.addHandler(stream_handler)

    if log_file is not None:
        log_path = Path(log_file).resolve()
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_exists = any(
            isinstance(handler, RotatingFileHandler)
            and getattr(handler, _CONFIGURED_ATTR, False)
            and Path(handler.baseFilename) == log_path
            for handler in logger.handlers
        )
        if not file_exists:
            file_handler = RotatingFileHandler(
                filename=log_path,
                maxBytes=max_bytes,
                backupCount=backup_count,
                encoding="utf-8",
            )
            file_handler.setFormatter(formatter)
            setattr(file_handler, _CONFIGURED_ATTR, True)
            logger.addHandler(file_handler)

    return logger
