"""Logging setup shared by pagebuilder modules."""

from __future__ import annotations

import logging

from pagebuilder.config import PAGEBUILDER_LOG_LEVEL

_LOGGER_NAME = "pagebuilder"
_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_configured = False


def configure_logging(level: str | int | None = None) -> None:
    """Attach a stream handler to the package logger.

    Args:
        level: Log level name or number. Defaults to ``PAGEBUILDER_LOG_LEVEL``.
    """
    global _configured
    package_logger = logging.getLogger(_LOGGER_NAME)
    package_logger.setLevel(level if level is not None else PAGEBUILDER_LOG_LEVEL)
    if not _configured:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_FORMAT))
        package_logger.addHandler(handler)
        _configured = True


def get_logger(name: str) -> logging.Logger:
    """Return a logger for ``name``, configuring the package logger on first use."""
    if not _configured:
        configure_logging()
    return logging.getLogger(name)
