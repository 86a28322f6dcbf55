"""Observability: package logger with structured ``extra`` payloads."""

from __future__ import annotations

import logging

_LOGGER = logging.getLogger("osmfeatures")


def get_logger() -> logging.Logger:
    return _LOGGER


def configure_logging(level: str = "INFO") -> logging.Logger:
    """Set the package logger level; handlers are left to the host application."""
    _LOGGER.setLevel(level.upper())
    return _LOGGER
