"""Logging configuration helpers."""

from __future__ import annotations

import logging
import logging.config
from typing import Any

from .config import LoggingSettings

PACKAGE_LOGGER = "service_registry"


def _formatter(structured: bool) -> dict[str, Any]:
    """Return a dictConfig formatter fragment."""
    if structured:
        return {
            "format": '{{"time": "{asctime}", "level": "{levelname}", '
            '"logger": "{name}", "message": "{message}"}}',
            "style": "{",
        }
    return {"format": "%(asctime)s %(levelname)s %(name)s %(message)s"}


def configure_logging(settings: LoggingSettings) -> None:
    """Configure application logging according to provided settings."""
    dict_config = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "default": _formatter(settings.structured),
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "default",
                "level": settings.level,
            },
        },
        "loggers": {
            PACKAGE_LOGGER: {"level": settings.level, "propagate": True},
        },
        "root": {
            "handlers": ["console"],
            "level": settings.level,
        },
    }

    logging.config.dictConfig(dict_config)


__all__ = ["configure_logging"]
