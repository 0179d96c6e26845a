"""Logging configuration for the fact fetcher."""

from __future__ import annotations

import copy
import logging.config
from typing import Any

LOGGING: dict[str, Any] = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "verbose": {
            "format": "[{levelname}] {asctime} {name} {funcName}:{lineno} - {message}",
            "style": "{",
        },
        "simple": {
            "format": "[{levelname}] {name} - {message}",
            "style": "{",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "simple",
        },
    },
    "loggers": {
        "apps.core": {
            "handlers": ["console"],
            "level": "INFO",
            "propagate": False,
        },
        "apps.factfetch": {
            "handlers": ["console"],
            "level": "INFO",
            "propagate": False,
        },
        "apps.analytics": {
            "handlers": ["console"],
            "level": "INFO",
            "propagate": False,
        },
        "httpx": {
            "handlers": ["console"],
            "level": "WARNING",
            "propagate": False,
        },
    },
    "root": {
        "handlers": ["console"],
        "level": "WARNING",
    },
}


def build_logging_config(*, debug: bool = False) -> dict[str, Any]:
    """Return a copy of ``LOGGING`` adjusted for the requested verbosity."""

    config = copy.deepcopy(LOGGING)
    if debug:
        config["handlers"]["console"]["formatter"] = "verbose"
        for name in ("apps.core", "apps.factfetch", "apps.analytics", "httpx"):
            config["loggers"][name]["level"] = "DEBUG"
        config["root"]["level"] = "DEBUG"
    return config


def configure_logging(*, debug: bool = False) -> None:
    logging.config.dictConfig(build_logging_config(debug=debug))


__all__ = ["LOGGING", "build_logging_config", "configure_logging"]
