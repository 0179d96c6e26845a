"""Settings package: environment configuration and logging setup."""

from .config import AppSettings, get_settings
from .logging import configure_logging

__all__ = ["AppSettings", "configure_logging", "get_settings"]
