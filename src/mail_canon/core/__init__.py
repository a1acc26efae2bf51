"""Core utilities for configuration, logging, and the canonical model."""

from .config import AppSettings, LoggingSettings, OutputSettings, load_app_settings
from .logging import configure_logging

__all__ = [
    "AppSettings",
    "LoggingSettings",
    "OutputSettings",
    "configure_logging",
    "load_app_settings",
]
