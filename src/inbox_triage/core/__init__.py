"""Core utilities for configuration, logging, and shared models."""

from .config import AppSettings, LlmSettings, LoggingSettings, load_app_settings
from .logging import configure_logging

__all__ = [
    "AppSettings",
    "LlmSettings",
    "LoggingSettings",
    "configure_logging",
    "load_app_settings",
]
