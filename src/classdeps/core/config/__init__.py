"""Configuration management for classdeps."""

from classdeps.core.config.loader import ConfigLoader
from classdeps.core.config.settings import (
    AnalysisSettings,
    LoggingSettings,
    Settings,
    get_settings,
)

__all__ = [
    "AnalysisSettings",
    "ConfigLoader",
    "LoggingSettings",
    "Settings",
    "get_settings",
]
