"""Configuration module for linktags."""

from linktags.config.logging import configure_logging, get_logger
from linktags.config.settings import Settings, get_settings

__all__ = ["Settings", "get_settings", "configure_logging", "get_logger"]
