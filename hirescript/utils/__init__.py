"""Hirescript utilities."""

from .config import Settings, load_settings, DEFAULT_SETTINGS_PATH

__all__ = ["Settings", "load_settings", "DEFAULT_SETTINGS_PATH"]
