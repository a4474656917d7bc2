"""Configuration domain exports."""

from .config_scaffold_builder import (
    DEFAULT_CONFIG_FILENAME,
    build_placeholder_settings,
    write_placeholder_settings,
)
from .launcher_settings import FeatureSettings, LauncherSettings, RuntimeOverrides
from .loader import ConfigurationError, load_launcher_settings

__all__ = [
    "FeatureSettings",
    "LauncherSettings",
    "RuntimeOverrides",
    "ConfigurationError",
    "load_launcher_settings",
    "DEFAULT_CONFIG_FILENAME",
    "build_placeholder_settings",
    "write_placeholder_settings",
]
