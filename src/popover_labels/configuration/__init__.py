"""Configuration domain exports."""

from .config_scaffold_builder import (
    DEFAULT_CONFIG_FILENAME,
    build_placeholder_configuration,
    write_placeholder_configuration,
)
from .loader import SettingsError, load_configuration
from .runtime_settings import Configuration, PopoverSettings, default_configuration

__all__ = [
    "Configuration",
    "PopoverSettings",
    "SettingsError",
    "default_configuration",
    "load_configuration",
    "DEFAULT_CONFIG_FILENAME",
    "build_placeholder_configuration",
    "write_placeholder_configuration",
]
