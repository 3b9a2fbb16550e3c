"""Popover annotation domain exports."""

from .field_markers import (
    DISPLAY_NAME_METADATA_KEY,
    POPOVER_METADATA_KEY,
    DisplayName,
    get_metadata_type,
    metadata_type,
)
from .popover_annotation import PopoverAnnotation
from .resolvable_string import ConfigurationError, ResolvableString

__all__ = [
    "ConfigurationError",
    "ResolvableString",
    "PopoverAnnotation",
    "DisplayName",
    "metadata_type",
    "get_metadata_type",
    "POPOVER_METADATA_KEY",
    "DISPLAY_NAME_METADATA_KEY",
]
