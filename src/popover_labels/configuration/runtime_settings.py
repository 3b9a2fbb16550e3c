"""Configuration domain entities."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from popover_labels.resource_catalog import DefaultLabels


@dataclass(frozen=True)
class PopoverSettings:
    """Markup attribute names written onto labels that carry a popover."""

    toggle_attribute: str = "data-toggle"
    toggle_value: str = "popover"
    title_attribute: str = "data-original-title"
    content_attribute: str = "data-content"


@dataclass(frozen=True)
class Configuration:
    """Top-level configuration aggregate."""

    path: Path | None = None
    popover: PopoverSettings = field(default_factory=PopoverSettings)
    default_catalog: type = DefaultLabels
    catalog_path: Path | None = None
    html_field_prefix: str = ""


def default_configuration() -> Configuration:
    """Configuration used when no settings file is given."""
    return Configuration()
