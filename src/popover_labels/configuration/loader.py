"""Configuration loader service."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from popover_labels.resource_catalog import CatalogError, DefaultLabels, load_resource_catalog

from .runtime_settings import Configuration, PopoverSettings


class SettingsError(Exception):
    """Raised when the settings file is invalid."""


def load_configuration(config_path: Path | str) -> Configuration:
    """Load and validate the settings file."""
    path = Path(config_path)
    if not path.exists():
        raise SettingsError(f"Settings file not found: {path}")

    text = path.read_text(encoding="utf-8")
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:  # pragma: no cover - exercised indirectly
        raise SettingsError(f"Failed to parse settings file: {exc}") from exc

    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise SettingsError("Settings root must be a mapping.")

    popover = _parse_popover_section(parsed.get("popover"))
    catalog_path, default_catalog = _parse_catalog_section(parsed.get("catalog"), path.parent)
    html_field_prefix = _parse_rendering_section(parsed.get("rendering"))

    return Configuration(
        path=path,
        popover=popover,
        default_catalog=default_catalog,
        catalog_path=catalog_path,
        html_field_prefix=html_field_prefix,
    )


def _parse_popover_section(value: Any) -> PopoverSettings:
    section = _optional_mapping(value, "popover")
    defaults = PopoverSettings()
    return PopoverSettings(
        toggle_attribute=_string_or_default(
            section.get("toggle_attribute"), defaults.toggle_attribute, "popover.toggle_attribute"
        ),
        toggle_value=_string_or_default(
            section.get("toggle_value"), defaults.toggle_value, "popover.toggle_value"
        ),
        title_attribute=_string_or_default(
            section.get("title_attribute"), defaults.title_attribute, "popover.title_attribute"
        ),
        content_attribute=_string_or_default(
            section.get("content_attribute"),
            defaults.content_attribute,
            "popover.content_attribute",
        ),
    )


def _parse_catalog_section(value: Any, base_path: Path) -> tuple[Path | None, type]:
    section = _optional_mapping(value, "catalog")
    path_value = section.get("path")
    if path_value is None:
        return None, DefaultLabels
    raw_path = _require_non_empty_string(path_value, "catalog.path")
    name = _optional_string(section.get("name"), "catalog.name")
    catalog_path = _resolve_path(base_path, raw_path)
    try:
        catalog = load_resource_catalog(catalog_path, name=name)
    except CatalogError as exc:
        raise SettingsError(str(exc)) from exc
    return catalog_path, catalog


def _parse_rendering_section(value: Any) -> str:
    section = _optional_mapping(value, "rendering")
    prefix = _optional_string(section.get("html_field_prefix"), "rendering.html_field_prefix")
    return prefix or ""


def _resolve_path(base_path: Path, raw_path: str) -> Path:
    candidate = Path(raw_path)
    if not candidate.is_absolute():
        return (base_path / candidate).resolve()
    return candidate


def _optional_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise SettingsError(f"Settings section '{section_name}' must be a mapping.")
    return value


def _string_or_default(value: Any, default: str, field_name: str) -> str:
    if value is None:
        return default
    return _require_non_empty_string(value, field_name)


def _require_non_empty_string(value: Any, field_name: str) -> str:
    if not isinstance(value, str):
        raise SettingsError(f"{field_name} must be a string.")
    stripped = value.strip()
    if not stripped:
        raise SettingsError(f"{field_name} must not be empty.")
    return stripped


def _optional_string(value: Any, field_name: str) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise SettingsError(f"{field_name} must be a string.")
    stripped = value.strip()
    return stripped or None
