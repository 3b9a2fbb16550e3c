"""Build resource catalog classes from YAML resource files."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path

import yaml

from .catalog import CatalogError, ResourceCatalog

_LOGGER = logging.getLogger(__name__)
_LOGGER.addHandler(logging.NullHandler())


def load_resource_catalog(
    catalog_path: Path | str, *, name: str | None = None
) -> type[ResourceCatalog]:
    """Load a flat ``key: text`` YAML mapping into a new catalog class.

    Args:
      catalog_path: Path of the YAML resource file.
      name: Class name of the catalog; derived from the file name when omitted.

    Raises:
      CatalogError: If the file is missing, malformed, or holds invalid entries.
    """
    path = Path(catalog_path)
    if not path.exists():
        raise CatalogError(f"Resource catalog file not found: {path}")

    try:
        parsed = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise CatalogError(f"Failed to parse resource catalog {path}: {exc}") from exc

    if parsed is None:
        parsed = {}
    if not isinstance(parsed, Mapping):
        raise CatalogError(f"Resource catalog {path} must be a mapping of keys to text.")

    class_name = name or _class_name_from_path(path)
    if not class_name.isidentifier() or class_name.startswith("_"):
        raise CatalogError(f"Invalid resource catalog name: {class_name!r}")

    entries: dict[str, str] = {}
    for key, value in parsed.items():
        entries[_validate_key(key, path)] = _validate_text(key, value, path)
    catalog = build_resource_catalog(class_name, entries)
    _LOGGER.debug("Loaded %d resource entries from %s as %s", len(entries), path, class_name)
    return catalog


def build_resource_catalog(name: str, entries: Mapping[str, str]) -> type[ResourceCatalog]:
    """Create a catalog class named ``name`` exposing ``entries`` as class attributes."""
    namespace: dict[str, object] = {"__module__": __name__, "__qualname__": name}
    namespace.update(entries)
    return type(name, (ResourceCatalog,), namespace)


def _class_name_from_path(path: Path) -> str:
    parts = [part for part in path.stem.replace("-", "_").split("_") if part]
    return "".join(part[:1].upper() + part[1:] for part in parts) or "Resources"


def _validate_key(key: object, path: Path) -> str:
    if not isinstance(key, str) or not key.isidentifier() or key.startswith("_"):
        raise CatalogError(f"Resource catalog {path} key {key!r} must be a public identifier.")
    return key


def _validate_text(key: object, value: object, path: Path) -> str:
    if not isinstance(value, str):
        raise CatalogError(f"Resource catalog {path} entry '{key}' must be a string.")
    return value
