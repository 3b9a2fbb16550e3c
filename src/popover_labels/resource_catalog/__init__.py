"""Resource catalog domain exports."""

from .catalog import CatalogError, DefaultLabels, ResourceCatalog
from .catalog_loader import build_resource_catalog, load_resource_catalog

__all__ = [
    "CatalogError",
    "ResourceCatalog",
    "DefaultLabels",
    "build_resource_catalog",
    "load_resource_catalog",
]
