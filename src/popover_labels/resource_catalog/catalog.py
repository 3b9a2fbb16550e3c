"""Resource catalog base class and the built-in default catalog."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any


class CatalogError(Exception):
    """Raised when a resource catalog definition is invalid."""


class ResourceCatalog:
    """Base class for catalogs of named string resources.

    Subclasses declare their entries as public string class attributes::

        class Labels(ResourceCatalog):
            AuthorTitle = "Author"
            AuthorHelp = "Who wrote the record."

    Non-string public attributes are rejected when the subclass is defined.
    """

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        for name, value in vars(cls).items():
            if name.startswith("_"):
                continue
            if not isinstance(value, str):
                raise CatalogError(
                    f"Resource catalog {cls.__qualname__} entry '{name}' must be a string, "
                    f"got {type(value).__name__}."
                )

    @classmethod
    def entries(cls) -> Mapping[str, str]:
        """Return the current value of every entry, including inherited ones."""
        collected: dict[str, str] = {}
        for klass in reversed(cls.__mro__):
            if not issubclass(klass, ResourceCatalog) or klass is ResourceCatalog:
                continue
            for name, value in vars(klass).items():
                if not name.startswith("_") and isinstance(value, str):
                    collected[name] = value
        return collected


class DefaultLabels(ResourceCatalog):
    """Catalog used for direct field annotations when no catalog file is configured."""
