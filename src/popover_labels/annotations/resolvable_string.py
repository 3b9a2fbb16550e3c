"""Lazily resolved annotation text backed by a literal or a resource catalog entry."""

from __future__ import annotations

import inspect
from collections.abc import Callable

Resolver = Callable[[], "str | None"]


class ConfigurationError(Exception):
    """Raised when annotation text names a catalog entry that cannot be resolved."""

    def __init__(self, field_name: str, catalog_name: str, key: str) -> None:
        super().__init__(
            f"Cannot resolve {field_name}: resource catalog '{catalog_name}' "
            f"has no public string entry named '{key}'."
        )
        self.field_name = field_name
        self.catalog_name = catalog_name
        self.key = key


class ResolvableString:
    """A literal string, or the name of a string entry on a resource catalog class.

    The resolution strategy (literal, catalog lookup, or failure) is memoized
    after the first ``resolve()`` following a change. A catalog entry is
    re-read on every call, so a catalog value that changes between calls is
    observed. Instances are not safe to mutate from several threads.
    """

    def __init__(self, field_name: str) -> None:
        self._field_name = field_name
        self._literal_value: str | None = None
        self._catalog_type: type | None = None
        self._cached_resolver: Resolver | None = None

    @property
    def field_name(self) -> str:
        return self._field_name

    @property
    def literal_value(self) -> str | None:
        return self._literal_value

    @literal_value.setter
    def literal_value(self, value: str | None) -> None:
        self.set_literal(value)

    @property
    def catalog_type(self) -> type | None:
        return self._catalog_type

    @catalog_type.setter
    def catalog_type(self, value: type | None) -> None:
        self.set_catalog(value)

    def set_literal(self, value: str | None) -> None:
        """Store the literal value, invalidating the cached strategy on change."""
        if self._literal_value == value:
            return
        self._cached_resolver = None
        self._literal_value = value

    def set_catalog(self, catalog_type: type | None) -> None:
        """Bind the resource catalog, invalidating the cached strategy on change."""
        if self._catalog_type is catalog_type:
            return
        self._cached_resolver = None
        self._catalog_type = catalog_type

    def resolve(self) -> str | None:
        """Return the literal, or the current value of the named catalog entry.

        Raises:
          ConfigurationError: If a catalog is bound and it has no public string
            class attribute named after the literal value.
        """
        if self._cached_resolver is None:
            self._cached_resolver = self._build_resolver()
        return self._cached_resolver()

    def _build_resolver(self) -> Resolver:
        literal = self._literal_value
        catalog = self._catalog_type
        if literal is None or catalog is None:
            return lambda: literal

        if not _is_catalog_entry(catalog, literal):
            error = ConfigurationError(self._field_name, _qualified_name(catalog), literal)

            def _fail() -> str | None:
                raise error

            return _fail

        return lambda: getattr(catalog, literal)

    def __repr__(self) -> str:
        catalog = _qualified_name(self._catalog_type) if self._catalog_type else None
        return (
            f"ResolvableString(field_name={self._field_name!r}, "
            f"literal_value={self._literal_value!r}, catalog_type={catalog!r})"
        )


def _is_catalog_entry(catalog: object, key: str) -> bool:
    if not isinstance(catalog, type) or not _is_public_type(catalog):
        return False
    if not key.isidentifier() or key.startswith("_"):
        return False
    try:
        raw = inspect.getattr_static(catalog, key)
    except AttributeError:
        return False
    return isinstance(raw, str)


def _is_public_type(catalog: type) -> bool:
    return not any(part.startswith("_") for part in catalog.__qualname__.split("."))


def _qualified_name(catalog: object) -> str:
    module = getattr(catalog, "__module__", None)
    qualname = getattr(catalog, "__qualname__", None) or repr(catalog)
    if module and module != "builtins":
        return f"{module}.{qualname}"
    return qualname
