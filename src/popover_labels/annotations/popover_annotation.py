"""Declarative popover annotation attached to model fields."""

from __future__ import annotations

from .resolvable_string import ResolvableString


class PopoverAnnotation:
    """Popover title and content for one model field.

    Attach it through ``Annotated[str, PopoverAnnotation(title=..., content=...)]``
    or through dataclass field metadata. When ``catalog_type`` is set, title
    and content name entries on that resource catalog instead of being literal
    text. Declared annotations should be treated as immutable once built.
    """

    def __init__(
        self,
        title: str | None = None,
        content: str | None = None,
        catalog_type: type | None = None,
    ) -> None:
        self._title = ResolvableString("title")
        self._content = ResolvableString("content")
        self._catalog_type: type | None = None
        self.title = title
        self.content = content
        self.catalog_type = catalog_type

    @property
    def catalog_type(self) -> type | None:
        return self._catalog_type

    @catalog_type.setter
    def catalog_type(self, value: type | None) -> None:
        if self._catalog_type is value:
            return
        self._catalog_type = value
        self._title.set_catalog(value)
        self._content.set_catalog(value)

    @property
    def title(self) -> str | None:
        return self._title.resolve()

    @title.setter
    def title(self, value: str | None) -> None:
        if self._title.literal_value == value:
            return
        self._title.set_literal(value)

    @property
    def content(self) -> str | None:
        return self._content.resolve()

    @content.setter
    def content(self, value: str | None) -> None:
        if self._content.literal_value == value:
            return
        self._content.set_literal(value)

    @property
    def declared_title(self) -> str | None:
        """Title exactly as declared, before any catalog resolution."""
        return self._title.literal_value

    @property
    def declared_content(self) -> str | None:
        """Content exactly as declared, before any catalog resolution."""
        return self._content.literal_value

    def __repr__(self) -> str:
        return (
            f"PopoverAnnotation(title={self.declared_title!r}, "
            f"content={self.declared_content!r}, catalog_type={self._catalog_type!r})"
        )
