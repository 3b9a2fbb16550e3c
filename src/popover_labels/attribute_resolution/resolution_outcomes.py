"""Attribute resolution entities."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ResolvedAnnotation:
    """Final popover text for one field render."""

    title: str = ""
    content: str = ""

    @property
    def is_empty(self) -> bool:
        return not self.title and not self.content


@dataclass(frozen=True)
class FieldMetadata:
    """Model metadata used to pick the label text of a field."""

    property_name: str | None = None
    display_name: str | None = None
