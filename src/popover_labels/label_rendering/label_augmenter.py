"""Popover attribute injection in front of the label renderer."""

from __future__ import annotations

from collections.abc import Mapping

from popover_labels.attribute_resolution import ResolvedAnnotation
from popover_labels.configuration import PopoverSettings


def augment_label_attributes(
    resolved: ResolvedAnnotation,
    base_attributes: Mapping[str, object] | None = None,
    *,
    settings: PopoverSettings | None = None,
) -> dict[str, object]:
    """Return label attributes with popover markup added when there is text to show.

    The base mapping is copied, never modified. When both title and content
    are empty the copy is returned unchanged.
    """
    attributes = dict(base_attributes or {})
    if resolved.is_empty:
        return attributes
    names = settings or PopoverSettings()
    attributes[names.toggle_attribute] = names.toggle_value
    attributes[names.title_attribute] = resolved.title
    attributes[names.content_attribute] = resolved.content
    return attributes
