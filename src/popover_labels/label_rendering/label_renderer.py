"""HTML label element rendering."""

from __future__ import annotations

import re
from collections.abc import Mapping

from popover_labels.attribute_resolution import FieldMetadata

_INVALID_ID_CHARACTER = re.compile(r"[^A-Za-z0-9_:\-]")


def render_label(
    field_path: str,
    *,
    metadata: FieldMetadata | None = None,
    label_text: str | None = None,
    html_attributes: Mapping[str, object] | None = None,
    html_field_prefix: str = "",
) -> str:
    """Render a ``<label>`` element for a field, or an empty string when it has no text.

    Caller attributes are merged last, with their names written as given, and replace the
    generated ``for`` attribute.
    """
    text = select_label_text(field_path, metadata=metadata, label_text=label_text)
    if not text:
        return ""

    attributes: dict[str, object] = {}
    element_id = sanitize_id(full_html_field_name(html_field_prefix, field_path))
    if element_id:
        attributes["for"] = element_id
    attributes.update(html_attributes or {})

    rendered_attributes = "".join(
        f' {name}="{_escape_attribute(value)}"'
        for name, value in attributes.items()
        if value is not None
    )
    return f"<label{rendered_attributes}>{_escape_text(text)}</label>"


def select_label_text(
    field_path: str, *, metadata: FieldMetadata | None = None, label_text: str | None = None
) -> str:
    """Pick explicit text, then display name, then property name, then the last path segment."""
    details = metadata or FieldMetadata()
    candidates = (
        label_text,
        details.display_name,
        details.property_name,
        field_path.split(".")[-1],
    )
    for candidate in candidates:
        if candidate:
            return candidate
    return ""


def full_html_field_name(prefix: str, field_path: str) -> str:
    if not prefix:
        return field_path
    if not field_path:
        return prefix
    return f"{prefix}.{field_path}"


def sanitize_id(original: str) -> str:
    """Turn a field name into a valid element id; empty when it cannot start with a letter."""
    if not original:
        return ""
    first = original[0]
    if not (first.isascii() and first.isalpha()):
        return ""
    return first + _INVALID_ID_CHARACTER.sub("_", original[1:])


def normalize_html_attributes(attributes: Mapping[str, object] | None) -> dict[str, object]:
    """Convert keyword-style attribute names (``data_toggle``) into markup names."""
    if not attributes:
        return {}
    return {name.replace("_", "-"): value for name, value in attributes.items()}


def _escape_text(text: str) -> str:
    return text.replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;")


def _escape_attribute(value: object) -> str:
    return _escape_text(str(value)).replace('"', "&quot;")
