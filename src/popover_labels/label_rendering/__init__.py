"""Label rendering domain exports."""

from .label_augmenter import augment_label_attributes
from .label_for import label_for
from .label_renderer import (
    full_html_field_name,
    normalize_html_attributes,
    render_label,
    sanitize_id,
    select_label_text,
)

__all__ = [
    "augment_label_attributes",
    "label_for",
    "render_label",
    "select_label_text",
    "full_html_field_name",
    "normalize_html_attributes",
    "sanitize_id",
]
