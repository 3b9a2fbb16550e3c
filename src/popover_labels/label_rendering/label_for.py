"""Label rendering for model fields with popover annotations."""

from __future__ import annotations

from collections.abc import Mapping

from popover_labels.attribute_resolution import (
    describe_field,
    resolve_annotation,
    resolve_field_owner,
)
from popover_labels.configuration import Configuration, default_configuration

from .label_augmenter import augment_label_attributes
from .label_renderer import normalize_html_attributes, render_label


def label_for(
    model_type: type,
    field_path: str,
    *,
    html_attributes: Mapping[str, object] | None = None,
    label_text: str | None = None,
    configuration: Configuration | None = None,
) -> str:
    """Render the label of ``field_path`` on ``model_type``, adding popover markup if declared.

    Raises:
      ConfigurationError: If the field's annotation names a missing catalog entry.
    """
    settings = configuration or default_configuration()
    attributes = normalize_html_attributes(html_attributes)
    field_name = field_path.split(".")[-1]
    owner = resolve_field_owner(model_type, field_path)

    if field_name and owner is not None:
        resolved = resolve_annotation(owner, field_name, default_catalog=settings.default_catalog)
        attributes = augment_label_attributes(resolved, attributes, settings=settings.popover)

    return render_label(
        field_path,
        metadata=describe_field(owner, field_name),
        label_text=label_text,
        html_attributes=attributes,
        html_field_prefix=settings.html_field_prefix,
    )
