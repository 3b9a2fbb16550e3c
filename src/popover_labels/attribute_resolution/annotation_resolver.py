"""Two-tier popover annotation lookup for model fields."""

from __future__ import annotations

import logging
from collections.abc import Callable

from popover_labels.annotations import PopoverAnnotation, get_metadata_type
from popover_labels.resource_catalog import DefaultLabels

from .field_discovery import declaring_class, find_popover_annotation, has_field
from .resolution_outcomes import ResolvedAnnotation

_LOGGER = logging.getLogger(__name__)
_LOGGER.addHandler(logging.NullHandler())

AnnotationStrategy = Callable[[type, str], "PopoverAnnotation | None"]


def direct_annotation_strategy(default_catalog: type) -> AnnotationStrategy:
    """Look up an annotation declared on the field itself.

    The declared title and content literals are copied onto a fresh annotation
    bound to ``default_catalog``. Any catalog declared on the source annotation
    is ignored.
    """

    def strategy(model_type: type, field_name: str) -> PopoverAnnotation | None:
        declared = find_popover_annotation(model_type, field_name)
        if declared is None:
            return None
        _LOGGER.debug("Direct popover annotation found for %s.%s", model_type.__name__, field_name)
        return PopoverAnnotation(
            title=declared.declared_title,
            content=declared.declared_content,
            catalog_type=default_catalog,
        )

    return strategy


def shadow_metadata_strategy(model_type: type, field_name: str) -> PopoverAnnotation | None:
    """Look up the annotation on the same-named field of the model's shadow metadata class.

    The shadow annotation is used as declared, including its own catalog binding.
    """
    owner = declaring_class(model_type, field_name) or model_type
    shadow_class = get_metadata_type(owner)
    if shadow_class is None or not has_field(shadow_class, field_name):
        return None
    annotation = find_popover_annotation(shadow_class, field_name)
    if annotation is not None:
        _LOGGER.debug(
            "Shadow popover annotation found for %s.%s on %s",
            model_type.__name__,
            field_name,
            shadow_class.__name__,
        )
    return annotation


def resolution_strategies(default_catalog: type) -> tuple[AnnotationStrategy, ...]:
    """Return the lookup strategies in precedence order."""
    return (direct_annotation_strategy(default_catalog), shadow_metadata_strategy)


def resolve_annotation(
    model_type: type, field_name: str, *, default_catalog: type | None = None
) -> ResolvedAnnotation:
    """Resolve the popover title and content for ``field_name`` on ``model_type``.

    Args:
      model_type: Model class declaring the field.
      field_name: Name of the field to render.
      default_catalog: Catalog bound to direct field annotations; the built-in
        ``DefaultLabels`` catalog when omitted.

    Returns:
      The resolved text; both parts are empty when no annotation applies.

    Raises:
      ConfigurationError: If an annotation names a catalog entry that does not exist.
    """
    if not has_field(model_type, field_name):
        return ResolvedAnnotation()

    catalog = default_catalog or DefaultLabels
    for strategy in resolution_strategies(catalog):
        annotation = strategy(model_type, field_name)
        if annotation is not None:
            return ResolvedAnnotation(
                title=annotation.title or "",
                content=annotation.content or "",
            )
    return ResolvedAnnotation()
