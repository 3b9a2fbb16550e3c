"""Attribute resolution domain exports."""

from .annotation_resolver import (
    AnnotationStrategy,
    direct_annotation_strategy,
    resolution_strategies,
    resolve_annotation,
    shadow_metadata_strategy,
)
from .field_discovery import (
    declaring_class,
    describe_field,
    field_hint,
    field_hints,
    find_popover_annotation,
    has_field,
    model_field_names,
    resolve_field_owner,
)
from .resolution_outcomes import FieldMetadata, ResolvedAnnotation

__all__ = [
    "ResolvedAnnotation",
    "FieldMetadata",
    "AnnotationStrategy",
    "direct_annotation_strategy",
    "shadow_metadata_strategy",
    "resolution_strategies",
    "resolve_annotation",
    "declaring_class",
    "describe_field",
    "field_hint",
    "field_hints",
    "find_popover_annotation",
    "has_field",
    "model_field_names",
    "resolve_field_owner",
]
