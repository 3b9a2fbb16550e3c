"""Model field introspection for annotated classes and dataclasses."""

from __future__ import annotations

import dataclasses
import inspect
import re
import sys
import types
from collections.abc import Mapping
from typing import Annotated, Any, ClassVar, ForwardRef, Union, get_args, get_origin

from popover_labels.annotations import (
    DISPLAY_NAME_METADATA_KEY,
    POPOVER_METADATA_KEY,
    DisplayName,
    PopoverAnnotation,
)

from .resolution_outcomes import FieldMetadata

_CLASS_VAR_STRING = re.compile(r"^(?:typing\.)?ClassVar\b")


def field_hints(model_type: type) -> dict[str, Any]:
    """Return field type hints, keeping ``Annotated`` metadata.

    Each hint is evaluated on its own; a hint that cannot be evaluated at
    runtime (for instance a name imported only for type checking) is kept as
    its source string and carries no annotation.
    """
    hints: dict[str, Any] = {}
    for name in _declared_names(model_type):
        hint = field_hint(model_type, name)
        if hint is not None:
            hints[name] = hint
    return hints


def field_hint(model_type: type, field_name: str) -> Any:
    """Return the evaluated hint of one field, its source string, or None if undeclared."""
    owner = declaring_class(model_type, field_name)
    if owner is None:
        return None
    hint = _own_annotations(owner)[field_name]
    if isinstance(hint, ForwardRef):
        hint = hint.__forward_arg__
    if isinstance(hint, str):
        hint = _evaluate_hint(owner, hint)
    if hint is None:
        hint = type(None)
    return None if _is_class_var(hint) else hint


def model_field_names(model_type: type) -> tuple[str, ...]:
    return tuple(field_hints(model_type))


def has_field(model_type: type, field_name: str) -> bool:
    return field_hint(model_type, field_name) is not None


def declaring_class(model_type: type, field_name: str) -> type | None:
    """Return the class in the MRO of ``model_type`` that declares ``field_name``."""
    for klass in model_type.__mro__:
        if field_name in _own_annotations(klass):
            return klass
    return None


def find_popover_annotation(owner: type, field_name: str) -> PopoverAnnotation | None:
    """Return the popover annotation declared on a field, checking type hints first."""
    for item in _annotated_metadata(field_hint(owner, field_name)):
        if isinstance(item, PopoverAnnotation):
            return item
    declared = _dataclass_field_metadata(owner, field_name).get(POPOVER_METADATA_KEY)
    return declared if isinstance(declared, PopoverAnnotation) else None


def describe_field(owner: type | None, field_name: str) -> FieldMetadata:
    """Collect the property and display names of a field for label text selection."""
    if owner is None or not has_field(owner, field_name):
        return FieldMetadata()
    display_name: str | None = None
    for item in _annotated_metadata(field_hint(owner, field_name)):
        if isinstance(item, DisplayName):
            display_name = item.name
            break
    if display_name is None:
        declared = _dataclass_field_metadata(owner, field_name).get(DISPLAY_NAME_METADATA_KEY)
        display_name = declared if isinstance(declared, str) else None
    return FieldMetadata(property_name=field_name, display_name=display_name)


def resolve_field_owner(model_type: type, field_path: str) -> type | None:
    """Walk a dotted field path and return the class declaring its last segment.

    Returns None when an intermediate segment is unknown or is not a class.
    """
    owner: Any = model_type
    for segment in field_path.split(".")[:-1]:
        if not isinstance(owner, type):
            return None
        hint = field_hint(owner, segment)
        if hint is None:
            return None
        owner = _unwrap(hint)
    return owner if isinstance(owner, type) else None


def _annotated_metadata(hint: Any) -> tuple[Any, ...]:
    if hint is None:
        return ()
    if get_origin(hint) is Annotated:
        return tuple(hint.__metadata__)
    optional_inner = _optional_inner(hint)
    if optional_inner is not None:
        return _annotated_metadata(optional_inner)
    return ()


def _unwrap(hint: Any) -> Any:
    if get_origin(hint) is Annotated:
        return _unwrap(get_args(hint)[0])
    optional_inner = _optional_inner(hint)
    if optional_inner is not None:
        return _unwrap(optional_inner)
    origin = get_origin(hint)
    return origin if origin is not None else hint


def _optional_inner(hint: Any) -> Any:
    if get_origin(hint) not in (Union, types.UnionType):
        return None
    candidates = [arg for arg in get_args(hint) if arg is not type(None)]
    return candidates[0] if len(candidates) == 1 else None


def _dataclass_field_metadata(owner: type, field_name: str) -> Mapping[str, Any]:
    if not dataclasses.is_dataclass(owner):
        return {}
    for field in dataclasses.fields(owner):
        if field.name == field_name:
            return field.metadata
    return {}


def _declared_names(model_type: type) -> list[str]:
    names: list[str] = []
    for klass in reversed(model_type.__mro__):
        for name in _own_annotations(klass):
            if name not in names:
                names.append(name)
    return names


def _own_annotations(klass: type) -> Mapping[str, Any]:
    try:
        return inspect.get_annotations(klass)
    except NameError:
        # Deferred annotations (3.14+) naming a type-checking-only import.
        if sys.version_info < (3, 14):
            raise
        import annotationlib

        return annotationlib.get_annotations(klass, format=annotationlib.Format.FORWARDREF)


def _evaluate_hint(owner: type, source: str) -> Any:
    module = sys.modules.get(owner.__module__)
    global_namespace = dict(vars(module)) if module is not None else {}
    try:
        return eval(source, global_namespace, dict(vars(owner)))
    except (NameError, AttributeError, SyntaxError, TypeError):
        return source


def _is_class_var(hint: Any) -> bool:
    if isinstance(hint, str):
        return _CLASS_VAR_STRING.match(hint) is not None
    return _unwrap(hint) is ClassVar
