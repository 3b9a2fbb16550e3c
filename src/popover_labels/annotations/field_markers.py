"""Field and class level markers read by annotation resolution and label rendering."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TypeVar

POPOVER_METADATA_KEY = "popover"
DISPLAY_NAME_METADATA_KEY = "display_name"

_METADATA_TYPE_ATTRIBUTE = "__popover_metadata_type__"

ModelT = TypeVar("ModelT", bound=type)


@dataclass(frozen=True)
class DisplayName:
    """Human readable label text for a model field."""

    name: str


def metadata_type(shadow_class: type) -> Callable[[ModelT], ModelT]:
    """Associate a shadow metadata class carrying per-field annotations with a model.

    The association is inherited by subclasses of the decorated model.
    """

    def decorate(model_type: ModelT) -> ModelT:
        setattr(model_type, _METADATA_TYPE_ATTRIBUTE, shadow_class)
        return model_type

    return decorate


def get_metadata_type(model_type: type) -> type | None:
    """Return the shadow metadata class associated with ``model_type``, if any."""
    shadow_class = getattr(model_type, _METADATA_TYPE_ATTRIBUTE, None)
    return shadow_class if isinstance(shadow_class, type) else None
