"""Classification of Python values into the kinds the traversal understands."""

from __future__ import annotations

import enum
import types
from collections.abc import Iterator
from typing import Any

_PLAIN_TYPES = (list, tuple, dict)

# Objects with an instance __dict__ that are not data containers.
_OPAQUE_OBJECT_TYPES = (
    type,
    types.ModuleType,
    types.FunctionType,
    types.BuiltinFunctionType,
    types.MethodType,
)


class Kind(enum.Enum):
    SCALAR = "scalar"
    SEQUENCE = "sequence"
    MAPPING = "mapping"


def _has_instance_dict(value: Any) -> bool:
    if isinstance(value, _OPAQUE_OBJECT_TYPES):
        return False
    try:
        attrs = vars(value)
    except TypeError:
        return False
    return type(attrs) is dict


def classify(value: Any) -> Kind:
    """Return the structural kind of ``value``.

    ``list``/``tuple`` (and subclasses) are sequences, ``dict`` (and
    subclasses) are mappings, and other objects carrying an instance
    ``__dict__`` are mappings of their attributes. Everything else,
    including ``str``, ``bytes``, ``set`` and ``None``, is a scalar.
    """
    if isinstance(value, (list, tuple)):
        return Kind.SEQUENCE
    if isinstance(value, dict):
        return Kind.MAPPING
    if _has_instance_dict(value):
        return Kind.MAPPING
    return Kind.SCALAR


def is_composite(value: Any) -> bool:
    return classify(value) is not Kind.SCALAR


def is_tagged(value: Any) -> bool:
    """Return True for composites whose type is not a plain list, tuple or dict."""
    if type(value) in _PLAIN_TYPES:
        return False
    return is_composite(value)


def mapping_items(value: Any) -> dict[Any, Any]:
    """Return the key/value view traversed for a mapping-kind value."""
    if isinstance(value, dict):
        return value
    return vars(value)


def sorted_entries(value: Any) -> Iterator[tuple[str, Any]]:
    """Yield ``(rendered_key, child)`` pairs in ascending ``str(key)`` order."""
    items = mapping_items(value)
    for key in sorted(items, key=str):
        yield str(key), items[key]


__all__ = [
    "Kind",
    "classify",
    "is_composite",
    "is_tagged",
    "mapping_items",
    "sorted_entries",
]
