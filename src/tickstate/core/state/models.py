"""State models: value classification, change detection and record access.

A state tree is built from three kinds of nodes:

- records: mappings, dataclass instances and named tuples (fields by name)
- sequences: lists and tuples (elements by index)
- leaves: scalars compared by value, anything else compared by identity
"""

from __future__ import annotations

import dataclasses
from collections.abc import Iterator, Mapping
from enum import Enum, auto
from numbers import Number
from types import MappingProxyType
from typing import Any


class PatchError(ValueError):
    """Raised when a modification cannot be expressed in the target value."""


class NodeKind(Enum):
    """Shape of a node in a state tree."""

    SCALAR = auto()  # Compared by value
    OPAQUE = auto()  # Atomic, compared by identity
    RECORD = auto()  # Named fields, patched field by field
    SEQUENCE = auto()  # Ordered elements, patched index by index


SCALAR_TYPES: tuple[type, ...] = (Number, str, bytes, Enum, type(None))

MISSING: Any = object()
"""Returned by `record_get` for a field the record does not have."""


def _is_named_tuple(value: Any) -> bool:
    return isinstance(value, tuple) and hasattr(type(value), "_fields")


def node_kind(value: Any) -> NodeKind:
    """Classify a value of a state or modification tree.

    Args:
        value: Any node of a state or modification tree.

    Returns:
        The NodeKind deciding how `patch` treats the value.
    """
    if isinstance(value, Mapping) or _is_named_tuple(value):
        return NodeKind.RECORD
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return NodeKind.RECORD
    if isinstance(value, (list, tuple)):
        return NodeKind.SEQUENCE
    if isinstance(value, SCALAR_TYPES):
        return NodeKind.SCALAR
    return NodeKind.OPAQUE


def is_same(old: Any, new: Any) -> bool:
    """Check whether `new` can be replaced by `old` without observable change.

    Composite and opaque values are compared by identity only. Scalars are
    compared by value, and only against scalars of the exact same type, so
    `1`, `1.0` and `True` stay distinct. NaN is the same as NaN.
    """
    if old is new:
        return True
    if type(old) is not type(new) or node_kind(old) is not NodeKind.SCALAR:
        return False
    if old == new:
        return True
    return old != old and new != new  # NaN


def record_items(record: Any) -> Iterator[tuple[str, Any]]:
    """Iterate over the (field, value) pairs of a record."""
    if isinstance(record, Mapping):
        yield from record.items()
    elif _is_named_tuple(record):
        yield from zip(record._fields, record, strict=True)
    else:
        for f in dataclasses.fields(record):
            yield f.name, getattr(record, f.name)


def record_get(record: Any, key: Any) -> Any:
    """Read a record field, returning `MISSING` if the record lacks it.

    Dataclass fields declared with `init=False` count as missing: a new
    instance cannot be built with a different value for them.
    """
    if isinstance(record, Mapping):
        return record.get(key, MISSING)
    if _is_named_tuple(record):
        return getattr(record, key) if key in record._fields else MISSING
    if any(f.name == key and f.init for f in dataclasses.fields(record)):
        return getattr(record, key)
    return MISSING


def record_rebuild(record: Any, changes: dict[Any, Any]) -> Any:
    """Build a new record of the same type with `changes` overlaid.

    Fields absent from `changes` are carried over by reference.
    """
    if isinstance(record, Mapping):
        return mapping_like(record, {**record, **changes})
    if _is_named_tuple(record):
        return record._replace(**changes)
    return dataclasses.replace(record, **changes)


def accepts_new_fields(record: Any) -> bool:
    """Mappings may gain fields, dataclasses and named tuples may not."""
    return isinstance(record, Mapping)


def mapping_like(record: Mapping[Any, Any], items: dict[Any, Any]) -> Mapping[Any, Any]:
    """Wrap `items` in the mapping type of `record`."""
    if type(record) is dict:
        return items
    if isinstance(record, MappingProxyType):
        return MappingProxyType(items)
    return type(record)(items)
