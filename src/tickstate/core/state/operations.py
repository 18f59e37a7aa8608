"""Deep patch with structural sharing.

`patch` reconciles an immutable state tree with a partial modification and
returns either the original state (nothing changed) or a new tree in which
every unchanged subtree is the original object and every changed node is new.
Callers can therefore detect changes with `is` instead of deep comparison.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, TypeVar

from tickstate.core.state.models import (
    MISSING,
    NodeKind,
    PatchError,
    accepts_new_fields,
    is_same,
    mapping_like,
    node_kind,
    record_get,
    record_items,
    record_rebuild,
)
from tickstate.core.types import UNSET, Modification

S = TypeVar("S")


def patch(state: S, modification: Modification[S]) -> S:
    """Deeply patch a state.

    Args:
        state: State to patch. Never mutated.
        modification: Partial representation of the state. Records are patched
            field by field, sequences index by index, anything else replaces
            the state. `UNSET` leaves the state untouched.

    Returns:
        `state` itself if the modification changes nothing, otherwise a new
        value sharing every unchanged subtree with `state`.

    Raises:
        PatchError: If the modification cannot be expressed in the state's
            type (unknown dataclass field, `UNSET` standing for a sequence
            element or dataclass field that has no previous value).

    Example:
        >>> state = {"angle": 0, "position": {"x": 0, "y": 1}}
        >>> patch(state, {"position": {"x": 0}}) is state
        True
        >>> patch(state, {"angle": 2})["position"] is state["position"]
        True
    """
    if modification is UNSET:
        return state
    if state is None or modification is None:
        return _materialize(modification)

    state_kind = node_kind(state)
    modification_kind = node_kind(modification)

    if state_kind is NodeKind.SEQUENCE and modification_kind is NodeKind.SEQUENCE:
        return _patch_sequence(state, modification)
    if state_kind is NodeKind.RECORD and modification_kind is NodeKind.RECORD:
        return _patch_record(state, modification)

    # Leaves and shape mismatches: last write wins
    return state if is_same(state, modification) else _materialize(modification)


def _patch_sequence(state: Any, modification: Any) -> Any:
    """Patch elements by index. The modification's length is the result's length."""
    result: list[Any] = []
    for index, change in enumerate(modification):
        if index < len(state):
            result.append(patch(state[index], change))
        elif change is UNSET:
            raise PatchError(f"Cannot leave index {index} unchanged: state has {len(state)} items")
        else:
            result.append(_materialize(change))

    if len(result) == len(state) and all(
        is_same(old, new) for old, new in zip(state, result, strict=True)
    ):
        return state
    return result if type(state) is list else type(state)(result)


def _patch_record(state: Any, modification: Any) -> Any:
    """Patch fields by name. Fields absent from the modification are kept."""
    changes: dict[Any, Any] = {}
    for key, change in record_items(modification):
        if change is UNSET:
            continue

        old = record_get(state, key)
        if old is MISSING:
            if not accepts_new_fields(state):
                raise PatchError(f"{type(state).__name__} has no field {key!r}")
            changes[key] = _materialize(change)
            continue

        new = patch(old, change)
        if not is_same(old, new):
            changes[key] = new

    return record_rebuild(state, changes) if changes else state


def _materialize(value: Any) -> Any:
    """Turn a modification value with no previous counterpart into a state value.

    `UNSET` fields of mappings are dropped, since there is nothing to leave
    unchanged. Returns `value` itself when it holds no `UNSET`.

    Raises:
        PatchError: If `UNSET` stands for a sequence element or a field of a
            dataclass or named tuple, which cannot simply be left out.
    """
    kind = node_kind(value)

    if kind is NodeKind.SEQUENCE:
        items: list[Any] = []
        for index, item in enumerate(value):
            if item is UNSET:
                raise PatchError(f"Cannot leave index {index} unchanged: it has no previous value")
            items.append(_materialize(item))
        if all(new is old for old, new in zip(value, items, strict=True)):
            return value
        return items if type(value) is list else type(value)(items)

    if kind is NodeKind.RECORD:
        changes: dict[Any, Any] = {}
        dropped: set[Any] = set()
        for key, item in record_items(value):
            if item is UNSET:
                if not accepts_new_fields(value):
                    raise PatchError(
                        f"{type(value).__name__}.{key} cannot be UNSET: it has no previous value"
                    )
                dropped.add(key)
                continue
            new = _materialize(item)
            if new is not item:
                changes[key] = new

        if not changes and not dropped:
            return value
        if isinstance(value, Mapping):
            return mapping_like(
                value,
                {key: changes.get(key, item) for key, item in value.items() if key not in dropped},
            )
        return record_rebuild(value, changes)

    return value
