"""Core type definitions for tickstate."""

from enum import Enum
from typing import Any, Literal


class Unset(Enum):
    """Marker type for "leave this value unchanged" in a modification."""

    UNSET = "UNSET"

    def __repr__(self) -> str:
        return "UNSET"

    def __bool__(self) -> Literal[False]:
        return False


UNSET = Unset.UNSET
"""Explicit no-op value. Unlike `None`, it never replaces anything."""

type Modification[T] = T | Unset | Any
"""Nested partial of `T`.

Records are modified with a mapping (or dataclass) of field name to nested
modification, sequences with a sequence of element modifications matched by
index, and any other value replaces the target outright.
"""
