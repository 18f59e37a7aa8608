"""Core functionalities: stateless primitives for immutable tick-based state.

Architecture Note:
    core/ contains pure, stateless functions and immutable models.
    The only component holding configuration is runner/, which combines
    a time source, delta bounds and the routines below into a tick.
"""

from tickstate.core.state import NodeKind, PatchError, is_same, node_kind, patch
from tickstate.core.clock import (
    Clock,
    TimeSource,
    clamp,
    create_clock,
    monotonic_ms,
    refresh_clock,
    wall_clock_ms,
)
from tickstate.core.routine import (
    PatchRoutine,
    RetryPolicy,
    Routine,
    RoutineError,
    apply_routines,
    update,
    with_retry,
    with_timeout,
)
from tickstate.core.types import UNSET, Modification, Unset

__all__ = [
    # Types
    "UNSET",
    "Unset",
    "Modification",
    # State
    "patch",
    "PatchError",
    "NodeKind",
    "node_kind",
    "is_same",
    # Clock
    "Clock",
    "TimeSource",
    "create_clock",
    "refresh_clock",
    "clamp",
    "wall_clock_ms",
    "monotonic_ms",
    # Routine
    "Routine",
    "PatchRoutine",
    "apply_routines",
    "update",
    "with_retry",
    "with_timeout",
    "RetryPolicy",
    "RoutineError",
]
