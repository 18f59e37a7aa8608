"""Routines: per-tick units of logic and their sequential execution."""

from tickstate.core.routine.core import apply_routines, update
from tickstate.core.routine.models import PatchRoutine, RetryPolicy, Routine, RoutineError
from tickstate.core.routine.wrappers import with_retry, with_timeout

__all__ = [
    "Routine",
    "PatchRoutine",
    "apply_routines",
    "update",
    "with_retry",
    "with_timeout",
    "RetryPolicy",
    "RoutineError",
]
