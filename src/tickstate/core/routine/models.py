"""Routine models: callable signatures, retry configuration and errors."""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Literal

from tickstate.core.types import Modification

type Routine[S, C] = Callable[[S, C], S | Awaitable[S]]
"""Per-tick logic: takes the state and the clock, returns the next state.

Must return the same object when it changes nothing.
"""

type PatchRoutine[S, C] = Callable[[S, C], Modification[S] | Awaitable[Modification[S]]]
"""Per-tick logic returning only the modifications to apply on the state."""


class RoutineError(RuntimeError):
    """Raised by `with_retry` once a routine has used up its attempts."""


@dataclass(frozen=True, slots=True)
class RetryPolicy:
    """How `with_retry` re-runs a routine that raised.

    Every attempt sees the state and clock the first attempt saw, so the
    routine should not depend on side effects of a failed attempt.
    """

    max_attempts: int = 1
    """Total runs of the routine per tick, first run included."""

    backoff: Literal["none", "linear", "exponential"] = "none"
    """Growth of the pause between two runs."""

    base_delay: float = 0.1
    """First pause, in seconds, when `backoff` is not "none"."""

    on_exhausted: Literal["fail", "skip"] = "fail"
    """After the last failed run: raise RoutineError ("fail") or keep the state ("skip")."""
