"""Clock models."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

type TimeSource = Callable[[], int]
"""Provider of the current instant in milliseconds. Called once per refresh."""


@dataclass(frozen=True, slots=True)
class Clock:
    """Immutable timing information for one tick.

    Instants and `elapsed` are in milliseconds, `delta` is in seconds.
    A clock is never modified: refreshing it returns either the same object
    (nothing changed) or a new Clock.
    """

    delta: float
    """Seconds since the previous tick, clamped by the runner. 0 on creation."""

    elapsed: int
    """Milliseconds since `started_at`. Always `now - started_at`."""

    now: int
    """Instant of the current tick."""

    started_at: int
    """Instant the clock was created."""
