"""Clock creation and refresh."""

from tickstate.core.clock.models import Clock, TimeSource
from tickstate.core.clock.operations import (
    clamp,
    create_clock,
    monotonic_ms,
    refresh_clock,
    wall_clock_ms,
)

__all__ = [
    "Clock",
    "TimeSource",
    "create_clock",
    "refresh_clock",
    "clamp",
    "wall_clock_ms",
    "monotonic_ms",
]
