"""Pure functions for creating and advancing clocks."""

from __future__ import annotations

import logging
import time
import warnings

from tickstate.core.clock.models import Clock, TimeSource
from tickstate.core.state import patch

logger = logging.getLogger(__name__)


def wall_clock_ms() -> int:
    """Current Unix time in milliseconds."""
    return time.time_ns() // 1_000_000


def monotonic_ms() -> int:
    """Monotonic time in milliseconds. Never goes backwards."""
    return time.monotonic_ns() // 1_000_000


def create_clock(time_source: TimeSource = wall_clock_ms) -> Clock:
    """Create a clock starting now.

    Args:
        time_source: Provider of the current instant, wall clock by default.

    Returns:
        A clock with zero delta and elapsed time, `now == started_at`.
    """
    now = time_source()
    return Clock(delta=0.0, elapsed=now - now, now=now, started_at=now)


def clamp(minimum: float, value: float, maximum: float) -> float:
    """Clamp `value` into `[minimum, maximum]`."""
    return min(max(minimum, value), maximum)


def refresh_clock(clock: Clock, now: int, min_delta: float, max_delta: float) -> Clock:
    """Advance a clock to `now`.

    Args:
        clock: Clock of the previous tick.
        now: Current instant in milliseconds.
        min_delta: Lower bound for the delta, in seconds.
        max_delta: Upper bound for the delta, in seconds.

    Returns:
        The patched clock. Same object as `clock` if nothing changed.
    """
    raw_delta = (now - clock.now) / 1000
    if raw_delta < 0:
        warnings.warn(
            f"Time source went backwards by {-raw_delta:.3f}s, delta clamped to {min_delta}s",
            RuntimeWarning,
            stacklevel=2,
        )
    delta = float(clamp(min_delta, raw_delta, max_delta))
    logger.debug("Clock refreshed: raw delta %.4fs, clamped delta %.4fs", raw_delta, delta)

    return patch(
        clock,
        {
            "delta": delta,
            "elapsed": now - clock.started_at,
            "now": now,
        },
    )
