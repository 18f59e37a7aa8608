"""Runner models and configuration."""

from __future__ import annotations

import math
from dataclasses import dataclass

from tickstate.core.clock import Clock

type RunnerResult[S] = tuple[S, Clock]
"""Updated state and refreshed clock returned by a tick."""


@dataclass(frozen=True, slots=True)
class RunnerConfig:
    """Delta bounds for a variable time step runner.

    Raises:
        ValueError: If a bound is negative or not finite, or if `min_delta`
            exceeds `max_delta`.
    """

    min_delta: float = 0.0
    """Smallest delta handed to routines, in seconds."""

    max_delta: float = 0.25
    """Largest delta handed to routines, in seconds. Caps long stalls."""

    def __post_init__(self) -> None:
        if not (math.isfinite(self.min_delta) and math.isfinite(self.max_delta)):
            raise ValueError(
                f"Delta bounds must be finite, got [{self.min_delta}, {self.max_delta}]"
            )
        if self.min_delta < 0:
            raise ValueError(f"min_delta must be >= 0, got {self.min_delta}")
        if self.min_delta > self.max_delta:
            raise ValueError(
                f"min_delta ({self.min_delta}) must not exceed max_delta ({self.max_delta})"
            )
