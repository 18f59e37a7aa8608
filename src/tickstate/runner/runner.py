"""Variable time step runner.

Usage:
    runner = create_variable_time_step_runner(min_delta=0.001, max_delta=0.1)
    clock = create_clock()

    while running:
        state, clock = await runner(state, routines, clock)

    # Or from synchronous code
    state, clock = runner.tick(state, routines, clock)

    # Bounds and time source from TICKSTATE_RUNNER_* environment variables
    runner = VariableTimeStepRunner.from_settings()
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING, TypeVar

from tickstate.core.clock import Clock, TimeSource, refresh_clock, wall_clock_ms
from tickstate.core.routine import Routine, apply_routines
from tickstate.runner.models import RunnerConfig, RunnerResult

if TYPE_CHECKING:
    from tickstate.config import RunnerSettings

S = TypeVar("S")

logger = logging.getLogger(__name__)


class VariableTimeStepRunner:
    """Runs one tick per call: refreshes the clock, then applies routines.

    Holds no state between ticks. The caller threads the returned state and
    clock back into the next call.

    Args:
        config: Delta bounds. Defaults to RunnerConfig().
        time_source: Provider of the current instant in milliseconds.
            Called exactly once per tick.
    """

    def __init__(
        self,
        config: RunnerConfig | None = None,
        time_source: TimeSource = wall_clock_ms,
    ) -> None:
        self._config = config or RunnerConfig()
        self._time_source = time_source

    @classmethod
    def from_settings(cls, settings: RunnerSettings | None = None) -> VariableTimeStepRunner:
        """Create a runner from settings, loaded from the environment if omitted."""
        if settings is None:
            from tickstate.config import RunnerSettings

            settings = RunnerSettings()
        return cls(config=settings.to_config(), time_source=settings.time_source())

    @property
    def config(self) -> RunnerConfig:
        return self._config

    async def __call__(
        self,
        state: S,
        routines: Iterable[Routine[S, Clock]],
        clock: Clock,
    ) -> RunnerResult[S]:
        """Execute one tick.

        Args:
            state: State at the end of the previous tick.
            routines: Routines to apply, in order.
            clock: Clock at the end of the previous tick.

        Returns:
            Tuple of the updated state and the refreshed clock. The state is
            the same object if no routine changed it.
        """
        clock = refresh_clock(
            clock,
            self._time_source(),
            self._config.min_delta,
            self._config.max_delta,
        )
        logger.debug("Tick at %d ms (delta %.4fs)", clock.now, clock.delta)

        return await apply_routines(state, routines, clock), clock

    def tick(
        self,
        state: S,
        routines: Iterable[Routine[S, Clock]],
        clock: Clock,
    ) -> RunnerResult[S]:
        """Synchronous wrapper for a single tick. Not usable inside a running event loop."""
        return asyncio.run(self(state, routines, clock))


def create_variable_time_step_runner(
    min_delta: float,
    max_delta: float,
    time_source: TimeSource = wall_clock_ms,
) -> VariableTimeStepRunner:
    """Create a runner with a variable delta clamped to `[min_delta, max_delta]`.

    Args:
        min_delta: Lower bound for the delta, in seconds.
        max_delta: Upper bound for the delta, in seconds.
        time_source: Provider of the current instant in milliseconds.

    Raises:
        ValueError: If the bounds are invalid.
    """
    return VariableTimeStepRunner(
        config=RunnerConfig(min_delta=min_delta, max_delta=max_delta),
        time_source=time_source,
    )
