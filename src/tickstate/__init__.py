"""tickstate: immutable state updates for tick-based simulations.

Usage:
    from tickstate import create_clock, create_variable_time_step_runner, update

    @dataclass(frozen=True)
    class Ship:
        angle: float
        position: dict[str, float]

    @update
    def spin(ship: Ship, clock: Clock) -> dict[str, Any]:
        return {"angle": ship.angle + 90 * clock.delta}

    runner = create_variable_time_step_runner(min_delta=0.001, max_delta=0.1)
    ship, clock = Ship(0.0, {"x": 0.0, "y": 0.0}), create_clock()
    moved, clock = await runner(ship, [spin], clock)

    # Unchanged subtrees keep their identity
    assert moved.position is ship.position
"""

__version__ = "0.1.0"

# Core primitives
from tickstate.core import (
    UNSET,
    Clock,
    Modification,
    NodeKind,
    PatchError,
    PatchRoutine,
    RetryPolicy,
    Routine,
    RoutineError,
    TimeSource,
    Unset,
    apply_routines,
    clamp,
    create_clock,
    is_same,
    monotonic_ms,
    node_kind,
    patch,
    refresh_clock,
    update,
    wall_clock_ms,
    with_retry,
    with_timeout,
)

# Runner
from tickstate.runner import (
    RunnerConfig,
    RunnerResult,
    VariableTimeStepRunner,
    create_variable_time_step_runner,
)

# Configuration
from tickstate.config import RunnerSettings

__all__ = [
    # Version
    "__version__",
    # State
    "patch",
    "PatchError",
    "UNSET",
    "Unset",
    "Modification",
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
    # Runner
    "VariableTimeStepRunner",
    "create_variable_time_step_runner",
    "RunnerConfig",
    "RunnerResult",
    # Config
    "RunnerSettings",
]
