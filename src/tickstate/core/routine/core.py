"""Routine helpers and the sequential routine runner.

Usage:
    @update
    def spin(state: Ship, clock: Clock) -> dict[str, Any]:
        return {"angle": state.angle + clock.delta * SPIN_SPEED}

    async def steer(state: Ship, clock: Clock) -> Ship:
        heading = await autopilot.heading(state)
        return patch(state, {"heading": heading})

    state = await apply_routines(state, [spin, steer], clock)
"""

from __future__ import annotations

import functools
import inspect
import logging
from collections.abc import Awaitable, Iterable
from typing import Any, TypeVar

from tickstate.core.routine.models import PatchRoutine, Routine
from tickstate.core.state import patch

S = TypeVar("S")
C = TypeVar("C")
T = TypeVar("T")

logger = logging.getLogger(__name__)


async def resolve(result: T | Awaitable[T]) -> T:
    """Await `result` if the routine was asynchronous."""
    if inspect.isawaitable(result):
        return await result
    return result


def routine_name(routine: Any) -> str:
    return getattr(routine, "__qualname__", None) or repr(routine)


async def apply_routines(state: S, routines: Iterable[Routine[S, C]], clock: C) -> S:
    """Apply routines on the state, one after the other.

    Each routine receives the state returned by the previous one and the same
    clock. A routine only starts once the previous one has returned, so later
    routines always observe earlier writes. Routines are never run concurrently.

    Args:
        state: State at the start of the tick.
        routines: Routines to execute, in order.
        clock: Clock of the tick, shared by all routines.

    Returns:
        The state returned by the last routine, or `state` if there is none.

    Raises:
        TypeError: If a routine is not callable. Nothing runs in that case.
        Exception: Whatever a routine raises. Remaining routines are skipped.
            Side effects of earlier routines are not undone.
    """
    routines = tuple(routines)
    for routine in routines:
        if not callable(routine):
            raise TypeError(f"Routine must be callable, got {type(routine).__name__}")

    for index, routine in enumerate(routines):
        logger.debug("Running routine %d/%d: %s", index + 1, len(routines), routine_name(routine))
        state = await resolve(routine(state, clock))

    return state


def update(patch_routine: PatchRoutine[S, C]) -> Routine[S, C]:
    """Turn a patch routine into a routine.

    Usable as a decorator. The modifications returned by `patch_routine` are
    applied with `patch`, so returning values equal to the current ones
    keeps the state object unchanged.

    Args:
        patch_routine: Routine returning only the modifications to apply.

    Returns:
        An asynchronous routine returning the patched state.
    """

    @functools.wraps(patch_routine)
    async def routine(state: S, clock: C) -> S:
        return patch(state, await resolve(patch_routine(state, clock)))

    return routine
