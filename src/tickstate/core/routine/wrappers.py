"""Optional wrappers for individual routines.

`apply_routines` never retries a routine or bounds its duration: a failure
aborts the tick and a stalled routine stalls it. Callers who want retries or
deadlines wrap the routines concerned before handing them over:

    routines = [
        with_retry(fetch_weather, RetryPolicy(max_attempts=3, backoff="linear")),
        with_timeout(plan_route, seconds=0.05),
        integrate,
    ]
"""

from __future__ import annotations

import asyncio
import functools
import logging
from typing import TypeVar

import tenacity

from tickstate.core.routine.core import resolve, routine_name
from tickstate.core.routine.models import RetryPolicy, Routine, RoutineError

S = TypeVar("S")
C = TypeVar("C")

logger = logging.getLogger(__name__)


def with_retry(routine: Routine[S, C], policy: RetryPolicy) -> Routine[S, C]:
    """Wrap a routine so that it is re-run when it raises.

    Opt-in, per routine: the sequencer itself never retries. Each attempt
    receives the same state and clock. Failed attempts are logged at WARNING
    level.

    Args:
        routine: Routine to protect.
        policy: Retry configuration. `max_attempts <= 1` returns `routine` as is.

    Returns:
        An asynchronous routine. With `on_exhausted="skip"` it returns the
        state unchanged once attempts run out; with `"fail"` it raises
        RoutineError chained to the last failure.
    """
    if policy.max_attempts <= 1:
        return routine

    name = routine_name(routine)

    @functools.wraps(routine)
    async def retried(state: S, clock: C) -> S:
        try:
            async for attempt in _build_retryer(policy):
                with attempt:
                    return await resolve(routine(state, clock))
        except tenacity.RetryError as e:
            if policy.on_exhausted == "skip":
                logger.warning("%s skipped after %d attempts", name, policy.max_attempts)
                return state
            msg = f"{name} failed after {policy.max_attempts} attempts"
            raise RoutineError(msg) from e.last_attempt.exception()

        return state  # pragma: no cover

    return retried


def _build_retryer(policy: RetryPolicy) -> tenacity.AsyncRetrying:
    """Build a tenacity retryer from RetryPolicy configuration."""
    stop = tenacity.stop_after_attempt(policy.max_attempts)

    wait: tenacity.wait.wait_base
    if policy.backoff == "exponential":
        wait = tenacity.wait_exponential(multiplier=policy.base_delay, min=policy.base_delay)
    elif policy.backoff == "linear":
        wait = tenacity.wait_incrementing(start=policy.base_delay, increment=policy.base_delay)
    else:
        wait = tenacity.wait_none()

    return tenacity.AsyncRetrying(
        stop=stop,
        wait=wait,
        before_sleep=tenacity.before_sleep_log(logger, logging.WARNING),
        reraise=False,
    )


def with_timeout(routine: Routine[S, C], seconds: float) -> Routine[S, C]:
    """Wrap a routine so that it fails once `seconds` have passed.

    Opt-in, per routine: the sequencer itself has no deadline.
    Only suspension points can be interrupted: a synchronous routine always
    runs to completion, and the timeout fires at its next await, if any.

    Raises:
        TimeoutError: If the routine has not returned after `seconds`.
    """

    @functools.wraps(routine)
    async def bounded(state: S, clock: C) -> S:
        async with asyncio.timeout(seconds):
            return await resolve(routine(state, clock))

    return bounded
