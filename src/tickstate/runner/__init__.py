"""Tick execution.

Architecture Note:
    runner/ combines a time source with the stateless primitives of core/.
    It keeps configuration only; state and clock are threaded by the caller.
"""

from tickstate.runner.models import RunnerConfig, RunnerResult
from tickstate.runner.runner import VariableTimeStepRunner, create_variable_time_step_runner

__all__ = [
    "VariableTimeStepRunner",
    "create_variable_time_step_runner",
    "RunnerConfig",
    "RunnerResult",
]
