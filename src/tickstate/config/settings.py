"""Configuration settings using Pydantic Settings.

Provides typed runner configuration with environment variable support.

Usage:
    from tickstate.config import RunnerSettings

    # Load from environment variables (TICKSTATE_RUNNER_*)
    settings = RunnerSettings()

    # Or override with explicit values
    settings = RunnerSettings(max_delta=0.05, clock="monotonic")
    runner = VariableTimeStepRunner.from_settings(settings)
"""

from __future__ import annotations

from typing import Literal, Self

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from tickstate.core.clock import TimeSource, monotonic_ms, wall_clock_ms
from tickstate.runner.models import RunnerConfig


class RunnerSettings(BaseSettings):  # type: ignore[misc]
    """Configuration for variable time step runners.

    Attributes:
        min_delta: Lower bound for the tick delta, in seconds.
        max_delta: Upper bound for the tick delta, in seconds.
        clock: Time source, "wall" (Unix time) or "monotonic".

    Environment Variables:
        TICKSTATE_RUNNER_MIN_DELTA
        TICKSTATE_RUNNER_MAX_DELTA
        TICKSTATE_RUNNER_CLOCK
    """

    model_config = SettingsConfigDict(
        env_prefix="TICKSTATE_RUNNER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    min_delta: float = Field(default=0.0, ge=0.0, allow_inf_nan=False)
    max_delta: float = Field(default=0.25, ge=0.0, allow_inf_nan=False)
    clock: Literal["wall", "monotonic"] = "wall"

    @model_validator(mode="after")
    def _check_bounds(self) -> Self:
        if self.min_delta > self.max_delta:
            raise ValueError(
                f"min_delta ({self.min_delta}) must not exceed max_delta ({self.max_delta})"
            )
        return self

    def to_config(self) -> RunnerConfig:
        return RunnerConfig(min_delta=self.min_delta, max_delta=self.max_delta)

    def time_source(self) -> TimeSource:
        return monotonic_ms if self.clock == "monotonic" else wall_clock_ms
