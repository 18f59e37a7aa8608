"""Configuration module using Pydantic Settings.

Usage:
    from tickstate.config import RunnerSettings

    settings = RunnerSettings(min_delta=0.001, max_delta=0.1)
"""

from tickstate.config.settings import RunnerSettings

__all__ = [
    "RunnerSettings",
]
