"""Tests for runner settings."""

import pytest
from pydantic import ValidationError

from tickstate import RunnerConfig, RunnerSettings, monotonic_ms, wall_clock_ms


def test_defaults(monkeypatch):
    for name in ("MIN_DELTA", "MAX_DELTA", "CLOCK"):
        monkeypatch.delenv(f"TICKSTATE_RUNNER_{name}", raising=False)

    settings = RunnerSettings()

    assert settings.min_delta == 0.0
    assert settings.max_delta == 0.25
    assert settings.time_source() is wall_clock_ms


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("TICKSTATE_RUNNER_MIN_DELTA", "0.01")
    monkeypatch.setenv("TICKSTATE_RUNNER_MAX_DELTA", "0.1")
    monkeypatch.setenv("TICKSTATE_RUNNER_CLOCK", "monotonic")

    settings = RunnerSettings()

    assert settings.to_config() == RunnerConfig(min_delta=0.01, max_delta=0.1)
    assert settings.time_source() is monotonic_ms


def test_explicit_values_win_over_environment(monkeypatch):
    monkeypatch.setenv("TICKSTATE_RUNNER_MAX_DELTA", "0.1")

    assert RunnerSettings(max_delta=0.3).max_delta == 0.3


def test_min_greater_than_max_is_rejected():
    with pytest.raises(ValidationError, match="must not exceed"):
        RunnerSettings(min_delta=1.0, max_delta=0.5)


def test_negative_delta_is_rejected():
    with pytest.raises(ValidationError):
        RunnerSettings(min_delta=-1.0)


def test_unknown_clock_is_rejected():
    with pytest.raises(ValidationError):
        RunnerSettings(clock="sundial")


@pytest.mark.parametrize("name", ["min_delta", "max_delta"])
@pytest.mark.parametrize("value", [float("nan"), float("inf")])
def test_non_finite_delta_is_rejected(name, value):
    with pytest.raises(ValidationError):
        RunnerSettings(**{name: value})
