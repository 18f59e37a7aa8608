"""Shared test fixtures."""

import sys
from dataclasses import dataclass
from typing import Any

import pytest

# Ensure src is in path
sys.path.insert(0, "src")


@dataclass(frozen=True, slots=True)
class FixturePosition:
    x: float
    y: float
    z: float


@dataclass(frozen=True, slots=True)
class FixtureShip:
    angle: float
    position: FixturePosition


class FakeTimeSource:
    """Manually advanced millisecond time source that counts its calls."""

    def __init__(self, start: int = 1_000_000) -> None:
        self.now = start
        self.calls = 0

    def advance(self, milliseconds: int) -> None:
        self.now += milliseconds

    def __call__(self) -> int:
        self.calls += 1
        return self.now


@pytest.fixture
def state() -> dict[str, Any]:
    """Record-of-records sample state."""
    return {
        "angle": 0,
        "position": {
            "x": 0,
            "y": 1,
            "z": 2,
        },
    }


@pytest.fixture
def ship() -> FixtureShip:
    """Frozen dataclass sample state."""
    return FixtureShip(angle=0.0, position=FixturePosition(0.0, 1.0, 2.0))


@pytest.fixture
def position_cls():
    return FixturePosition


@pytest.fixture
def ship_cls():
    return FixtureShip


@pytest.fixture
def time_source() -> FakeTimeSource:
    return FakeTimeSource()
