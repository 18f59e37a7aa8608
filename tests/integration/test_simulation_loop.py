"""Multi-tick simulation loop with identity-based change detection."""

from dataclasses import dataclass

import pytest

from tickstate import create_clock, create_variable_time_step_runner, patch, update


@dataclass(frozen=True, slots=True)
class Body:
    x: float
    vx: float


@dataclass(frozen=True, slots=True)
class Scene:
    bodies: tuple[Body, ...]
    paused: bool
    tick_count: int


@update
def integrate(scene: Scene, clock):
    if scene.paused:
        return {}
    return {"bodies": [{"x": body.x + body.vx * clock.delta} for body in scene.bodies]}


@update
def count_ticks(scene: Scene, clock):
    return {"tick_count": scene.tick_count + 1}


@pytest.mark.asyncio
async def test_loop_moves_only_moving_bodies(time_source):
    runner = create_variable_time_step_runner(0.0, 0.1, time_source=time_source)
    clock = create_clock(time_source)
    scene = Scene(bodies=(Body(0.0, 10.0), Body(5.0, 0.0)), paused=False, tick_count=0)
    renders = 0

    for _ in range(3):
        time_source.advance(50)
        previous = scene
        scene, clock = await runner(scene, [integrate, count_ticks], clock)
        if scene.bodies is not previous.bodies:
            renders += 1
        # The resting body never gets a new object
        assert scene.bodies[1] is previous.bodies[1]

    assert renders == 3
    assert scene.tick_count == 3
    assert scene.bodies[0].x == pytest.approx(1.5)
    assert isinstance(scene.bodies, tuple)
    assert clock.elapsed == 150


@pytest.mark.asyncio
async def test_paused_scene_is_not_reallocated(time_source):
    runner = create_variable_time_step_runner(0.0, 0.1, time_source=time_source)
    clock = create_clock(time_source)
    scene = Scene(bodies=(Body(0.0, 10.0),), paused=True, tick_count=0)

    time_source.advance(16)
    updated, clock = await runner(scene, [integrate], clock)

    assert updated is scene


@pytest.mark.asyncio
async def test_long_stall_is_capped(time_source):
    runner = create_variable_time_step_runner(0.0, 0.1, time_source=time_source)
    clock = create_clock(time_source)
    scene = Scene(bodies=(Body(0.0, 10.0),), paused=False, tick_count=0)

    time_source.advance(60_000)
    scene, clock = await runner(scene, [integrate], clock)

    assert scene.bodies[0].x == pytest.approx(1.0)
    assert clock.elapsed == 60_000


def test_resume_with_patch():
    scene = Scene(bodies=(Body(0.0, 1.0),), paused=True, tick_count=4)

    resumed = patch(scene, {"paused": False})

    assert resumed.paused is False
    assert resumed.bodies is scene.bodies
