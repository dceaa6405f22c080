import pytest
from gravity_sandbox.camera import CameraState, world_to_screen
from gravity_sandbox.config import SandboxConfig
from gravity_sandbox.input import Action, Button, ButtonState, KeyState, FrameInput
from gravity_sandbox.interaction import Edit
from gravity_sandbox.sandbox import Sandbox
from gravity_sandbox.simulation import Simulation
from gravity_sandbox.types import Body
from gravity_sandbox.vector import Vec2


def frame(pointer=(0, 0), buttons=None, pressed=(), held=(), dt=1 / 60, fps=60.0):
    keys = {a: KeyState(pressed=True, held=True) for a in pressed}
    keys.update({a: KeyState(held=True) for a in held})
    return FrameInput(
        pointer=Vec2(*pointer),
        buttons=buttons or {},
        keys=keys,
        dt=dt,
        fps=fps,
        screen_size=(900.0, 900.0),
    )


def positions(sandbox):
    return {b.id: b.position for b in sandbox.simulation.bodies}


def test_default_sandbox_runs():
    sandbox = Sandbox()
    assert len(sandbox.simulation) == 3
    before = positions(sandbox)

    sandbox.update(frame())

    assert sandbox.integrated
    assert sandbox.time == pytest.approx(1 / 60)
    assert positions(sandbox) != before


def test_pause_freezes_positions_but_keeps_forces_live():
    sandbox = Sandbox()
    sandbox.update(frame(pressed=[Action.PAUSE]))
    assert sandbox.paused
    before = positions(sandbox)

    sandbox.update(frame())

    assert not sandbox.integrated
    assert positions(sandbox) == before
    planet = sandbox.simulation.bodies[0]
    assert planet.acceleration.magnitude() > 0

    sandbox.update(frame(pressed=[Action.PAUSE]))
    assert not sandbox.paused


def test_low_frame_rate_skips_integration():
    sandbox = Sandbox()
    before = positions(sandbox)
    sandbox.update(frame(fps=5.0))
    assert not sandbox.integrated
    assert positions(sandbox) == before


def test_exit_stops_updates():
    sandbox = Sandbox()
    sandbox.update(frame(pressed=[Action.EXIT]))
    assert not sandbox.running
    t = sandbox.time
    sandbox.update(frame())
    assert sandbox.time == t


def test_center_lock_scenario():
    """
    Toggling center-lock on the sun puts it at the screen center on that
    frame and keeps it there while zooming; a pan drag cancels the lock.
    """
    sandbox = Sandbox()
    sun = next(b for b in sandbox.simulation.bodies if b.mass == 100)
    click = {Button.PRIMARY: ButtonState(pressed=True, held=True)}

    sandbox.update(frame(pointer=(400, 400), buttons=click, held=[Action.CENTER_BODY]))

    assert sandbox.last_edit is Edit.TOGGLE_CENTER
    assert sun.is_camera_center
    assert sandbox.camera.center_locked_id == sun.id
    center = world_to_screen(sandbox.camera, sun.position)
    assert center.x == pytest.approx(450.0)
    assert center.y == pytest.approx(450.0)

    sandbox.update(frame(held=[Action.ZOOM_IN], dt=0.1))
    assert sandbox.camera.zoom > 1.0
    center = world_to_screen(sandbox.camera, sun.position)
    assert center.x == pytest.approx(450.0)
    assert center.y == pytest.approx(450.0)

    pan = {Button.SECONDARY: ButtonState(pressed=True, held=True)}
    sandbox.update(frame(pointer=(10, 10), buttons=pan))
    assert sandbox.camera.is_dragging
    assert not sun.is_camera_center
    assert sandbox.camera.center_locked_id is None


def test_vector_drag_through_sandbox():
    body = Body(position=(100, 100), velocity=(10, 0), radius=5.0)
    sandbox = Sandbox(simulation=Simulation(bodies=[body]))
    scale = sandbox.config.velocity_arrow_scale

    sandbox.update(frame(pressed=[Action.PAUSE, Action.TOGGLE_VECTORS]))
    assert sandbox.paused and sandbox.show_vectors
    tip = body.velocity_arrow_end
    assert tip == Vec2(100 + 10 * scale, 100)

    sandbox.update(frame(pointer=(tip.x, tip.y), buttons={Button.PRIMARY: ButtonState(pressed=True, held=True)}))
    assert sandbox.last_edit is Edit.DRAG_START

    # The dragged tip survives the per-frame arrow refresh.
    sandbox.update(frame(pointer=(100, 60), buttons={Button.PRIMARY: ButtonState(held=True)}))
    assert body.velocity_arrow_end == Vec2(100, 60)

    sandbox.update(frame(pointer=(100, 60), buttons={Button.PRIMARY: ButtonState(released=True)}))
    assert sandbox.last_edit is Edit.DRAG_COMMIT
    assert body.velocity.x == pytest.approx(0.0)
    assert body.velocity.y == pytest.approx(40 / scale)
    assert body.velocity_arrow_end == body.arrow_end(scale)


def test_custom_config_reaches_simulation():
    config = SandboxConfig(gravitational_constant=1.0, new_body_radius=4.0)
    sandbox = Sandbox(config=config, camera=CameraState(zoom=2.0))
    assert sandbox.simulation.gravitational_constant == 1.0

    click = {Button.PRIMARY: ButtonState(pressed=True, held=True)}
    sandbox.update(frame(pointer=(-100, -100), buttons=click, held=[Action.ADD_BODY]))
    added = sandbox.simulation.query_point(Vec2(-50, -50))
    assert added is not None
    assert added.radius == 4.0
