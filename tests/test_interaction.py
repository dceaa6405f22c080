import pytest
from gravity_sandbox.camera import CameraState
from gravity_sandbox.config import SandboxConfig
from gravity_sandbox.input import Action, Button, ButtonState, KeyState, FrameInput
from gravity_sandbox.interaction import InteractionController, Edit, Dragging, Idle
from gravity_sandbox.simulation import Simulation
from gravity_sandbox.types import Body
from gravity_sandbox.vector import Vec2

SCALE = SandboxConfig().velocity_arrow_scale


def _frame(pointer, primary=ButtonState(), modifiers=()):
    return FrameInput(
        pointer=Vec2(*pointer),
        buttons={Button.PRIMARY: primary},
        keys={a: KeyState(pressed=True, held=True) for a in modifiers},
        dt=1 / 60,
    )


def press(pointer, *modifiers):
    return _frame(pointer, ButtonState(pressed=True, held=True), modifiers)


def hold(pointer):
    return _frame(pointer, ButtonState(held=True))


def release(pointer):
    return _frame(pointer, ButtonState(released=True))


def test_add_body_through_camera():
    """Pointer positions are mapped to world space before placing."""
    sim = Simulation()
    ctl = InteractionController()
    cam = CameraState(pan_offset=Vec2(100, 0), zoom=2.0)

    edit = ctl.update(press((300, 100), Action.ADD_BODY), cam, sim, paused=False, show_vectors=False)

    assert edit is Edit.ADD_BODY
    assert len(sim) == 1
    body = sim.bodies[0]
    assert body.position == Vec2(100, 50)
    assert body.velocity == Vec2(0, 0)
    assert body.mass == 1.0
    assert body.radius == 10.0


def test_add_then_delete_round_trip():
    sim = Simulation.seeded()
    ctl = InteractionController()
    cam = CameraState()
    n0 = len(sim)

    ctl.update(press((-500, -500), Action.ADD_BODY), cam, sim, False, False)
    assert len(sim) == n0 + 1
    edit = ctl.update(press((-500, -500), Action.DELETE_BODY), cam, sim, False, False)

    assert edit is Edit.DELETE_BODY
    assert len(sim) == n0


def test_hit_test_compares_squared_distance_to_linear_radius():
    """
    A radius-100 body is only hit within sqrt(100) = 10 units of its center.
    """
    sim = Simulation(bodies=[Body(position=(0, 0), radius=100.0)])
    ctl = InteractionController()
    cam = CameraState()

    ctl.update(press((15, 0), Action.DELETE_BODY), cam, sim, False, False)
    assert len(sim) == 1
    ctl.update(press((5, 0), Action.DELETE_BODY), cam, sim, False, False)
    assert len(sim) == 0


def test_add_mass():
    sim = Simulation(bodies=[Body(position=(0, 0), mass=2.0, radius=10.0)])
    ctl = InteractionController()
    edit = ctl.update(press((1, 1), Action.ADD_MASS), CameraState(), sim, False, False)
    assert edit is Edit.ADD_MASS
    assert sim.bodies[0].mass == pytest.approx(12.0)


def test_toggle_center_is_single_selection():
    a = Body(position=(0, 0), radius=10.0)
    b = Body(position=(500, 0), radius=10.0)
    sim = Simulation(bodies=[a, b])
    ctl = InteractionController()
    cam = CameraState()

    ctl.update(press((0, 0), Action.CENTER_BODY), cam, sim, False, False)
    assert a.is_camera_center and not b.is_camera_center

    ctl.update(press((500, 0), Action.CENTER_BODY), cam, sim, False, False)
    assert b.is_camera_center and not a.is_camera_center
    assert sim.center_body() is b

    ctl.update(press((500, 0), Action.CENTER_BODY), cam, sim, False, False)
    assert not a.is_camera_center and not b.is_camera_center
    assert sim.center_body() is None


def test_modifier_priority():
    """Add beats delete when both modifiers are held."""
    sim = Simulation(bodies=[Body(position=(0, 0), radius=10.0)])
    ctl = InteractionController()
    edit = ctl.update(press((0, 0), Action.ADD_BODY, Action.DELETE_BODY), CameraState(), sim, False, False)
    assert edit is Edit.ADD_BODY
    assert len(sim) == 2


def test_click_without_modifier_does_nothing_when_running():
    sim = Simulation(bodies=[Body(position=(0, 0), velocity=(10, 20), radius=10.0)])
    sim.refresh_velocity_arrows(SCALE)
    ctl = InteractionController()
    tip = sim.bodies[0].velocity_arrow_end

    edit = ctl.update(press((tip.x, tip.y)), CameraState(), sim, paused=False, show_vectors=True)

    assert edit is None
    assert isinstance(ctl.state, Idle)


def test_velocity_drag_state_machine():
    """
    Press on the arrow tip, drag, release: velocity is rebuilt from the tip
    by inverting tip = pos + scale·(vx, -vy).
    """
    body = Body(position=(0, 0), velocity=(10, 20), radius=10.0)
    sim = Simulation(bodies=[body])
    sim.refresh_velocity_arrows(SCALE)
    assert body.velocity_arrow_end == Vec2(10 * SCALE, -20 * SCALE)
    ctl = InteractionController()
    cam = CameraState()

    tip = body.velocity_arrow_end
    edit = ctl.update(press((tip.x, tip.y)), cam, sim, paused=True, show_vectors=True)
    assert edit is Edit.DRAG_START
    assert ctl.state == Dragging(body.id)
    assert ctl.dragging_id == body.id

    edit = ctl.update(hold((20, -30)), cam, sim, True, True)
    assert edit is None
    assert body.velocity_arrow_end == Vec2(20, -30)
    assert body.velocity == Vec2(10, 20)

    edit = ctl.update(release((20, -30)), cam, sim, True, True)
    assert edit is Edit.DRAG_COMMIT
    assert body.velocity.x == pytest.approx(20 / SCALE)
    assert body.velocity.y == pytest.approx(30 / SCALE)
    assert isinstance(ctl.state, Idle)


def test_drag_pick_misses_far_from_tip():
    body = Body(position=(0, 0), velocity=(10, 20), radius=10.0)
    sim = Simulation(bodies=[body])
    sim.refresh_velocity_arrows(SCALE)
    ctl = InteractionController()
    assert ctl.update(press((200, 200)), CameraState(), sim, True, True) is None
    assert isinstance(ctl.state, Idle)


def test_drag_requires_vectors_shown():
    body = Body(position=(0, 0), velocity=(10, 20))
    sim = Simulation(bodies=[body])
    sim.refresh_velocity_arrows(SCALE)
    ctl = InteractionController()
    tip = body.velocity_arrow_end
    assert ctl.update(press((tip.x, tip.y)), CameraState(), sim, True, False) is None


def test_overlapping_tips_pick_last_body():
    first = Body(position=(0, 0), velocity=(10, 0))
    second = Body(position=(2, 0), velocity=(10, 0))
    sim = Simulation(bodies=[first, second])
    sim.refresh_velocity_arrows(SCALE)
    ctl = InteractionController()
    ctl.update(press((6, 0)), CameraState(), sim, True, True)
    assert ctl.dragging_id == second.id


def test_drag_survives_compaction_reorder():
    """The drag follows the body id even when compaction moves it."""
    a = Body(position=(0, 0), velocity=(0, 0), radius=10.0)
    b = Body(position=(300, 0), velocity=(0, 0), radius=10.0)
    c = Body(position=(600, 0), velocity=(10, 0), radius=10.0)
    sim = Simulation(bodies=[a, b, c])
    sim.refresh_velocity_arrows(SCALE)
    ctl = InteractionController()
    cam = CameraState()

    tip = c.velocity_arrow_end
    ctl.update(press((tip.x, tip.y)), cam, sim, True, True)
    assert ctl.dragging_id == c.id

    sim.delete_body_at(Vec2(0, 0))
    assert sim.bodies.index(c) == 0

    ctl.update(release((600, -50)), cam, sim, True, True)
    assert c.velocity.x == pytest.approx(0.0)
    assert c.velocity.y == pytest.approx(50 / SCALE)
    assert b.velocity == Vec2(0, 0)


def test_drag_cancelled_when_body_disappears():
    body = Body(position=(0, 0), velocity=(10, 0), radius=10.0)
    sim = Simulation(bodies=[body])
    sim.refresh_velocity_arrows(SCALE)
    ctl = InteractionController()
    tip = body.velocity_arrow_end
    ctl.update(press((tip.x, tip.y)), CameraState(), sim, True, True)

    body.deactivate()
    sim.compact()

    assert ctl.update(hold((50, 50)), CameraState(), sim, True, True) is Edit.DRAG_CANCEL
    assert isinstance(ctl.state, Idle)


def test_drag_cancelled_on_unpause():
    body = Body(position=(0, 0), velocity=(10, 0), radius=10.0)
    sim = Simulation(bodies=[body])
    sim.refresh_velocity_arrows(SCALE)
    ctl = InteractionController()
    tip = body.velocity_arrow_end
    ctl.update(press((tip.x, tip.y)), CameraState(), sim, True, True)

    assert ctl.update(hold((50, 50)), CameraState(), sim, False, True) is Edit.DRAG_CANCEL
    assert body.velocity == Vec2(10, 0)
