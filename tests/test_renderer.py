import io
import math

import pytest
from gravity_sandbox.camera import CameraState
from gravity_sandbox.renderer import BufferedRenderer, DebugRenderer, NullRenderer, arrow_head, status_text
from gravity_sandbox.sandbox import Sandbox
from gravity_sandbox.simulation import Simulation
from gravity_sandbox.types import Body
from gravity_sandbox.vector import Vec2


def _head_length(end, point):
    return end.distance(point)


def test_arrow_head_long_shaft_caps_at_20():
    """|shaft|²/100 = 100 clamps to 20; heads sit ±30° off the shaft."""
    end = Vec2(100, 0)
    left, right = arrow_head(Vec2(0, 0), end)
    assert _head_length(end, left) == pytest.approx(20.0)
    assert _head_length(end, right) == pytest.approx(20.0)
    assert left.x == pytest.approx(100 - 20 * math.cos(math.pi / 6))
    assert right.x == pytest.approx(left.x)
    assert sorted([left.y, right.y]) == pytest.approx([-10.0, 10.0])


def test_arrow_head_short_shaft_has_minimum():
    end = Vec2(1, 0)
    left, right = arrow_head(Vec2(0, 0), end)
    assert _head_length(end, left) == pytest.approx(0.1)


def test_arrow_head_scales_between_bounds():
    end = Vec2(0, 30)
    left, right = arrow_head(Vec2(0, 0), end)
    assert _head_length(end, left) == pytest.approx(9.0)
    # Pointing down the screen: heads are above the tip.
    assert left.y < 30 and right.y < 30


def test_arrow_head_zero_shaft():
    assert arrow_head(Vec2(5, 5), Vec2(5, 5)) is None


def test_render_applies_camera_once():
    body = Body(position=(10, 20), velocity=(0, 0), radius=3.0, color=(1, 2, 3))
    sandbox = Sandbox(simulation=Simulation(bodies=[body]),
                      camera=CameraState(pan_offset=Vec2(5, -5), zoom=2.0))
    renderer = BufferedRenderer()

    renderer.render_sandbox(sandbox)

    frame = renderer.frames[-1]
    assert frame["paused"] is False
    assert frame["lines"] == []
    circle = frame["circles"][0]
    assert circle["center"] == (25.0, 35.0)
    assert circle["radius"] == 6.0
    assert circle["color"] == (1, 2, 3)


def test_render_vectors():
    moving = Body(position=(0, 0), velocity=(100, 0), radius=3.0)
    resting = Body(position=(500, 0), velocity=(0, 0), radius=3.0)
    sandbox = Sandbox(simulation=Simulation(bodies=[moving, resting]), show_vectors=True, paused=True)
    renderer = BufferedRenderer()

    renderer.render_sandbox(sandbox)

    frame = renderer.frames[-1]
    assert frame["paused"] is True
    assert len(frame["circles"]) == 2
    # Shaft + two head lines for the moving body; a bare shaft for the other.
    assert len(frame["lines"]) == 4
    shaft = frame["lines"][0]
    assert shaft["start"] == (0.0, 0.0)
    assert shaft["end"] == (100 * sandbox.config.velocity_arrow_scale, 0.0)


def test_inactive_bodies_are_not_drawn():
    a = Body(position=(0, 0))
    b = Body(position=(100, 0))
    sandbox = Sandbox(simulation=Simulation(bodies=[a, b]))
    b.deactivate()
    renderer = BufferedRenderer()
    renderer.render_sandbox(sandbox)
    assert len(renderer.frames[-1]["circles"]) == 1


def test_debug_renderer_writes_text():
    out = io.StringIO()
    sandbox = Sandbox(show_vectors=True)
    DebugRenderer(output=out).render_sandbox(sandbox)
    text = out.getvalue()
    assert text.startswith("=== Frame t=0.0000 ===")
    assert text.count("circle") == 3
    assert "line" in text


def test_null_renderer():
    NullRenderer().render_sandbox(Sandbox())


def test_status_text_reports_hovered_body():
    body = Body(position=(100, 100), mass=12.5, radius=10.0)
    sandbox = Sandbox(simulation=Simulation(bodies=[body]),
                      camera=CameraState(pan_offset=Vec2(50, 0), zoom=2.0))

    hovered = status_text(sandbox, Vec2(250, 200))
    empty = status_text(sandbox, Vec2(0, 0))

    assert hovered == "Bodies: 1  Zoom: 2.00x  Mass: 12.5  Radius: 10"
    assert empty == "Bodies: 1  Zoom: 2.00x"
