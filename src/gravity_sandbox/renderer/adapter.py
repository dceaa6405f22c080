# MIT License (see LICENSE)
"""
Renderer adapters for sandbox visualization.

The core has no drawing dependency: it needs only "fill a circle" and
"draw a line". This module defines that interface, builds velocity arrows
on top of it and ships text, buffering and no-op implementations. The
camera transform is applied here, exactly once, before any backend sees
a coordinate.
"""
from __future__ import annotations
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, TextIO
import math
import sys

from .. import colors
from ..camera import screen_to_world, world_to_screen
from ..colors import Color
from ..constants import ARROW_HEAD_ANGLE, ARROW_HEAD_DIVISOR, ARROW_HEAD_MIN, ARROW_HEAD_MAX
from ..vector import Vec2

if TYPE_CHECKING:
    from ..sandbox import Sandbox

VECTOR_COLOR: Color = colors.RED


def arrow_head(start: Vec2, end: Vec2) -> tuple[Vec2, Vec2] | None:
    """
    End points of the two arrow-head lines drawn back from ``end``.

    The head lines sit at ±30° from the shaft. Head length is
    clamp(|shaft|² / 100, 0.1, 20): short shafts still get a visible head,
    long shafts cap at 20 pixels.

    Returns:
        The two head points, or None for a zero-length shaft.
    """
    shaft = end - start
    length_sq = shaft.magnitude_squared()
    if length_sq == 0.0:
        return None
    head = shaft.normalize().scale(length_sq / ARROW_HEAD_DIVISOR).clamp(ARROW_HEAD_MIN, ARROW_HEAD_MAX)
    head_len = head.magnitude()

    angle = start.angle_between(end)
    points = []
    for sign in (1.0, -1.0):
        a = angle + sign * ARROW_HEAD_ANGLE
        # (sin, cos) because angle_between is atan2(dx, dy).
        points.append(Vec2(end.x - head_len * math.sin(a), end.y - head_len * math.cos(a)))
    return points[0], points[1]


def status_text(sandbox: "Sandbox", pointer: Vec2) -> str:
    """
    One-line status: body count, zoom and the body under the pointer.

    ``pointer`` is in screen space; the hovered body is found with the
    same hit test the edit clicks use.
    """
    text = f"Bodies: {len(sandbox.simulation)}  Zoom: {sandbox.camera.zoom:.2f}x"
    hovered = sandbox.simulation.query_point(screen_to_world(sandbox.camera, pointer))
    if hovered is not None:
        text += f"  Mass: {hovered.mass:.4g}  Radius: {hovered.radius:.4g}"
    return text


class RendererAdapter(ABC):
    """
    Abstract base class for renderer implementations.

    Subclasses receive screen-space coordinates only.

    Usage:
        renderer = MyRenderer()
        renderer.render_sandbox(sandbox)
    """

    @abstractmethod
    def begin_frame(self, time: float, paused: bool) -> None:
        """
        Begin a new frame.

        Args:
            time: Seconds since the sandbox started.
            paused: Whether integration is paused (frontends show an overlay).
        """
        ...

    @abstractmethod
    def fill_circle(self, center: Vec2, radius: float, color: Color) -> None:
        ...

    @abstractmethod
    def draw_line(self, start: Vec2, end: Vec2, color: Color) -> None:
        ...

    @abstractmethod
    def end_frame(self) -> None:
        """Finalize the current frame."""
        ...

    def draw_arrow(self, start: Vec2, end: Vec2, color: Color) -> None:
        """Draw a shaft from ``start`` to ``end`` with a two-line head."""
        self.draw_line(start, end, color)
        head = arrow_head(start, end)
        if head is None:
            return
        self.draw_line(end, head[0], color)
        self.draw_line(end, head[1], color)

    def render_sandbox(self, sandbox: "Sandbox") -> None:
        """
        Draw every active body, plus velocity arrows when enabled.

        Args:
            sandbox: The sandbox to render.
        """
        cam = sandbox.camera
        bodies = sandbox.simulation.active_bodies()
        self.begin_frame(sandbox.time, sandbox.paused)
        for b in bodies:
            self.fill_circle(world_to_screen(cam, b.position), b.radius * cam.zoom, b.color)
        if sandbox.show_vectors:
            for b in bodies:
                self.draw_arrow(world_to_screen(cam, b.position),
                                world_to_screen(cam, b.velocity_arrow_end),
                                VECTOR_COLOR)
        self.end_frame()


class DebugRenderer(RendererAdapter):
    """
    Console/text renderer for development without graphics.

    Output:
        === Frame t=1.0167 ===
        circle (400.00, 400.00) r=35.00 rgb=(255, 255, 0)
        line (750.00, 400.00) -> (750.00, 325.00)
    """

    def __init__(self, output: TextIO | None = None, verbose: bool = True):
        """
        Args:
            output: Output stream (defaults to sys.stdout).
            verbose: If True, also print lines (arrows).
        """
        self.output = output or sys.stdout
        self.verbose = verbose

    def begin_frame(self, time: float, paused: bool) -> None:
        suffix = " [paused]" if paused else ""
        self.output.write(f"=== Frame t={time:.4f}{suffix} ===\n")

    def fill_circle(self, center: Vec2, radius: float, color: Color) -> None:
        self.output.write(f"circle ({center.x:.2f}, {center.y:.2f}) r={radius:.2f} rgb={color}\n")

    def draw_line(self, start: Vec2, end: Vec2, color: Color) -> None:
        if self.verbose:
            self.output.write(f"line ({start.x:.2f}, {start.y:.2f}) -> ({end.x:.2f}, {end.y:.2f})\n")

    def end_frame(self) -> None:
        self.output.write("\n")
        self.output.flush()


class NullRenderer(RendererAdapter):
    """No-op renderer for headless runs and benchmarks."""

    def begin_frame(self, time: float, paused: bool) -> None:
        pass

    def fill_circle(self, center: Vec2, radius: float, color: Color) -> None:
        pass

    def draw_line(self, start: Vec2, end: Vec2, color: Color) -> None:
        pass

    def end_frame(self) -> None:
        pass


class BufferedRenderer(RendererAdapter):
    """
    Records draw calls per frame.

    Example:
        renderer = BufferedRenderer()
        renderer.render_sandbox(sandbox)
        frame = renderer.frames[-1]
        print(len(frame["circles"]), len(frame["lines"]))
    """

    def __init__(self):
        self.frames: list[dict] = []
        self._current_frame: dict | None = None

    def begin_frame(self, time: float, paused: bool) -> None:
        self._current_frame = {
            "time": time,
            "paused": paused,
            "circles": [],
            "lines": [],
        }

    def fill_circle(self, center: Vec2, radius: float, color: Color) -> None:
        if self._current_frame is None:
            return
        self._current_frame["circles"].append({
            "center": (center.x, center.y),
            "radius": radius,
            "color": color,
        })

    def draw_line(self, start: Vec2, end: Vec2, color: Color) -> None:
        if self._current_frame is None:
            return
        self._current_frame["lines"].append({
            "start": (start.x, start.y),
            "end": (end.x, end.y),
            "color": color,
        })

    def end_frame(self) -> None:
        if self._current_frame is not None:
            self.frames.append(self._current_frame)
            self._current_frame = None
