# MIT License (see LICENSE)
"""
Core type definitions for the gravity sandbox.

Defines ``Body``: a circular, mutually attracting point mass with a display
radius. Equations of motion per frame (semi-implicit Euler):
  v += a·dt
  x += vx·dt,  y -= vy·dt      (velocity is y-up, position is screen y-down)
"""
from __future__ import annotations
from dataclasses import dataclass

from . import colors
from .colors import Color
from .vector import Vec2


def _as_vec(v) -> Vec2:
    if isinstance(v, Vec2):
        return v
    return Vec2(float(v[0]), float(v[1]))


@dataclass
class Body:
    """
    A star, planet or moon.

    Attributes:
        position: World-space center (screen convention, y down).
        velocity: Velocity in the y-up frame.
        mass: Gravitational mass; may be fractional.
        radius: Display and collision radius, independent of mass.
        color: Opaque display attribute.
        acceleration: Accumulated acceleration, rebuilt every frame.
        active: False once merged away or deleted; the body is then skipped
                by every pass until compaction removes it.
        is_camera_center: Camera keeps this body centered while set.
        velocity_arrow_end: World-space tip of the velocity arrow as last
                            displayed; the pick target for velocity dragging.
        id: Stable identifier assigned by ``Simulation.add_body()``. List
            positions change on compaction; ids never do.
    """
    position: Vec2 | tuple[float, float] = Vec2()
    velocity: Vec2 | tuple[float, float] = Vec2()
    mass: float = 1.0
    radius: float = 10.0
    color: Color = colors.WHITE

    # Runtime state
    acceleration: Vec2 = Vec2()
    active: bool = True
    is_camera_center: bool = False
    velocity_arrow_end: Vec2 = Vec2()
    id: int = -1

    def __post_init__(self) -> None:
        """Accept tuples for vector fields."""
        self.position = _as_vec(self.position)
        self.velocity = _as_vec(self.velocity)
        self.acceleration = _as_vec(self.acceleration)
        self.velocity_arrow_end = _as_vec(self.velocity_arrow_end)

    def contains(self, point: Vec2) -> bool:
        """
        Hit test used by delete, add-mass and center toggling.

        Compares the squared distance against the *linear* radius, so the
        effective pick circle has radius sqrt(radius), much smaller than the
        drawn circle for large bodies.
        """
        return Vec2.distance_squared(self.position, point) < self.radius

    def arrow_end(self, scale: float) -> Vec2:
        """Tip of the velocity arrow: position + scale·(vx, -vy)."""
        return Vec2(self.position.x + scale * self.velocity.x,
                    self.position.y - scale * self.velocity.y)

    def velocity_from_arrow(self, tip: Vec2, scale: float) -> Vec2:
        """Inverse of ``arrow_end``: the velocity whose arrow ends at ``tip``."""
        offset = (tip - self.position) / scale
        return Vec2(offset.x, -offset.y)

    def deactivate(self) -> None:
        self.active = False
        self.is_camera_center = False
