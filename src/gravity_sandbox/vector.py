# MIT License (see LICENSE)
"""
Immutable 2D vector used for every position, velocity and screen point.

Conventions:
    - World space is "pixels as meters": x grows right, y grows DOWN
      (screen convention). Velocities and accelerations use a math-style
      y-up frame; the integrator flips the sign when moving positions.
    - Angles between two points follow the engine's swapped atan2
      convention: ``atan2(dx, dy)`` rather than ``atan2(dy, dx)``. Arrow
      heads are built from it, so it must not be "fixed".
    - The sin/cos/tan ratios are taken directly from the right triangle
      (opposite/hypotenuse etc.) instead of calling trig functions on an
      angle. ``sin`` is negated so that a target below the origin on screen
      yields a negative (downward, y-up) component.
"""
from __future__ import annotations
import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Vec2:
    """
    2D float vector with value semantics.

    Attributes:
        x: Horizontal component.
        y: Vertical component.
    """
    x: float = 0.0
    y: float = 0.0

    # -------------------------------------------------------------------------
    # Operators
    # -------------------------------------------------------------------------

    def __add__(self, other: Vec2) -> Vec2:
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: float) -> Vec2:
        return Vec2(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def __truediv__(self, divisor: float) -> Vec2:
        return Vec2(self.x / divisor, self.y / divisor)

    def __neg__(self) -> Vec2:
        return Vec2(-self.x, -self.y)

    def __iter__(self):
        yield self.x
        yield self.y

    # -------------------------------------------------------------------------
    # Length and distance
    # -------------------------------------------------------------------------

    def magnitude(self) -> float:
        """Length of the vector measured from the origin."""
        return math.sqrt(self.x * self.x + self.y * self.y)

    def magnitude_squared(self) -> float:
        """Squared length. Avoids the square root."""
        return self.x * self.x + self.y * self.y

    def distance(self, other: Vec2) -> float:
        """Euclidean distance between this point and ``other``."""
        return math.sqrt(Vec2.distance_squared(self, other))

    # -------------------------------------------------------------------------
    # Angles (swapped atan2 convention, see module docstring)
    # -------------------------------------------------------------------------

    def angle_between(self, other: Vec2) -> float:
        """
        Signed angle in radians from this point towards ``other``.

        Computed as ``atan2(dx, dy)``, so 0 points along +y (screen down)
        and pi/2 points along +x.
        """
        return math.atan2(other.x - self.x, other.y - self.y)

    def sin_angle_between(self, other: Vec2) -> float:
        """Opposite over hypotenuse, negated for the y-up velocity frame."""
        return -1.0 * ((other.y - self.y) / self.distance(other))

    def cos_angle_between(self, other: Vec2) -> float:
        """Adjacent over hypotenuse."""
        return (other.x - self.x) / self.distance(other)

    def tan_angle_between(self, other: Vec2) -> float:
        return self.sin_angle_between(other) / self.cos_angle_between(other)

    # -------------------------------------------------------------------------
    # Scaling
    # -------------------------------------------------------------------------

    def normalize(self) -> Vec2:
        """
        Unit vector in the same direction.

        A zero vector normalizes to itself so NaN never reaches body state.
        """
        mag = self.magnitude()
        if mag == 0.0:
            return self
        return Vec2(self.x / mag, self.y / mag)

    def scale(self, factor: float) -> Vec2:
        return Vec2(self.x * factor, self.y * factor)

    def clamp(self, min_mag: float, max_mag: float) -> Vec2:
        """
        Limit the magnitude to ``[min_mag, max_mag]`` keeping the direction.

        Only one bound is ever applied: below ``min_mag`` the vector is
        stretched to ``min_mag``, otherwise above ``max_mag`` it is shrunk
        to ``max_mag``.
        """
        mag = self.magnitude()
        if mag < min_mag:
            return self.normalize().scale(min_mag)
        if mag > max_mag:
            return self.normalize().scale(max_mag)
        return self

    # -------------------------------------------------------------------------
    # Static helpers
    # -------------------------------------------------------------------------

    @staticmethod
    def add(v1: Vec2, v2: Vec2) -> Vec2:
        return Vec2(v1.x + v2.x, v1.y + v2.y)

    @staticmethod
    def distance_squared(v1: Vec2, v2: Vec2) -> float:
        """Squared distance between two points (hot path, no sqrt)."""
        dx = v2.x - v1.x
        dy = v2.y - v1.y
        return dx * dx + dy * dy
