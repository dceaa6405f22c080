# MIT License (see LICENSE)
"""
Time stepping for sandbox bodies.

Semi-implicit (symplectic) Euler: velocity is advanced first with the
frame's acceleration, then position with the new velocity. Position y is
screen-down while velocity y is up, so the y update subtracts.

Reference:
    https://en.wikipedia.org/wiki/Semi-implicit_Euler_method
"""
from __future__ import annotations

from ..types import Body
from ..vector import Vec2


def euler_step(body: Body, dt: float) -> None:
    """
    Advance one active body by ``dt`` seconds (modified in-place).

    Inactive bodies are left untouched.
    """
    if not body.active:
        return
    vel = Vec2(body.velocity.x + body.acceleration.x * dt,
               body.velocity.y + body.acceleration.y * dt)
    body.velocity = vel
    body.position = Vec2(body.position.x + vel.x * dt,
                         body.position.y - vel.y * dt)


def integrate_all(bodies: list[Body], dt: float) -> None:
    for b in bodies:
        euler_step(b, dt)
