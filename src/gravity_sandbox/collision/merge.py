# MIT License (see LICENSE)
"""
Perfectly inelastic merging of colliding bodies.

When two bodies overlap the heavier one absorbs the lighter:
  m' = m1 + m2
  v' = (m1·v1 + m2·v2) / (m1 + m2)     (momentum conserved per axis)
  r' = sqrt(r1² + r2²)                  (areas add, not volumes)
The absorbed body is deactivated; removing it from the list is left to
compaction so indices stay valid while pairs are being applied.
"""
from __future__ import annotations
import logging
import math

from ..types import Body
from ..vector import Vec2

logger = logging.getLogger(__name__)


def resolve_collision(bodies: list[Body], i1: int, i2: int) -> int:
    """
    Merge ``bodies[i1]`` and ``bodies[i2]`` in place.

    The survivor is the heavier body. On equal mass ``i1`` survives and
    ``i2`` is deactivated.

    Args:
        bodies: Body list (not reordered).
        i1: Index of the first body.
        i2: Index of the second body.

    Returns:
        Index of the surviving body.
    """
    a = bodies[i1]
    b = bodies[i2]
    if a.mass >= b.mass:
        keep, gone = i1, i2
    else:
        keep, gone = i2, i1

    total = a.mass + b.mass
    if total > 0:
        velocity = Vec2(
            (a.mass * a.velocity.x + b.mass * b.velocity.x) / total,
            (a.mass * a.velocity.y + b.mass * b.velocity.y) / total,
        )
    else:
        # Massless pair carries no momentum; survivor keeps its velocity.
        velocity = bodies[keep].velocity
    radius = math.sqrt(a.radius * a.radius + b.radius * b.radius)

    survivor = bodies[keep]
    absorbed = bodies[gone]
    survivor.velocity = velocity
    survivor.radius = radius
    survivor.mass = total
    # Follow-camera stays on whatever the locked body turned into.
    survivor.is_camera_center = survivor.is_camera_center or absorbed.is_camera_center
    absorbed.deactivate()

    logger.debug("merged body %d into %d (mass %.4g, radius %.4g)",
                 absorbed.id, survivor.id, total, radius)
    return keep


def merge_pairs(bodies: list[Body], pairs: list[tuple[int, int]]) -> int:
    """
    Apply merges for detected pairs in order.

    A pair is skipped once either member has been absorbed earlier in the
    same pass; if the survivor still overlaps the third body it merges on
    the next frame.

    Returns:
        Number of merges performed.
    """
    merged = 0
    for i1, i2 in pairs:
        if not (bodies[i1].active and bodies[i2].active):
            continue
        resolve_collision(bodies, i1, i2)
        merged += 1
    return merged
