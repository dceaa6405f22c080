# MIT License (see LICENSE)
"""
The N-body engine: body collection, gravity, merging and integration.

The Simulation class owns the only list of bodies. Each frame:
    1. update_gravity(): reset accelerations, accumulate pairwise gravity
       on a snapshot of the active bodies, detect overlaps on the same
       snapshot, apply merges, then compact once.
    2. integrate(dt): advance velocity then position (skipped by the
       caller while paused or when the frame rate is too low).

Bodies are never removed directly. Deleting or merging marks them inactive
and compaction swaps each inactive body with the last element and pops it,
so list order is not stable across frames. Anything that must refer to a
body across frames keeps its ``id``.
"""
from __future__ import annotations
import logging
from dataclasses import dataclass, field

import numpy as np

from . import colors
from .colors import Color
from .constants import (
    GRAVITATIONAL_CONSTANT,
    NEW_BODY_MASS,
    NEW_BODY_RADIUS,
    MASS_INCREMENT,
    SEED_SYSTEM_SPACING,
)
from .types import Body
from .vector import Vec2
from .util import stack_vectors, to_vec
from .profiler import Profiler, section
from .core.forces import separation, gravitational_accelerations, overlapping_pairs
from .core.integrators import integrate_all
from .collision.merge import merge_pairs

logger = logging.getLogger(__name__)


def seed_bodies(copies: int = 1) -> list[Body]:
    """
    Build the starting sun/planet/moon system.

    Args:
        copies: 1 for a single system; 3 adds copies shifted ±1000 in x.

    Returns:
        Fresh bodies (ids unassigned).
    """
    offsets = [0.0, SEED_SYSTEM_SPACING, -SEED_SYSTEM_SPACING][:max(1, copies)]
    bodies = []
    for dx in offsets:
        bodies.append(Body(position=(750 + dx, 400), velocity=(0, 150),
                           mass=1, radius=9, color=colors.BLUE))
        bodies.append(Body(position=(400 + dx, 400), velocity=(0, 0),
                           mass=100, radius=35, color=colors.YELLOW))
        bodies.append(Body(position=(790 + dx, 400), velocity=(0, 100),
                           mass=0.01, radius=3, color=colors.GREY))
    return bodies


@dataclass
class Simulation:
    """
    N-body gravity world.

    Attributes:
        gravitational_constant: G in sandbox units.
        profiler: Optional Profiler for timing statistics.
        bodies: The body list. Order is not meaningful.
    """
    gravitational_constant: float = GRAVITATIONAL_CONSTANT
    profiler: Profiler | None = None
    bodies: list[Body] = field(default_factory=list)

    def __post_init__(self) -> None:
        self._next_id = 1
        initial, self.bodies = self.bodies, []
        for b in initial:
            self.add_body(b)

    @classmethod
    def seeded(cls, copies: int = 1, **kwargs) -> Simulation:
        """Create a simulation populated with ``seed_bodies(copies)``."""
        return cls(bodies=seed_bodies(copies), **kwargs)

    # -------------------------------------------------------------------------
    # Collection management
    # -------------------------------------------------------------------------

    def add_body(self, body: Body) -> int:
        """
        Add a body and assign it a unique ID.

        Returns:
            The assigned body ID.
        """
        body.id = self._next_id
        self._next_id += 1
        self.bodies.append(body)
        return body.id

    def find(self, body_id: int) -> Body | None:
        """Active body with ``body_id``, or None if it no longer exists."""
        for b in self.bodies:
            if b.id == body_id and b.active:
                return b
        return None

    def get(self, body_id: int) -> Body:
        body = self.find(body_id)
        if body is None:
            raise KeyError(f"No active body with id {body_id}")
        return body

    def active_bodies(self) -> list[Body]:
        return [b for b in self.bodies if b.active]

    def __len__(self) -> int:
        return sum(1 for b in self.bodies if b.active)

    def compact(self) -> int:
        """
        Remove inactive bodies by swapping each with the last element.

        Remaining bodies keep all their state; only their list positions
        may change.

        Returns:
            Number of bodies removed.
        """
        bodies = self.bodies
        removed = 0
        i = 0
        while i < len(bodies):
            if bodies[i].active:
                i += 1
                continue
            # The swapped-in body lands on i and is checked next iteration.
            bodies[i] = bodies[-1]
            bodies.pop()
            removed += 1
        if removed:
            logger.debug("compacted %d inactive bodies, %d remain", removed, len(bodies))
        return removed

    # -------------------------------------------------------------------------
    # Physics
    # -------------------------------------------------------------------------

    def update_gravity(self) -> int:
        """
        Recompute accelerations and resolve collisions for all active bodies.

        Runs every frame, paused or not, so velocity arrows and merges stay
        current while the integrator is idle. Forces and overlaps are both
        evaluated on the same pre-merge snapshot; merges and compaction
        are applied afterwards.

        Returns:
            Number of merges performed.
        """
        prof = self.profiler
        active_idx = [i for i, b in enumerate(self.bodies) if b.active]
        active = [self.bodies[i] for i in active_idx]

        with section(prof, "gravity"):
            for b in active:
                b.acceleration = Vec2()
            if len(active) < 2:
                self.compact()
                return 0

            positions = stack_vectors(b.position for b in active)
            masses = np.array([b.mass for b in active], dtype=np.float64)
            sep = separation(positions)
            acc = gravitational_accelerations(sep, masses, self.gravitational_constant)
            for b, row in zip(active, acc):
                b.acceleration = to_vec(row)

        with section(prof, "collisions"):
            radii = np.array([b.radius for b in active], dtype=np.float64)
            pairs = [(active_idx[i], active_idx[j]) for i, j in overlapping_pairs(sep, radii)]
            merged = merge_pairs(self.bodies, pairs)

        with section(prof, "compaction"):
            self.compact()
        return merged

    def integrate(self, dt: float) -> None:
        """Advance velocity and position of every active body by ``dt``."""
        with section(self.profiler, "integrate"):
            integrate_all(self.bodies, dt)

    def step(self, dt: float) -> int:
        """
        One unpaused frame: gravity/collisions followed by integration.

        Returns:
            Number of merges performed.
        """
        merged = self.update_gravity()
        self.integrate(dt)
        return merged

    # -------------------------------------------------------------------------
    # Editing (all positions in world space)
    # -------------------------------------------------------------------------

    def add_body_at(
        self,
        world_pos: Vec2,
        mass: float = NEW_BODY_MASS,
        radius: float = NEW_BODY_RADIUS,
        color: Color = colors.WHITE,
    ) -> Body:
        """Place a new body at rest at ``world_pos``."""
        body = Body(position=world_pos, velocity=Vec2(), mass=mass, radius=radius, color=color)
        self.add_body(body)
        logger.debug("added body %d at (%.1f, %.1f)", body.id, world_pos.x, world_pos.y)
        return body

    def delete_body_at(self, world_pos: Vec2) -> int:
        """
        Delete every body whose hit test contains ``world_pos``.

        Returns:
            Number of bodies deleted.
        """
        deleted = 0
        for b in self.bodies:
            if b.active and b.contains(world_pos):
                b.deactivate()
                deleted += 1
                logger.debug("deleted body %d", b.id)
        self.compact()
        return deleted

    def add_mass_at(self, world_pos: Vec2, increment: float = MASS_INCREMENT) -> int:
        """
        Add ``increment`` to the mass of every body hit at ``world_pos``.

        Returns:
            Number of bodies changed.
        """
        changed = 0
        for b in self.bodies:
            if b.active and b.contains(world_pos):
                b.mass += increment
                changed += 1
        return changed

    def toggle_center_at(self, world_pos: Vec2) -> list[Body]:
        """
        Flip center-lock on hit bodies and clear it everywhere else.

        Returns:
            The bodies that were hit.
        """
        hit = []
        for b in self.bodies:
            if b.active and b.contains(world_pos):
                b.is_camera_center = not b.is_camera_center
                hit.append(b)
            else:
                b.is_camera_center = False
        return hit

    def clear_center_lock(self) -> None:
        for b in self.bodies:
            b.is_camera_center = False

    def center_body(self) -> Body | None:
        """The center-locked body if exactly one is flagged, else None."""
        locked = [b for b in self.bodies if b.active and b.is_camera_center]
        if len(locked) == 1:
            return locked[0]
        return None

    def query_point(self, world_pos: Vec2) -> Body | None:
        """Last body (in list order) whose hit test contains ``world_pos``."""
        found = None
        for b in self.bodies:
            if b.active and b.contains(world_pos):
                found = b
        return found

    def refresh_velocity_arrows(self, scale: float, skip_id: int | None = None) -> None:
        """
        Recompute every arrow tip from the current velocity.

        Args:
            scale: Arrow length per unit speed.
            skip_id: Body whose tip is being dragged and must be kept.
        """
        for b in self.bodies:
            if b.active and b.id != skip_id:
                b.velocity_arrow_end = b.arrow_end(scale)
