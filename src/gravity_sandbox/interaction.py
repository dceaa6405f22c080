# MIT License (see LICENSE)
"""
Pointer editing of the simulation.

A primary click performs at most one edit per frame, chosen by the held
modifier in fixed priority order:
    add body > delete body > add mass > toggle center > velocity drag
Velocity dragging is the unmodified fallback and only works while the
simulation is paused with vectors shown; editing live velocities would
fight the integrator.

Drag state machine:
    Idle --press on an arrow tip--> Dragging(body_id)
    Dragging --held--> tip follows the pointer (velocity untouched)
    Dragging --release--> velocity rebuilt from the tip, back to Idle
The drag refers to its body by id, so compaction reordering the body list
mid-drag is harmless; if the body disappears the drag is dropped.
"""
from __future__ import annotations
import logging
from dataclasses import dataclass
from enum import Enum

from .camera import CameraState, screen_to_world
from .config import SandboxConfig
from .input import Action, Button, FrameInput
from .simulation import Simulation
from .vector import Vec2

logger = logging.getLogger(__name__)


class Edit(Enum):
    """What a frame's interaction did."""
    ADD_BODY = "add_body"
    DELETE_BODY = "delete_body"
    ADD_MASS = "add_mass"
    TOGGLE_CENTER = "toggle_center"
    DRAG_START = "drag_start"
    DRAG_COMMIT = "drag_commit"
    DRAG_CANCEL = "drag_cancel"


@dataclass(frozen=True)
class Idle:
    pass


@dataclass(frozen=True)
class Dragging:
    body_id: int


DragState = Idle | Dragging

IDLE = Idle()


class InteractionController:
    """
    Interprets polled input against the camera and simulation.

    Attributes:
        config: Tuning for new bodies, mass increments and arrow picking.
        state: Current drag state.
    """

    def __init__(self, config: SandboxConfig | None = None):
        self.config = config or SandboxConfig()
        self.state: DragState = IDLE

    @property
    def dragging_id(self) -> int | None:
        """Id of the body whose arrow is being dragged, if any."""
        if isinstance(self.state, Dragging):
            return self.state.body_id
        return None

    def update(
        self,
        frame: FrameInput,
        camera: CameraState,
        sim: Simulation,
        paused: bool,
        show_vectors: bool,
    ) -> Edit | None:
        """
        Apply this frame's pointer input.

        Args:
            frame: Polled input.
            camera: Camera used to map the pointer into world space.
            sim: Simulation to edit.
            paused: Whether integration is paused.
            show_vectors: Whether velocity arrows are displayed.

        Returns:
            The edit performed, or None.
        """
        world = screen_to_world(camera, frame.pointer)
        primary = frame.button(Button.PRIMARY)
        can_drag = paused and show_vectors

        if primary.pressed and isinstance(self.state, Idle):
            edit = self._click(frame, world, sim, can_drag)
            if edit is not Edit.DRAG_START:
                return edit
            return self._drag(primary.released, world, sim, can_drag) or edit

        if isinstance(self.state, Dragging):
            return self._drag(primary.released, world, sim, can_drag)
        return None

    def _click(self, frame: FrameInput, world: Vec2, sim: Simulation, can_drag: bool) -> Edit | None:
        cfg = self.config
        if frame.key(Action.ADD_BODY).held:
            sim.add_body_at(world, mass=cfg.new_body_mass, radius=cfg.new_body_radius,
                            color=cfg.new_body_color)
            return Edit.ADD_BODY
        if frame.key(Action.DELETE_BODY).held:
            sim.delete_body_at(world)
            return Edit.DELETE_BODY
        if frame.key(Action.ADD_MASS).held:
            sim.add_mass_at(world, cfg.mass_increment)
            return Edit.ADD_MASS
        if frame.key(Action.CENTER_BODY).held:
            sim.toggle_center_at(world)
            return Edit.TOGGLE_CENTER
        if not can_drag:
            return None

        pick_r2 = cfg.vector_pick_radius * cfg.vector_pick_radius
        picked = None
        # Last match wins when tips overlap.
        for b in sim.bodies:
            if b.active and Vec2.distance_squared(b.velocity_arrow_end, world) < pick_r2:
                picked = b
        if picked is None:
            return None
        self.state = Dragging(picked.id)
        logger.debug("started velocity drag on body %d", picked.id)
        return Edit.DRAG_START

    def _drag(self, released: bool, world: Vec2, sim: Simulation, can_drag: bool) -> Edit | None:
        body = sim.find(self.state.body_id)
        if body is None or not can_drag:
            self.state = IDLE
            return Edit.DRAG_CANCEL

        body.velocity_arrow_end = world
        if not released:
            return None

        body.velocity = body.velocity_from_arrow(world, self.config.velocity_arrow_scale)
        self.state = IDLE
        logger.debug("body %d velocity set to (%.2f, %.2f)", body.id, body.velocity.x, body.velocity.y)
        return Edit.DRAG_COMMIT
