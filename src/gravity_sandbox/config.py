# MIT License (see LICENSE)
"""
Runtime configuration.

``SandboxConfig`` carries the tuning knobs the core reads every frame.
``KeyBindings`` maps logical actions to physical key names and is only
consumed by a frontend; the core never looks at physical keys.
"""
from __future__ import annotations
from dataclasses import dataclass, field

from . import colors
from .colors import Color
from .constants import (
    GRAVITATIONAL_CONSTANT,
    ZOOM_RATE,
    PAN_SPEED,
    MIN_FPS,
    VELOCITY_ARROW_SCALE,
    VECTOR_PICK_RADIUS,
    NEW_BODY_MASS,
    NEW_BODY_RADIUS,
    MASS_INCREMENT,
)
from .input import Action


@dataclass(frozen=True)
class SandboxConfig:
    """
    Tuning parameters for physics, camera and interaction.

    Attributes:
        gravitational_constant: G in sandbox units (default 100000).
        zoom_rate: Fractional zoom change per second while a zoom key is held.
        pan_speed: Keyboard pan speed in screen pixels per second.
        min_fps: Below this measured frame rate integration is skipped.
        velocity_arrow_scale: Arrow length per unit speed (world units).
        vector_pick_radius: Grab radius around an arrow tip (world units).
        new_body_mass: Mass of bodies placed with the add modifier.
        new_body_radius: Radius of bodies placed with the add modifier.
        new_body_color: Color of bodies placed with the add modifier.
        mass_increment: Mass added per add-mass click.
        heartbeat_interval: Seconds between elapsed-time debug records.
    """
    gravitational_constant: float = GRAVITATIONAL_CONSTANT
    zoom_rate: float = ZOOM_RATE
    pan_speed: float = PAN_SPEED
    min_fps: float = MIN_FPS
    velocity_arrow_scale: float = VELOCITY_ARROW_SCALE
    vector_pick_radius: float = VECTOR_PICK_RADIUS
    new_body_mass: float = NEW_BODY_MASS
    new_body_radius: float = NEW_BODY_RADIUS
    new_body_color: Color = colors.WHITE
    mass_increment: float = MASS_INCREMENT
    heartbeat_interval: float = 1.0

    def __post_init__(self) -> None:
        if self.velocity_arrow_scale <= 0:
            raise ValueError(f"velocity_arrow_scale must be positive, got {self.velocity_arrow_scale}")
        if self.vector_pick_radius <= 0:
            raise ValueError(f"vector_pick_radius must be positive, got {self.vector_pick_radius}")
        if self.new_body_radius <= 0:
            raise ValueError(f"new_body_radius must be positive, got {self.new_body_radius}")
        if self.new_body_mass <= 0:
            raise ValueError(f"new_body_mass must be positive, got {self.new_body_mass}")
        if self.mass_increment < 0:
            raise ValueError(f"mass_increment must be non-negative, got {self.mass_increment}")
        if self.zoom_rate < 0 or self.pan_speed < 0 or self.min_fps < 0:
            raise ValueError("zoom_rate, pan_speed and min_fps must be non-negative")


def _default_bindings() -> dict[Action, str]:
    return {
        Action.ZOOM_IN: "x",
        Action.ZOOM_OUT: "left shift",
        Action.PAUSE: "space",
        Action.EXIT: "end",
        Action.ADD_BODY: "a",
        Action.DELETE_BODY: "d",
        Action.ADD_MASS: "m",
        Action.TOGGLE_VECTORS: "v",
        Action.CENTER_BODY: "c",
        Action.PAN_UP: "up",
        Action.PAN_DOWN: "down",
        Action.PAN_LEFT: "left",
        Action.PAN_RIGHT: "right",
    }


@dataclass(frozen=True)
class KeyBindings:
    """
    Action -> physical key name (as understood by the frontend).

    Unbound actions are simply never reported.
    """
    keys: dict[Action, str] = field(default_factory=_default_bindings)

    def key_for(self, action: Action) -> str | None:
        return self.keys.get(action)

    def with_binding(self, action: Action, key: str) -> KeyBindings:
        """Return a copy with ``action`` rebound to ``key``."""
        keys = dict(self.keys)
        keys[action] = key
        return KeyBindings(keys=keys)
