# MIT License (see LICENSE)
"""
Polled input snapshot handed to the sandbox once per frame.

The presentation layer owns devices and key bindings; the core only sees
logical buttons and actions with pressed/held/released edges.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum

from .vector import Vec2


class Button(Enum):
    """Logical pointer buttons."""
    PRIMARY = 0
    SECONDARY = 1
    TERTIARY = 2


class Action(Enum):
    """Logical key actions. Physical keys are bound in ``KeyBindings``."""
    ZOOM_IN = "zoom_in"
    ZOOM_OUT = "zoom_out"
    PAUSE = "pause"
    EXIT = "exit"
    ADD_BODY = "add_body"
    DELETE_BODY = "delete_body"
    ADD_MASS = "add_mass"
    TOGGLE_VECTORS = "toggle_vectors"
    CENTER_BODY = "center_body"
    PAN_UP = "pan_up"
    PAN_DOWN = "pan_down"
    PAN_LEFT = "pan_left"
    PAN_RIGHT = "pan_right"


@dataclass(frozen=True)
class ButtonState:
    """
    Edge and level state of one pointer button for a single frame.

    Attributes:
        pressed: Went down this frame.
        held: Is down this frame (true on the pressed frame too).
        released: Went up this frame.
    """
    pressed: bool = False
    held: bool = False
    released: bool = False


@dataclass(frozen=True)
class KeyState:
    pressed: bool = False
    held: bool = False


_UP = ButtonState()
_KEY_UP = KeyState()


@dataclass(frozen=True)
class FrameInput:
    """
    Everything the core reads from the outside world for one frame.

    Attributes:
        pointer: Pointer position in screen space.
        buttons: State per logical button; missing buttons are up.
        keys: State per action; missing actions are up.
        dt: Seconds elapsed since the previous frame.
        fps: Measured frame rate.
        screen_size: (width, height) of the view in pixels.
    """
    pointer: Vec2 = Vec2()
    buttons: dict[Button, ButtonState] = field(default_factory=dict)
    keys: dict[Action, KeyState] = field(default_factory=dict)
    dt: float = 0.0
    fps: float = 60.0
    screen_size: tuple[float, float] = (900.0, 900.0)

    def button(self, button: Button) -> ButtonState:
        return self.buttons.get(button, _UP)

    def key(self, action: Action) -> KeyState:
        return self.keys.get(action, _KEY_UP)

    @property
    def screen_center(self) -> Vec2:
        w, h = self.screen_size
        return Vec2(w / 2.0, h / 2.0)
