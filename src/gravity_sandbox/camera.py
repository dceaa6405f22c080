# MIT License (see LICENSE)
"""
Camera state and world/screen mapping.

The camera is an immutable value; every update returns a new state so the
pan/zoom math can be tested without a window.

Transform:
    screen = world · zoom + pan_offset
    world  = (screen - pan_offset) / zoom
All pointer input is mapped through ``screen_to_world`` before any hit
test or body placement.
"""
from __future__ import annotations
from dataclasses import dataclass, replace

from .input import ButtonState
from .types import Body
from .vector import Vec2


@dataclass(frozen=True)
class CameraState:
    """
    View transform plus pointer-drag bookkeeping.

    Attributes:
        pan_offset: Screen position of the world origin.
        zoom: Screen pixels per world unit (> 0).
        is_dragging: A pan drag is in progress.
        drag_anchor: Pointer position (screen) at the last drag update.
        center_locked_id: Id of the body being followed, if any.
    """
    pan_offset: Vec2 = Vec2()
    zoom: float = 1.0
    is_dragging: bool = False
    drag_anchor: Vec2 = Vec2()
    center_locked_id: int | None = None

    def __post_init__(self) -> None:
        if not self.zoom > 0:
            raise ValueError(f"zoom must be positive, got {self.zoom}")


def world_to_screen(cam: CameraState, p: Vec2) -> Vec2:
    return Vec2(p.x * cam.zoom + cam.pan_offset.x, p.y * cam.zoom + cam.pan_offset.y)


def screen_to_world(cam: CameraState, p: Vec2) -> Vec2:
    return Vec2((p.x - cam.pan_offset.x) / cam.zoom, (p.y - cam.pan_offset.y) / cam.zoom)


def update_pan(cam: CameraState, pointer: Vec2, button: ButtonState) -> CameraState:
    """
    Advance a pointer pan drag by one frame.

    The first held frame only records the anchor. Every frame while the
    drag is active the pointer delta since the anchor is added to the pan
    offset and the anchor moves to the pointer, so the pan is a running sum
    of per-frame deltas. The release frame still applies its delta.

    Args:
        cam: Current camera.
        pointer: Pointer position in screen space.
        button: State of the pan button this frame.
    """
    if button.held and not cam.is_dragging:
        cam = replace(cam, is_dragging=True, drag_anchor=pointer)

    if cam.is_dragging:
        delta = pointer - cam.drag_anchor
        cam = replace(cam, pan_offset=cam.pan_offset + delta, drag_anchor=pointer)

    if button.released:
        cam = replace(cam, is_dragging=False)
    return cam


def update_zoom(cam: CameraState, zoom_in: bool, zoom_out: bool, rate: float, dt: float) -> CameraState:
    """
    Continuous exponential zoom. Zoom-in wins if both keys are held.
    """
    if zoom_in:
        velocity = rate
    elif zoom_out:
        velocity = -rate
    else:
        return cam
    factor = 1.0 + velocity * dt
    if factor <= 0:
        # A frame longer than 1/rate seconds would flip the view; hold instead.
        return cam
    return replace(cam, zoom=cam.zoom * factor)


def update_keyboard_pan(
    cam: CameraState,
    up: bool,
    down: bool,
    left: bool,
    right: bool,
    speed: float,
    dt: float,
) -> CameraState:
    """
    Pan the view with held direction keys at ``speed`` screen px/s.

    Up moves the view up (the world slides down), and so on. Opposite keys
    resolve up-over-down and right-over-left.
    """
    vx = vy = 0.0
    if up:
        vy = speed
    elif down:
        vy = -speed
    if right:
        vx = -speed
    elif left:
        vx = speed
    if vx == 0.0 and vy == 0.0:
        return cam
    return replace(cam, pan_offset=cam.pan_offset + Vec2(vx * dt, vy * dt))


def center_on(cam: CameraState, body: Body, screen_center: Vec2) -> CameraState:
    """
    Place ``body`` at ``screen_center`` at the current zoom.

    The offset is recomputed from scratch, never accumulated.
    """
    pan = Vec2(screen_center.x - body.position.x * cam.zoom,
               screen_center.y - body.position.y * cam.zoom)
    return replace(cam, pan_offset=pan, center_locked_id=body.id)


def apply_center_lock(cam: CameraState, locked: Body | None, screen_center: Vec2) -> CameraState:
    """
    Follow ``locked`` unless a pan drag is in progress.

    Args:
        cam: Current camera.
        locked: The single center-locked body, or None.
        screen_center: Middle of the view in screen pixels.
    """
    if locked is None:
        if cam.center_locked_id is None:
            return cam
        return replace(cam, center_locked_id=None)
    if cam.is_dragging:
        return cam
    return center_on(cam, locked, screen_center)
