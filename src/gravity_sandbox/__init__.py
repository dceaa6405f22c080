# MIT License (see LICENSE)
"""
gravity_sandbox - An interactive 2D N-body gravity sandbox.

Circular bodies attract each other with inverse-square gravity and merge
inelastically when they overlap. The user pans and zooms the view, adds and
deletes bodies, adds mass, follows a body with the camera, and drags velocity
arrows while paused.

Main entry points:
    - Sandbox: Per-frame controller (input -> edits -> physics -> camera).
    - Simulation: Body collection, gravity, merging and integration.
    - Body: A star, planet or moon.
    - Vec2: Immutable 2D vector.
    - CameraState: World/screen transform.

Submodules:
    - core: Pairwise gravity, integrators, conserved quantities.
    - collision: Inelastic merge resolution.
    - renderer: Drawing interface and text/buffer adapters.
    - frontend: pygame desktop application (``app`` extra).

Example:
    from gravity_sandbox import Simulation

    sim = Simulation.seeded()
    for _ in range(240):
        sim.step(1 / 240)
"""
from .vector import Vec2
from .types import Body
from .simulation import Simulation, seed_bodies
from .camera import CameraState, world_to_screen, screen_to_world
from .config import SandboxConfig, KeyBindings
from .input import Action, Button, ButtonState, KeyState, FrameInput
from .interaction import InteractionController, Edit
from .sandbox import Sandbox

__all__ = [
    # Core simulation
    "Vec2",
    "Body",
    "Simulation",
    "seed_bodies",
    # Camera
    "CameraState",
    "world_to_screen",
    "screen_to_world",
    # Configuration
    "SandboxConfig",
    "KeyBindings",
    # Input and interaction
    "Action",
    "Button",
    "ButtonState",
    "KeyState",
    "FrameInput",
    "InteractionController",
    "Edit",
    "Sandbox",
]
