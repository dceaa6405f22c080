# MIT License (see LICENSE)
"""
The per-frame controller tying simulation, camera and input together.

Frame order (``Sandbox.update``):
    1. Toggles: pause, vector display, exit.
    2. Pointer edits through the InteractionController (camera from the
       previous frame maps the pointer).
    3. Gravity and collisions, always, so arrows stay live while paused.
    4. Integration, unless paused or the frame rate is below ``min_fps``.
    5. Camera: pointer pan (a new drag clears center-lock), zoom,
       keyboard pan, then center-lock recentering.
    6. Velocity arrow tips refreshed, except the one being dragged.
Rendering happens afterwards through a ``RendererAdapter``.
"""
from __future__ import annotations
import logging
from dataclasses import dataclass, field

from .camera import (
    CameraState,
    update_pan,
    update_zoom,
    update_keyboard_pan,
    apply_center_lock,
)
from .config import SandboxConfig
from .input import Action, Button, FrameInput
from .interaction import Edit, InteractionController
from .profiler import Profiler, section
from .simulation import Simulation

logger = logging.getLogger(__name__)


@dataclass
class Sandbox:
    """
    Interactive N-body sandbox state.

    Attributes:
        config: Tuning parameters.
        simulation: The N-body world (seeded with one sun/planet/moon
                    system when omitted).
        camera: Current view.
        profiler: Optional Profiler shared with the simulation.
        paused: Integration is suspended.
        show_vectors: Velocity arrows are drawn and draggable.
        running: Cleared by the exit action.
        time: Seconds of wall-clock frames processed.
        last_edit: Edit performed by the most recent frame, if any.
        integrated: Whether the most recent frame advanced the bodies.
    """
    config: SandboxConfig = field(default_factory=SandboxConfig)
    simulation: Simulation | None = None
    camera: CameraState = field(default_factory=CameraState)
    profiler: Profiler | None = None
    paused: bool = False
    show_vectors: bool = False
    running: bool = True
    time: float = 0.0
    last_edit: Edit | None = None
    integrated: bool = False

    def __post_init__(self) -> None:
        if self.simulation is None:
            self.simulation = Simulation.seeded(
                gravitational_constant=self.config.gravitational_constant,
                profiler=self.profiler,
            )
        self.controller = InteractionController(self.config)
        self._next_heartbeat = self.config.heartbeat_interval
        self.simulation.refresh_velocity_arrows(self.config.velocity_arrow_scale)

    def update(self, frame: FrameInput) -> None:
        """
        Process one frame of input and advance the world.

        Args:
            frame: Polled input, elapsed time and frame rate.
        """
        if not self.running:
            return
        cfg = self.config
        sim = self.simulation

        self.time += frame.dt
        if self.time > self._next_heartbeat:
            self._next_heartbeat += cfg.heartbeat_interval
            logger.debug("%.0f seconds, %d bodies", self.time, len(sim))

        if frame.key(Action.PAUSE).pressed:
            self.paused = not self.paused
        if frame.key(Action.TOGGLE_VECTORS).pressed:
            self.show_vectors = not self.show_vectors
        if frame.key(Action.EXIT).pressed:
            self.running = False
            return

        self.last_edit = self.controller.update(frame, self.camera, sim, self.paused, self.show_vectors)

        sim.update_gravity()

        self.integrated = not self.paused and frame.fps >= cfg.min_fps
        if self.integrated:
            sim.integrate(frame.dt)
        elif not self.paused:
            logger.debug("integration skipped at %.1f fps", frame.fps)

        with section(self.profiler, "camera"):
            self._update_camera(frame)

        sim.refresh_velocity_arrows(cfg.velocity_arrow_scale, skip_id=self.controller.dragging_id)

    def _update_camera(self, frame: FrameInput) -> None:
        cfg = self.config
        cam = self.camera
        was_dragging = cam.is_dragging

        cam = update_pan(cam, frame.pointer, frame.button(Button.SECONDARY))
        if cam.is_dragging and not was_dragging:
            # Dragging always wins over center-lock.
            self.simulation.clear_center_lock()

        cam = update_zoom(cam, frame.key(Action.ZOOM_IN).held, frame.key(Action.ZOOM_OUT).held,
                          cfg.zoom_rate, frame.dt)
        cam = update_keyboard_pan(
            cam,
            frame.key(Action.PAN_UP).held,
            frame.key(Action.PAN_DOWN).held,
            frame.key(Action.PAN_LEFT).held,
            frame.key(Action.PAN_RIGHT).held,
            cfg.pan_speed,
            frame.dt,
        )
        self.camera = apply_center_lock(cam, self.simulation.center_body(), frame.screen_center)
