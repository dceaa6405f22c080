# MIT License (see LICENSE)
"""
Desktop frontend built on pygame.

Owns the window, polls devices into a ``FrameInput`` once per frame and
draws through ``PygameRenderer``. Physical keys come from ``KeyBindings``.

Run:
    gravity-sandbox --systems 3 --log-level DEBUG
"""
from __future__ import annotations
import argparse
import logging
import math
import sys

import pygame

from ..colors import Color, BLACK, WHITE
from ..config import KeyBindings, SandboxConfig
from ..input import Action, Button, ButtonState, FrameInput, KeyState
from ..profiler import Profiler
from ..renderer.adapter import RendererAdapter, status_text
from ..sandbox import Sandbox
from ..simulation import Simulation
from ..util import profiling_enabled
from ..vector import Vec2

logger = logging.getLogger(__name__)

PAUSED_COLOR: Color = (255, 200, 0)


class PygameRenderer(RendererAdapter):
    """Draws onto a pygame display surface."""

    def __init__(self, screen: pygame.Surface, font: pygame.font.Font | None = None):
        self.screen = screen
        self.font = font
        self.status = ""
        self._paused = False

    def begin_frame(self, time: float, paused: bool) -> None:
        self._paused = paused
        self.screen.fill(BLACK)

    def fill_circle(self, center: Vec2, radius: float, color: Color) -> None:
        w, h = self.screen.get_size()
        r = max(1, int(radius))
        # Off-screen coordinates can exceed what SDL accepts.
        if center.x + r < 0 or center.y + r < 0 or center.x - r > w or center.y - r > h:
            return
        pygame.draw.circle(self.screen, color, (int(center.x), int(center.y)), r)

    def draw_line(self, start: Vec2, end: Vec2, color: Color) -> None:
        pygame.draw.line(self.screen, color, (start.x, start.y), (end.x, end.y), 1)

    def end_frame(self) -> None:
        if self.font is not None:
            if self.status:
                self.screen.blit(self.font.render(self.status, True, WHITE), (10, 10))
            if self._paused:
                text = self.font.render("PAUSED", True, PAUSED_COLOR)
                self.screen.blit(text, text.get_rect(center=(self.screen.get_width() / 2, 25)))
        pygame.display.flip()


class InputPoller:
    """
    Turns pygame's level state into per-frame press/release edges.

    Args:
        bindings: Action -> physical key name (pygame key names).
    """

    def __init__(self, bindings: KeyBindings):
        self.codes: dict[Action, int] = {}
        for action, name in bindings.keys.items():
            try:
                self.codes[action] = pygame.key.key_code(name)
            except ValueError:
                logger.warning("unknown key name %r for %s; action left unbound", name, action.value)
        self._prev_buttons = (False, False, False)
        self._prev_keys: dict[Action, bool] = {}

    def poll(self, dt: float, fps: float, screen_size: tuple[float, float]) -> FrameInput:
        held_buttons = pygame.mouse.get_pressed(3)
        # pygame order is (left, middle, right); the pan button is the right one.
        order = (Button.PRIMARY, Button.TERTIARY, Button.SECONDARY)
        buttons = {}
        for button, now, before in zip(order, held_buttons, self._prev_buttons):
            buttons[button] = ButtonState(pressed=now and not before, held=now, released=before and not now)
        self._prev_buttons = tuple(held_buttons)

        pressed_keys = pygame.key.get_pressed()
        keys = {}
        for action, code in self.codes.items():
            now = bool(pressed_keys[code])
            before = self._prev_keys.get(action, False)
            keys[action] = KeyState(pressed=now and not before, held=now)
            self._prev_keys[action] = now

        mx, my = pygame.mouse.get_pos()
        return FrameInput(
            pointer=Vec2(float(mx), float(my)),
            buttons=buttons,
            keys=keys,
            dt=dt,
            fps=fps,
            screen_size=screen_size,
        )


def frame_rate(clock) -> float:
    """
    Measured frame rate for the integration gate.

    ``Clock.get_fps`` reads 0 until it has averaged enough ticks; report
    infinity until then so the first frames are not treated as slow.
    """
    fps = clock.get_fps()
    return fps if fps > 0 else math.inf


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Interactive 2D N-body gravity sandbox")
    parser.add_argument("--width", type=int, default=900, help="Window width in pixels.")
    parser.add_argument("--height", type=int, default=900, help="Window height in pixels.")
    parser.add_argument("--systems", type=int, choices=(1, 3), default=1,
                        help="Number of sun/planet/moon systems to start with.")
    parser.add_argument("--fps", type=int, default=60, help="Frame rate cap.")
    parser.add_argument("--log-level", default="WARNING",
                        choices=("DEBUG", "INFO", "WARNING", "ERROR"))
    parser.add_argument("--profile", action="store_true",
                        help="Collect per-phase timings and log a summary on exit.")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(asctime)s %(name)s %(levelname)s %(message)s")

    profiler = Profiler() if (args.profile or profiling_enabled()) else None
    config = SandboxConfig()
    sandbox = Sandbox(
        config=config,
        simulation=Simulation.seeded(args.systems, gravitational_constant=config.gravitational_constant,
                                     profiler=profiler),
        profiler=profiler,
    )

    pygame.init()
    try:
        screen = pygame.display.set_mode((args.width, args.height))
        pygame.display.set_caption("Gravity Simulation")
        pygame.font.init()
        renderer = PygameRenderer(screen, pygame.font.SysFont("Segoe UI", 18))
        poller = InputPoller(KeyBindings())
        clock = pygame.time.Clock()

        while sandbox.running:
            dt = clock.tick(args.fps) / 1000.0
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    sandbox.running = False
            if not sandbox.running:
                break

            frame = poller.poll(dt, frame_rate(clock), screen.get_size())
            sandbox.update(frame)
            renderer.status = status_text(sandbox, frame.pointer)
            if profiler:
                with profiler.section("render"):
                    renderer.render_sandbox(sandbox)
            else:
                renderer.render_sandbox(sandbox)
    finally:
        pygame.quit()

    if profiler:
        for name, stats in profiler.stats.summary().items():
            logger.info("%s: n=%d mean=%.3fms max=%.3fms", name, stats["n"], stats["mean_ms"], stats["max_ms"])
    return 0


if __name__ == "__main__":
    sys.exit(main())
