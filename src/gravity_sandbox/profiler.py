# MIT License (see LICENSE)
"""
Simple profiling utilities for per-frame timing.

Measures the phases of a frame (gravity, collisions, compaction,
integration, camera, render) without external dependencies. Enabled by
passing a ``Profiler`` to ``Simulation``/``Sandbox`` or by setting
``GRAVITY_SANDBOX_PROFILE=1`` for the desktop frontend.

Example:
    profiler = Profiler()
    with profiler.section("gravity"):
        simulation.update_gravity()
    print(profiler.stats.summary())
"""
from __future__ import annotations
import time
from collections import deque
from dataclasses import dataclass, field

# Only recent frames matter for an interactive app.
MAX_SAMPLES = 600


@dataclass
class ProfileStats:
    """
    Rolling timing samples per named section.

    Keeps the last ``MAX_SAMPLES`` samples of each section.
    """
    samples: dict[str, deque] = field(default_factory=dict)

    def add(self, name: str, dt: float) -> None:
        """Record a timing sample (in seconds) for a named section."""
        if name not in self.samples:
            self.samples[name] = deque(maxlen=MAX_SAMPLES)
        self.samples[name].append(dt)

    def summary(self) -> dict[str, dict[str, float]]:
        """
        Summary statistics for all recorded sections.

        Returns:
            Dict mapping section name to ``{'n', 'mean_ms', 'max_ms'}``.
        """
        out = {}
        for name, times in self.samples.items():
            n = len(times)
            out[name] = {
                "n": n,
                "mean_ms": 1e3 * (sum(times) / n),
                "max_ms": 1e3 * max(times),
            }
        return out


class Profiler:
    """
    Context-manager based profiler for timing code sections.

    Usage:
        profiler = Profiler()
        with profiler.section("integrate"):
            simulation.integrate(dt)
        stats = profiler.stats.summary()
    """

    def __init__(self) -> None:
        self.stats = ProfileStats()

    def section(self, name: str):
        """
        Return a context manager that times the enclosed code.

        Args:
            name: Identifier for this timed section.
        """
        profiler = self

        class _Section:
            def __enter__(self):
                self.t0 = time.perf_counter()

            def __exit__(self, exc_type, exc, tb):
                profiler.stats.add(name, time.perf_counter() - self.t0)

        return _Section()


class _NoSection:
    def __enter__(self):
        return None

    def __exit__(self, exc_type, exc, tb):
        return None


_NO_SECTION = _NoSection()


def section(profiler: Profiler | None, name: str):
    """Time ``name`` on ``profiler`` if one is attached, else do nothing."""
    if profiler is None:
        return _NO_SECTION
    return profiler.section(name)
