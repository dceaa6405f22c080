# MIT License (see LICENSE)
"""
Rendering adapters for visualization.

This subpackage provides:
    - RendererAdapter: Abstract base class (fill_circle/draw_line) with
      camera-transformed body and arrow drawing built on top.
    - DebugRenderer: Text output for debugging.
    - NullRenderer: No-op renderer for headless runs.
    - BufferedRenderer: Records draw calls per frame.
    - status_text: Status line with the body under the pointer.

The simulation core has no rendering dependency; the pygame frontend lives
in ``gravity_sandbox.frontend``.

Typical usage:
    from gravity_sandbox.renderer import DebugRenderer

    DebugRenderer().render_sandbox(sandbox)
"""
from .adapter import (
    RendererAdapter,
    DebugRenderer,
    NullRenderer,
    BufferedRenderer,
    arrow_head,
    status_text,
)

__all__ = [
    "RendererAdapter",
    "DebugRenderer",
    "NullRenderer",
    "BufferedRenderer",
    "arrow_head",
    "status_text",
]
