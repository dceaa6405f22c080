# MIT License (see LICENSE)
"""
Helpers for moving between ``Vec2`` values and numpy snapshots.

The per-frame gravity and overlap passes run on float64 arrays built from
the current body list; results are written back as ``Vec2`` values.
"""
from __future__ import annotations
import os
from typing import Iterable

import numpy as np

from .vector import Vec2


def f64(x) -> np.ndarray:
    """Convert any array-like to a float64 numpy array."""
    return np.array(x, dtype=np.float64)


def stack_vectors(vectors: Iterable[Vec2]) -> np.ndarray:
    """
    Pack vectors into an ``(N, 2)`` float64 array.

    An empty input yields an array of shape ``(0, 2)`` so callers can
    index columns unconditionally.
    """
    arr = f64([(v.x, v.y) for v in vectors])
    return arr.reshape(-1, 2)


def to_vec(row: np.ndarray) -> Vec2:
    """Convert a length-2 array row back to a ``Vec2``."""
    return Vec2(float(row[0]), float(row[1]))


def profiling_enabled() -> bool:
    """Check if frame profiling is enabled via environment variable."""
    return os.environ.get("GRAVITY_SANDBOX_PROFILE", "0") == "1"
