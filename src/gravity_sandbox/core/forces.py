# MIT License (see LICENSE)
"""
Pairwise gravity and overlap detection on numpy snapshots.

Both passes are O(N²) over the active bodies with no spatial partitioning;
body counts in the sandbox are in the tens. They share one separation
matrix so each frame computes the pair geometry once.

Direction convention (see vector.py): for body ``i`` attracted towards
body ``j``,
    a_x += g · cos = g ·  dx / r
    a_y += g · sin = g · -dy / r
with dx, dy measured in screen space (y down), so accelerations come out
in the y-up velocity frame.
"""
from __future__ import annotations
from dataclasses import dataclass

import numpy as np

from ..constants import GRAVITATIONAL_CONSTANT


@dataclass(frozen=True)
class Separation:
    """
    Pair geometry for a snapshot of N positions.

    Attributes:
        dx: [N, N] array, dx[i, j] = x[j] - x[i].
        dy: [N, N] array, dy[i, j] = y[j] - y[i].
        r2: [N, N] squared distances.
    """
    dx: np.ndarray
    dy: np.ndarray
    r2: np.ndarray


def separation(positions: np.ndarray) -> Separation:
    """
    Compute pairwise offsets for an ``(N, 2)`` position array.
    """
    x = positions[:, 0]
    y = positions[:, 1]
    dx = x[np.newaxis, :] - x[:, np.newaxis]
    dy = y[np.newaxis, :] - y[:, np.newaxis]
    return Separation(dx=dx, dy=dy, r2=dx * dx + dy * dy)


def gravitational_accelerations(
    sep: Separation,
    masses: np.ndarray,
    g_const: float = GRAVITATIONAL_CONSTANT,
) -> np.ndarray:
    """
    Inverse-square acceleration on every body from every other body.

    Implements a_i = Σ_j G·m_j / r_ij² · (cos, sin)_ij.

    Args:
        sep: Pair geometry from ``separation()``.
        masses: Length-N array of masses.
        g_const: Gravitational constant in sandbox units.

    Returns:
        ``(N, 2)`` array of accelerations in the y-up frame.

    Note:
        Pairs at zero separation (including i == j) contribute nothing.
        Coincident bodies therefore exert no force on each other for that
        frame instead of producing inf/NaN.
    """
    r2 = sep.r2
    nonzero = r2 > 0.0
    inv_r3 = np.zeros_like(r2)
    np.divide(1.0, r2 * np.sqrt(r2), out=inv_r3, where=nonzero)

    weighted = g_const * masses[np.newaxis, :] * inv_r3
    acc = np.empty((r2.shape[0], 2), dtype=np.float64)
    acc[:, 0] = np.sum(weighted * sep.dx, axis=1)
    acc[:, 1] = -np.sum(weighted * sep.dy, axis=1)
    return acc


def overlapping_pairs(sep: Separation, radii: np.ndarray) -> list[tuple[int, int]]:
    """
    Find colliding pairs using half radii.

    Two bodies collide when r² < (r_i/2 + r_j/2)². Only the drawn circles
    overlapping by a clear margin counts as a hit.

    Returns:
        Pairs (i, j) with i < j, ordered by i then j.
    """
    half = radii / 2.0
    min_dist = half[:, np.newaxis] + half[np.newaxis, :]
    hits = np.triu(sep.r2 < min_dist * min_dist, k=1)
    ii, jj = np.nonzero(hits)
    return [(int(i), int(j)) for i, j in zip(ii, jj)]
