# MIT License (see LICENSE)
"""
Conserved quantities over the active bodies.

Used for verifying merges and for diagnostics. Merging is perfectly
inelastic: mass and linear momentum are conserved, kinetic energy is not.
"""
from __future__ import annotations
import numpy as np

from ..types import Body


def total_mass(bodies: list[Body]) -> float:
    return float(sum(b.mass for b in bodies if b.active))


def linear_momentum(bodies: list[Body]) -> np.ndarray:
    """
    Total linear momentum P = Σ m·v of active bodies.

    Returns:
        Momentum vector [Px, Py] in the y-up velocity frame.
    """
    p = np.zeros(2, dtype=np.float64)
    for b in bodies:
        if not b.active:
            continue
        p += b.mass * np.array([b.velocity.x, b.velocity.y], dtype=np.float64)
    return p


def kinetic_energy(bodies: list[Body]) -> float:
    """T = Σ ½·m·v² over active bodies."""
    ke = 0.0
    for b in bodies:
        if b.active:
            ke += 0.5 * b.mass * b.velocity.magnitude_squared()
    return ke
