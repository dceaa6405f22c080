# MIT License (see LICENSE)
"""
Core physics components.

This subpackage provides:
    - Forces: vectorized pairwise gravity and overlap detection.
    - Integrators: semi-implicit Euler with the screen/velocity y flip.
    - Invariants: total mass, momentum and kinetic energy.

Typical usage:
    from gravity_sandbox.core import separation, gravitational_accelerations

    sep = separation(positions)
    acc = gravitational_accelerations(sep, masses)
"""
from .forces import Separation, separation, gravitational_accelerations, overlapping_pairs
from .integrators import euler_step, integrate_all
from .invariants import total_mass, linear_momentum, kinetic_energy

__all__ = [
    # Forces
    "Separation",
    "separation",
    "gravitational_accelerations",
    "overlapping_pairs",
    # Integrators
    "euler_step",
    "integrate_all",
    # Invariants
    "total_mass",
    "linear_momentum",
    "kinetic_energy",
]
