# MIT License (see LICENSE)
"""
Collision resolution subsystem.

Detection lives with the gravity pass (``core.forces.overlapping_pairs``)
because both share the pair geometry. This subpackage applies the merges.

Typical usage:
    from gravity_sandbox.collision import merge_pairs

    merge_pairs(bodies, overlapping_pairs(sep, radii))
"""
from .merge import resolve_collision, merge_pairs

__all__ = [
    "resolve_collision",
    "merge_pairs",
]
