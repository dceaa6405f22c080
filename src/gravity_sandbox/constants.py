# MIT License (see LICENSE)
"""
Tuned constants for the sandbox.

These are display-scale values, not SI units: one world unit is one pixel
at zoom 1, and the gravitational constant is chosen so that hand-placed
bodies a few hundred pixels apart produce pleasant orbits.
"""
from __future__ import annotations

# Gravitational constant in sandbox units (acceleration = G * m / r²).
GRAVITATIONAL_CONSTANT: float = 100000.0

# Continuous zoom rate per second while a zoom key is held.
ZOOM_RATE: float = 0.3

# Keyboard pan speed in screen pixels per second.
PAN_SPEED: float = 200.0

# Integration is skipped below this measured frame rate; a long frame would
# otherwise produce a dt large enough to fling bodies apart.
MIN_FPS: float = 10.0

# World units of velocity-arrow length per unit of speed.
VELOCITY_ARROW_SCALE: float = 0.5

# Pick radius (world units) around a velocity arrow tip.
VECTOR_PICK_RADIUS: float = 20.0

# Bodies placed by the user.
NEW_BODY_MASS: float = 1.0
NEW_BODY_RADIUS: float = 10.0

# Mass added per add-mass click.
MASS_INCREMENT: float = 10.0

# Arrow head geometry: head lines at ±30° from the shaft, head length is
# clamp(shaft_length² / ARROW_HEAD_DIVISOR, ARROW_HEAD_MIN, ARROW_HEAD_MAX).
ARROW_HEAD_ANGLE: float = 0.5235987755982988  # pi / 6
ARROW_HEAD_DIVISOR: float = 100.0
ARROW_HEAD_MIN: float = 0.1
ARROW_HEAD_MAX: float = 20.0

# Horizontal offset between replicated seed systems.
SEED_SYSTEM_SPACING: float = 1000.0
