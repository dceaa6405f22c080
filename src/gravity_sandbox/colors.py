# MIT License (see LICENSE)
"""Named RGB colors. Physics never reads these; they ride along on bodies."""
from __future__ import annotations

Color = tuple[int, int, int]

BLACK: Color = (0, 0, 0)
WHITE: Color = (255, 255, 255)
BLUE: Color = (0, 0, 255)
YELLOW: Color = (255, 255, 0)
GREY: Color = (192, 192, 192)
RED: Color = (255, 0, 0)
