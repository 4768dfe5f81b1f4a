"""Small numeric helpers shared by the engine."""

from __future__ import annotations

import math
from typing import Sequence

from .vectors import Vec2


def rgb_to_int(rgb: Sequence[int]) -> int:
    """Pack an (r, g, b) triple into a 0xRRGGBB integer."""
    r, g, b = rgb
    return (r << 16) | (g << 8) | b


def fov_to_plane_factor(fov_deg: float) -> float:
    """Return the camera-plane length for a field of view in degrees."""
    return math.tan(math.radians(fov_deg) / 2.0)


def convrad(angle: float) -> float:
    """Convert degrees to radians."""
    return angle * math.pi / 180.0


def distance(x: float, y: float) -> float:
    """Return the length of the vector (x, y)."""
    return math.sqrt(x * x + y * y)


def fixed_dist(x1: float, y1: float, x2: float, y2: float, direction: Vec2) -> float:
    """Return the distance between two points projected on ``direction``."""
    return Vec2(x2 - x1, y2 - y1).dot(direction)