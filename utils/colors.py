"""
Colour helpers: the red-yellow-blue ramp used for the face overlay and
hex colour parsing for the drawing colour picker.
"""
from __future__ import annotations
from typing import Tuple

import numpy as np

from domain.models import Color

# RdYlBu stops (approximated), reds stretched over the first half.
RAMP_STOPS: Tuple[Tuple[float, Color], ...] = (
    (0.0, (215, 25, 28)),     # red
    (0.3, (252, 78, 42)),     # red-orange
    (0.5, (253, 141, 60)),    # orange
    (0.6, (254, 217, 118)),   # yellow-orange
    (0.7, (255, 237, 160)),   # light yellow
    (0.8, (127, 205, 187)),   # green-blue
    (0.9, (65, 182, 196)),    # blue-green
    (1.0, (29, 79, 201)),     # blue
)

_STOP_POSITIONS = np.array([pos for pos, _ in RAMP_STOPS])
_STOP_COLORS = np.array([rgb for _, rgb in RAMP_STOPS], dtype=float)


def color_ramp(t: float) -> Color:
    """
    RGB colour at t on the ramp. t is clamped to [0, 1]; between two stops
    each channel is interpolated linearly.
    """
    t = float(np.clip(t, 0.0, 1.0))
    channels = [np.interp(t, _STOP_POSITIONS, _STOP_COLORS[:, c]) for c in range(3)]
    r, g, b = (int(round(c)) for c in channels)
    return (r, g, b)


def hex_to_rgb(value: str) -> Color:
    """Parse '#RRGGBB' or '#RGB'. Raises ValueError on anything else."""
    digits = value.strip().lstrip("#")
    if len(digits) == 3:
        digits = "".join(ch * 2 for ch in digits)
    if len(digits) != 6:
        raise ValueError(f"Invalid hex colour: {value!r}")
    return (int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))


def rgb_to_bgr(color: Color) -> Tuple[int, int, int]:
    r, g, b = color
    return (b, g, r)
