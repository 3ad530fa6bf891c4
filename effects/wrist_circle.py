"""
WristCircleEffect — white circle between the first two wrists, growing with
their distance.
"""
from __future__ import annotations
from typing import List

from core.features import get_wrist_positions
from domain.models import Circle, DrawCommand, EffectFrame
from effects.base import Effect
from utils.constants import (
    CIRCLE_COLOR, CIRCLE_SIZE_MAX, CIRCLE_SIZE_MIN,
    WRIST_DISTANCE_MAX, WRIST_DISTANCE_MIN,
)
from utils.geometry import distance, map_range, midpoint


def wrist_circle_size(wrist_distance: float) -> float:
    """Diameter: distance 50..400 mapped onto 20..200, clamped."""
    return map_range(
        wrist_distance,
        WRIST_DISTANCE_MIN, WRIST_DISTANCE_MAX,
        CIRCLE_SIZE_MIN, CIRCLE_SIZE_MAX,
        clamp_output=True,
    )


class WristCircleEffect(Effect):
    NAME = "WRIST_CIRCLE"

    def compose(self, frame: EffectFrame) -> List[DrawCommand]:
        wrists = get_wrist_positions(frame.hands)
        if len(wrists) < 2 or wrists[0] is None or wrists[1] is None:
            return []

        first, second = wrists[0], wrists[1]
        size = wrist_circle_size(distance(first, second))
        return [Circle(center=midpoint(first, second), radius=size / 2, color=CIRCLE_COLOR)]
