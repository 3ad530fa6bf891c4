"""
FingertipDrawingEffect — freehand strokes following an extended index finger.
"""
from __future__ import annotations
from typing import List, Optional

from core.drawing_paths import DrawingPathAccumulator
from core.features import find_drawing_fingertip
from domain.models import Circle, DrawCommand, DrawingPath, EffectFrame, Polyline
from effects.base import Effect
from utils.colors import hex_to_rgb
from utils.constants import DRAWING_INDICATOR_SIZE, DRAWING_STROKE


class FingertipDrawingEffect(Effect):
    NAME = "FINGERTIP_DRAWING"

    def __init__(self, accumulator: Optional[DrawingPathAccumulator] = None) -> None:
        self._accumulator = accumulator or DrawingPathAccumulator()

    def compose(self, frame: EffectFrame) -> List[DrawCommand]:
        tip = find_drawing_fingertip(frame.hands)
        self._accumulator.update(tip, frame.now_ms)

        color = hex_to_rgb(frame.controls.drawing_color)
        commands: List[DrawCommand] = [
            Polyline(points=self._points(path), color=color, thickness=DRAWING_STROKE)
            for path in self._accumulator.all_paths()
            if len(path) > 1
        ]
        if tip is not None:
            commands.append(Circle(center=tip, radius=DRAWING_INDICATOR_SIZE / 2, color=color))
        return commands

    @property
    def accumulator(self) -> DrawingPathAccumulator:
        return self._accumulator

    def clear(self) -> None:
        self._accumulator.clear()

    @staticmethod
    def _points(path: DrawingPath):
        return tuple(p.point for p in path)
