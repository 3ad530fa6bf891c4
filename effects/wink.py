"""
WinkEffect — big "WINK" callout in the middle of the canvas while exactly
one eye is closed.
"""
from __future__ import annotations
from typing import List

from core.wink_detector import WinkDetector
from domain.enums import TextAlign, TextBaseline
from domain.models import DrawCommand, EffectFrame, Point2D, Text
from effects.base import Effect
from utils.constants import WINK_COLOR, WINK_OUTLINE, WINK_TEXT, WINK_TEXT_SIZE


class WinkEffect(Effect):
    NAME = "WINK"

    def __init__(self, detector: WinkDetector | None = None) -> None:
        self._detector = detector or WinkDetector()

    def compose(self, frame: EffectFrame) -> List[DrawCommand]:
        self._detector.update(frame.face)
        if not self._detector.is_winking:
            return []
        return [Text(
            text=WINK_TEXT,
            position=Point2D(frame.width / 2, frame.height / 2),
            size=WINK_TEXT_SIZE,
            color=WINK_COLOR,
            align=TextAlign.CENTER,
            baseline=TextBaseline.CENTER,
            outline=WINK_OUTLINE,
            outline_thickness=3,
            bold=True,
        )]

    @property
    def detector(self) -> WinkDetector:
        return self._detector

    def reset(self) -> None:
        self._detector.reset()
