"""
MouthTextEffect — the quote appears word by word while the mouth is open,
word-wrapped across the top of the canvas.
"""
from __future__ import annotations
from typing import Callable, List, Optional

from core.features import is_mouth_open
from core.mouth_text import MouthTextProgression
from domain.enums import TextAlign, TextBaseline
from domain.models import DrawCommand, EffectFrame, Point2D, Text
from effects.base import Effect
from utils.constants import (
    MOUTH_TEXT_COLOR, MOUTH_TEXT_LINE_HEIGHT, MOUTH_TEXT_MARGIN,
    MOUTH_TEXT_OUTLINE, MOUTH_TEXT_SIZE, MOUTH_TEXT_TOP,
)

# (text, size in px) -> rendered width in px
TextMeasure = Callable[[str, float], float]


def approximate_text_width(text: str, size: float) -> float:
    """Rough width for a proportional font, used when no renderer is wired in."""
    return len(text) * size * 0.5


def wrap_words(words: List[str], max_width: float, size: float, measure: TextMeasure) -> List[str]:
    """
    Greedy word wrap. A line is broken before the word that would push it
    past max_width; a single over-long word keeps its own line.
    """
    lines: List[str] = []
    current = ""
    for word in words:
        candidate = f"{current}{word} "
        if measure(candidate, size) > max_width and current:
            lines.append(current.rstrip())
            current = f"{word} "
        else:
            current = candidate
    if current:
        lines.append(current.rstrip())
    return lines


class MouthTextEffect(Effect):
    NAME = "MOUTH_TEXT"

    def __init__(
        self,
        progression: Optional[MouthTextProgression] = None,
        measure: TextMeasure = approximate_text_width,
    ) -> None:
        self._progression = progression or MouthTextProgression()
        self._measure = measure

    def compose(self, frame: EffectFrame) -> List[DrawCommand]:
        self._progression.update(is_mouth_open(frame.face), frame.now_ms)
        revealed = self._progression.revealed_text()
        if not revealed:
            return []

        lines = wrap_words(
            revealed.split(),
            max_width=frame.width - MOUTH_TEXT_MARGIN,
            size=MOUTH_TEXT_SIZE,
            measure=self._measure,
        )
        return [
            Text(
                text=line,
                position=Point2D(frame.width / 2, MOUTH_TEXT_TOP + i * MOUTH_TEXT_LINE_HEIGHT),
                size=MOUTH_TEXT_SIZE,
                color=MOUTH_TEXT_COLOR,
                align=TextAlign.CENTER,
                baseline=TextBaseline.TOP,
                outline=MOUTH_TEXT_OUTLINE,
                outline_thickness=2,
            )
            for i, line in enumerate(lines)
        ]

    @property
    def progression(self) -> MouthTextProgression:
        return self._progression

    def set_measure(self, measure: TextMeasure) -> None:
        self._measure = measure

    def enable(self, quote: str) -> None:
        self._progression.enable(quote)

    def reset(self) -> None:
        self._progression.reset()
