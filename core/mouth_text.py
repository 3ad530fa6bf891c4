"""
MouthTextProgression — reveals a quote word by word while the mouth is open.

This is not a typewriter that advances monotonically: the revealed index is
derived from the clock, (now mod (words x per_word)) // per_word, for as
long as the mouth stays open. Closing the mouth resets the index to 0, so
the next opening shows the phase of the clock at that moment, starting over
after the last word.
"""
from __future__ import annotations
import logging
from typing import Optional, Tuple

from domain.enums import MouthTextPhase
from utils.constants import DEFAULT_WORD_DISPLAY_MS

logger = logging.getLogger(__name__)


class MouthTextProgression:
    """
    Parameters
    ----------
    word_display_ms : int
        How long each word stays the newest revealed word.
    """

    def __init__(self, word_display_ms: int = DEFAULT_WORD_DISPLAY_MS) -> None:
        self._word_display_ms = self._validate_interval(word_display_ms)
        self._words: Tuple[str, ...] = ()
        self._current_word_index = 0
        self._last_mouth_open = False
        self._revealing_since: Optional[int] = None

    # ------------------------------------------------------------------
    def enable(self, quote: str) -> None:
        """Tokenize the quote on whitespace and start from the first word."""
        self._words = tuple(quote.split())
        self._current_word_index = 0
        self._last_mouth_open = False
        self._revealing_since = None
        logger.info("[MOUTH] Quote loaded (%d words)", len(self._words))

    def update(self, mouth_open: bool, now_ms: int) -> int:
        """
        Feed the mouth state for one tick.
        Returns the index of the last revealed word.
        """
        if not mouth_open and self._last_mouth_open:
            logger.debug("[MOUTH] Closed after %d ms, reset to first word",
                         now_ms - (self._revealing_since or now_ms))
            self._current_word_index = 0
            self._revealing_since = None
        elif mouth_open and not self._last_mouth_open:
            self._revealing_since = now_ms

        self._last_mouth_open = mouth_open

        if mouth_open and self._words:
            cycle = len(self._words) * self._word_display_ms
            index = (now_ms % cycle) // self._word_display_ms
            self._current_word_index = min(int(index), len(self._words) - 1)

        return self._current_word_index

    def revealed_text(self) -> str:
        """Words shown this tick, empty while idle."""
        if self.phase != MouthTextPhase.REVEALING:
            return ""
        return " ".join(self._words[: self._current_word_index + 1])

    # ------------------------------------------------------------------
    @property
    def phase(self) -> MouthTextPhase:
        if self._last_mouth_open and self._words:
            return MouthTextPhase.REVEALING
        return MouthTextPhase.IDLE

    @property
    def words(self) -> Tuple[str, ...]:
        return self._words

    @property
    def current_word_index(self) -> int:
        return self._current_word_index

    @property
    def revealing_since(self) -> Optional[int]:
        """Timestamp (ms) of the current mouth opening, None while closed."""
        return self._revealing_since

    @property
    def word_display_ms(self) -> int:
        return self._word_display_ms

    @word_display_ms.setter
    def word_display_ms(self, value: int) -> None:
        self._word_display_ms = self._validate_interval(value)

    def reset(self) -> None:
        self._current_word_index = 0
        self._last_mouth_open = False
        self._revealing_since = None

    @staticmethod
    def _validate_interval(value: int) -> int:
        value = int(value)
        if value <= 0:
            raise ValueError(f"word_display_ms must be positive, got {value}")
        return value
