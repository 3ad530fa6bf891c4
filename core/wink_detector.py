"""
WinkDetector — exactly one eye closed.

The state is recomputed from both eyes every tick; there is no debounce,
so a lid gap hovering at the threshold flickers the wink on and off.
"""
from __future__ import annotations
import logging
from typing import Optional

from core.features import is_left_eye_open, is_right_eye_open
from domain.enums import WinkState
from domain.models import FaceLandmarkSet

logger = logging.getLogger(__name__)


class WinkDetector:

    def __init__(self) -> None:
        self._state = WinkState.NO_WINK

    def update(self, face: Optional[FaceLandmarkSet]) -> WinkState:
        left_open = is_left_eye_open(face)
        right_open = is_right_eye_open(face)
        state = WinkState.WINKING if left_open != right_open else WinkState.NO_WINK

        if state != self._state:
            logger.debug("[WINK] %s -> %s (left=%s right=%s)",
                         self._state.value, state.value, left_open, right_open)
        self._state = state
        return state

    @property
    def state(self) -> WinkState:
        return self._state

    @property
    def is_winking(self) -> bool:
        return self._state == WinkState.WINKING

    def reset(self) -> None:
        self._state = WinkState.NO_WINK
