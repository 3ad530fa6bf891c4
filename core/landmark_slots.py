"""
LandmarkSlots — the latest face result and the latest hands result.

Face and hand detections complete independently, so each has its own
last-write-wins slot. Readers get a FrameSnapshot that may combine a new
face with older hands; a single slot is never observed half-written.

Each write may carry the sequence number of the detection request that
produced it. With reject_stale enabled, a result older than the one
already in the slot is dropped instead of overwriting it.
"""
from __future__ import annotations
import logging
import threading
from typing import Iterable, Optional

from domain.models import FaceLandmarkSet, FrameSnapshot, HandLandmarkSet

logger = logging.getLogger(__name__)


class LandmarkSlots:
    """
    Parameters
    ----------
    reject_stale : bool
        Drop results whose sequence number is lower than the slot's.
    """

    def __init__(self, reject_stale: bool = True) -> None:
        self._lock = threading.Lock()
        self._reject_stale = reject_stale
        self._face: Optional[FaceLandmarkSet] = None
        self._face_seq = 0
        self._hands: tuple = ()
        self._hands_seq = 0

    # ------------------------------------------------------------------
    def update_face(self, face: Optional[FaceLandmarkSet], seq: Optional[int] = None) -> bool:
        """Replace the face slot. Returns False if the result was stale."""
        with self._lock:
            if self._is_stale(seq, self._face_seq):
                logger.debug("[SLOTS] Stale face result #%s dropped (have #%d)", seq, self._face_seq)
                return False
            self._face = face
            if seq is not None:
                self._face_seq = seq
            return True

    def update_hands(self, hands: Iterable[HandLandmarkSet], seq: Optional[int] = None) -> bool:
        """Replace the hands slot. Returns False if the result was stale."""
        hands = tuple(hands)
        with self._lock:
            if self._is_stale(seq, self._hands_seq):
                logger.debug("[SLOTS] Stale hands result #%s dropped (have #%d)", seq, self._hands_seq)
                return False
            self._hands = hands
            if seq is not None:
                self._hands_seq = seq
            return True

    def snapshot(self) -> FrameSnapshot:
        with self._lock:
            return FrameSnapshot(
                face=self._face,
                hands=self._hands,
                face_seq=self._face_seq,
                hands_seq=self._hands_seq,
            )

    # ------------------------------------------------------------------
    def _is_stale(self, seq: Optional[int], current: int) -> bool:
        return self._reject_stale and seq is not None and seq < current
