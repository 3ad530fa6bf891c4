"""
DrawingPathAccumulator — turns per-tick fingertip intent into freehand paths.

    IDLE --intent--> DRAWING   (new empty active path)
    DRAWING, intent  : append (tip, timestamp), no deduplication
    DRAWING --no intent--> IDLE (active path finalized if non-empty)

Finalized paths live for the session; only clear() removes them.
"""
from __future__ import annotations
import logging
import threading
from typing import List, Optional, Tuple

from domain.enums import DrawingState
from domain.models import DrawingPath, PathPoint, Point2D

logger = logging.getLogger(__name__)


class DrawingPathAccumulator:
    """
    Owns the DrawingPathSet: finalized paths plus at most one active path.

    The worker thread feeds update() while the UI thread may call clear(),
    so both go through a lock.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._finalized: List[DrawingPath] = []
        self._active: Optional[List[PathPoint]] = None

    # ------------------------------------------------------------------
    def update(self, tip: Optional[Point2D], timestamp: int) -> DrawingState:
        """
        Feed one tick. tip is the drawing fingertip, or None when there is no
        drawing intent this tick.
        """
        with self._lock:
            if tip is not None:
                if self._active is None:
                    self._active = []
                    logger.debug("[DRAW] Path started at t=%d", timestamp)
                self._active.append(PathPoint(point=Point2D(tip[0], tip[1]), timestamp=timestamp))
                return DrawingState.DRAWING

            if self._active is not None:
                if self._active:
                    self._finalized.append(tuple(self._active))
                    logger.debug("[DRAW] Path finalized (%d points)", len(self._active))
                self._active = None
            return DrawingState.IDLE

    def clear(self) -> None:
        with self._lock:
            count = len(self._finalized)
            self._finalized = []
            self._active = None
        logger.info("[DRAW] Cleared %d path(s)", count)

    # ------------------------------------------------------------------
    @property
    def state(self) -> DrawingState:
        with self._lock:
            return DrawingState.DRAWING if self._active is not None else DrawingState.IDLE

    @property
    def finalized_paths(self) -> Tuple[DrawingPath, ...]:
        with self._lock:
            return tuple(self._finalized)

    @property
    def active_path(self) -> Optional[DrawingPath]:
        with self._lock:
            return tuple(self._active) if self._active is not None else None

    def all_paths(self) -> Tuple[DrawingPath, ...]:
        """Finalized paths followed by the non-empty active path, if any."""
        with self._lock:
            paths = list(self._finalized)
            if self._active:
                paths.append(tuple(self._active))
            return tuple(paths)
