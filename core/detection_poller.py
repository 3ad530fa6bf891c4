"""
DetectionPoller — asks the pose provider for face and hands at a fixed
cadence, independently of the render rate.

Each tick hands the most recent camera frame to two single-worker pools,
one for the face detector and one for the hand detector. Results land in
LandmarkSlots as soon as their detector finishes, so face and hands are
updated independently. A detector that is still busy is skipped for that
tick instead of queueing more work behind it.

Every request carries a monotonic sequence number; LandmarkSlots uses it to
drop results that finish out of order.
"""
from __future__ import annotations
import itertools
import logging
import threading
from concurrent.futures import Future, ThreadPoolExecutor, wait
from typing import TYPE_CHECKING, Callable, Dict, Optional

import numpy as np

from core.landmark_slots import LandmarkSlots
from utils.constants import POLL_INTERVAL

if TYPE_CHECKING:
    from core.pose_provider import PoseProvider

logger = logging.getLogger(__name__)

FACE = "face"
HANDS = "hands"


class DetectionPoller:
    """
    Parameters
    ----------
    provider : PoseProvider
        Face / hand detector.
    slots : LandmarkSlots
        Destination of every completed detection.
    poll_interval : float
        Seconds between two detection requests.
    on_status : callable, optional
        Receives a human-readable message the first time a detector fails
        (and again after it has recovered and fails anew).
    """

    def __init__(
        self,
        provider: PoseProvider,
        slots: LandmarkSlots,
        poll_interval: float = POLL_INTERVAL,
        on_status: Optional[Callable[[str], None]] = None,
    ) -> None:
        if poll_interval <= 0:
            raise ValueError(f"poll_interval must be positive, got {poll_interval}")
        self._provider = provider
        self._slots = slots
        self._poll_interval = poll_interval
        self._on_status = on_status

        self._lock = threading.Lock()
        self._frame: Optional[np.ndarray] = None
        self._seq = itertools.count(1)
        self._pending: Dict[str, Future] = {}
        self._failed: Dict[str, bool] = {FACE: False, HANDS: False}

        self._executors = {
            FACE:  ThreadPoolExecutor(max_workers=1, thread_name_prefix="detect-face"),
            HANDS: ThreadPoolExecutor(max_workers=1, thread_name_prefix="detect-hands"),
        }
        self._stop = threading.Event()
        self._thread: Optional[threading.Thread] = None

    # ------------------------------------------------------------------
    def submit_frame(self, frame: np.ndarray) -> None:
        """Offer the latest camera frame. The caller must not mutate it afterwards."""
        with self._lock:
            self._frame = frame

    def poll_once(self) -> int:
        """
        Start one detection round on the latest frame.
        Returns the number of requests started (0, 1 or 2).
        """
        with self._lock:
            frame = self._frame
            if frame is None or self._stop.is_set():
                return 0

            started = 0
            for kind, task in ((FACE, self._detect_face), (HANDS, self._detect_hands)):
                pending = self._pending.get(kind)
                if pending is not None and not pending.done():
                    continue
                seq = next(self._seq)
                self._pending[kind] = self._executors[kind].submit(task, frame, seq)
                started += 1
            return started

    def wait_idle(self, timeout: Optional[float] = None) -> bool:
        """Block until every started request has finished. False on timeout."""
        with self._lock:
            futures = list(self._pending.values())
        _, not_done = wait(futures, timeout=timeout)
        return not not_done

    # ------------------------------------------------------------------
    def start(self) -> None:
        if self._thread is not None:
            return
        self._stop.clear()
        self._thread = threading.Thread(target=self._loop, name="detection-poller", daemon=True)
        self._thread.start()
        logger.info("[POLLER] Started (interval=%.3fs)", self._poll_interval)

    def stop(self, timeout: float = 1.0) -> bool:
        """
        Stop polling and cancel queued requests.

        A detection that is already running gets `timeout` seconds to finish.
        After that it is left to complete in the background and its result
        is dropped. Returns False when a detection was still running.
        """
        self._stop.set()
        if self._thread is not None:
            self._thread.join(timeout=timeout)
            self._thread = None
        for executor in self._executors.values():
            executor.shutdown(wait=False, cancel_futures=True)
        if not self.wait_idle(timeout):
            logger.warning("[POLLER] Stopped, a detection is still running")
            return False
        logger.info("[POLLER] Stopped")
        return True

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def _loop(self) -> None:
        while not self._stop.is_set():
            self.poll_once()
            self._stop.wait(self._poll_interval)

    # ---- detector tasks (run on the pool threads) ----------------------
    def _detect_face(self, frame: np.ndarray, seq: int) -> None:
        try:
            face = self._provider.detect_face(frame)
        except Exception as exc:
            self._report_failure(FACE, exc)
            return
        self._report_recovery(FACE)
        if self._stop.is_set():
            return
        self._slots.update_face(face, seq)

    def _detect_hands(self, frame: np.ndarray, seq: int) -> None:
        try:
            hands = self._provider.detect_hands(frame)
        except Exception as exc:
            self._report_failure(HANDS, exc)
            return
        self._report_recovery(HANDS)
        if self._stop.is_set():
            return
        self._slots.update_hands(hands, seq)

    def _report_failure(self, kind: str, exc: Exception) -> None:
        with self._lock:
            first = not self._failed[kind]
            self._failed[kind] = True
        if not first:
            logger.debug("[POLLER] %s detection still failing: %s", kind, exc)
            return
        logger.warning("[POLLER] %s detection unavailable: %s", kind, exc)
        if self._on_status is not None:
            self._on_status(f"[WARN] {kind.capitalize()} detection unavailable: {exc}")

    def _report_recovery(self, kind: str) -> None:
        with self._lock:
            recovered = self._failed[kind]
            self._failed[kind] = False
        if recovered:
            logger.info("[POLLER] %s detection recovered", kind)
