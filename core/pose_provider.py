"""
Pose providers — the only place that knows about MediaPipe.

The rest of the application sees FaceLandmarkSet / HandLandmarkSet in pixel
coordinates of the (already mirrored) frame it handed in.
"""
from __future__ import annotations
import logging
from typing import Any, List, Optional, Protocol, Tuple

import cv2
import mediapipe as mp
import numpy as np

from domain.enums import Handedness
from domain.models import FaceLandmarkSet, HandLandmarkSet, Point2D

logger = logging.getLogger(__name__)


class ProviderUnavailable(RuntimeError):
    """A detector could not be created or failed while processing a frame."""


class PoseProvider(Protocol):
    def detect_face(self, frame: np.ndarray) -> Optional[FaceLandmarkSet]: ...

    def detect_hands(self, frame: np.ndarray) -> List[HandLandmarkSet]: ...

    def close(self) -> None: ...


def _to_points(landmarks: Any, width: int, height: int) -> Tuple[Point2D, ...]:
    return tuple(Point2D(lm.x * width, lm.y * height) for lm in landmarks.landmark)


def _handedness(classification: Any) -> Handedness:
    try:
        label = classification.classification[0].label
    except (AttributeError, IndexError):
        return Handedness.UNKNOWN
    try:
        return Handedness(label)
    except ValueError:
        return Handedness.UNKNOWN


class MediaPipePoseProvider:
    """
    Face mesh (single face, refined to 478 points incl. irises) and up to
    max_num_hands hands.

    The face and hand detectors are used from different worker threads, one
    thread per detector, so each detector is only ever driven by one thread.

    Parameters
    ----------
    max_num_hands : int
    min_face_detection_confidence : float
    min_face_tracking_confidence : float
    min_hand_detection_confidence : float
    min_hand_tracking_confidence : float
    """

    def __init__(
        self,
        max_num_hands: int = 2,
        min_face_detection_confidence: float = 0.5,
        min_face_tracking_confidence: float = 0.5,
        min_hand_detection_confidence: float = 0.5,
        min_hand_tracking_confidence: float = 0.5,
    ) -> None:
        try:
            self._face_mesh = mp.solutions.face_mesh.FaceMesh(
                static_image_mode=False,
                max_num_faces=1,
                refine_landmarks=True,
                min_detection_confidence=min_face_detection_confidence,
                min_tracking_confidence=min_face_tracking_confidence,
            )
            self._hands = mp.solutions.hands.Hands(
                static_image_mode=False,
                max_num_hands=max_num_hands,
                min_detection_confidence=min_hand_detection_confidence,
                min_tracking_confidence=min_hand_tracking_confidence,
            )
        except Exception as exc:
            raise ProviderUnavailable(f"MediaPipe initialisation failed: {exc}") from exc
        logger.info("[PROVIDER] MediaPipe face mesh + hands ready (max_num_hands=%d)", max_num_hands)

    # ------------------------------------------------------------------
    def detect_face(self, frame: np.ndarray) -> Optional[FaceLandmarkSet]:
        """
        Parameters
        ----------
        frame : np.ndarray
            BGR frame from OpenCV.

        Returns
        -------
        FaceLandmarkSet or None when no face is visible.
        """
        h, w = frame.shape[:2]
        results = self._process(self._face_mesh, frame)
        if not results.multi_face_landmarks:
            return None
        return FaceLandmarkSet(points=_to_points(results.multi_face_landmarks[0], w, h))

    def detect_hands(self, frame: np.ndarray) -> List[HandLandmarkSet]:
        """All detected hands, in MediaPipe's detection order."""
        h, w = frame.shape[:2]
        results = self._process(self._hands, frame)
        if not results.multi_hand_landmarks:
            return []

        labels = results.multi_handedness or []
        hands: List[HandLandmarkSet] = []
        for i, hand_landmarks in enumerate(results.multi_hand_landmarks):
            handedness = _handedness(labels[i]) if i < len(labels) else Handedness.UNKNOWN
            hands.append(HandLandmarkSet(points=_to_points(hand_landmarks, w, h),
                                         handedness=handedness))
        return hands

    def close(self) -> None:
        self._face_mesh.close()
        self._hands.close()

    # ------------------------------------------------------------------
    @staticmethod
    def _process(solution: Any, frame: np.ndarray) -> Any:
        rgb = cv2.cvtColor(frame, cv2.COLOR_BGR2RGB)
        rgb.flags.writeable = False
        try:
            return solution.process(rgb)
        except Exception as exc:
            raise ProviderUnavailable(f"{type(solution).__name__} failed: {exc}") from exc
