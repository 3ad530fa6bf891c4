"""
Shared fixtures: synthetic landmark sets with controllable gaps and poses.
"""
from __future__ import annotations
import math
from typing import Dict, Optional, Tuple

import pytest

from domain.enums import Handedness
from domain.landmarks import (
    FACE_LANDMARK_COUNT, FINGER_BASES, FINGERTIPS, HAND_LANDMARK_COUNT,
    FaceLandmark, HandLandmark,
)
from domain.models import FaceLandmarkSet, HandLandmarkSet, Point2D

# horizontal offset of each finger from the wrist, thumb -> pinky
_FINGER_DX = (-60.0, -30.0, 0.0, 30.0, 60.0)


def build_face(
    center: Tuple[float, float] = (320.0, 240.0),
    mouth_gap: float = 0.0,
    left_eye_gap: float = 12.0,
    right_eye_gap: float = 12.0,
    count: int = FACE_LANDMARK_COUNT,
    radius: float = 100.0,
    missing: Tuple[int, ...] = (),
) -> FaceLandmarkSet:
    """
    Points spread on a circle around center, with the lip, lid and nose
    landmarks placed so the gaps are exactly the given values.
    """
    cx, cy = center
    points = [
        Point2D(cx + radius * math.cos(2 * math.pi * i / count),
                cy + radius * math.sin(2 * math.pi * i / count))
        for i in range(count)
    ]
    overrides: Dict[int, Point2D] = {
        FaceLandmark.NOSE_TIP:               Point2D(cx, cy),
        FaceLandmark.UPPER_INNER_LIP:        Point2D(cx, cy + 40),
        FaceLandmark.LOWER_INNER_LIP:        Point2D(cx, cy + 40 + mouth_gap),
        FaceLandmark.LEFT_EYE_UPPER_LID:     Point2D(cx + 40, cy - 40),
        FaceLandmark.LEFT_EYE_LOWER_LID:     Point2D(cx + 40, cy - 40 + left_eye_gap),
        FaceLandmark.LEFT_EYE_INNER_CORNER:  Point2D(cx + 25, cy - 35),
        FaceLandmark.RIGHT_EYE_UPPER_LID:    Point2D(cx - 40, cy - 40),
        FaceLandmark.RIGHT_EYE_LOWER_LID:    Point2D(cx - 40, cy - 40 + right_eye_gap),
        FaceLandmark.RIGHT_EYE_INNER_CORNER: Point2D(cx - 25, cy - 35),
    }
    result = []
    for i, p in enumerate(points):
        if i in missing:
            result.append(None)
        else:
            result.append(overrides.get(i, p))
    return FaceLandmarkSet(points=tuple(result))


def build_hand(
    wrist: Tuple[float, float] = (300.0, 400.0),
    pose: str = "open",
    handedness: Handedness = Handedness.RIGHT,
    missing: Tuple[int, ...] = (),
) -> HandLandmarkSet:
    """
    pose: "open" (every finger extended), "fist" (every tip near the wrist)
    or "pointing" (index extended, the rest curled).
    """
    wx, wy = wrist
    points: list = [None] * HAND_LANDMARK_COUNT
    points[HandLandmark.WRIST] = Point2D(wx, wy)

    for finger, (tip_index, base_index) in enumerate(zip(FINGERTIPS, FINGER_BASES)):
        dx = _FINGER_DX[finger]
        base = Point2D(wx + dx, wy - 60)
        extended = pose == "open" or (pose == "pointing" and finger == 1)
        tip = Point2D(wx + dx, wy - 180) if extended else Point2D(wx + dx * 0.5, wy - 50)
        points[base_index] = base
        points[tip_index] = tip
        # joints between base and tip
        for step, joint in enumerate(range(base_index + 1, tip_index), start=1):
            t = step / (tip_index - base_index)
            points[joint] = Point2D(base.x + (tip.x - base.x) * t, base.y + (tip.y - base.y) * t)

    points[HandLandmark.THUMB_CMC] = Point2D(wx - 40, wy - 30)
    for index in missing:
        points[index] = None
    return HandLandmarkSet(points=tuple(points), handedness=handedness)


@pytest.fixture
def face_factory():
    return build_face


@pytest.fixture
def hand_factory():
    return build_hand


@pytest.fixture
def open_face() -> FaceLandmarkSet:
    return build_face()


@pytest.fixture
def frame_size() -> Tuple[int, int]:
    return (640, 480)
