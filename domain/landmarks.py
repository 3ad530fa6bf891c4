"""
Landmark index tables.

These indices are an external contract with the pose-estimation topology:
MediaPipe FaceMesh with refined landmarks (478 points) and MediaPipe Hands
(21 points). A provider with a different topology breaks feature extraction
silently, since the only validation is the face length check. Changing the
provider model means updating this table, not the feature logic.
"""
from __future__ import annotations
from enum import IntEnum
from typing import Dict, Tuple

from domain.enums import EyeSide

FACE_LANDMARK_COUNT = 478
HAND_LANDMARK_COUNT = 21


class FaceLandmark(IntEnum):
    NOSE_TIP              = 1
    UPPER_INNER_LIP       = 13
    LOWER_INNER_LIP       = 14
    LEFT_EYE_INNER_CORNER = 133
    LEFT_EYE_LOWER_LID    = 145
    LEFT_EYE_UPPER_LID    = 159
    RIGHT_EYE_INNER_CORNER = 362
    RIGHT_EYE_LOWER_LID   = 374
    RIGHT_EYE_UPPER_LID   = 386


class HandLandmark(IntEnum):
    WRIST      = 0
    THUMB_CMC  = 1
    THUMB_MCP  = 2
    THUMB_IP   = 3
    THUMB_TIP  = 4
    INDEX_MCP  = 5
    INDEX_PIP  = 6
    INDEX_DIP  = 7
    INDEX_TIP  = 8
    MIDDLE_MCP = 9
    MIDDLE_PIP = 10
    MIDDLE_DIP = 11
    MIDDLE_TIP = 12
    RING_MCP   = 13
    RING_PIP   = 14
    RING_DIP   = 15
    RING_TIP   = 16
    PINKY_MCP  = 17
    PINKY_PIP  = 18
    PINKY_DIP  = 19
    PINKY_TIP  = 20


# (upper lid, lower lid) per subject eye
EYE_LIDS: Dict[EyeSide, Tuple[int, int]] = {
    EyeSide.LEFT:  (FaceLandmark.LEFT_EYE_UPPER_LID, FaceLandmark.LEFT_EYE_LOWER_LID),
    EyeSide.RIGHT: (FaceLandmark.RIGHT_EYE_UPPER_LID, FaceLandmark.RIGHT_EYE_LOWER_LID),
}

# thumb -> pinky, same order as domain.enums.Finger
FINGERTIPS: Tuple[int, ...] = (
    HandLandmark.THUMB_TIP,
    HandLandmark.INDEX_TIP,
    HandLandmark.MIDDLE_TIP,
    HandLandmark.RING_TIP,
    HandLandmark.PINKY_TIP,
)
FINGER_BASES: Tuple[int, ...] = (
    HandLandmark.THUMB_MCP,
    HandLandmark.INDEX_MCP,
    HandLandmark.MIDDLE_MCP,
    HandLandmark.RING_MCP,
    HandLandmark.PINKY_MCP,
)

HAND_CONNECTIONS: Tuple[Tuple[int, int], ...] = (
    (0, 1), (1, 2), (2, 3), (3, 4),          # thumb
    (0, 5), (5, 6), (6, 7), (7, 8),          # index
    (0, 9), (9, 10), (10, 11), (11, 12),     # middle
    (0, 13), (13, 14), (14, 15), (15, 16),   # ring
    (0, 17), (17, 18), (18, 19), (19, 20),   # pinky
    (5, 9), (9, 13), (13, 17),               # palm
)

# Face contour, forehead and chin points used for the pixelation box.
# Each index appears once, so the pixelation gate counts distinct points.
FACE_OUTLINE: Tuple[int, ...] = (
    10, 338, 297, 332, 284, 251, 389, 356, 454, 323, 361, 288, 397, 365, 379,
    378, 400, 377, 152, 148, 176, 149, 150, 136, 172, 58, 132, 93, 234, 127,
    162, 21, 54, 103, 67, 109, 151, 108, 336, 296, 334, 293, 300, 276, 283,
    282, 295, 285, 417, 465, 357,
)
