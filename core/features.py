"""
Feature extractors — stateless per-frame signals derived from landmark sets.

Absence is expected, not exceptional: every extractor returns its
documented default when the face / hand or a required landmark is missing.
"""
from __future__ import annotations
from typing import List, Optional, Sequence

from domain.enums import EyeSide, Finger
from domain.landmarks import (
    EYE_LIDS, FINGER_BASES, FINGERTIPS, FaceLandmark, HandLandmark,
)
from domain.models import FaceLandmarkSet, HandLandmarkSet, MaybePoint
from utils.constants import (
    EYE_OPEN_THRESHOLD, FINGER_EXTENSION_TOLERANCE, FIST_MIN_CLOSED_FINGERS,
    FIST_RADIUS, MOUTH_OPEN_THRESHOLD,
)
from utils.geometry import distance


def _face_point(face: Optional[FaceLandmarkSet], index: int) -> MaybePoint:
    # Face features require the full refined mesh.
    if face is None or not face.is_complete:
        return None
    return face.get(index)


# ---- face ----------------------------------------------------------------
def is_mouth_open(face: Optional[FaceLandmarkSet]) -> bool:
    """Inner-lip gap above threshold. False when the face is absent."""
    upper = _face_point(face, FaceLandmark.UPPER_INNER_LIP)
    lower = _face_point(face, FaceLandmark.LOWER_INNER_LIP)
    if upper is None or lower is None:
        return False
    return distance(upper, lower) > MOUTH_OPEN_THRESHOLD


def is_eye_open(face: Optional[FaceLandmarkSet], side: EyeSide) -> bool:
    """
    Eyelid gap above threshold.

    Defaults to True (open) whenever the face or a lid landmark is missing:
    an eye only counts as closed on positive small-gap evidence.
    """
    upper_index, lower_index = EYE_LIDS[EyeSide(side)]
    upper = _face_point(face, upper_index)
    lower = _face_point(face, lower_index)
    if upper is None or lower is None:
        return True
    return distance(upper, lower) > EYE_OPEN_THRESHOLD


def is_left_eye_open(face: Optional[FaceLandmarkSet]) -> bool:
    return is_eye_open(face, EyeSide.LEFT)


def is_right_eye_open(face: Optional[FaceLandmarkSet]) -> bool:
    return is_eye_open(face, EyeSide.RIGHT)


def get_nose_center(face: Optional[FaceLandmarkSet]) -> MaybePoint:
    return _face_point(face, FaceLandmark.NOSE_TIP)


# ---- hands ---------------------------------------------------------------
def get_wrist_positions(hands: Sequence[HandLandmarkSet]) -> List[MaybePoint]:
    """One slot per hand, in the provider's detection order."""
    return [hand.get(HandLandmark.WRIST) for hand in hands]


def is_hand_fist(hand: Optional[HandLandmarkSet]) -> bool:
    """
    True when at least 3 of the 5 fingertips lie within FIST_RADIUS of the
    wrist. Missing tips count as open; a missing wrist means no fist.
    """
    if hand is None:
        return False
    wrist = hand.get(HandLandmark.WRIST)
    if wrist is None:
        return False

    closed = 0
    for tip_index in FINGERTIPS:
        tip = hand.get(tip_index)
        if tip is not None and distance(wrist, tip) < FIST_RADIUS:
            closed += 1
    return closed >= FIST_MIN_CLOSED_FINGERS


def is_finger_extended(hand: Optional[HandLandmarkSet], finger: int) -> bool:
    """Tip further from the wrist than the finger base, plus a tolerance."""
    if hand is None or not 0 <= finger < len(FINGERTIPS):
        return False
    tip = hand.get(FINGERTIPS[finger])
    base = hand.get(FINGER_BASES[finger])
    wrist = hand.get(HandLandmark.WRIST)
    if tip is None or base is None or wrist is None:
        return False
    return distance(tip, wrist) > distance(base, wrist) + FINGER_EXTENSION_TOLERANCE


def get_fingertip_positions(hand: HandLandmarkSet) -> List[MaybePoint]:
    return [hand.get(index) for index in FINGERTIPS]


def get_all_fingertip_positions(hands: Sequence[HandLandmarkSet]) -> List[List[MaybePoint]]:
    """Per hand in detection order, fingertips ordered thumb -> pinky."""
    return [get_fingertip_positions(hand) for hand in hands]


def get_hands_open_status(hands: Sequence[HandLandmarkSet]) -> List[bool]:
    return [not is_hand_fist(hand) for hand in hands]


def find_drawing_fingertip(hands: Sequence[HandLandmarkSet]) -> MaybePoint:
    """
    Index fingertip of the first hand, in detection order, whose index
    finger is extended. None when no hand shows drawing intent.
    """
    for hand in hands:
        tip = hand.get(FINGERTIPS[Finger.INDEX])
        if tip is not None and is_finger_extended(hand, Finger.INDEX):
            return tip
    return None
