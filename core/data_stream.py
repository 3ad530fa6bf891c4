"""
DataStreamFormatter — human-readable telemetry for the enabled options.

Two renditions of the same values, recomputed every tick:
  - telemetry(): ordered name -> text mapping for the side panel.
  - labels():    Text commands anchored next to the relevant landmark.

Hands are numbered from 1 in the output, in detection order.
"""
from __future__ import annotations
from typing import AbstractSet, Dict, List, Optional

from core.features import (
    get_all_fingertip_positions, get_hands_open_status, get_nose_center,
    get_wrist_positions, is_left_eye_open, is_mouth_open, is_right_eye_open,
)
from domain.enums import DataStreamOption as Opt, Finger
from domain.landmarks import FaceLandmark, HandLandmark
from domain.models import FrameSnapshot, MaybePoint, Point2D, Text
from utils.constants import LABEL_COLOR, LABEL_OUTLINE, LABEL_TEXT_SIZE

NO_DATA_MESSAGE = "No data options selected"
NOT_DETECTED = "Not detected"

FINGER_NAMES = {f: f.name.capitalize() for f in Finger}   # Thumb, Index, ...
FINGER_ABBREVIATIONS = {f: f.name[0] for f in Finger}     # T, I, M, R, P


def _flag(value: bool) -> str:
    return "true" if value else "false"


def _coords(point: MaybePoint, decimals: int = 1) -> str:
    if point is None:
        return NOT_DETECTED
    return f"({point.x:.{decimals}f}, {point.y:.{decimals}f})"


class DataStreamFormatter:

    def telemetry(self, snapshot: FrameSnapshot, options: AbstractSet[Opt]) -> Dict[str, str]:
        """Empty dict when no option is enabled (the panel shows NO_DATA_MESSAGE)."""
        face, hands = snapshot.face, snapshot.hands
        lines: Dict[str, str] = {}

        if Opt.MOUTH_OPEN in options:
            lines["Mouth Open"] = _flag(is_mouth_open(face))
        if Opt.LEFT_EYE_OPEN in options:
            lines["Left Eye Open"] = _flag(is_left_eye_open(face))
        if Opt.RIGHT_EYE_OPEN in options:
            lines["Right Eye Open"] = _flag(is_right_eye_open(face))
        if Opt.NOSE_CENTER in options:
            lines["Nose Center"] = _coords(get_nose_center(face))
        if Opt.WRIST_POSITION in options:
            for i, wrist in enumerate(get_wrist_positions(hands)):
                lines[f"Wrist {i + 1}"] = _coords(wrist)
        if Opt.HAND_OPEN in options:
            for i, is_open in enumerate(get_hands_open_status(hands)):
                lines[f"Hand {i + 1} Open"] = _flag(is_open)
        if Opt.FINGERTIP_POSITIONS in options:
            for i, tips in enumerate(get_all_fingertip_positions(hands)):
                for finger, tip in zip(Finger, tips):
                    if tip is not None:
                        lines[f"Hand {i + 1} {FINGER_NAMES[finger]}"] = _coords(tip)

        return lines

    def labels(self, snapshot: FrameSnapshot, options: AbstractSet[Opt]) -> List[Text]:
        face, hands = snapshot.face, snapshot.hands
        labels: List[Text] = []

        if face is not None:
            if Opt.MOUTH_OPEN in options:
                state = "Open" if is_mouth_open(face) else "Closed"
                self._add(labels, f"Mouth: {state}",
                          face.get(FaceLandmark.LOWER_INNER_LIP), 10, 20)
            if Opt.LEFT_EYE_OPEN in options:
                state = "Open" if is_left_eye_open(face) else "Closed"
                self._add(labels, f"L Eye: {state}",
                          face.get(FaceLandmark.LEFT_EYE_INNER_CORNER), 15, -10)
            if Opt.RIGHT_EYE_OPEN in options:
                state = "Open" if is_right_eye_open(face) else "Closed"
                self._add(labels, f"R Eye: {state}",
                          face.get(FaceLandmark.RIGHT_EYE_INNER_CORNER), -60, -10)

        if Opt.NOSE_CENTER in options:
            nose = get_nose_center(face)
            if nose is not None:
                self._add(labels, _coords(nose, 0), nose, 10, -10)

        if Opt.WRIST_POSITION in options:
            for i, wrist in enumerate(get_wrist_positions(hands)):
                if wrist is not None:
                    self._add(labels, f"W{i + 1}: {_coords(wrist, 0)}", wrist, 10, -10)

        if Opt.HAND_OPEN in options:
            for hand, is_open in zip(hands, get_hands_open_status(hands)):
                self._add(labels, "Open" if is_open else "Closed",
                          hand.get(HandLandmark.MIDDLE_MCP), 10, 20)

        if Opt.FINGERTIP_POSITIONS in options:
            for tips in get_all_fingertip_positions(hands):
                for finger, tip in zip(Finger, tips):
                    if tip is not None:
                        text = f"{FINGER_ABBREVIATIONS[finger]}:({tip.x:.0f},{tip.y:.0f})"
                        self._add(labels, text, tip, 8, -8)

        return labels

    # ------------------------------------------------------------------
    @staticmethod
    def _add(labels: List[Text], text: str, anchor: Optional[Point2D], dx: float, dy: float) -> None:
        if anchor is None:
            return
        labels.append(Text(
            text=text,
            position=Point2D(anchor.x + dx, anchor.y + dy),
            size=LABEL_TEXT_SIZE,
            color=LABEL_COLOR,
            outline=LABEL_OUTLINE,
            outline_thickness=1,
        ))
