"""
Landmark overlays — raw face mesh and hand skeletons.

FaceMeshOverlay colours each point by its distance from the face centroid
(normalised by the canvas half-diagonal and bent with an exponent so the
ramp reaches blue sooner). HandOverlay draws points, bone connections and
the handedness label above the wrist.
"""
from __future__ import annotations
import math
from typing import List

from domain.enums import Handedness, TextAlign
from domain.landmarks import HAND_CONNECTIONS, HandLandmark
from domain.models import Circle, DrawCommand, EffectFrame, Line, Point2D, Text
from effects.base import Effect
from utils.colors import color_ramp
from utils.constants import (
    FACE_RAMP_EXPONENT, HAND_COLOR, HAND_LABEL_OFFSET, HAND_LABEL_SIZE,
    LINE_THICKNESS, POINT_SIZE,
)
from utils.geometry import centroid, distance, normalize


class FaceMeshOverlay(Effect):
    NAME = "FACE_MESH"

    def compose(self, frame: EffectFrame) -> List[DrawCommand]:
        face = frame.face
        if face is None:
            return []
        center = centroid(face.points)
        if center is None:
            return []

        max_distance = math.hypot(frame.width / 2, frame.height / 2)
        commands: List[DrawCommand] = []
        for point in face.points:
            if point is None:
                continue
            t = normalize(distance(point, center), 0.0, max_distance)
            commands.append(Circle(
                center=point,
                radius=POINT_SIZE / 2,
                color=color_ramp(t ** FACE_RAMP_EXPONENT),
            ))
        return commands


class HandOverlay(Effect):
    NAME = "HANDS"

    def compose(self, frame: EffectFrame) -> List[DrawCommand]:
        commands: List[DrawCommand] = []
        for hand in frame.hands:
            for point in hand.points:
                if point is not None:
                    commands.append(Circle(center=point, radius=POINT_SIZE / 2, color=HAND_COLOR))

            for a, b in HAND_CONNECTIONS:
                start, end = hand.get(a), hand.get(b)
                if start is not None and end is not None:
                    commands.append(Line(start=start, end=end, color=HAND_COLOR,
                                         thickness=LINE_THICKNESS))

            wrist = hand.get(HandLandmark.WRIST)
            if wrist is not None:
                label = hand.handedness.value if hand.handedness != Handedness.UNKNOWN else "Hand"
                commands.append(Text(
                    text=label,
                    position=Point2D(wrist.x, wrist.y - HAND_LABEL_OFFSET),
                    size=HAND_LABEL_SIZE,
                    color=HAND_COLOR,
                    align=TextAlign.CENTER,
                ))
        return commands
