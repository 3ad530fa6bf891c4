"""
OpenCVRenderer — all rasterisation isolated from detection and effect logic.

Effects never call cv2 directly: they return draw commands and this class
paints them onto the BGR frame.
"""
from __future__ import annotations
from typing import Iterable, Tuple

import cv2
import numpy as np

from core.image_filters import pixelate_region
from domain.enums import TextAlign, TextBaseline
from domain.models import Circle, DrawCommand, Line, PixelateRegion, Polyline, Text
from utils.colors import rgb_to_bgr

_FONT = cv2.FONT_HERSHEY_SIMPLEX
# Hershey simplex at scale 1.0 is roughly 22 px tall.
_FONT_PX = 22.0


def _pt(point) -> Tuple[int, int]:
    return (int(round(point[0])), int(round(point[1])))


class OpenCVRenderer:
    """Paints draw commands onto frames, in the order given."""

    def render(self, frame: np.ndarray, commands: Iterable[DrawCommand]) -> np.ndarray:
        """
        Returns the painted frame. The input frame is painted in place,
        except for pixelation which replaces it with a new array.
        """
        for cmd in commands:
            if isinstance(cmd, PixelateRegion):
                frame = pixelate_region(frame, cmd)
            elif isinstance(cmd, Circle):
                cv2.circle(frame, _pt(cmd.center), max(1, int(round(cmd.radius))),
                           rgb_to_bgr(cmd.color), -1, cv2.LINE_AA)
            elif isinstance(cmd, Line):
                cv2.line(frame, _pt(cmd.start), _pt(cmd.end),
                         rgb_to_bgr(cmd.color), cmd.thickness, cv2.LINE_AA)
            elif isinstance(cmd, Polyline):
                pts = np.array([_pt(p) for p in cmd.points], dtype=np.int32).reshape(-1, 1, 2)
                cv2.polylines(frame, [pts], False, rgb_to_bgr(cmd.color),
                              cmd.thickness, cv2.LINE_AA)
            elif isinstance(cmd, Text):
                self._text(frame, cmd)
            else:
                raise TypeError(f"Unknown draw command: {cmd!r}")
        return frame

    # ------------------------------------------------------------------
    def text_width(self, text: str, size: float) -> float:
        """Rendered width in px; plugged into the mouth-text word wrap."""
        (w, _), _ = cv2.getTextSize(text, _FONT, size / _FONT_PX, 1)
        return float(w)

    def _text(self, frame: np.ndarray, cmd: Text) -> None:
        scale = cmd.size / _FONT_PX
        thickness = 2 if cmd.bold else 1
        (w, h), _ = cv2.getTextSize(cmd.text, _FONT, scale, thickness)

        x, y = cmd.position
        if cmd.align == TextAlign.CENTER:
            x -= w / 2
        elif cmd.align == TextAlign.RIGHT:
            x -= w
        if cmd.baseline == TextBaseline.TOP:
            y += h
        elif cmd.baseline == TextBaseline.CENTER:
            y += h / 2
        origin = _pt((x, y))

        if cmd.outline is not None and cmd.outline_thickness > 0:
            cv2.putText(frame, cmd.text, origin, _FONT, scale, rgb_to_bgr(cmd.outline),
                        thickness + 2 * cmd.outline_thickness, cv2.LINE_AA)
        cv2.putText(frame, cmd.text, origin, _FONT, scale, rgb_to_bgr(cmd.color),
                    thickness, cv2.LINE_AA)
