"""
FacePixelationEffect — picks the padded face box to pixelate.

The raster work happens in core.image_filters.pixelate_region; this effect
only decides the region.
"""
from __future__ import annotations
from typing import List, Optional

from domain.landmarks import FACE_OUTLINE
from domain.models import DrawCommand, EffectFrame, FaceLandmarkSet, PixelateRegion
from effects.base import Effect
from utils.constants import (
    MAX_PIXEL_SIZE, PIXELATION_MIN_LANDMARKS, PIXELATION_MIN_SIZE, PIXELATION_PADDING,
)


def face_region(
    face: Optional[FaceLandmarkSet],
    width: int,
    height: int,
    pixel_size: int,
) -> Optional[PixelateRegion]:
    """
    Bounding box of the face outline, padded and clipped to the canvas.
    None when fewer than PIXELATION_MIN_LANDMARKS outline points exist or
    the box is not larger than PIXELATION_MIN_SIZE on both sides.
    """
    if face is None:
        return None
    outline = [p for p in (face.get(i) for i in FACE_OUTLINE) if p is not None]
    if len(outline) < PIXELATION_MIN_LANDMARKS:
        return None

    x0 = max(0, min(p.x for p in outline) - PIXELATION_PADDING)
    y0 = max(0, min(p.y for p in outline) - PIXELATION_PADDING)
    x1 = min(width, max(p.x for p in outline) + PIXELATION_PADDING)
    y1 = min(height, max(p.y for p in outline) + PIXELATION_PADDING)

    if x1 - x0 <= PIXELATION_MIN_SIZE or y1 - y0 <= PIXELATION_MIN_SIZE:
        return None

    size = max(1, min(MAX_PIXEL_SIZE, int(pixel_size)))
    return PixelateRegion(int(x0), int(y0), int(x1), int(y1), size)


class FacePixelationEffect(Effect):
    NAME = "PIXELATION"

    def compose(self, frame: EffectFrame) -> List[DrawCommand]:
        region = face_region(frame.face, frame.width, frame.height, frame.controls.pixel_size)
        return [region] if region is not None else []
