"""
Raster operations on BGR frames: whole-frame video filters and block
pixelation of a region. Everything returns a new array; inputs are not
modified.
"""
from __future__ import annotations

import cv2
import numpy as np

from domain.enums import VideoFilter
from domain.models import PixelateRegion


def to_black_and_white(frame: np.ndarray) -> np.ndarray:
    gray = cv2.cvtColor(frame, cv2.COLOR_BGR2GRAY)
    return cv2.cvtColor(gray, cv2.COLOR_GRAY2BGR)


def invert(frame: np.ndarray) -> np.ndarray:
    return cv2.bitwise_not(frame)


def apply_video_filter(frame: np.ndarray, video_filter: VideoFilter) -> np.ndarray:
    video_filter = VideoFilter(video_filter)
    if video_filter == VideoFilter.BW:
        return to_black_and_white(frame)
    if video_filter == VideoFilter.INVERT:
        return invert(frame)
    return frame.copy()


def pixelate_region(frame: np.ndarray, region: PixelateRegion) -> np.ndarray:
    """
    Fill each pixel_size block of the region with the colour sampled at the
    block's centre (clamped to the region for partial edge blocks).
    pixel_size 1 leaves the frame unchanged.
    """
    out = frame.copy()
    ps = int(region.pixel_size)
    h, w = frame.shape[:2]
    x0, x1 = max(0, region.x0), min(w, region.x1)
    y0, y1 = max(0, region.y0), min(h, region.y1)
    if ps <= 1 or x1 <= x0 or y1 <= y0:
        return out

    sub = frame[y0:y1, x0:x1]
    rows = np.minimum(np.arange(0, y1 - y0, ps) + ps // 2, y1 - y0 - 1)
    cols = np.minimum(np.arange(0, x1 - x0, ps) + ps // 2, x1 - x0 - 1)
    small = sub[rows][:, cols]

    blocks = np.repeat(np.repeat(small, ps, axis=0), ps, axis=1)
    out[y0:y1, x0:x1] = blocks[: y1 - y0, : x1 - x0]
    return out
