"""
Pure geometric utility functions.
No imports from the rest of the project beyond the Point2D type — safe to
use anywhere.
"""
from __future__ import annotations
import math
from typing import Iterable, Optional

from domain.models import Point2D


def distance(a: Optional[Point2D], b: Optional[Point2D]) -> float:
    """
    Euclidean distance between two 2D points.
    Returns 0.0 when either point is absent.
    """
    if a is None or b is None:
        return 0.0
    return math.hypot(a[0] - b[0], a[1] - b[1])


def clamp(value: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, value))


def lerp(a: float, b: float, t: float) -> float:
    return a + (b - a) * t


def normalize(value: float, lo: float, hi: float) -> float:
    """Position of value inside [lo, hi], clamped to [0, 1]."""
    if hi == lo:
        return 0.0
    return clamp((value - lo) / (hi - lo), 0.0, 1.0)


def map_range(
    value: float,
    in_lo: float,
    in_hi: float,
    out_lo: float,
    out_hi: float,
    clamp_output: bool = False,
) -> float:
    """
    Linear map of value from [in_lo, in_hi] onto [out_lo, out_hi].
    Extrapolates outside the input range unless clamp_output is set.
    """
    if in_hi == in_lo:
        return out_lo
    mapped = out_lo + (value - in_lo) * (out_hi - out_lo) / (in_hi - in_lo)
    if clamp_output:
        return clamp(mapped, min(out_lo, out_hi), max(out_lo, out_hi))
    return mapped


def midpoint(a: Point2D, b: Point2D) -> Point2D:
    return Point2D((a[0] + b[0]) / 2, (a[1] + b[1]) / 2)


def centroid(points: Iterable[Optional[Point2D]]) -> Optional[Point2D]:
    """Geometric centroid of the present points, or None if there are none."""
    xs, ys = [], []
    for p in points:
        if p is None:
            continue
        xs.append(p[0])
        ys.append(p[1])
    if not xs:
        return None
    n = len(xs)
    return Point2D(sum(xs) / n, sum(ys) / n)
