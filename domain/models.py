from __future__ import annotations
from dataclasses import dataclass, field
from typing import NamedTuple, Optional, Sequence, Set, Tuple, Union

from domain.enums import (
    DataStreamOption, Handedness, TextAlign, TextBaseline, VideoFilter,
)
from domain.landmarks import FACE_LANDMARK_COUNT
from utils.constants import DEFAULT_DRAWING_COLOR, DEFAULT_QUOTE, DEFAULT_WORD_DISPLAY_MS

# Type aliases
Color = Tuple[int, int, int]    # RGB


class Point2D(NamedTuple):
    """Image-space point, already mirrored to the viewer's orientation."""
    x: float
    y: float


MaybePoint = Optional[Point2D]


def _get(points: Sequence[MaybePoint], index: int) -> MaybePoint:
    if 0 <= index < len(points):
        return points[index]
    return None


@dataclass(frozen=True)
class FaceLandmarkSet:
    """
    Ordered face landmarks. Entries may be None when the provider could not
    resolve a point.
    """
    points: Tuple[MaybePoint, ...]

    def __len__(self) -> int:
        return len(self.points)

    def get(self, index: int) -> MaybePoint:
        return _get(self.points, index)

    @property
    def is_complete(self) -> bool:
        return len(self.points) >= FACE_LANDMARK_COUNT


@dataclass(frozen=True)
class HandLandmarkSet:
    points: Tuple[MaybePoint, ...]
    handedness: Handedness = Handedness.UNKNOWN

    def __len__(self) -> int:
        return len(self.points)

    def get(self, index: int) -> MaybePoint:
        return _get(self.points, index)


@dataclass(frozen=True)
class FrameSnapshot:
    """
    The landmark sets visible to one render tick. Face and hands come from
    two independently updated slots, so they may stem from different polls.
    """
    face: Optional[FaceLandmarkSet] = None
    hands: Tuple[HandLandmarkSet, ...] = ()
    face_seq: int = 0
    hands_seq: int = 0

    @property
    def detection_count(self) -> int:
        return (1 if self.face is not None else 0) + len(self.hands)


@dataclass(frozen=True)
class PathPoint:
    point: Point2D
    timestamp: int      # ms


DrawingPath = Tuple[PathPoint, ...]


# ---- draw commands --------------------------------------------------------
@dataclass(frozen=True)
class Circle:
    center: Point2D
    radius: float
    color: Color


@dataclass(frozen=True)
class Line:
    start: Point2D
    end: Point2D
    color: Color
    thickness: int = 1


@dataclass(frozen=True)
class Polyline:
    """Open path through the points."""
    points: Tuple[Point2D, ...]
    color: Color
    thickness: int = 1


@dataclass(frozen=True)
class Text:
    text: str
    position: Point2D
    size: float
    color: Color
    align: TextAlign = TextAlign.LEFT
    baseline: TextBaseline = TextBaseline.BASELINE
    outline: Optional[Color] = None
    outline_thickness: int = 0
    bold: bool = False


@dataclass(frozen=True)
class PixelateRegion:
    """Pixel box [x0, x1) x [y0, y1) to be pixelated in blocks of pixel_size."""
    x0: int
    y0: int
    x1: int
    y1: int
    pixel_size: int


DrawCommand = Union[Circle, Line, Polyline, Text, PixelateRegion]


# ---- control surface ------------------------------------------------------
@dataclass
class ControlState:
    """
    Values owned by the UI control layer. The engine only reads them;
    changes that carry side effects go through EffectComposer.apply().
    """
    show_video: bool = True
    show_face: bool = True
    show_hands: bool = False
    show_data_stream: bool = False
    show_data_on_visualization: bool = False
    show_pixelation: bool = False
    show_fingertip_drawing: bool = False

    wink_trigger: bool = False
    mouth_text_trigger: bool = False
    wrist_circle_trigger: bool = False

    pixel_size: int = 1
    word_display_ms: int = DEFAULT_WORD_DISPLAY_MS
    quote: str = DEFAULT_QUOTE
    drawing_color: str = DEFAULT_DRAWING_COLOR
    video_filter: VideoFilter = VideoFilter.NONE
    data_stream_options: Set[DataStreamOption] = field(default_factory=set)


@dataclass
class EffectFrame:
    """
    Everything one effect needs for a single render tick.
    Passed to every effect instead of individual arguments.
    """
    snapshot: FrameSnapshot
    controls: ControlState
    now_ms: int
    width: int
    height: int

    # ---- convenience accessors ----------------------------------------
    @property
    def face(self) -> Optional[FaceLandmarkSet]:
        return self.snapshot.face

    @property
    def hands(self) -> Tuple[HandLandmarkSet, ...]:
        return self.snapshot.hands
