import pytest

from domain.enums import DataStreamOption, Handedness, TextAlign
from domain.landmarks import FACE_OUTLINE, HandLandmark
from domain.models import (
    Circle, ControlState, EffectFrame, FrameSnapshot, Line, Point2D, Polyline, Text,
)
from effects import (
    DataLabelsEffect, FaceMeshOverlay, FacePixelationEffect, FingertipDrawingEffect,
    HandOverlay, MouthTextEffect, WinkEffect, WristCircleEffect,
)
from effects.mouth_text import approximate_text_width, wrap_words
from effects.pixelation import face_region
from effects.wrist_circle import wrist_circle_size
from utils.constants import WINK_TEXT


def make_frame(face=None, hands=(), now_ms=0, width=640, height=480, **controls):
    return EffectFrame(
        snapshot=FrameSnapshot(face=face, hands=tuple(hands)),
        controls=ControlState(**controls),
        now_ms=now_ms,
        width=width,
        height=height,
    )


# ---- wrist circle ------------------------------------------------------------
@pytest.mark.parametrize("wrist_distance, size", [
    (50, 20), (400, 200), (500, 200), (10, 20), (225, 110),
])
def test_wrist_circle_size(wrist_distance, size):
    assert wrist_circle_size(wrist_distance) == pytest.approx(size)


def test_wrist_circle_between_first_two_wrists(hand_factory):
    hands = [hand_factory(wrist=(100, 300)), hand_factory(wrist=(500, 300)), hand_factory(wrist=(0, 0))]
    commands = WristCircleEffect().compose(make_frame(hands=hands))
    assert commands == [Circle(center=Point2D(300, 300), radius=100.0, color=(255, 255, 255))]


def test_wrist_circle_needs_two_wrists(hand_factory):
    effect = WristCircleEffect()
    assert effect.compose(make_frame(hands=[hand_factory()])) == []
    missing = hand_factory(missing=(HandLandmark.WRIST,))
    assert effect.compose(make_frame(hands=[hand_factory(), missing])) == []


# ---- wink --------------------------------------------------------------------
def test_wink_draws_centered_callout(face_factory):
    commands = WinkEffect().compose(make_frame(face=face_factory(left_eye_gap=1)))
    assert len(commands) == 1
    text = commands[0]
    assert text.text == WINK_TEXT
    assert text.position == Point2D(320, 240)
    assert text.align == TextAlign.CENTER
    assert text.bold


def test_no_wink_draws_nothing(face_factory):
    assert WinkEffect().compose(make_frame(face=face_factory())) == []
    assert WinkEffect().compose(make_frame()) == []


# ---- mouth text --------------------------------------------------------------
def test_wrap_words_breaks_before_overflow():
    measure = lambda text, size: len(text) * 10
    lines = wrap_words(["aaaa", "bbbb", "cccc"], max_width=100, size=24, measure=measure)
    assert lines == ["aaaa bbbb", "cccc"]


def test_wrap_words_keeps_long_word_on_its_own_line():
    measure = lambda text, size: len(text) * 10
    assert wrap_words(["x" * 30, "y"], max_width=100, size=24, measure=measure) == ["x" * 30, "y"]


def test_mouth_text_reveals_while_open(face_factory):
    effect = MouthTextEffect()
    effect.enable("hello there world")
    assert effect.compose(make_frame(face=face_factory(mouth_gap=0), now_ms=0)) == []

    commands = effect.compose(make_frame(face=face_factory(mouth_gap=30), now_ms=450))
    assert [c.text for c in commands] == ["hello there world"]
    assert commands[0].position == Point2D(320, 50)


def test_mouth_text_wraps_onto_several_lines(face_factory):
    effect = MouthTextEffect(measure=lambda text, size: len(text) * 20)
    effect.enable("one two three four five")
    commands = effect.compose(make_frame(face=face_factory(mouth_gap=30), now_ms=999, width=200))
    assert len(commands) > 1
    assert [c.position.y for c in commands] == [50 + 30 * i for i in range(len(commands))]
    assert " ".join(c.text for c in commands) == "one two three four five"


def test_approximate_width_scales_with_size():
    assert approximate_text_width("abcd", 20) == pytest.approx(40)


# ---- fingertip drawing -------------------------------------------------------
def test_fingertip_drawing_accumulates_strokes(hand_factory):
    effect = FingertipDrawingEffect()
    pointing = hand_factory(wrist=(300, 400), pose="pointing")
    for t in (0, 33, 66):
        commands = effect.compose(make_frame(hands=[pointing], now_ms=t, drawing_color="#FF0000"))

    polylines = [c for c in commands if isinstance(c, Polyline)]
    assert len(polylines) == 1
    assert len(polylines[0].points) == 3
    assert polylines[0].color == (255, 0, 0)
    indicator = [c for c in commands if isinstance(c, Circle)]
    assert indicator[0].center == pointing.get(HandLandmark.INDEX_TIP)


def test_fingertip_drawing_single_point_path_is_not_stroked(hand_factory):
    effect = FingertipDrawingEffect()
    commands = effect.compose(make_frame(hands=[hand_factory(pose="pointing")]))
    assert not any(isinstance(c, Polyline) for c in commands)


def test_fingertip_drawing_keeps_finished_paths(hand_factory):
    effect = FingertipDrawingEffect()
    pointing, fist = hand_factory(pose="pointing"), hand_factory(pose="fist")
    for t, hand in enumerate([pointing, pointing, fist]):
        commands = effect.compose(make_frame(hands=[hand], now_ms=t))
    assert [type(c) for c in commands] == [Polyline]
    effect.clear()
    assert effect.compose(make_frame(hands=[fist], now_ms=9)) == []


# ---- overlays ----------------------------------------------------------------
def test_face_mesh_colours_points_by_distance(face_factory):
    face = face_factory()
    commands = FaceMeshOverlay().compose(make_frame(face=face))
    assert len(commands) == len(face)
    assert all(isinstance(c, Circle) for c in commands)
    colors = {c.color for c in commands}
    assert len(colors) > 1
    assert all(c.radius == 2.5 for c in commands)


def test_face_mesh_without_face_is_empty():
    assert FaceMeshOverlay().compose(make_frame()) == []


def test_hand_overlay_draws_skeleton_and_label(hand_factory):
    hand = hand_factory(wrist=(300, 400), handedness=Handedness.LEFT)
    commands = HandOverlay().compose(make_frame(hands=[hand]))
    assert sum(isinstance(c, Circle) for c in commands) == 21
    assert sum(isinstance(c, Line) for c in commands) == 23
    label = [c for c in commands if isinstance(c, Text)][0]
    assert label.text == "Left"
    assert label.position == Point2D(300, 380)


def test_hand_overlay_unknown_handedness_label(hand_factory):
    hand = hand_factory(handedness=Handedness.UNKNOWN)
    label = [c for c in HandOverlay().compose(make_frame(hands=[hand])) if isinstance(c, Text)][0]
    assert label.text == "Hand"


# ---- pixelation --------------------------------------------------------------
def test_face_region_is_padded_and_clipped(face_factory):
    face = face_factory(center=(320, 240))
    region = face_region(face, 640, 480, pixel_size=12)
    outline = [face.get(i) for i in FACE_OUTLINE]
    assert region.x0 == int(min(p.x for p in outline) - 40)
    assert region.y1 == int(max(p.y for p in outline) + 40)
    assert region.pixel_size == 12

    edge = face_region(face_factory(center=(20, 20)), 640, 480, pixel_size=5)
    assert (edge.x0, edge.y0) == (0, 0)


def test_face_region_rejects_tiny_or_sparse_faces(face_factory):
    assert face_region(face_factory(center=(-30, -30), radius=2), 640, 480, 10) is None
    sparse = face_factory(missing=FACE_OUTLINE[:-5])
    assert face_region(sparse, 640, 480, 10) is None
    assert face_region(None, 640, 480, 10) is None


def test_face_region_needs_ten_distinct_outline_points(face_factory):
    assert len(set(FACE_OUTLINE)) == len(FACE_OUTLINE)
    assert face_region(face_factory(missing=FACE_OUTLINE[:-10]), 640, 480, 10) is not None
    assert face_region(face_factory(missing=FACE_OUTLINE[:-9]), 640, 480, 10) is None


def test_pixel_size_is_clamped(face_factory):
    assert face_region(face_factory(), 640, 480, 500).pixel_size == 50
    assert face_region(face_factory(), 640, 480, 0).pixel_size == 1


def test_pixelation_effect(face_factory):
    commands = FacePixelationEffect().compose(make_frame(face=face_factory(), pixel_size=8))
    assert len(commands) == 1 and commands[0].pixel_size == 8


# ---- data labels -------------------------------------------------------------
def test_data_labels_effect_follows_options(face_factory):
    effect = DataLabelsEffect()
    frame = make_frame(face=face_factory(), data_stream_options={DataStreamOption.NOSE_CENTER})
    assert [c.text for c in effect.compose(frame)] == ["(320, 240)"]
    assert effect.compose(make_frame(face=face_factory())) == []
