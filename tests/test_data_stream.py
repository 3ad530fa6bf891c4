import pytest

from core.data_stream import NOT_DETECTED, DataStreamFormatter
from domain.enums import DataStreamOption as Opt
from domain.landmarks import FaceLandmark, HandLandmark
from domain.models import FrameSnapshot, Point2D


@pytest.fixture
def formatter():
    return DataStreamFormatter()


def test_no_options_gives_empty_panel(formatter, face_factory):
    assert formatter.telemetry(FrameSnapshot(face=face_factory()), set()) == {}
    assert formatter.labels(FrameSnapshot(face=face_factory()), set()) == []


def test_face_flags(formatter, face_factory):
    snap = FrameSnapshot(face=face_factory(mouth_gap=30, left_eye_gap=2))
    values = formatter.telemetry(snap, {Opt.MOUTH_OPEN, Opt.LEFT_EYE_OPEN, Opt.RIGHT_EYE_OPEN})
    assert values == {
        "Mouth Open": "true",
        "Left Eye Open": "false",
        "Right Eye Open": "true",
    }


def test_absent_face_defaults(formatter):
    values = formatter.telemetry(FrameSnapshot(), set(Opt))
    assert values["Mouth Open"] == "false"
    assert values["Left Eye Open"] == "true"
    assert values["Nose Center"] == NOT_DETECTED
    assert not any(key.startswith("Wrist") for key in values)


def test_nose_center_formatting(formatter, face_factory):
    snap = FrameSnapshot(face=face_factory(center=(120.25, 80)))
    assert formatter.telemetry(snap, {Opt.NOSE_CENTER}) == {"Nose Center": "(120.2, 80.0)"}


def test_hands_are_numbered_from_one(formatter, hand_factory):
    snap = FrameSnapshot(hands=(
        hand_factory(wrist=(10, 20), pose="open"),
        hand_factory(wrist=(30, 40), pose="fist"),
    ))
    values = formatter.telemetry(snap, {Opt.WRIST_POSITION, Opt.HAND_OPEN})
    assert values == {
        "Wrist 1": "(10.0, 20.0)",
        "Wrist 2": "(30.0, 40.0)",
        "Hand 1 Open": "true",
        "Hand 2 Open": "false",
    }


def test_fingertips_use_finger_names(formatter, hand_factory):
    snap = FrameSnapshot(hands=(hand_factory(wrist=(300, 400), pose="open"),))
    values = formatter.telemetry(snap, {Opt.FINGERTIP_POSITIONS})
    assert list(values) == [
        "Hand 1 Thumb", "Hand 1 Index", "Hand 1 Middle", "Hand 1 Ring", "Hand 1 Pinky",
    ]
    assert values["Hand 1 Middle"] == "(300.0, 220.0)"


def test_labels_are_anchored_next_to_landmarks(formatter, face_factory, hand_factory):
    face = face_factory(mouth_gap=30)
    hand = hand_factory(wrist=(300, 400), pose="fist")
    snap = FrameSnapshot(face=face, hands=(hand,))
    labels = {
        label.text: label
        for label in formatter.labels(snap, {Opt.MOUTH_OPEN, Opt.WRIST_POSITION, Opt.HAND_OPEN})
    }

    lower_lip = face.get(FaceLandmark.LOWER_INNER_LIP)
    assert labels["Mouth: Open"].position == Point2D(lower_lip.x + 10, lower_lip.y + 20)
    assert labels["W1: (300, 400)"].position == Point2D(310, 390)
    palm = hand.get(HandLandmark.MIDDLE_MCP)
    assert labels["Closed"].position == Point2D(palm.x + 10, palm.y + 20)


def test_fingertip_labels_use_abbreviations(formatter, hand_factory):
    snap = FrameSnapshot(hands=(hand_factory(wrist=(300, 400), pose="open"),))
    texts = [label.text for label in formatter.labels(snap, {Opt.FINGERTIP_POSITIONS})]
    assert texts == [
        "T:(240,220)", "I:(270,220)", "M:(300,220)", "R:(330,220)", "P:(360,220)",
    ]
