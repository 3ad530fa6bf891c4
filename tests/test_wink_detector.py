from core.wink_detector import WinkDetector
from domain.enums import WinkState


def test_one_eye_closed_is_a_wink(face_factory):
    detector = WinkDetector()
    assert detector.update(face_factory(left_eye_gap=2, right_eye_gap=12)) == WinkState.WINKING
    assert detector.is_winking
    assert detector.update(face_factory(left_eye_gap=12, right_eye_gap=2)) == WinkState.WINKING


def test_both_open_or_both_closed_is_not_a_wink(face_factory):
    detector = WinkDetector()
    assert detector.update(face_factory()) == WinkState.NO_WINK
    assert detector.update(face_factory(left_eye_gap=1, right_eye_gap=1)) == WinkState.NO_WINK


def test_absent_face_is_not_a_wink():
    detector = WinkDetector()
    assert detector.update(None) == WinkState.NO_WINK


def test_no_debounce(face_factory):
    detector = WinkDetector()
    states = [
        detector.update(face_factory(left_eye_gap=gap))
        for gap in (7, 9, 7, 9)
    ]
    assert states == [WinkState.WINKING, WinkState.NO_WINK, WinkState.WINKING, WinkState.NO_WINK]


def test_reset(face_factory):
    detector = WinkDetector()
    detector.update(face_factory(left_eye_gap=0))
    detector.reset()
    assert detector.state == WinkState.NO_WINK
