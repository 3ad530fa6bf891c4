from core.drawing_paths import DrawingPathAccumulator
from domain.enums import DrawingState
from domain.models import Point2D

TIP = Point2D(100, 100)


def test_intent_sequence_builds_two_paths():
    acc = DrawingPathAccumulator()
    states = [
        acc.update(TIP if intent else None, t)
        for intent, t in ((True, 0), (True, 10), (False, 20), (True, 30))
    ]
    assert states == [DrawingState.DRAWING, DrawingState.DRAWING, DrawingState.IDLE, DrawingState.DRAWING]

    assert len(acc.finalized_paths) == 1
    assert [p.timestamp for p in acc.finalized_paths[0]] == [0, 10]
    assert [p.timestamp for p in acc.active_path] == [30]
    assert len(acc.all_paths()) == 2

    acc.update(None, 40)
    assert len(acc.finalized_paths) == 2
    assert acc.active_path is None


def test_repeated_points_are_kept():
    acc = DrawingPathAccumulator()
    for t in range(3):
        acc.update(TIP, t)
    assert len(acc.active_path) == 3


def test_idle_without_intent_creates_nothing():
    acc = DrawingPathAccumulator()
    assert acc.update(None, 0) == DrawingState.IDLE
    assert acc.all_paths() == ()


def test_clear_drops_everything():
    acc = DrawingPathAccumulator()
    acc.update(TIP, 0)
    acc.update(None, 1)
    acc.update(TIP, 2)
    acc.clear()
    assert acc.all_paths() == ()
    assert acc.state == DrawingState.IDLE
    assert acc.finalized_paths == ()


def test_finalized_paths_are_immutable_snapshots():
    acc = DrawingPathAccumulator()
    acc.update(TIP, 0)
    acc.update(None, 1)
    path = acc.finalized_paths[0]
    acc.update(Point2D(5, 5), 2)
    assert len(path) == 1
    assert isinstance(path, tuple)
