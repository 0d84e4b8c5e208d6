import pytest

from twenty48.components.direction import Direction
from twenty48.utils.move_input import (
    SwipeTracker,
    direction_from_key,
    direction_from_swipe,
    is_restart_key,
)


@pytest.mark.parametrize(
    "key, expected",
    [
        ("ArrowUp", Direction.UP),
        ("arrowdown", Direction.DOWN),
        ("LEFT", Direction.LEFT),
        ("d", Direction.RIGHT),
        ("W", Direction.UP),
        ("q", None),
        (None, None),
    ],
)
def test_direction_from_key(key, expected):
    assert direction_from_key(key) is expected


def test_restart_key():
    assert is_restart_key("R")
    assert not is_restart_key("t")
    assert not is_restart_key(None)


def test_swipe_below_threshold_is_ignored():
    assert direction_from_swipe(29, 0) is None
    assert direction_from_swipe(0, -29) is None


def test_swipe_at_threshold_counts():
    assert direction_from_swipe(30, 0) is Direction.RIGHT
    assert direction_from_swipe(-30, 0) is Direction.LEFT
    assert direction_from_swipe(0, 30) is Direction.DOWN
    assert direction_from_swipe(0, -30) is Direction.UP


def test_dominant_axis_wins():
    assert direction_from_swipe(80, 40) is Direction.RIGHT
    assert direction_from_swipe(-10, 60) is Direction.DOWN


def test_tie_goes_vertical():
    assert direction_from_swipe(50, -50) is Direction.UP


def test_custom_threshold():
    assert direction_from_swipe(40, 0, min_distance=50) is None


def test_tracker_screen_coordinates():
    tracker = SwipeTracker()
    tracker.begin(100, 100)
    assert tracker.active
    assert tracker.end(100, 160) is Direction.DOWN
    assert not tracker.active


def test_tracker_flips_y_up_axis():
    tracker = SwipeTracker(y_up=True)
    tracker.begin(100, 100)
    assert tracker.end(100, 160) is Direction.UP


def test_tracker_end_without_begin():
    tracker = SwipeTracker()
    assert tracker.end(10, 10) is None
    tracker.begin(0, 0)
    tracker.cancel()
    assert tracker.end(100, 0) is None
