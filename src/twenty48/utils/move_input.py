"""Translate raw key names and swipe gestures into move directions."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Tuple

from twenty48.components.direction import Direction
from twenty48.constants import MINIMUM_SWIPE_DISTANCE

KEY_DIRECTIONS: Dict[str, Direction] = {
    "arrowup": Direction.UP,
    "arrowdown": Direction.DOWN,
    "arrowleft": Direction.LEFT,
    "arrowright": Direction.RIGHT,
    "up": Direction.UP,
    "down": Direction.DOWN,
    "left": Direction.LEFT,
    "right": Direction.RIGHT,
    "w": Direction.UP,
    "s": Direction.DOWN,
    "a": Direction.LEFT,
    "d": Direction.RIGHT,
}
RESTART_KEYS = frozenset({"r"})


def _normalize_key(key: str) -> str:
    return key.strip().lower()


def direction_from_key(key: str | None) -> Direction | None:
    if not isinstance(key, str):
        return None
    return KEY_DIRECTIONS.get(_normalize_key(key))


def is_restart_key(key: str | None) -> bool:
    return isinstance(key, str) and _normalize_key(key) in RESTART_KEYS


def direction_from_swipe(
    dx: float,
    dy: float,
    min_distance: float = MINIMUM_SWIPE_DISTANCE,
) -> Direction | None:
    """Resolve a swipe delta in screen coordinates (+dy points down).

    The dominant axis wins; ties go to the vertical axis. Deltas shorter than
    ``min_distance`` along the dominant axis are ignored.
    """
    if abs(dx) > abs(dy):
        if abs(dx) < min_distance:
            return None
        return Direction.RIGHT if dx > 0 else Direction.LEFT
    if abs(dy) < min_distance:
        return None
    return Direction.DOWN if dy > 0 else Direction.UP


@dataclass(slots=True)
class SwipeTracker:
    """Turns a press/release pair into a swipe direction.

    ``y_up`` flips the vertical axis for window systems whose y grows upward
    (arcade), so a drag toward the top of the screen still means Up.
    """

    min_distance: float = MINIMUM_SWIPE_DISTANCE
    y_up: bool = False
    _start: Tuple[float, float] | None = field(init=False, default=None, repr=False)

    def begin(self, x: float, y: float) -> None:
        self._start = (float(x), float(y))

    def cancel(self) -> None:
        self._start = None

    @property
    def active(self) -> bool:
        return self._start is not None

    def end(self, x: float, y: float) -> Direction | None:
        if self._start is None:
            return None
        start_x, start_y = self._start
        self._start = None
        dx = float(x) - start_x
        dy = float(y) - start_y
        if self.y_up:
            dy = -dy
        return direction_from_swipe(dx, dy, self.min_distance)
