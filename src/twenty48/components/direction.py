"""Move directions and the line <-> cell coordinate mapping."""
from __future__ import annotations

from enum import Enum

from twenty48.components.position import Position


class Direction(Enum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    @classmethod
    def from_name(cls, name: str | None) -> Direction | None:
        if not isinstance(name, str):
            return None
        try:
            return cls(name.strip().lower())
        except ValueError:
            return None


def cell_for(direction: Direction, line: int, offset: int, size: int) -> Position:
    """Board cell holding element ``offset`` of line ``line`` for ``direction``.

    Offset 0 is always the edge tiles slide toward. The same mapping is used for
    reading a line, writing it back and translating merge positions.
    """
    match direction:
        case Direction.LEFT:
            return Position(line, offset)
        case Direction.RIGHT:
            return Position(line, size - 1 - offset)
        case Direction.UP:
            return Position(offset, line)
        case Direction.DOWN:
            return Position(size - 1 - offset, line)
    raise ValueError(f"Unknown direction: {direction!r}")
