from __future__ import annotations

from dataclasses import dataclass

from twenty48.errors import IncompatibleMergeError, InvalidTileValueError


@dataclass(frozen=True, slots=True)
class Tile:
    """A single cell value: 0 for empty, otherwise a power of two >= 2.

    ``merged`` marks a tile produced by a merge during the current move so it
    cannot take part in a second merge before the move finishes.
    """
    value: int = 0
    merged: bool = False

    def __post_init__(self) -> None:
        value = self.value
        if value < 0 or value == 1 or (value & (value - 1)) != 0:
            raise InvalidTileValueError(f"Invalid tile value: {value}")

    @classmethod
    def empty(cls) -> Tile:
        return cls(0)

    @property
    def is_empty(self) -> bool:
        return self.value == 0

    def can_merge_with(self, other: Tile) -> bool:
        return (
            not self.is_empty
            and not self.merged
            and not other.merged
            and self.value == other.value
        )

    def merge_with(self, other: Tile) -> Tile:
        if not self.can_merge_with(other):
            raise IncompatibleMergeError(
                f"Cannot merge tiles {self.value} and {other.value}"
            )
        return Tile(self.value * 2, merged=True)

    def fresh(self) -> Tile:
        """Copy of this tile with the per-move merged flag cleared."""
        if not self.merged:
            return self
        return Tile(self.value)
