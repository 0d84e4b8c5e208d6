from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Iterable, Tuple

from twenty48.components.position import Position
from twenty48.components.score import Score


@dataclass(frozen=True, slots=True)
class MergeEvent:
    position: Position
    old_value: int
    new_value: int


@dataclass(frozen=True, slots=True)
class SpawnedTile:
    position: Position
    value: int


@dataclass(frozen=True, slots=True)
class MoveResult:
    """Outcome of a single move attempt across the whole board."""
    moved: bool
    tiles_moved: int = 0
    tiles_merged: int = 0
    score_gained: Score = field(default_factory=Score.zero)
    merge_events: Tuple[MergeEvent, ...] = ()
    spawned: SpawnedTile | None = None

    @classmethod
    def no_move(cls) -> MoveResult:
        return cls(moved=False)

    @classmethod
    def success(
        cls,
        tiles_moved: int,
        tiles_merged: int,
        score_gained: Score,
        merge_events: Iterable[MergeEvent],
    ) -> MoveResult:
        return cls(
            moved=True,
            tiles_moved=tiles_moved,
            tiles_merged=tiles_merged,
            score_gained=score_gained,
            merge_events=tuple(merge_events),
        )

    def with_score_gained(self, extra: Score) -> MoveResult:
        return replace(self, score_gained=self.score_gained + extra)

    def with_spawned(self, spawned: SpawnedTile) -> MoveResult:
        return replace(self, spawned=spawned)

    def __str__(self) -> str:
        if not self.moved:
            return "No movement"
        return (
            f"Moved: {self.tiles_moved} tiles, Merged: {self.tiles_merged} tiles, "
            f"Score: +{self.score_gained.value}"
        )
