"""Slide-and-merge of a single row or column.

Lines are direction-neutral: offset 0 is the edge tiles move toward. Callers
read and write lines through ``cell_for`` so the same routine serves all four
directions.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Sequence, Tuple

from twenty48.components.tile import Tile


@dataclass(frozen=True, slots=True)
class LineMergeEvent:
    offset: int
    old_value: int
    new_value: int


@dataclass(frozen=True, slots=True)
class LineMergeResult:
    tiles: Tuple[Tile, ...]
    moved: bool
    tiles_moved: int
    tiles_merged: int
    score_gained: int
    merge_events: Tuple[LineMergeEvent, ...]


def _compact(line: Sequence[Tile]) -> Tuple[List[Tile], int]:
    """Pack non-empty tiles toward offset 0; returns (tiles, how many changed offset)."""
    packed: List[Tile] = []
    shifted = 0
    for index, tile in enumerate(line):
        if tile.is_empty:
            continue
        if len(packed) != index:
            shifted += 1
        packed.append(tile.fresh())
    return packed, shifted


def _merge_pairs(packed: List[Tile]) -> Dict[int, int]:
    """Merge equal neighbours in place, leftmost pair first.

    Returns packed index -> pre-merge value for every merge performed. A tile
    produced by a merge is skipped along with its consumed partner, so
    [2, 2, 4] yields [4, _, 4] rather than 8.
    """
    merges: Dict[int, int] = {}
    i = 0
    while i < len(packed) - 1:
        current, following = packed[i], packed[i + 1]
        if current.can_merge_with(following):
            merges[i] = current.value
            packed[i] = current.merge_with(following)
            packed[i + 1] = Tile.empty()
            i += 2
        else:
            i += 1
    return merges


def merge_line(line: Sequence[Tile]) -> LineMergeResult:
    size = len(line)
    packed, tiles_moved = _compact(line)
    merges = _merge_pairs(packed)

    # Re-compact to close the gaps merges left; merge offsets follow the tile.
    result: List[Tile] = []
    events: List[LineMergeEvent] = []
    score_gained = 0
    for index, tile in enumerate(packed):
        if tile.is_empty:
            continue
        if index in merges:
            events.append(LineMergeEvent(len(result), merges[index], tile.value))
            score_gained += tile.value
        result.append(tile)
    result.extend(Tile.empty() for _ in range(size - len(result)))

    return LineMergeResult(
        tiles=tuple(result),
        moved=tiles_moved > 0 or bool(merges),
        tiles_moved=tiles_moved,
        tiles_merged=len(merges),
        score_gained=score_gained,
        merge_events=tuple(events),
    )
