from __future__ import annotations

import logging
from typing import List

from twenty48.components.board import Board
from twenty48.components.direction import Direction, cell_for
from twenty48.components.move_result import MergeEvent, MoveResult, SpawnedTile
from twenty48.components.score import Score
from twenty48.constants import INITIAL_TILE_COUNT, NEW_TILE_PROBABILITY_2
from twenty48.components.tile import Tile
from twenty48.errors import NoEmptyCellsError
from twenty48.utils.line_merge import merge_line
from twenty48.utils.random_source import RandomSource

logger = logging.getLogger(__name__)


def slide_board(board: Board, direction: Direction) -> MoveResult:
    """Slide and merge every line toward ``direction`` without spawning.

    Lines are merged into a scratch copy and committed only once every line
    succeeded, so an error never leaves the board half-moved. A move that
    changes nothing leaves ``board`` untouched.
    """
    scratch = board.copy()
    size = board.size
    tiles_moved = 0
    tiles_merged = 0
    score_gained = 0
    events: List[MergeEvent] = []
    moved = False
    for index in range(size):
        outcome = merge_line(board.line(direction, index))
        if not outcome.moved:
            continue
        moved = True
        tiles_moved += outcome.tiles_moved
        tiles_merged += outcome.tiles_merged
        score_gained += outcome.score_gained
        for event in outcome.merge_events:
            events.append(MergeEvent(
                cell_for(direction, index, event.offset, size),
                event.old_value,
                event.new_value,
            ))
        scratch.set_line(direction, index, [tile.fresh() for tile in outcome.tiles])
    if not moved:
        return MoveResult.no_move()
    board.tiles = scratch.tiles
    for event in events:
        logger.debug(
            "Tile merged at %s: %d -> %d", event.position, event.old_value, event.new_value
        )
    return MoveResult.success(tiles_moved, tiles_merged, Score(score_gained), events)


def add_new_tile(board: Board, rng: RandomSource) -> SpawnedTile:
    """Place a 2 (90%) or 4 (10%) on a uniformly chosen empty cell."""
    empty = board.empty_positions()
    if not empty:
        logger.warning("Attempted to add new tile but no empty positions available")
        raise NoEmptyCellsError("No empty cells available")
    position = empty[rng.next(len(empty))]
    value = 2 if rng.next(100) < NEW_TILE_PROBABILITY_2 else 4
    board.set_tile(position, Tile(value))
    logger.info("Added new tile with value %d at %s", value, position)
    return SpawnedTile(position, value)


def fill_initial_tiles(
    board: Board,
    rng: RandomSource,
    count: int = INITIAL_TILE_COUNT,
) -> List[SpawnedTile]:
    return [add_new_tile(board, rng) for _ in range(count)]


def move_tiles(board: Board, direction: Direction, rng: RandomSource) -> MoveResult:
    """Slide toward ``direction`` and spawn one tile if anything moved."""
    result = slide_board(board, direction)
    if not result.moved:
        return result
    return result.with_spawned(add_new_tile(board, rng))


def can_move(board: Board, direction: Direction) -> bool:
    return slide_board(board.copy(), direction).moved


def available_directions(board: Board) -> List[Direction]:
    return [direction for direction in Direction if can_move(board, direction)]


def is_game_over(board: Board) -> bool:
    """True when the board is full and no direction changes it.

    Every direction is simulated on a copy. Checking neighbour pairs alone is
    not used here.
    """
    if board.empty_positions():
        return False
    return not any(can_move(board, direction) for direction in Direction)
