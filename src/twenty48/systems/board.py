from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from esper import World

from twenty48.components.board import Board
from twenty48.components.direction import Direction
from twenty48.components.move_result import MoveResult, SpawnedTile
from twenty48.constants import BOARD_SIZE
from twenty48.events.bus import (
    EventBus,
    EVENT_BOARD_RESET,
    EVENT_MOVE_COMPLETED,
    EVENT_MOVE_FAILED,
    EVENT_TILE_MERGED,
    EVENT_TILE_SPAWNED,
)
from twenty48.systems import board_ops
from twenty48.systems.commands import MoveCommandFactory
from twenty48.utils.random_source import PyRandomSource, RandomSource
from twenty48.utils.result import Result

logger = logging.getLogger(__name__)


class BoardSystem:
    """Owns the board entity and turns move commands into board events."""

    def __init__(
        self,
        world: World,
        event_bus: EventBus,
        *,
        size: int = BOARD_SIZE,
        rng: RandomSource | None = None,
        initial_values: Sequence[Sequence[int]] | None = None,
    ):
        self.world = world
        self.event_bus = event_bus
        self.size = size
        self.rng: RandomSource = rng or getattr(world, "random", None) or PyRandomSource()
        self.commands = MoveCommandFactory(self.rng)
        self.last_result: Optional[MoveResult] = None
        # Create a single board entity with Board component
        self.board_entity = self.world.create_entity()
        self.world.add_component(self.board_entity, self._build_board(initial_values))

    def _build_board(self, initial_values: Sequence[Sequence[int]] | None) -> Board:
        if initial_values is not None:
            return Board.from_values(initial_values, size=self.size)
        board = Board(size=self.size)
        board_ops.fill_initial_tiles(board, self.rng)
        return board

    @property
    def board(self) -> Board:
        return self.world.component_for_entity(self.board_entity, Board)

    def execute(self, direction: Direction) -> Result[MoveResult]:
        """Run the command for ``direction`` and announce what happened.

        Merge events go out before the spawn and completion events.
        """
        result = self.commands.create(direction).execute(self.board)
        if result.is_failure:
            logger.warning("Move %s failed: %s", direction.name, result.error)
            self.event_bus.emit(EVENT_MOVE_FAILED, direction=direction, message=result.error)
            return result
        outcome = result.value
        self.last_result = outcome
        if not outcome.moved:
            return result
        for event in outcome.merge_events:
            self.event_bus.emit(
                EVENT_TILE_MERGED,
                position=event.position,
                old_value=event.old_value,
                new_value=event.new_value,
            )
        if outcome.spawned is not None:
            self.event_bus.emit(
                EVENT_TILE_SPAWNED,
                position=outcome.spawned.position,
                value=outcome.spawned.value,
            )
        self.event_bus.emit(EVENT_MOVE_COMPLETED, direction=direction, result=outcome)
        return result

    def move_tiles(self, direction: Direction) -> bool:
        result = self.execute(direction)
        return result.is_success and result.value.moved

    def preview(self, direction: Direction) -> Result[MoveResult]:
        return self.commands.create(direction).preview(self.board)

    def add_new_tile(self) -> SpawnedTile:
        spawned = board_ops.add_new_tile(self.board, self.rng)
        self.event_bus.emit(EVENT_TILE_SPAWNED, position=spawned.position, value=spawned.value)
        return spawned

    def can_move(self, direction: Direction) -> bool:
        return self.commands.create(direction).can_execute(self.board)

    def available_directions(self) -> List[Direction]:
        return board_ops.available_directions(self.board)

    def is_game_over(self) -> bool:
        return board_ops.is_game_over(self.board)

    def reset(self, initial_values: Sequence[Sequence[int]] | None = None) -> Board:
        """Replace the board wholesale with a fresh one."""
        board = self._build_board(initial_values)
        self.world.add_component(self.board_entity, board)
        self.last_result = None
        self.event_bus.emit(EVENT_BOARD_RESET, positions=board.filled_positions())
        return board
