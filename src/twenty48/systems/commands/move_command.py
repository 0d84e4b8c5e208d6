from __future__ import annotations

import logging
from typing import Any, Dict, List

from twenty48.components.board import Board
from twenty48.components.direction import Direction
from twenty48.components.move_result import MoveResult
from twenty48.errors import UnsupportedBoardError
from twenty48.systems.board_ops import can_move, move_tiles, slide_board
from twenty48.utils.random_source import RandomSource
from twenty48.utils.result import Result

logger = logging.getLogger(__name__)


def _require_board(board: Any) -> Board:
    if not isinstance(board, Board):
        raise UnsupportedBoardError("Board type not supported for move command")
    return board


class MoveCommand:
    """Moves a board in one direction; shared by live moves and previews."""

    def __init__(self, direction: Direction, rng: RandomSource) -> None:
        self.direction = direction
        self.rng = rng

    def __repr__(self) -> str:
        return f"MoveCommand({self.direction.name})"

    def can_execute(self, board: Any) -> bool:
        try:
            return can_move(_require_board(board), self.direction)
        except UnsupportedBoardError:
            return False
        except Exception:
            logger.exception("Error checking if move %s can be executed", self.direction.name)
            return False

    def execute(self, board: Any) -> Result[MoveResult]:
        try:
            board = _require_board(board)
        except UnsupportedBoardError as exc:
            return Result.failure(str(exc))
        logger.debug("Executing move command for direction %s", self.direction.name)
        if not self.can_execute(board):
            logger.debug("Move %s cannot be executed", self.direction.name)
            return Result.success(MoveResult.no_move())
        snapshot = [list(row) for row in board.tiles]
        try:
            result = move_tiles(board, self.direction, self.rng)
        except Exception as exc:
            board.tiles = snapshot
            message = f"Failed to execute move {self.direction.name}: {exc}"
            logger.error(message, exc_info=True)
            return Result.failure(message)
        logger.debug("Move %s completed: %s", self.direction.name, result)
        return Result.success(result)

    def preview(self, board: Any) -> Result[MoveResult]:
        """Run the move on a copy: no spawn, live board untouched."""
        try:
            return Result.success(slide_board(_require_board(board).copy(), self.direction))
        except UnsupportedBoardError as exc:
            return Result.failure(str(exc))
        except Exception as exc:
            message = f"Failed to preview move {self.direction.name}: {exc}"
            logger.error(message, exc_info=True)
            return Result.failure(message)


class MoveCommandFactory:
    """Hands out one command per direction, all sharing a random source."""

    def __init__(self, rng: RandomSource) -> None:
        self._commands: Dict[Direction, MoveCommand] = {
            direction: MoveCommand(direction, rng) for direction in Direction
        }

    def create(self, direction: Direction) -> MoveCommand:
        command = self._commands.get(direction) if isinstance(direction, Direction) else None
        if command is None:
            raise ValueError(f"Unsupported move direction: {direction!r}")
        return command

    def all_commands(self) -> List[MoveCommand]:
        return list(self._commands.values())
