from __future__ import annotations

import logging
from typing import Any, List

from esper import World

from twenty48.components.direction import Direction
from twenty48.components.game_state import GameState
from twenty48.components.score import Score
from twenty48.errors import GameSessionDisposedError
from twenty48.events.bus import (
    EventBus,
    EVENT_GAME_OVER,
    EVENT_GAME_RESTARTED,
    EVENT_GAME_STATE_CHANGED,
    EVENT_MOVE_REQUEST,
    EVENT_RESTART_REQUEST,
)
from twenty48.systems.board import BoardSystem

logger = logging.getLogger(__name__)


class GameSessionSystem:
    """Holds score and game-over status and drives moves through the board.

    Score is recomputed from the board (sum of all tile values) after every
    successful move; merge gains are never accumulated here.
    """

    def __init__(self, world: World, event_bus: EventBus, board_system: BoardSystem) -> None:
        self.world = world
        self.event_bus = event_bus
        self.board_system = board_system
        self._state_entity = self._ensure_state_entity()
        if not self.state.game_over and board_system.is_game_over():
            self._replace_state(self.state.with_game_over())
        self._disposed = False
        self.event_bus.subscribe(EVENT_MOVE_REQUEST, self._on_move_request)
        self.event_bus.subscribe(EVENT_RESTART_REQUEST, self._on_restart_request)

    def _ensure_state_entity(self) -> int:
        existing = list(self.world.get_component(GameState))
        if existing:
            return existing[0][0]
        return self.world.create_entity(GameState.initial())

    @property
    def state(self) -> GameState:
        return self.world.component_for_entity(self._state_entity, GameState)

    @property
    def disposed(self) -> bool:
        return self._disposed

    def _ensure_active(self) -> None:
        if self._disposed:
            raise GameSessionDisposedError("Game session has been disposed")

    def move(self, direction: Direction) -> bool:
        """Attempt a move; returns True when the board changed."""
        self._ensure_active()
        if self.state.game_over:
            return False
        logger.info("Attempting move in direction: %s", direction.name)
        if not self.board_system.move_tiles(direction):
            return False
        self._update_state()
        return True

    def move_by_name(self, name: str) -> bool:
        self._ensure_active()
        direction = Direction.from_name(name)
        if direction is None:
            logger.warning("Invalid direction input: %r", name)
            return False
        return self.move(direction)

    def restart(self) -> None:
        self._ensure_active()
        logger.info("Restarting game")
        self.board_system.reset()
        previous = self.state
        state = GameState.initial()
        self._replace_state(state)
        self.event_bus.emit(EVENT_GAME_STATE_CHANGED, previous=previous, state=state)
        self.event_bus.emit(EVENT_GAME_RESTARTED, state=state)

    def available_moves(self) -> List[Direction]:
        moves: List[Direction] = []
        for direction in Direction:
            result = self.board_system.preview(direction)
            if result.is_success and result.value.moved:
                moves.append(direction)
        return moves

    def dispose(self) -> None:
        if self._disposed:
            return
        self.event_bus.unsubscribe(EVENT_MOVE_REQUEST, self._on_move_request)
        self.event_bus.unsubscribe(EVENT_RESTART_REQUEST, self._on_restart_request)
        self._disposed = True

    def _replace_state(self, state: GameState) -> None:
        self.world.add_component(self._state_entity, state)

    def _update_state(self) -> None:
        previous = self.state
        board = self.board_system.board
        state = GameState(
            score=Score(board.total_value()),
            game_over=self.board_system.is_game_over(),
        )
        if state == previous:
            return
        self._replace_state(state)
        logger.info(
            "Game state changed. Score: %d, GameOver: %s", state.score.value, state.game_over
        )
        self.event_bus.emit(EVENT_GAME_STATE_CHANGED, previous=previous, state=state)
        if state.game_over and not previous.game_over:
            self.event_bus.emit(EVENT_GAME_OVER, state=state)

    # Event handlers -----------------------------------------------------

    def _on_move_request(self, sender: Any, **payload: Any) -> None:
        direction = payload.get("direction")
        if isinstance(direction, Direction):
            self.move(direction)
        elif isinstance(direction, str):
            self.move_by_name(direction)

    def _on_restart_request(self, sender: Any, **payload: Any) -> None:
        self.restart()
