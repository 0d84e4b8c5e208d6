from typing import Any, Dict, Optional

from esper import World

from twenty48.components.board import Board
from twenty48.components.game_state import GameState
from twenty48.components.position import Position
from twenty48.components.score import HighScore
from twenty48.constants import DARK_TEXT_COLOR, MERGE_PULSE_DURATION, TILE_PADDING
from twenty48.events.bus import (
    EventBus,
    EVENT_BOARD_RESET,
    EVENT_HIGH_SCORE_UPDATED,
    EVENT_TICK,
    EVENT_TILE_MERGED,
)
from twenty48.rendering.board_renderer import BoardRenderer
from twenty48.ui.layout import compute_board_geometry


class RenderSystem:
    def __init__(self, world: World, event_bus: EventBus, window, *, high_score: Optional[HighScore] = None):
        self.world = world
        self.event_bus = event_bus
        self.window = window
        self.high_score = high_score
        self.event_bus.subscribe(EVENT_TICK, self.on_tick)
        self.event_bus.subscribe(EVENT_TILE_MERGED, self.on_tile_merged)
        self.event_bus.subscribe(EVENT_BOARD_RESET, self.on_board_reset)
        self.event_bus.subscribe(EVENT_HIGH_SCORE_UPDATED, self.on_high_score_updated)
        # Remaining pulse time per merged cell.
        self._merge_pulses: Dict[Position, float] = {}
        self._board_renderer = BoardRenderer(self, padding=TILE_PADDING)

    def on_tick(self, sender, **kwargs):
        dt = kwargs.get('dt', 1/60)
        try:
            step = float(dt)
        except (TypeError, ValueError):
            step = 1/60
        expired = []
        for position, remaining in self._merge_pulses.items():
            remaining -= step
            if remaining <= 0:
                expired.append(position)
            else:
                self._merge_pulses[position] = remaining
        for position in expired:
            del self._merge_pulses[position]

    def on_tile_merged(self, sender, **kwargs):
        position = kwargs.get('position')
        if isinstance(position, Position):
            self._merge_pulses[position] = MERGE_PULSE_DURATION

    def on_board_reset(self, sender, **kwargs):
        self._merge_pulses.clear()

    def on_high_score_updated(self, sender, **kwargs: Any):
        record = kwargs.get('high_score')
        if isinstance(record, HighScore):
            self.high_score = record

    def merge_pulse_at(self, position: Position) -> float:
        """Pulse strength in [0, 1] for a cell; 0 when it did not just merge."""
        remaining = self._merge_pulses.get(position)
        if remaining is None:
            return 0.0
        return max(0.0, min(1.0, remaining / MERGE_PULSE_DURATION))

    def _board(self) -> Optional[Board]:
        for _, board in self.world.get_component(Board):
            return board
        return None

    def _state(self) -> GameState:
        for _, state in self.world.get_component(GameState):
            return state
        return GameState.initial()

    def process(self):
        # Local import keeps tests headless without creating a window.
        import arcade
        board = self._board()
        if board is None:
            return
        state = self._state()
        tile_size, start_x, start_y = compute_board_geometry(self.window.width, self.window.height, board.size)
        self._board_renderer.render(arcade, board, tile_size, start_x, start_y)

        board_top = start_y + board.size * tile_size
        header_y = board_top + (self.window.height - board_top) / 2
        arcade.draw_text(
            f"Score: {state.score}",
            start_x,
            header_y,
            DARK_TEXT_COLOR,
            20,
            anchor_y="center",
            bold=True,
        )
        best = self.high_score.value if self.high_score is not None else None
        if best is not None:
            arcade.draw_text(
                f"Best: {best}",
                start_x + board.size * tile_size,
                header_y,
                DARK_TEXT_COLOR,
                20,
                anchor_x="right",
                anchor_y="center",
                bold=True,
            )
        if state.game_over:
            arcade.draw_lbwh_rectangle_filled(
                start_x, start_y, board.size * tile_size, board.size * tile_size, (238, 228, 218, 180)
            )
            arcade.draw_text(
                "Game over! Press R to play again",
                start_x + board.size * tile_size / 2,
                start_y + board.size * tile_size / 2,
                DARK_TEXT_COLOR,
                18,
                anchor_x="center",
                anchor_y="center",
                bold=True,
            )
