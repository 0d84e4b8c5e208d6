from __future__ import annotations

from typing import TYPE_CHECKING

from twenty48.components.position import Position
from twenty48.constants import (
    BOARD_COLOR,
    DARK_TEXT_COLOR,
    EMPTY_TILE_COLOR,
    LIGHT_TEXT_COLOR,
    SUPER_TILE_COLOR,
    TILE_COLORS,
)
from twenty48.ui.layout import cell_origin

if TYPE_CHECKING:
    from twenty48.components.board import Board
    from twenty48.systems.render import RenderSystem


def tile_color(value: int):
    if value == 0:
        return EMPTY_TILE_COLOR
    return TILE_COLORS.get(value, SUPER_TILE_COLOR)


def text_color(value: int):
    return DARK_TEXT_COLOR if value in (2, 4) else LIGHT_TEXT_COLOR


def font_size_for(value: int, tile_size: int) -> int:
    digits = len(str(value))
    scale = 0.42 if digits <= 2 else 0.34 if digits == 3 else 0.27
    return max(8, int(tile_size * scale))


class BoardRenderer:
    def __init__(self, render_system: RenderSystem, padding: int = 4):
        self._rs = render_system
        self._padding = padding

    def render(self, arcade, board: Board, tile_size: int, start_x: float, start_y: float) -> None:
        size = board.size
        pad = self._padding
        arcade.draw_lbwh_rectangle_filled(
            start_x - pad, start_y - pad, size * tile_size + 2 * pad, size * tile_size + 2 * pad, BOARD_COLOR
        )
        for row in range(size):
            for col in range(size):
                position = Position(row, col)
                value = board.tile_at(position).value
                left, bottom = cell_origin(position, tile_size, start_x, start_y, size)
                # Merged tiles briefly grow past their cell.
                grow = self._rs.merge_pulse_at(position) * pad
                arcade.draw_lbwh_rectangle_filled(
                    left + pad - grow,
                    bottom + pad - grow,
                    tile_size - 2 * pad + 2 * grow,
                    tile_size - 2 * pad + 2 * grow,
                    tile_color(value),
                )
                if value:
                    arcade.draw_text(
                        str(value),
                        left + tile_size / 2,
                        bottom + tile_size / 2,
                        text_color(value),
                        font_size_for(value, tile_size),
                        anchor_x="center",
                        anchor_y="center",
                        bold=True,
                    )
