from __future__ import annotations

import operator
from dataclasses import dataclass, field
from typing import List, Sequence

from twenty48.components.direction import Direction, cell_for
from twenty48.components.position import Position
from twenty48.components.tile import Tile
from twenty48.constants import BOARD_SIZE
from twenty48.errors import InvalidDimensionsError

Grid = List[List[Tile]]


def _empty_grid(size: int) -> Grid:
    return [[Tile.empty() for _ in range(size)] for _ in range(size)]


@dataclass(slots=True)
class Board:
    """Fixed-size square grid of tiles, stored on the board entity.

    The grid shape never changes after construction. Replacing ``tiles`` as a
    whole is how a finished move is committed.
    """
    size: int = BOARD_SIZE
    tiles: Grid = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.size <= 0:
            raise InvalidDimensionsError(f"Board size must be positive, got {self.size}")
        if not self.tiles:
            self.tiles = _empty_grid(self.size)
        elif len(self.tiles) != self.size or any(len(row) != self.size for row in self.tiles):
            raise InvalidDimensionsError("Invalid initial state dimensions")

    @classmethod
    def from_values(cls, values: Sequence[Sequence[int]], size: int = BOARD_SIZE) -> Board:
        rows = [list(row) for row in values]
        if len(rows) != size or any(len(row) != size for row in rows):
            raise InvalidDimensionsError(
                f"Invalid initial state dimensions: expected {size}x{size}"
            )
        return cls(size=size, tiles=[[Tile(operator.index(v)) for v in row] for row in rows])

    def copy(self) -> Board:
        # Tiles are frozen, so copying the row lists gives an independent grid.
        return Board(size=self.size, tiles=[list(row) for row in self.tiles])

    def values(self) -> List[List[int]]:
        return [[tile.value for tile in row] for row in self.tiles]

    def _check(self, position: Position) -> None:
        if not position.is_valid(self.size):
            raise IndexError(f"Position {position} is outside a {self.size}x{self.size} board")

    def tile_at(self, position: Position) -> Tile:
        self._check(position)
        return self.tiles[position.row][position.col]

    def set_tile(self, position: Position, tile: Tile) -> None:
        self._check(position)
        self.tiles[position.row][position.col] = tile

    def empty_positions(self) -> List[Position]:
        return [
            Position(r, c)
            for r in range(self.size)
            for c in range(self.size)
            if self.tiles[r][c].is_empty
        ]

    def line(self, direction: Direction, index: int) -> List[Tile]:
        """Read row/column ``index`` ordered so offset 0 is the target edge."""
        return [self.tile_at(cell_for(direction, index, j, self.size)) for j in range(self.size)]

    def set_line(self, direction: Direction, index: int, line: Sequence[Tile]) -> None:
        for j, tile in enumerate(line):
            self.set_tile(cell_for(direction, index, j, self.size), tile)

    def total_value(self) -> int:
        return sum(tile.value for row in self.tiles for tile in row)

    def max_value(self) -> int:
        return max(tile.value for row in self.tiles for tile in row)

    def filled_positions(self) -> List[Position]:
        return [
            Position(r, c)
            for r in range(self.size)
            for c in range(self.size)
            if not self.tiles[r][c].is_empty
        ]
