import pytest

from twenty48.components.board import Board
from twenty48.components.direction import Direction
from twenty48.components.position import Position
from twenty48.components.tile import Tile
from twenty48.errors import InvalidDimensionsError, InvalidTileValueError
from twenty48.events.bus import EventBus
from twenty48.systems.board import BoardSystem
from twenty48.world import create_world

SAMPLE = [
    [2, 0, 4, 0],
    [0, 8, 0, 0],
    [16, 0, 0, 32],
    [0, 0, 64, 2],
]


def test_board_component_exists():
    bus = EventBus(); world = create_world()
    BoardSystem(world, bus, initial_values=SAMPLE)
    boards = list(world.get_component(Board))
    assert boards, 'Board component missing'
    ent, comp = boards[0]
    assert comp.size == 4 and comp.values() == SAMPLE


@pytest.mark.parametrize(
    "values",
    [
        [[0, 0, 0, 0]] * 3,
        [[0, 0, 0], [0, 0, 0], [0, 0, 0], [0, 0, 0]],
        [[0, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0]],
    ],
)
def test_from_values_rejects_bad_shapes(values):
    with pytest.raises(InvalidDimensionsError):
        Board.from_values(values)


def test_from_values_rejects_bad_tile_values():
    with pytest.raises(InvalidTileValueError):
        Board.from_values([[3, 0, 0, 0]] + [[0] * 4] * 3)


def test_new_board_is_empty():
    board = Board()
    assert len(board.empty_positions()) == 16
    assert board.total_value() == 0


def test_copy_is_independent():
    board = Board.from_values(SAMPLE)
    clone = board.copy()
    clone.set_tile(Position(0, 1), Tile(2))
    assert board.tile_at(Position(0, 1)).is_empty
    assert clone.values() != board.values()


def test_lines_are_read_toward_target_edge():
    board = Board.from_values(SAMPLE)
    assert [t.value for t in board.line(Direction.LEFT, 0)] == [2, 0, 4, 0]
    assert [t.value for t in board.line(Direction.RIGHT, 0)] == [0, 4, 0, 2]
    assert [t.value for t in board.line(Direction.UP, 0)] == [2, 0, 16, 0]
    assert [t.value for t in board.line(Direction.DOWN, 0)] == [0, 16, 0, 2]


def test_set_line_writes_through_inverse_mapping():
    for direction in Direction:
        board = Board.from_values(SAMPLE)
        for index in range(4):
            board.set_line(direction, index, board.line(direction, index))
        assert board.values() == SAMPLE


def test_aggregate_helpers():
    board = Board.from_values(SAMPLE)
    assert board.total_value() == 128
    assert board.max_value() == 64
    assert len(board.filled_positions()) == 7
    assert Position(0, 0) in board.filled_positions()
    assert Position(0, 1) in board.empty_positions()


@pytest.mark.parametrize("position", [Position(-1, -1), Position(0, 4), Position(4, 0), Position(-1, 2)])
def test_out_of_range_positions_raise(position):
    board = Board.from_values(SAMPLE)
    with pytest.raises(IndexError):
        board.tile_at(position)
    with pytest.raises(IndexError):
        board.set_tile(position, Tile(2))
    assert board.values() == SAMPLE


@pytest.mark.parametrize("bad", [2.9, "2", None])
def test_from_values_rejects_non_integer_values(bad):
    values = [[bad, 0, 0, 0]] + [[0] * 4] * 3
    with pytest.raises(TypeError):
        Board.from_values(values)
