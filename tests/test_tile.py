import pytest

from twenty48.components.tile import Tile
from twenty48.errors import IncompatibleMergeError, InvalidTileValueError


@pytest.mark.parametrize("value", [1, 3, 6, -2, 12])
def test_tile_rejects_invalid_values(value):
    with pytest.raises(InvalidTileValueError):
        Tile(value)


def test_empty_tile():
    tile = Tile.empty()
    assert tile.is_empty
    assert tile.value == 0
    assert not tile.can_merge_with(Tile.empty())


def test_equal_tiles_merge_into_double():
    merged = Tile(8).merge_with(Tile(8))
    assert merged.value == 16
    assert merged.merged


def test_merged_tile_cannot_merge_again():
    merged = Tile(2).merge_with(Tile(2))
    assert not merged.can_merge_with(Tile(4))
    assert not Tile(4).can_merge_with(merged)
    with pytest.raises(IncompatibleMergeError):
        merged.merge_with(Tile(4))


def test_unequal_tiles_do_not_merge():
    assert not Tile(2).can_merge_with(Tile(4))
    with pytest.raises(IncompatibleMergeError):
        Tile(2).merge_with(Tile(4))


def test_fresh_clears_merged_flag():
    tile = Tile(16, merged=True)
    assert tile.fresh() == Tile(16)
    plain = Tile(4)
    assert plain.fresh() is plain
