from itertools import product

from twenty48.components.tile import Tile
from twenty48.utils.line_merge import LineMergeEvent, merge_line


def _line(*values):
    return [Tile(v) for v in values]


def _values(result):
    return [tile.value for tile in result.tiles]


def test_four_equal_tiles_merge_pairwise_only():
    result = merge_line(_line(2, 2, 2, 2))
    assert _values(result) == [4, 4, 0, 0]
    assert result.moved
    assert result.score_gained == 8
    assert result.tiles_merged == 2
    assert result.merge_events == (
        LineMergeEvent(0, 2, 4),
        LineMergeEvent(1, 2, 4),
    )


def test_gap_is_closed_before_merging():
    result = merge_line(_line(2, 0, 2, 4))
    assert _values(result) == [4, 4, 0, 0]
    assert result.score_gained == 4
    assert result.tiles_merged == 1
    assert result.tiles_moved == 2


def test_merged_tile_is_not_merged_again_in_same_pass():
    result = merge_line(_line(2, 2, 4, 0))
    assert _values(result) == [4, 4, 0, 0]
    assert result.tiles_merged == 1
    assert result.score_gained == 4


def test_leftmost_pair_wins():
    result = merge_line(_line(2, 2, 2, 0))
    assert _values(result) == [4, 2, 0, 0]
    assert result.merge_events == (LineMergeEvent(0, 2, 4),)


def test_merge_offsets_follow_recompaction():
    result = merge_line(_line(4, 4, 8, 8))
    assert _values(result) == [8, 16, 0, 0]
    assert result.score_gained == 24
    assert result.merge_events == (
        LineMergeEvent(0, 4, 8),
        LineMergeEvent(1, 8, 16),
    )


def test_blocked_line_does_not_move():
    result = merge_line(_line(2, 4, 8, 16))
    assert _values(result) == [2, 4, 8, 16]
    assert not result.moved
    assert result.score_gained == 0
    assert result.merge_events == ()


def test_empty_line_does_not_move():
    result = merge_line(_line(0, 0, 0, 0))
    assert not result.moved
    assert _values(result) == [0, 0, 0, 0]


def test_slide_without_merge():
    result = merge_line(_line(0, 0, 0, 2))
    assert _values(result) == [2, 0, 0, 0]
    assert result.moved
    assert result.tiles_moved == 1
    assert result.tiles_merged == 0


def test_stale_merged_flags_are_ignored():
    result = merge_line([Tile(2, merged=True), Tile(2), Tile(0), Tile(0)])
    assert _values(result) == [4, 0, 0, 0]


def test_merged_tiles_are_flagged():
    result = merge_line(_line(2, 2, 8, 0))
    assert result.tiles[0].merged
    assert not result.tiles[1].merged


def test_no_pending_merge_left_after_a_pass():
    for values in product((0, 2, 4, 8), repeat=4):
        result = merge_line(_line(*values))
        tiles = result.tiles
        assert sum(t.value for t in tiles) == sum(values)
        assert result.moved == (_values(result) != list(values))
        seen_empty = False
        for tile in tiles:
            if tile.is_empty:
                seen_empty = True
            else:
                assert not seen_empty, f"gap left in {values}"
        for left, right in zip(tiles, tiles[1:]):
            if not left.is_empty and left.value == right.value:
                assert left.merged or right.merged, f"pending merge in {values}"


def test_tiles_moved_counts_only_compaction_shifts():
    assert merge_line(_line(2, 2, 0, 0)).tiles_moved == 0
    assert merge_line(_line(0, 2, 0, 2)).tiles_moved == 2
    assert merge_line(_line(2, 0, 0, 4)).tiles_moved == 1
