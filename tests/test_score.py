from datetime import datetime, timezone

import pytest

from twenty48.components.game_state import GameState
from twenty48.components.move_result import MoveResult
from twenty48.components.score import HighScore, Score


def test_score_arithmetic_and_format():
    assert Score(2) + Score(4) == Score(6)
    assert Score(6) - Score(4) == Score(2)
    assert str(Score(1234)) == "1,234"
    assert Score.zero().value == 0


def test_negative_score_rejected():
    with pytest.raises(ValueError):
        Score(-1)
    with pytest.raises(ValueError):
        Score(2) - Score(4)


def test_high_score_dict_roundtrip():
    record = HighScore.create(Score(2048), now=lambda: datetime(2024, 5, 1, 12, tzinfo=timezone.utc))
    payload = record.to_dict()
    assert payload == {"value": 2048, "achievedAt": "2024-05-01T12:00:00+00:00"}
    assert HighScore.from_dict(payload) == record


def test_game_state_transitions():
    state = GameState.initial()
    assert state.score == Score.zero() and not state.game_over
    updated = state.with_score(Score(8)).with_game_over()
    assert updated == GameState(Score(8), True)
    assert state == GameState.initial()
    assert GameState.from_dict(updated.to_dict()) == updated
    assert GameState.from_dict({}) == GameState.initial()


def test_move_result_score_gained_accumulates():
    result = MoveResult.success(1, 1, Score(4), ())
    extra = result.with_score_gained(Score(8))
    assert extra.score_gained == Score(12)
    assert result.score_gained == Score(4)
    assert extra.moved and extra.tiles_merged == 1
    assert MoveResult.no_move().with_score_gained(Score.zero()).score_gained == Score.zero()
