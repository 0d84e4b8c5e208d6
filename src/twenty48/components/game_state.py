"""Game state resource describing score and terminal status."""
from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Dict

from twenty48.components.score import Score


@dataclass(frozen=True, slots=True)
class GameState:
    """Singleton component; replaced wholesale on every transition."""
    score: Score = field(default_factory=Score.zero)
    game_over: bool = False

    @classmethod
    def initial(cls) -> GameState:
        return cls()

    def with_score(self, score: Score) -> GameState:
        return replace(self, score=score)

    def with_game_over(self) -> GameState:
        return replace(self, game_over=True)

    def to_dict(self) -> Dict[str, Any]:
        return {"score": self.score.value, "gameOver": self.game_over}

    @classmethod
    def from_dict(cls, payload: Dict[str, Any]) -> GameState:
        return cls(
            score=Score(int(payload.get("score", 0))),
            game_over=bool(payload.get("gameOver", False)),
        )
