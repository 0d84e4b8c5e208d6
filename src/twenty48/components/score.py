from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Callable, Dict


@dataclass(frozen=True, slots=True)
class Score:
    value: int = 0

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError(f"Score cannot be negative: {self.value}")

    @classmethod
    def zero(cls) -> Score:
        return cls(0)

    def __add__(self, other: Score) -> Score:
        return Score(self.value + other.value)

    def __sub__(self, other: Score) -> Score:
        return Score(self.value - other.value)

    def __str__(self) -> str:
        return f"{self.value:,}"


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True, slots=True)
class HighScore:
    """Best score seen across sessions, with the time it was achieved."""
    value: Score
    achieved_at: datetime

    @classmethod
    def create(cls, score: Score, now: Callable[[], datetime] | None = None) -> HighScore:
        clock = now or _utc_now
        return cls(value=score, achieved_at=clock())

    def to_dict(self) -> Dict[str, Any]:
        return {"value": self.value.value, "achievedAt": self.achieved_at.isoformat()}

    @classmethod
    def from_dict(cls, payload: Dict[str, Any]) -> HighScore:
        return cls(
            value=Score(int(payload["value"])),
            achieved_at=datetime.fromisoformat(str(payload["achievedAt"])),
        )
