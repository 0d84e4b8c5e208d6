from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Iterable, List, Sequence, Tuple

from twenty48.events.bus import EventBus


class ScriptedRandom:
    """RandomSource returning queued values, then 0 once the script runs out."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self.values = list(values)
        self.calls: List[int] = []

    def next(self, max_exclusive: int) -> int:
        self.calls.append(max_exclusive)
        if not self.values:
            return 0
        value = self.values.pop(0)
        assert 0 <= value < max_exclusive, f"scripted {value} outside [0, {max_exclusive})"
        return value


class RaisingRandom:
    def next(self, max_exclusive: int) -> int:
        raise RuntimeError("random source unavailable")


class FakeClock:
    def __init__(self, start: datetime | None = None) -> None:
        self.value = start or datetime(2024, 1, 1, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        return self.value


def record_events(bus: EventBus, names: Sequence[str]) -> List[Tuple[str, dict[str, Any]]]:
    """Subscribe to ``names`` and collect (name, payload) pairs in emit order."""
    received: List[Tuple[str, dict[str, Any]]] = []

    def make_handler(name: str):
        def handler(sender, **payload):
            received.append((name, payload))
        return handler

    for name in names:
        bus.subscribe(name, make_handler(name))
    return received


def transpose(values: Sequence[Sequence[int]]) -> List[List[int]]:
    return [list(row) for row in zip(*values)]


def mirror(values: Sequence[Sequence[int]]) -> List[List[int]]:
    return [list(reversed(row)) for row in values]
