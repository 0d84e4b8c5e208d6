"""Persists game state and the high score whenever the session reports a change."""
from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path
from typing import Any, Callable

from twenty48.components.game_state import GameState
from twenty48.components.score import HighScore, Score
from twenty48.constants import GAME_STATE_KEY, HIGH_SCORE_KEY
from twenty48.events.bus import (
    EventBus,
    EVENT_GAME_RESTARTED,
    EVENT_GAME_STATE_CHANGED,
    EVENT_HIGH_SCORE_UPDATED,
)
from twenty48.utils.storage import KeyValueStore

logger = logging.getLogger(__name__)

_STORAGE_ERRORS = (OSError, TypeError, ValueError, KeyError)


def default_save_path() -> Path:
    return Path(__file__).resolve().parents[3] / "data" / "twenty48_save.json"


class GameStatePersistenceSystem:
    """Saves every new GameState; storage failures are logged, never raised."""

    def __init__(self, event_bus: EventBus, store: KeyValueStore) -> None:
        self.event_bus = event_bus
        self.store = store
        self.event_bus.subscribe(EVENT_GAME_STATE_CHANGED, self._on_state_changed)
        self.event_bus.subscribe(EVENT_GAME_RESTARTED, self._on_restarted)

    def load_state(self) -> GameState | None:
        try:
            payload = self.store.get(GAME_STATE_KEY)
            if payload is None:
                return None
            state = GameState.from_dict(payload)
        except _STORAGE_ERRORS:
            logger.error("Failed to load game state", exc_info=True)
            return None
        logger.info(
            "Loaded game state: Score=%d, GameOver=%s", state.score.value, state.game_over
        )
        return state

    def save_state(self, state: GameState) -> None:
        try:
            self.store.set(GAME_STATE_KEY, state.to_dict())
        except _STORAGE_ERRORS:
            logger.error("Failed to save game state", exc_info=True)
            return
        logger.info("Saved game state: Score=%d, GameOver=%s", state.score.value, state.game_over)

    def clear_state(self) -> None:
        try:
            self.store.remove(GAME_STATE_KEY)
        except _STORAGE_ERRORS:
            logger.error("Failed to clear game state", exc_info=True)
            return
        logger.info("Cleared game state")

    def _on_state_changed(self, sender: Any, **payload: Any) -> None:
        state = payload.get("state")
        if isinstance(state, GameState):
            self.save_state(state)

    def _on_restarted(self, sender: Any, **payload: Any) -> None:
        self.clear_state()


class HighScoreSystem:
    """Tracks the best score across sessions."""

    def __init__(
        self,
        event_bus: EventBus,
        store: KeyValueStore,
        *,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self.event_bus = event_bus
        self.store = store
        self._clock = clock
        self._high_score = self.load_high_score()
        self.event_bus.subscribe(EVENT_GAME_STATE_CHANGED, self._on_state_changed)

    @property
    def high_score(self) -> HighScore | None:
        return self._high_score

    def load_high_score(self) -> HighScore | None:
        try:
            payload = self.store.get(HIGH_SCORE_KEY)
            if payload is None:
                return None
            return HighScore.from_dict(payload)
        except _STORAGE_ERRORS:
            logger.error("Error retrieving high score", exc_info=True)
            return None

    def save_high_score(self, score: Score) -> bool:
        """Store ``score`` if it beats the current record; returns True when it did."""
        current = self._high_score
        if current is not None and current.value.value >= score.value:
            return False
        record = HighScore.create(score, now=self._clock)
        try:
            self.store.set(HIGH_SCORE_KEY, record.to_dict())
        except _STORAGE_ERRORS:
            logger.error("Error saving high score", exc_info=True)
            return False
        self._high_score = record
        logger.info("New high score saved: %d", score.value)
        self.event_bus.emit(EVENT_HIGH_SCORE_UPDATED, high_score=record)
        return True

    def _on_state_changed(self, sender: Any, **payload: Any) -> None:
        state = payload.get("state")
        if isinstance(state, GameState):
            self.save_high_score(state.score)
