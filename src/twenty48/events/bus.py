from blinker import Signal
from typing import Dict

class EventBus:
    """Simple event bus leveraging blinker Signal objects."""
    def __init__(self):
        self._signals: Dict[str, Signal] = {}

    def subscribe(self, name: str, fn):
        sig = self._signals.setdefault(name, Signal(name))
        # Use weak=False to retain strong reference to bound methods so systems not kept in a variable still receive events.
        sig.connect(fn, weak=False)

    def unsubscribe(self, name: str, fn):
        sig = self._signals.get(name)
        if sig:
            sig.disconnect(fn)

    def emit(self, name: str, **payload):
        sig = self._signals.get(name)
        if sig:
            sig.send(self, **payload)


# ============================================================================
# SYSTEM & TIMING
# ============================================================================
EVENT_TICK = "tick"                        # payload: dt=float


# ============================================================================
# INPUT
# ============================================================================
EVENT_KEY_PRESS = "key_press"              # payload: key=str
EVENT_MOUSE_PRESS = "mouse_press"          # payload: x, y, button
EVENT_MOUSE_RELEASE = "mouse_release"      # payload: x, y, button
EVENT_SWIPE = "swipe"                      # payload: dx=float, dy=float (screen coordinates, +dy is down)


# ============================================================================
# MOVES & BOARD
# ============================================================================
EVENT_MOVE_REQUEST = "move_request"        # payload: direction=Direction
EVENT_MOVE_COMPLETED = "move_completed"    # payload: direction=Direction, result=MoveResult
EVENT_MOVE_FAILED = "move_failed"          # payload: direction=Direction, message=str
EVENT_TILE_MERGED = "tile_merged"          # payload: position=Position, old_value=int, new_value=int
EVENT_TILE_SPAWNED = "tile_spawned"        # payload: position=Position, value=int
EVENT_BOARD_RESET = "board_reset"          # payload: positions=list[Position]


# ============================================================================
# GAME FLOW & STATE
# ============================================================================
EVENT_GAME_STATE_CHANGED = "game_state_changed"    # payload: previous=GameState, state=GameState
EVENT_GAME_OVER = "game_over"                      # payload: state=GameState
EVENT_RESTART_REQUEST = "restart_request"          # payload: None
EVENT_GAME_RESTARTED = "game_restarted"            # payload: state=GameState
EVENT_HIGH_SCORE_UPDATED = "high_score_updated"    # payload: high_score=HighScore
