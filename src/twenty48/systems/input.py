from __future__ import annotations

from typing import Any

from twenty48.events.bus import (
    EventBus,
    EVENT_KEY_PRESS,
    EVENT_MOUSE_PRESS,
    EVENT_MOUSE_RELEASE,
    EVENT_MOVE_REQUEST,
    EVENT_RESTART_REQUEST,
    EVENT_SWIPE,
)
from twenty48.constants import MINIMUM_SWIPE_DISTANCE
from twenty48.utils.move_input import (
    SwipeTracker,
    direction_from_key,
    direction_from_swipe,
    is_restart_key,
)

LEFT_MOUSE_BUTTON = 1


class InputSystem:
    """Translates raw key, swipe and mouse-drag input into move requests."""

    def __init__(
        self,
        event_bus: EventBus,
        *,
        min_distance: float = MINIMUM_SWIPE_DISTANCE,
        swipe_tracker: SwipeTracker | None = None,
    ) -> None:
        self.event_bus = event_bus
        self.min_distance = min_distance
        # Mouse coordinates come from arcade, whose y axis grows upward.
        self.swipe_tracker = swipe_tracker or SwipeTracker(min_distance=min_distance, y_up=True)
        self.event_bus.subscribe(EVENT_KEY_PRESS, self.on_key_press)
        self.event_bus.subscribe(EVENT_SWIPE, self.on_swipe)
        self.event_bus.subscribe(EVENT_MOUSE_PRESS, self.on_mouse_press)
        self.event_bus.subscribe(EVENT_MOUSE_RELEASE, self.on_mouse_release)

    def on_key_press(self, sender: Any, **kwargs: Any) -> None:
        key = kwargs.get('key')
        if is_restart_key(key):
            self.event_bus.emit(EVENT_RESTART_REQUEST)
            return
        direction = direction_from_key(key)
        if direction is not None:
            self.event_bus.emit(EVENT_MOVE_REQUEST, direction=direction)

    def on_swipe(self, sender: Any, **kwargs: Any) -> None:
        try:
            dx = float(kwargs.get('dx', 0.0))
            dy = float(kwargs.get('dy', 0.0))
        except (TypeError, ValueError):
            return
        direction = direction_from_swipe(dx, dy, self.min_distance)
        if direction is not None:
            self.event_bus.emit(EVENT_MOVE_REQUEST, direction=direction)

    def on_mouse_press(self, sender: Any, **kwargs: Any) -> None:
        x = kwargs.get('x')
        y = kwargs.get('y')
        if x is None or y is None or kwargs.get('button') != LEFT_MOUSE_BUTTON:
            return
        self.swipe_tracker.begin(x, y)

    def on_mouse_release(self, sender: Any, **kwargs: Any) -> None:
        x = kwargs.get('x')
        y = kwargs.get('y')
        if kwargs.get('button') != LEFT_MOUSE_BUTTON:
            return
        if x is None or y is None:
            self.swipe_tracker.cancel()
            return
        direction = self.swipe_tracker.end(x, y)
        if direction is not None:
            self.event_bus.emit(EVENT_MOVE_REQUEST, direction=direction)
