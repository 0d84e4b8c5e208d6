"""Entry point for the 2048 game.

Sets up ECS world, event bus, systems, and Arcade window.
"""
import logging

import arcade
from arcade import Window, run, set_background_color

from twenty48.constants import BACKGROUND_COLOR, WINDOW_HEIGHT, WINDOW_TITLE, WINDOW_WIDTH
from twenty48.events.bus import (
    EventBus,
    EVENT_KEY_PRESS,
    EVENT_MOUSE_PRESS,
    EVENT_MOUSE_RELEASE,
    EVENT_TICK,
)
from twenty48.systems.board import BoardSystem
from twenty48.systems.game_session import GameSessionSystem
from twenty48.systems.input import InputSystem
from twenty48.systems.persistence import GameStatePersistenceSystem, HighScoreSystem, default_save_path
from twenty48.systems.render import RenderSystem
from twenty48.utils.storage import JsonFileStore
from twenty48.world import create_world

KEY_NAMES = {
    arcade.key.UP: "ArrowUp",
    arcade.key.DOWN: "ArrowDown",
    arcade.key.LEFT: "ArrowLeft",
    arcade.key.RIGHT: "ArrowRight",
    arcade.key.W: "w",
    arcade.key.A: "a",
    arcade.key.S: "s",
    arcade.key.D: "d",
    arcade.key.R: "r",
}


class TwentyFortyEightWindow(Window):
    def __init__(self):
        super().__init__(WINDOW_WIDTH, WINDOW_HEIGHT, WINDOW_TITLE)
        self.set_update_rate(1/60)
        self.event_bus = EventBus()
        self.world = create_world()

        # Persistence systems
        store = JsonFileStore(default_save_path())
        self.persistence_system = GameStatePersistenceSystem(self.event_bus, store)
        self.high_score_system = HighScoreSystem(self.event_bus, store)

        # Board and game flow systems
        self.board_system = BoardSystem(self.world, self.event_bus)
        self.game_session_system = GameSessionSystem(self.world, self.event_bus, self.board_system)

        # Interface systems
        self.input_system = InputSystem(self.event_bus)
        self.render_system = RenderSystem(
            self.world,
            self.event_bus,
            self,
            high_score=self.high_score_system.high_score,
        )
        set_background_color(BACKGROUND_COLOR)

    def on_key_press(self, symbol, modifiers):
        name = KEY_NAMES.get(symbol)
        if name is not None:
            self.event_bus.emit(EVENT_KEY_PRESS, key=name)

    def on_mouse_press(self, x, y, button, modifiers):
        self.event_bus.emit(EVENT_MOUSE_PRESS, x=x, y=y, button=button)

    def on_mouse_release(self, x, y, button, modifiers):
        self.event_bus.emit(EVENT_MOUSE_RELEASE, x=x, y=y, button=button)

    def on_update(self, delta_time: float):
        self.event_bus.emit(EVENT_TICK, dt=delta_time)

    def on_draw(self):
        self.clear()
        self.render_system.process()

    def on_close(self):
        self.game_session_system.dispose()
        super().on_close()


def main():
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    TwentyFortyEightWindow()
    run()


if __name__ == "__main__":
    main()
