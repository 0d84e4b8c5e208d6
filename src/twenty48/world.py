from esper import World

from twenty48.components.game_state import GameState
from twenty48.utils.random_source import PyRandomSource, RandomSource


def create_world(*, rng: RandomSource | None = None) -> World:
    world = World()
    setattr(world, "random", rng or PyRandomSource())

    # Register the global game state resource.
    world.create_entity(GameState.initial())
    return world
