from twenty48.systems.commands.move_command import MoveCommand, MoveCommandFactory

__all__ = [
    "MoveCommand",
    "MoveCommandFactory",
]
