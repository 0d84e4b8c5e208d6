"""Exception taxonomy for the 2048 engine."""


class GameError(Exception):
    """Base class for every error raised by the game engine."""


class InvalidDimensionsError(GameError, ValueError):
    """External board state is not a square grid of the expected size."""


class InvalidTileValueError(GameError, ValueError):
    """A tile value is neither 0 nor a power of two >= 2."""


class NoEmptyCellsError(GameError, RuntimeError):
    """A spawn was requested on a board with no empty cells."""


class IncompatibleMergeError(GameError, ValueError):
    """Two tiles that do not qualify for merging were asked to merge."""


class UnsupportedBoardError(GameError, TypeError):
    """A move command received an object that is not a Board."""


class GameSessionDisposedError(GameError, RuntimeError):
    """The game session was used after dispose()."""
