"""
Exceptions raised by the Minesweeper engine.

Reaching a win or loss is a normal game status and never raised.
"""


class MinesweeperError(Exception):
    """Base class for all engine errors."""


class InvalidConfigurationError(MinesweeperError, ValueError):
    """Board dimensions or mine count are not playable."""


class OutOfBoundsError(MinesweeperError, IndexError):
    """A coordinate lies outside the board."""

    def __init__(self, x: int, y: int, width: int, height: int) -> None:
        super().__init__(
            f"({x}, {y}) is outside a {width}x{height} board"
        )
        self.x = x
        self.y = y
