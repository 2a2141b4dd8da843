"""
Game state module for Minesweeper.

Wraps a board with win/loss evaluation and the player-facing actions,
including translation of pointer positions to grid coordinates.
"""
import logging
import random
from enum import Enum, auto
from typing import Optional, Tuple

from .board import Board
from .config import TILE_SIZE, BoardConfig


logger = logging.getLogger(__name__)


# ============================================================================
# Constants
# ============================================================================

class GameStatus(Enum):
    """Possible states of the game."""

    IN_PROGRESS = auto()
    WON = auto()
    LOST = auto()


class PointerButton(Enum):
    """Pointer buttons understood by ``GameState.on_pointer``."""

    LEFT = auto()
    RIGHT = auto()


def pixel_to_grid(
    pixel_x: int, pixel_y: int, tile_size: int = TILE_SIZE
) -> Tuple[int, int]:
    """Convert a pointer position in pixels to (x, y) grid coordinates."""
    return pixel_x // tile_size, pixel_y // tile_size


# ============================================================================
# Game State Class
# ============================================================================

class GameState:
    """
    A single Minesweeper session.

    Status is derived from the board on demand. Once a reveal ends the
    game the outcome is kept until restart, so further actions are
    ignored and a full game-over reveal does not change it.
    """

    def __init__(
        self,
        config: Optional[BoardConfig] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        """
        Start a new game.

        Args:
            config: Board configuration (default: 9x9 with 10 mines).
            rng: Random source for mine placement, reused on restart.
        """
        self.config = config or BoardConfig()
        self._rng = rng if rng is not None else random.Random()
        self.board = Board(self.config, self._rng)
        self.ticks = 0
        self._outcome: Optional[GameStatus] = None

    @classmethod
    def new_game(
        cls,
        width: int,
        height: int,
        mine_count: int,
        rng: Optional[random.Random] = None,
        seed: Optional[int] = None,
    ) -> "GameState":
        """
        Create a game from raw parameters.

        Args:
            width: Number of columns.
            height: Number of rows.
            mine_count: Total mines to place.
            rng: Random source; takes precedence over ``seed``.
            seed: Seed for a new random source.
        """
        if rng is None:
            rng = random.Random(seed)
        return cls(BoardConfig(width, height, mine_count), rng)

    # ========================================================================
    # Status
    # ========================================================================

    @property
    def status(self) -> GameStatus:
        """Current status; a loss takes precedence over a win."""
        if self._outcome is not None:
            return self._outcome
        if self.board.is_lost:
            return GameStatus.LOST
        if self.board.is_won:
            return GameStatus.WON
        return GameStatus.IN_PROGRESS

    @property
    def is_over(self) -> bool:
        return self.status != GameStatus.IN_PROGRESS

    @property
    def is_lost(self) -> bool:
        return self.status == GameStatus.LOST

    @property
    def is_won(self) -> bool:
        return self.status == GameStatus.WON

    @property
    def mines_remaining(self) -> int:
        """Mines left to find, as shown to the player."""
        return self.config.mine_count - self.board.count_flags()

    def count_flags(self) -> int:
        return self.board.count_flags()

    # ========================================================================
    # Player Actions
    # ========================================================================

    def on_reveal(self, x: int, y: int) -> GameStatus:
        """
        Reveal the tile at (x, y).

        Out-of-bounds positions and reveals after game over are ignored.

        Returns:
            Status after the reveal.
        """
        if not self._accepts(x, y):
            return self.status
        self.board.reveal_at(x, y)
        return self._settle()

    def on_chord(self, x: int, y: int) -> GameStatus:
        """
        Chord on the open tile at (x, y).

        Returns:
            Status after the chord.
        """
        if not self._accepts(x, y):
            return self.status
        self.board.chord_at(x, y)
        return self._settle()

    def on_toggle_flag(self, x: int, y: int) -> bool:
        """
        Toggle the flag at (x, y). Flags never change the status.

        Returns:
            True if the flag was toggled.
        """
        if not self._accepts(x, y):
            return False
        return self.board.toggle_flag_at(x, y)

    def on_pointer(
        self,
        pixel_x: int,
        pixel_y: int,
        button: PointerButton,
        tile_size: int = TILE_SIZE,
    ) -> GameStatus:
        """
        Dispatch a pointer click given in pixels.

        Left reveals, right toggles a flag. Clicks outside the board's
        pixel area are ignored.
        """
        if pixel_x < 0 or pixel_y < 0:
            return self.status
        x, y = pixel_to_grid(pixel_x, pixel_y, tile_size)
        if button == PointerButton.LEFT:
            return self.on_reveal(x, y)
        self.on_toggle_flag(x, y)
        return self.status

    def on_tick(self) -> None:
        """Advance the elapsed tick counter while the game runs."""
        if not self.is_over:
            self.ticks += 1

    def on_restart(self, rng: Optional[random.Random] = None) -> None:
        """
        Discard the board and deal a new one with the same configuration.

        Args:
            rng: Replacement random source; defaults to the current one.
        """
        if rng is not None:
            self._rng = rng
        self.board = Board(self.config, self._rng)
        self.ticks = 0
        self._outcome = None
        logger.info(
            "Restarted %dx%d game with %d mines",
            self.config.width, self.config.height, self.config.mine_count,
        )

    def reveal_all_for_game_over(self) -> None:
        """Open every tile for the end-of-game display."""
        self._settle()
        self.board.reveal_all_for_game_over()

    # ========================================================================
    # Helpers
    # ========================================================================

    def _accepts(self, x: int, y: int) -> bool:
        """Check if an action at (x, y) may mutate the board."""
        if self.is_over:
            logger.debug("Ignoring action at (%d, %d): game is over", x, y)
            return False
        if not self.board.in_bounds(x, y):
            logger.debug("Ignoring action at (%d, %d): out of bounds", x, y)
            return False
        return True

    def _settle(self) -> GameStatus:
        """Latch the outcome once the board reaches a terminal state."""
        status = self.status
        if status != GameStatus.IN_PROGRESS and self._outcome is None:
            self._outcome = status
            logger.info("Game over: %s after %d ticks", status.name, self.ticks)
        return status
