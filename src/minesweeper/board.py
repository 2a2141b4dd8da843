"""
Board module for Minesweeper game.

Owns the grid of tiles, builds the neighbor graph, places mines and
exposes coordinate-based reveal, flag and win/loss queries.
"""
import logging
import random
from typing import Iterator, List, Optional, Tuple

import numpy as np

from .config import BoardConfig
from .exceptions import OutOfBoundsError
from .tile import Tile


logger = logging.getLogger(__name__)


# ============================================================================
# Board Class
# ============================================================================

class Board:
    """
    Minesweeper game board.

    Tiles are stored row-major (``tiles[y][x]``). Mines are placed once,
    at construction, and never move.
    """

    def __init__(
        self,
        config: Optional[BoardConfig] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        """
        Build the grid, its neighbor graph and its mines.

        Args:
            config: Board configuration (default: 9x9 with 10 mines).
            rng: Random source for mine placement.
        """
        self.config = config or BoardConfig()
        self._rng = rng if rng is not None else random.Random()
        self.tiles: List[List[Tile]] = [
            [Tile() for _ in range(self.config.width)]
            for _ in range(self.config.height)
        ]
        self._link_neighbors()
        self._place_mines(self.config.mine_count)

    # ========================================================================
    # Grid Initialization (Low-level)
    # ========================================================================

    def _link_neighbors(self) -> None:
        """Attach each tile's neighbor list once all tiles exist."""
        for y in range(self.config.height):
            for x in range(self.config.width):
                self.tiles[y][x].neighbors = [
                    self.tiles[ny][nx] for nx, ny in self._neighbor_positions(x, y)
                ]

    def _neighbor_positions(self, x: int, y: int) -> List[Tuple[int, int]]:
        """
        Get valid neighboring positions.

        Args:
            x: Column of center tile.
            y: Row of center tile.

        Returns:
            List of (x, y) tuples inside the board.
        """
        positions = []
        for delta_y in (-1, 0, 1):
            for delta_x in (-1, 0, 1):
                if delta_x == 0 and delta_y == 0:
                    continue
                new_x = x + delta_x
                new_y = y + delta_y
                if self.in_bounds(new_x, new_y):
                    positions.append((new_x, new_y))
        return positions

    def _place_mines(self, remaining: int) -> None:
        """
        Place mines by rejection sampling.

        Draws uniform coordinates and redraws on tiles that already hold
        a mine. With ``mine_count`` close to the board area the last
        few mines need many draws, but placement still terminates.
        """
        draws = 0
        while remaining > 0:
            y = self._rng.randrange(self.config.height)
            x = self._rng.randrange(self.config.width)
            draws += 1
            tile = self.tiles[y][x]
            if not tile.has_mine:
                tile.place_mine()
                remaining -= 1
        logger.debug(
            "Placed %d mines on %dx%d board in %d draws",
            self.config.mine_count, self.config.width, self.config.height, draws,
        )

    # ========================================================================
    # Coordinate Access
    # ========================================================================

    @property
    def width(self) -> int:
        return self.config.width

    @property
    def height(self) -> int:
        return self.config.height

    @property
    def mine_count(self) -> int:
        return self.config.mine_count

    def in_bounds(self, x: int, y: int) -> bool:
        """Check if position is within board bounds."""
        return 0 <= x < self.config.width and 0 <= y < self.config.height

    def tile_at(self, x: int, y: int) -> Tile:
        """
        Get the tile at a position.

        Raises:
            OutOfBoundsError: If the position is outside the board.
        """
        if not self.in_bounds(x, y):
            raise OutOfBoundsError(x, y, self.config.width, self.config.height)
        return self.tiles[y][x]

    def iter_tiles(self) -> Iterator[Tile]:
        """Iterate over every tile, row by row."""
        for row in self.tiles:
            yield from row

    def mine_positions(self) -> List[Tuple[int, int]]:
        """Get (x, y) of every mined tile."""
        return [
            (x, y)
            for y, row in enumerate(self.tiles)
            for x, tile in enumerate(row)
            if tile.has_mine
        ]

    # ========================================================================
    # Game Actions (Mid-level)
    # ========================================================================

    def reveal_at(self, x: int, y: int) -> int:
        """
        Reveal the tile at a position as a direct click.

        Flagged tiles are protected and stay closed.

        Returns:
            Number of tiles opened.

        Raises:
            OutOfBoundsError: If the position is outside the board.
        """
        tile = self.tile_at(x, y)
        if tile.is_flagged:
            logger.debug("Ignoring reveal of flagged tile (%d, %d)", x, y)
            return 0
        opened = tile.reveal(was_direct_click=True)
        logger.debug("Reveal at (%d, %d) opened %d tiles", x, y, opened)
        return opened

    def toggle_flag_at(self, x: int, y: int) -> bool:
        """
        Toggle the flag on the tile at a position.

        Returns:
            True if the flag was toggled, False if the tile is open.

        Raises:
            OutOfBoundsError: If the position is outside the board.
        """
        tile = self.tile_at(x, y)
        if tile.is_open:
            return False
        tile.toggle_flag()
        return True

    def chord_at(self, x: int, y: int) -> int:
        """
        Chord on an open tile: reveal unflagged neighbors if flag count matches.

        Returns:
            Number of tiles opened, 0 if the chord did not apply.

        Raises:
            OutOfBoundsError: If the position is outside the board.
        """
        tile = self.tile_at(x, y)
        if not tile.is_open or tile.surrounding_flags != tile.surrounding_mines:
            return 0
        opened = 0
        for neighbor in tile.neighbors:
            if not neighbor.is_flagged:
                opened += neighbor.reveal(was_direct_click=False)
        logger.debug("Chord at (%d, %d) opened %d tiles", x, y, opened)
        return opened

    def reveal_all_for_game_over(self) -> None:
        """Open every tile without cascading."""
        for tile in self.iter_tiles():
            tile.force_open()

    # ========================================================================
    # State Accessors (High-level)
    # ========================================================================

    def count_flags(self) -> int:
        """Count flagged tiles across the board."""
        return sum(1 for tile in self.iter_tiles() if tile.is_flagged)

    @property
    def is_lost(self) -> bool:
        """Check if any mine has been opened."""
        return any(tile.is_loss_trigger for tile in self.iter_tiles())

    @property
    def is_won(self) -> bool:
        """Check if every safe tile is open, regardless of flags."""
        return all(tile.is_open or tile.has_mine for tile in self.iter_tiles())

    def get_observation(self) -> np.ndarray:
        """
        Get board state as a numpy array.

        Returns:
            2D array of shape (height, width) where:
                -1 = hidden
                -2 = flagged
                0-8 = open with surrounding mine count
                9 = open mine
        """
        obs = np.zeros((self.config.height, self.config.width), dtype=np.int8)
        for y, row in enumerate(self.tiles):
            for x, tile in enumerate(row):
                obs[y, x] = tile.to_observation()
        return obs

    def get_valid_actions(self) -> List[Tuple[int, int]]:
        """
        Get list of tiles that can be revealed.

        Returns:
            List of (x, y) positions that are closed and unflagged.
        """
        return [
            (x, y)
            for y, row in enumerate(self.tiles)
            for x, tile in enumerate(row)
            if not tile.is_open and not tile.is_flagged
        ]
