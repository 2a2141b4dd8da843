"""
Tile module for Minesweeper game.

Represents a single grid position with its mine/open/flag state and
the reveal algorithm that cascades through its neighbors.
"""
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import List


# ============================================================================
# Constants
# ============================================================================

class TileState(Enum):
    """Possible visual states of a tile."""

    HIDDEN = auto()
    FLAGGED = auto()
    OPEN = auto()


# Observation codes for array consumers
HIDDEN_CODE = -1
FLAGGED_CODE = -2
MINE_CODE = 9


# ============================================================================
# Tile Data Class
# ============================================================================

@dataclass(eq=False)
class Tile:
    """
    Represents a single tile in the Minesweeper grid.

    Tiles compare by identity. The neighbor list is attached by the
    owning board once every tile exists and never changes afterwards.

    Attributes:
        has_mine: Whether this tile contains a mine.
        is_open: Whether this tile has been opened.
        is_flagged: Whether the player marked this tile as a mine.
        neighbors: Grid-adjacent tiles (3, 5 or 8 of them).
    """

    has_mine: bool = False
    is_open: bool = False
    is_flagged: bool = False
    neighbors: List["Tile"] = field(default_factory=list, repr=False)

    def place_mine(self) -> None:
        """Put a mine on this tile."""
        self.has_mine = True

    def toggle_flag(self) -> None:
        """
        Flip the flag on this tile.

        The board refuses to flag open tiles; the tile itself does not.
        """
        self.is_flagged = not self.is_flagged

    @property
    def surrounding_mines(self) -> int:
        """Count of neighbors holding a mine."""
        return sum(1 for neighbor in self.neighbors if neighbor.has_mine)

    @property
    def surrounding_flags(self) -> int:
        """Count of flagged neighbors."""
        return sum(1 for neighbor in self.neighbors if neighbor.is_flagged)

    @property
    def is_loss_trigger(self) -> bool:
        """Check if this tile ends the game (an open mine)."""
        return self.is_open and self.has_mine

    @property
    def state(self) -> TileState:
        """Visual state; an open tile shows open even if flagged."""
        if self.is_open:
            return TileState.OPEN
        if self.is_flagged:
            return TileState.FLAGGED
        return TileState.HIDDEN

    # ========================================================================
    # Reveal
    # ========================================================================

    def reveal(self, was_direct_click: bool = True) -> int:
        """
        Open this tile and cascade to its neighbors.

        A tile without surrounding mines floods into every neighbor that
        is neither open nor flagged. A directly clicked tile whose flag
        count equals its mine count also opens every unflagged neighbor
        (chord). Cascaded tiles only flood; they never chord.

        The cascade runs on an explicit worklist, so large blank areas
        cannot exhaust the call stack.

        Args:
            was_direct_click: True when the player clicked this tile.

        Returns:
            Number of tiles opened, 0 if this tile was already open.
        """
        if self.is_open:
            return 0
        self.is_open = True
        opened = 1

        mines = self.surrounding_mines
        pending: List[Tile] = []
        if mines == 0:
            pending.extend(self._closed_unflagged_neighbors())
        if was_direct_click and mines == self.surrounding_flags:
            pending.extend(self._closed_unflagged_neighbors())

        while pending:
            tile = pending.pop()
            if tile.is_open:
                continue
            tile.is_open = True
            opened += 1
            if tile.surrounding_mines == 0:
                pending.extend(tile._closed_unflagged_neighbors())

        return opened

    def _closed_unflagged_neighbors(self) -> List["Tile"]:
        return [
            neighbor for neighbor in self.neighbors
            if not neighbor.is_open and not neighbor.is_flagged
        ]

    def force_open(self) -> None:
        """Open this tile without cascading (game-over display)."""
        self.is_open = True

    def to_observation(self) -> int:
        """
        Convert tile to an observation value.

        Returns:
            -1: Hidden tile
            -2: Flagged tile
            0-8: Open tile with surrounding mine count
            9: Open mine
        """
        if not self.is_open:
            return FLAGGED_CODE if self.is_flagged else HIDDEN_CODE
        if self.has_mine:
            return MINE_CODE
        return self.surrounding_mines
