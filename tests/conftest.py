"""
Pytest configuration and shared fixtures.
"""
import random
import sys
from pathlib import Path
from typing import Callable, Iterable, Tuple

import pytest

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from minesweeper import Board, BoardConfig, GameState, Tile


BoardFactory = Callable[[int, int, Iterable[Tuple[int, int]]], Board]


def build_board(
    width: int, height: int, mines: Iterable[Tuple[int, int]] = ()
) -> Board:
    """Build a board with mines at exactly the given (x, y) positions."""
    board = Board(BoardConfig(width, height, 0))
    for x, y in mines:
        board.tile_at(x, y).place_mine()
    return board


def build_game(
    width: int, height: int, mines: Iterable[Tuple[int, int]] = ()
) -> GameState:
    """Build a game whose board has hand-placed mines."""
    mines = list(mines)
    game = GameState(BoardConfig(width, height, len(mines)))
    game.board = build_board(width, height, mines)
    return game


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def make_board() -> BoardFactory:
    """Factory for boards with hand-placed mines."""
    return build_board


@pytest.fixture
def default_board() -> Board:
    """Create a default 9x9 board with 10 mines."""
    return Board(rng=random.Random(7))


@pytest.fixture
def empty_board() -> Board:
    """Create a board with no mines for cascade testing."""
    return Board(BoardConfig(5, 5, 0))


@pytest.fixture
def corner_board() -> Board:
    """
    5x5 board with two mines in the top-left corner.

        x: 0 1 2 3 4
    y=0:   * * . . .
    y=1:   . . . . .
    y=2..4 all safe
    """
    return build_board(5, 5, [(0, 0), (1, 0)])


# ============================================================================
# Game Fixtures
# ============================================================================

@pytest.fixture
def make_game() -> Callable[..., GameState]:
    """Factory for games with hand-placed mines."""
    return build_game


@pytest.fixture
def seeded_game() -> GameState:
    """Create a reproducible 9x9 game with 10 mines."""
    return GameState.new_game(9, 9, 10, seed=12345)


@pytest.fixture
def small_game() -> GameState:
    """2x2 game with a single mine at (1, 0)."""
    return build_game(2, 2, [(1, 0)])


# ============================================================================
# Tile Fixtures
# ============================================================================

@pytest.fixture
def hidden_tile() -> Tile:
    """Create a hidden tile with no neighbors."""
    return Tile()


@pytest.fixture
def mine_tile() -> Tile:
    """Create a tile containing a mine."""
    return Tile(has_mine=True)


# ============================================================================
# Configuration Fixtures
# ============================================================================

@pytest.fixture
def valid_config() -> BoardConfig:
    """Create a valid board configuration."""
    return BoardConfig(9, 9, 10)
