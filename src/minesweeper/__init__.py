"""
Minesweeper game module.

Provides the tile/board state machine, the game session wrapper and a
gymnasium environment over it.
"""
from .exceptions import (
    MinesweeperError,
    InvalidConfigurationError,
    OutOfBoundsError,
)
from .config import BoardConfig, TILE_SIZE
from .tile import Tile, TileState
from .board import Board
from .game_state import GameState, GameStatus, PointerButton, pixel_to_grid
from .environment import MinesweeperEnv, render_board

__all__ = [
    "MinesweeperError",
    "InvalidConfigurationError",
    "OutOfBoundsError",
    "BoardConfig",
    "TILE_SIZE",
    "Tile",
    "TileState",
    "Board",
    "GameState",
    "GameStatus",
    "PointerButton",
    "pixel_to_grid",
    "MinesweeperEnv",
    "render_board",
]
