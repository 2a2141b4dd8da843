"""
Gymnasium environment wrapper for Minesweeper.

Drives a GameState through the standard Env interface so agents and
scripts can play without a graphical front end.
"""
import random
from typing import Any, Dict, Optional, SupportsFloat, Tuple

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from .config import BoardConfig
from .game_state import GameState, GameStatus
from .tile import FLAGGED_CODE, HIDDEN_CODE, MINE_CODE


# ============================================================================
# Constants
# ============================================================================

REWARD_SAFE = 1.0
REWARD_WIN = 10.0
REWARD_LOSS = -10.0
REWARD_INVALID = -0.1

_GLYPHS = {HIDDEN_CODE: ".", FLAGGED_CODE: "F", MINE_CODE: "*", 0: " "}


def render_board(observation: np.ndarray) -> str:
    """Render an observation array as rows of single-character glyphs."""
    lines = []
    for row in observation:
        lines.append(" ".join(_GLYPHS.get(int(val), str(int(val))) for val in row))
    return "\n".join(lines)


# ============================================================================
# Minesweeper Environment
# ============================================================================

class MinesweeperEnv(gym.Env):
    """
    Gymnasium environment for Minesweeper.

    Observation:
        2D array of shape (height, width) where:
        - -1 = hidden tile
        - -2 = flagged tile
        - 0-8 = open tile with surrounding mine count
        - 9 = open mine

    Actions:
        Discrete action space of size width * height.
        Action i reveals the tile at (i % width, i // width).

    Rewards:
        - +1 for revealing a safe tile
        - +10 for winning the game
        - -10 for hitting a mine
        - -0.1 for invalid action (already open or flagged)
    """

    metadata = {"render_modes": ["human", "ansi"], "render_fps": 4}

    def __init__(
        self,
        config: Optional[BoardConfig] = None,
        render_mode: Optional[str] = None,
    ) -> None:
        """
        Initialize the Minesweeper environment.

        Args:
            config: Board configuration (default: 9x9 with 10 mines).
            render_mode: How to render the environment.
        """
        super().__init__()

        self.config = config or BoardConfig()
        self.game = GameState(self.config)
        self.render_mode = render_mode

        self.observation_space = spaces.Box(
            low=FLAGGED_CODE,
            high=MINE_CODE,
            shape=(self.config.height, self.config.width),
            dtype=np.int8,
        )
        self.action_space = spaces.Discrete(self.config.area)

        self._steps = 0

    def reset(
        self,
        *,
        seed: Optional[int] = None,
        options: Optional[Dict[str, Any]] = None,
    ) -> Tuple[np.ndarray, Dict[str, Any]]:
        """
        Reset the environment for a new episode.

        Args:
            seed: Seed for mine placement; the episode is reproducible.
            options: Additional options (unused).

        Returns:
            Tuple of (observation, info dict).
        """
        super().reset(seed=seed)
        rng = random.Random(seed) if seed is not None else None
        self.game.on_restart(rng)
        self._steps = 0
        return self.game.board.get_observation(), self._get_info()

    def step(
        self, action: int
    ) -> Tuple[np.ndarray, SupportsFloat, bool, bool, Dict[str, Any]]:
        """
        Reveal the tile selected by ``action``.

        Returns:
            Tuple of (observation, reward, terminated, truncated, info).
        """
        x, y = self.action_to_position(action)
        self._steps += 1
        reward = self._apply_reveal(x, y)

        observation = self.game.board.get_observation()
        terminated = self.game.is_over
        return observation, reward, terminated, False, self._get_info()

    def action_to_position(self, action: int) -> Tuple[int, int]:
        """Convert flat action index to (x, y) position."""
        return int(action) % self.config.width, int(action) // self.config.width

    def _apply_reveal(self, x: int, y: int) -> float:
        tile = self.game.board.tile_at(x, y)
        if self.game.is_over or tile.is_open or tile.is_flagged:
            return REWARD_INVALID

        status = self.game.on_reveal(x, y)
        if status == GameStatus.WON:
            return REWARD_WIN
        if status == GameStatus.LOST:
            return REWARD_LOSS
        return REWARD_SAFE

    def _get_info(self) -> Dict[str, Any]:
        """Get info dictionary for current state."""
        board = self.game.board
        opened = sum(
            1 for tile in board.iter_tiles() if tile.is_open and not tile.has_mine
        )
        return {
            "steps": self._steps,
            "revealed": opened,
            "total_safe": self.config.safe_tiles,
            "game_state": self.game.status.name,
            "mines_remaining": self.game.mines_remaining,
            "valid_actions": len(board.get_valid_actions()),
        }

    def render(self) -> Optional[str]:
        """Render the current board state."""
        text = render_board(self.game.board.get_observation())
        if self.render_mode == "ansi":
            return text
        if self.render_mode == "human":
            print(text)
        return None

    def get_action_mask(self) -> np.ndarray:
        """
        Get mask of valid actions.

        Returns:
            int8 array where 1 = closed, unflagged tile.
        """
        mask = np.zeros(self.action_space.n, dtype=np.int8)
        for x, y in self.game.board.get_valid_actions():
            mask[y * self.config.width + x] = 1
        return mask
