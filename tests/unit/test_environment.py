"""
Unit tests for the gymnasium environment.
"""
import numpy as np
import pytest
from minesweeper import BoardConfig, MinesweeperEnv, render_board
from minesweeper.environment import (
    REWARD_INVALID,
    REWARD_LOSS,
    REWARD_SAFE,
    REWARD_WIN,
)


@pytest.fixture
def env() -> MinesweeperEnv:
    """Create a small seeded environment."""
    environment = MinesweeperEnv(BoardConfig(5, 4, 3), render_mode="ansi")
    environment.reset(seed=11)
    return environment


def first_position(env: MinesweeperEnv, mined: bool):
    """Find the first (x, y) with or without a mine."""
    for y, row in enumerate(env.game.board.tiles):
        for x, tile in enumerate(row):
            if tile.has_mine == mined:
                return x, y
    raise AssertionError("no matching tile")


class TestSpaces:
    """Test observation and action spaces."""

    def test_spaces_match_board(self, env: MinesweeperEnv) -> None:
        assert env.action_space.n == 20
        assert env.observation_space.shape == (4, 5)

    def test_reset_observation_is_hidden(self, env: MinesweeperEnv) -> None:
        obs, info = env.reset(seed=3)
        assert env.observation_space.contains(obs)
        assert np.all(obs == -1)
        assert info["game_state"] == "IN_PROGRESS"
        assert info["total_safe"] == 17

    def test_reset_with_seed_is_reproducible(self, env: MinesweeperEnv) -> None:
        env.reset(seed=4)
        first = env.game.board.mine_positions()
        env.reset(seed=4)
        assert env.game.board.mine_positions() == first

    def test_action_to_position_is_row_major(self, env: MinesweeperEnv) -> None:
        assert env.action_to_position(0) == (0, 0)
        assert env.action_to_position(7) == (2, 1)
        assert env.action_to_position(19) == (4, 3)


class TestStep:
    """Test step rewards and termination."""

    def test_hitting_mine_terminates(self, env: MinesweeperEnv) -> None:
        x, y = first_position(env, mined=True)
        _, reward, terminated, truncated, info = env.step(y * 5 + x)
        assert reward == REWARD_LOSS
        assert terminated is True
        assert truncated is False
        assert info["game_state"] == "LOST"

    def test_repeated_action_is_invalid(self, env: MinesweeperEnv) -> None:
        x, y = first_position(env, mined=False)
        _, reward, _, _, _ = env.step(y * 5 + x)
        assert reward in (REWARD_SAFE, REWARD_WIN)
        if not env.game.is_over:
            _, reward, _, _, _ = env.step(y * 5 + x)
            assert reward == REWARD_INVALID

    def test_mine_free_board_wins_in_one_step(self) -> None:
        environment = MinesweeperEnv(BoardConfig(3, 3, 0))
        environment.reset(seed=0)
        obs, reward, terminated, _, info = environment.step(4)
        assert reward == REWARD_WIN
        assert terminated is True
        assert np.all(obs == 0)
        assert info["revealed"] == 9

    def test_action_after_game_over_is_invalid(self, env: MinesweeperEnv) -> None:
        x, y = first_position(env, mined=True)
        env.step(y * 5 + x)
        _, reward, terminated, _, _ = env.step(0)
        assert reward == REWARD_INVALID
        assert terminated is True


class TestMaskAndRender:
    """Test action mask and text rendering."""

    def test_mask_excludes_flagged_tiles(self, env: MinesweeperEnv) -> None:
        env.game.on_toggle_flag(1, 0)
        mask = env.get_action_mask()
        assert mask.dtype == np.int8
        assert mask[1] == 0
        assert mask.sum() == 19

    def test_masked_sample_picks_valid_action(self, env: MinesweeperEnv) -> None:
        env.game.on_toggle_flag(0, 0)
        env.action_space.seed(0)
        for _ in range(20):
            action = env.action_space.sample(mask=env.get_action_mask())
            assert action != 0

    def test_render_ansi_glyphs(self) -> None:
        obs = np.array([[-1, -2, 9], [0, 3, -1]], dtype=np.int8)
        assert render_board(obs) == ". F *\n  3 ."

    def test_render_returns_text_in_ansi_mode(self, env: MinesweeperEnv) -> None:
        text = env.render()
        assert text.count("\n") == 3
        assert set(text.replace("\n", "").replace(" ", "")) == {"."}
