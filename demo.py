#!/usr/bin/env python3
"""Watch random play on Minesweeper boards."""
import time
import os
from typing import Optional

from minesweeper import BoardConfig, GameStatus, MinesweeperEnv


def clear_screen():
    os.system('cls' if os.name == 'nt' else 'clear')


def demo(
    delay: float = 0.3,
    games: int = 5,
    config: Optional[BoardConfig] = None,
    seed: Optional[int] = None,
) -> int:
    """
    Run demo games with visualization.

    Moves are sampled uniformly from closed tiles using the action mask.

    Returns:
        Number of games won.
    """
    config = config or BoardConfig()
    env = MinesweeperEnv(config=config, render_mode="ansi")
    env.action_space.seed(seed)

    print(
        f"Board: {config.width}x{config.height} with {config.mine_count} mines "
        f"({100 * config.mine_count / config.area:.1f}% density)"
    )

    wins = 0

    for game in range(games):
        game_seed = None if seed is None else seed + game
        env.reset(seed=game_seed)
        done = env.game.is_over
        step = 0

        while not done:
            action = env.action_space.sample(mask=env.get_action_mask())
            x, y = env.action_to_position(action)

            _, _, terminated, truncated, info = env.step(action)
            done = terminated or truncated
            step += 1

            if delay > 0:
                clear_screen()
            print(f"=== Game {game + 1}/{games} | Step {step} ===")
            print(f"Wins so far: {wins}")
            print(f"Last move: ({x}, {y})\n")
            print(env.render())
            time.sleep(delay)

        if env.game.status == GameStatus.WON:
            wins += 1
            print("\n*** WIN! ***")
        else:
            print("\n*** LOST (hit mine) ***")

    print(f"\n=== Final: {wins}/{games} wins ({100 * wins / max(games, 1):.0f}%) ===")
    return wins


if __name__ == "__main__":
    import argparse
    parser = argparse.ArgumentParser()
    parser.add_argument("--delay", type=float, default=0.3, help="Delay between moves")
    parser.add_argument("--games", type=int, default=5, help="Number of games")
    parser.add_argument("--size", type=int, default=9, help="Board size (NxN)")
    parser.add_argument("--mines", type=int, default=None, help="Number of mines (default: ~12%% of cells)")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    args = parser.parse_args()

    mines = args.mines if args.mines is not None else int(args.size * args.size * 0.12)

    demo(
        delay=args.delay,
        games=args.games,
        config=BoardConfig(args.size, args.size, mines),
        seed=args.seed,
    )
