#!/usr/bin/env python3
"""
Minesweeper - terminal entry point.

Usage:
    python main.py play [--width W] [--height H] [--mines N] [--seed S]
    python main.py demo [--games N] [--width W] [--height H] [--mines N]

In-game commands:
    r X Y   reveal tile
    f X Y   toggle flag
    c X Y   chord on an open tile
    n       new game
    q       quit
"""
import argparse
import logging
import random
from typing import Callable, Dict, List, Optional

from minesweeper import (
    BoardConfig,
    GameState,
    GameStatus,
    InvalidConfigurationError,
    render_board,
)
from demo import demo


def print_game(game: GameState) -> None:
    """Print the board with a header line of counters."""
    print(
        f"Mines left: {game.mines_remaining} | "
        f"Time: {game.ticks} | "
        f"Status: {game.status.name}"
    )
    print(render_board(game.board.get_observation()))


def parse_position(parts: List[str]) -> Optional[tuple]:
    """Parse 'X Y' arguments of an in-game command."""
    if len(parts) != 2:
        return None
    try:
        return int(parts[0]), int(parts[1])
    except ValueError:
        return None


def play(args: argparse.Namespace) -> None:
    """Play an interactive game in the terminal."""
    game = GameState(
        BoardConfig(args.width, args.height, args.mines),
        random.Random(args.seed),
    )
    actions: Dict[str, Callable[[int, int], object]] = {
        "r": game.on_reveal,
        "f": game.on_toggle_flag,
        "c": game.on_chord,
    }

    print_game(game)
    while True:
        try:
            line = input("> ").split()
        except EOFError:
            break
        if not line:
            continue
        command = line[0].lower()

        if command == "q":
            break
        if command == "n":
            game.on_restart()
        elif command in actions:
            position = parse_position(line[1:])
            if position is None:
                print(f"Usage: {command} X Y")
                continue
            actions[command](*position)
            game.on_tick()
        else:
            print("Commands: r X Y | f X Y | c X Y | n | q")
            continue

        if game.is_over:
            game.reveal_all_for_game_over()
            print_game(game)
            message = "YOU WIN!" if game.status == GameStatus.WON else "GAME OVER"
            print(f"\n*** {message} *** (n: new game, q: quit)")
        else:
            print_game(game)


def run_demo(args: argparse.Namespace) -> None:
    """Watch random play through the environment."""
    demo(
        delay=args.delay,
        games=args.games,
        config=BoardConfig(args.width, args.height, args.mines),
        seed=args.seed,
    )


def add_board_arguments(parser: argparse.ArgumentParser) -> None:
    """Add board size options shared by every command."""
    parser.add_argument("--width", type=int, default=9, help="Board columns")
    parser.add_argument("--height", type=int, default=9, help="Board rows")
    parser.add_argument("--mines", type=int, default=10, help="Number of mines")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")


def main() -> None:
    """Parse arguments and run the appropriate command."""
    parser = argparse.ArgumentParser(description="Minesweeper in the terminal")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Engine log level",
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    play_parser = subparsers.add_parser("play", help="Play interactively")
    add_board_arguments(play_parser)

    demo_parser = subparsers.add_parser("demo", help="Watch random play")
    add_board_arguments(demo_parser)
    demo_parser.add_argument(
        "--games", type=int, default=5, help="Number of games"
    )
    demo_parser.add_argument(
        "--delay", type=float, default=0.3, help="Delay between moves"
    )

    args = parser.parse_args()
    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )

    try:
        if args.command == "play":
            play(args)
        elif args.command == "demo":
            run_demo(args)
        else:
            parser.print_help()
    except InvalidConfigurationError as exc:
        parser.error(str(exc))


if __name__ == "__main__":
    main()
