#!/usr/bin/env python3
"""
Minesweeper - Main entry point.

Usage:
    python main.py play [--difficulty {easy,medium,hard}] [--seed N]
    python main.py evaluate [--difficulty {easy,medium,hard}] [--games N]
"""
import argparse
import logging
import sys
from pathlib import Path

# Make the src/ packages importable without installation
sys.path.insert(0, str(Path(__file__).parent / "src"))

from minesweeper import DIFFICULTIES, GameSession, MinesweeperEnv  # noqa: E402
from minesweeper.cli import run_interactive  # noqa: E402
from agents import RandomAgent  # noqa: E402


def play(args: argparse.Namespace) -> None:
    """Play an interactive game in the terminal."""
    session = GameSession(args.difficulty, seed=args.seed)
    state = run_interactive(session)
    print(f"\nFinal state: {state.name}")


def evaluate(args: argparse.Namespace) -> None:
    """Let the random agent play and report how often it wins."""
    env = MinesweeperEnv(difficulty=args.difficulty)
    difficulty = env.session.difficulty
    agent = RandomAgent.for_difficulty(difficulty, seed=args.seed)

    print(
        f"\nEvaluating Random agent on {difficulty.name} "
        f"({difficulty.rows}x{difficulty.cols}, {difficulty.mines} mines) "
        f"over {args.games} games..."
    )

    wins = 0
    total_steps = 0
    total_revealed = 0
    for game in range(args.games):
        seed = None if args.seed is None else args.seed + game
        obs, info = env.reset(seed=seed)
        agent.reset()
        done = False

        while not done:
            action = agent.select_action(obs, env.get_action_mask())
            obs, _, done, _, info = env.step(action)

        wins += info["game_state"] == "WON"
        total_steps += info["steps"]
        total_revealed += info["revealed"]

    print("Results for Random:")
    print(f"  Win rate: {wins / args.games:.1%}")
    print(f"  Avg steps: {total_steps / args.games:.1f}")
    print(f"  Avg revealed: {total_revealed / args.games:.1f} cells")


def main() -> None:
    """Parse arguments and run the appropriate command."""
    parser = argparse.ArgumentParser(
        description="Minesweeper - play in the terminal or evaluate agents"
    )
    parser.add_argument(
        "--verbose", action="store_true", help="Enable debug logging"
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # Play command
    play_parser = subparsers.add_parser("play", help="Play in the terminal")
    play_parser.add_argument(
        "--difficulty",
        choices=list(DIFFICULTIES),
        default="easy",
        help="Board preset",
    )
    play_parser.add_argument(
        "--seed", type=int, default=None, help="Seed for mine placement"
    )

    # Evaluate command
    eval_parser = subparsers.add_parser(
        "evaluate", help="Evaluate the random agent"
    )
    eval_parser.add_argument(
        "--difficulty",
        choices=list(DIFFICULTIES),
        default="easy",
        help="Board preset",
    )
    eval_parser.add_argument(
        "--games", type=int, default=100, help="Number of games to play"
    )
    eval_parser.add_argument(
        "--seed", type=int, default=None, help="Base seed for the games"
    )

    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(name)s %(levelname)s: %(message)s",
        )

    if args.command == "play":
        play(args)
    elif args.command == "evaluate":
        evaluate(args)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
