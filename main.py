#!/usr/bin/env python3
"""
Minesweeper - Main entry point.

Usage:
    python main.py play [--preset NAME | --width W --height H --mines N] [--seed S]
    python main.py evaluate [--games N] [--flags] [--seed S]
"""
import argparse
import random
from typing import Dict, Optional

from mineboard.agents import BaseAgent, FlaggingAgent
from mineboard.game import (
    Board,
    BoardConfig,
    MinesweeperEnv,
    PRESETS,
    render_board,
    render_status,
)


PLAY_HELP = "Commands: r X Y (reveal), f X Y (flag), n (new game), q (quit)"


def build_config(args: argparse.Namespace) -> BoardConfig:
    """Build a board configuration from command line flags."""
    if args.preset:
        return PRESETS[args.preset]
    return BoardConfig(width=args.width, height=args.height, num_mines=args.mines)


def parse_command(line: str) -> Optional[tuple]:
    """
    Parse one line of player input.

    Returns:
        (command, x, y) for reveal/flag, (command,) for new/quit,
        or None if the line is not understood.
    """
    parts = line.strip().lower().split()
    if not parts:
        return None
    command = parts[0]
    if command in ("n", "q") and len(parts) == 1:
        return (command,)
    if command in ("r", "f") and len(parts) == 3:
        try:
            return command, int(parts[1]), int(parts[2])
        except ValueError:
            return None
    return None


def play(args: argparse.Namespace) -> None:
    """Play an interactive game in the terminal."""
    config = build_config(args)
    board = Board(config, random.Random(args.seed))

    print(f"Board: {config.width}x{config.height} with {config.num_mines} mines")
    print(PLAY_HELP)

    while True:
        print()
        print(render_board(board))
        print(render_status(board))

        try:
            line = input("> ")
        except EOFError:
            break

        command = parse_command(line)
        if command is None:
            print(PLAY_HELP)
            continue

        if command[0] == "q":
            break
        if command[0] == "n":
            board.reset()
        elif command[0] == "r":
            board.reveal(command[1], command[2])
        elif command[0] == "f":
            board.toggle_flag(command[1], command[2])


def evaluate_agent(
    agent: BaseAgent,
    config: BoardConfig,
    num_episodes: int = 100,
    seed: Optional[int] = None,
    allow_flags: bool = False,
) -> Dict[str, float]:
    """
    Play a number of games with an agent and collect statistics.

    Args:
        agent: Agent to evaluate.
        config: Board configuration for every game.
        num_episodes: Number of games to play.
        seed: Seed for the first game; later games use seed + episode.
        allow_flags: Give the environment flag actions.

    Returns:
        Dictionary with win rate, average reward, steps, revealed cells
        and flag actions per game.
    """
    env = MinesweeperEnv(config=config, allow_flags=allow_flags)
    wins = 0
    total_reward = 0.0
    total_steps = 0
    total_revealed = 0
    total_flags = 0

    for episode in range(num_episodes):
        episode_seed = seed + episode if seed is not None else None
        observation, info = env.reset(seed=episode_seed)
        agent.reset()
        done = False

        while not done:
            action = agent.select_action(observation, env.get_action_mask())
            total_flags += action >= config.total_cells
            observation, reward, terminated, truncated, info = env.step(action)
            total_reward += reward
            done = terminated or truncated

        wins += info["game_state"] == "WON"
        total_steps += info["steps"]
        total_revealed += info["revealed"]

    return {
        "win_rate": wins / num_episodes,
        "avg_reward": total_reward / num_episodes,
        "avg_steps": total_steps / num_episodes,
        "avg_revealed": total_revealed / num_episodes,
        "avg_flags": total_flags / num_episodes,
    }


def evaluate(args: argparse.Namespace) -> None:
    """Evaluate the flagging agent and print results."""
    config = build_config(args)
    agent = FlaggingAgent(config, allow_flags=args.flags, seed=args.seed)
    name = "Flagging" if args.flags else "Flagging (no flags)"

    print(f"\nEvaluating {name} over {args.games} games...")
    results = evaluate_agent(agent, config, args.games, args.seed, args.flags)

    print(f"Results for {name}:")
    print(f"  Win rate: {results['win_rate']:.1%}")
    print(f"  Avg reward: {results['avg_reward']:.2f}")
    print(f"  Avg steps: {results['avg_steps']:.1f}")
    print(f"  Avg revealed: {results['avg_revealed']:.1f} cells")
    print(f"  Avg flags: {results['avg_flags']:.1f}")


def add_board_arguments(parser: argparse.ArgumentParser) -> None:
    """Add board size and seed flags to a sub-command."""
    parser.add_argument(
        "--preset", choices=sorted(PRESETS), default=None, help="Board preset"
    )
    parser.add_argument("--width", type=int, default=16, help="Grid columns")
    parser.add_argument("--height", type=int, default=16, help="Grid rows")
    parser.add_argument(
        "--mines", type=int, default=32, help="Number of mines (clamped)"
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed")


def main() -> None:
    """Parse arguments and run the appropriate command."""
    parser = argparse.ArgumentParser(description="Minesweeper board engine")
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    play_parser = subparsers.add_parser("play", help="Play in the terminal")
    add_board_arguments(play_parser)

    eval_parser = subparsers.add_parser(
        "evaluate", help="Evaluate the flagging agent"
    )
    add_board_arguments(eval_parser)
    eval_parser.add_argument(
        "--games", type=int, default=100, help="Number of games to play"
    )
    eval_parser.add_argument(
        "--flags", action="store_true", help="Let the agent place flags"
    )

    args = parser.parse_args()

    try:
        if args.command == "play":
            play(args)
        elif args.command == "evaluate":
            evaluate(args)
        else:
            parser.print_help()
    except ValueError as exc:
        parser.error(str(exc))


if __name__ == "__main__":
    main()
