#!/usr/bin/env python3
"""Watch the Flagging agent play Minesweeper."""
import time
import os
from typing import Optional

from mineboard.agents import FlaggingAgent
from mineboard.game import BoardConfig, MinesweeperEnv, render_status


def clear_screen():
    os.system('cls' if os.name == 'nt' else 'clear')


def demo(delay: float = 0.3, games: int = 5, width: int = 9, height: int = 9,
         mines: int = 10, seed: Optional[int] = None, flags: bool = True):
    """Run demo games with visualization."""
    config = BoardConfig(width=width, height=height, num_mines=mines)
    env = MinesweeperEnv(config=config, render_mode="ansi", allow_flags=flags)
    agent = FlaggingAgent(config, allow_flags=flags, seed=seed)

    print(f"Board: {config.width}x{config.height} with {config.num_mines} mines")
    print("Starting in 2 seconds...")
    time.sleep(2)

    wins = 0

    for game in range(games):
        game_seed = seed + game if seed is not None else None
        obs, _ = env.reset(seed=game_seed)
        agent.reset()

        clear_screen()
        print(f"=== Game {game + 1}/{games} ===")
        print(f"Wins so far: {wins}\n")
        print(env.render())
        time.sleep(delay)

        done = False
        step = 0

        while not done:
            action = agent.select_action(obs, env.get_action_mask())
            x, y, is_flag = agent.decode_action(action)

            obs, reward, terminated, truncated, info = env.step(action)
            done = terminated or truncated
            step += 1

            clear_screen()
            print(f"=== Game {game + 1}/{games} | Step {step} ===")
            print(f"Wins so far: {wins}")
            move = "flag" if is_flag else "reveal"
            print(f"Last move: {move} ({x}, {y})\n")
            print(env.render())
            print(render_status(env.board))

            if done and info.get("game_state") == "WON":
                wins += 1

            time.sleep(delay)

        time.sleep(1.0)  # Pause between games

    print(f"\n=== Final: {wins}/{games} wins ({100*wins/games:.0f}%) ===")


if __name__ == "__main__":
    import argparse
    parser = argparse.ArgumentParser()
    parser.add_argument("--delay", type=float, default=0.3, help="Delay between moves")
    parser.add_argument("--games", type=int, default=5, help="Number of games")
    parser.add_argument("--width", type=int, default=9, help="Grid columns")
    parser.add_argument("--height", type=int, default=9, help="Grid rows")
    parser.add_argument("--mines", type=int, default=10, help="Number of mines")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument("--no-flags", action="store_true", help="Reveal only")
    args = parser.parse_args()

    demo(delay=args.delay, games=args.games, width=args.width,
         height=args.height, mines=args.mines, seed=args.seed,
         flags=not args.no_flags)
