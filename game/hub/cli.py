"""
Command line for the arcade hub

    python -m game.hub list
    python -m game.hub play snake --name alice
    python -m game.hub simulate space_ranger --episodes 20 --seed 7 --csv ./logs/sr.csv
    python -m game.hub leaderboard --game snake
"""

import argparse
import csv
import os
from typing import List, Optional

import numpy as np

from .config import ENV_CONFIG, HUB_CONFIG, SIMULATE_CONFIG
from .env import HubEnv, run_random_episode
from .games import GAMES
from .leaderboard import Leaderboard
from .session import Hub


def cmd_list(args):
    for name, rules in GAMES.items():
        mode = "input-driven" if rules.tick_interval is None else f"{1 / rules.tick_interval:.1f} ticks/s"
        print(f"  {name:15} {rules.title:18} {mode}")


def cmd_play(args):
    # Arcade needs a display; only import it when a window is wanted
    from .window import play

    leaderboard = Leaderboard(args.leaderboard, size=HUB_CONFIG["leaderboard_size"])
    hub = Hub(player_name=args.name, leaderboard=leaderboard, verbose=args.verbose)
    play(args.game, hub=hub, seed=args.seed)


def cmd_simulate(args):
    env = HubEnv(game=args.game, **ENV_CONFIG)

    writer = None
    csv_file = None
    if args.csv:
        parent = os.path.dirname(args.csv)
        if parent:
            os.makedirs(parent, exist_ok=True)
        csv_file = open(args.csv, "w", newline="")
        writer = csv.writer(csv_file)
        writer.writerow(["episode", "seed", "score", "return", "length", "outcome"])
        csv_file.flush()
        if args.verbose > 0:
            print(f"[simulate] Logging to {args.csv}")

    print(f"\n{'='*60}")
    print(f"Simulating {args.episodes} random episodes of {env.rules.title}")
    print(f"{'='*60}\n")

    scores = []
    try:
        for episode in range(args.episodes):
            seed = args.seed + episode
            stats = run_random_episode(env, seed=seed)
            scores.append(stats["score"])
            if args.verbose > 0:
                print(f"Episode {episode + 1}: score={stats['score']} "
                      f"length={stats['length']} outcome={stats['outcome']}")
            if writer:
                writer.writerow([episode, seed, stats["score"], stats["return"],
                                 stats["length"], stats["outcome"]])
                csv_file.flush()
    finally:
        if csv_file:
            csv_file.close()
        env.close()

    print(f"\nMean score: {np.mean(scores):.2f} +/- {np.std(scores):.2f}")
    print(f"Best score: {np.max(scores)}")


def cmd_leaderboard(args):
    board = Leaderboard(args.leaderboard, size=HUB_CONFIG["leaderboard_size"])
    entries = board.top(game=args.game)
    if not entries:
        print("No scores yet.")
        return
    print("-" * 60)
    for rank, e in enumerate(entries, start=1):
        print(f"{rank:>3}. {e['username']:15} {e['game']:15} {e['score']:>8}")
    print("-" * 60)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Arcade hub games")
    parser.add_argument("--verbose", type=int, default=1)
    parser.add_argument("--leaderboard", type=str, default=HUB_CONFIG["leaderboard_path"],
                        help="Path to the leaderboard JSON file")
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("list", help="List available games")
    p.set_defaults(func=cmd_list)

    p = sub.add_parser("play", help="Open the game window")
    p.add_argument("game", nargs="?", choices=list(GAMES), default=None)
    p.add_argument("--name", type=str, default=HUB_CONFIG["player_name"])
    p.add_argument("--seed", type=int, default=None)
    p.set_defaults(func=cmd_play)

    ticked = [name for name, rules in GAMES.items() if rules.tick_interval is not None]
    p = sub.add_parser("simulate", help="Run random-policy episodes headless")
    p.add_argument("game", choices=ticked)
    p.add_argument("--episodes", type=int, default=SIMULATE_CONFIG["episodes"])
    p.add_argument("--seed", type=int, default=SIMULATE_CONFIG["seed"])
    p.add_argument("--csv", type=str, default=None,
                   help="Write per-episode metrics to this CSV file")
    p.set_defaults(func=cmd_simulate)

    p = sub.add_parser("leaderboard", help="Show the top scores")
    p.add_argument("--game", type=str, choices=list(GAMES), default=None)
    p.set_defaults(func=cmd_leaderboard)

    return parser


def main(argv: Optional[List[str]] = None):
    args = build_parser().parse_args(argv)
    args.func(args)


if __name__ == "__main__":
    main()
