from __future__ import annotations

import argparse
import logging
import time
from typing import Any, Dict

from agents import agent_names, make_agent
from game.config import END_TURN, H, W, MazeConfig
from game.runner import play_game, test_ai_score


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Play number-collect maze games with a search agent")
    parser.add_argument("agent", choices=agent_names())
    parser.add_argument("--games", type=int, default=100, help="number of games to average over")
    parser.add_argument("--seed", type=int, default=None, help="play and show one game on this maze seed")
    parser.add_argument("--height", type=int, default=H)
    parser.add_argument("--width", type=int, default=W)
    parser.add_argument("--end-turn", type=int, default=END_TURN)
    parser.add_argument("--beam-width", type=int, default=None)
    parser.add_argument("--beam-depth", type=int, default=None)
    parser.add_argument("--beam-number", type=int, default=None)
    parser.add_argument("--time-threshold", type=float, default=None, help="milliseconds per move")
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser.parse_args(argv)


def agent_params(args: argparse.Namespace) -> Dict[str, Any]:
    params: Dict[str, Any] = {}
    if args.agent in ("beam", "chokudai"):
        for name in ("beam_width", "beam_depth", "time_threshold"):
            value = getattr(args, name)
            if value is not None:
                params[name] = value
    if args.agent == "chokudai" and args.beam_number is not None:
        params["beam_number"] = args.beam_number
    return params


def main(argv=None) -> None:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    config = MazeConfig(height=args.height, width=args.width, end_turn=args.end_turn)
    params = agent_params(args)

    if args.seed is not None:
        score = play_game(make_agent(args.agent, **params), seed=args.seed, config=config, verbose=True)
        print(f"\nFinal score: {score}")
        return

    start = time.perf_counter()
    mean = test_ai_score(lambda: make_agent(args.agent, **params), args.games, config=config)
    elapsed = time.perf_counter() - start

    print("\n======================")
    print(f"Summary over {args.games} games:")
    print(f"{args.agent} mean score: {mean:.2f}")
    print(f"Elapsed: {elapsed:.2f}s")
    print("======================")


if __name__ == "__main__":
    main()
