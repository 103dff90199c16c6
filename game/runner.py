"""
Game loop for the number-collect maze.

An agent is anything with a ``play(state) -> Action`` method; the runner owns
the state, applies the chosen moves and reports the score.
"""
from __future__ import annotations

import logging
from typing import Any, Callable, Optional

import numpy as np

from .config import DEFAULT_CONFIG, MazeConfig
from .generator import generate_maze

logger = logging.getLogger(__name__)


def play_game(
    agent: Any,
    seed: Optional[int] = None,
    config: MazeConfig = DEFAULT_CONFIG,
    verbose: bool = False,
) -> int:
    state = generate_maze(config, seed)
    if verbose:
        print(state.to_string())
    while not state.is_done():
        state.advance(agent.play(state))
        if verbose:
            print("")
            print(state.to_string())
    return state.game_score


def test_ai_score(
    make_agent: Callable[[], Any],
    game_number: int,
    config: MazeConfig = DEFAULT_CONFIG,
    seed: int = 0,
) -> float:
    """Mean final score over ``game_number`` games on seeds drawn from ``seed``."""
    rng = np.random.default_rng(seed)
    score_mean = 0.0
    for i in range(game_number):
        game_seed = int(rng.integers(2**32))
        score = play_game(make_agent(), seed=game_seed, config=config)
        logger.debug("game %d (seed %d): %d", i, game_seed, score)
        score_mean += score
    score_mean /= max(game_number, 1)
    print(f"Score: {score_mean}")
    return score_mean


# Keep pytest from collecting the benchmark as a test.
test_ai_score.__test__ = False
