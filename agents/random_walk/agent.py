from __future__ import annotations

from typing import Optional

import numpy as np

from game.enums import Action
from game.maze_state import MazeState


def random_action(state: MazeState, rng: np.random.Generator) -> Action:
    legal_actions = state.legal_actions()
    return legal_actions[int(rng.integers(len(legal_actions)))]


class PlayerAgent:
    """Baseline that wanders: a uniformly random legal move every turn."""

    def __init__(self, seed: Optional[int] = 0) -> None:
        self.rng = np.random.default_rng(seed)

    def play(self, state: MazeState) -> Action:
        return random_action(state, self.rng)
