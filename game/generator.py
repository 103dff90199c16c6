from __future__ import annotations

from typing import Optional

import numpy as np

from .config import DEFAULT_CONFIG, MazeConfig
from .enums import Coord
from .maze_state import MazeState

MAX_POINT = 9


def generate_maze(config: MazeConfig = DEFAULT_CONFIG, seed: Optional[int] = None) -> MazeState:
    """Random maze: agent on a uniform cell, every other cell worth 0..MAX_POINT."""
    rng = np.random.default_rng(seed)
    character = Coord(
        int(rng.integers(0, config.height)),
        int(rng.integers(0, config.width)),
    )
    points = rng.integers(0, MAX_POINT + 1, size=(config.height, config.width), dtype=np.int64)
    # MazeState zeroes the starting cell.
    return MazeState(points, character, end_turn=config.end_turn)
