from __future__ import annotations

import pytest

from game.config import MazeConfig
from game.enums import Coord
from game.generator import generate_maze
from game.maze_state import MazeState

from helpers import SCENARIO_POINTS


@pytest.fixture
def scenario_state() -> MazeState:
    return MazeState(SCENARIO_POINTS, Coord(0, 0), end_turn=2)


@pytest.fixture
def small_config() -> MazeConfig:
    return MazeConfig(height=3, width=3, end_turn=3)


@pytest.fixture
def small_mazes(small_config):
    return [generate_maze(small_config, seed) for seed in range(12)]
