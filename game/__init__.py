from __future__ import annotations

from .config import DEFAULT_CONFIG, END_TURN, H, INF, W, MazeConfig
from .enums import Action, Coord, loc_after_action
from .generator import generate_maze
from .maze_state import MazeState
from .time_keeper import SearchTimeout, TimeKeeper

__all__ = [
    "Action",
    "Coord",
    "DEFAULT_CONFIG",
    "END_TURN",
    "H",
    "INF",
    "MazeConfig",
    "MazeState",
    "SearchTimeout",
    "TimeKeeper",
    "W",
    "generate_maze",
    "loc_after_action",
]
