from __future__ import annotations

from enum import IntEnum
from typing import NamedTuple


class Action(IntEnum):
    RIGHT = 0
    LEFT = 1
    DOWN = 2
    UP = 3


# Indexed by Action; the order of Action is the canonical legal-action order.
DX = (1, -1, 0, 0)
DY = (0, 0, 1, -1)


class Coord(NamedTuple):
    y: int
    x: int


def loc_after_action(loc: Coord, action: Action) -> Coord:
    return Coord(loc.y + DY[action], loc.x + DX[action])
