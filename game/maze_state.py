from __future__ import annotations

import copy
from typing import List, Optional, Sequence, Union

import numpy as np

from .config import END_TURN
from .enums import Action, Coord, loc_after_action


class MazeState:
    """
    One simulated position of the number-collect maze.

    ``points`` holds the value still collectable on every cell, ``character``
    the agent's location.  ``evaluated_score`` is only a sort key for search and
    ``first_action`` remembers which root move a search leaf descends from.
    """

    def __init__(
        self,
        points: Union[np.ndarray, Sequence[Sequence[int]]],
        character: Coord,
        end_turn: int = END_TURN,
        turn: int = 0,
        game_score: int = 0,
    ) -> None:
        self.points = np.array(points, dtype=np.int64)
        if self.points.ndim != 2:
            raise ValueError(f"points must be a 2-D grid, got shape {self.points.shape}")
        if (self.points < 0).any():
            raise ValueError("points must be non-negative")
        self.height, self.width = self.points.shape
        self.character = Coord(*character)
        if not self.is_in_bounds(self.character):
            raise ValueError(f"character {tuple(self.character)} is outside the maze")
        # The starting cell never holds a collectible.
        self.points[self.character] = 0
        self.end_turn = end_turn
        self.turn = turn
        self.game_score = game_score
        self.evaluated_score = 0
        self.first_action: Optional[Action] = None

    def clone(self) -> "MazeState":
        """Return an independent copy; the grid is never shared between branches."""
        new = copy.copy(self)
        new.points = self.points.copy()
        return new

    def is_done(self) -> bool:
        return self.turn == self.end_turn

    def is_in_bounds(self, loc: Coord) -> bool:
        return 0 <= loc.y < self.height and 0 <= loc.x < self.width

    def advance(self, action: Action) -> None:
        loc = loc_after_action(self.character, action)
        if not self.is_in_bounds(loc):
            raise IndexError(f"{Action(action).name} leaves the maze from {tuple(self.character)}")
        self.character = loc
        point = int(self.points[loc])
        if point > 0:
            self.game_score += point
            self.points[loc] = 0
        self.turn += 1

    def legal_actions(self) -> List[Action]:
        return [
            action
            for action in Action
            if self.is_in_bounds(loc_after_action(self.character, action))
        ]

    def evaluate_score(self) -> None:
        self.evaluated_score = self.game_score

    def to_string(self) -> str:
        lines = [f"turn: {self.turn}", f"score: {self.game_score}"]
        for y in range(self.height):
            row = []
            for x in range(self.width):
                if self.character == (y, x):
                    row.append("@")
                elif self.points[y, x] > 0:
                    row.append(str(int(self.points[y, x])))
                else:
                    row.append(".")
            lines.append("".join(row))
        return "\n".join(lines)

    __str__ = to_string

    def __repr__(self) -> str:
        return (
            f"MazeState(turn={self.turn}, character={tuple(self.character)}, "
            f"game_score={self.game_score}, first_action={self.first_action})"
        )
