from __future__ import annotations

import heapq
import itertools
from typing import Iterable, List, Optional, Tuple

from game.maze_state import MazeState


class StateQueue:
    """
    Max-priority queue of search states keyed on ``evaluated_score`` alone.

    States are never compared with each other: equal scores fall back to
    insertion order, so the state pushed first is popped first.
    """

    def __init__(self, states: Iterable[MazeState] = ()) -> None:
        self._heap: List[Tuple[int, int, MazeState]] = []
        self._counter = itertools.count()
        for state in states:
            self.push(state)

    def push(self, state: MazeState) -> None:
        heapq.heappush(self._heap, (-state.evaluated_score, next(self._counter), state))

    def pop(self) -> MazeState:
        return heapq.heappop(self._heap)[2]

    def peek(self) -> Optional[MazeState]:
        if not self._heap:
            return None
        return self._heap[0][2]

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)
