from __future__ import annotations

import logging
from typing import List, Optional

from game.enums import Action
from game.maze_state import MazeState
from game.time_keeper import TimeKeeper

from agents.beam.agent import expand_state, first_action_or_greedy, root_state
from agents.beam.state_queue import StateQueue
from agents.greedy.agent import greedy_action

logger = logging.getLogger(__name__)


def _sweep(beam: List[StateQueue], beam_width: int, beam_depth: int) -> None:
    # One pass from the root downwards, refining every depth a little.
    for t in range(beam_depth):
        now_beam = beam[t]
        for _ in range(beam_width):
            if not now_beam:
                break
            if now_beam.peek().is_done():
                break
            expand_state(now_beam.pop(), beam[t + 1], t == 0)


def _deepest_best(beam: List[StateQueue], state: MazeState) -> Action:
    for now_beam in reversed(beam):
        if now_beam:
            return first_action_or_greedy(now_beam.peek(), state)
    logger.debug("all chokudai queues empty at turn %d", state.turn)
    return greedy_action(state)


def chokudai_search_action(
    state: MazeState,
    beam_width: int,
    beam_depth: int,
    beam_number: int,
) -> Action:
    """
    Chokudai search: one queue per depth, swept ``beam_number`` times.

    Each sweep pops up to ``beam_width`` states from every depth and pushes
    their successors one level down, so all depths improve together.  The
    answer is the first action of the best state at the deepest non-empty
    depth.
    """
    beam = [StateQueue() for _ in range(beam_depth + 1)]
    beam[0].push(root_state(state))
    for _ in range(beam_number):
        _sweep(beam, beam_width, beam_depth)
    return _deepest_best(beam, state)


def chokudai_search_action_with_time_threshold(
    state: MazeState,
    beam_width: int,
    beam_depth: int,
    time_threshold: float,
) -> Action:
    """Chokudai search that keeps sweeping until ``time_threshold`` ms have passed."""
    time_keeper = TimeKeeper(time_threshold)
    beam = [StateQueue() for _ in range(beam_depth + 1)]
    beam[0].push(root_state(state))
    sweeps = 0
    while True:
        _sweep(beam, beam_width, beam_depth)
        sweeps += 1
        if time_keeper.is_time_over():
            break
    logger.debug("chokudai search ran %d sweeps in %.1f ms", sweeps, time_keeper.elapsed_ms())
    return _deepest_best(beam, state)


class PlayerAgent:
    """
    Chokudai search agent.  With a ``time_threshold`` (ms) it sweeps until the
    budget is spent, otherwise it runs ``beam_number`` sweeps.
    """

    BEAM_WIDTH = 1
    BEAM_NUMBER = 2

    def __init__(
        self,
        beam_width: int = BEAM_WIDTH,
        beam_depth: Optional[int] = None,
        beam_number: int = BEAM_NUMBER,
        time_threshold: Optional[float] = None,
    ) -> None:
        self.beam_width = beam_width
        self.beam_depth = beam_depth
        self.beam_number = beam_number
        self.time_threshold = time_threshold

    def play(self, state: MazeState) -> Action:
        depth = self.beam_depth if self.beam_depth is not None else state.end_turn
        if self.time_threshold is not None:
            return chokudai_search_action_with_time_threshold(
                state, self.beam_width, depth, self.time_threshold
            )
        return chokudai_search_action(state, self.beam_width, depth, self.beam_number)
