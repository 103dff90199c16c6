from __future__ import annotations

import logging
from typing import Optional

from game.enums import Action
from game.maze_state import MazeState
from game.time_keeper import SearchTimeout, TimeKeeper

from agents.greedy.agent import greedy_action

from .state_queue import StateQueue

logger = logging.getLogger(__name__)


def expand_state(now_state: MazeState, queue: StateQueue, is_root: bool) -> None:
    """Push every legal successor of ``now_state``; root children get their first_action."""
    for action in now_state.legal_actions():
        next_state = now_state.clone()
        next_state.advance(action)
        next_state.evaluate_score()
        if is_root:
            next_state.first_action = action
        queue.push(next_state)


def root_state(state: MazeState) -> MazeState:
    root = state.clone()
    root.first_action = None
    root.evaluate_score()
    return root


def first_action_or_greedy(best_state: MazeState, state: MazeState) -> Action:
    # Nothing expanded yet: answer with the one-ply choice instead.
    if best_state.first_action is None:
        logger.debug("no first action recovered at turn %d, falling back to greedy", state.turn)
        return greedy_action(state)
    return best_state.first_action


def _next_beam(now_beam: StateQueue, beam_width: int, is_root: bool) -> StateQueue:
    next_beam = StateQueue()
    for _ in range(beam_width):
        if not now_beam:
            break
        if now_beam.peek().is_done():
            break
        expand_state(now_beam.pop(), next_beam, is_root)
    return next_beam


def beam_search_action(state: MazeState, beam_width: int, beam_depth: int) -> Action:
    """
    Keep the ``beam_width`` best states per depth for ``beam_depth`` plies and
    return the root move leading to the best state reached.
    """
    now_beam = StateQueue([root_state(state)])
    best_state = now_beam.peek()

    for t in range(beam_depth):
        next_beam = _next_beam(now_beam, beam_width, t == 0)
        if not next_beam:
            logger.debug("beam emptied at depth %d", t)
            break
        now_beam = next_beam
        best_state = now_beam.peek()

        if best_state.is_done():
            break
    return first_action_or_greedy(best_state, state)


def beam_search_action_with_time_threshold(
    state: MazeState,
    beam_width: int,
    time_threshold: float,
) -> Action:
    """
    Beam search without a depth limit; the deadline is checked before every
    round and the best state so far answers once it has passed.
    """
    time_keeper = TimeKeeper(time_threshold)
    now_beam = StateQueue([root_state(state)])
    best_state = now_beam.peek()

    t = 0
    try:
        while True:
            time_keeper.check()
            next_beam = _next_beam(now_beam, beam_width, t == 0)
            if not next_beam:
                logger.debug("beam emptied at depth %d", t)
                break
            now_beam = next_beam
            best_state = now_beam.peek()

            if best_state.is_done():
                break

            t += 1
    except SearchTimeout:
        logger.debug("beam search timed out after %d rounds (%.1f ms)", t, time_keeper.elapsed_ms())
    return first_action_or_greedy(best_state, state)


class PlayerAgent:
    """
    Beam search agent.  Searches to the end of the game by default; with a
    ``time_threshold`` (ms) it deepens until the budget runs out instead.
    """

    BEAM_WIDTH = 2

    def __init__(
        self,
        beam_width: int = BEAM_WIDTH,
        beam_depth: Optional[int] = None,
        time_threshold: Optional[float] = None,
    ) -> None:
        self.beam_width = beam_width
        self.beam_depth = beam_depth
        self.time_threshold = time_threshold

    def play(self, state: MazeState) -> Action:
        if self.time_threshold is not None:
            return beam_search_action_with_time_threshold(
                state, self.beam_width, self.time_threshold
            )
        depth = self.beam_depth if self.beam_depth is not None else state.end_turn
        return beam_search_action(state, self.beam_width, depth)
