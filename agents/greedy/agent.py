from __future__ import annotations

from game.config import INF
from game.enums import Action
from game.maze_state import MazeState


def greedy_action(state: MazeState) -> Action:
    """
    One-ply lookahead: the legal move whose successor evaluates highest.
    Ties keep the earliest action in legal order.
    """
    legal_actions = state.legal_actions()
    best_score = -INF
    best_action = legal_actions[0]
    for action in legal_actions:
        now_state = state.clone()
        now_state.advance(action)
        now_state.evaluate_score()
        if now_state.evaluated_score > best_score:
            best_score = now_state.evaluated_score
            best_action = action
    return best_action


class PlayerAgent:
    """Takes whatever is worth the most right now."""

    def play(self, state: MazeState) -> Action:
        return greedy_action(state)
