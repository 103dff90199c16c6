"""Tests for game.maze_state."""

from __future__ import annotations

import numpy as np
import pytest

from game.config import MazeConfig
from game.enums import Action, Coord, loc_after_action
from game.generator import generate_maze
from game.maze_state import MazeState

from agents.random_walk.agent import random_action


class TestLegalActions:
    def test_corner_has_two_moves_in_canonical_order(self, scenario_state) -> None:
        assert scenario_state.legal_actions() == [Action.RIGHT, Action.DOWN]

    def test_centre_has_all_moves(self) -> None:
        state = MazeState(np.zeros((3, 3)), Coord(1, 1))
        assert state.legal_actions() == [Action.RIGHT, Action.LEFT, Action.DOWN, Action.UP]

    def test_bottom_right_corner(self) -> None:
        state = MazeState(np.zeros((3, 4)), Coord(2, 3))
        assert state.legal_actions() == [Action.LEFT, Action.UP]

    @pytest.mark.parametrize("seed", range(5))
    def test_destinations_stay_in_bounds(self, seed: int) -> None:
        state = generate_maze(MazeConfig(height=4, width=5, end_turn=20), seed)
        rng = np.random.default_rng(seed)
        while not state.is_done():
            for action in state.legal_actions():
                loc = loc_after_action(state.character, action)
                assert 0 <= loc.y < state.height
                assert 0 <= loc.x < state.width
            state.advance(random_action(state, rng))


class TestAdvance:
    def test_collects_and_zeroes_cell(self, scenario_state) -> None:
        scenario_state.advance(Action.RIGHT)
        assert scenario_state.character == Coord(0, 1)
        assert scenario_state.game_score == 5
        assert scenario_state.points[0, 1] == 0
        assert scenario_state.turn == 1

    def test_revisiting_zero_cell_adds_nothing(self, scenario_state) -> None:
        scenario_state.advance(Action.RIGHT)
        scenario_state.advance(Action.LEFT)
        assert scenario_state.game_score == 5
        scenario_state.end_turn = 3
        scenario_state.advance(Action.RIGHT)
        assert scenario_state.game_score == 5
        assert scenario_state.turn == 3

    def test_is_done_at_end_turn(self, scenario_state) -> None:
        assert not scenario_state.is_done()
        scenario_state.advance(Action.DOWN)
        scenario_state.advance(Action.RIGHT)
        assert scenario_state.is_done()
        assert scenario_state.game_score == 1

    def test_off_grid_move_raises(self, scenario_state) -> None:
        with pytest.raises(IndexError):
            scenario_state.advance(Action.UP)

    @pytest.mark.parametrize("seed", range(5))
    def test_score_is_monotone_and_bounded(self, seed: int) -> None:
        state = generate_maze(MazeConfig(height=5, width=5, end_turn=40), seed)
        total = int(state.points.sum())
        rng = np.random.default_rng(seed)
        previous = state.game_score
        while not state.is_done():
            state.advance(random_action(state, rng))
            assert state.game_score >= previous
            assert state.game_score <= total
            # Everything collected so far is exactly what left the grid.
            assert state.game_score == total - int(state.points.sum())
            previous = state.game_score


class TestClone:
    def test_clone_does_not_share_grid(self, scenario_state) -> None:
        child = scenario_state.clone()
        child.advance(Action.RIGHT)
        assert scenario_state.points[0, 1] == 5
        assert scenario_state.game_score == 0
        assert scenario_state.character == Coord(0, 0)
        assert child.points[0, 1] == 0

    def test_clone_keeps_first_action(self, scenario_state) -> None:
        scenario_state.first_action = Action.DOWN
        assert scenario_state.clone().first_action == Action.DOWN


class TestConstruction:
    def test_starting_cell_is_zeroed(self) -> None:
        state = MazeState([[7, 1], [2, 3]], Coord(0, 0))
        assert state.points[0, 0] == 0

    def test_input_grid_is_copied(self) -> None:
        points = np.array([[0, 1], [2, 3]])
        state = MazeState(points, Coord(0, 0))
        state.advance(Action.RIGHT)
        assert points[0, 1] == 1

    def test_negative_points_rejected(self) -> None:
        with pytest.raises(ValueError):
            MazeState([[0, -1], [2, 3]], Coord(0, 0))

    def test_character_outside_rejected(self) -> None:
        with pytest.raises(ValueError):
            MazeState([[0, 1], [2, 3]], Coord(2, 0))

    def test_evaluate_score_tracks_game_score(self, scenario_state) -> None:
        scenario_state.advance(Action.RIGHT)
        assert scenario_state.evaluated_score == 0
        scenario_state.evaluate_score()
        assert scenario_state.evaluated_score == 5


def test_to_string(scenario_state) -> None:
    scenario_state.advance(Action.RIGHT)
    assert scenario_state.to_string() == "\n".join(
        [
            "turn: 1",
            "score: 5",
            ".@.",
            "1.3",
            ".2.",
        ]
    )
    assert str(scenario_state) == scenario_state.to_string()
