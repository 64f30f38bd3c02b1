"""
Tests for the domain entities.
"""

import os
import sys
from collections import deque
from dataclasses import FrozenInstanceError

import pytest

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from domain import (  # noqa: E402
    UP, DOWN, LEFT, RIGHT, VALID_MOVES, OPPOSITE_DIRECTIONS,
    Snake, GameState, normalize_direction,
)


def make_state(**overrides):
    fields = dict(
        snake=((2, 1), (1, 1), (0, 1)),
        food=(3, 3),
        flower="rose",
        score=0,
        level=1,
        fruits_in_level=0,
        speed_ms=200,
        current_direction=RIGHT,
        pending_direction=RIGHT,
        is_over=False,
        death_reason=None,
        round_number=0,
        grid_size=5,
    )
    fields.update(overrides)
    return GameState(**fields)


class TestSnake:
    """Tests for the Snake class."""

    def test_snake_positions_is_deque(self):
        snake = Snake([(5, 5), (4, 5)])
        assert isinstance(snake.positions, deque)
        assert snake.head == (5, 5)
        assert len(snake) == 2

    def test_next_head_uses_screen_coordinates(self):
        snake = Snake([(5, 5)])
        assert snake.next_head(UP) == (5, 4)
        assert snake.next_head(DOWN) == (5, 6)
        assert snake.next_head(LEFT) == (4, 5)
        assert snake.next_head(RIGHT) == (6, 5)

    def test_push_and_drop(self):
        snake = Snake([(5, 5), (4, 5)])
        snake.push_head((6, 5))
        assert snake.drop_tail() == (4, 5)
        assert list(snake.positions) == [(6, 5), (5, 5)]
        assert (6, 5) in snake
        assert (4, 5) not in snake


class TestDirections:
    def test_opposites_are_symmetric(self):
        for move in VALID_MOVES:
            assert OPPOSITE_DIRECTIONS[OPPOSITE_DIRECTIONS[move]] == move

    @pytest.mark.parametrize("raw,expected", [
        ("up", UP), (" Down ", DOWN), ("LEFT", LEFT), ("Right", RIGHT),
    ])
    def test_normalize(self, raw, expected):
        assert normalize_direction(raw) == expected

    @pytest.mark.parametrize("raw", ["", "north", None, 3])
    def test_normalize_rejects(self, raw):
        with pytest.raises(ValueError):
            normalize_direction(raw)


class TestGameState:
    """Tests for the GameState snapshot."""

    def test_snapshot_is_read_only(self):
        state = make_state()
        with pytest.raises(FrozenInstanceError):
            state.score = 5

    def test_to_dict_is_json_friendly(self):
        data = make_state().to_dict()
        assert data["snake"] == [[2, 1], [1, 1], [0, 1]]
        assert data["food"] == [3, 3]
        assert data["flower"] == "rose"
        assert data["is_over"] is False

    def test_to_dict_without_food(self):
        assert make_state(food=None, flower=None).to_dict()["food"] is None

    def test_print_board(self):
        board = make_state().print_board()
        lines = board.split("\n")
        assert lines[1] == " 1 S S H . ."
        assert lines[3] == " 3 . . . F ."
        assert lines[-1] == "   0 1 2 3 4"

    def test_repr(self):
        assert repr(make_state(score=2)) == "<GameState round=0, score=2, level=1, length=3, over=False>"
