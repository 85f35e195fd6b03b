"""
Tests for the Snake and GameState domain entities.
"""

import sys
import os
from collections import deque

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from domain import Snake, GameState, ACTIVE, RIGHT


def make_state(**overrides) -> GameState:
    values = dict(
        round_number=5,
        phase=ACTIVE,
        snake_positions=[(3, 3), (2, 3)],
        direction=RIGHT,
        target=(5, 5),
        score=2,
        max_targets=10,
        width=10,
        height=10,
    )
    values.update(overrides)
    return GameState(**values)


class TestSnake:
    """Tests for the Snake class."""

    def test_snake_initialization_with_single_position(self):
        """Snake initializes with a single position."""
        snake = Snake([(5, 5)])
        assert list(snake.positions) == [(5, 5)]
        assert snake.alive is True
        assert snake.death_reason is None
        assert snake.death_round is None

    def test_snake_head_property(self):
        """Snake.head returns the first position (head)."""
        snake = Snake([(5, 5), (4, 5), (3, 5)])
        assert snake.head == (5, 5)

    def test_snake_positions_is_deque(self):
        """Snake positions are stored as a deque for efficient operations."""
        snake = Snake([(5, 5)])
        assert isinstance(snake.positions, deque)

    def test_grow_and_drop_tail_keep_set_in_step(self):
        """The occupied set mirrors the ordered body."""
        snake = Snake([(5, 5), (4, 5)])
        snake.grow((6, 5))
        assert snake.as_list() == [(6, 5), (5, 5), (4, 5)]
        assert (6, 5) in snake
        assert snake.drop_tail() == (4, 5)
        assert (4, 5) not in snake
        assert snake.occupied == {(6, 5), (5, 5)}
        assert len(snake) == 2

    def test_kill_records_reason(self):
        """kill() marks the snake dead with reason and round."""
        snake = Snake([(5, 5)])
        snake.kill("wall", 10)
        assert snake.alive is False
        assert snake.death_reason == "wall"
        assert snake.death_round == 10


class TestGameState:
    """Tests for the GameState class."""

    def test_gamestate_initialization(self):
        """GameState keeps all the attributes it is given."""
        state = make_state()
        assert state.round_number == 5
        assert state.snake_positions == [(3, 3), (2, 3)]
        assert state.head == (3, 3)
        assert state.target == (5, 5)
        assert state.score == 2
        assert state.end_reason is None

    def test_print_board_markers(self):
        """print_board() places head, body and target markers."""
        board = make_state().print_board()
        lines = board.split("\n")
        # Row 3 is the fourth line since y=0 is printed first
        assert lines[3].split()[1:] == [".", ".", "o", "H", ".", ".", ".", ".", ".", "."]
        assert lines[5].split()[1:][5] == "P"
        assert len(lines) == 11

    def test_print_board_without_target(self):
        """A finished game has no target marker."""
        board = make_state(target=None).print_board()
        assert "P" not in board

    def test_to_dict_is_json_friendly(self):
        """Tuples are converted to lists."""
        data = make_state().to_dict()
        assert data["snake_positions"] == [[3, 3], [2, 3]]
        assert data["target"] == [5, 5]
        assert data["phase"] == ACTIVE

    def test_gamestate_repr(self):
        """GameState has a useful string representation."""
        repr_str = repr(make_state())
        assert "round=5" in repr_str
        assert "score=2/10" in repr_str
