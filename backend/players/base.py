"""
Base player interface for the game engine.
"""

from typing import List

from domain.constants import UP, DOWN, LEFT, RIGHT, DIRECTION_VECTORS, OPPOSITE_DIRECTIONS
from domain.game_state import GameState


class Player:
    """
    Base class/interface for player logic.

    A player looks at the current game state and returns the direction
    it wants the snake to take on the next tick.
    """

    name = "base"

    def get_move(self, game_state: GameState) -> str:
        """
        Return a move direction given the current game state.

        Args:
            game_state: Current state of the game

        Returns:
            One of: "UP", "DOWN", "LEFT", "RIGHT"
        """
        raise NotImplementedError


def safe_moves(game_state: GameState) -> List[str]:
    """
    Return the directions that neither hit a wall, hit the body (tail
    included, since the engine checks before the tail moves) nor reverse
    the current direction.
    """
    snake_positions = game_state.snake_positions
    occupied = set(snake_positions)
    head_x, head_y = snake_positions[0]

    valid_moves: List[str] = []
    for move in (UP, DOWN, LEFT, RIGHT):
        if move == OPPOSITE_DIRECTIONS[game_state.direction]:
            continue
        dx, dy = DIRECTION_VECTORS[move]
        new_x, new_y = head_x + dx, head_y + dy

        # Check wall collisions
        if (new_x < 0 or new_x >= game_state.width or
                new_y < 0 or new_y >= game_state.height):
            continue

        # Check self collisions
        if (new_x, new_y) in occupied:
            continue

        valid_moves.append(move)
    return valid_moves
