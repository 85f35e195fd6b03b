"""
Greedy player implementation - heads straight for the target.
"""

from domain.constants import DIRECTION_VECTORS
from domain.game_state import GameState
from .base import Player, safe_moves


class GreedyPlayer(Player):
    """
    Picks the safe move that brings the head closest (Manhattan distance)
    to the target. Ties keep the current direction when possible, then follow
    UP, DOWN, LEFT, RIGHT order. It only looks one step ahead.
    """

    name = "greedy"

    def get_move(self, game_state: GameState) -> str:
        valid_moves = safe_moves(game_state)
        if not valid_moves:
            return game_state.direction
        if game_state.target is None:
            return valid_moves[0]

        head_x, head_y = game_state.head
        target_x, target_y = game_state.target

        def distance(move: str) -> int:
            dx, dy = DIRECTION_VECTORS[move]
            return abs(head_x + dx - target_x) + abs(head_y + dy - target_y)

        best = min(distance(move) for move in valid_moves)
        if game_state.direction in valid_moves and distance(game_state.direction) == best:
            return game_state.direction
        return next(move for move in valid_moves if distance(move) == best)
