"""
Player implementations for Snake Ventures.

Players are optional drivers for the engine: the CLI asks one for a
direction before every tick.
"""

from .base import Player, safe_moves
from .random_player import RandomPlayer
from .greedy_player import GreedyPlayer
from .variant_registry import get_player_class, list_players, AVAILABLE_PLAYERS

__all__ = [
    'Player',
    'safe_moves',
    'RandomPlayer',
    'GreedyPlayer',
    'get_player_class',
    'list_players',
    'AVAILABLE_PLAYERS',
]
