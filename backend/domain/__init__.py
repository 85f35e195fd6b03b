"""
Domain entities for the Snake Ventures game engine.

This module contains the core game entities that are independent of
any driver concerns (timing, input devices, rendering).
"""

from .constants import (
    UP, DOWN, LEFT, RIGHT, VALID_MOVES,
    IDLE, ACTIVE, WON, LOST, STALLED,
    WALL, SELF, WIN, BOARD_FULL,
    GRID_SIZE, MAX_TARGETS, TICK_INTERVAL_MS,
)
from .errors import SnakeVenturesError, InvalidConfiguration, ExhaustedGrid
from .config import GameConfig
from .snake import Snake
from .spawner import TargetSpawner
from .game_state import GameState
from .engine import GameEngine, TickResult

__all__ = [
    'UP', 'DOWN', 'LEFT', 'RIGHT', 'VALID_MOVES',
    'IDLE', 'ACTIVE', 'WON', 'LOST', 'STALLED',
    'WALL', 'SELF', 'WIN', 'BOARD_FULL',
    'GRID_SIZE', 'MAX_TARGETS', 'TICK_INTERVAL_MS',
    'SnakeVenturesError', 'InvalidConfiguration', 'ExhaustedGrid',
    'GameConfig',
    'Snake',
    'TargetSpawner',
    'GameState',
    'GameEngine', 'TickResult',
]
