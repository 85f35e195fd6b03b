"""
Exceptions raised by the Snake Ventures domain layer.

Game outcomes (wall hits, self hits, wins, rejected input) are never
exceptions; they are reported through the engine phase and TickResult.
"""


class SnakeVenturesError(Exception):
    """Base class for all domain errors."""


class InvalidConfiguration(SnakeVenturesError, ValueError):
    """Raised when a GameConfig cannot produce a playable game."""


class ExhaustedGrid(SnakeVenturesError, RuntimeError):
    """Raised by the target spawner when every cell of the grid is occupied."""
