"""
GameConfig - construction-time settings for the game engine.
"""

import os
from dataclasses import dataclass
from typing import List, Optional, Tuple

from .constants import (
    GRID_SIZE,
    MAX_TARGETS,
    TICK_INTERVAL_MS,
    INITIAL_BODY,
    INITIAL_DIRECTION,
    INITIAL_TARGET,
    VALID_MOVES,
    DIRECTION_VECTORS,
)
from .errors import InvalidConfiguration

# Environment variables read by GameConfig.from_env()
ENV_GRID_SIZE = "SNAKE_GRID_SIZE"
ENV_MAX_TARGETS = "SNAKE_MAX_TARGETS"
ENV_TICK_MS = "SNAKE_TICK_MS"


def _int_from_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw.strip())
    except ValueError:
        raise InvalidConfiguration(f"{name} must be an integer, got {raw!r}")


@dataclass
class GameConfig:
    """
    Settings for a single GameEngine.

    Attributes:
        grid_size: width and height of the square board
        max_targets: number of targets to consume to win
        tick_interval_ms: cadence the driver should tick at
        initial_body: starting body, head first
        initial_direction: starting facing direction
        initial_target: pre-start target, respawned if it lands on the body

    initial_body and initial_target default to the stock (10, 10) and (15, 10)
    on a 20x20 grid and to the same proportions on other grid sizes.
    """

    grid_size: int = GRID_SIZE
    max_targets: int = MAX_TARGETS
    tick_interval_ms: int = TICK_INTERVAL_MS
    initial_body: Optional[List[Tuple[int, int]]] = None
    initial_direction: str = INITIAL_DIRECTION
    initial_target: Optional[Tuple[int, int]] = None

    def __post_init__(self):
        if self.grid_size == GRID_SIZE:
            default_body, default_target = list(INITIAL_BODY), INITIAL_TARGET
        else:
            # Same proportions as the stock 20x20 board
            center = self.grid_size // 2
            default_body = [(center, center)]
            default_target = (self.grid_size * 3 // 4, center)

        if self.initial_body is None:
            self.initial_body = default_body
        if self.initial_target is None:
            self.initial_target = default_target

        self.initial_body = [tuple(cell) for cell in self.initial_body]
        self.initial_target = tuple(self.initial_target)
        self.validate()

    def in_bounds(self, cell: Tuple[int, int]) -> bool:
        x, y = cell
        return 0 <= x < self.grid_size and 0 <= y < self.grid_size

    def validate(self) -> None:
        """
        Check that this configuration can produce a playable game.

        Raises:
            InvalidConfiguration: describing the first problem found
        """
        if self.grid_size <= 0:
            raise InvalidConfiguration(f"grid_size must be positive, got {self.grid_size}")
        if self.max_targets <= 0:
            raise InvalidConfiguration(f"max_targets must be positive, got {self.max_targets}")
        if self.tick_interval_ms <= 0:
            raise InvalidConfiguration(
                f"tick_interval_ms must be positive, got {self.tick_interval_ms}"
            )
        if self.initial_direction not in VALID_MOVES:
            raise InvalidConfiguration(f"Unknown initial direction {self.initial_direction!r}")

        if not self.initial_body:
            raise InvalidConfiguration("initial_body must contain at least one cell")
        for cell in self.initial_body:
            if not self.in_bounds(cell):
                raise InvalidConfiguration(f"initial_body cell out of bounds at {cell}")
        if len(set(self.initial_body)) != len(self.initial_body):
            raise InvalidConfiguration("initial_body cells must be distinct")
        # A target needs at least one free cell
        if len(self.initial_body) >= self.grid_size * self.grid_size:
            raise InvalidConfiguration("initial_body leaves no free cell for a target")
        if len(self.initial_body) > 1:
            dx, dy = DIRECTION_VECTORS[self.initial_direction]
            head_x, head_y = self.initial_body[0]
            # Facing the second segment would lose on the first tick
            if (head_x + dx, head_y + dy) == self.initial_body[1]:
                raise InvalidConfiguration(
                    f"initial_direction {self.initial_direction} points into the body at {self.initial_body[1]}"
                )

        if not self.in_bounds(self.initial_target):
            raise InvalidConfiguration(f"initial_target out of bounds at {self.initial_target}")

    @property
    def tick_interval_seconds(self) -> float:
        return self.tick_interval_ms / 1000.0

    @classmethod
    def from_env(cls, **overrides) -> "GameConfig":
        """
        Build a config from SNAKE_* environment variables.

        Entry points are expected to call load_dotenv() first so a local
        .env file is honoured. Keyword overrides win over the environment.
        """
        values = {
            "grid_size": _int_from_env(ENV_GRID_SIZE, GRID_SIZE),
            "max_targets": _int_from_env(ENV_MAX_TARGETS, MAX_TARGETS),
            "tick_interval_ms": _int_from_env(ENV_TICK_MS, TICK_INTERVAL_MS),
        }
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)
