"""
GameEngine - the authoritative state of a single Snake Ventures game.

The engine has no timers or threads. A driver (the CLI loop in main.py, a UI,
or a test) calls tick() at a fixed cadence and set_direction() whenever input
arrives. Every outcome, including collisions and running out of board, is
reported through the phase and the returned TickResult; tick() and
set_direction() never raise.
"""

import logging
import random
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

from .config import GameConfig
from .constants import (
    IDLE, ACTIVE, WON, LOST, STALLED, TERMINAL_PHASES,
    WALL, SELF, WIN, BOARD_FULL,
    VALID_MOVES, DIRECTION_VECTORS, OPPOSITE_DIRECTIONS,
)
from .errors import ExhaustedGrid, InvalidConfiguration
from .game_state import GameState
from .snake import Snake
from .spawner import TargetSpawner

logger = logging.getLogger(__name__)


@dataclass
class TickResult:
    """Outcome of a single tick() call."""

    phase: str
    score: int
    consumed: bool = False
    ended: bool = False
    end_reason: Optional[str] = None
    head: Optional[Tuple[int, int]] = None
    advanced: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            "phase": self.phase,
            "score": self.score,
            "consumed": self.consumed,
            "ended": self.ended,
            "end_reason": self.end_reason,
            "head": list(self.head) if self.head is not None else None,
            "advanced": self.advanced,
        }


class GameEngine:
    """
    Manages:
      - Board (grid_size x grid_size)
      - Snake body and direction (current + pending)
      - Target placement
      - Score and lifecycle phase
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        spawner: Optional[TargetSpawner] = None,
        rng: Optional[random.Random] = None,
    ):
        # GameConfig validates itself; a bad config never reaches this point
        self.config = config or GameConfig()
        if spawner is not None:
            if rng is not None:
                raise InvalidConfiguration("Pass rng to the TargetSpawner, not alongside it")
            if spawner.grid_size != self.config.grid_size:
                raise InvalidConfiguration(
                    f"Spawner grid_size {spawner.grid_size} does not match "
                    f"config grid_size {self.config.grid_size}"
                )
        self.spawner = spawner or TargetSpawner(self.config.grid_size, rng)

        self.snake: Snake = Snake(self.config.initial_body)
        self.direction: str = self.config.initial_direction
        self.pending_direction: Optional[str] = None
        self.target: Optional[Tuple[int, int]] = None
        self.score = 0
        self.phase = IDLE
        self.end_reason: Optional[str] = None
        self.tick_number = 0

        self.reset()

    # ------------------------------------------------------------------
    # Observable state
    # ------------------------------------------------------------------

    @property
    def body(self) -> List[Tuple[int, int]]:
        return self.snake.as_list()

    @property
    def head(self) -> Tuple[int, int]:
        return self.snake.head

    @property
    def is_over(self) -> bool:
        return self.phase in TERMINAL_PHASES

    def get_current_state(self) -> GameState:
        """
        Return a snapshot of the current board as a GameState.
        """
        return GameState(
            round_number=self.tick_number,
            phase=self.phase,
            snake_positions=self.snake.as_list(),
            direction=self.direction,
            target=self.target,
            score=self.score,
            max_targets=self.config.max_targets,
            width=self.config.grid_size,
            height=self.config.grid_size,
            end_reason=self.end_reason,
        )

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def reset(self) -> None:
        """
        Put every piece of state back to its starting value. Phase becomes IDLE
        and the target shows the configured pre-start position.
        """
        self.snake = Snake(self.config.initial_body)
        self.direction = self.config.initial_direction
        self.pending_direction = None
        self.score = 0
        self.end_reason = None
        self.tick_number = 0

        # The configured target may sit on a custom starting body
        target = self.config.initial_target
        if target in self.snake:
            target = self.spawner.spawn(self.snake.occupied)
            logger.debug(f"Initial target was on the body, respawned at {target}")
        self.target = target

        self.phase = IDLE
        logger.debug(f"Engine reset: body={self.body}, target={self.target}")

    def start(self) -> None:
        """
        Begin a fresh run. Ignored while a run is already ACTIVE; from any other
        phase the engine is reset first so every run starts clean, with a
        freshly spawned target in place of the IDLE default.
        """
        if self.phase == ACTIVE:
            return
        self.reset()
        self.target = self.spawner.spawn(self.snake.occupied)
        self.phase = ACTIVE
        logger.info(f"Game started: head={self.head}, direction={self.direction}, target={self.target}")

    # ------------------------------------------------------------------
    # Input
    # ------------------------------------------------------------------

    def set_direction(self, direction: str) -> bool:
        """
        Queue a direction for the next tick.

        Reversals of the current direction, unknown values and input outside
        an ACTIVE run are ignored. The last accepted call before a tick wins.

        Returns:
            True if the direction was accepted.
        """
        if self.phase != ACTIVE:
            return False
        if not isinstance(direction, str) or direction not in VALID_MOVES:
            logger.debug(f"Ignoring unknown direction {direction!r}")
            return False
        if direction == OPPOSITE_DIRECTIONS[self.direction]:
            logger.debug(f"Ignoring reversal {direction} while moving {self.direction}")
            return False
        self.pending_direction = direction
        return True

    # ------------------------------------------------------------------
    # Simulation
    # ------------------------------------------------------------------

    def tick(self) -> TickResult:
        """
        Advance the game by one step:
          1) Commit the pending direction
          2) Compute the new head
          3) Wall collision -> LOST
          4) Self collision (tail included) -> LOST
          5) Move the head
          6) Eat the target (grow, score, maybe WON, else respawn)
          7) Otherwise drop the tail
        """
        if self.phase != ACTIVE:
            return TickResult(phase=self.phase, score=self.score, end_reason=self.end_reason)

        if self.pending_direction is not None:
            self.direction = self.pending_direction
            self.pending_direction = None

        hx, hy = self.snake.head
        dx, dy = DIRECTION_VECTORS[self.direction]
        new_head = (hx + dx, hy + dy)

        if not self.config.in_bounds(new_head):
            return self._finish(LOST, WALL, new_head)

        # The tail has not moved yet, so running into it counts
        if new_head in self.snake:
            return self._finish(LOST, SELF, new_head)

        self.snake.grow(new_head)
        self.tick_number += 1

        if new_head != self.target:
            self.snake.drop_tail()
            return TickResult(phase=self.phase, score=self.score, head=new_head, advanced=True)

        self.score += 1
        logger.debug(f"Target consumed at {new_head}, score {self.score}/{self.config.max_targets}")

        if self.score >= self.config.max_targets:
            self.target = None
            return self._finish(WON, WIN, new_head, consumed=True, advanced=True)

        try:
            self.target = self.spawner.spawn(self.snake.occupied)
        except ExhaustedGrid as e:
            logger.warning(f"Cannot place another target: {e}")
            self.target = None
            return self._finish(STALLED, BOARD_FULL, new_head, consumed=True, advanced=True)

        return TickResult(
            phase=self.phase,
            score=self.score,
            consumed=True,
            head=new_head,
            advanced=True,
        )

    def _finish(
        self,
        phase: str,
        reason: str,
        head: Tuple[int, int],
        consumed: bool = False,
        advanced: bool = False,
    ) -> TickResult:
        self.phase = phase
        self.end_reason = reason
        if phase == LOST:
            self.snake.kill(reason, self.tick_number)
        logger.info(f"Game over ({phase}, {reason}) at tick {self.tick_number} with score {self.score}")
        return TickResult(
            phase=phase,
            score=self.score,
            consumed=consumed,
            ended=True,
            end_reason=reason,
            head=head,
            advanced=advanced,
        )

    def __repr__(self):
        return (
            f"<GameEngine phase={self.phase}, tick={self.tick_number}, "
            f"score={self.score}/{self.config.max_targets}>"
        )
