"""
Snake entity for the game engine.
"""

from collections import deque
from typing import Iterable, List, Optional, Set, Tuple


class Snake:
    """
    Represents the player's snake on the board.

    Attributes:
        positions: deque of (x, y) from head at index 0 to tail at the end
        occupied: set of the same cells, kept in step with positions
        alive: whether the snake is still alive
        death_reason: e.g., 'wall', 'self'
        death_round: the tick number when the snake died
    """

    def __init__(self, positions: Iterable[Tuple[int, int]]):
        self.positions = deque(positions)
        self.occupied: Set[Tuple[int, int]] = set(self.positions)
        self.alive = True
        self.death_reason: Optional[str] = None
        self.death_round: Optional[int] = None

    @property
    def head(self) -> Tuple[int, int]:
        """Return the head position (first element)."""
        return self.positions[0]

    def __len__(self) -> int:
        return len(self.positions)

    def __contains__(self, cell: Tuple[int, int]) -> bool:
        return cell in self.occupied

    def grow(self, new_head: Tuple[int, int]) -> None:
        """Prepend a new head without dropping the tail."""
        self.positions.appendleft(new_head)
        self.occupied.add(new_head)

    def drop_tail(self) -> Tuple[int, int]:
        tail = self.positions.pop()
        self.occupied.discard(tail)
        return tail

    def kill(self, reason: str, round_number: int) -> None:
        self.alive = False
        self.death_reason = reason
        self.death_round = round_number

    def as_list(self) -> List[Tuple[int, int]]:
        return list(self.positions)
