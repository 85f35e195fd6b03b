"""
GameState entity - a snapshot of the game at a point in time.
"""

from typing import Any, Dict, List, Optional, Tuple


class GameState:
    """
    A snapshot of the game at a specific point in time.

    Attributes:
        round_number: how many ticks have advanced the game (0-based)
        phase: lifecycle phase (IDLE, ACTIVE, WON, LOST, STALLED)
        snake_positions: list of (x, y), head first
        direction: current facing direction
        target: (x, y) of the target, or None once the game is over
        score: targets consumed so far
        max_targets: targets needed to win
        width, height: board dimensions
        end_reason: 'wall', 'self', 'win' or 'board_full' once the game ended
    """

    def __init__(
        self,
        round_number: int,
        phase: str,
        snake_positions: List[Tuple[int, int]],
        direction: str,
        target: Optional[Tuple[int, int]],
        score: int,
        max_targets: int,
        width: int,
        height: int,
        end_reason: Optional[str] = None
    ):
        self.round_number = round_number
        self.phase = phase
        self.snake_positions = snake_positions
        self.direction = direction
        self.target = target
        self.score = score
        self.max_targets = max_targets
        self.width = width
        self.height = height
        self.end_reason = end_reason

    @property
    def head(self) -> Tuple[int, int]:
        return self.snake_positions[0]

    def print_board(self) -> str:
        """
        Returns a string representation of the board with:
        . = empty space
        P = target (peach)
        H = snake head
        o = snake body
        (0,0) is the top left cell, matching the direction vectors.
        """
        board = [['.' for _ in range(self.width)] for _ in range(self.height)]

        if self.target is not None:
            tx, ty = self.target
            board[ty][tx] = 'P'

        for pos_idx, (x, y) in enumerate(self.snake_positions):
            board[y][x] = 'H' if pos_idx == 0 else 'o'

        result = [f"{y:2d} {' '.join(board[y])}" for y in range(self.height)]
        # x-axis labels, last digit only so columns stay aligned
        result.append("   " + " ".join(str(i % 10) for i in range(self.width)))

        return "\n".join(result)

    def to_dict(self) -> Dict[str, Any]:
        """JSON-friendly representation (tuples become lists)."""
        return {
            "round_number": self.round_number,
            "phase": self.phase,
            "snake_positions": [list(cell) for cell in self.snake_positions],
            "direction": self.direction,
            "target": list(self.target) if self.target is not None else None,
            "score": self.score,
            "max_targets": self.max_targets,
            "width": self.width,
            "height": self.height,
            "end_reason": self.end_reason,
        }

    def __repr__(self):
        return (
            f"<GameState round={self.round_number}, phase={self.phase}, "
            f"target={self.target}, length={len(self.snake_positions)}, "
            f"score={self.score}/{self.max_targets}>"
        )
