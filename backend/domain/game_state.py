"""
GameState entity - a read-only snapshot of the game at a point in time.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

Position = Tuple[int, int]


@dataclass(frozen=True)
class GameState:
    """
    A snapshot of the game handed to presenters and players.

    Attributes:
        snake: positions from head to tail
        food: food cell, or None if the board is full
        flower: cosmetic flower kind drawn at the food cell
        score: total food eaten since init
        level: current level (1-based)
        fruits_in_level: food eaten since the last level-up
        speed_ms: tick period the scheduler should use
        current_direction: direction applied on the last tick
        pending_direction: direction that will be applied on the next tick
        is_over: True once the snake has crashed
        death_reason: 'wall' or 'self' once over, else None
        round_number: ticks advanced since init
        grid_size: width and height of the square board
    """

    snake: Tuple[Position, ...]
    food: Optional[Position]
    flower: Optional[str]
    score: int
    level: int
    fruits_in_level: int
    speed_ms: int
    current_direction: str
    pending_direction: str
    is_over: bool
    death_reason: Optional[str]
    round_number: int
    grid_size: int

    @property
    def head(self) -> Position:
        return self.snake[0]

    def to_dict(self) -> Dict[str, Any]:
        """JSON-friendly representation (positions become [x, y] lists)."""
        return {
            "snake": [list(p) for p in self.snake],
            "food": list(self.food) if self.food is not None else None,
            "flower": self.flower,
            "score": self.score,
            "level": self.level,
            "fruits_in_level": self.fruits_in_level,
            "speed_ms": self.speed_ms,
            "current_direction": self.current_direction,
            "pending_direction": self.pending_direction,
            "is_over": self.is_over,
            "death_reason": self.death_reason,
            "round_number": self.round_number,
            "grid_size": self.grid_size,
        }

    def print_board(self) -> str:
        """
        Returns a string representation of the board with:
        . = empty space
        F = food
        H = snake head
        S = snake body
        Row 0 is printed first, matching the screen layout.
        """
        board = [['.' for _ in range(self.grid_size)] for _ in range(self.grid_size)]

        if self.food is not None:
            fx, fy = self.food
            board[fy][fx] = 'F'

        for idx, (x, y) in enumerate(self.snake):
            board[y][x] = 'H' if idx == 0 else 'S'

        result = [f"{y:2d} {' '.join(row)}" for y, row in enumerate(board)]
        result.append("   " + " ".join(str(i % 10) for i in range(self.grid_size)))
        return "\n".join(result)

    def __repr__(self):
        return (
            f"<GameState round={self.round_number}, score={self.score}, level={self.level}, "
            f"length={len(self.snake)}, over={self.is_over}>"
        )
