"""
Snake entity for the game engine.
"""

from collections import deque
from typing import Iterable, Tuple

from .constants import DIRECTION_DELTAS

Position = Tuple[int, int]


class Snake:
    """
    Represents the snake on the board.

    Attributes:
        positions: deque of (x, y) from head at index 0 to tail at the end
    """

    def __init__(self, positions: Iterable[Position]):
        self.positions = deque(positions)

    @property
    def head(self) -> Position:
        """Return the head position (first element)."""
        return self.positions[0]

    def __len__(self) -> int:
        return len(self.positions)

    def __contains__(self, position: Position) -> bool:
        return position in self.positions

    def next_head(self, direction: str) -> Position:
        """Cell the head would move into when travelling in `direction`."""
        dx, dy = DIRECTION_DELTAS[direction]
        head_x, head_y = self.head
        return (head_x + dx, head_y + dy)

    def push_head(self, position: Position) -> None:
        self.positions.appendleft(position)

    def drop_tail(self) -> Position:
        return self.positions.pop()
