"""
Snake entity for the game engine.
"""

from collections import deque
from typing import Iterable, Tuple

from .constants import Position


class Snake:
    """
    The player's snake.

    Attributes:
        positions: deque of Position from head at index 0 to tail at the end
    """

    def __init__(self, positions: Iterable[Tuple[int, int]]):
        self.positions = deque(Position(x, y) for x, y in positions)
        if not self.positions:
            raise ValueError("A snake needs at least one segment.")

    @property
    def head(self) -> Position:
        """Return the head position (first element)."""
        return self.positions[0]

    @property
    def tail(self) -> Position:
        return self.positions[-1]

    def __len__(self) -> int:
        return len(self.positions)

    def hits_body(self, cell: Position) -> bool:
        """
        True if `cell` is on any segment except the tail.

        The tail vacates its cell during the same tick unless food is eaten,
        so moving onto it is legal.
        """
        return any(segment == cell for segment in list(self.positions)[:-1])

    def advance(self, new_head: Position, grow: bool) -> None:
        self.positions.appendleft(new_head)
        if not grow:
            self.positions.pop()
