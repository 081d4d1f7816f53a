"""
Game constants for the single-player snake core.
"""

from enum import Enum
from typing import NamedTuple, Tuple


class Position(NamedTuple):
    """A grid cell. (0, 0) is the top left corner, y grows downward."""
    x: int
    y: int


class Direction(Enum):
    UP = "UP"
    DOWN = "DOWN"
    LEFT = "LEFT"
    RIGHT = "RIGHT"

    @property
    def vector(self) -> Tuple[int, int]:
        """Unit displacement applied to the head for one tick."""
        return _VECTORS[self]

    @property
    def opposite(self) -> "Direction":
        return _OPPOSITES[self]


_VECTORS = {
    Direction.UP: (0, -1),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
}

_OPPOSITES = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}

# Movement directions (module-level aliases for hosts)
UP = Direction.UP
DOWN = Direction.DOWN
LEFT = Direction.LEFT
RIGHT = Direction.RIGHT
VALID_MOVES = frozenset(Direction)

# Game settings
GRID_SIZE = 15
TICK_INTERVAL_MS = 200  # default cadence, the host owns the timer
SCORE_PER_FOOD = 10

# Head first
INITIAL_SNAKE: Tuple[Position, ...] = (
    Position(3, 3),
    Position(2, 3),
    Position(1, 3),
)
INITIAL_DIRECTION = Direction.RIGHT

# Reasons recorded when a game ends
END_WALL = "wall"
END_SELF = "self"
END_BOARD_FULL = "board_full"
