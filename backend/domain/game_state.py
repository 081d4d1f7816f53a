"""
GameState entity - a snapshot of the game at a point in time.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

from .constants import GRID_SIZE, Direction, Position


@dataclass(frozen=True)
class GameState:
    """
    A read-only snapshot of the game.

    Attributes:
        snake: cells of the snake, head first
        food: the food cell (None only after the snake has filled the board)
        direction: direction used by the most recent tick
        pending_direction: latest accepted input, applied on the next tick
        is_game_over: True once the game reached its terminal state
        score: points collected so far
        tick_count: ticks advanced since start
        end_reason: 'wall', 'self' or 'board_full' once the game is over
        width, height: board dimensions
    """

    snake: Tuple[Position, ...]
    food: Optional[Position]
    direction: Direction
    pending_direction: Direction
    is_game_over: bool
    score: int = 0
    tick_count: int = 0
    end_reason: Optional[str] = None
    width: int = GRID_SIZE
    height: int = GRID_SIZE

    @property
    def head(self) -> Position:
        return self.snake[0]

    @property
    def length(self) -> int:
        return len(self.snake)

    def print_board(self) -> str:
        """
        Returns a string representation of the board with:
        . = empty space
        F = food
        H = snake head
        S = snake body
        Rows are printed top to bottom with y labels on the left and x labels at the bottom.
        """
        board = [['.' for _ in range(self.width)] for _ in range(self.height)]

        if self.food is not None:
            fx, fy = self.food
            board[fy][fx] = 'F'

        for pos_idx, (x, y) in enumerate(self.snake):
            board[y][x] = 'H' if pos_idx == 0 else 'S'

        result = [f"{y:2d} {' '.join(board[y])}" for y in range(self.height)]
        result.append("   " + " ".join(str(x % 10) for x in range(self.width)))

        return "\n".join(result)

    def to_dict(self) -> dict:
        """JSON-friendly form for hosts that log or ship the state."""
        return {
            "snake": [list(cell) for cell in self.snake],
            "food": list(self.food) if self.food is not None else None,
            "direction": self.direction.value,
            "pending_direction": self.pending_direction.value,
            "is_game_over": self.is_game_over,
            "score": self.score,
            "tick_count": self.tick_count,
            "end_reason": self.end_reason,
            "width": self.width,
            "height": self.height,
        }

    def __repr__(self):
        food = tuple(self.food) if self.food is not None else None
        return (
            f"<GameState tick={self.tick_count}, head={tuple(self.head)}, "
            f"length={self.length}, food={food}, score={self.score}, "
            f"game_over={self.is_game_over}>"
        )
