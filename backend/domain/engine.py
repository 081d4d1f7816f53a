"""
GameEngine - the single-player snake state machine.

The engine has two states: live and game over. `start()` makes it live,
`tick()` is the only place where it can become game over, and nothing but
another `start()` brings it back. Wall and self collisions are state
transitions, never exceptions.
"""

import logging
import threading
from typing import Optional

from .constants import (
    END_BOARD_FULL,
    END_SELF,
    END_WALL,
    INITIAL_DIRECTION,
    INITIAL_SNAKE,
    SCORE_PER_FOOD,
    Direction,
    Position,
)
from .game_state import GameState
from .grid import GridModel
from .snake import Snake

logger = logging.getLogger(__name__)


class GameEngine:
    """
    Owns the one live game and serializes every mutation of it.

    Hosts call `set_direction` on input events and `tick` on a fixed
    cadence, then read `snapshot()` to render or to check for a new high
    score. All four operations take the same lock, so input arriving on
    another thread cannot interleave with a tick in progress. The live state
    is kept in private attributes; read it through `snapshot()`.
    """

    def __init__(self, grid: Optional[GridModel] = None):
        self.grid = grid or GridModel()
        self._lock = threading.Lock()

        # Idle board shown before the first game: initial layout, not playable
        self._snake = Snake(INITIAL_SNAKE)
        self._food: Optional[Position] = self.grid.place_food(set(self._snake.positions))
        self._direction = INITIAL_DIRECTION
        self._pending_direction = INITIAL_DIRECTION
        self._score = 0
        self._tick_count = 0
        self._game_over = True
        self._end_reason: Optional[str] = None

    def start(self) -> GameState:
        """Reset to a fresh live game and return its snapshot."""
        with self._lock:
            self._snake = Snake(INITIAL_SNAKE)
            self._food = self.grid.place_food(set(self._snake.positions))
            self._direction = INITIAL_DIRECTION
            self._pending_direction = INITIAL_DIRECTION
            self._score = 0
            self._tick_count = 0
            self._game_over = False
            self._end_reason = None
            logger.info("Game started: snake=%s food=%s", list(self._snake.positions), self._food)
            return self._state()

    def set_direction(self, direction: Direction) -> GameState:
        """
        Buffer a direction for the next tick.

        A reversal of the applied direction is ignored and leaves any
        previously buffered direction in place.
        """
        if not isinstance(direction, Direction):
            raise TypeError(f"Expected a Direction, got {type(direction).__name__}")

        with self._lock:
            if self._game_over:
                return self._state()

            if direction is self._direction.opposite:
                logger.debug(
                    "Ignoring reversal %s while moving %s", direction.value, self._direction.value
                )
                return self._state()

            self._pending_direction = direction
            return self._state()

    def tick(self) -> GameState:
        """
        Advance the game by one cell:
          1) Adopt the buffered direction
          2) Compute the new head
          3) Wall hit ends the game, snake and score untouched
          4) Body hit (tail excluded) ends the game, snake and score untouched
          5) Move; on food grow, score and place new food, otherwise drop the tail
        """
        with self._lock:
            if self._game_over:
                return self._state()

            self._direction = self._pending_direction
            dx, dy = self._direction.vector
            hx, hy = self._snake.head
            new_head = Position(hx + dx, hy + dy)

            if not self.grid.is_in_bounds(new_head):
                self._end(END_WALL)
                return self._state()

            if self._snake.hits_body(new_head):
                self._end(END_SELF)
                return self._state()

            eats_food = new_head == self._food
            self._snake.advance(new_head, grow=eats_food)
            self._tick_count += 1

            if eats_food:
                self._score += SCORE_PER_FOOD
                self._food = self.grid.place_food(set(self._snake.positions))
                logger.debug("Food eaten at %s, score=%d, next food=%s", new_head, self._score, self._food)
                if self._food is None:
                    self._end(END_BOARD_FULL)

            return self._state()

    def snapshot(self) -> GameState:
        """Return the current state without changing it."""
        with self._lock:
            return self._state()

    @property
    def is_game_over(self) -> bool:
        return self._game_over

    def _end(self, reason: str) -> None:
        self._game_over = True
        self._end_reason = reason
        logger.info(
            "Game over (%s) after %d ticks. Score: %d, length: %d",
            reason, self._tick_count, self._score, len(self._snake),
        )

    def _state(self) -> GameState:
        return GameState(
            snake=tuple(self._snake.positions),
            food=self._food,
            direction=self._direction,
            pending_direction=self._pending_direction,
            is_game_over=self._game_over,
            score=self._score,
            tick_count=self._tick_count,
            end_reason=self._end_reason,
            width=self.grid.size,
            height=self.grid.size,
        )
