"""
Domain entities for the snake game core.

This module contains the game rules and state, independent of rendering,
input capture, timers and storage.
"""

from .constants import (
    UP, DOWN, LEFT, RIGHT, VALID_MOVES,
    GRID_SIZE, TICK_INTERVAL_MS, SCORE_PER_FOOD, INITIAL_SNAKE, INITIAL_DIRECTION,
    END_WALL, END_SELF, END_BOARD_FULL,
    Direction, Position,
)
from .grid import GridModel
from .snake import Snake
from .game_state import GameState
from .engine import GameEngine

__all__ = [
    'UP', 'DOWN', 'LEFT', 'RIGHT', 'VALID_MOVES',
    'GRID_SIZE', 'TICK_INTERVAL_MS', 'SCORE_PER_FOOD', 'INITIAL_SNAKE', 'INITIAL_DIRECTION',
    'END_WALL', 'END_SELF', 'END_BOARD_FULL',
    'Direction', 'Position',
    'GridModel',
    'Snake',
    'GameState',
    'GameEngine',
]
