"""
Random player implementation - picks random safe moves.
"""

import random
from typing import List, Optional

from domain.constants import Direction, Position
from domain.game_state import GameState
from .base import Player


class RandomPlayer(Player):
    """
    An autopilot that picks a random direction avoiding walls, its own body
    and reversals into its neck.
    """

    name = "random"

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()

    def safe_directions(self, game_state: GameState) -> List[Direction]:
        head_x, head_y = game_state.head
        body = game_state.snake[:-1]  # the tail moves away this tick

        valid_moves: List[Direction] = []
        for direction in Direction:
            if direction is game_state.direction.opposite:
                continue

            dx, dy = direction.vector
            new_x, new_y = head_x + dx, head_y + dy

            if (new_x < 0 or new_x >= game_state.width or
                    new_y < 0 or new_y >= game_state.height):
                continue

            if Position(new_x, new_y) in body:
                continue

            valid_moves.append(direction)

        return valid_moves

    def get_direction(self, game_state: GameState) -> Direction:
        valid_moves = self.safe_directions(game_state)

        # If no valid moves, keep going (we'll die anyway)
        if not valid_moves:
            return game_state.direction

        return self.rng.choice(valid_moves)
