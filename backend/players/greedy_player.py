"""
Greedy player implementation - heads for the food along safe moves.
"""

from domain.constants import Direction
from domain.game_state import GameState
from .random_player import RandomPlayer


class GreedyPlayer(RandomPlayer):
    """
    Picks the safe direction that brings the head closest to the food
    (Manhattan distance). Ties are broken randomly.
    """

    name = "greedy"

    def get_direction(self, game_state: GameState) -> Direction:
        valid_moves = self.safe_directions(game_state)
        if not valid_moves:
            return game_state.direction
        if game_state.food is None:
            return self.rng.choice(valid_moves)

        head_x, head_y = game_state.head
        food_x, food_y = game_state.food

        def distance(direction: Direction) -> int:
            dx, dy = direction.vector
            return abs(head_x + dx - food_x) + abs(head_y + dy - food_y)

        best = min(distance(d) for d in valid_moves)
        return self.rng.choice([d for d in valid_moves if distance(d) == best])
