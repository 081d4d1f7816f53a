"""
Base player interface for driving the game engine.
"""

from domain.constants import Direction
from domain.game_state import GameState


class Player:
    """
    Base class/interface for input sources.

    A player looks at the current snapshot and returns the direction the
    host should pass to `GameEngine.set_direction` before the next tick.
    """

    name = "player"

    def get_direction(self, game_state: GameState) -> Direction:
        """
        Return a direction given the current game state.

        Args:
            game_state: Current state of the game

        Returns:
            One of the Direction members
        """
        raise NotImplementedError
