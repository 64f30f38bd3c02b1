"""
Random player implementation - picks random safe moves.
"""

import random
from typing import Optional

from domain.game_state import GameState
from .base import Player, safe_moves


class RandomPlayer(Player):
    """
    A random AI that picks a direction avoiding walls and self-collisions.
    """

    name = "random"

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng if rng is not None else random.Random()

    def get_move(self, game_state: GameState) -> str:
        moves = safe_moves(game_state)

        # If no safe moves, keep going (we'll die anyway)
        if not moves:
            return game_state.current_direction

        # sorted() keeps seeded runs reproducible
        return self.rng.choice(sorted(moves))
