"""
Greedy player - heads straight for the food whenever it safely can.
"""

from domain.game_state import GameState
from domain.constants import DIRECTION_DELTAS
from .base import safe_moves
from .random_player import RandomPlayer


class GreedyPlayer(RandomPlayer):
    """
    Picks the safe move that minimises Manhattan distance to the food.
    Falls back to a random safe move when there is no food on the board.
    """

    name = "greedy"

    def get_move(self, game_state: GameState) -> str:
        moves = safe_moves(game_state)
        if not moves:
            return game_state.current_direction
        if game_state.food is None:
            return super().get_move(game_state)

        head_x, head_y = game_state.head
        food_x, food_y = game_state.food

        def distance(move: str) -> int:
            dx, dy = DIRECTION_DELTAS[move]
            return abs(head_x + dx - food_x) + abs(head_y + dy - food_y)

        # Ties prefer the current heading so the snake does not zig-zag
        return min(moves, key=lambda m: (distance(m), m != game_state.current_direction, m))
