"""
Base player interface for the game engine.
"""

from typing import List

from domain.constants import OPPOSITE_DIRECTIONS, DIRECTION_DELTAS
from domain.game_state import GameState


class Player:
    """
    Base class/interface for autopilot logic.

    Each player is responsible for returning a move given the current game
    state. The move is handed to GameEngine.set_direction before the next tick.
    """

    name = "player"

    def get_move(self, game_state: GameState) -> str:
        """
        Return a move direction given the current game state.

        Args:
            game_state: Current state of the game

        Returns:
            One of: "UP", "DOWN", "LEFT", "RIGHT"
        """
        raise NotImplementedError


def safe_moves(game_state: GameState) -> List[str]:
    """
    Directions that neither hit a wall, reverse the snake, nor run into the body.

    The tail cell counts as occupied: the engine checks collisions against the
    snake before it moves.
    """
    head_x, head_y = game_state.head
    body = set(game_state.snake)
    reverse = OPPOSITE_DIRECTIONS[game_state.current_direction]

    moves = []
    for move, (dx, dy) in DIRECTION_DELTAS.items():
        if move == reverse:
            continue
        new_x, new_y = head_x + dx, head_y + dy
        if not (0 <= new_x < game_state.grid_size and 0 <= new_y < game_state.grid_size):
            continue
        if (new_x, new_y) in body:
            continue
        moves.append(move)
    return moves
