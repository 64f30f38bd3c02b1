"""
Player and input implementations for the snake game.

Autopilot players pick a move from a GameState snapshot; the controls turn
keyboard, button and touch events into engine calls.
"""

from .base import Player, safe_moves
from .random_player import RandomPlayer
from .greedy_player import GreedyPlayer
from .controls import (
    KeyboardControls,
    ButtonControls,
    SwipeControls,
    classify_swipe,
)
from .registry import get_player_class, list_players, AVAILABLE_PLAYERS

__all__ = [
    'Player',
    'safe_moves',
    'RandomPlayer',
    'GreedyPlayer',
    'KeyboardControls',
    'ButtonControls',
    'SwipeControls',
    'classify_swipe',
    'get_player_class',
    'list_players',
    'AVAILABLE_PLAYERS',
]
