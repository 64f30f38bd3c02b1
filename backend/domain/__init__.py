"""
Domain entities for the snake game engine.

This module contains the core game entities that are independent of
infrastructure concerns (scheduling, rendering, HTTP, etc.).
"""

from .constants import (
    UP, DOWN, LEFT, RIGHT, VALID_MOVES, OPPOSITE_DIRECTIONS, DIRECTION_DELTAS,
    GRID_SIZE, INITIAL_SNAKE_LENGTH, INITIAL_GAME_SPEED, SPEED_INCREASE_PER_LEVEL,
    MIN_GAME_SPEED, FRUITS_PER_LEVEL, FLOWER_KINDS, MIN_SWIPE, normalize_direction,
)
from .snake import Snake
from .game_state import GameState

__all__ = [
    'UP', 'DOWN', 'LEFT', 'RIGHT', 'VALID_MOVES', 'OPPOSITE_DIRECTIONS', 'DIRECTION_DELTAS',
    'GRID_SIZE', 'INITIAL_SNAKE_LENGTH', 'INITIAL_GAME_SPEED', 'SPEED_INCREASE_PER_LEVEL',
    'MIN_GAME_SPEED', 'FRUITS_PER_LEVEL', 'FLOWER_KINDS', 'MIN_SWIPE', 'normalize_direction',
    'Snake',
    'GameState',
]
