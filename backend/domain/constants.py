"""
Game constants for the snake arena.
"""

# Movement directions
UP = "UP"
DOWN = "DOWN"
LEFT = "LEFT"
RIGHT = "RIGHT"
VALID_MOVES = {UP, DOWN, LEFT, RIGHT}

OPPOSITE_DIRECTIONS = {
    UP: DOWN,
    DOWN: UP,
    LEFT: RIGHT,
    RIGHT: LEFT,
}

# Screen coordinates: (0, 0) is the top-left cell, y grows downward
DIRECTION_DELTAS = {
    UP: (0, -1),
    DOWN: (0, 1),
    LEFT: (-1, 0),
    RIGHT: (1, 0),
}

# Board settings
GRID_SIZE = 20
INITIAL_SNAKE_LENGTH = 4

# Timing (milliseconds per tick)
INITIAL_GAME_SPEED = 200
SPEED_INCREASE_PER_LEVEL = 20
MIN_GAME_SPEED = 50
FRUITS_PER_LEVEL = 10

# Cosmetic food variants, no effect on play
FLOWER_KINDS = (
    "cherry_blossom",
    "rose",
    "hibiscus",
    "sunflower",
    "blossom",
    "bouquet",
    "tulip",
)

# Touch input
MIN_SWIPE = 30


def normalize_direction(direction: str) -> str:
    """
    Map a user-supplied direction name onto one of the direction constants.

    Accepts any casing ("up", "Up", "UP"). Raises ValueError for anything else.
    """
    if not isinstance(direction, str):
        raise ValueError(f"Invalid direction: {direction!r}")
    candidate = direction.strip().upper()
    if candidate not in VALID_MOVES:
        raise ValueError(
            f"Invalid direction '{direction}'. Expected one of: {', '.join(sorted(VALID_MOVES))}"
        )
    return candidate
