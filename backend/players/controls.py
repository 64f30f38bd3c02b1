"""
Input adapters that turn keyboard, on-screen button and touch events into
engine calls.

None of them hold game state; they only decide which engine method to call.
"""

import logging
from typing import Optional, Tuple

from domain.constants import UP, DOWN, LEFT, RIGHT, MIN_SWIPE

logger = logging.getLogger(__name__)

ARROW_KEYS = {
    "ArrowUp": UP,
    "ArrowDown": DOWN,
    "ArrowLeft": LEFT,
    "ArrowRight": RIGHT,
}
RESTART_KEY = " "

DIRECTION_BUTTONS = {
    "up-btn": UP,
    "down-btn": DOWN,
    "left-btn": LEFT,
    "right-btn": RIGHT,
}


def classify_swipe(delta_x: float, delta_y: float, min_swipe: float = MIN_SWIPE) -> Optional[str]:
    """
    Turn a swipe displacement into a direction.

    Returns None when both components are below `min_swipe`. The larger axis
    wins; equal magnitudes count as vertical. Screen coordinates, so a
    positive delta_y is a swipe down.
    """
    if abs(delta_x) < min_swipe and abs(delta_y) < min_swipe:
        return None

    if abs(delta_x) > abs(delta_y):
        return RIGHT if delta_x > 0 else LEFT
    return DOWN if delta_y > 0 else UP


class KeyboardControls:
    """Arrow keys steer, space restarts a finished game."""

    def __init__(self, engine):
        self.engine = engine

    def handle_key(self, key: str) -> bool:
        if key in ARROW_KEYS:
            return self.engine.set_direction(ARROW_KEYS[key])
        if key == RESTART_KEY:
            return self.engine.restart()
        return False


class ButtonControls:
    """On-screen direction buttons. Pressing any of them restarts a finished game."""

    def __init__(self, engine):
        self.engine = engine

    def press(self, button_id: str) -> bool:
        if button_id not in DIRECTION_BUTTONS:
            raise ValueError(
                f"Unknown button '{button_id}'. Expected one of: {', '.join(DIRECTION_BUTTONS)}"
            )
        return self.engine.set_direction(DIRECTION_BUTTONS[button_id])


class SwipeControls:
    """
    Touch gestures on the board.

    A swipe shorter than `min_swipe` on both axes is a tap: it restarts a
    finished game and is otherwise ignored.
    """

    def __init__(self, engine, min_swipe: float = MIN_SWIPE):
        self.engine = engine
        self.min_swipe = min_swipe
        self._start: Optional[Tuple[float, float]] = None

    def touch_start(self, x: float, y: float) -> None:
        self._start = (x, y)

    def touch_end(self, x: float, y: float) -> bool:
        if self._start is None:
            return False
        start_x, start_y = self._start
        self._start = None
        return self.swipe(x - start_x, y - start_y)

    def swipe(self, delta_x: float, delta_y: float) -> bool:
        direction = classify_swipe(delta_x, delta_y, self.min_swipe)
        if direction is None:
            return self.engine.restart()
        logger.debug("Swipe (%s, %s) -> %s", delta_x, delta_y, direction)
        return self.engine.set_direction(direction)
