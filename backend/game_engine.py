"""
Single-player snake engine.

GameEngine owns every piece of mutable game state. Presenters and players only
ever see GameState snapshots. Ticking is delegated to a scheduler object with
two methods:

    start(period_ms, callback)  # cancel any pending tick, then tick every period_ms
    stop()                      # cancel any pending tick

The engine tells its scheduler when to start (init), when to change period
(level-up) and when to stop (game over); it never sleeps or draws itself.
"""

import logging
import random
from typing import Optional

from domain.constants import (
    RIGHT,
    OPPOSITE_DIRECTIONS,
    GRID_SIZE,
    INITIAL_SNAKE_LENGTH,
    INITIAL_GAME_SPEED,
    SPEED_INCREASE_PER_LEVEL,
    MIN_GAME_SPEED,
    FRUITS_PER_LEVEL,
    FLOWER_KINDS,
    normalize_direction,
)
from domain.game_state import GameState, Position
from domain.snake import Snake

logger = logging.getLogger(__name__)


def speed_for_level(level: int) -> int:
    """Tick period in ms for a level, floored at MIN_GAME_SPEED."""
    return max(MIN_GAME_SPEED, INITIAL_GAME_SPEED - (level - 1) * SPEED_INCREASE_PER_LEVEL)


class NullScheduler:
    """
    Scheduler that never fires on its own.

    Used when something else owns the clock (the browser calling the step
    endpoint, a test, a headless simulation loop). Remembers the last request
    so callers can still read the period the engine wants.
    """

    def __init__(self):
        self.period_ms: Optional[int] = None
        self.is_running = False
        self.start_calls = 0
        self.stop_calls = 0

    def start(self, period_ms: int, callback=None) -> None:
        self.period_ms = period_ms
        self.is_running = True
        self.start_calls += 1

    def stop(self) -> None:
        self.is_running = False
        self.stop_calls += 1


class GameEngine:
    """
    Manages:
      - Snake
      - Food (plus its cosmetic flower)
      - Score, level and speed progression
      - Running / Over state
    """

    def __init__(self, scheduler=None, rng: Optional[random.Random] = None, grid_size: int = GRID_SIZE):
        if grid_size < INITIAL_SNAKE_LENGTH:
            raise ValueError(f"grid_size must be at least {INITIAL_SNAKE_LENGTH}, got {grid_size}")
        self.scheduler = scheduler if scheduler is not None else NullScheduler()
        self.rng = rng if rng is not None else random.Random()
        self.grid_size = grid_size
        self.init()

    def init(self) -> GameState:
        """
        Reset to a fresh game: snake along row 0 heading right, level 1,
        new food, and a (re)started scheduler.
        """
        self.snake = Snake((x, 0) for x in range(INITIAL_SNAKE_LENGTH - 1, -1, -1))
        self.current_direction = RIGHT
        self.pending_direction = RIGHT
        self.score = 0
        self.level = 1
        self.fruits_in_level = 0
        self.speed_ms = INITIAL_GAME_SPEED
        self.is_over = False
        self.death_reason: Optional[str] = None
        self.round_number = 0
        self.food: Optional[Position] = None
        self.flower: Optional[str] = None

        self._place_food()
        self.scheduler.start(self.speed_ms, self.step)
        logger.info("New game started (speed=%sms, food=%s)", self.speed_ms, self.food)
        return self.get_current_state()

    def set_direction(self, direction: str) -> bool:
        """
        Request a direction for the next tick.

        A request that exactly reverses the current direction is ignored.
        While the game is over any request restarts the game instead.

        Returns True when the request changed anything.
        """
        direction = normalize_direction(direction)

        if self.is_over:
            self.init()
            return True

        if direction == OPPOSITE_DIRECTIONS[self.current_direction]:
            return False

        changed = direction != self.pending_direction
        self.pending_direction = direction
        return changed

    def restart(self) -> bool:
        """Start over, but only from the Over state (space key, tap)."""
        if not self.is_over:
            return False
        self.init()
        return True

    def step(self) -> GameState:
        """
        Advance the snake one cell.

        Order matters:
          1) Apply the pending direction
          2) Compute the new head
          3) Wall / body collision against the pre-move snake (tail included)
          4) Prepend the head
          5) Grow on food (maybe level up, then place new food) or drop the tail
        """
        if self.is_over:
            return self.get_current_state()

        self.current_direction = self.pending_direction
        new_head = self.snake.next_head(self.current_direction)
        x, y = new_head

        if x < 0 or x >= self.grid_size or y < 0 or y >= self.grid_size:
            self._end_game("wall")
            return self.get_current_state()

        if new_head in self.snake:
            self._end_game("self")
            return self.get_current_state()

        self.snake.push_head(new_head)
        self.round_number += 1

        if new_head == self.food:
            self.score += 1
            self.fruits_in_level += 1

            if self.fruits_in_level >= FRUITS_PER_LEVEL:
                self._level_up()

            self._place_food()
        else:
            self.snake.drop_tail()

        return self.get_current_state()

    def get_current_state(self) -> GameState:
        """
        Return a snapshot of the current board as a GameState.
        """
        return GameState(
            snake=tuple(self.snake.positions),
            food=self.food,
            flower=self.flower,
            score=self.score,
            level=self.level,
            fruits_in_level=self.fruits_in_level,
            speed_ms=self.speed_ms,
            current_direction=self.current_direction,
            pending_direction=self.pending_direction,
            is_over=self.is_over,
            death_reason=self.death_reason,
            round_number=self.round_number,
            grid_size=self.grid_size,
        )

    def _level_up(self) -> None:
        self.level += 1
        self.fruits_in_level = 0
        self.speed_ms = speed_for_level(self.level)
        self.scheduler.start(self.speed_ms, self.step)
        logger.info("Level up: level=%s speed=%sms", self.level, self.speed_ms)

    def _place_food(self) -> None:
        """
        Put food on a random cell not occupied by the snake.
        Rejection sampling; the board being full leaves no food at all.
        """
        if len(self.snake) >= self.grid_size * self.grid_size:
            self.food = None
            self.flower = None
            logger.debug("Board full, no food placed")
            return

        while True:
            cell = (self.rng.randrange(self.grid_size), self.rng.randrange(self.grid_size))
            if cell not in self.snake:
                break

        self.food = cell
        self.flower = self.rng.choice(FLOWER_KINDS)
        logger.debug("Placed %s at %s", self.flower, cell)

    def _end_game(self, reason: str) -> None:
        self.is_over = True
        self.death_reason = reason
        self.scheduler.stop()
        logger.info(
            "Game over (%s): score=%s level=%s rounds=%s",
            reason, self.score, self.level, self.round_number,
        )
