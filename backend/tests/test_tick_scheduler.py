"""
Tests for services/tick_scheduler.py.
"""

import os
import random
import sys
from datetime import datetime, timedelta

import pytest

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from domain.constants import FRUITS_PER_LEVEL, RIGHT  # noqa: E402
from domain.snake import Snake  # noqa: E402
from game_engine import GameEngine  # noqa: E402
from services.tick_scheduler import TickScheduler  # noqa: E402


def make_due(scheduler):
    for job in scheduler.jobs:
        job.next_run = datetime.now() - timedelta(seconds=1)


class TestTickScheduler:
    """Tests for the TickScheduler wrapper around `schedule`."""

    def test_start_registers_one_job(self):
        scheduler = TickScheduler()
        scheduler.start(200, lambda: None)

        assert scheduler.is_running is True
        assert len(scheduler.jobs) == 1
        assert scheduler.period == timedelta(milliseconds=200)
        assert scheduler.period_ms == 200

    def test_restart_replaces_existing_job(self):
        scheduler = TickScheduler()
        scheduler.start(200, lambda: None)
        scheduler.start(180, lambda: None)

        assert len(scheduler.jobs) == 1
        assert scheduler.period == timedelta(milliseconds=180)

    def test_stop_clears_job(self):
        scheduler = TickScheduler()
        scheduler.start(200, lambda: None)
        scheduler.stop()

        assert scheduler.is_running is False
        assert scheduler.jobs == []
        assert scheduler.idle_seconds() is None

    def test_non_positive_period_rejected(self):
        with pytest.raises(ValueError):
            TickScheduler().start(0, lambda: None)

    def test_run_pending_fires_due_tick(self):
        calls = []
        scheduler = TickScheduler()
        scheduler.start(200, lambda: calls.append(1))

        scheduler.run_pending()
        assert calls == []

        make_due(scheduler)
        scheduler.run_pending()
        assert calls == [1]

    def test_run_forever_stops_after_max_ticks(self):
        calls = []
        scheduler = TickScheduler()
        scheduler.start(1, lambda: calls.append(1))

        ticks = scheduler.run_forever(poll_seconds=0.001, max_ticks=3)

        assert ticks == 3
        assert len(calls) == 3
        assert scheduler.is_running is False

    def test_run_forever_returns_when_callback_stops(self):
        scheduler = TickScheduler()
        seen = []

        def tick():
            seen.append(1)
            if len(seen) == 2:
                scheduler.stop()

        scheduler.start(1, tick)
        ticks = scheduler.run_forever(poll_seconds=0.001, before_tick=lambda: seen.append(0))

        assert ticks == 2
        assert seen == [0, 1, 0, 1]


class TestEngineWithTickScheduler:
    """The engine drives start/stop of a real TickScheduler."""

    def test_init_schedules_engine_step(self):
        scheduler = TickScheduler()
        engine = GameEngine(scheduler=scheduler, rng=random.Random(0))
        engine.food = (10, 10)

        make_due(scheduler)
        scheduler.run_pending()

        assert engine.get_current_state().head == (4, 0)

    def test_level_up_changes_period(self):
        scheduler = TickScheduler()
        engine = GameEngine(scheduler=scheduler, rng=random.Random(0))

        for _ in range(FRUITS_PER_LEVEL):
            engine.food = engine.snake.next_head(engine.pending_direction)
            make_due(scheduler)
            scheduler.run_pending()

        assert engine.level == 2
        assert len(scheduler.jobs) == 1
        assert scheduler.period == timedelta(milliseconds=180)

    def test_game_over_stops_ticking(self):
        scheduler = TickScheduler()
        engine = GameEngine(scheduler=scheduler, rng=random.Random(0))
        engine.snake = Snake([(19, 5), (18, 5), (17, 5), (16, 5)])
        engine.current_direction = engine.pending_direction = RIGHT

        make_due(scheduler)
        scheduler.run_pending()

        assert engine.is_over is True
        assert scheduler.is_running is False

    def test_restart_resumes_ticking_with_single_job(self):
        scheduler = TickScheduler()
        engine = GameEngine(scheduler=scheduler, rng=random.Random(0))
        engine.snake = Snake([(19, 5), (18, 5), (17, 5), (16, 5)])
        make_due(scheduler)
        scheduler.run_pending()

        engine.restart()

        assert len(scheduler.jobs) == 1
        assert scheduler.period == timedelta(milliseconds=200)
