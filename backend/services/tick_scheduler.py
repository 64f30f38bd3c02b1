"""
Tick scheduler for a running game.

Wraps a private `schedule.Scheduler` so each engine gets its own job list.
There is never more than one tick job: starting again replaces the old one,
which is how a level-up changes speed and how init discards a stale timer.

The loop is cooperative: `run_forever` calls `run_pending` from the calling
thread, so engine methods are never invoked concurrently.
"""

import logging
import time
from datetime import timedelta
from typing import Callable, Optional

import schedule

logger = logging.getLogger(__name__)

SCHEDULER_LOOP_SLEEP_SECONDS = 0.005
TICK_TAG = "snake-tick"


class TickScheduler:
    """Fires a single callback every `period_ms` milliseconds."""

    def __init__(self):
        self._scheduler = schedule.Scheduler()
        self.period_ms: Optional[int] = None

    @property
    def is_running(self) -> bool:
        return bool(self._scheduler.get_jobs(TICK_TAG))

    @property
    def jobs(self):
        return self._scheduler.get_jobs(TICK_TAG)

    @property
    def period(self) -> Optional[timedelta]:
        jobs = self.jobs
        return jobs[0].period if jobs else None

    def start(self, period_ms: int, callback: Callable[[], object]) -> None:
        """Cancel any pending tick, then call `callback` every `period_ms`."""
        if period_ms <= 0:
            raise ValueError(f"Tick period must be positive, got {period_ms}")

        self._scheduler.clear(TICK_TAG)
        self._scheduler.every(period_ms / 1000).seconds.do(callback).tag(TICK_TAG)
        self.period_ms = period_ms
        logger.debug("Tick scheduled every %sms", period_ms)

    def stop(self) -> None:
        if self.is_running:
            logger.debug("Tick stopped")
        self._scheduler.clear(TICK_TAG)

    def run_pending(self) -> None:
        self._scheduler.run_pending()

    def idle_seconds(self) -> Optional[float]:
        return self._scheduler.idle_seconds

    def run_forever(
        self,
        poll_seconds: float = SCHEDULER_LOOP_SLEEP_SECONDS,
        before_tick: Optional[Callable[[], None]] = None,
        max_ticks: Optional[int] = None,
    ) -> int:
        """
        Drive the scheduler until it is stopped.

        Args:
            poll_seconds: sleep between checks
            before_tick: called right before each due tick (e.g. to feed input)
            max_ticks: optional cap; the scheduler is stopped when reached

        Returns:
            Number of ticks run.
        """
        ticks = 0
        while self.is_running:
            idle = self._scheduler.idle_seconds
            if idle is not None and idle <= 0:
                if before_tick is not None:
                    before_tick()
                self._scheduler.run_pending()
                ticks += 1
                if max_ticks is not None and ticks >= max_ticks:
                    self.stop()
                    break
                continue
            time.sleep(poll_seconds)
        return ticks
