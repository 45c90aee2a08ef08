"""
Fixed-window request quota for the short-video platform.

One instance is shared by every product and every caller. The window is
rolled over lazily: nothing happens between requests, the next call to
try_acquire() (or time_until_reset()) notices the window has elapsed.
"""

import logging
from datetime import datetime, timedelta

from app.core.clock import Clock

logger = logging.getLogger(__name__)


class RateLimiter:
    def __init__(self, limit: int, window: timedelta, clock: Clock):
        if limit < 0:
            raise ValueError("limit must be non-negative")
        self.limit = limit
        self.window = window
        self.clock = clock
        self.count = 0
        self.window_start: datetime = clock.now()

    def _roll_window(self, now: datetime) -> None:
        if now - self.window_start > self.window:
            self.count = 0
            self.window_start = now

    def try_acquire(self) -> bool:
        """Take one slot from the current window; False when it is exhausted"""
        now = self.clock.now()
        self._roll_window(now)
        if self.count >= self.limit:
            logger.debug(f"Rate limit reached ({self.count}/{self.limit})")
            return False
        self.count += 1
        return True

    def time_until_reset(self) -> timedelta:
        now = self.clock.now()
        remaining = self.window - (now - self.window_start)
        return max(timedelta(0), remaining)

    def reset(self) -> None:
        """Zero the counter and start a new window now"""
        self.count = 0
        self.window_start = self.clock.now()
        logger.info("Rate limit window reset")

    @property
    def remaining(self) -> int:
        self._roll_window(self.clock.now())
        return max(0, self.limit - self.count)
