"""
Elapsed-time tracking for a Minesweeper game.

Elapsed time is computed on demand from a stored start timestamp, so
no scheduled callback has to be owned or cancelled by the game.
"""
import time
from typing import Callable, Optional


class GameTimer:
    """
    Wall-clock timer for the elapsed-time display.

    Args:
        clock: Monotonic clock returning seconds (default time.monotonic).
    """

    def __init__(self, clock: Optional[Callable[[], float]] = None) -> None:
        self._clock = clock or time.monotonic
        self._started_at: Optional[float] = None
        self._stopped_at: Optional[float] = None

    @property
    def is_running(self) -> bool:
        return self._started_at is not None and self._stopped_at is None

    def start(self) -> bool:
        """
        Start the timer.

        Returns:
            True if the timer started, False if it was already started.
        """
        if self._started_at is not None:
            return False
        self._started_at = self._clock()
        return True

    def stop(self) -> bool:
        """
        Stop the timer; safe to call when already stopped.

        Returns:
            True if a running timer was stopped.
        """
        if not self.is_running:
            return False
        self._stopped_at = self._clock()
        return True

    def reset(self) -> None:
        """Stop and clear the timer for a new game."""
        self._started_at = None
        self._stopped_at = None

    def elapsed_seconds(self) -> int:
        """Whole seconds since start, frozen once stopped."""
        if self._started_at is None:
            return 0
        end = self._stopped_at if self._stopped_at is not None else self._clock()
        return max(0, int(end - self._started_at))
