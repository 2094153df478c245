"""Service for tracking and formatting the elapsed time of a game."""

from __future__ import annotations

import time
from typing import Callable


def format_elapsed(elapsed_ms: float) -> str:
    """Format milliseconds as ``m:ss`` with whole seconds floored."""
    total_seconds = int(max(0.0, elapsed_ms) // 1000)
    minutes, seconds = divmod(total_seconds, 60)
    return f"{minutes}:{seconds:02d}"


class GameClock:
    """Start/end anchors for a single play-through."""

    def __init__(self, time_source: Callable[[], float] = time.monotonic) -> None:
        self._time_source = time_source
        self._started_at: float | None = None
        self._ended_at: float | None = None

    def start(self) -> None:
        self._started_at = self._time_source()
        self._ended_at = None

    def stop(self) -> None:
        if self._started_at is not None and self._ended_at is None:
            self._ended_at = self._time_source()

    def reset(self) -> None:
        self._started_at = None
        self._ended_at = None

    def get_start_time(self) -> float | None:
        return self._started_at

    def get_end_time(self) -> float | None:
        return self._ended_at

    def is_running(self) -> bool:
        return self._started_at is not None and self._ended_at is None

    def elapsed_ms(self) -> int:
        """Milliseconds since start, frozen once the clock is stopped."""
        if self._started_at is None:
            return 0
        end = self._ended_at if self._ended_at is not None else self._time_source()
        return max(0, int((end - self._started_at) * 1000))
