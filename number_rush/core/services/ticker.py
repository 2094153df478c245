"""Cancellable repeating callbacks used to refresh the elapsed-time display."""

from __future__ import annotations

import logging
from threading import Event, Lock, Thread
from typing import Callable

logger = logging.getLogger(__name__)

TickCallback = Callable[[], None]


class Ticker:
    """Interface for a repeating callback owned by a game session."""

    def start(self, callback: TickCallback) -> None:
        raise NotImplementedError

    def stop(self) -> None:
        raise NotImplementedError

    def is_active(self) -> bool:
        raise NotImplementedError


class ThreadingTicker(Ticker):
    """Runs the callback on a daemon thread every ``interval_seconds``.

    ``stop`` only signals the worker and never joins, so it may be called while
    holding a lock the callback also takes. A tick already in flight can still
    complete after ``stop`` returns.
    """

    def __init__(self, interval_seconds: float = 1.0) -> None:
        self._interval_seconds = interval_seconds
        self._lock = Lock()
        self._stop_event: Event | None = None

    def start(self, callback: TickCallback) -> None:
        stop_event = Event()
        with self._lock:
            if self._stop_event is not None:
                self._stop_event.set()
            self._stop_event = stop_event
        Thread(
            target=self._run,
            args=(callback, stop_event),
            name="number-rush-ticker",
            daemon=True,
        ).start()
        logger.debug("Ticker started (interval %.3fs)", self._interval_seconds)

    def stop(self) -> None:
        with self._lock:
            stop_event = self._stop_event
            self._stop_event = None
        if stop_event is None:
            return
        stop_event.set()
        logger.debug("Ticker stopped")

    def is_active(self) -> bool:
        with self._lock:
            return self._stop_event is not None

    def _run(self, callback: TickCallback, stop_event: Event) -> None:
        while not stop_event.wait(self._interval_seconds):
            callback()
