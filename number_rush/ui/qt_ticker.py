"""QTimer-backed ticker so elapsed-time refreshes run on the GUI thread."""

from __future__ import annotations

from PySide6.QtCore import QObject, QTimer

from number_rush.constants.game_constants import ELAPSED_REFRESH_INTERVAL_MS
from number_rush.core.services.ticker import TickCallback, Ticker


class QtTicker(Ticker):
    """Repeating QTimer owned by ``parent``; stopping disconnects the callback."""

    def __init__(self, parent: QObject | None = None, interval_ms: int = ELAPSED_REFRESH_INTERVAL_MS) -> None:
        self._timer = QTimer(parent)
        self._timer.setInterval(interval_ms)
        self._callback: TickCallback | None = None
        self._timer.timeout.connect(self._handle_timeout)

    def start(self, callback: TickCallback) -> None:
        self._callback = callback
        self._timer.start()

    def stop(self) -> None:
        self._timer.stop()
        self._callback = None

    def is_active(self) -> bool:
        return self._timer.isActive()

    def _handle_timeout(self) -> None:
        if self._callback is not None:
            self._callback()
