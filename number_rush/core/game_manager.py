"""Facade over the game session shared between the UI and the tick thread."""

from __future__ import annotations

import logging
import random
from threading import Lock
from typing import Callable

from number_rush.core.models import AnswerResult, Difficulty, GamePhase, GameSnapshot
from number_rush.core.services.game_clock import GameClock, format_elapsed
from number_rush.core.services.game_session import GameSession
from number_rush.core.services.ticker import Ticker

logger = logging.getLogger(__name__)

TickListener = Callable[[GameSnapshot], None]


class GameManager:
    """Maps presentation events onto session transitions and exposes snapshots."""

    def __init__(
        self,
        ticker: Ticker | None = None,
        seed: int | None = None,
        clock: GameClock | None = None,
    ) -> None:
        self._lock = Lock()
        self._session = GameSession(ticker=ticker, rng=random.Random(seed), clock=clock)
        if seed is not None:
            self._session.set_random_seed(seed)
        self._session.set_tick_listener(self._handle_session_tick)
        self._tick_listeners: list[TickListener] = []

    # --- Inbound events ---

    def select_difficulty(self, value: Difficulty | str) -> GameSnapshot:
        difficulty = Difficulty(value)
        with self._lock:
            self._session.start(difficulty)
            return self._build_snapshot()

    def update_input(self, text: str) -> bool:
        """Store the typed answer and report whether it can be submitted."""
        with self._lock:
            self._session.set_user_input(text)
            return self._session.can_submit()

    def submit_answer(self, text: str | None = None) -> AnswerResult:
        with self._lock:
            return self._session.submit_answer(text)

    def request_hint(self) -> list[int]:
        with self._lock:
            return self._session.reveal_hint()

    def play_again(self) -> None:
        with self._lock:
            self._session.reset()

    # --- Outbound state ---

    def snapshot(self) -> GameSnapshot:
        with self._lock:
            return self._build_snapshot()

    def get_phase(self) -> GamePhase:
        with self._lock:
            return self._session.get_phase()

    def _build_snapshot(self) -> GameSnapshot:
        session = self._session
        elapsed_ms = session.get_elapsed_ms()
        return GameSnapshot(
            phase=session.get_phase(),
            difficulty=session.get_difficulty(),
            score=session.get_score(),
            question_index=session.get_question_index(),
            total_questions=session.get_total_questions(),
            question=session.get_current_view() if session.is_playing() else None,
            hint_revealed=session.is_hint_revealed(),
            options=tuple(session.get_display_options()),
            user_input=session.get_user_input(),
            can_submit=session.can_submit(),
            elapsed_ms=elapsed_ms,
            elapsed_text=format_elapsed(elapsed_ms),
        )

    # --- Elapsed-time ticks ---

    def add_tick_listener(self, listener: TickListener) -> None:
        with self._lock:
            self._tick_listeners.append(listener)

    def remove_tick_listener(self, listener: TickListener) -> None:
        with self._lock:
            if listener in self._tick_listeners:
                self._tick_listeners.remove(listener)

    def _handle_session_tick(self, _elapsed_ms: int) -> None:
        with self._lock:
            # A tick can race with the final answer on the threaded ticker.
            if not self._session.is_playing():
                return
            snapshot = self._build_snapshot()
            listeners = list(self._tick_listeners)
        for listener in listeners:
            listener(snapshot)

    # --- Settings & lifecycle ---

    def set_random_seed(self, seed: int | None) -> None:
        with self._lock:
            self._session.set_random_seed(seed)

    def shutdown(self) -> None:
        with self._lock:
            self._session.close()
        logger.debug("Game manager shut down")
