"""Service for managing the state of a single play-through."""

from __future__ import annotations

import logging
import random
from typing import Callable

from number_rush.constants.game_constants import ELAPSED_REFRESH_INTERVAL_MS, QUESTIONS_PER_GAME
from number_rush.core.answer_parser import parse_answer
from number_rush.core.models import AnswerResult, Difficulty, GamePhase, Question, QuestionView
from number_rush.core.option_generator import generate_options
from number_rush.core.question_generator import generate_question
from number_rush.core.services.game_clock import GameClock
from number_rush.core.services.ticker import ThreadingTicker, Ticker

logger = logging.getLogger(__name__)


class GameStateError(RuntimeError):
    """Raised when a transition is requested in a phase that does not allow it."""


class GameSession:
    """Linear state machine: selecting difficulty -> playing -> completed."""

    def __init__(
        self,
        ticker: Ticker | None = None,
        rng: random.Random | None = None,
        clock: GameClock | None = None,
    ) -> None:
        self._ticker = ticker or ThreadingTicker(ELAPSED_REFRESH_INTERVAL_MS / 1000)
        self._rng = rng or random.Random()
        self._seed: int | None = None
        self._clock = clock or GameClock()
        self._tick_listener: Callable[[int], None] | None = None
        self._clear_state()

    def _clear_state(self) -> None:
        self._phase = GamePhase.SELECTING_DIFFICULTY
        self._difficulty: Difficulty | None = None
        self._score: int = 0
        self._question_index: int = 0
        self._current_question: Question | None = None
        self._current_options: list[int] = []
        self._hint_revealed: bool = False
        self._user_input: str = ""
        self._completed: bool = False
        self._clock.reset()

    # --- Transitions ---

    def start(self, difficulty: Difficulty) -> None:
        if self._phase is GamePhase.PLAYING:
            raise GameStateError("A game is already in progress.")

        self._difficulty = Difficulty(difficulty)
        self._score = 0
        self._question_index = 0
        self._hint_revealed = False
        self._completed = False
        if self._seed is not None:
            self._rng.seed(self._seed)
        self._clock.start()
        self._phase = GamePhase.PLAYING
        self._advance_question()
        self._ticker.start(self._handle_tick)
        logger.info("Game started (difficulty=%s)", self._difficulty.value)

    def reveal_hint(self) -> list[int]:
        """Switch the current question to multiple choice and return its options."""
        self._require_phase(GamePhase.PLAYING, "reveal a hint")
        if not self._hint_revealed:
            self._hint_revealed = True
            logger.debug("Hint revealed for question %d", self._question_index)
        return list(self._current_options)

    def set_user_input(self, text: str) -> None:
        self._require_phase(GamePhase.PLAYING, "update the answer")
        self._user_input = text

    def submit_answer(self, raw_input: str | None = None) -> AnswerResult:
        """Score ``raw_input`` (or the stored input) and move the game forward.

        Input that does not parse as a number is rejected and leaves the session
        untouched.
        """
        self._require_phase(GamePhase.PLAYING, "submit an answer")
        text = self._user_input if raw_input is None else raw_input
        value = parse_answer(text)
        if value is None:
            logger.warning("Rejected non-numeric answer %r", text)
            return AnswerResult(accepted=False)

        question = self._current_question
        is_correct = question is not None and value == question.answer
        if is_correct:
            self._score += 1

        if self._question_index < QUESTIONS_PER_GAME:
            self._advance_question()
            return AnswerResult(accepted=True, is_correct=is_correct)

        self._finish()
        return AnswerResult(accepted=True, is_correct=is_correct, game_completed=True)

    def reset(self) -> None:
        self._require_phase(GamePhase.COMPLETED, "reset")
        self._ticker.stop()
        self._clear_state()
        logger.info("Session reset; waiting for difficulty selection")

    def close(self) -> None:
        """Stop the elapsed-time ticker regardless of phase."""
        self._ticker.stop()

    def _advance_question(self) -> None:
        question = generate_question(self._difficulty, self._rng)
        self._current_question = question
        self._current_options = generate_options(question.answer, self._rng)
        self._question_index += 1
        self._hint_revealed = False
        self._user_input = ""
        logger.debug(
            "Question %d/%d: %d %s %d",
            self._question_index,
            QUESTIONS_PER_GAME,
            question.operand1,
            question.operation.symbol,
            question.operand2,
        )

    def _finish(self) -> None:
        self._completed = True
        self._clock.stop()
        self._ticker.stop()
        self._phase = GamePhase.COMPLETED
        logger.info(
            "Game completed: score %d/%d in %d ms",
            self._score,
            QUESTIONS_PER_GAME,
            self._clock.elapsed_ms(),
        )

    def _require_phase(self, phase: GamePhase, action: str) -> None:
        if self._phase is not phase:
            raise GameStateError(f"Cannot {action} while {self._phase.name.lower()}.")

    # --- Elapsed time ---

    def set_tick_listener(self, listener: Callable[[int], None] | None) -> None:
        self._tick_listener = listener

    def _handle_tick(self) -> None:
        listener = self._tick_listener
        if listener is not None and self._phase is GamePhase.PLAYING:
            listener(self._clock.elapsed_ms())

    def set_random_seed(self, seed: int | None) -> None:
        """Fix the seed replayed at every start, or None for fresh randomness."""
        self._seed = seed
        self._rng.seed(seed)

    def is_ticker_active(self) -> bool:
        return self._ticker.is_active()

    # --- Queries ---

    def get_phase(self) -> GamePhase:
        return self._phase

    def is_playing(self) -> bool:
        return self._phase is GamePhase.PLAYING

    def is_completed(self) -> bool:
        return self._completed

    def get_difficulty(self) -> Difficulty | None:
        return self._difficulty

    def get_score(self) -> int:
        return self._score

    def get_question_index(self) -> int:
        return self._question_index

    def get_total_questions(self) -> int:
        return QUESTIONS_PER_GAME

    def get_current_question(self) -> Question | None:
        return self._current_question

    def get_current_view(self) -> QuestionView | None:
        if self._current_question is None:
            return None
        return self._current_question.to_view()

    def get_options(self) -> list[int]:
        return list(self._current_options)

    def get_display_options(self) -> list[int]:
        """Options for rendering; empty until the hint is revealed."""
        if self._hint_revealed:
            return list(self._current_options)
        return []

    def is_hint_revealed(self) -> bool:
        return self._hint_revealed

    def get_user_input(self) -> str:
        return self._user_input

    def can_submit(self) -> bool:
        return self._phase is GamePhase.PLAYING and parse_answer(self._user_input) is not None

    def get_start_time(self) -> float | None:
        return self._clock.get_start_time()

    def get_end_time(self) -> float | None:
        return self._clock.get_end_time()

    def get_elapsed_ms(self) -> int:
        return self._clock.elapsed_ms()
