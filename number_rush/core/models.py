"""Domain models for the arithmetic quiz."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class Difficulty(str, Enum):
    """Operand-magnitude tier chosen by the player."""

    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"


class Operation(Enum):
    """Arithmetic operation with its display symbol."""

    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "×"
    DIVIDE = "÷"

    @property
    def symbol(self) -> str:
        return self.value


class GamePhase(Enum):
    """High-level phase of a game session."""

    SELECTING_DIFFICULTY = auto()
    PLAYING = auto()
    COMPLETED = auto()


@dataclass(frozen=True, slots=True)
class Question:
    """A generated arithmetic question together with its exact integer answer."""

    operand1: int
    operand2: int
    operation: Operation
    answer: int

    def to_view(self) -> QuestionView:
        return QuestionView(
            operand1=self.operand1,
            operand2=self.operand2,
            operation=self.operation,
        )


@dataclass(frozen=True, slots=True)
class QuestionView:
    """Display-only projection of a question; never carries the answer."""

    operand1: int
    operand2: int
    operation: Operation


@dataclass(frozen=True, slots=True)
class AnswerResult:
    """Outcome of a single answer submission."""

    accepted: bool
    is_correct: bool = False
    game_completed: bool = False


@dataclass(frozen=True, slots=True)
class GameSnapshot:
    """Immutable view of the session state handed to the presentation layer."""

    phase: GamePhase
    difficulty: Difficulty | None
    score: int
    question_index: int
    total_questions: int
    question: QuestionView | None
    hint_revealed: bool
    options: tuple[int, ...]
    user_input: str
    can_submit: bool
    elapsed_ms: int
    elapsed_text: str
