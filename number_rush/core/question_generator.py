"""Random arithmetic question generation."""

from __future__ import annotations

import operator
import random
from typing import Callable

from number_rush.constants.game_constants import DIVISION_MULTIPLIER_RANGE, OPERAND_RANGES
from number_rush.core.models import Difficulty, Operation, Question

_OPERATION_FUNCS: dict[Operation, Callable[[int, int], int]] = {
    Operation.ADD: operator.add,
    Operation.SUBTRACT: operator.sub,
    Operation.MULTIPLY: operator.mul,
    # Dividends are always built as exact multiples, so floor division is exact.
    Operation.DIVIDE: operator.floordiv,
}

_OPERATIONS: tuple[Operation, ...] = tuple(Operation)


def compute_answer(operation: Operation, operand1: int, operand2: int) -> int:
    """Apply ``operation`` to the operands using integer arithmetic."""
    return _OPERATION_FUNCS[operation](operand1, operand2)


def operand_ranges(difficulty: Difficulty) -> tuple[tuple[int, int], tuple[int, int]]:
    """Return the inclusive (operand1, operand2) ranges for a difficulty."""
    return OPERAND_RANGES[Difficulty(difficulty).value]


def generate_question(difficulty: Difficulty, rng: random.Random | None = None) -> Question:
    """Generate one question for ``difficulty``.

    Operations are drawn uniformly. For division the first operand is rebuilt as
    ``operand2 * k`` so the quotient is a whole number.
    """
    rng = rng or random
    operation = rng.choice(_OPERATIONS)
    (low1, high1), (low2, high2) = operand_ranges(difficulty)

    operand1 = rng.randint(low1, high1)
    operand2 = rng.randint(low2, high2)

    if operation is Operation.DIVIDE:
        operand1 = operand2 * rng.randint(*DIVISION_MULTIPLIER_RANGE)

    return Question(
        operand1=operand1,
        operand2=operand2,
        operation=operation,
        answer=compute_answer(operation, operand1, operand2),
    )
