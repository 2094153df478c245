import random

import pytest

from number_rush.core.models import Difficulty, Operation
from number_rush.core.question_generator import compute_answer, generate_question

EXPECTED_RANGES = {
    Difficulty.EASY: ((1, 10), (1, 10)),
    Difficulty.MEDIUM: ((1, 50), (1, 25)),
    Difficulty.HARD: ((1, 100), (1, 50)),
}


@pytest.mark.parametrize("difficulty", list(Difficulty))
def test_operands_stay_within_difficulty_ranges(difficulty):
    rng = random.Random(7)
    (low1, high1), (low2, high2) = EXPECTED_RANGES[difficulty]

    for _ in range(1500):
        question = generate_question(difficulty, rng)
        assert low2 <= question.operand2 <= high2
        if question.operation is Operation.DIVIDE:
            assert question.operand2 != 0
            assert question.operand1 % question.operand2 == 0
            assert 1 <= question.operand1 // question.operand2 <= 10
        else:
            assert low1 <= question.operand1 <= high1


@pytest.mark.parametrize("difficulty", list(Difficulty))
def test_answer_is_exact_arithmetic_result(difficulty):
    rng = random.Random(11)
    expected = {
        Operation.ADD: lambda a, b: a + b,
        Operation.SUBTRACT: lambda a, b: a - b,
        Operation.MULTIPLY: lambda a, b: a * b,
        Operation.DIVIDE: lambda a, b: a / b,
    }

    for _ in range(1000):
        question = generate_question(difficulty, rng)
        assert isinstance(question.answer, int)
        assert question.answer == expected[question.operation](question.operand1, question.operand2)


def test_every_operation_is_generated():
    rng = random.Random(3)
    seen = {generate_question(Difficulty.EASY, rng).operation for _ in range(400)}
    assert seen == set(Operation)


def test_subtraction_may_be_negative():
    assert compute_answer(Operation.SUBTRACT, 3, 8) == -5


def test_accepts_difficulty_value_strings():
    question = generate_question("hard", random.Random(5))
    assert 1 <= question.operand2 <= 50


def test_same_seed_reproduces_questions():
    first = [generate_question(Difficulty.MEDIUM, random.Random(99)) for _ in range(3)]
    second = [generate_question(Difficulty.MEDIUM, random.Random(99)) for _ in range(3)]
    assert first == second


def test_works_without_explicit_rng():
    question = generate_question(Difficulty.EASY)
    assert question.answer == compute_answer(question.operation, question.operand1, question.operand2)
