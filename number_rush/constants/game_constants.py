"""Game-related constants shared across UI and core layers."""

QUESTIONS_PER_GAME: int = 10

# Inclusive (low, high) bounds per difficulty: (operand1 range, operand2 range).
OPERAND_RANGES: dict[str, tuple[tuple[int, int], tuple[int, int]]] = {
    "easy": ((1, 10), (1, 10)),
    "medium": ((1, 50), (1, 25)),
    "hard": ((1, 100), (1, 50)),
}
DIVISION_MULTIPLIER_RANGE: tuple[int, int] = (1, 10)

OPTION_COUNT: int = 4
DISTRACTOR_MAX_OFFSET: int = 5
DISTRACTOR_MAX_ATTEMPTS: int = 100

ELAPSED_REFRESH_INTERVAL_MS: int = 1000
