"""Multiple-choice option generation for hint mode."""

from __future__ import annotations

import random

from number_rush.constants.game_constants import (
    DISTRACTOR_MAX_ATTEMPTS,
    DISTRACTOR_MAX_OFFSET,
    OPTION_COUNT,
)


def generate_options(answer: int, rng: random.Random | None = None) -> list[int]:
    """Return ``answer`` plus up to three nearby positive distractors, shuffled.

    Distractors are ``answer ± 1..5``. The search gives up after a fixed number
    of attempts, so very small answers can yield fewer than four options.
    """
    rng = rng or random
    options: list[int] = [answer]
    attempts = 0

    while len(options) < OPTION_COUNT and attempts < DISTRACTOR_MAX_ATTEMPTS:
        attempts += 1
        offset = rng.randint(1, DISTRACTOR_MAX_OFFSET)
        if rng.random() < 0.5:
            offset = -offset

        candidate = answer + offset
        if candidate > 0 and candidate not in options:
            options.append(candidate)

    rng.shuffle(options)
    return options
