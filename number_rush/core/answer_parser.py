"""Parsing of free-text answers typed by the player."""

from __future__ import annotations

import math
import re

# Plain ASCII decimal notation only: no digit separators, no "nan"/"inf".
_NUMBER_PATTERN = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)


def parse_answer(raw_input: str | None) -> int | float | None:
    """Parse ``raw_input`` as a number, or return ``None`` when it is not one.

    Integral values come back as ``int`` so they compare exactly with the
    generated answers.
    """
    if raw_input is None:
        return None
    text = raw_input.strip()
    if not _NUMBER_PATTERN.fullmatch(text):
        return None

    if text.lstrip("+-").isdigit():
        return int(text)

    value = float(text)
    if not math.isfinite(value):
        return None
    if value.is_integer():
        return int(value)
    return value
