import pytest

from number_rush.core.answer_parser import parse_answer


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("12", 12),
        ("  7 ", 7),
        ("-3", -3),
        ("+4", 4),
        ("12.0", 12),
        ("1e1", 10),
        ("2.5", 2.5),
    ],
)
def test_parses_numbers(raw, expected):
    value = parse_answer(raw)
    assert value == expected
    assert type(value) is type(expected)


@pytest.mark.parametrize("raw", ["", "   ", "abc", "1,5", "12abc", "nan", "inf", "-Infinity", None])
def test_rejects_non_numbers(raw):
    assert parse_answer(raw) is None


@pytest.mark.parametrize("raw", ["1_0", "١٢", "１２", "0x10", "1e400", "--3"])
def test_rejects_python_only_and_non_ascii_forms(raw):
    assert parse_answer(raw) is None


@pytest.mark.parametrize(("raw", "expected"), [("12.", 12), (".5", 0.5), ("007", 7)])
def test_accepts_plain_decimal_variants(raw, expected):
    assert parse_answer(raw) == expected
