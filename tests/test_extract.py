"""Tests for number extraction.

Grammar: a minus sign counts only when no number is being built and a
numeric character follows it, so "10-20" is two positive numbers.
"""

import pytest

from numband import clean_up_input, extract_numbers


def test_extracts_unique_numbers_in_first_occurrence_order():
    """Duplicates are dropped and words act as separators."""
    assert extract_numbers("10, 20.5, abc 30 10") == [10, 20.5, 30]


def test_does_not_sort():
    """Numbers come back in the order they appear."""
    assert extract_numbers("3 1 2") == [3, 1, 2]


def test_empty_and_non_numeric_text():
    """Text without digits yields no numbers."""
    assert extract_numbers("") == []
    assert extract_numbers("no numbers here") == []


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("10-20", [10, 20]),
        ("10 - 20", [10, 20]),
        ("10 -20", [10, -20]),
        ("-5", [-5]),
        ("x-5", [-5]),
        ("--5", [-5]),
        ("- 5", [5]),
        ("5-", [5]),
        ("-", []),
    ],
)
def test_minus_sign_grammar(text, expected):
    """A minus sign only negates a number that starts right after it."""
    assert extract_numbers(text) == expected


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        (".5", [0.5]),
        ("5.", [5]),
        ("1.2.3", [1.2]),
        (".", []),
        ("-.", []),
        ("1e5", [1, 5]),
    ],
)
def test_decimal_points(text, expected):
    """Runs of digits and points are read by their longest numeric prefix."""
    assert extract_numbers(text) == expected


def test_dedupes_numerically_equal_spellings():
    """10, 10.0 and 010 are the same number."""
    assert extract_numbers("10 10.0 010") == [10]


def test_number_at_end_of_input_is_flushed():
    """A number ending the text is still counted."""
    assert extract_numbers("a 42") == [42]


def test_skips_digit_runs_too_large_for_a_float():
    """Digit runs that overflow a float are not numbers."""
    assert extract_numbers("1" * 400 + " 5") == [5]
    assert extract_numbers("-" + "9" * 400) == []


def test_clean_up_input_sorts_and_dedupes():
    """clean_up_input rewrites text as sorted unique numbers."""
    assert clean_up_input("30, 10 abc 20.5 10") == "10 20.5 30"
    assert clean_up_input("-1 -2.5") == "-2.5 -1"
    assert clean_up_input("") == ""
