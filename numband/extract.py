"""Pull numbers out of free-form text.

The grammar is deliberately loose: any run of digits and decimal points is
a number, and everything else separates numbers. A minus sign only makes a
number negative when it directly precedes a numeric character and no number
is being built, so ``10-20`` reads as the two numbers 10 and 20 (it looks
like a range) while ``10 -20`` reads as 10 and -20.
"""

import math
import re

from numband.util import NUMERIC_CHARS, format_number

# Longest numeric prefix of a buffer; "1.2.3" reads as 1.2
_NUMERIC_PREFIX = re.compile(r"-?(?:\d+\.?\d*|\.\d+)")


def _parse_buffer(buffer: str) -> float | None:
    match = _NUMERIC_PREFIX.match(buffer)
    if match is None:
        return None
    value = float(match.group())
    # Digit runs too long for a float are not numbers
    if not math.isfinite(value):
        return None
    return value


def extract_numbers(text: str) -> list[float]:
    """Return the unique numbers in ``text`` in order of first appearance.

    Never raises: fragments that don't parse as numbers are skipped.

    Example:
        >>> extract_numbers("10, 20.5, abc 30 10")
        [10.0, 20.5, 30.0]
        >>> extract_numbers("10-20 -5")
        [10.0, 20.0, -5.0]
    """
    result: list[float] = []
    seen: set[float] = set()
    buffer = ""
    maybe_negative = False

    def flush() -> None:
        value = _parse_buffer(buffer)
        if value is not None and value not in seen:
            seen.add(value)
            result.append(value)

    for ch in text:
        if ch == "-" and not buffer:
            maybe_negative = True
            continue

        if ch in NUMERIC_CHARS:
            if maybe_negative:
                buffer += "-"
            buffer += ch
            maybe_negative = False
            continue

        maybe_negative = False
        if buffer:
            flush()
            buffer = ""

    if buffer:
        flush()

    return result


def clean_up_input(text: str) -> str:
    """Rewrite ``text`` as its unique numbers, sorted and space separated."""
    return " ".join(format_number(n) for n in sorted(extract_numbers(text)))
