import math
import re
from dataclasses import dataclass, replace
from typing import Any

from numband.errors import (
    BoundsNotOrdered,
    DegenerateInterval,
    InfiniteInclusive,
    InvalidValue,
    MalformedInterval,
    NotARealNumber,
    NumbandError,
)
from numband.util import (
    EXCLUSIVE_CLOSE,
    EXCLUSIVE_OPEN,
    INCLUSIVE_CLOSE,
    INCLUSIVE_OPEN,
    SEPARATOR,
    format_number,
)

# Decimal literal or a signed Infinity token; nothing else is canonical
_NUMBER_TOKEN = re.compile(
    r"[+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)"
)


def _is_real(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


@dataclass(frozen=True, kw_only=True)
class IntervalBound:
    value: float
    is_inclusive: bool

    def __post_init__(self) -> None:
        if not _is_real(self.value):
            raise InvalidValue(
                f"IntervalBound value must be a real number, got {self.value!r}"
            )
        try:
            value = float(self.value)
        except OverflowError as exc:
            raise InvalidValue(
                f"IntervalBound value {self.value!r} is too large for a float"
            ) from exc
        if math.isnan(value):
            raise InvalidValue("IntervalBound value must not be NaN")
        # Stored as float so the canonical text round-trips exactly
        object.__setattr__(self, "value", value)
        if math.isinf(self.value) and self.is_inclusive:
            raise InfiniteInclusive(
                f"IntervalBound at {format_number(self.value)} cannot be inclusive.\n"
                f"Infinities are never part of an interval; "
                f"use is_inclusive=False."
            )

    @property
    def is_finite(self) -> bool:
        return math.isfinite(self.value)

    def flipped(self) -> "IntervalBound":
        """Same value with the opposite inclusivity."""
        return replace(self, is_inclusive=not self.is_inclusive)


@dataclass(frozen=True, kw_only=True)
class Interval:
    lower: IntervalBound
    upper: IntervalBound

    def __post_init__(self) -> None:
        if not isinstance(self.lower, IntervalBound) or not isinstance(
            self.upper, IntervalBound
        ):
            raise TypeError(
                f"Interval requires two IntervalBound instances.\n"
                f"Got lower={self.lower!r}, upper={self.upper!r}"
            )
        if self.lower.value > self.upper.value:
            raise BoundsNotOrdered(
                f"Interval lower ({format_number(self.lower.value)}) must be "
                f"< upper ({format_number(self.upper.value)})"
            )
        if self.lower.value == self.upper.value:
            raise DegenerateInterval(
                f"Interval bounds must be distinct, "
                f"got {format_number(self.lower.value)} twice"
            )

    def contains(self, value: float) -> bool:
        """Return True if ``value`` lies inside this interval.

        Only finite reals can be tested; anything else raises NotARealNumber.
        """
        if not _is_real(value) or not math.isfinite(value):
            raise NotARealNumber(
                f"Interval.contains only works with finite reals, got {value!r}"
            )
        above_lower = value > self.lower.value or (
            self.lower.is_inclusive and value == self.lower.value
        )
        below_upper = value < self.upper.value or (
            self.upper.is_inclusive and value == self.upper.value
        )
        return above_lower and below_upper

    def __contains__(self, value: float) -> bool:
        return self.contains(value)

    def with_inclusivity(
        self, lower: bool | None = None, upper: bool | None = None
    ) -> "Interval":
        """Return a copy with the given inclusivity flags replaced."""
        new_lower = self.lower
        new_upper = self.upper
        if lower is not None and lower != self.lower.is_inclusive:
            new_lower = replace(self.lower, is_inclusive=lower)
        if upper is not None and upper != self.upper.is_inclusive:
            new_upper = replace(self.upper, is_inclusive=upper)
        return Interval(lower=new_lower, upper=new_upper)

    def __str__(self) -> str:
        """Canonical text form, e.g. ``[ 10 , 20 )``."""
        opener = INCLUSIVE_OPEN if self.lower.is_inclusive else EXCLUSIVE_OPEN
        closer = INCLUSIVE_CLOSE if self.upper.is_inclusive else EXCLUSIVE_CLOSE
        return (
            f"{opener} {format_number(self.lower.value)} {SEPARATOR} "
            f"{format_number(self.upper.value)} {closer}"
        )


def _parse_number(token: str, text: str) -> float:
    if not _NUMBER_TOKEN.fullmatch(token):
        raise MalformedInterval(
            f"Expected a number in interval text, got {token!r} in {text!r}"
        )
    if token.endswith("Infinity"):
        return -math.inf if token.startswith("-") else math.inf
    value = float(token)
    if math.isinf(value):
        raise MalformedInterval(
            f"Number {token!r} overflows a float in {text!r}; "
            f"use Infinity or -Infinity"
        )
    return value


def parse_interval(text: str) -> Interval:
    """Parse the canonical text produced by ``str(interval)``.

    Only the exact five-token shape ``<[|(> <num> , <num> <]|)>`` is
    accepted. Anything else, including well-formed text describing an
    invalid interval, raises MalformedInterval.

    Example:
        >>> parse_interval("[ 10 , 20 )")
        Interval(lower=IntervalBound(value=10.0, is_inclusive=True), upper=IntervalBound(value=20.0, is_inclusive=False))
    """
    tokens = text.split()
    if len(tokens) != 5:
        raise MalformedInterval(
            f"Interval text must have exactly 5 tokens, got {len(tokens)}: {text!r}\n"
            f"Expected form: '[ 10 , 20 )'"
        )
    opener, low, separator, high, closer = tokens
    if opener not in (INCLUSIVE_OPEN, EXCLUSIVE_OPEN):
        raise MalformedInterval(f"Bad opening bracket {opener!r} in {text!r}")
    if closer not in (INCLUSIVE_CLOSE, EXCLUSIVE_CLOSE):
        raise MalformedInterval(f"Bad closing bracket {closer!r} in {text!r}")
    if separator != SEPARATOR:
        raise MalformedInterval(f"Bad separator {separator!r} in {text!r}")

    lower_value = _parse_number(low, text)
    upper_value = _parse_number(high, text)
    try:
        return Interval(
            lower=IntervalBound(
                value=lower_value, is_inclusive=opener == INCLUSIVE_OPEN
            ),
            upper=IntervalBound(
                value=upper_value, is_inclusive=closer == INCLUSIVE_CLOSE
            ),
        )
    except NumbandError as exc:
        raise MalformedInterval(f"Invalid interval {text!r}: {exc}") from exc
