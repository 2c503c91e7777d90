"""Partitions of the real line into adjacent bands.

A partition is an ordered list of bands whose intervals cover
(-Infinity, Infinity) with no gaps and no overlaps: each band's upper value
is the next band's lower value, and exactly one of the two bounds at that
shared value is inclusive.
"""

import bisect
import logging
from collections.abc import Iterable, Iterator, Sequence
from copy import deepcopy
from dataclasses import dataclass, field
from typing import overload

from typing_extensions import override

from numband.errors import AdjacencyViolation
from numband.interval import Interval, IntervalBound
from numband.util import INFINITY, NEG_INFINITY, format_number

logger = logging.getLogger(__name__)


@dataclass(kw_only=True)
class Band:
    """One interval of a partition plus the user's annotation for it."""

    interval: Interval
    annotation: str = ""


@dataclass
class Partition(Sequence[Band]):
    bands: list[Band] = field(default_factory=list)

    @overload
    def __getitem__(self, index: int) -> Band: ...

    @overload
    def __getitem__(self, index: slice) -> Sequence[Band]: ...

    @override
    def __getitem__(self, index: int | slice) -> Band | Sequence[Band]:
        return self.bands[index]

    @override
    def __len__(self) -> int:
        return len(self.bands)

    @override
    def __iter__(self) -> Iterator[Band]:
        return iter(self.bands)

    def intervals(self) -> list[Interval]:
        return [band.interval for band in self.bands]

    def annotations(self) -> list[str]:
        return [band.annotation for band in self.bands]

    def band_for(self, value: float) -> Band:
        """Return the band whose interval contains ``value``.

        Raises NotARealNumber for NaN or infinite values.
        """
        # The containing band is at or just before the last lower value <= value
        lowers = [band.interval.lower.value for band in self.bands]
        idx = max(bisect.bisect_right(lowers, value) - 1, 0)
        for band in self.bands[max(idx - 1, 0) : idx + 2]:
            if band.interval.contains(value):
                return band
        raise AdjacencyViolation(
            f"No band contains {format_number(value)}; the partition has a gap.\n"
            f"Hint: call validate() to locate the broken boundary."
        )

    def annotation_for(self, value: float) -> str:
        return self.band_for(value).annotation

    def validate(self) -> None:
        """Check the partition invariants, raising AdjacencyViolation on failure."""
        if not self.bands:
            raise AdjacencyViolation("A partition needs at least one band")

        first = self.bands[0].interval.lower
        last = self.bands[-1].interval.upper
        if first.value != NEG_INFINITY:
            raise AdjacencyViolation(
                f"First band must start at -Infinity, got {format_number(first.value)}"
            )
        if last.value != INFINITY:
            raise AdjacencyViolation(
                f"Last band must end at Infinity, got {format_number(last.value)}"
            )

        for i, (band, nxt) in enumerate(zip(self.bands, self.bands[1:])):
            upper = band.interval.upper
            lower = nxt.interval.lower
            if upper.value != lower.value:
                raise AdjacencyViolation(
                    f"Bands {i} and {i + 1} are not adjacent: "
                    f"{band.interval} then {nxt.interval}"
                )
            if upper.is_inclusive == lower.is_inclusive:
                kind = "overlap" if upper.is_inclusive else "gap"
                raise AdjacencyViolation(
                    f"Bands {i} and {i + 1} {kind} at "
                    f"{format_number(upper.value)}: "
                    f"{band.interval} then {nxt.interval}"
                )

    def copy(self) -> "Partition":
        return deepcopy(self)


def build_partition(numbers: Iterable[float]) -> Partition:
    """Split the real line at each of ``numbers``.

    Each number becomes the inclusive upper bound of one band and the
    exclusive lower bound of the next, so every real belongs to exactly one
    band. n distinct numbers give n + 1 bands.

    Example:
        >>> [str(i) for i in build_partition([20, 10]).intervals()]
        ['( -Infinity , 10 ]', '( 10 , 20 ]', '( 20 , Infinity )']
    """
    values = sorted(set(numbers))
    bands: list[Band] = []

    lower = IntervalBound(value=NEG_INFINITY, is_inclusive=False)
    for value in values:
        upper = IntervalBound(value=value, is_inclusive=True)
        bands.append(Band(interval=Interval(lower=lower, upper=upper)))
        lower = upper.flipped()

    upper = IntervalBound(value=INFINITY, is_inclusive=False)
    bands.append(Band(interval=Interval(lower=lower, upper=upper)))

    logger.debug(f"Built partition of {len(bands)} bands from {len(values)} numbers")
    return Partition(bands)
