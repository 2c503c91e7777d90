"""Carry annotations from an old partition onto a rebuilt one.

When the number list changes, the partition is rebuilt from scratch. Any
new band whose lower and upper values both equal those of an old band
inherits that band's annotation and inclusivity. Old bands that found no
new home are handed back as retained records when they carry an
annotation, so nothing the user typed is silently lost.
"""

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from numband.errors import AdjacencyViolation, MalformedInterval
from numband.interval import Interval, parse_interval
from numband.partition import Partition
from numband.toggle import toggle_lower, toggle_upper

logger = logging.getLogger(__name__)

RECORD_SEPARATOR = " => "


@dataclass(frozen=True, kw_only=True)
class RetainedRecord:
    """An annotation whose band no longer exists.

    Attributes:
        interval: The band's interval at the time it was retained
        annotation: The annotation text
    """

    interval: Interval
    annotation: str

    @property
    def canonical(self) -> str:
        return str(self.interval)

    def to_text(self) -> str:
        """Serialize as ``"<canonical interval> => <annotation>"``."""
        return f"{self.canonical}{RECORD_SEPARATOR}{self.annotation}"

    @classmethod
    def parse(cls, canonical: str, annotation: str) -> "RetainedRecord":
        return cls(interval=parse_interval(canonical), annotation=annotation)

    @classmethod
    def from_text(cls, line: str) -> "RetainedRecord":
        """Inverse of to_text. Raises MalformedInterval on bad input."""
        canonical, sep, annotation = line.partition(RECORD_SEPARATOR)
        if not sep:
            raise MalformedInterval(
                f"History line is missing the {RECORD_SEPARATOR.strip()!r} "
                f"separator: {line!r}"
            )
        return cls.parse(canonical, annotation)


def _same_values(a: Interval, b: Interval) -> bool:
    return a.lower.value == b.lower.value and a.upper.value == b.upper.value


def _carry_inclusivity(
    partition: Partition,
    index: int,
    source: Interval,
    *,
    lower: bool = True,
    upper: bool = True,
) -> None:
    """Best-effort copy of ``source``'s inclusivity onto band ``index``."""
    if lower:
        try:
            toggle_lower(partition, index, source.lower.is_inclusive)
        except AdjacencyViolation as exc:
            logger.debug(f"Skipped lower inclusivity for band {index}: {exc}")
    if upper:
        try:
            toggle_upper(partition, index, source.upper.is_inclusive)
        except AdjacencyViolation as exc:
            logger.debug(f"Skipped upper inclusivity for band {index}: {exc}")


def reconcile(
    old: Partition,
    new: Partition,
    history: Iterable[RetainedRecord] = (),
) -> tuple[Partition, list[RetainedRecord]]:
    """Match ``new`` bands against ``old`` ones and carry annotations over.

    Args:
        old: The partition before the edit (not modified)
        new: The freshly built partition (updated in place)
        history: Previously retained records; new bands that match no old
            band may reclaim one of these

    Returns:
        ``(new, retained)`` where ``retained`` lists unclaimed history
        records followed by annotated old bands that matched nothing

    Example:
        >>> from numband import build_partition
        >>> old = build_partition([10])
        >>> old[0].annotation, old[1].annotation = "low", "high"
        >>> new, retained = reconcile(old, build_partition([10, 20]))
        >>> new.annotations()
        ['low', '', '']
        >>> [r.to_text() for r in retained]
        ['( 10 , Infinity ) => high']
    """
    consumed = [False] * len(old)
    pinned: set[int] = set()

    for index, band in enumerate(new):
        for old_index, old_band in enumerate(old):
            if consumed[old_index] or not _same_values(
                old_band.interval, band.interval
            ):
                continue
            consumed[old_index] = True
            pinned.add(index)
            _carry_inclusivity(new, index, old_band.interval)
            band.annotation = old_band.annotation
            logger.debug(f"Band {band.interval} kept {old_band.annotation!r}")
            break

    remaining: list[RetainedRecord] = list(history)
    for index, band in enumerate(new):
        if index in pinned:
            continue
        for pos, record in enumerate(remaining):
            if not _same_values(record.interval, band.interval):
                continue
            # Boundaries shared with bands matched above are already settled
            _carry_inclusivity(
                new,
                index,
                record.interval,
                lower=index - 1 not in pinned,
                upper=index + 1 not in pinned,
            )
            band.annotation = record.annotation
            del remaining[pos]
            logger.debug(f"Band {band.interval} restored {record.annotation!r}")
            break

    retained = remaining + [
        RetainedRecord(interval=old_band.interval, annotation=old_band.annotation)
        for old_index, old_band in enumerate(old)
        if not consumed[old_index] and old_band.annotation
    ]
    return new, retained


def load_records(lines: Sequence[str]) -> list[RetainedRecord]:
    """Parse serialized history lines, dropping any that are malformed."""
    records: list[RetainedRecord] = []
    for line in lines:
        try:
            records.append(RetainedRecord.from_text(line))
        except MalformedInterval as exc:
            logger.warning(f"Dropping malformed history line {line!r}: {exc}")
    return records
