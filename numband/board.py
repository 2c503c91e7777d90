"""Stateful owner of a number list, its partition and its history.

``Numband`` is what a presentation layer holds on to: feed it the raw text
whenever it changes, forward boundary clicks to ``toggle``, and render
``partition`` and ``history`` afterwards.
"""

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from numband.errors import AdjacencyViolation
from numband.extract import clean_up_input, extract_numbers
from numband.partition import Partition, build_partition
from numband.reconcile import RetainedRecord, load_records, reconcile
from numband.toggle import Side, toggle_boundary

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ToggleResult:
    """Result of a boundary toggle.

    Attributes:
        success: True if the boundary was toggled (or already had the flag)
        partition: The current partition, toggled or untouched
        error: The AdjacencyViolation that prevented the toggle, if any
    """

    success: bool
    partition: Partition
    error: AdjacencyViolation | None


class Numband:
    """In-memory banding state for one number list.

    Attributes:
        text: The raw number list as last given to ``update``
        partition: Bands for the numbers in ``text``
        history: Annotations whose bands disappeared, oldest first
        history_limit: Maximum history length, or None for unbounded
    """

    def __init__(self, text: str = "", *, history_limit: int | None = None) -> None:
        if history_limit is not None and history_limit < 0:
            raise ValueError(f"history_limit must be >= 0, got {history_limit}")
        self.history_limit: int | None = history_limit
        self.text: str = ""
        self.partition: Partition = build_partition(())
        self.history: list[RetainedRecord] = []
        self.update(text)

    @property
    def numbers(self) -> list[float]:
        """Sorted band boundaries."""
        return [band.interval.upper.value for band in self.partition.bands[:-1]]

    def update(self, text: str) -> list[RetainedRecord]:
        """Rebuild the partition for new text, keeping annotations where possible.

        Returns:
            Records added to the history by this edit
        """
        new = build_partition(extract_numbers(text))
        partition, retained = reconcile(self.partition, new, self.history)
        kept = {id(record) for record in self.history}
        added = [record for record in retained if id(record) not in kept]

        self.text = text
        self.partition = partition
        self.history = retained
        self._trim_history()
        logger.debug(
            f"Updated to {len(partition)} bands, {len(added)} records retained"
        )
        return added

    def toggle(self, index: int, side: Side, inclusive: bool) -> ToggleResult:
        """Toggle one side of band ``index``, reporting adjacency problems.

        Raises:
            IndexError: If ``index`` is out of range
        """
        try:
            toggle_boundary(self.partition, index, side, inclusive)
        except AdjacencyViolation as exc:
            logger.info(f"Ignored toggle of band {index} {side}: {exc}")
            return ToggleResult(success=False, partition=self.partition, error=exc)
        return ToggleResult(success=True, partition=self.partition, error=None)

    def annotate(self, index: int, annotation: str) -> None:
        self.partition[index].annotation = annotation

    def annotation_for(self, value: float) -> str:
        return self.partition.annotation_for(value)

    def clean_up_input(self) -> str:
        """Rewrite ``text`` as sorted unique numbers.

        The number set is unchanged, so the partition and its annotations
        stay as they are.
        """
        self.text = clean_up_input(self.text)
        return self.text

    def history_lines(self) -> list[str]:
        return [record.to_text() for record in self.history]

    def load_history(self, lines: Iterable[str]) -> None:
        """Replace the history with serialized records.

        Malformed lines are dropped. Loaded records are reclaimed by bands
        that reappear on a later ``update``.
        """
        self.history = load_records(list(lines))
        self._trim_history()

    def _trim_history(self) -> None:
        if self.history_limit is not None and len(self.history) > self.history_limit:
            dropped = len(self.history) - self.history_limit
            logger.debug(f"Dropping {dropped} oldest history records")
            self.history = self.history[dropped:]
