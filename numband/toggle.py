"""Flip band endpoints between inclusive and exclusive.

A boundary value shared by two adjacent bands must be included in exactly
one of them. Toggling one side of a boundary therefore always toggles the
neighbour's matching side too, and both bands are replaced together.
"""

import logging
from typing import Literal

from numband.errors import AdjacencyViolation
from numband.partition import Partition
from numband.util import format_number

logger = logging.getLogger(__name__)

Side = Literal["lower", "upper"]


def _check_index(partition: Partition, index: int) -> None:
    if not 0 <= index < len(partition):
        raise IndexError(
            f"Band index {index} out of range for partition of {len(partition)} bands"
        )


def _flip_boundary(partition: Partition, left: int, left_upper_inclusive: bool) -> None:
    """Set the boundary between bands ``left`` and ``left + 1``.

    ``left_upper_inclusive`` is the new flag for the left band's upper bound;
    the right band's lower bound gets the opposite flag.
    """
    left_band = partition[left]
    right_band = partition[left + 1]
    upper = left_band.interval.upper
    lower = right_band.interval.lower

    if upper.value != lower.value or upper.is_inclusive == lower.is_inclusive:
        raise AdjacencyViolation(
            f"Cannot toggle the boundary between bands {left} and {left + 1}: "
            f"{left_band.interval} then {right_band.interval} "
            f"do not share exactly one inclusive bound.\n"
            f"Hint: rebuild the partition with build_partition()"
        )

    # Build both before assigning either
    new_left = left_band.interval.with_inclusivity(upper=left_upper_inclusive)
    new_right = right_band.interval.with_inclusivity(lower=not left_upper_inclusive)
    left_band.interval = new_left
    right_band.interval = new_right

    logger.debug(
        f"Boundary {format_number(upper.value)} now belongs to band "
        f"{left if left_upper_inclusive else left + 1}"
    )


def toggle_lower(partition: Partition, index: int, inclusive: bool) -> Partition:
    """Make band ``index``'s lower bound inclusive or exclusive.

    The previous band's upper bound flips to match. Asking for the flag the
    bound already has changes nothing.

    Raises:
        AdjacencyViolation: If there is no previous band (the -Infinity end)
            or the shared boundary is already inconsistent
        IndexError: If ``index`` is out of range
    """
    _check_index(partition, index)
    if partition[index].interval.lower.is_inclusive == inclusive:
        return partition
    if index == 0:
        raise AdjacencyViolation(
            "The first band starts at -Infinity, which can never be inclusive"
        )
    _flip_boundary(partition, index - 1, not inclusive)
    return partition


def toggle_upper(partition: Partition, index: int, inclusive: bool) -> Partition:
    """Make band ``index``'s upper bound inclusive or exclusive.

    Mirror image of toggle_lower, pairing with the next band.
    """
    _check_index(partition, index)
    if partition[index].interval.upper.is_inclusive == inclusive:
        return partition
    if index == len(partition) - 1:
        raise AdjacencyViolation(
            "The last band ends at Infinity, which can never be inclusive"
        )
    _flip_boundary(partition, index, inclusive)
    return partition


def toggle_boundary(
    partition: Partition, index: int, side: Side, inclusive: bool
) -> Partition:
    if side == "lower":
        return toggle_lower(partition, index, inclusive)
    if side == "upper":
        return toggle_upper(partition, index, inclusive)
    raise ValueError(f"side must be 'lower' or 'upper', got {side!r}")


def adjust_inclusions(
    partition: Partition, index: int, lower: bool, upper: bool
) -> Partition:
    """Set both of band ``index``'s inclusivity flags.

    Each side is applied on its own, so a failure on the upper side leaves
    an already applied lower change in place.
    """
    toggle_lower(partition, index, lower)
    toggle_upper(partition, index, upper)
    return partition
