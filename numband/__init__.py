from .board import Numband, ToggleResult
from .errors import (
    AdjacencyViolation,
    BoundsNotOrdered,
    DegenerateInterval,
    InfiniteInclusive,
    InvalidValue,
    MalformedInterval,
    NotARealNumber,
    NumbandError,
)
from .extract import clean_up_input, extract_numbers
from .interval import Interval, IntervalBound, parse_interval
from .partition import Band, Partition, build_partition
from .reconcile import RetainedRecord, load_records, reconcile
from .toggle import adjust_inclusions, toggle_boundary, toggle_lower, toggle_upper

__all__ = [
    "Interval",
    "IntervalBound",
    "parse_interval",
    "extract_numbers",
    "clean_up_input",
    "Band",
    "Partition",
    "build_partition",
    "toggle_boundary",
    "toggle_lower",
    "toggle_upper",
    "adjust_inclusions",
    "RetainedRecord",
    "reconcile",
    "load_records",
    "Numband",
    "ToggleResult",
    "NumbandError",
    "InvalidValue",
    "InfiniteInclusive",
    "BoundsNotOrdered",
    "DegenerateInterval",
    "NotARealNumber",
    "MalformedInterval",
    "AdjacencyViolation",
]
