"""Exceptions raised by numband.

Every error is a ``ValueError`` so callers that only care about bad input
can catch the builtin. Construction errors (``InvalidValue`` through
``NotARealNumber``) indicate a programming error in the caller.
``MalformedInterval`` and ``AdjacencyViolation`` are the recoverable ones.
"""


class NumbandError(ValueError):
    """Base class for all numband errors."""


class InvalidValue(NumbandError):
    """A bound value is not a real number, or is NaN."""


class InfiniteInclusive(NumbandError):
    """An infinite bound was asked to be inclusive."""


class BoundsNotOrdered(NumbandError):
    """An interval's lower value is greater than its upper value."""


class DegenerateInterval(NumbandError):
    """An interval's lower and upper values are equal."""


class NotARealNumber(NumbandError):
    """A containment test was given something other than a finite real."""


class MalformedInterval(NumbandError):
    """Text is not in canonical interval form."""


class AdjacencyViolation(NumbandError):
    """A boundary toggle would leave a gap or overlap between bands."""
