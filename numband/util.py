"""Constants and small helpers shared across numband.

Values are plain floats; the two infinities mark the unbounded outer
edges of every partition.
"""

import math

INFINITY = math.inf
NEG_INFINITY = -math.inf

# Characters that may appear inside a number in free-form text
NUMERIC_CHARS = "0123456789."

# Canonical interval tokens
INCLUSIVE_OPEN = "["
EXCLUSIVE_OPEN = "("
INCLUSIVE_CLOSE = "]"
EXCLUSIVE_CLOSE = ")"
SEPARATOR = ","

INFINITY_TOKEN = "Infinity"
NEG_INFINITY_TOKEN = "-Infinity"

# Integral floats beyond this magnitude keep their float repr
_MAX_PLAIN_INTEGER = 1e21


def format_number(value: float) -> str:
    """Render a number the way it appears in canonical interval text.

    Integral values drop their fractional part (``10.0`` becomes ``"10"``),
    other values use the shortest round-trip repr, and infinities use the
    ``Infinity`` / ``-Infinity`` tokens.
    """
    if math.isinf(value):
        return INFINITY_TOKEN if value > 0 else NEG_INFINITY_TOKEN
    if float(value).is_integer() and abs(value) < _MAX_PLAIN_INTEGER:
        # -0.0 renders as "0"
        return str(int(value))
    return repr(float(value))
