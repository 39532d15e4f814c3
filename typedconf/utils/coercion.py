"""
Primitive Coercion

Turns raw environment-file text into bool, int, float or str.
"""

import re
from typing import Any, Union

Primitive = Union[bool, int, float, str]

# Decimal literals only: no hex, no underscores, no nan/inf
_NUMBER_RE = re.compile(r'^[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?$')
_INT_RE = re.compile(r'^[+-]?\d+$')


def coerce_value(raw: Any) -> Any:
    """
    Coerce a raw string to the most specific primitive.

    Rules, in order:
        1. "true"/"false" (any case) -> bool
        2. decimal numeric literal after trimming whitespace -> int or float
        3. anything else -> the original string, untouched

    Args:
        raw: Raw value read from the source. Non-strings pass through.

    Returns:
        Coerced value

    Example:
        >>> coerce_value('TRUE'), coerce_value(' 42 '), coerce_value('3.14')
        (True, 42, 3.14)
    """
    if not isinstance(raw, str):
        return raw

    lowered = raw.lower()
    if lowered == 'true':
        return True
    if lowered == 'false':
        return False

    text = raw.strip()
    if _NUMBER_RE.match(text):
        if _INT_RE.match(text):
            return int(text)
        return float(text)

    return raw
