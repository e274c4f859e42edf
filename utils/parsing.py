"""
utils/parsing.py
----------------
Lenient numeric parsing for filter values that arrive as query-string text.
"""

import math
import re
from typing import Any

_FLOAT_PREFIX = re.compile(
    r"[+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)"
)


def parse_float(value: Any) -> float:
    """
    Parse the longest numeric prefix of `value`.

    Leading whitespace is ignored and trailing garbage is dropped, so
    ``"75abc"`` gives 75.0. Anything without a numeric prefix (including
    None) gives NaN instead of raising.
    """
    if isinstance(value, bool):
        return math.nan
    if isinstance(value, (int, float)):
        return float(value)
    if value is None:
        return math.nan
    match = _FLOAT_PREFIX.match(str(value).lstrip())
    if not match:
        return math.nan
    text = match.group(0)
    if text.endswith("Infinity"):
        return -math.inf if text.startswith("-") else math.inf
    return float(text)


def to_cents(amount: Any) -> float:
    """Convert a whole-currency amount to cents, without rounding."""
    return 100 * parse_float(amount)
