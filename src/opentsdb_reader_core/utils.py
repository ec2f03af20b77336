"""
Timestamp utility functions for working with OpenTSDB's second-resolution timestamps.
"""

import math
from typing import Any

from .exceptions import OpenTSDBValueError


MILLISECONDS_PER_SECOND = 1000


def parse_number(raw: Any, kind: str = "number") -> float:
    """
    Parse a number that OpenTSDB may send as a JSON number or a numeric string.

    Digit-group underscores ("1_000") are rejected even though float()
    accepts them.

    Args:
        raw: Value from the decoded response.
        kind: Description used in the error message (e.g. "timestamp").

    Returns:
        The parsed float. May be NaN or infinite.

    Raises:
        OpenTSDBValueError: If the value is not numeric.
    """
    if isinstance(raw, bool) or (isinstance(raw, str) and "_" in raw):
        raise OpenTSDBValueError(f"Invalid {kind}: {raw!r}")
    try:
        return float(raw)
    except (TypeError, ValueError) as e:
        raise OpenTSDBValueError(f"Invalid {kind}: {raw!r}") from e


def seconds_to_ms(seconds: int | float | str) -> int:
    """
    Convert Unix seconds to milliseconds.

    OpenTSDB may encode timestamps as numbers or as numeric strings,
    possibly fractional (e.g. "1704067200.5").

    Sub-millisecond fractions go through round(), which sends an exact half
    millisecond to the even neighbour ("0.0625" -> 62, "0.1875" -> 188)
    rather than truncating or rounding half up.

    Args:
        seconds: Unix timestamp in seconds.

    Returns:
        Timestamp in milliseconds, rounded to the nearest millisecond.

    Raises:
        OpenTSDBValueError: If the timestamp is not a finite number.
    """
    parsed = parse_number(seconds, "timestamp")
    if not math.isfinite(parsed):
        raise OpenTSDBValueError(f"Invalid timestamp: {seconds!r}")
    return round(parsed * MILLISECONDS_PER_SECOND)


def ms_to_seconds(milliseconds: int) -> int:
    """
    Convert Unix milliseconds to whole seconds.

    Args:
        milliseconds: Unix timestamp or duration in milliseconds.

    Returns:
        Whole seconds, truncated toward zero.
    """
    whole = abs(milliseconds) // MILLISECONDS_PER_SECOND
    return whole if milliseconds >= 0 else -whole
