###########EXTERNAL IMPORTS############

import time
from datetime import timedelta
from decimal import Decimal
from numbers import Real
from typing import Optional, Union

#######################################

#############LOCAL IMPORTS#############

#######################################

Duration = Union[timedelta, Real, Decimal]


def now() -> float:
    """
    Returns the current monotonic instant.

    The reference point is arbitrary, only differences between two readings
    are meaningful. The clock is not affected by system time adjustments.

    Returns:
        float: Monotonic instant in seconds.
    """

    return time.monotonic()


def elapsed(since: float, current: Optional[float] = None) -> float:
    """
    Returns the time elapsed since a monotonic instant.

    Args:
        since: Monotonic instant in seconds.
        current: Instant to measure against. Reads the clock when omitted.

    Returns:
        float: Elapsed seconds, saturated at 0.0 for instants in the future.
    """

    if current is None:
        current = now()

    return max(0.0, current - since)


def to_seconds(duration: Duration) -> float:
    """
    Converts a duration to seconds.

    Args:
        duration: A timedelta or a number of seconds (any real number or Decimal).

    Returns:
        float: Duration in seconds.

    Raises:
        TypeError: If the duration is neither a timedelta nor a real number.
        OverflowError: If the number is too large to convert to a float.
    """

    if isinstance(duration, timedelta):
        return duration.total_seconds()

    if isinstance(duration, bool) or not isinstance(duration, (Real, Decimal)):
        raise TypeError(f"Duration must be a timedelta or a number of seconds, got {type(duration).__name__}")

    return float(duration)


def ms_to_seconds(ms: Union[int, float]) -> float:
    """Converts milliseconds to seconds."""

    return ms / 1000
