###########EXTERNAL IMPORTS############

from dataclasses import dataclass
from typing import TypeVar, Generic

#######################################

#############LOCAL IMPORTS#############

#######################################

T = TypeVar("T")


@dataclass(frozen=True)
class TimedEntry(Generic[T]):
    """
    A stored value together with the monotonic instant it was recorded at.

    Entries are immutable and hashable when their value is, so a set of entries
    is unique over the pair (timestamp, value).

    Attributes:
        timestamp: Monotonic instant in seconds, as returned by `clock.now()`.
        value: The stored value.
    """

    timestamp: float
    value: T
