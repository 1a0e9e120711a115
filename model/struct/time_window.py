###########EXTERNAL IMPORTS############

import math
from abc import ABC, abstractmethod
from datetime import timedelta
from typing import TypeVar, Generic, Iterable, Iterator

#######################################

#############LOCAL IMPORTS#############

from util.debug import LoggerManager
from model.struct.timed_entry import TimedEntry
from model.struct.exceptions import WindowDurationError
import util.functions.clock as clock

#######################################

T = TypeVar("T")


class TimeWindow(ABC, Generic[T]):
    """
    Abstract base class for collections bounded by a sliding time window.

    Every stored value carries the monotonic instant it was recorded at.
    Entries whose age reaches the window are discarded lazily: subclasses run
    the eviction pass at the start of every observation (size, iteration,
    drain) and never on insertion.

    The window is fixed at construction. Instances are not thread-safe,
    observations mutate the storage and callers must serialize access.

    Args:
        window: Time to live of every entry, as a timedelta or in seconds.

    Raises:
        WindowDurationError: If the window is negative, not finite, too large or of an
            unsupported type.
    """

    def __init__(self, window: clock.Duration):
        self._window = TimeWindow._validate_window(window)
        self._window_seconds = clock.to_seconds(window)

    @staticmethod
    def _validate_window(window: clock.Duration) -> timedelta:
        """
        Validates a window duration and normalizes it to a timedelta.

        Args:
            window: A timedelta or a number of seconds.

        Returns:
            timedelta: The window duration.

        Raises:
            WindowDurationError: If the window is negative, not finite, too large or of an
                unsupported type.
        """

        try:
            seconds = clock.to_seconds(window)
        except (TypeError, OverflowError, ValueError) as e:
            raise WindowDurationError(str(e)) from e

        if math.isnan(seconds) or math.isinf(seconds) or seconds < 0:
            raise WindowDurationError(f"Window duration must be finite and non-negative, got {window}")

        if isinstance(window, timedelta):
            return window

        try:
            return timedelta(seconds=seconds)
        except OverflowError as e:
            raise WindowDurationError(f"Window duration {window} is out of range") from e

    def window_duration(self) -> timedelta:
        """Returns the time to live applied to every entry."""

        return self._window

    def _is_alive(self, entry: TimedEntry[T], current: float) -> bool:
        """
        Checks whether an entry is still inside the window.

        Args:
            entry: The stored entry.
            current: Monotonic instant the check is made at.

        Returns:
            bool: True if the entry age is strictly below the window.
        """

        return clock.elapsed(entry.timestamp, current) < self._window_seconds

    def _alive_entries(self, entries: Iterable[TimedEntry[T]]) -> Iterator[TimedEntry[T]]:
        """Yields the entries still inside the window, reading the clock once."""

        current = clock.now()
        return (entry for entry in entries if self._is_alive(entry, current))

    def _log_eviction(self, before: int, after: int) -> None:
        if before == after:
            return

        logger = LoggerManager.get_logger(__name__)
        logger.debug(f"{type(self).__name__} evicted {before - after} expired entries, {after} retained")

    @abstractmethod
    def _purge(self) -> None:
        """Discards every entry whose age reached the window."""
        pass

    @abstractmethod
    def __len__(self) -> int:
        pass

    @abstractmethod
    def iter(self) -> Iterator[T]:
        pass

    def __iter__(self) -> Iterator[T]:
        return self.iter()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(window={self._window!r}, stored={self._stored_count()})"

    @abstractmethod
    def _stored_count(self) -> int:
        """Returns the storage size without running eviction."""
        pass
