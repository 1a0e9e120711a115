###########EXTERNAL IMPORTS############

from typing import TypeVar, List, Iterator

#######################################

#############LOCAL IMPORTS#############

from util.debug import LoggerManager
from model.struct.time_window import TimeWindow
from model.struct.timed_entry import TimedEntry
import util.functions.clock as clock

#######################################

T = TypeVar("T")


class WindowedSequence(TimeWindow[T]):
    """
    Append-only sequence whose values expire after a fixed time window.

    Useful for rolling windows and other time based collections. Values need no
    hashing or equality and duplicates are kept. Expired values are purged on
    read, rather than on insert, and surviving values keep their insertion
    order.

    Args:
        window: Time to live of every value, as a timedelta or in seconds.
    """

    def __init__(self, window: clock.Duration):
        super().__init__(window)
        self._entries: List[TimedEntry[T]] = []

    def push(self, value: T) -> None:
        """Appends a value stamped with the current monotonic instant."""

        self._entries.append(TimedEntry(clock.now(), value))

    def push_with_timestamp(self, value: T, timestamp: float) -> None:
        """
        Appends a value stamped with a caller supplied instant.

        The instant is not validated. A value older than the window is dropped
        by the next observation.

        Args:
            value: The value to store.
            timestamp: Monotonic instant in seconds, as returned by `clock.now()`.
        """

        self._entries.append(TimedEntry(timestamp, value))

    def _purge(self) -> None:
        before = len(self._entries)
        self._entries = list(self._alive_entries(self._entries))
        self._log_eviction(before, len(self._entries))

    def _stored_count(self) -> int:
        return len(self._entries)

    def __len__(self) -> int:
        self._purge()
        return len(self._entries)

    def iter(self) -> Iterator[T]:
        """
        Purges and returns an iterator over the surviving values.

        The iterator walks a snapshot taken after eviction, so values pushed
        while it is consumed are not yielded.

        Returns:
            Iterator[T]: Surviving values in insertion order.
        """

        self._purge()
        snapshot = tuple(self._entries)
        return (entry.value for entry in snapshot)

    def entries(self) -> List[TimedEntry[T]]:
        """Purges and returns the surviving entries with their timestamps, in insertion order."""

        self._purge()
        return list(self._entries)

    def drain(self) -> List[T]:
        """
        Purges and hands the surviving values over to the caller.

        The sequence is left empty.

        Returns:
            List[T]: Surviving values in insertion order.
        """

        self._purge()
        values = [entry.value for entry in self._entries]
        self._entries = []

        logger = LoggerManager.get_logger(__name__)
        logger.debug(f"Drained {len(values)} values from {type(self).__name__}")
        return values

    def copy(self) -> "WindowedSequence[T]":
        """Returns a shallow copy with the same window and stored entries, without purging."""

        duplicate: WindowedSequence[T] = type(self)(self._window)
        duplicate._window_seconds = self._window_seconds
        duplicate._entries = list(self._entries)
        return duplicate

    def __copy__(self) -> "WindowedSequence[T]":
        return self.copy()
