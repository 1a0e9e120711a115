###########EXTERNAL IMPORTS############

from typing import TypeVar, Set, Iterable, Iterator, Hashable

#######################################

#############LOCAL IMPORTS#############

from util.debug import LoggerManager
from model.struct.time_window import TimeWindow
from model.struct.timed_entry import TimedEntry
import util.functions.clock as clock

#######################################

T = TypeVar("T", bound=Hashable)


class WindowedSet(TimeWindow[T]):
    """
    Set of hashable values that expire after a fixed time window.

    Useful for deduplication over a recent interval and other time based
    caches. Expired values are purged on read, rather than on insert.

    Uniqueness is kept over the (timestamp, value) pair. Inserting a value that
    is already stored, at a different instant, adds a second storage entry
    instead of refreshing the first one:

    - `len()` and `iter()` count and yield every storage entry, so such a
      value shows up once per instant it was inserted at.
    - `drain()` collapses the values and returns each one once.

    Iteration order is unspecified.

    Args:
        window: Time to live of every value, as a timedelta or in seconds.
    """

    def __init__(self, window: clock.Duration):
        super().__init__(window)
        self._entries: Set[TimedEntry[T]] = set()

    @classmethod
    def from_collection(cls, initial: Iterable[T], window: clock.Duration) -> "WindowedSet[T]":
        """
        Creates a set holding the given values, all stamped with one shared instant.

        Repeated values in `initial` collapse into a single entry.

        Args:
            initial: Values to store.
            window: Time to live of every value, as a timedelta or in seconds.

        Returns:
            WindowedSet[T]: The populated set.
        """

        windowed_set = cls(window)
        instant = clock.now()
        windowed_set._entries = {TimedEntry(instant, value) for value in initial}
        return windowed_set

    def insert(self, value: T) -> None:
        """Inserts a value stamped with the current monotonic instant."""

        self._entries.add(TimedEntry(clock.now(), value))

    def insert_with_timestamp(self, value: T, timestamp: float) -> None:
        """
        Inserts a value stamped with a caller supplied instant.

        Args:
            value: The value to store.
            timestamp: Monotonic instant in seconds, as returned by `clock.now()`.
        """

        self._entries.add(TimedEntry(timestamp, value))

    def _purge(self) -> None:
        before = len(self._entries)
        self._entries = set(self._alive_entries(self._entries))
        self._log_eviction(before, len(self._entries))

    def _stored_count(self) -> int:
        return len(self._entries)

    def __len__(self) -> int:
        """Purges and returns the number of storage entries, not of unique values."""

        self._purge()
        return len(self._entries)

    def __contains__(self, value: object) -> bool:
        self._purge()
        return any(entry.value == value for entry in self._entries)

    def iter(self) -> Iterator[T]:
        """
        Purges and returns an iterator over the value of every storage entry.

        A value inserted at several instants still inside the window is yielded
        once per instant.

        Returns:
            Iterator[T]: Surviving values, in no particular order.
        """

        self._purge()
        snapshot = tuple(self._entries)
        return (entry.value for entry in snapshot)

    def entries(self) -> Set[TimedEntry[T]]:
        """Purges and returns the surviving storage entries with their timestamps."""

        self._purge()
        return set(self._entries)

    def drain(self) -> Set[T]:
        """
        Purges and hands the surviving values over to the caller.

        Values stored at several instants are returned once. The set is left
        empty.

        Returns:
            Set[T]: Unique surviving values.
        """

        self._purge()
        values = {entry.value for entry in self._entries}
        self._entries = set()

        logger = LoggerManager.get_logger(__name__)
        logger.debug(f"Drained {len(values)} unique values from {type(self).__name__}")
        return values

    def copy(self) -> "WindowedSet[T]":
        """Returns a shallow copy with the same window and stored entries, without purging."""

        duplicate: WindowedSet[T] = type(self)(self._window)
        duplicate._window_seconds = self._window_seconds
        duplicate._entries = set(self._entries)
        return duplicate

    def __copy__(self) -> "WindowedSet[T]":
        return self.copy()
