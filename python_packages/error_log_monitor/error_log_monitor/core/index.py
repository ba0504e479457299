# error_log_monitor/error_log_monitor/core/index.py
from bisect import bisect_left, bisect_right, insort
from typing import Dict, Iterable, List, Tuple

from .log import LogEntry
from .statistics import compute_statistics


class SeverityIndex:
    """Append-only store of log entries with type and timestamp access paths

    Entries live once in an insertion-ordered arena. The type and timestamp
    groups only hold positions into that arena. Timestamp keys are kept
    sorted so strict before/after lookups are a slice of the key list.
    """

    def __init__(self):
        self._entries: List[LogEntry] = []
        self._by_type: Dict[str, List[int]] = {}
        self._by_timestamp: Dict[int, List[int]] = {}
        self._timestamps: List[int] = []

    def __len__(self) -> int:
        return len(self._entries)

    @property
    def entries(self) -> Tuple[LogEntry, ...]:
        """Canonical log in insertion order"""
        return tuple(self._entries)

    def log_types(self) -> List[str]:
        return list(self._by_type)

    def timestamps(self) -> List[int]:
        """Distinct timestamps in ascending order"""
        return list(self._timestamps)

    def insert(self, timestamp: int, log_type: str, severity: float) -> LogEntry:
        """Add an entry to the log and to its type and timestamp groups

        Raises:
            InvalidLogTypeError: If log_type is too long; nothing is stored
        """
        entry = LogEntry.create(timestamp, log_type, severity)
        position = len(self._entries)
        self._entries.append(entry)

        self._by_type.setdefault(entry.log_type, []).append(position)

        group = self._by_timestamp.get(entry.timestamp)
        if group is None:
            group = self._by_timestamp[entry.timestamp] = []
            insort(self._timestamps, entry.timestamp)
        group.append(position)

        return entry

    def _resolve(self, positions: Iterable[int]) -> List[LogEntry]:
        return [self._entries[position] for position in positions]

    def _resolve_keys(self, keys: Iterable[int]) -> List[LogEntry]:
        return [
            self._entries[position]
            for key in keys
            for position in self._by_timestamp[key]
        ]

    def select_by_type(self, log_type: str) -> List[LogEntry]:
        return self._resolve(self._by_type.get(log_type, ()))

    def select_before_timestamp(self, timestamp: int) -> List[LogEntry]:
        """Entries with a timestamp strictly less than the given one"""
        end = bisect_left(self._timestamps, timestamp)
        return self._resolve_keys(self._timestamps[:end])

    def select_after_timestamp(self, timestamp: int) -> List[LogEntry]:
        """Entries with a timestamp strictly greater than the given one"""
        start = bisect_right(self._timestamps, timestamp)
        return self._resolve_keys(self._timestamps[start:])

    def select_by_type_before_timestamp(self, log_type: str, timestamp: int) -> List[LogEntry]:
        return [entry for entry in self.select_by_type(log_type) if entry.timestamp < timestamp]

    def select_by_type_after_timestamp(self, log_type: str, timestamp: int) -> List[LogEntry]:
        return [entry for entry in self.select_by_type(log_type) if entry.timestamp > timestamp]

    def query_by_type(self, log_type: str) -> str:
        return compute_statistics(self.select_by_type(log_type))

    def query_before_timestamp(self, timestamp: int) -> str:
        return compute_statistics(self.select_before_timestamp(timestamp))

    def query_after_timestamp(self, timestamp: int) -> str:
        return compute_statistics(self.select_after_timestamp(timestamp))

    def query_by_type_before_timestamp(self, log_type: str, timestamp: int) -> str:
        return compute_statistics(self.select_by_type_before_timestamp(log_type, timestamp))

    def query_by_type_after_timestamp(self, log_type: str, timestamp: int) -> str:
        return compute_statistics(self.select_by_type_after_timestamp(log_type, timestamp))
