"""Ordered weight log with newest-first storage.

Entries are prepended on creation, so position 0 is always the most recent
entry. Chart data is derived on demand by reversing that order.
"""

from __future__ import annotations

import logging
from datetime import date
from typing import Any, Callable, Iterable, Iterator, Optional

from macrocalc.errors import LogIndexError, ValidationError
from macrocalc.profiles.models import coerce_number
from macrocalc.tracking.models import LogEntry

logger = logging.getLogger(__name__)

INVALID_WEIGHT_MESSAGE = "Please enter a valid weight for the log."


def locale_date_today() -> str:
    """Return today's date in the locale's date representation."""
    return date.today().strftime("%x")


class LogStore:
    """Insertion-ordered weight log, displayed newest first."""

    def __init__(
        self,
        entries: Optional[Iterable[LogEntry]] = None,
        today: Callable[[], str] = locale_date_today,
    ):
        """Initialize the store.

        Args:
            entries: Existing entries, newest first
            today: Returns the date string stamped on new entries
        """
        self._entries: list[LogEntry] = list(entries or [])
        self._today = today

    @property
    def entries(self) -> tuple[LogEntry, ...]:
        """Entries in display order (newest first)."""
        return tuple(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[LogEntry]:
        return iter(self.entries)

    def append(self, weight: Any, notes: Optional[str] = None) -> LogEntry:
        """Create an entry stamped with today's date and put it first.

        Args:
            weight: Weight in kg; numeric strings are accepted
            notes: Optional notes; whitespace-only notes are dropped

        Returns:
            The new entry

        Raises:
            ValidationError: If weight is missing or not a positive number
        """
        weight_kg = coerce_number(weight)
        if not weight_kg or weight_kg <= 0:
            raise ValidationError(INVALID_WEIGHT_MESSAGE)

        cleaned = notes.strip() if notes else ""
        entry = LogEntry(
            date=self._today(),
            weight=weight_kg,
            notes=cleaned or None,
        )
        self._entries.insert(0, entry)
        logger.debug("Logged %.1f kg on %s", entry.weight, entry.date)
        return entry

    def remove(self, index: int) -> LogEntry:
        """Remove the entry at a display position.

        Args:
            index: Position in newest-first order, starting at 0

        Returns:
            The removed entry

        Raises:
            LogIndexError: If no entry exists at that position. The log is
                left unchanged.
        """
        if index < 0 or index >= len(self._entries):
            raise LogIndexError(index, len(self._entries))
        return self._entries.pop(index)

    def to_chronological_series(self) -> list[tuple[str, float]]:
        """Return (date, weight) pairs oldest first, for trend charts."""
        return [(entry.date, entry.weight) for entry in reversed(self._entries)]

    def to_records(self) -> list[dict[str, Any]]:
        """Convert to the persisted JSON list (newest first)."""
        return [entry.to_record() for entry in self._entries]

    @classmethod
    def from_records(
        cls,
        records: Optional[list[dict[str, Any]]],
        today: Callable[[], str] = locale_date_today,
    ) -> "LogStore":
        """Build a store from persisted records, skipping unreadable ones."""
        if records and not isinstance(records, list):
            logger.warning("Stored log is not a list, starting empty: %r", records)
            records = []

        entries = []
        for record in records or []:
            if not isinstance(record, dict):
                logger.warning("Skipping unreadable log record %r", record)
                continue
            try:
                entries.append(LogEntry.from_record(record))
            except (KeyError, TypeError, ValueError) as e:
                logger.warning("Skipping unreadable log record %r: %s", record, e)
        return cls(entries, today=today)
