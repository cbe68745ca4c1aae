"""Application state with explicit persistence after each change.

The session owns the current profile, the last estimate, the weight log and
the theme flag. Every operation that changes one of the persisted records
writes that record back immediately; the records are independent of each
other and are saved separately.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Optional

from macrocalc.db.store import LOGS_KEY, PROFILE_KEY, THEME_KEY, KeyValueStore
from macrocalc.errors import LogIndexError
from macrocalc.profiles.body_calc import EstimateResult, estimate
from macrocalc.profiles.models import Profile
from macrocalc.tracking.log_store import LogStore, locale_date_today
from macrocalc.tracking.models import LogEntry

logger = logging.getLogger(__name__)


class CalculatorSession:
    """Profile, estimate, weight log and theme backed by a key-value store."""

    def __init__(
        self,
        store: KeyValueStore,
        profile: Profile,
        logs: LogStore,
        dark_mode: bool = False,
    ):
        self.store = store
        self.profile = profile
        self.logs = logs
        self.dark_mode = dark_mode
        self.result: Optional[EstimateResult] = None

    @classmethod
    def open(
        cls,
        store: KeyValueStore,
        today: Callable[[], str] = locale_date_today,
    ) -> "CalculatorSession":
        """Load all persisted records, falling back to defaults."""
        profile = Profile.from_record(store.load(PROFILE_KEY, None))
        logs = LogStore.from_records(store.load(LOGS_KEY, []), today=today)
        dark_mode = store.load(THEME_KEY, False)
        if not isinstance(dark_mode, bool):
            logger.warning("Stored theme flag %r is not a boolean, using light mode", dark_mode)
            dark_mode = False
        logger.debug(
            "Opened session: %d log entries, dark_mode=%s", len(logs), dark_mode
        )
        return cls(store, profile, logs, dark_mode)

    def update_profile(self, **fields: Any) -> Profile:
        """Merge changed fields into the profile and persist it.

        The last estimate is kept as computed; it is only replaced by the
        next call to ``calculate``.
        """
        self.profile = self.profile.with_changes(**fields)
        self.store.save(PROFILE_KEY, self.profile.to_record())
        return self.profile

    def calculate(self) -> EstimateResult:
        """Estimate targets for the current profile.

        Raises:
            ValidationError: If the profile is incomplete
        """
        self.result = estimate(self.profile)
        return self.result

    def add_log(self, weight: Any, notes: Optional[str] = None) -> LogEntry:
        """Add a weight entry and persist the log.

        Raises:
            ValidationError: If weight is missing or not positive
        """
        entry = self.logs.append(weight, notes)
        self.store.save(LOGS_KEY, self.logs.to_records())
        return entry

    def delete_log(self, index: int) -> Optional[LogEntry]:
        """Remove the entry at a display position and persist the log.

        Returns:
            The removed entry, or None when no entry exists at that position
        """
        try:
            entry = self.logs.remove(index)
        except LogIndexError as e:
            logger.debug("Nothing removed: %s", e)
            return None
        self.store.save(LOGS_KEY, self.logs.to_records())
        return entry

    def toggle_theme(self) -> bool:
        """Switch between light and dark mode and persist the choice."""
        self.dark_mode = not self.dark_mode
        self.store.save(THEME_KEY, self.dark_mode)
        return self.dark_mode

    def chart_series(self) -> list[tuple[str, float]]:
        """Weight series oldest first."""
        return self.logs.to_chronological_series()
