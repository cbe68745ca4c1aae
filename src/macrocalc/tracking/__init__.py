"""Weight tracking.

Key components:
- LogEntry model (date, weight, optional notes)
- LogStore: newest-first log with chronological series for charting
"""

from __future__ import annotations

from macrocalc.tracking.log_store import LogStore
from macrocalc.tracking.models import LogEntry

__all__ = [
    "LogEntry",
    "LogStore",
]
