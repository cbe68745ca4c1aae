"""Data models for weight tracking."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional


@dataclass(frozen=True)
class LogEntry:
    """A single weight log entry."""

    date: str           # locale-formatted creation date
    weight: float       # kg
    notes: Optional[str] = None

    def to_record(self) -> dict[str, Any]:
        """Convert to the persisted JSON record."""
        return {
            "date": self.date,
            "weight": self.weight,
            "notes": self.notes or "",
        }

    @classmethod
    def from_record(cls, record: dict[str, Any]) -> "LogEntry":
        """Build an entry from a persisted record."""
        notes = record.get("notes") or None
        return cls(
            date=str(record["date"]),
            weight=float(record["weight"]),
            notes=notes,
        )
