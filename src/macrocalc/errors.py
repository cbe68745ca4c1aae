"""Exception types raised by macrocalc."""

from __future__ import annotations


class MacrocalcError(Exception):
    """Base class for all macrocalc errors."""


class ValidationError(MacrocalcError, ValueError):
    """A required input is missing, non-numeric or not positive."""


class LogIndexError(MacrocalcError, IndexError):
    """A weight log position does not exist."""

    def __init__(self, index: int, size: int):
        self.index = index
        self.size = size
        super().__init__(f"No log entry at position {index} (log has {size} entries)")
