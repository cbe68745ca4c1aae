"""Local persistence for profile, weight logs and theme."""

from macrocalc.db.store import (
    LOGS_KEY,
    PROFILE_KEY,
    THEME_KEY,
    KeyValueStore,
    get_store,
    set_store,
)

__all__ = [
    "KeyValueStore",
    "LOGS_KEY",
    "PROFILE_KEY",
    "THEME_KEY",
    "get_store",
    "set_store",
]
