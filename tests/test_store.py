"""Tests for the JSON key-value store."""

from __future__ import annotations

import sqlite3

from macrocalc.db.store import LOGS_KEY, PROFILE_KEY, THEME_KEY, KeyValueStore


class TestKeyValueStore:
    """Tests for load/save round-trips."""

    def test_missing_key_returns_default(self, store) -> None:
        assert store.load(PROFILE_KEY, {"sex": "male"}) == {"sex": "male"}
        assert store.load(LOGS_KEY, []) == []
        assert store.load(THEME_KEY, False) is False

    def test_round_trip(self, store) -> None:
        profile = {"age": 30, "sex": "male", "weight": 70.0, "height": 175.0, "activity": "active"}
        logs = [{"date": "1/2/2025", "weight": 71.0, "notes": ""}]

        store.save(PROFILE_KEY, profile)
        store.save(LOGS_KEY, logs)
        store.save(THEME_KEY, True)

        assert store.load(PROFILE_KEY) == profile
        assert store.load(LOGS_KEY) == logs
        assert store.load(THEME_KEY) is True

    def test_overwrite(self, store) -> None:
        store.save(THEME_KEY, True)
        store.save(THEME_KEY, False)
        assert store.load(THEME_KEY, True) is False

    def test_persists_across_instances(self, temp_db) -> None:
        KeyValueStore(temp_db).save(LOGS_KEY, [{"date": "d", "weight": 1.0, "notes": ""}])
        assert KeyValueStore(temp_db).load(LOGS_KEY, []) == [
            {"date": "d", "weight": 1.0, "notes": ""}
        ]

    def test_unreadable_value_returns_default(self, store, temp_db) -> None:
        with sqlite3.connect(temp_db) as conn:
            conn.execute(
                "INSERT INTO kv_store (key, value) VALUES (?, ?)", (LOGS_KEY, "{not json")
            )
        conn.close()
        assert store.load(LOGS_KEY, []) == []

    def test_null_value_returns_default(self, store) -> None:
        store.save(PROFILE_KEY, None)
        assert store.load(PROFILE_KEY, {}) == {}

    def test_creates_missing_directory(self, tmp_path) -> None:
        db_path = tmp_path / "nested" / "macrocalc.db"
        KeyValueStore(db_path).save(THEME_KEY, True)

        assert db_path.exists()
        assert KeyValueStore(db_path).load(THEME_KEY) is True
