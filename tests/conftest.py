"""Pytest fixtures for macrocalc tests."""

from __future__ import annotations

import tempfile
from pathlib import Path

import pytest

from macrocalc.config.settings import Settings
from macrocalc.db.store import KeyValueStore, set_store
from macrocalc.profiles.models import ActivityLevel, Profile, Sex


@pytest.fixture
def temp_db():
    """Path to a temporary database file."""
    with tempfile.NamedTemporaryFile(suffix=".db", delete=False) as f:
        db_path = Path(f.name)

    yield db_path

    # Cleanup
    db_path.unlink(missing_ok=True)


@pytest.fixture
def store(temp_db):
    """Key-value store on the temporary database."""
    return KeyValueStore(temp_db)


@pytest.fixture
def fixed_today():
    """Date stamper that returns consecutive fake dates."""
    dates = iter(f"1/{day}/2025" for day in range(1, 32))
    return lambda: next(dates)


@pytest.fixture
def reference_profile():
    """30 year old male, 70 kg, 175 cm, sedentary."""
    return Profile(
        age=30,
        sex=Sex.MALE,
        weight=70,
        height=175,
        activity_level=ActivityLevel.SEDENTARY,
    )


@pytest.fixture
def cli_store(store, monkeypatch, tmp_path):
    """Point the CLI at the temporary store with default settings."""
    settings = Settings()
    settings.display.chart_output = tmp_path / "weight_progress.png"
    monkeypatch.setattr("macrocalc.config.settings._settings", settings)
    set_store(store)
    yield store
    set_store(None)
