"""Tests for session state and persistence after each change."""

from __future__ import annotations

import pytest

from macrocalc.db.store import LOGS_KEY, PROFILE_KEY, THEME_KEY
from macrocalc.errors import ValidationError
from macrocalc.profiles.models import ActivityLevel, Profile, Sex
from macrocalc.session import CalculatorSession


class TestOpen:
    """Tests for loading persisted state."""

    def test_defaults_on_empty_store(self, store) -> None:
        session = CalculatorSession.open(store)

        assert session.profile == Profile()
        assert len(session.logs) == 0
        assert session.dark_mode is False
        assert session.result is None

    def test_loads_saved_records(self, store) -> None:
        store.save(PROFILE_KEY, {"age": 30, "sex": "female", "weight": 60, "height": 165,
                                 "activity": "moderate"})
        store.save(LOGS_KEY, [{"date": "1/2/2025", "weight": 60.5, "notes": "x"}])
        store.save(THEME_KEY, True)

        session = CalculatorSession.open(store)

        assert session.profile.sex is Sex.FEMALE
        assert session.profile.activity_level is ActivityLevel.MODERATE
        assert session.logs.entries[0].notes == "x"
        assert session.dark_mode is True

    def test_profile_of_wrong_shape_gives_defaults(self, store) -> None:
        store.save(PROFILE_KEY, [30, "male", 70])

        assert CalculatorSession.open(store).profile == Profile()

    def test_log_items_of_wrong_shape_are_skipped(self, store) -> None:
        store.save(LOGS_KEY, [{"date": "1/2/2025", "weight": 60.5, "notes": ""}, 5, "x"])

        session = CalculatorSession.open(store)

        assert [entry.weight for entry in session.logs] == [60.5]

    def test_log_of_wrong_shape_starts_empty(self, store) -> None:
        store.save(LOGS_KEY, {"date": "1/2/2025", "weight": 60.5})

        assert len(CalculatorSession.open(store).logs) == 0

    @pytest.mark.parametrize("stored", ["false", "true", 1, 0, [True]])
    def test_theme_flag_must_be_boolean(self, store, stored) -> None:
        store.save(THEME_KEY, stored)

        assert CalculatorSession.open(store).dark_mode is False


class TestProfileAndEstimate:
    """Tests for profile edits and estimates."""

    def test_update_profile_persists(self, store) -> None:
        session = CalculatorSession.open(store)
        session.update_profile(age=30, weight=70)

        reopened = CalculatorSession.open(store)
        assert reopened.profile.age == 30
        assert reopened.profile.weight == 70.0
        assert reopened.profile.height is None

    def test_result_is_a_snapshot(self, store) -> None:
        session = CalculatorSession.open(store)
        session.update_profile(age=30, weight=70, height=175)
        result = session.calculate()

        session.update_profile(weight=90)

        assert session.result is result
        assert session.result.energy_target == 2009
        assert session.calculate().energy_target != 2009

    def test_calculate_incomplete_profile(self, store) -> None:
        session = CalculatorSession.open(store)
        session.update_profile(age=30)

        with pytest.raises(ValidationError):
            session.calculate()
        assert session.result is None


class TestLogs:
    """Tests for weight log operations."""

    def test_add_log_persists(self, store, fixed_today) -> None:
        session = CalculatorSession.open(store, today=fixed_today)
        session.add_log(70.2, " morning ")

        assert store.load(LOGS_KEY) == [{"date": "1/1/2025", "weight": 70.2, "notes": "morning"}]

    def test_invalid_log_not_persisted(self, store) -> None:
        session = CalculatorSession.open(store)
        with pytest.raises(ValidationError):
            session.add_log(0)
        assert store.load(LOGS_KEY, None) is None

    def test_delete_log_persists(self, store, fixed_today) -> None:
        session = CalculatorSession.open(store, today=fixed_today)
        session.add_log(70.0)
        session.add_log(71.0)

        removed = session.delete_log(0)

        assert removed is not None and removed.weight == 71.0
        assert [r["weight"] for r in store.load(LOGS_KEY)] == [70.0]

    def test_delete_missing_position_is_quiet(self, store, fixed_today) -> None:
        session = CalculatorSession.open(store, today=fixed_today)
        session.add_log(70.0)

        assert session.delete_log(5) is None
        assert len(session.logs) == 1
        assert len(store.load(LOGS_KEY)) == 1

    def test_chart_series_oldest_first(self, store, fixed_today) -> None:
        session = CalculatorSession.open(store, today=fixed_today)
        for weight in (80.0, 79.0, 78.0):
            session.add_log(weight)

        assert [w for _, w in session.chart_series()] == [80.0, 79.0, 78.0]


class TestTheme:
    """Tests for the theme flag."""

    def test_toggle_persists(self, store) -> None:
        session = CalculatorSession.open(store)

        assert session.toggle_theme() is True
        assert CalculatorSession.open(store).dark_mode is True
        assert session.toggle_theme() is False
        assert store.load(THEME_KEY) is False
