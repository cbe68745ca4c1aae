"""Tests for console formatters."""

from __future__ import annotations

import io
from pathlib import Path

import pytest
from rich.console import Console

from macrocalc.export.formatters import ConsoleFormatter
from macrocalc.export.themes import DARK_THEME, LIGHT_THEME
from macrocalc.profiles.body_calc import estimate
from macrocalc.profiles.models import Profile
from macrocalc.tracking.models import LogEntry


@pytest.fixture(params=[LIGHT_THEME, DARK_THEME], ids=["light", "dark"])
def console(request):
    return Console(theme=request.param, file=io.StringIO(), record=True, width=100)


class TestConsoleFormatter:
    """Tests for ConsoleFormatter output in both themes."""

    def test_results(self, console, reference_profile) -> None:
        ConsoleFormatter(console).format_results(estimate(reference_profile))
        text = console.export_text()

        assert "TDEE: 2009 kcal/day" in text
        assert "Water Intake: 2.45 L/day" in text
        assert "Salt Intake: 2.3 g/day" in text

    def test_profile_without_values(self, console) -> None:
        ConsoleFormatter(console).format_profile(Profile())
        text = console.export_text()

        assert "not set" in text
        assert "Little or no exercise, desk job." in text

    def test_logs_escape_markup(self, console) -> None:
        entries = [LogEntry(date="1/2/2025", weight=71.0, notes="[bold]cheat day")]
        ConsoleFormatter(console).format_logs(entries)

        assert "[bold]cheat day" in console.export_text()

    def test_chart_hint(self, console) -> None:
        ConsoleFormatter(console).format_chart_hint()
        assert "at least two" in console.export_text()

    def test_chart_saved_summary(self, console) -> None:
        series = [("1/1/2025", 72.0), ("1/2/2025", 71.2), ("1/3/2025", 70.5)]
        ConsoleFormatter(console).format_chart_saved(Path("progress.png"), series)
        text = console.export_text()

        assert "progress.png" in text
        assert "Entries: 3" in text
        assert "Change: -1.5 kg" in text
