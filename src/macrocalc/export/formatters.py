"""Console formatters for profiles, estimates, weight logs and charts."""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Sequence

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from macrocalc.export.themes import console_for
from macrocalc.profiles.body_calc import EstimateResult
from macrocalc.profiles.models import ACTIVITY_DESCRIPTIONS, ACTIVITY_LABELS, Profile
from macrocalc.tracking.models import LogEntry


def _value_or_dash(value: Optional[float], unit: str) -> str:
    if value is None:
        return "[secondary]not set[/secondary]"
    return f"{value:g} {unit}"


class ConsoleFormatter:
    """Format results as Rich renderables for terminal display."""

    def __init__(self, console: Optional[Console] = None):
        """Initialize the formatter.

        Args:
            console: Rich console for output. If None, creates a light-mode one.
        """
        self.console = console or console_for(dark_mode=False)

    def format_profile(self, profile: Profile) -> None:
        """Print the stored profile with the activity level description."""
        lines = [
            f"[bold]Age:[/bold] {_value_or_dash(profile.age, 'years')}",
            f"[bold]Sex:[/bold] {profile.sex.value.capitalize()}",
            f"[bold]Weight:[/bold] {_value_or_dash(profile.weight, 'kg')}",
            f"[bold]Height:[/bold] {_value_or_dash(profile.height, 'cm')}",
            f"[bold]Activity Level:[/bold] {ACTIVITY_LABELS[profile.activity_level]}",
            f"[secondary]{ACTIVITY_DESCRIPTIONS[profile.activity_level]}[/secondary]",
        ]
        self.console.print(Panel("\n".join(lines), title="Profile", style="text"))

    def format_results(self, result: EstimateResult) -> None:
        """Print the estimate panel."""
        lines = [
            f"[bold]TDEE:[/bold] {result.energy_target} kcal/day",
            f"[bold]Protein:[/bold] {result.protein_grams} g/day",
            f"[bold]Fats:[/bold] {result.fat_grams} g/day",
            f"[bold]Carbs:[/bold] {result.carb_grams} g/day",
            f"[bold]Water Intake:[/bold] {result.water_liters} L/day",
            f"[bold]Salt Intake:[/bold] {result.salt_grams} g/day",
        ]
        self.console.print(
            Panel(Text.from_markup("\n".join(lines), justify="center"),
                  title="Results", style="results")
        )

    def format_logs(self, entries: Sequence[LogEntry]) -> None:
        """Print the weight log newest first, with removal positions."""
        if not entries:
            self.console.print("[secondary]No log entries yet[/secondary]")
            return

        table = Table(title="Logs", style="text")
        table.add_column("#", justify="right", style="secondary")
        table.add_column("Date", style="primary")
        table.add_column("Weight", justify="right")
        table.add_column("Notes", style="secondary")

        for index, entry in enumerate(entries):
            table.add_row(
                str(index),
                escape(entry.date),
                f"{entry.weight:g} kg",
                escape(entry.notes) if entry.notes else "",
            )

        self.console.print(table)

    def format_chart_hint(self) -> None:
        """Print the hint shown while the log is too short to chart."""
        self.console.print(
            "[secondary]Add at least two log entries to see weight progress[/secondary]"
        )

    def format_chart_saved(
        self,
        output: Path,
        series: Sequence[tuple[str, float]],
    ) -> None:
        """Print where the weight chart was written with a short summary."""
        (first_date, first_weight), (last_date, last_weight) = series[0], series[-1]
        lines = [
            f"[bold]Saved:[/bold] {escape(str(output))}",
            f"[bold]Entries:[/bold] {len(series)}",
            f"[bold]From:[/bold] {first_weight:g} kg on {escape(first_date)}",
            f"[bold]To:[/bold] {last_weight:g} kg on {escape(last_date)}",
            f"[bold]Change:[/bold] {last_weight - first_weight:+.1f} kg",
        ]
        self.console.print(Panel("\n".join(lines), title="Weight Progress", style="text"))
