"""CLI interface using Typer."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from macrocalc.app_logging import configure_logging
from macrocalc.config import get_settings, reload_settings
from macrocalc.db import get_store, set_store
from macrocalc.errors import ValidationError
from macrocalc.export import ConsoleFormatter, console_for, save_weight_chart
from macrocalc.profiles import (
    ACTIVITY_DESCRIPTIONS,
    ACTIVITY_LABELS,
    ACTIVITY_MULTIPLIERS,
    ActivityLevel,
    Profile,
    Sex,
    result_to_dict,
)
from macrocalc.session import CalculatorSession

app = typer.Typer(
    help="Macro & calorie calculator with a weight log",
    no_args_is_help=True,
)

profile_app = typer.Typer(help="Show and edit the biometric profile")
log_app = typer.Typer(help="Add, list and remove weight log entries")
theme_app = typer.Typer(help="Switch between light and dark mode")

app.add_typer(profile_app, name="profile")
app.add_typer(log_app, name="log")
app.add_typer(theme_app, name="theme")


# ============================================================================
# Helpers
# ============================================================================


def output_json(response: dict, file=None) -> None:
    """Output JSON response to stdout or file."""
    json_str = json.dumps(response, indent=2)
    if file:
        file.write(json_str)
    else:
        print(json_str)


def open_session() -> tuple[CalculatorSession, Console]:
    """Load the persisted session and a console in its theme."""
    session = CalculatorSession.open(get_store())
    return session, console_for(session.dark_mode)


def fail(console: Console, command: str, message: str, json_output: bool) -> None:
    """Report a user error and exit with status 1."""
    if json_output:
        output_json({"success": False, "command": command, "errors": [message]})
    else:
        console.print(f"[danger]{message}[/danger]")
    raise typer.Exit(1)


def profile_to_dict(profile: Profile) -> dict:
    """Convert a profile to the JSON output shape."""
    return {
        "age": profile.age,
        "sex": profile.sex.value,
        "weight_kg": profile.weight,
        "height_cm": profile.height,
        "activity_level": profile.activity_level.value,
        "activity_description": ACTIVITY_DESCRIPTIONS[profile.activity_level],
    }


@app.callback()
def main(
    config: Optional[Path] = typer.Option(
        None, "--config", "-c", help="Path to config.yaml (default: ~/.macrocalc/config.yaml)"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Load settings and configure logging before any command."""
    if config is not None:
        settings = reload_settings(config)
        set_store(None)
    else:
        settings = get_settings()
    configure_logging("DEBUG" if verbose else settings.logging.level)


# ============================================================================
# Profile Commands
# ============================================================================


@profile_app.command("show")
def profile_show(
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """Show the stored profile."""
    session, console = open_session()

    if json_output:
        output_json({
            "success": True,
            "command": "profile show",
            "data": profile_to_dict(session.profile),
            "human_summary": f"{session.profile.sex.value}, activity {session.profile.activity_level.value}",
        })
    else:
        ConsoleFormatter(console).format_profile(session.profile)


@profile_app.command("set")
def profile_set(
    age: Optional[int] = typer.Option(None, "--age", help="Age in years"),
    sex: Optional[Sex] = typer.Option(None, "--sex", case_sensitive=False, help="Biological sex"),
    weight: Optional[float] = typer.Option(None, "--weight", help="Weight in kg"),
    height: Optional[float] = typer.Option(None, "--height", help="Height in cm"),
    activity: Optional[ActivityLevel] = typer.Option(
        None, "--activity", case_sensitive=False, help="Activity level"
    ),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """Update profile fields (only the ones given)."""
    session, console = open_session()
    profile = session.update_profile(
        age=age, sex=sex, weight=weight, height=height, activity_level=activity
    )

    if json_output:
        output_json({
            "success": True,
            "command": "profile set",
            "data": profile_to_dict(profile),
            "human_summary": "Profile updated",
        })
    else:
        console.print("[success]Profile updated[/success]")
        ConsoleFormatter(console).format_profile(profile)


# ============================================================================
# Estimate Commands
# ============================================================================


@app.command()
def calculate(
    age: Optional[int] = typer.Option(None, "--age", help="Age in years"),
    sex: Optional[Sex] = typer.Option(None, "--sex", case_sensitive=False, help="Biological sex"),
    weight: Optional[float] = typer.Option(None, "--weight", help="Weight in kg"),
    height: Optional[float] = typer.Option(None, "--height", help="Height in cm"),
    activity: Optional[ActivityLevel] = typer.Option(
        None, "--activity", case_sensitive=False, help="Activity level"
    ),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """Calculate TDEE, macros, water and salt targets.

    Options override the stored profile and are saved, like editing the form.
    """
    session, console = open_session()

    overrides = {
        "age": age, "sex": sex, "weight": weight, "height": height,
        "activity_level": activity,
    }
    if any(value is not None for value in overrides.values()):
        session.update_profile(**overrides)

    try:
        result = session.calculate()
    except ValidationError as e:
        fail(console, "calculate", str(e), json_output)
        return

    if json_output:
        output_json({
            "success": True,
            "command": "calculate",
            "data": {
                "profile": profile_to_dict(session.profile),
                "results": result_to_dict(result),
            },
            "human_summary": (
                f"TDEE {result.energy_target} kcal/day, P{result.protein_grams} "
                f"F{result.fat_grams} C{result.carb_grams}"
            ),
        })
    else:
        ConsoleFormatter(console).format_results(result)


@app.command()
def activities(
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """List activity levels with their multipliers."""
    if json_output:
        output_json({
            "success": True,
            "command": "activities",
            "data": [
                {
                    "activity_level": level.value,
                    "label": ACTIVITY_LABELS[level],
                    "multiplier": ACTIVITY_MULTIPLIERS[level],
                    "description": ACTIVITY_DESCRIPTIONS[level],
                }
                for level in ActivityLevel
            ],
        })
        return

    _, console = open_session()
    table = Table(title="Activity Levels")
    table.add_column("Level", style="primary")
    table.add_column("Multiplier", justify="right")
    table.add_column("Description", style="secondary")
    for level in ActivityLevel:
        table.add_row(level.value, f"{ACTIVITY_MULTIPLIERS[level]}", ACTIVITY_DESCRIPTIONS[level])
    console.print(table)


# ============================================================================
# Weight Log Commands
# ============================================================================


@log_app.command("add")
def log_add(
    weight: str = typer.Argument(..., help="Weight in kg (put '--' before a negative value)"),
    notes: Optional[str] = typer.Option(None, "--notes", "-n", help="Optional notes"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """Add a weight entry dated today.

    The weight must be a positive number; anything else is rejected
    with an error and exit status 1.
    """
    session, console = open_session()

    try:
        entry = session.add_log(weight, notes)
    except ValidationError as e:
        fail(console, "log add", str(e), json_output)
        return

    if json_output:
        output_json({
            "success": True,
            "command": "log add",
            "data": entry.to_record(),
            "human_summary": f"Logged {entry.weight:g} kg on {entry.date}",
        })
    else:
        console.print(f"[success]Logged:[/success] {entry.weight:g} kg on {entry.date}")


@log_app.command("list")
def log_list(
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """List weight entries, newest first."""
    session, console = open_session()

    if json_output:
        output_json({
            "success": True,
            "command": "log list",
            "data": {"entries": session.logs.to_records()},
            "human_summary": f"{len(session.logs)} entries",
        })
    else:
        ConsoleFormatter(console).format_logs(session.logs.entries)


@log_app.command("remove")
def log_remove(
    index: int = typer.Argument(..., help="Position as shown by 'log list' (0 = newest)"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """Remove a weight entry by position.

    A position with no entry is ignored.
    """
    session, console = open_session()
    entry = session.delete_log(index)

    if json_output:
        output_json({
            "success": True,
            "command": "log remove",
            "data": {"removed": entry.to_record() if entry else None},
            "human_summary": f"{len(session.logs)} entries left",
        })
    elif entry is not None:
        console.print(f"[success]Removed:[/success] {entry.weight:g} kg on {entry.date}")


@app.command()
def chart(
    output: Optional[Path] = typer.Option(
        None, "--output", "-o", help="Image file to write (.png, .svg, .pdf)"
    ),
    width: Optional[float] = typer.Option(None, "--width", "-w", help="Chart width in inches"),
    height: Optional[float] = typer.Option(None, "--height", "-h", help="Chart height in inches"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """Save a weight progress chart, oldest entry first.

    Needs at least two log entries.
    """
    session, console = open_session()
    series = session.chart_series()
    display = get_settings().display

    written = None
    if len(series) >= 2:
        written = save_weight_chart(
            series,
            output or display.chart_output,
            dark_mode=session.dark_mode,
            width=width or display.chart_width,
            height=height or display.chart_height,
            dpi=display.chart_dpi,
        )

    if json_output:
        output_json({
            "success": True,
            "command": "chart",
            "data": {
                "series": [{"date": d, "weight": w} for d, w in series],
                "output": str(written) if written else None,
            },
            "human_summary": f"{len(series)} points",
        })
        return

    formatter = ConsoleFormatter(console)
    if written is None:
        formatter.format_chart_hint()
    else:
        formatter.format_chart_saved(written, series)


# ============================================================================
# Theme Commands
# ============================================================================


@theme_app.command("show")
def theme_show(
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """Show the current theme."""
    session, console = open_session()
    mode = "dark" if session.dark_mode else "light"

    if json_output:
        output_json({
            "success": True,
            "command": "theme show",
            "data": {"dark_mode": session.dark_mode},
            "human_summary": f"{mode} mode",
        })
    else:
        console.print(f"[text]Theme: [primary]{mode}[/primary][/text]")


@theme_app.command("toggle")
def theme_toggle(
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """Switch between light and dark mode."""
    session, _ = open_session()
    dark_mode = session.toggle_theme()
    mode = "dark" if dark_mode else "light"

    if json_output:
        output_json({
            "success": True,
            "command": "theme toggle",
            "data": {"dark_mode": dark_mode},
            "human_summary": f"Switched to {mode} mode",
        })
    else:
        console_for(dark_mode).print(f"[success]Switched to {mode} mode[/success]")


if __name__ == "__main__":
    app()
