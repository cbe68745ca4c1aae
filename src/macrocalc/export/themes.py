"""Light and dark console themes."""

from __future__ import annotations

from typing import Optional

from rich.console import Console
from rich.theme import Theme

LIGHT_THEME = Theme(
    {
        "text": "#222222",
        "secondary": "italic #555555",
        "primary": "bold #007bff",
        "success": "bold #28a745",
        "danger": "bold #dd3333",
        "results": "#222222 on #e9f0ff",
        "chart.line": "#007bff",
        "chart.axis": "#cccccc",
    }
)

DARK_THEME = Theme(
    {
        "text": "#eeeeee",
        "secondary": "italic #bbbbbb",
        "primary": "bold #0d6efd",
        "success": "bold #198754",
        "danger": "bold #dd3333",
        "results": "#eeeeee on #1f2a38",
        "chart.line": "#007bff",
        "chart.axis": "#444444",
    }
)


def theme_for(dark_mode: bool) -> Theme:
    """Return the theme for the given mode."""
    return DARK_THEME if dark_mode else LIGHT_THEME


def console_for(dark_mode: bool, width: Optional[int] = None) -> Console:
    """Create a console styled for light or dark mode."""
    return Console(theme=theme_for(dark_mode), width=width)
