"""Weight progress chart rendered with matplotlib.

The vertical axis spans two units below the lowest and above the highest
value, so a flat series still gets a visible band.
"""

from __future__ import annotations

from pathlib import Path
from typing import Sequence

from matplotlib.figure import Figure

AXIS_PADDING = 2.0

LINE_COLOR = "#007bff"

# (background, text, grid) per theme
CHART_COLORS = {
    False: ("#fefefe", "#222222", "#cccccc"),
    True: ("#121212", "#eeeeee", "#444444"),
}


def axis_bounds(values: Sequence[float]) -> tuple[float, float]:
    """Return (low, high) of the vertical axis for the given values."""
    return min(values) - AXIS_PADDING, max(values) + AXIS_PADDING


def build_weight_figure(
    series: Sequence[tuple[str, float]],
    dark_mode: bool = False,
    width: float = 6.0,
    height: float = 4.0,
) -> Figure:
    """Plot a chronological (date, weight) series as a line chart.

    Args:
        series: Points oldest first
        dark_mode: Use the dark palette
        width: Figure width in inches
        height: Figure height in inches

    Returns:
        The matplotlib Figure

    Raises:
        ValueError: If the series has fewer than two points
    """
    if len(series) < 2:
        raise ValueError("A weight chart needs at least two entries")

    background, text, grid = CHART_COLORS[dark_mode]
    dates = [label for label, _ in series]
    weights = [value for _, value in series]
    positions = list(range(len(series)))

    fig = Figure(figsize=(width, height), dpi=100, facecolor=background)
    ax = fig.add_subplot(111)
    ax.set_facecolor(background)
    ax.grid(True, linestyle="--", color=grid, alpha=0.6)

    ax.plot(positions, weights, color=LINE_COLOR, linewidth=2, marker="o", markersize=4)
    ax.set_ylim(*axis_bounds(weights))
    ax.set_xticks(positions)
    ax.set_xticklabels(dates)

    ax.set_title("Weight Progress", color=text)
    ax.set_ylabel("Weight (kg)", color=text)
    ax.tick_params(colors=text)
    for spine in ax.spines.values():
        spine.set_color(grid)

    fig.autofmt_xdate()
    return fig


def save_weight_chart(
    series: Sequence[tuple[str, float]],
    output: Path,
    dark_mode: bool = False,
    width: float = 6.0,
    height: float = 4.0,
    dpi: int = 100,
) -> Path:
    """Render the series and write it to an image file.

    The format follows the file extension (``.png``, ``.svg``, ``.pdf``).

    Returns:
        The path written
    """
    fig = build_weight_figure(series, dark_mode=dark_mode, width=width, height=height)
    output.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(output, dpi=dpi, bbox_inches="tight", facecolor=fig.get_facecolor())
    return output
