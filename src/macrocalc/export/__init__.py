"""Terminal output and the weight chart: formatters, themes and plotting."""

from macrocalc.export.chart import build_weight_figure, save_weight_chart
from macrocalc.export.formatters import ConsoleFormatter
from macrocalc.export.themes import console_for

__all__ = ["ConsoleFormatter", "build_weight_figure", "console_for", "save_weight_chart"]
