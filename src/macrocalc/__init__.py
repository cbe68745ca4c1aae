"""macrocalc: calorie, macro and weight log calculator for the terminal."""

__version__ = "0.1.0"
