"""Input parsing, options, bounds and renderers for terminal graphs drawn with braille, sextant and octant characters."""

__version__ = "0.23.0"

__all__ = [
    "bounds",
    "grid",
    "grid_plot",
    "input",
    "options",
    "ranges",
    "sextant_columns",
    "sextants",
    "util",
]