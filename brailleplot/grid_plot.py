"""Scatter plot of ``x y`` pairs read line by line."""

from __future__ import annotations

import re
from collections.abc import Iterable
from typing import TextIO

from .bounds import CartesianBoundsBuilder, Point
from .grid import CartesianPoints, FramebufferStyle, GridDots, render_dots
from .options import Options
from .ranges import CharType
from .util import get_terminal_size

_ASCII_WHITESPACE = re.compile(r"[ \t\n\x0c\r]")
_FLOAT_LITERAL = re.compile(
    r"[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf|infinity|nan)",
    re.IGNORECASE,
)


def _parse_float(text: str) -> float:
    if not _FLOAT_LITERAL.fullmatch(text):
        raise ValueError(f"invalid float literal: {text!r}")
    return float(text)


def grid_size(options: Options) -> tuple[int, int]:
    """Return the grid's ``(width, height)`` in dots.

    No values means a square that fits the terminal (leaving a line for the
    prompt unless the full height was asked for); one value is used for both
    sides; two are the width and the height.
    """
    grid = options.grid
    if grid is None:
        raise ValueError("no grid dimensions were requested")
    if not grid:
        columns, lines = get_terminal_size()
        width = columns * 2
        height = (lines - (0 if options.use_full_default_height else 1)) * 4
        square = min(width, height)
        return square, square
    if len(grid) == 1:
        return grid[0], grid[0]
    return grid[0], grid[1]


def read_points(reader: Iterable[str]) -> list[Point]:
    """Read one ``x y`` point per line, split at the first ASCII whitespace."""
    points = []
    for raw in reader:
        line = raw
        if line.endswith("\n"):
            line = line[:-1]
            if line.endswith("\r"):
                line = line[:-1]
        parts = _ASCII_WHITESPACE.split(line, maxsplit=1)
        if len(parts) != 2:
            raise ValueError(f"expected a line of the form 'x y', found {line!r}")
        x_text, y_text = parts
        points.append(Point(_parse_float(x_text), _parse_float(y_text)))
    return points


def _framebuffer_style(options: Options) -> FramebufferStyle:
    char_type = options.kind().char_type()
    if char_type is CharType.OCTANT:
        return FramebufferStyle.OCTANTS
    if char_type is CharType.BRAILLE:
        return FramebufferStyle.BRAILLE
    return FramebufferStyle.default()


def _cartesian_points(options: Options, points: list[Point]) -> CartesianPoints:
    if options.grid_bounds is None and options.x_bounds is None and options.y_bounds is None:
        return CartesianPoints.from_points(points)

    x_range = options.x_bounds if options.x_bounds is not None else options.grid_bounds
    y_range = options.y_bounds if options.y_bounds is not None else options.grid_bounds
    builder = CartesianBoundsBuilder(
        x_min=None if x_range is None else x_range.min,
        x_max=None if x_range is None else x_range.max,
        y_min=None if y_range is None else y_range.min,
        y_max=None if y_range is None else y_range.max,
    )
    return CartesianPoints(points, builder.build_from_points(points))


def print_graph(options: Options, reader: Iterable[str], writer: TextIO) -> None:
    """Plot the points read from ``reader`` and write the picture to ``writer``."""
    style = _framebuffer_style(options)
    width, height = grid_size(options)
    points = _cartesian_points(options, read_points(reader))

    grid = GridDots(width, height)
    grid.merge_points(points)
    writer.write(render_dots(grid.to_dots(), width, height, style))