"""Scatter plots of ``x y`` points on a grid of dots."""

from __future__ import annotations

import math
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass, field
from enum import Enum

from .bounds import CartesianBounds, Point, bounds_from_points
from .util import scale

_DOT_MAX = 0xFFFF
_BRAILLE_BASE = 0x2800
_OCTANT_BASE = 0x1CD00


class FramebufferStyle(Enum):
    """The family of characters a grid of dots is drawn with."""

    BRAILLE = "braille"
    OCTANTS = "octants"

    @classmethod
    def default(cls) -> FramebufferStyle:
        return cls.BRAILLE


@dataclass
class CartesianPoints:
    """Points together with the bounds they are scaled from."""

    points: list[Point]
    bounds: CartesianBounds

    @classmethod
    def from_points(cls, points: Iterable[Point]) -> CartesianPoints:
        """Collect ``points`` and take the bounds from them."""
        collected = list(points)
        return cls(collected, bounds_from_points(collected))

    def __iter__(self) -> Iterator[Point]:
        return iter(self.points)

    def __len__(self) -> int:
        return len(self.points)


def _to_dot_unit(value: float) -> int:
    """Round half away from zero and saturate into an unsigned 16-bit value."""
    if math.isnan(value):
        return 0
    if math.isinf(value):
        return _DOT_MAX if value > 0 else 0
    rounded = math.floor(abs(value) + 0.5)
    rounded = rounded if value >= 0 else -rounded
    return max(0, min(_DOT_MAX, rounded))


@dataclass
class GridDots:
    """A ``width`` by ``height`` grid of dots, origin at the bottom left."""

    width: int
    height: int
    _lit: set[tuple[int, int]] = field(default_factory=set, init=False, repr=False)

    def __post_init__(self) -> None:
        if self.width < 1 or self.height < 1:
            raise ValueError("grid dimensions must be at least 1")

    def merge_points(self, points: CartesianPoints) -> None:
        """Light the dot nearest to each point, scaled by the points' bounds."""
        x_bound = points.bounds.x
        y_bound = points.bounds.y
        for point in points:
            x = _to_dot_unit(scale(point.x, x_bound.min, x_bound.max, 0.0, float(self.width - 1)))
            y = _to_dot_unit(scale(point.y, y_bound.min, y_bound.max, 0.0, float(self.height - 1)))
            self._lit.add((x, y))

    def to_dots(self) -> list[bool]:
        """Return every dot row by row, top row first, left to right."""
        return [
            (x, y) in self._lit
            for y in reversed(range(self.height))
            for x in range(self.width)
        ]


_OCTANT_SPECIAL = {
    0: " ",
    1: "\U0001CEA8",
    2: "\U0001CEAB",
    3: "\U0001FB82",
    5: "\u2598",
    10: "\u259d",
    15: "\u2580",
    20: "\U0001FBE6",
    40: "\U0001FBE7",
    63: "\U0001FB85",
    64: "\U0001CEA3",
    80: "\u2596",
    85: "\u258c",
    90: "\u259e",
    95: "\u259b",
    128: "\U0001CEA0",
    160: "\u2597",
    165: "\u259a",
    170: "\u2590",
    175: "\u259c",
    192: "\u2582",
    240: "\u2584",
    245: "\u2599",
    250: "\u259f",
    252: "\u2586",
    255: "\u2588",
}


def _build_octants() -> tuple[str, ...]:
    table = []
    next_code = _OCTANT_BASE
    for mask in range(256):
        special = _OCTANT_SPECIAL.get(mask)
        if special is None:
            table.append(chr(next_code))
            next_code += 1
        else:
            table.append(special)
    return tuple(table)


_OCTANTS = _build_octants()

# Bit of each dot in a braille cell, indexed [row][column].
_BRAILLE_BITS = ((0, 3), (1, 4), (2, 5), (6, 7))


def _braille_cell(cell: Sequence[Sequence[bool]]) -> str:
    mask = sum(
        1 << _BRAILLE_BITS[row][col]
        for row, pair in enumerate(cell)
        for col, lit in enumerate(pair)
        if lit
    )
    return chr(_BRAILLE_BASE + mask)


def _octant_cell(cell: Sequence[Sequence[bool]]) -> str:
    mask = sum(
        1 << (row * 2 + col)
        for row, pair in enumerate(cell)
        for col, lit in enumerate(pair)
        if lit
    )
    return _OCTANTS[mask]


def render_dots(
    dots: Sequence[bool],
    width: int,
    height: int,
    style: FramebufferStyle = FramebufferStyle.BRAILLE,
) -> str:
    """Draw ``dots`` (rows top first) as 2x4 character cells, one line per cell row.

    Every line ends with a newline. Cells running past the grid are padded
    with unlit dots.
    """
    if len(dots) != width * height:
        raise ValueError(f"expected {width * height} dots, found {len(dots)}")
    draw = _octant_cell if style is FramebufferStyle.OCTANTS else _braille_cell

    def dot(x: int, y: int) -> bool:
        return x < width and y < height and bool(dots[y * width + x])

    lines = []
    for top in range(0, height, 4):
        cells = [
            draw([(dot(left, top + row), dot(left + 1, top + row)) for row in range(4)])
            for left in range(0, width, 2)
        ]
        lines.append("".join(cells) + "\n")
    return "".join(lines)