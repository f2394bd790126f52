"""Cartesian bounds of a set of points."""

from __future__ import annotations

import math
import sys
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Optional

_F64_MAX = sys.float_info.max


def _fmin(a: float, b: float) -> float:
    if math.isnan(a):
        return b
    if math.isnan(b):
        return a
    return a if a <= b else b


def _fmax(a: float, b: float) -> float:
    if math.isnan(a):
        return b
    if math.isnan(b):
        return a
    return a if a >= b else b


@dataclass(frozen=True)
class Point:
    """A point on the plane."""

    x: float
    y: float


@dataclass(frozen=True)
class CartesianBound:
    """The extent along one axis; the default is an empty, inverted range."""

    min: float = _F64_MAX
    max: float = -_F64_MAX

    def include(self, value: float) -> CartesianBound:
        """Return the bound widened to contain ``value``."""
        return CartesianBound(_fmin(self.min, value), _fmax(self.max, value))


@dataclass(frozen=True)
class CartesianBounds:
    """The extent along both axes."""

    x: CartesianBound
    y: CartesianBound

    @classmethod
    def from_limits(cls, x_min: float, x_max: float, y_min: float, y_max: float) -> CartesianBounds:
        return cls(CartesianBound(x_min, x_max), CartesianBound(y_min, y_max))

    @staticmethod
    def builder() -> CartesianBoundsBuilder:
        return CartesianBoundsBuilder()


@dataclass
class CartesianBoundsBuilder:
    """Bounds where any limit left as ``None`` is taken from the points."""

    x_min: Optional[float] = None
    x_max: Optional[float] = None
    y_min: Optional[float] = None
    y_max: Optional[float] = None

    def build_from_points(self, points: Iterable[Point]) -> CartesianBounds:
        """Fill in the missing limits from ``points``."""
        x = CartesianBound()
        y = CartesianBound()
        for point in points:
            x = x.include(point.x)
            y = y.include(point.y)
        return CartesianBounds.from_limits(
            x.min if self.x_min is None else self.x_min,
            x.max if self.x_max is None else self.x_max,
            y.min if self.y_min is None else self.y_min,
            y.max if self.y_max is None else self.y_max,
        )


def bounds_from_points(points: Iterable[Point]) -> CartesianBounds:
    """Return the smallest bounds containing every point."""
    return CartesianBoundsBuilder().build_from_points(points)