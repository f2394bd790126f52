"""Graph ranges, styles and kinds."""

from __future__ import annotations

import math
import re
import sys
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Optional

_F64_MAX = sys.float_info.max
_FLOAT_LITERAL = re.compile(
    r"[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf|infinity|nan)",
    re.IGNORECASE,
)


class BoundsError(ValueError):
    """A range or pair of bounds is malformed."""


def _format_float(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    if value == 0:
        return "-0" if math.copysign(1.0, value) < 0 else "0"
    if value.is_integer():
        return str(int(value))
    return format(Decimal(repr(value)), "f")


def validate_bounds(minimum: float, maximum: float) -> None:
    """Raise :class:`BoundsError` unless ``minimum <= maximum``."""
    if minimum > maximum:
        low = "f64::MAX" if minimum == _F64_MAX else _format_float(minimum)
        high = "f64::MIN" if maximum == -_F64_MAX else _format_float(maximum)
        raise BoundsError(f"min < max failed: {low} < {high}")


@dataclass(frozen=True)
class GraphRange:
    """Optional lower and upper limits of the values to graph."""

    min: Optional[float] = None
    max: Optional[float] = None

    def __post_init__(self) -> None:
        if self.min is not None and self.max is not None:
            validate_bounds(self.min, self.max)

    def __str__(self) -> str:
        low = "" if self.min is None else _format_float(self.min)
        high = "" if self.max is None else _format_float(self.max)
        return f"{low}:{high}"


def _parse_bound(text: str) -> Optional[float]:
    if text == "":
        return None
    if not _FLOAT_LITERAL.fullmatch(text):
        raise BoundsError(f"invalid float literal: {text!r}")
    return float(text)


def parse_range(text: str) -> GraphRange:
    """Parse ``[MIN]:[MAX]``; either side may be left empty."""
    if text == ":":
        return GraphRange()
    if ":" not in text:
        raise BoundsError("Range should contain ':'")
    low, high = text.split(":", 1)
    return GraphRange(_parse_bound(low), _parse_bound(high))


_STYLE_ALIASES = {"a": "auto", "l": "line", "f": "filled"}


class GraphStyle(Enum):
    """How the space between series is drawn."""

    AUTO = "auto"
    LINE = "line"
    FILLED = "filled"

    @classmethod
    def _missing_(cls, value: object) -> Optional[GraphStyle]:
        name = _STYLE_ALIASES.get(value) if isinstance(value, str) else None
        return cls(name) if name is not None else None

    @classmethod
    def default(cls) -> GraphStyle:
        return cls.FILLED


class Orientation(Enum):
    """Which way the values of a graph run."""

    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


class CharType(Enum):
    """The family of characters a graph is drawn with."""

    BLOCK = "block"
    COLUMN = "column"
    BRAILLE = "braille"
    HALF_BLOCK = "half-block"
    SEXTANT = "sextant"
    OCTANT = "octant"


_KIND_ALIASES = {
    "B": "bars",
    "C": "columns",
    "mb": "mini-bars",
    "mc": "mini-columns",
    "b": "braille",
    "braille-bars": "braille",
    "c": "braille-columns",
    "o": "octant-bars",
}


class GraphKind(Enum):
    """The kind of graph to print."""

    BARS = "bars"
    COLUMNS = "columns"
    MINI_BARS = "mini-bars"
    MINI_COLUMNS = "mini-columns"
    BRAILLE_BARS = "braille"
    BRAILLE_COLUMNS = "braille-columns"
    SEXTANT_BARS = "sextant-bars"
    SEXTANT_COLUMNS = "sextant-columns"
    OCTANT_BARS = "octant-bars"
    OCTANT_COLUMNS = "octant-columns"

    @classmethod
    def _missing_(cls, value: object) -> Optional[GraphKind]:
        name = _KIND_ALIASES.get(value) if isinstance(value, str) else None
        return cls(name) if name is not None else None

    @classmethod
    def default(cls) -> GraphKind:
        return cls.BRAILLE_BARS

    def orientation(self) -> Orientation:
        """Return whether the graph runs across or up the screen."""
        if self in _HORIZONTAL_KINDS:
            return Orientation.HORIZONTAL
        return Orientation.VERTICAL

    def char_type(self) -> CharType:
        """Return the character family used to draw this kind."""
        return _CHAR_TYPES[self]


_HORIZONTAL_KINDS = frozenset(
    {
        GraphKind.BARS,
        GraphKind.MINI_BARS,
        GraphKind.BRAILLE_BARS,
        GraphKind.SEXTANT_BARS,
        GraphKind.OCTANT_BARS,
    }
)

_CHAR_TYPES = {
    GraphKind.BARS: CharType.BLOCK,
    GraphKind.COLUMNS: CharType.COLUMN,
    GraphKind.BRAILLE_BARS: CharType.BRAILLE,
    GraphKind.BRAILLE_COLUMNS: CharType.BRAILLE,
    GraphKind.MINI_BARS: CharType.HALF_BLOCK,
    GraphKind.MINI_COLUMNS: CharType.HALF_BLOCK,
    GraphKind.OCTANT_BARS: CharType.OCTANT,
    GraphKind.OCTANT_COLUMNS: CharType.OCTANT,
    GraphKind.SEXTANT_BARS: CharType.SEXTANT,
    GraphKind.SEXTANT_COLUMNS: CharType.SEXTANT,
}