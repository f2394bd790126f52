"""Column graphs drawn with sextant characters."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TextIO

from .ranges import GraphStyle
from .sextants import sextant_char

_ROWS = 3

DotGroup = tuple[bool, bool, bool]


def dot_pairs_from_array(line_set: Sequence[int], style: GraphStyle) -> list[DotGroup]:
    """Turn a pair of scaled values into a column of 3-dot groups, bottom first.

    Both ends are always lit; the dots between them are lit depending on
    ``style``. Values are 1-based dot positions.
    """
    if len(line_set) != 2:
        raise ValueError("Not yet supported")
    start, end = line_set
    if style is GraphStyle.AUTO:
        filled = start <= end
    else:
        filled = style is GraphStyle.FILLED
    start, end = min(start, end), max(start, end)
    if start < 1:
        raise ValueError(f"dot positions start at 1, got {start}")

    stem_length = end - start
    dots = [False] * (start - 1)
    dots.extend(i in (0, stem_length) or filled for i in range(stem_length + 1))

    remainder = len(dots) % _ROWS
    if remainder:
        dots.extend([False] * (_ROWS - remainder))
    return [tuple(dots[i : i + _ROWS]) for i in range(0, len(dots), _ROWS)]


def _dot(column: Sequence[DotGroup], row_index: int, block_row: int) -> bool:
    if row_index < len(column):
        group = column[row_index]
        if block_row < len(group):
            return bool(group[block_row])
    return False


def write_rows(
    writer: TextIO,
    column_pairs: Sequence[Sequence[Sequence[DotGroup]]],
    height: int,
) -> None:
    """Write ``height`` lines of sextant characters, top line first.

    Each entry of ``column_pairs`` holds the left and right dot columns of one
    character cell, each a list of 3-dot groups from the bottom up.
    """
    for row_index in reversed(range(height)):
        cells = []
        for pair in column_pairs:
            left = pair[0] if pair else ()
            right = pair[-1] if pair else ()
            block = [
                (_dot(left, row_index, block_row), _dot(right, row_index, block_row))
                for block_row in reversed(range(_ROWS))
            ]
            cells.append(sextant_char(block))
        writer.write("".join(cells) + "\n")