"""Sextant (2x3 dot) block characters."""

from __future__ import annotations

from collections.abc import Sequence

_SEXTANT_BASE = 0x1FB00
_SPECIAL = {0: " ", 21: "\u258c", 42: "\u2590", 63: "\u2588"}


def _build_table() -> tuple[str, ...]:
    table = []
    skipped = 0
    for index in range(64):
        special = _SPECIAL.get(index)
        if special is not None:
            table.append(special)
            skipped += 1
        else:
            table.append(chr(_SEXTANT_BASE + index - skipped))
    return tuple(table)


_TABLE = _build_table()


def sextant_char(dots: Sequence[Sequence[bool]]) -> str:
    """Return the character for three rows of ``(left, right)`` dots, top row first."""
    if len(dots) != 3 or any(len(row) != 2 for row in dots):
        raise ValueError("sextant needs 3 rows of 2 dots")
    index = sum(
        1 << bit
        for bit, lit in enumerate(dot for row in dots for dot in row)
        if lit
    )
    return _TABLE[index]