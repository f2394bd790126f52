"""Terminal size detection and linear scaling helpers."""

from __future__ import annotations

import os
import re
import sys

_DEFAULT_COLUMNS = 80
_DEFAULT_LINES = 24
_U16_MAX = 0xFFFF
_UNSIGNED = re.compile(r"\+?[0-9]+")


def _parse_dimension(name: str, fallback: int) -> int:
    value = os.environ.get(name)
    if value is None:
        return fallback
    if not _UNSIGNED.fullmatch(value):
        raise ValueError(f"invalid digit found in {name}: {value!r}")
    number = int(value)
    if number > _U16_MAX:
        raise ValueError(f"number too large to fit in target type: {name}={value!r}")
    return number


def get_terminal_size() -> tuple[int, int]:
    """Return ``(width, height)`` of the terminal, falling back to COLUMNS/LINES.

    When no terminal is attached, the ``COLUMNS`` and ``LINES`` environment
    variables are used, defaulting to 80 by 24. A malformed value raises
    :class:`ValueError`.
    """
    for fd in (1, 2, 0):
        try:
            size = os.get_terminal_size(fd)
        except (OSError, ValueError):
            continue
        return size.columns, size.lines

    width = _parse_dimension("COLUMNS", _DEFAULT_COLUMNS)
    height = _parse_dimension("LINES", _DEFAULT_LINES)
    return width, height


def scale(value: float, i_min: float, i_max: float, f_min: float, f_max: float) -> float:
    """Map ``value`` from the range ``[i_min, i_max]`` onto ``[f_min, f_max]``.

    A degenerate input range uses the width of the output range as the slope.
    """
    i_diff = i_max - i_min
    f_diff = f_max - f_min
    slope = f_diff if abs(i_diff) < sys.float_info.epsilon else f_diff / i_diff
    return f_min + slope * (value - i_min)