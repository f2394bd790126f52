"""Parsing of numeric input lines."""

from __future__ import annotations

import json
import re
import sys
from collections.abc import Iterable, Iterator
from os import PathLike
from typing import IO, Optional, Union

Value = Optional[float]
LineValue = Union[Value, tuple[Value, ...], list[Value]]

_ASCII_WHITESPACE = re.compile(r"[ \t\n\x0c\r]")
_FLOAT_LITERAL = re.compile(
    r"[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf|infinity|nan)",
    re.IGNORECASE,
)


class LineParseError(ValueError):
    """A line of input could not be parsed."""


class ParseFloatError(LineParseError):
    """A field was not a valid floating point number."""

    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(
            f"Failed to parse {json.dumps(value, ensure_ascii=False)}: invalid float literal"
        )


class WrongNumValuesError(LineParseError):
    """A line held a different number of fields than expected."""

    def __init__(self, expected: int, actual: int) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(f"Expected line with {expected} values, found {actual}")


def parse_value(text: str) -> Value:
    """Parse one field: empty or ``null`` gives ``None``, otherwise a float."""
    if text == "" or text == "null":
        return None
    if not _FLOAT_LITERAL.fullmatch(text):
        raise ParseFloatError(text)
    return float(text)


def parse_line(text: str, per: int) -> LineValue:
    """Parse a line holding ``per`` values.

    With ``per == 1`` the whole line is one value and a single value is
    returned; otherwise the line is split on its first ``per - 1`` ASCII
    whitespace characters and a tuple of exactly ``per`` values is returned.
    """
    if per < 1:
        raise ValueError("per must be at least 1")
    if per == 1:
        return parse_value(text)
    values = tuple(parse_value(part) for part in _ASCII_WHITESPACE.split(text, maxsplit=per - 1))
    if len(values) != per:
        raise WrongNumValuesError(per, len(values))
    return values


def parse_variable_line(text: str) -> list[Value]:
    """Parse a line holding any number of whitespace separated values."""
    return [parse_value(part) for part in _ASCII_WHITESPACE.split(text)]


def _reader_lines(reader: Iterable[str]) -> Iterator[str]:
    try:
        for raw in reader:
            if raw.endswith("\n"):
                raw = raw[:-1]
                if raw.endswith("\r"):
                    raw = raw[:-1]
            yield raw
    except (OSError, UnicodeDecodeError):
        return


def iter_lines(
    first_line: Optional[str], reader: Iterable[str], per: Optional[int] = 1
) -> Iterator[LineValue]:
    """Yield parsed lines, starting with ``first_line`` if given.

    ``per=None`` parses each line as a variable number of values. Reading stops
    quietly at the first read error; a malformed line raises
    :class:`LineParseError` when it is reached.
    """
    if first_line is not None:
        yield _parse(first_line, per)
    for text in _reader_lines(reader):
        yield _parse(text, per)


def _parse(text: str, per: Optional[int]) -> LineValue:
    return parse_variable_line(text) if per is None else parse_line(text, per)


def _file_lines(handle: IO[str], first_line: Optional[str], per: Optional[int]) -> Iterator[LineValue]:
    with handle:
        yield from iter_lines(first_line, handle, per)


def open_lines(
    first_line: Optional[str],
    path: Union[str, PathLike, None],
    per: Optional[int] = 1,
) -> Iterator[LineValue]:
    """Parse lines from ``path``, or from standard input for ``None`` or ``-``.

    The file is opened immediately, so a missing file raises :class:`OSError`
    here rather than on iteration.
    """
    if path is None or str(path) == "-":
        return iter_lines(first_line, sys.stdin, per)
    handle = open(path, encoding="utf-8")
    return _file_lines(handle, first_line, per)