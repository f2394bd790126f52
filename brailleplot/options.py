"""Command line options and the first-line modeline."""

from __future__ import annotations

import argparse
import json
import math
import os
import re
import sys
from collections import deque
from collections.abc import Callable, Iterable, Iterator, Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import NoReturn, Optional, TextIO, Union

from .input import LineValue, ParseFloatError, parse_value
from .ranges import (
    BoundsError,
    GraphKind,
    GraphRange,
    GraphStyle,
    Orientation,
    parse_range,
)
from .util import get_terminal_size

_VERSION = "0.23.0"
_PROG = "braille"
_ENV_FULL_HEIGHT = "BRAILLE_USE_FULL_DEFAULT_HEIGHT"
_F64_MAX = sys.float_info.max
_U8_MAX = 0xFF
_U16_MAX = 0xFFFF
_ASCII_WHITESPACE = re.compile(r"[ \t\n\x0c\r]+")

_TRUTHY = frozenset({"y", "yes", "t", "true", "on", "1"})
_FALSY = frozenset({"n", "no", "f", "false", "off", "0"})

# Options whose value may start with a hyphen, mapped to their long spelling.
_HYPHEN_VALUE_OPTIONS = {
    "-r": "--range",
    "--range": "--range",
    "--bounds": "--range",
    "-G": "--grid-bounds",
    "--grid-bounds": "--grid-bounds",
    "-x": "--x-bounds",
    "--x-bounds": "--x-bounds",
    "-y": "--y-bounds",
    "--y-bounds": "--y-bounds",
}
_GRID_OPTION = "-g"
_MAX_GRID_VALUES = 2


class OptionsError(ValueError):
    """The command line or modeline could not be used."""


@dataclass(frozen=True)
class FirstLine:
    """The first input line read for ``--modeline``.

    ``value`` is ``None`` when the line was a modeline, otherwise it holds the
    raw line, which is then the first value to graph.
    """

    value: Optional[str] = None

    @property
    def is_modeline(self) -> bool:
        return self.value is None


@dataclass(frozen=True)
class Config:
    """Settings a graph is drawn with, once the bounds are known."""

    kind: GraphKind
    style: GraphStyle
    minimum: float
    maximum: float
    size: int


def _fmin(current: float, value: float) -> float:
    if math.isnan(value):
        return current
    if math.isnan(current):
        return value
    return min(current, value)


def _fmax(current: float, value: float) -> float:
    if math.isnan(value):
        return current
    if math.isnan(current):
        return value
    return max(current, value)


def _line_values(line: LineValue) -> Iterable[Optional[float]]:
    if isinstance(line, (tuple, list)):
        return line
    return (line,)


@dataclass
class Options:
    """Everything given on the command line (or in a modeline)."""

    range: GraphRange = field(default_factory=GraphRange)
    per: int = 1
    style: GraphStyle = GraphStyle.FILLED
    grid: Optional[list[int]] = None
    grid_bounds: Optional[GraphRange] = None
    x_bounds: Optional[GraphRange] = None
    y_bounds: Optional[GraphRange] = None
    modeline: bool = False
    graph_kind: GraphKind = GraphKind.BRAILLE_BARS
    bars: bool = False
    columns: bool = False
    braille: bool = False
    braille_columns: bool = False
    file: Optional[Path] = None
    use_full_default_height: bool = False
    size: Optional[int] = None
    first_line: Optional[FirstLine] = None

    def kind(self) -> GraphKind:
        """Return the kind of graph, honouring the shortcut flags."""
        if self.bars:
            return GraphKind.BARS
        if self.braille:
            return GraphKind.BRAILLE_BARS
        if self.braille_columns:
            return GraphKind.BRAILLE_COLUMNS
        if self.columns:
            return GraphKind.COLUMNS
        return self.graph_kind

    def get_values(
        self, lines: Iterable[LineValue]
    ) -> Union[Iterator[LineValue], list[LineValue]]:
        """Return the lines to graph, filling in any missing bound from them.

        With both bounds known, bar graphs get the lines lazily and column
        graphs get them collected. Otherwise every line is read, the missing
        bounds are taken from the values seen and the range is updated.
        """
        low, high = self.range.min, self.range.max
        if low is not None and high is not None:
            if self.kind().orientation() is Orientation.HORIZONTAL:
                return iter(lines)
            return list(lines)

        minimum = _F64_MAX if low is None else low
        maximum = -_F64_MAX if high is None else high
        collected = []
        for line in lines:
            for value in _line_values(line):
                if value is None:
                    continue
                if low is None:
                    minimum = _fmin(minimum, value)
                if high is None:
                    maximum = _fmax(maximum, value)
            collected.append(line)

        self.range = GraphRange(minimum, maximum)
        return collected


class _Parser(argparse.ArgumentParser):
    def error(self, message: str) -> NoReturn:
        raise OptionsError(f"{self.prog}: error: {message}")


def _range_arg(text: str) -> GraphRange:
    try:
        return parse_range(text)
    except BoundsError as error:
        raise argparse.ArgumentTypeError(str(error)) from error


def _int_in(low: int, high: int) -> Callable[[str], int]:
    def convert(text: str) -> int:
        try:
            number = int(text)
        except ValueError as error:
            raise argparse.ArgumentTypeError(f"invalid number {text!r}") from error
        if not low <= number <= high:
            raise argparse.ArgumentTypeError(f"{number} is not in {low}..={high}")
        return number

    return convert


_u16 = _int_in(0, _U16_MAX)


def _grid_arg(text: str) -> list[int]:
    if text == "":
        return []
    return [_u16(part) for part in text.split(",")]


def _style_arg(text: str) -> GraphStyle:
    try:
        return GraphStyle(text)
    except ValueError as error:
        choices = ", ".join(style.value for style in GraphStyle)
        raise argparse.ArgumentTypeError(
            f"invalid value {text!r} (possible values: {choices})"
        ) from error


def _kind_arg(text: str) -> GraphKind:
    try:
        return GraphKind(text)
    except ValueError as error:
        choices = ", ".join(kind.value for kind in GraphKind)
        raise argparse.ArgumentTypeError(
            f"invalid value {text!r} (possible values: {choices})"
        ) from error


def _build_parser() -> _Parser:
    parser = _Parser(
        prog=_PROG,
        allow_abbrev=False,
        description="Print a graph to the terminal using block or braille characters",
    )
    parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {_VERSION}")
    parser.add_argument(
        "-r", "--range", "--bounds", dest="range", type=_range_arg, metavar="[MIN]:[MAX]",
        help="the input's minimum and maximum values",
    )
    parser.add_argument(
        "-p", "--per", type=_int_in(1, _U8_MAX), default=1,
        help="number of values per line of input",
    )
    parser.add_argument(
        "-s", "--style", type=_style_arg, default=GraphStyle.FILLED,
        help="how the space between multiple series should be handled",
    )
    parser.add_argument(
        _GRID_OPTION, dest="grid", nargs="?", const="", type=_grid_arg, metavar="WIDTH[,HEIGHT]",
        help="dimensions of the braille grid in dots",
    )
    parser.add_argument(
        "-G", "--grid-bounds", dest="grid_bounds", type=_range_arg,
        help="shorthand for setting -x and -y to the same value",
    )
    parser.add_argument("-x", "--x-bounds", dest="x_bounds", type=_range_arg)
    parser.add_argument("-y", "--y-bounds", dest="y_bounds", type=_range_arg)
    parser.add_argument(
        "-m", "--modeline", action="store_true",
        help="interpret arguments from the very first line of the input",
    )
    kinds = parser.add_mutually_exclusive_group()
    kinds.add_argument("-k", "--kind", dest="graph_kind", type=_kind_arg, help="the kind of graph")
    kinds.add_argument("-B", dest="bars", action="store_true", help="shortcut for --kind bars")
    kinds.add_argument("-C", dest="columns", action="store_true", help="shortcut for --kind columns")
    kinds.add_argument("-b", dest="braille", action="store_true", help="shortcut for --kind braille")
    kinds.add_argument(
        "-c", dest="braille_columns", action="store_true",
        help="shortcut for --kind braille-columns",
    )
    parser.add_argument("-f", "--file", type=Path, help="path to read from")
    parser.add_argument(
        "--use-full-default-height", dest="use_full_default_height", action="store_true",
        help="use the full height if none given",
    )
    parser.add_argument(
        "size", nargs="?", type=_int_in(1, _U16_MAX),
        help="how wide or tall the graph can be",
    )
    return parser


def _normalise(args: Sequence[str]) -> list[str]:
    """Attach hyphen-led option values and group the values of ``-g``."""
    pending = deque(args)
    normalised: list[str] = []
    while pending:
        arg = pending.popleft()
        if arg == "--":
            normalised.append(arg)
            normalised.extend(pending)
            break
        if arg in _HYPHEN_VALUE_OPTIONS and pending:
            normalised.append(f"{_HYPHEN_VALUE_OPTIONS[arg]}={pending.popleft()}")
        elif arg == _GRID_OPTION:
            values = []
            while pending and len(values) < _MAX_GRID_VALUES and not pending[0].startswith("-"):
                values.append(pending.popleft())
            normalised.append(_GRID_OPTION + ",".join(values))
        else:
            normalised.append(arg)
    return normalised


def _env_full_height() -> bool:
    value = os.environ.get(_ENV_FULL_HEIGHT)
    if not value:
        return False
    lowered = value.lower()
    if lowered in _TRUTHY:
        return True
    if lowered in _FALSY:
        return False
    raise OptionsError(
        f"{_PROG}: error: invalid value {value!r} for {_ENV_FULL_HEIGHT}: expected a boolean"
    )


def _parse_args(args: Sequence[str]) -> Options:
    parser = _build_parser()
    namespace = parser.parse_args(_normalise(args))

    if namespace.modeline:
        conflicts = [
            name
            for name, given in (
                ("--range", namespace.range is not None),
                ("--file", namespace.file is not None),
                (
                    "--kind",
                    namespace.graph_kind is not None
                    or namespace.bars
                    or namespace.columns
                    or namespace.braille
                    or namespace.braille_columns,
                ),
                ("[SIZE]", namespace.size is not None),
            )
            if given
        ]
        if conflicts:
            parser.error(f"the argument '--modeline' cannot be used with {', '.join(conflicts)}")

    use_full = namespace.use_full_default_height or _env_full_height()

    return Options(
        range=GraphRange() if namespace.range is None else namespace.range,
        per=namespace.per,
        style=namespace.style,
        grid=namespace.grid,
        grid_bounds=namespace.grid_bounds,
        x_bounds=namespace.x_bounds,
        y_bounds=namespace.y_bounds,
        modeline=namespace.modeline,
        graph_kind=GraphKind.default() if namespace.graph_kind is None else namespace.graph_kind,
        bars=namespace.bars,
        columns=namespace.columns,
        braille=namespace.braille,
        braille_columns=namespace.braille_columns,
        file=namespace.file,
        use_full_default_height=use_full,
        size=namespace.size,
    )


def _is_float(text: str) -> bool:
    if text == "null":
        return False
    try:
        parse_value(text)
    except ParseFloatError:
        return False
    return True


def parse_modeline(line: str) -> Optional[list[str]]:
    """Split a modeline into arguments, or return ``None`` if it is a value.

    A line starting with ``#`` gives no arguments. A line starting with
    ``braille`` gives the words after it, up to any ``#`` comment. Anything
    else that is neither empty nor a number raises :class:`OptionsError`.
    """
    if line.startswith("#"):
        return []
    if line.startswith(_PROG):
        text = line.split("#", 1)[0]
        while text.startswith(_PROG):
            text = text[len(_PROG):]
        return [word for word in _ASCII_WHITESPACE.split(text) if word]
    if line and not _is_float(line):
        quoted = json.dumps(line, ensure_ascii=False)
        raise OptionsError(
            f"{_PROG}: error: Invalid modeline: {quoted}\n\n"
            'The first line should be the string "braille", followed by spaced separated options'
        )
    return None


def parse_options(
    args: Optional[Iterable[str]] = None, stdin: Optional[TextIO] = None
) -> Options:
    """Parse command line arguments (without the program name).

    With ``--modeline`` the first line of ``stdin`` is read and, if it is a
    modeline, replaces the command line. When no size is given it is taken from
    the terminal, leaving a line for the prompt on vertical graphs unless the
    full height was asked for.
    """
    argv = sys.argv[1:] if args is None else list(args)
    options = _parse_args(argv)
    use_full_default_height = options.use_full_default_height

    if options.modeline:
        stream = sys.stdin if stdin is None else stdin
        first_line = stream.readline()
        modeline_args = parse_modeline(first_line.strip())
        if modeline_args is not None:
            options = _parse_args(modeline_args)
            options.first_line = FirstLine()
        else:
            options.first_line = FirstLine(first_line)
        options.use_full_default_height = use_full_default_height
    else:
        options.first_line = None

    if options.kind() in (GraphKind.BARS, GraphKind.COLUMNS) and options.per > 1:
        raise OptionsError("Multiple values per line not supported for this graph kind")

    if options.size is None:
        width, height = get_terminal_size()
        if options.kind().orientation() is Orientation.HORIZONTAL:
            options.size = width
        elif options.use_full_default_height:
            options.size = height
        else:
            options.size = height - 1

    return options


def config_from_options(options: Options) -> Config:
    """Build the drawing configuration; the bounds and size must be known."""
    low, high = options.range.min, options.range.max
    if low is None or high is None:
        raise OptionsError("The bounds should already have been calculated")
    if options.size is None:
        raise OptionsError("The graph size should already have been determined")
    return Config(
        kind=options.kind(),
        style=options.style,
        minimum=low,
        maximum=high,
        size=options.size,
    )