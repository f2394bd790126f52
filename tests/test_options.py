import io
import os
from pathlib import Path

import pytest

from brailleplot.options import (
    Config,
    FirstLine,
    Options,
    OptionsError,
    config_from_options,
    parse_modeline,
    parse_options,
)
from brailleplot.ranges import BoundsError, GraphKind, GraphRange, GraphStyle

ENV = "BRAILLE_USE_FULL_DEFAULT_HEIGHT"


@pytest.fixture(autouse=True)
def _no_terminal(monkeypatch):
    def fake_terminal_size(fd=0):
        raise OSError("no terminal")

    monkeypatch.setattr(os, "get_terminal_size", fake_terminal_size)
    monkeypatch.setenv("COLUMNS", "50")
    monkeypatch.setenv("LINES", "20")
    monkeypatch.delenv(ENV, raising=False)


def _lines_then_error():
    yield 1.0
    raise RuntimeError("read too far")


def test_range_and_size():
    options = parse_options(["-r", "-3:4", "4"])
    assert options.range == GraphRange(-3.0, 4.0)
    assert options.size == 4
    assert options.kind() is GraphKind.BRAILLE_BARS
    assert options.style is GraphStyle.FILLED
    assert options.per == 1
    assert options.first_line is None


def test_bounds_alias_and_attached_value():
    assert parse_options(["--bounds", "-3:", "4"]).range == GraphRange(-3.0, None)
    assert parse_options(["-r-1:1", "4"]).range == GraphRange(-1.0, 1.0)


def test_backwards_range_rejected():
    with pytest.raises(OptionsError):
        parse_options(["-r", "3:2", "4"])


@pytest.mark.parametrize(
    "args, kind",
    [
        (["-B", "10"], GraphKind.BARS),
        (["-C", "10"], GraphKind.COLUMNS),
        (["-b", "10"], GraphKind.BRAILLE_BARS),
        (["-c", "10"], GraphKind.BRAILLE_COLUMNS),
        (["--kind", "sextant-columns", "10"], GraphKind.SEXTANT_COLUMNS),
        (["-k", "o", "10"], GraphKind.OCTANT_BARS),
        (["--kind", "mini-bars", "10"], GraphKind.MINI_BARS),
    ],
)
def test_kind_selection(args, kind):
    assert parse_options(args).kind() is kind


def test_kind_flags_are_exclusive():
    with pytest.raises(OptionsError):
        parse_options(["-B", "-C", "10"])


def test_multiple_values_rejected_for_block_kinds():
    with pytest.raises(OptionsError, match="Multiple values per line not supported"):
        parse_options(["-B", "-p", "2", "10"])


def test_per_two_allowed_for_braille():
    options = parse_options(["--per", "2", "4"])
    assert options.per == 2


@pytest.mark.parametrize("args", [["-p", "0", "4"], ["0"], ["-k", "nonsense", "4"], ["--foo"]])
def test_invalid_arguments(args):
    with pytest.raises(OptionsError):
        parse_options(args)


@pytest.mark.parametrize(
    "flag, style",
    [("-sa", GraphStyle.AUTO), ("-sl", GraphStyle.LINE), ("-sf", GraphStyle.FILLED)],
)
def test_style_aliases(flag, style):
    assert parse_options([flag, "4"]).style is style


def test_axis_bounds():
    options = parse_options(["-G", "-1:1", "-x", "-2:", "-y", ":3", "5"])
    assert options.grid_bounds == GraphRange(-1.0, 1.0)
    assert options.x_bounds == GraphRange(-2.0, None)
    assert options.y_bounds == GraphRange(None, 3.0)


def test_file_path():
    assert parse_options(["-f", "data.txt", "3"]).file == Path("data.txt")


def test_size_from_terminal_horizontal():
    assert parse_options([]).size == 50


def test_size_from_terminal_vertical_leaves_prompt_line():
    assert parse_options(["-c"]).size == 20 - 1


def test_full_default_height_flag_and_env(monkeypatch):
    assert parse_options(["-c", "--use-full-default-height"]).size == 20
    monkeypatch.setenv(ENV, "yes")
    options = parse_options(["-c"])
    assert options.use_full_default_height is True
    assert options.size == 20


def test_invalid_env_boolean(monkeypatch):
    monkeypatch.setenv(ENV, "maybe")
    with pytest.raises(OptionsError):
        parse_options(["4"])


def test_modeline_replaces_arguments():
    stdin = io.StringIO("braille -r -3:4 4\n-2\n0\n")
    options = parse_options(["-m"], stdin)
    assert options.range == GraphRange(-3.0, 4.0)
    assert options.size == 4
    assert options.first_line == FirstLine()
    assert options.first_line.is_modeline
    assert stdin.readline() == "-2\n"


def test_modeline_with_comment():
    options = parse_options(["-m"], io.StringIO("braille 1 -c#hello\n1\n"))
    assert options.kind() is GraphKind.BRAILLE_COLUMNS
    assert options.size == 1


def test_modeline_value_line():
    options = parse_options(["-m"], io.StringIO("5\n6\n"))
    assert options.first_line == FirstLine("5\n")
    assert not options.first_line.is_modeline


def test_modeline_keeps_outer_full_height():
    options = parse_options(["-m", "--use-full-default-height"], io.StringIO("braille -c\n"))
    assert options.use_full_default_height is True
    assert options.size == 20


def test_invalid_modeline_prefix():
    with pytest.raises(OptionsError, match="Invalid modeline"):
        parse_options(["-m"], io.StringIO("braile -r -3:4 4\n1\n"))


def test_invalid_modeline_argument():
    with pytest.raises(OptionsError):
        parse_options(["-m"], io.StringIO("braille --foo\n1\n"))


def test_modeline_conflicts_with_range():
    with pytest.raises(OptionsError):
        parse_options(["-m", "-r", "1:2"], io.StringIO("1\n"))


def test_parse_modeline():
    assert parse_modeline("# just a comment") == []
    assert parse_modeline("braille -r -3:4 4") == ["-r", "-3:4", "4"]
    assert parse_modeline("braille 1 -c#hello") == ["1", "-c"]
    assert parse_modeline("3.5") is None
    assert parse_modeline("") is None
    with pytest.raises(OptionsError):
        parse_modeline("null")


def test_get_values_computes_bounds():
    options = Options(size=4)
    values = options.get_values([1.0, None, -2.0, 5.0])
    assert values == [1.0, None, -2.0, 5.0]
    assert options.range == GraphRange(-2.0, 5.0)


def test_get_values_pairs():
    options = Options(per=2, size=4)
    lines = [(4.0, 6.0), (None, 7.0), (0.0, 2.0)]
    assert options.get_values(lines) == lines
    assert options.range == GraphRange(0.0, 7.0)


def test_get_values_keeps_given_bound():
    options = Options(range=GraphRange(0.0, None), size=4)
    options.get_values([1.0, 2.0])
    assert options.range == GraphRange(0.0, 2.0)


def test_get_values_lazy_for_bars_with_bounds():
    options = Options(range=GraphRange(0.0, 2.0), size=4)
    values = options.get_values(_lines_then_error())
    assert next(values) == 1.0
    with pytest.raises(RuntimeError):
        next(values)


def test_get_values_collected_for_columns_with_bounds():
    options = Options(range=GraphRange(0.0, 2.0), braille_columns=True, size=4)
    assert options.get_values(iter([1.0, 2.0])) == [1.0, 2.0]
    assert options.range == GraphRange(0.0, 2.0)


def test_get_values_empty_input_fails():
    options = Options(size=4)
    with pytest.raises(BoundsError, match="f64::MAX < f64::MIN"):
        options.get_values([])


def test_config_from_options():
    options = parse_options(["-c", "-sl", "10"])
    options.get_values([-1.0, 3.0])
    assert config_from_options(options) == Config(
        kind=GraphKind.BRAILLE_COLUMNS,
        style=GraphStyle.LINE,
        minimum=-1.0,
        maximum=3.0,
        size=10,
    )


def test_config_requires_bounds():
    with pytest.raises(OptionsError):
        config_from_options(Options(size=4))