import os

import pytest

from brailleplot.util import get_terminal_size, scale


def _no_terminal(fd=None):
    raise OSError("not a terminal")


def test_scale_endpoints_map_to_output_endpoints():
    assert scale(-4.0, -4.0, 3.0, 1.0, 8.0) == pytest.approx(1.0)
    assert scale(3.0, -4.0, 3.0, 1.0, 8.0) == pytest.approx(8.0)


def test_scale_midpoint():
    assert scale(5.0, 0.0, 10.0, 0.0, 100.0) == pytest.approx(50.0)


@pytest.mark.parametrize("a,b,c,d", [(-1.0, 1.0, 1.0, 40.0), (0.0, 7.0, 0.0, 7.0), (-8.0, -1.0, 2.0, 9.0)])
def test_scale_preserves_midpoints(a, b, c, d):
    assert scale((a + b) / 2, a, b, c, d) == pytest.approx((c + d) / 2)


def test_scale_is_monotonic():
    outputs = [scale(v, 0.0, 10.0, 1.0, 20.0) for v in range(11)]
    assert outputs == sorted(outputs)
    assert len(set(outputs)) == len(outputs)


def test_scale_degenerate_input_range_returns_output_minimum():
    assert scale(3.0, 3.0, 3.0, 1.0, 8.0) == 1.0


def test_terminal_size_from_terminal(monkeypatch):
    monkeypatch.setattr(os, "get_terminal_size", lambda fd=None: os.terminal_size((100, 30)))
    assert get_terminal_size() == (100, 30)


def test_terminal_size_defaults(monkeypatch):
    monkeypatch.setattr(os, "get_terminal_size", _no_terminal)
    monkeypatch.delenv("COLUMNS", raising=False)
    monkeypatch.delenv("LINES", raising=False)
    assert get_terminal_size() == (80, 24)


def test_terminal_size_from_environment(monkeypatch):
    monkeypatch.setattr(os, "get_terminal_size", _no_terminal)
    monkeypatch.setenv("COLUMNS", "132")
    monkeypatch.setenv("LINES", "43")
    assert get_terminal_size() == (132, 43)


@pytest.mark.parametrize("bad", ["abc", "-5", " 12", "70000"])
def test_terminal_size_invalid_environment(monkeypatch, bad):
    monkeypatch.setattr(os, "get_terminal_size", _no_terminal)
    monkeypatch.setenv("COLUMNS", bad)
    monkeypatch.delenv("LINES", raising=False)
    with pytest.raises(ValueError):
        get_terminal_size()