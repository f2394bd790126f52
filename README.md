# brailleplot

A library for drawing graphs in a text terminal with Unicode braille,
sextant and octant characters. It parses numeric input lines and options,
works out the bounds of the data, and draws scatter plots of `x y` points
on a grid of dots, as well as column graphs built from sextant characters.

It has no dependencies outside the Python standard library and supports
Python 3.10 and later.

## Installing

```console
pip install .
```

To run the test suite:

```console
pip install ".[test]"
pytest
```

## Modules

| Module                        | What it holds                                                     |
|-------------------------------|-------------------------------------------------------------------|
| `brailleplot.util`            | `scale` maps a value between ranges; `get_terminal_size` finds the terminal size, falling back to `COLUMNS`/`LINES` and then 80×24 |
| `brailleplot.input`           | `parse_value`, `parse_line`, `parse_variable_line`, `iter_lines`, `open_lines`; errors `LineParseError`, `ParseFloatError`, `WrongNumValuesError` |
| `brailleplot.ranges`          | `GraphRange`, `parse_range`, `validate_bounds`, `BoundsError`, and the enums `GraphKind`, `GraphStyle`, `Orientation`, `CharType` |
| `brailleplot.options`         | `parse_options`, `parse_modeline`, `Options`, `Config`, `config_from_options`, `FirstLine`, `OptionsError` |
| `brailleplot.sextants`        | `sextant_char` turns a 2×3 dot pattern into one character          |
| `brailleplot.sextant_columns` | `dot_pairs_from_array` and `write_rows` for sextant column graphs  |
| `brailleplot.bounds`          | `Point`, `CartesianBound`, `CartesianBounds`, `CartesianBoundsBuilder`, `bounds_from_points` |
| `brailleplot.grid`            | `GridDots`, `CartesianPoints`, `FramebufferStyle`, `render_dots`   |
| `brailleplot.grid_plot`       | `grid_size`, `read_points`, `print_graph` for scatter plots        |

## Examples

Scaling a value from one range into another:

```python
from brailleplot.util import scale

scale(5.0, 0.0, 10.0, 0.0, 100.0)   # 50.0
```

Ranges are written `[MIN]:[MAX]`. Either side may be left out. A range whose
minimum is above its maximum raises `BoundsError`:

```python
from brailleplot.ranges import parse_range

r = parse_range("-3:4")
r.min, r.max          # (-3.0, 4.0)
parse_range("3:").max # None
parse_range("3:2")    # raises BoundsError
```

Input lines hold one or more whitespace-separated numbers. An empty field
or the word `null` stands for a missing value:

```python
from brailleplot.input import parse_line, parse_value

parse_value("1.5")       # 1.5
parse_value("null")      # None
parse_line("1 2", 2)     # (1.0, 2.0)
parse_line("1", 2)       # raises WrongNumValuesError
```

`Options.get_values` fills in whichever bound was not given from the lines
it is handed and updates `Options.range`; `config_from_options` then builds
a `Config` once the bounds and size are known.

A single sextant character from a 2-wide, 3-tall pattern of dots, top row
first:

```python
from brailleplot.sextants import sextant_char

sextant_char(((True, False), (True, False), (True, False)))   # "▌"
sextant_char(((True, True), (True, True), (True, True)))      # "█"
```

A column of sextant dots between two scaled values (1-based dot positions,
bottom first), then written out as rows of characters:

```python
import sys

from brailleplot.ranges import GraphStyle
from brailleplot.sextant_columns import dot_pairs_from_array, write_rows

left = dot_pairs_from_array([1, 4], GraphStyle.FILLED)
right = dot_pairs_from_array([2, 3], GraphStyle.LINE)
write_rows(sys.stdout, [[left, right]], height=2)
```

### Scatter plots on a dot grid

Points are scaled onto a grid of dots and drawn with braille characters, or
with octant characters when an octant graph kind is chosen. The `-g` option
takes the width and height in dots (one value for a square, none to fit the
terminal):

```python
import io
import sys

from brailleplot.grid_plot import print_graph
from brailleplot.options import parse_options

data = io.StringIO("0 -3\n1 -2\n2 -1\n3 0\n4 1\n5 2\n6 3\n7 4\n")
options = parse_options(["-g", "8", "8"], io.StringIO(""))
print_graph(options, data, sys.stdout)
```

Bounds for either axis can be fixed with `-x MIN:MAX` and `-y MIN:MAX`,
or for both with `-G MIN:MAX`. Any side left out is found from the points.

### Modelines

With `-m`/`--modeline`, `parse_options` reads the first line of input. If it
starts with `braille`, the options written after it (up to any `#` comment)
replace the command line; a line starting with `#` gives no options; a
number is kept as the first value; anything else raises `OptionsError`.
`parse_modeline` handles this line on its own:

```python
from brailleplot.options import parse_modeline

parse_modeline("braille -r -3:4 4")   # ["-r", "-3:4", "4"]
parse_modeline("3.5")                 # None
```

## Graph styles

`GraphStyle` controls what is drawn between two values:

* `auto` (`a`) fills between the values when the first is not above the
  second, and draws only the end points otherwise;
* `line` (`l`) never fills;
* `filled` (`f`) always fills (the default).

## What is not included

The package installs no command and has no single entry point that reads
input and prints a finished graph for every `GraphKind`. Options for all
kinds are parsed, but drawing is provided only for scatter plots on a dot
grid (`grid_plot.print_graph`) and the pieces of sextant column graphs in
`sextant_columns`. Bar and column graphs drawn with block, mini-block,
braille or octant characters, and sextant bar graphs, are not drawn by this
package.