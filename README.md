# gnuglot

Simple point and line plots in one, two or three dimensions, drawn by a
running `gnuplot` process. You add named groups of points, set titles,
labels and ranges, and save the result in a gnuplot terminal format such
as PNG or PDF.

`gnuplot` must be installed and on your `PATH`, or its location given with
`set_custom_path_to_gnuplot`.

## Installation

```
pip install gnuglot
```

## Usage

```python
from gnuglot.plot import Plot
from gnuglot.styles import Style, Format

with Plot(2, persist=False) as plot:
    plot.set_title("Test Results")
    plot.set_labels("X-Axis", "Y-Axis")
    plot.set_xrange(0, 10)
    plot.set_yrange(0, 100)
    plot.set_grid()
    plot.add_point_group("squares", Style.LINES, [[0, 1, 2, 3], [0, 1, 4, 9]])
    plot.set_format(Format.PNG)
    plot.save_plot("squares.png", 800, 600)
```

`Plot(dimensions, persist=False)` takes 1, 2 or 3 dimensions; anything
else raises `GnuplotError`. With `persist=True` gnuplot is started with
`-persist`, so its window stays open after the plot is closed.

### Point groups

`add_point_group(name, style, points)` takes either a flat sequence of
numbers, drawn against their index, or one sequence of numbers per
dimension of the plot. Rows stop at the shortest sequence. Three
sequences are drawn with `splot`.

Each point group needs a unique name. `remove_point_group(name)` drops one
and redraws the rest; `reset_point_group_style(name, style)` redraws an
existing group in another style. The names on the plot are in
`plot.point_groups`.

Styles are in `gnuglot.styles.Style` (`LINES`, `POINTS`, `LINEPOINTS`,
`IMPULSES`, `DOTS`, `BAR`, `FILL_SOLID`, `HISTOGRAM`, `CIRCLE`,
`ERROR_BARS`, `BOX_ERROR_BARS`, `BOXES`, `LP`); a plain string is passed
to gnuplot as it is. An empty style is drawn as `points` on 1- and 2-D
plots.

### Other settings

`set_xlabel`, `set_ylabel`, `set_zlabel`, `set_zrange`,
`set_logscale(axis, base)` and `set_key_outside()`. `set_format` chooses
the terminal used by `save_plot`; it is `png` until changed, and
`gnuglot.styles.Format` has `PNG` and `PDF`.

Mistakes such as a repeated group name, the wrong number of dimensions,
one to three labels not given, or saving a plot with no curves raise
`GnuplotError` (from `gnuglot.core`).

Point data is written to temporary files whose names start with
`gnuglot-`; `close()`, or leaving the `with` block, stops gnuplot and
removes them. A nonzero exit status from gnuplot raises `GnuplotError`.

To use a gnuplot that is not on your `PATH`:

```python
from gnuglot.core import set_custom_path_to_gnuplot

set_custom_path_to_gnuplot("/opt/gnuplot/bin/gnuplot")
```

Passing `None` goes back to looking gnuplot up on `PATH`.

## Demo

```
gnuglot-demo
```

This draws a curve in each of several styles on one 2D plot and saves it
as `2dplot.png` in the current directory. Options: `-o/--output` for the
file name, `--width` and `--height` (800 and 1200 by default), and
`--wait`, the seconds to wait before closing gnuplot (1 by default).

## What it does not do

Commands are only written to gnuplot; its output and error messages are
not read back, so a command gnuplot rejects is not reported as an error.
gnuglot does not draw anything itself: without gnuplot it can do nothing.