"""A gnuplot-backed plot holding named point groups in one, two or three dimensions."""

from __future__ import annotations

import contextlib
import numbers
import os
from types import TracebackType

from .core import GnuplotError, PlotterProcess, gnuplot_command
from .pointgroup import DEFAULT_STYLE, PointGroup, plot_line, to_columns, write_data_file
from .styles import Format, Style

_REPLOT = "replot"


def _is_numeric(value: object) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


class Plot:
    """A plot of named point groups drawn by a gnuplot process.

    The number of dimensions is fixed when the plot is made. Point groups can be
    added, removed and restyled while the plot is open.
    """

    def __init__(self, dimensions: int, persist: bool = False) -> None:
        executable = gnuplot_command()
        if not 1 <= dimensions <= 3:
            raise GnuplotError(f"invalid number of dims '{dimensions}'")
        self._dimensions = dimensions
        self._format = str(Format.PNG)
        self._groups: dict[str, PointGroup] = {}
        self._n_plots = 0
        self._data_files: list[str] = []
        self._process: PlotterProcess | None = PlotterProcess(executable, persist)

    @property
    def dimensions(self) -> int:
        """Number of dimensions of the plot."""
        return self._dimensions

    @property
    def format(self) -> str:
        """Terminal used by :meth:`save_plot`."""
        return self._format

    @property
    def point_groups(self) -> tuple[str, ...]:
        """Names of the point groups currently on the plot."""
        return tuple(self._groups)

    def _send(self, command: str) -> None:
        if self._process is None:
            raise GnuplotError("the plot is closed")
        self._process.send(command)

    def _draw(self, group: PointGroup) -> None:
        filename = write_data_file(group.columns)
        self._data_files.append(filename)
        three_d = len(group.columns) == 3
        if not three_d and not group.style:
            group.style = DEFAULT_STYLE
        if self._n_plots > 0:
            command = _REPLOT
        elif three_d:
            command = "splot"
        else:
            command = "plot"
        self._n_plots += 1
        self._send(plot_line(command, filename, group.name, group.style))

    def add_point_group(self, name: str, style: Style | str, points: object) -> None:
        """Add and draw a named group of points.

        ``points`` is either a sequence of numbers, drawn against their index, or
        one sequence of numbers per dimension of the plot.
        """
        if name in self._groups:
            raise GnuplotError(
                f"A PointGroup with the name {name} already exists, please use another "
                "name of the curve or remove this curve before using another one with "
                "the same name."
            )
        if isinstance(points, (str, bytes, bytearray)):
            raise GnuplotError("invalid number of dims ")
        try:
            items = list(points)  # type: ignore[call-overload]
        except TypeError as exc:
            raise GnuplotError("invalid number of dims ") from exc
        columns = to_columns(items)
        nested = not all(_is_numeric(item) for item in items)
        if nested and len(columns) != self._dimensions:
            raise GnuplotError(
                "The dimensions of this PointGroup are not compatible with the dimensions "
                "of the plot.\nIf you want to make a 2-d curve you must specify a 2-d plot."
            )
        group = PointGroup(
            name=name,
            style=str(style) if style else "",
            columns=columns,
            dimensions=self._dimensions,
        )
        self._draw(group)
        self._groups[name] = group

    def remove_point_group(self, name: str) -> None:
        """Remove a point group, if present, and redraw the remaining ones."""
        self._groups.pop(name, None)
        self._n_plots = 0
        for group in list(self._groups.values()):
            self._draw(group)

    def reset_point_group_style(self, name: str, style: Style | str) -> None:
        """Change the style of an existing point group and redraw it."""
        group = self._groups.get(name)
        if group is None:
            raise GnuplotError(f"A curve with name {name} does not exist.")
        self.remove_point_group(name)
        group.style = str(style) if style else ""
        self._draw(group)
        self._groups[name] = group

    def set_title(self, title: str) -> None:
        """Set the title of the plot."""
        self._send(f'set title "{title}" ')

    def set_xlabel(self, label: str) -> None:
        """Set the label of the x-axis."""
        self._send(f"set xlabel '{label}'")

    def set_ylabel(self, label: str) -> None:
        """Set the label of the y-axis."""
        self._send(f"set ylabel '{label}'")

    def set_zlabel(self, label: str) -> None:
        """Set the label of the z-axis."""
        self._send(f"set zlabel '{label}'")

    def set_grid(self) -> None:
        """Draw a grid."""
        self._send("set grid")

    def set_labels(self, *args: str) -> None:
        """Set the labels of the x, y and z axes, in that order; one to three labels."""
        if not 1 <= len(args) <= 3:
            raise GnuplotError(f"invalid number of dims '{len(args)}'")
        setters = (self.set_xlabel, self.set_ylabel, self.set_zlabel)
        for setter, label in zip(setters, args):
            setter(label)

    def set_xrange(self, start: int, end: int) -> None:
        """Set the range of the x-axis."""
        self._send(f"set xrange [{start:d}:{end:d}]")

    def set_yrange(self, start: int, end: int) -> None:
        """Set the range of the y-axis."""
        self._send(f"set yrange [{start:d}:{end:d}]")

    def set_zrange(self, start: int, end: int) -> None:
        """Set the range of the z-axis."""
        self._send(f"set zrange [{start:d}:{end:d}]")

    def set_logscale(self, axis: str, base: int) -> None:
        """Use a logarithmic scale with the given base on ``axis``."""
        self._send(f"set logscale {axis} {base:d}")

    def save_plot(self, filename: str, width: int, height: int) -> None:
        """Write the plot as it is now to ``filename`` in the current format."""
        if self._n_plots == 0:
            raise GnuplotError(
                "This plot has 0 curves and therefore its a redundant plot and it "
                "can't be printed."
            )
        self._send(f"set terminal {self._format} size {width:d}, {height:d}")
        self._send(f"set output '{filename}'")
        self._send("replot  ")

    def set_format(self, fmt: Format | str) -> None:
        """Choose the terminal used by :meth:`save_plot`; png by default."""
        self._format = str(fmt)

    def set_key_outside(self) -> None:
        """Place the key outside the plot area."""
        self._send("set key outside")

    def close(self) -> None:
        """Stop the gnuplot process, forget all point groups and remove data files."""
        process, self._process = self._process, None
        try:
            if process is not None:
                process.close()
        finally:
            for filename in self._data_files:
                with contextlib.suppress(OSError):
                    os.remove(filename)
            self._data_files.clear()
            self._groups.clear()
            self._n_plots = 0

    def __enter__(self) -> Plot:
        return self

    def __exit__(
        self,
        *args: type[BaseException] | BaseException | TracebackType | None,
    ) -> None:
        self.close()