"""Point groups: named sets of points, their data files and plot commands."""

from __future__ import annotations

import math
import numbers
import tempfile
from collections.abc import Iterable
from dataclasses import dataclass
from decimal import Decimal

from .core import GnuplotError

DEFAULT_STYLE = "points"
TEMP_FILE_PREFIX = "gnuglot-"

Columns = tuple[tuple[float, ...], ...]


@dataclass
class PointGroup:
    """A named set of points drawn with one style."""

    name: str
    style: str
    columns: Columns
    dimensions: int


def _is_number(value: object) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def _is_row(value: object) -> bool:
    return isinstance(value, Iterable) and not isinstance(value, (str, bytes, bytearray))


def to_columns(data: object) -> Columns:
    """Turn a sequence of numbers, or a sequence of sequences of numbers, into float columns."""
    if not _is_row(data):
        raise GnuplotError("invalid number of dims")
    items = list(data)
    if all(_is_number(item) for item in items):
        return (tuple(float(item) for item in items),)
    columns = []
    for item in items:
        if not _is_row(item):
            raise GnuplotError("invalid number of dims")
        values = list(item)
        if not all(_is_number(value) for value in values):
            raise GnuplotError("invalid number of dims")
        columns.append(tuple(float(value) for value in values))
    return tuple(columns)


def _format_number(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"
    sign = "-" if math.copysign(1.0, value) < 0 else ""
    if value == 0:
        return sign + "0"
    dec = Decimal(repr(abs(value))).normalize()
    _, digits, exponent = dec.as_tuple()
    exp = len(digits) + exponent - 1
    if exp < -4 or exp >= 6:
        mantissa = str(digits[0])
        if len(digits) > 1:
            mantissa += "." + "".join(str(d) for d in digits[1:])
        exp_sign = "-" if exp < 0 else "+"
        return f"{sign}{mantissa}e{exp_sign}{abs(exp):02d}"
    return sign + format(dec, "f")


def write_data_file(columns: Columns) -> str:
    """Write the columns as whitespace-separated rows to a new temporary file and return its path.

    Rows stop at the shortest column.
    """
    with tempfile.NamedTemporaryFile(
        mode="w", prefix=TEMP_FILE_PREFIX, delete=False, encoding="utf-8"
    ) as handle:
        for row in zip(*columns):
            handle.write(" ".join(_format_number(value) for value in row) + "\n")
        return handle.name


def plot_line(command: str, filename: str, name: str, style: str) -> str:
    """Build the gnuplot command that draws a data file, titled when ``name`` is given."""
    style = style or DEFAULT_STYLE
    if not name:
        return f'{command} "{filename}" with {style}'
    return f'{command} "{filename}" title "{name}" with {style}'