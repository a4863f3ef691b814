"""Plot styles and output formats understood by gnuplot."""

from __future__ import annotations

from enum import Enum


class _StrValueEnum(str, Enum):
    def __str__(self) -> str:
        return self.value

    def __format__(self, spec: str) -> str:
        return format(self.value, spec)


class Style(_StrValueEnum):
    """Drawing style of a point group."""

    LINES = "lines"
    POINTS = "points"
    LINEPOINTS = "linepoints"
    IMPULSES = "impulses"
    DOTS = "dots"
    BAR = "bar"
    FILL_SOLID = "fill solid"
    HISTOGRAM = "histogram"
    CIRCLE = "circle"
    ERROR_BARS = "errorbars"
    BOX_ERROR_BARS = "boxerrorbars"
    BOXES = "boxes"
    LP = "lp"


class Format(_StrValueEnum):
    """Terminal used when saving a plot to a file."""

    PNG = "png"
    PDF = "pdf"