"""Draw one two-dimensional curve in each of several styles and save the result."""

from __future__ import annotations

import argparse
import sys
import time

from .core import GnuplotError
from .plot import Plot
from .styles import Style

DEMO_STYLES = (
    Style.LINES,
    Style.POINTS,
    Style.IMPULSES,
    Style.DOTS,
    Style.CIRCLE,
    Style.ERROR_BARS,
    Style.BOX_ERROR_BARS,
    Style.BOXES,
    Style.LP,
)

_SAMPLES = 100


def _curve(factor: int) -> list[list[float]]:
    xs = [float(x) for x in range(_SAMPLES)]
    ys = [(x**2 / 10) * factor for x in xs]
    return [xs, ys]


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Draw an example two-dimensional plot.")
    parser.add_argument("-o", "--output", default="2dplot.png", help="file to save the plot to")
    parser.add_argument("--width", type=int, default=800, help="width of the saved plot")
    parser.add_argument("--height", type=int, default=1200, help="height of the saved plot")
    parser.add_argument(
        "--wait", type=float, default=1.0, help="seconds to wait before closing gnuplot"
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the example; return the exit status."""
    args = _parser().parse_args(argv)
    try:
        with Plot(2, persist=True) as plot:
            plot.set_xlabel("X")
            plot.set_ylabel("Y")
            plot.set_grid()
            plot.set_yrange(0, 500)
            plot.set_xrange(0, 100)
            plot.set_title("this is 2d plot example")
            plot.set_key_outside()
            for factor, style in enumerate(DEMO_STYLES):
                plot.add_point_group(str(style), style, _curve(factor))
            plot.save_plot(args.output, args.width, args.height)
            time.sleep(args.wait)
    except GnuplotError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())