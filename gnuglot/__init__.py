"""Point and line plots in one, two or three dimensions, drawn by a gnuplot process."""

__version__ = "0.1.0"