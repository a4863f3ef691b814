"""Locating the gnuplot executable and talking to a running gnuplot process."""

from __future__ import annotations

import os
import shutil
import subprocess
import sys

_custom_path: str | None = None


class GnuplotError(Exception):
    """Raised when gnuplot cannot be found, started or driven."""


def find_gnuplot() -> str:
    """Return the full path of the gnuplot executable found on PATH."""
    name = "gnuplot.exe" if sys.platform == "win32" else "gnuplot"
    path = shutil.which(name)
    if path is None:
        raise GnuplotError(
            f"** could not find path to 'gnuplot':\n"
            f"{name!r}: executable file not found in PATH\n"
            f"** set custom path to 'gnuplot' "
        )
    return path


def set_custom_path_to_gnuplot(path: str | os.PathLike[str] | None) -> None:
    """Use ``path`` as the gnuplot executable; ``None`` restores the PATH lookup."""
    global _custom_path
    _custom_path = None if path is None else os.fspath(path)


def gnuplot_command() -> str:
    """Return the gnuplot executable to start: the custom path if set, else the one on PATH."""
    if _custom_path is not None:
        return _custom_path
    return find_gnuplot()


class PlotterProcess:
    """A gnuplot subprocess that reads commands from its standard input."""

    def __init__(self, executable: str, persist: bool = False) -> None:
        args = [executable]
        if persist:
            args.append("-persist")
        try:
            self._process = subprocess.Popen(
                args,
                stdin=subprocess.PIPE,
                text=True,
                encoding="utf-8",
            )
        except OSError as exc:
            raise GnuplotError(f"could not start {executable!r}: {exc}") from exc
        self._closed = False

    def send(self, command: str) -> None:
        """Send one command line to the process."""
        stdin = self._process.stdin
        if self._closed or stdin is None:
            raise GnuplotError("the plotter process is closed")
        try:
            stdin.write(command + "\n")
            stdin.flush()
        except (OSError, ValueError) as exc:
            raise GnuplotError(f"could not send command: {exc}") from exc

    def close(self) -> None:
        """Close the command stream and wait for the process to exit."""
        if self._closed:
            return
        self._closed = True
        if self._process.stdin is not None:
            try:
                self._process.stdin.close()
            except OSError:
                pass
        returncode = self._process.wait()
        if returncode != 0:
            raise GnuplotError(f"plotter process exited with status {returncode}")