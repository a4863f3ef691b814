import os
import re
import sys

import pytest

from gnuglot.core import GnuplotError, set_custom_path_to_gnuplot
from gnuglot.plot import Plot
from gnuglot.styles import Format, Style

_SCRIPT = """\
import os
import sys

with open(os.environ["FAKE_GNUPLOT_LOG"], "w", encoding="utf-8") as out:
    out.write("ARGS " + " ".join(sys.argv[1:]) + "\\n")
    for line in sys.stdin:
        out.write(line)
        parts = line.split('"')
        if line.split(" ", 1)[0] in ("plot", "splot", "replot") and len(parts) >= 3:
            with open(parts[1], encoding="utf-8") as data:
                out.write("DATA " + data.read().replace("\\n", "|") + "\\n")
        out.flush()
"""


@pytest.fixture
def log(tmp_path, monkeypatch):
    log_path = tmp_path / "commands.log"
    script = tmp_path / "fake-gnuplot"
    script.write_text(f"#!{sys.executable}\n" + _SCRIPT, encoding="utf-8")
    script.chmod(0o755)
    monkeypatch.setenv("FAKE_GNUPLOT_LOG", str(log_path))
    set_custom_path_to_gnuplot(script)
    yield log_path
    set_custom_path_to_gnuplot(None)


def all_lines(log_path):
    return log_path.read_text(encoding="utf-8").splitlines()


def commands(log_path):
    return [line for line in all_lines(log_path) if not line.startswith(("ARGS", "DATA"))]


def data_after(log_path, pattern):
    lines = all_lines(log_path)
    for position, line in enumerate(lines):
        if re.fullmatch(pattern, line):
            return lines[position + 1]
    raise AssertionError(f"no line matches {pattern!r}")


@pytest.mark.parametrize("dimensions", [0, 4])
def test_rejects_unsupported_dimensions(log, dimensions):
    with pytest.raises(GnuplotError, match="invalid number of dims"):
        Plot(dimensions)


def test_persist_flag_is_passed(log):
    with Plot(2, persist=True) as plot:
        assert plot.dimensions == 2
    assert all_lines(log)[0] == "ARGS -persist"


def test_no_persist_flag_by_default(log):
    plot = Plot(1)
    assert plot.dimensions == 1
    plot.close()
    assert plot.point_groups == ()
    assert all_lines(log)[0] == "ARGS "


def test_settings_commands(log):
    with Plot(3) as plot:
        plot.set_title("Test Results")
        plot.set_xlabel("X-Axis")
        plot.set_ylabel("Y-Axis")
        plot.set_zlabel("Z-Axis")
        plot.set_xrange(-2, 2)
        plot.set_yrange(-2, 18)
        plot.set_zrange(0, 5)
        plot.set_logscale("x", 2)
        plot.set_grid()
        plot.set_key_outside()
        assert plot.dimensions == 3
        assert plot.point_groups == ()
    assert commands(log) == [
        'set title "Test Results" ',
        "set xlabel 'X-Axis'",
        "set ylabel 'Y-Axis'",
        "set zlabel 'Z-Axis'",
        "set xrange [-2:2]",
        "set yrange [-2:18]",
        "set zrange [0:5]",
        "set logscale x 2",
        "set grid",
        "set key outside",
    ]


def test_set_labels_in_axis_order(log):
    with Plot(2) as plot:
        plot.set_labels("X-axis", "Y-Axis")
        assert plot.point_groups == ()
    assert commands(log) == ["set xlabel 'X-axis'", "set ylabel 'Y-Axis'"]


@pytest.mark.parametrize("labels", [(), ("a", "b", "c", "d")])
def test_set_labels_rejects_bad_count(log, labels):
    with Plot(3) as plot:
        with pytest.raises(GnuplotError, match=f"invalid number of dims '{len(labels)}'"):
            plot.set_labels(*labels)


def test_one_dimensional_group(log):
    with Plot(3) as plot:
        plot.add_point_group("Sample 1", Style.LINES, [2, 3, 4, 1])
        assert plot.point_groups == ("Sample 1",)
    data = data_after(log, r'plot "[^"]+" title "Sample 1" with lines')
    assert data == "DATA 2|3|4|1|"


def test_float_values_are_written(log):
    with Plot(1) as plot:
        plot.add_point_group("f", "points", [0.5, -1.25])
        assert plot.point_groups == ("f",)
    assert data_after(log, r'plot "[^"]+" title "f" with points') == "DATA 0.5|-1.25|"


def test_second_group_uses_replot(log):
    with Plot(1) as plot:
        plot.add_point_group("Sample1", "points", [51, 8, 4, 11])
        plot.add_point_group("Sample2", "points", [1, 2, 4, 11])
        assert set(plot.point_groups) == {"Sample1", "Sample2"}
    lines = commands(log)
    assert lines[0].startswith('plot "')
    assert re.fullmatch(r'replot "[^"]+" title "Sample2" with points', lines[1])


def test_two_dimensional_group(log):
    with Plot(2) as plot:
        plot.add_point_group("rates", Style.CIRCLE, [[2, 4, 8], [4, 7, 4]])
        assert plot.point_groups == ("rates",)
    assert data_after(log, r'plot "[^"]+" title "rates" with circle') == "DATA 2 4|4 7|8 4|"


def test_rows_stop_at_shortest_column(log):
    with Plot(2) as plot:
        plot.add_point_group("short", "lines", [[1, 2, 3], [4, 5]])
        assert plot.point_groups == ("short",)
    data = data_after(log, r'plot "[^"]+" title "short" with lines')
    assert data.count("|") == 2


def test_three_dimensional_group_uses_splot(log):
    with Plot(3) as plot:
        plot.add_point_group("xyz", "lines", [[1, 2], [3, 4], [5, 6]])
        assert plot.point_groups == ("xyz",)
    assert data_after(log, r'splot "[^"]+" title "xyz" with lines') == "DATA 1 3 5|2 4 6|"


def test_unnamed_group_without_style(log):
    with Plot(1) as plot:
        plot.add_point_group("", "", [1])
        assert plot.point_groups == ("",)
    assert re.fullmatch(r'plot "[^"]+" with points', commands(log)[0])
    assert data_after(log, r'plot "[^"]+" with points') == "DATA 1|"


def test_dimension_mismatch_raises(log):
    with Plot(2) as plot:
        with pytest.raises(GnuplotError, match="not compatible"):
            plot.add_point_group("bad", "lines", [[1], [2], [3]])
        assert plot.point_groups == ()


def test_duplicate_name_raises(log):
    with Plot(1) as plot:
        plot.add_point_group("dup", "lines", [1, 2])
        with pytest.raises(GnuplotError, match="already exists"):
            plot.add_point_group("dup", "lines", [3, 4])


@pytest.mark.parametrize("data", ["abc", 5, [[1, "a"]], [1, [2]]])
def test_invalid_data_raises(log, data):
    with Plot(2) as plot:
        with pytest.raises(GnuplotError, match="invalid number of dims"):
            plot.add_point_group("x", "lines", data)


def test_remove_point_group_redraws_rest(log):
    with Plot(1) as plot:
        plot.add_point_group("a", "points", [1, 2])
        plot.add_point_group("b", "points", [3, 4])
        plot.remove_point_group("a")
        assert plot.point_groups == ("b",)
    lines = commands(log)
    assert len(lines) == 3
    assert re.fullmatch(r'plot "[^"]+" title "b" with points', lines[2])


def test_reset_point_group_style(log):
    with Plot(1) as plot:
        plot.add_point_group("a", Style.LINES, [1, 2])
        plot.reset_point_group_style("a", Style.IMPULSES)
        assert plot.point_groups == ("a",)
    assert re.fullmatch(r'plot "[^"]+" title "a" with impulses', commands(log)[-1])


def test_reset_missing_group_raises(log):
    with Plot(1) as plot:
        with pytest.raises(GnuplotError, match="A curve with name zz does not exist."):
            plot.reset_point_group_style("zz", "lines")


def test_save_empty_plot_raises(log):
    with Plot(2) as plot:
        with pytest.raises(GnuplotError, match="0 curves"):
            plot.save_plot("out.png", 800, 600)


def test_save_plot_default_format(log):
    with Plot(1) as plot:
        assert plot.format == "png"
        plot.add_point_group("a", "lines", [1, 2])
        plot.save_plot("out.png", 800, 1200)
    assert commands(log)[-3:] == [
        "set terminal png size 800, 1200",
        "set output 'out.png'",
        "replot  ",
    ]


def test_save_plot_with_pdf_format(log):
    with Plot(1) as plot:
        plot.set_format(Format.PDF)
        assert plot.format == "pdf"
        plot.add_point_group("a", "lines", [1, 2])
        plot.save_plot("out.pdf", 640, 480)
    assert commands(log)[-3] == "set terminal pdf size 640, 480"


def test_close_removes_data_files(log):
    plot = Plot(2)
    plot.add_point_group("a", "lines", [[1, 2], [3, 4]])
    plot.add_point_group("b", "lines", [[5, 6], [7, 8]])
    plot.close()
    names = [line.split('"')[1] for line in commands(log)]
    assert len(names) == 2
    assert not any(os.path.exists(name) for name in names)
    assert plot.point_groups == ()


def test_closed_plot_rejects_commands(log):
    plot = Plot(1)
    plot.close()
    with pytest.raises(GnuplotError):
        plot.set_title("late")