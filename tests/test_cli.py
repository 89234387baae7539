"""Tests for the command line front end and its exit codes."""
import json
import os

import pytest

from fuzzplot.cli import build_parser, collect, main
from fuzzplot.config import LineStyle, Scale


def test_success(series_ab, tmp_path) -> None:
    a, b = series_ab
    out = tmp_path / "out.png"
    code = main(["--series", f"A={a}", "--series", f"B={b}", "--title", "coverage",
                 "--xlabel", "cores", "--ylabel", "blocks", "--legend-position", "top",
                 "--width", "800", "--height", "600", "--output", str(out), "--quiet"])
    assert code == 0
    assert out.exists()


def test_missing_file_exit_code(series_ab, tmp_path, capsys) -> None:
    a, _ = series_ab
    out = tmp_path / "out.png"
    code = main(["--series", f"A={a}", "--series", f"B={tmp_path / 'missing.txt'}",
                 "--output", str(out)])
    assert code == 1
    assert not out.exists()
    assert "missing.txt" in capsys.readouterr().err


def test_malformed_exit_code(write_data, tmp_path, capsys) -> None:
    path = write_data("bad.txt", ["1 10", "abc 5"])
    out = tmp_path / "out.png"
    assert main(["--series", f"bad={path}", "--output", str(out), "-q"]) == 2
    assert not out.exists()
    assert "bad.txt:2" in capsys.readouterr().err


def test_log_scale_with_zero_exit_code(write_data, tmp_path) -> None:
    path = write_data("zero.txt", [(1, 0), (2, 4)])
    out = tmp_path / "out.png"
    assert main(["--series", f"z={path}", "--output", str(out), "-q"]) == 3
    assert not out.exists()
    assert main(["--series", f"z={path}", "--yscale", "linear", "--output", str(out), "-q"]) == 0


@pytest.mark.parametrize("argv", [
    ["--xscale", "symlog"],
    ["--width", "wide"],
    ["--legend-position", "center"],
    ["--series", "nolabel"],
    [],
    ["--preset-dir", "somewhere"],
    ["--width", "0"],
])
def test_configuration_errors(series_ab, argv) -> None:
    a, _ = series_ab
    if argv and argv[0] != "--series":
        argv = argv + ["--series", f"A={a}"]
    assert main(argv + ["-q"]) == 3


def test_preset(write_data, tmp_path) -> None:
    for guided in ("false", "true"):
        for collab in ("false", "true"):
            write_data(f"coverage_{guided}_collab_{collab}.txt", [(1, 3, 0.5), (2, 6, 0.5)])
    out = tmp_path / "collab.png"
    code = main(["--preset", "collab", "--preset-dir", str(tmp_path),
                 "--style", "linespoints", "--errorbars", "--output", str(out), "-q"])
    assert code == 0
    assert out.exists()


def test_command_line_overrides_chart_file(series_ab, tmp_path) -> None:
    a, b = series_ab
    chart = tmp_path / "chart.json"
    chart.write_text(json.dumps({
        "series": [{"label": "A", "path": os.path.basename(a)}],
        "title": "from file",
        "yscale": "linear",
        "width": 640,
    }))
    args = build_parser().parse_args(["--config", str(chart), "--series", f"B={b}",
                                      "--title", "from flags", "--no-grid",
                                      "--style", "line", "--style", "linespoints"])
    specs, config = collect(args)
    assert specs == [("A", a), ("B", b)]
    assert config.title == "from flags"
    assert config.yscale is Scale.LINEAR
    assert config.width == 640
    assert config.grid is False
    assert config.styles == (LineStyle.LINE, LineStyle.LINE_POINTS)


def test_chart_file_end_to_end(series_ab, tmp_path) -> None:
    a, b = series_ab
    chart = tmp_path / "chart.json"
    chart.write_text(json.dumps({
        "series": [{"label": "A", "path": "a.txt"}, {"label": "B", "path": "b.txt"}],
        "legend_position": "right",
        "legend_fontsize": 8,
    }))
    out = tmp_path / "out.png"
    assert main(["--config", str(chart), "--output", str(out), "-q"]) == 0
    assert out.exists()


def test_unsupported_output_format_exit_code(series_ab, tmp_path) -> None:
    a, _ = series_ab
    out = tmp_path / "o.txt"
    assert main(["--series", f"A={a}", "--output", str(out), "-q"]) == 3
    assert not out.exists()


def test_undecodable_data_exit_code(tmp_path) -> None:
    path = tmp_path / "binary.txt"
    path.write_bytes(b"1 10\n\xff\xfe 5\n")
    assert main(["--series", f"bin={path}", "--output", str(tmp_path / "o.png"), "-q"]) == 2


def test_negative_stddev_with_errorbars(write_data, tmp_path) -> None:
    path = write_data("e.txt", [(1, 10, -1), (2, 20, 1)])
    out = tmp_path / "o.png"
    assert main(["--series", f"e={path}", "--errorbars", "--output", str(out), "-q"]) == 0
    assert out.exists()
