"""Shared fixtures: headless matplotlib and small result files."""
import matplotlib

matplotlib.use("Agg")

import pytest


@pytest.fixture
def write_data(tmp_path):
    """ Write `rows` (a list of tuples or raw strings) into tmp_path/name. """

    def write(name, rows):
        path = tmp_path / name
        lines = []
        for row in rows:
            lines.append(row if isinstance(row, str) else " ".join(str(v) for v in row))
        path.write_text("\n".join(lines) + "\n")
        return str(path)

    return write


@pytest.fixture
def series_ab(write_data):
    """ The two-series example: A grows linearly, B stays flat. """
    a = write_data("a.txt", [(1, 10), (2, 20), (4, 40)])
    b = write_data("b.txt", [(1, 5), (2, 5), (4, 5)])
    return a, b


@pytest.fixture(autouse=True)
def verbose_log():
    """ --quiet is module state; every test starts with status output on. """
    from fuzzplot import log
    log.set_quiet(False)
    yield
    log.set_quiet(False)
