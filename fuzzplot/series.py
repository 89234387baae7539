"""
Load experiment result files.

A result file has one row per data point, columns separated by spaces or
tabs: the number of workers, the measured mean, and optionally its
standard deviation. Blank lines and `#` comments are ignored. Any other
row that does not start with two finite numbers aborts loading.
"""
import math
import os
from dataclasses import dataclass
from typing import Optional

import numpy as np

from fuzzplot import log
from fuzzplot.errors import ConfigurationError, DataFileNotFound, MalformedRow


@dataclass(frozen=True, eq=False)
class Series:
    label: str
    path: str
    x: np.ndarray
    y: np.ndarray
    # third column, only when every row carries one
    err: Optional[np.ndarray]
    # source line of every point, for error messages
    linenos: np.ndarray

    def __len__(self):
        return len(self.x)


def _number(text):
    value = float(text)
    if not math.isfinite(value):
        raise ValueError(f"{text} is not finite")
    return value


def parse_rows(path, fobj):
    """ Yield (lineno, x, y, err) for every data row of `fobj`. """
    for lineno, line in enumerate(fobj, start=1):
        stripped = line.strip()
        if not stripped or stripped.startswith('#'):
            continue
        words = stripped.split()
        if len(words) < 2:
            raise MalformedRow(path, lineno, line)
        try:
            x, y = _number(words[0]), _number(words[1])
        except ValueError:
            raise MalformedRow(path, lineno, line, "non-numeric value") from None
        err = None
        if len(words) > 2:
            try:
                err = _number(words[2])
            except ValueError:
                err = None
        yield lineno, x, y, err


def load_series(label: str, path: str) -> Series:
    """ Read `path` into a Series labelled `label`. """
    if not os.path.isfile(path):
        raise DataFileNotFound(path)

    # undecodable bytes become U+FFFD and fail the numeric check of their row
    with open(path, 'r', encoding="utf-8", errors="replace") as fobj:
        rows = list(parse_rows(path, fobj))

    if len(rows) == 0:
        raise MalformedRow(path, 0, "", "no data rows")

    linenos = np.array([row[0] for row in rows], dtype=int)
    x = np.array([row[1] for row in rows], dtype=float)
    y = np.array([row[2] for row in rows], dtype=float)
    errs = [row[3] for row in rows]
    err = None if any(e is None for e in errs) else np.array(errs, dtype=float)
    if err is not None and np.any(err < 0):
        i = int(np.flatnonzero(err < 0)[0])
        log.warning(f"{path}:{linenos[i]}: negative standard deviation, ignoring the third column")
        err = None

    log.info("loaded", path, f"({len(rows)} points)")
    return Series(label, path, x, y, err, linenos)


def parse_series_arg(arg: str):
    """ Split a `label=path` command line value. """
    label, sep, path = arg.partition('=')
    if not sep or not label or not path:
        raise ConfigurationError(f"--series expects LABEL=PATH, got {arg!r}")
    return label, path
