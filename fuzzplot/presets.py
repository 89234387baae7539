"""
Series sets for the file names written by the fuzzing experiment harness.

`sharing` covers the eight `coverage_<guided>_inputshare_<b>_resultshare_<b>.txt`
files, `collab` the four `coverage_<guided>_collab_<b>.txt` files.
"""
import itertools
import os

from fuzzplot.errors import ConfigurationError

BOOLS = ("false", "true")


def _guided(flag):
    return "guided" if flag == "true" else "unguided"


def sharing_series(directory):
    series = []
    for guided, inputs, results in itertools.product(BOOLS, repeat=3):
        fname = f"coverage_{guided}_inputshare_{inputs}_resultshare_{results}.txt"
        label = "{}, {} inputs, {} results".format(
            _guided(guided),
            "shared" if inputs == "true" else "private",
            "shared" if results == "true" else "private")
        series.append((label, os.path.join(directory, fname)))
    return series


def collab_series(directory):
    series = []
    for guided, collab in itertools.product(BOOLS, repeat=2):
        fname = f"coverage_{guided}_collab_{collab}.txt"
        label = "{}, {}".format(
            _guided(guided), "collaborative" if collab == "true" else "independent")
        series.append((label, os.path.join(directory, fname)))
    return series


PRESETS = {
    "sharing": sharing_series,
    "collab": collab_series,
}


def preset_series(name, directory="."):
    """ Ordered (label, path) pairs for preset `name` under `directory`. """
    try:
        return PRESETS[name](directory)
    except KeyError:
        raise ConfigurationError(
            f"unknown preset {name!r} (choose from {', '.join(PRESETS)})") from None
