"""
Command line front end.

    fuzzplot --series "guided=coverage_true_collab_true.txt" \
             --series "unguided=coverage_false_collab_true.txt" \
             --title "Coverage" --xlabel cores --ylabel blocks --output coverage.png
"""
import argparse
import sys

from fuzzplot import log
from fuzzplot.config import ChartConfig, LegendPosition, LineStyle, Scale, load_chart_file
from fuzzplot.errors import ConfigurationError, FuzzplotError
from fuzzplot.presets import PRESETS, preset_series
from fuzzplot.render import render
from fuzzplot.series import load_series, parse_series_arg

EXIT_OK = 0


class ArgumentParser(argparse.ArgumentParser):
    """ Bad flags are configuration errors (exit 3), not argparse's exit 2. """

    def error(self, message):
        raise ConfigurationError(message)


def build_parser():
    parser = ArgumentParser(prog=log.PROG, description="Plot fuzzing experiment results")
    parser.add_argument("--config", help="JSON chart file")
    parser.add_argument("--series", action="append", default=[], metavar="LABEL=PATH",
                        help="Data file to plot (repeatable)")
    parser.add_argument("--preset", choices=sorted(PRESETS),
                        help="Plot the files of a known experiment layout")
    parser.add_argument("--preset-dir", help="Directory holding the preset files")
    parser.add_argument("--title")
    parser.add_argument("--xlabel")
    parser.add_argument("--ylabel")
    parser.add_argument("--xscale", choices=[s.value for s in Scale])
    parser.add_argument("--yscale", choices=[s.value for s in Scale])
    parser.add_argument("--legend-position", choices=[p.value for p in LegendPosition])
    parser.add_argument("--legend-font", help="Font family of the legend")
    parser.add_argument("--legend-fontsize", type=float)
    parser.add_argument("--width", type=int, help="Canvas width in pixels")
    parser.add_argument("--height", type=int, help="Canvas height in pixels")
    parser.add_argument("--dpi", type=int)
    parser.add_argument("--style", dest="styles", action="append",
                        choices=[s.value for s in LineStyle],
                        help="Line style, once for all series or once per series")
    parser.add_argument("--no-grid", dest="grid", action="store_false", default=None)
    parser.add_argument("--errorbars", action="store_const", const=True, default=None,
                        help="Draw the third column as error bars")
    parser.add_argument("--output", "-o", help="Output image, omit to open a window")
    parser.add_argument("--quiet", "-q", action="store_true")
    return parser


SETTINGS = ("title", "xlabel", "ylabel", "xscale", "yscale", "legend_position",
            "legend_font", "legend_fontsize", "width", "height", "dpi", "styles",
            "grid", "errorbars")


def collect(args):
    """ Merge the chart file with the command line into (series specs, ChartConfig). """
    specs = []
    settings = {}
    if args.config:
        chart = load_chart_file(args.config)
        settings.update(chart.settings)
        specs.extend(chart.series)
        if chart.preset:
            specs.extend(preset_series(chart.preset, chart.preset_dir or "."))

    if args.preset:
        specs.extend(preset_series(args.preset, args.preset_dir or "."))
    elif args.preset_dir:
        raise ConfigurationError("--preset-dir needs --preset")
    specs.extend(parse_series_arg(arg) for arg in args.series)

    for name in SETTINGS:
        value = getattr(args, name)
        if value is not None:
            settings[name] = value

    if len(specs) == 0:
        raise ConfigurationError("no series given, use --series, --preset or --config")
    return specs, ChartConfig.from_dict(settings)


def main(argv=None):
    try:
        args = build_parser().parse_args(argv)
        log.set_quiet(args.quiet)
        log.start(" ".join(sys.argv[1:] if argv is None else argv))
        specs, config = collect(args)
        series = [load_series(label, path) for label, path in specs]
        render(series, config, args.output)
    except FuzzplotError as e:
        log.error(e)
        return e.exit_code
    return EXIT_OK
