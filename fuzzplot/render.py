"""
Draw a set of series into a single chart.
"""
import os
import tempfile
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

import numpy as np
from matplotlib import pyplot as plt
from matplotlib import rc_context
from matplotlib.backends.backend_agg import FigureCanvasAgg
from matplotlib.figure import Figure

from fuzzplot import log
from fuzzplot.config import ChartConfig, LegendPosition, LineStyle, Scale
from fuzzplot.errors import ConfigurationError, InvalidScaleForData
from fuzzplot.series import Series

MARKERS = ['o', 's', '^', 'v', 'D', 'x', '+', '*', 'p', 'h']

LEGEND_LOC = {
    LegendPosition.LEFT: "upper left",
    LegendPosition.RIGHT: "upper right",
    LegendPosition.TOP: "upper center",
    LegendPosition.BOTTOM: "lower center",
}

# metadata entries matplotlib fills with the library version or a timestamp
VOLATILE_METADATA = {
    "png": {"Software": None},
    "svg": {"Date": None},
    "pdf": {"CreationDate": None},
}


@dataclass(frozen=True)
class RenderResult:
    output: Optional[str]
    labels: List[str]
    lines: List[Tuple[np.ndarray, np.ndarray]]
    xlim: Tuple[float, float]
    ylim: Tuple[float, float]


def check_scales(series: Sequence[Series], config: ChartConfig):
    """ Log axes need strictly positive values on that axis in every series. """
    for axis, scale in (("x", config.xscale), ("y", config.yscale)):
        if scale is not Scale.LOG:
            continue
        for s in series:
            values = s.x if axis == "x" else s.y
            bad = np.flatnonzero(values <= 0)
            if len(bad) > 0:
                i = bad[0]
                raise InvalidScaleForData(s.path, int(s.linenos[i]), axis, float(values[i]))


def draw(fig, series: Sequence[Series], config: ChartConfig):
    ax = fig.add_subplot(1, 1, 1)
    lines = []
    handles = []
    for i, s in enumerate(series):
        style = config.style_for(i)
        marker = MARKERS[i % len(MARKERS)] if style is LineStyle.LINE_POINTS else None
        color = f"C{i % 10}"
        line, = ax.plot(s.x, s.y, label=s.label, color=color, marker=marker, linewidth=1.5)
        if config.errorbars and s.err is not None:
            lower = s.err
            if config.yscale is Scale.LOG:
                # keep the bar above zero
                lower = np.minimum(s.err, s.y * 0.999)
            ax.errorbar(s.x, s.y, yerr=[lower, s.err], fmt='none', ecolor=color,
                        alpha=0.5, capsize=2)
        handles.append(line)
        lines.append((line.get_xdata(), line.get_ydata()))

    ax.set_xscale(config.xscale.value)
    ax.set_yscale(config.yscale.value)
    if config.title:
        ax.set_title(config.title)
    if config.xlabel:
        ax.set_xlabel(config.xlabel)
    if config.ylabel:
        ax.set_ylabel(config.ylabel)
    if config.grid:
        ax.grid(True, linestyle='--', alpha=0.7)

    labels = []
    if config.legend_position is not LegendPosition.NONE:
        # explicit labels, matplotlib drops labels starting with "_" otherwise
        legend = ax.legend(handles, [s.label for s in series],
                           loc=LEGEND_LOC[config.legend_position],
                           prop={"family": config.legend_font, "size": config.legend_fontsize})
        labels = [text.get_text() for text in legend.get_texts()]

    fig.tight_layout()
    return ax, labels, lines


def output_format(fig, output: str) -> str:
    """ Image format for `output`, checked before anything is drawn. """
    directory = os.path.dirname(os.path.abspath(output))
    if not os.path.isdir(directory):
        raise ConfigurationError(f"{output}: output directory does not exist")
    ext = os.path.splitext(output)[1].lstrip('.').lower() or "png"
    supported = fig.canvas.get_supported_filetypes()
    if ext not in supported:
        raise ConfigurationError(
            f"{output}: unsupported image format {ext!r} (choose from {', '.join(sorted(supported))})")
    return ext


def save(fig, output: str, ext: str):
    """ Write `fig` to `output` through a temporary file, so a failure leaves nothing behind. """
    directory = os.path.dirname(os.path.abspath(output))
    fd, tmp = tempfile.mkstemp(dir=directory, prefix=".fuzzplot-", suffix="." + ext)
    os.close(fd)
    try:
        with rc_context({"svg.hashsalt": "fuzzplot"}):
            fig.savefig(tmp, format=ext, metadata=VOLATILE_METADATA.get(ext))
        os.replace(tmp, output)
    except BaseException:
        if os.path.exists(tmp):
            os.remove(tmp)
        raise


def render(series: Sequence[Series], config: ChartConfig, output: Optional[str] = None) -> RenderResult:
    """
    Plot every series of `series` into one chart.

    With `output` the chart is written to that file (format from the
    extension), otherwise it is shown in a window. Legend entries keep the
    order of `series`.
    """
    if len(series) == 0:
        raise ConfigurationError("no series to plot")
    if len(config.styles) not in (1, len(series)):
        raise ConfigurationError(
            f"got {len(config.styles)} line styles for {len(series)} series")
    check_scales(series, config)

    if output is not None:
        # private figure, pyplot's global state is not touched
        fig = Figure(figsize=config.figsize, dpi=config.dpi)
        FigureCanvasAgg(fig)
        ext = output_format(fig, output)
        ax, labels, lines = draw(fig, series, config)
        save(fig, output, ext)
        log.info("wrote", output)
    else:
        fig = plt.figure(figsize=config.figsize, dpi=config.dpi)
        try:
            ax, labels, lines = draw(fig, series, config)
            plt.show()
        finally:
            plt.close(fig)

    return RenderResult(output, labels, lines, tuple(ax.get_xlim()), tuple(ax.get_ylim()))
