"""Chart layout settings and JSON chart files."""
import json
import os
from dataclasses import dataclass, fields
from enum import Enum
from typing import Tuple

from fuzzplot.errors import ConfigurationError, DataFileNotFound


class Scale(Enum):
    LINEAR = "linear"
    LOG = "log"


class LegendPosition(Enum):
    LEFT = "left"
    RIGHT = "right"
    TOP = "top"
    BOTTOM = "bottom"
    NONE = "none"


class LineStyle(Enum):
    LINE = "line"
    LINE_POINTS = "linespoints"


_STYLE_ALIASES = {"line+points": "linespoints"}


def _coerce(enum_type, value, name):
    if isinstance(value, enum_type):
        return value
    if enum_type is LineStyle:
        value = _STYLE_ALIASES.get(value, value)
    try:
        return enum_type(value)
    except ValueError:
        choices = ", ".join(member.value for member in enum_type)
        raise ConfigurationError(f"invalid {name} {value!r} (choose from {choices})") from None


@dataclass(frozen=True)
class ChartConfig:
    width: int = 1280
    height: int = 960
    title: str = ""
    xlabel: str = ""
    ylabel: str = ""
    xscale: Scale = Scale.LOG
    yscale: Scale = Scale.LOG
    legend_position: LegendPosition = LegendPosition.LEFT
    grid: bool = True
    styles: Tuple[LineStyle, ...] = (LineStyle.LINE,)
    legend_font: str = "monospace"
    legend_fontsize: float = 10
    errorbars: bool = False
    dpi: int = 100

    def __post_init__(self):
        # frozen, so normalized values go through object.__setattr__
        setattr_ = object.__setattr__
        setattr_(self, "xscale", _coerce(Scale, self.xscale, "xscale"))
        setattr_(self, "yscale", _coerce(Scale, self.yscale, "yscale"))
        setattr_(self, "legend_position",
                 _coerce(LegendPosition, self.legend_position, "legend position"))
        styles = self.styles
        if isinstance(styles, (str, LineStyle)):
            styles = (styles,)
        styles = tuple(_coerce(LineStyle, style, "line style") for style in styles)
        if len(styles) == 0:
            raise ConfigurationError("at least one line style is required")
        setattr_(self, "styles", styles)

        for name in ("width", "height", "dpi"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
                raise ConfigurationError(f"{name} must be a positive integer, got {value!r}")
        fontsize = self.legend_fontsize
        if isinstance(fontsize, bool) or not isinstance(fontsize, (int, float)) or fontsize <= 0:
            raise ConfigurationError(f"legend_fontsize must be a positive number, got {fontsize!r}")

    @property
    def figsize(self):
        """ Canvas size in inches for matplotlib. """
        return self.width / self.dpi, self.height / self.dpi

    def style_for(self, index: int) -> LineStyle:
        if len(self.styles) == 1:
            return self.styles[0]
        return self.styles[index]

    @classmethod
    def from_dict(cls, values: dict) -> "ChartConfig":
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(values) - known)
        if unknown:
            raise ConfigurationError(f"unknown chart setting(s): {', '.join(unknown)}")
        return cls(**values)


CHART_FILE_KEYS = ("series", "preset", "preset_dir")


@dataclass(frozen=True)
class ChartFile:
    series: list
    preset: str
    preset_dir: str
    settings: dict


def load_chart_file(path: str) -> ChartFile:
    """
    Read a JSON chart description.

    Series paths and `preset_dir` are resolved relative to the chart file.
    Everything besides `series`, `preset` and `preset_dir` must be a
    ChartConfig field; those are returned unvalidated in `settings` so the
    command line can override them before the ChartConfig is built.
    """
    if not os.path.isfile(path):
        raise DataFileNotFound(path)
    try:
        with open(path, 'r') as fobj:
            obj = json.load(fobj)
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"{path}: {e}") from None
    if not isinstance(obj, dict):
        raise ConfigurationError(f"{path}: expected a JSON object")

    base = os.path.dirname(os.path.abspath(path))
    series = []
    for entry in obj.get("series", []):
        if not isinstance(entry, dict) or "label" not in entry or "path" not in entry:
            raise ConfigurationError(f"{path}: series entries need a label and a path")
        series.append((entry["label"], os.path.join(base, entry["path"])))

    preset_dir = obj.get("preset_dir")
    if preset_dir is not None:
        preset_dir = os.path.join(base, preset_dir)

    settings = {key: value for key, value in obj.items() if key not in CHART_FILE_KEYS}
    known = {f.name for f in fields(ChartConfig)}
    unknown = sorted(set(settings) - known)
    if unknown:
        raise ConfigurationError(f"{path}: unknown chart setting(s): {', '.join(unknown)}")

    return ChartFile(series, obj.get("preset"), preset_dir, settings)
