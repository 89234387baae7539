"""Log-log plots of fuzzing experiment results."""
from fuzzplot.config import ChartConfig, LegendPosition, LineStyle, Scale
from fuzzplot.errors import (ConfigurationError, DataFileNotFound, FuzzplotError,
                             InvalidScaleForData, MalformedRow)
from fuzzplot.render import RenderResult, render
from fuzzplot.series import Series, load_series

__version__ = "0.1.0"
