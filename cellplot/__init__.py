from cellplot.axes import AxisLabeler, TickLabel, draw_area
from cellplot.bounds import EMPTY_BOUNDS, Bounds, widen
from cellplot.config import PlotConfig, plot_config_from_options
from cellplot.errors import PlotConfigError, PlotDataError, PlotError
from cellplot.geometry import Rect
from cellplot.plot import Plot
from cellplot.render import RENDERERS, render
from cellplot.scales import CoordinateMapper
from cellplot.series import SeriesSet
from cellplot.theme import DEFAULT_THEME, PlotTheme, validate_theme

__all__ = [
    "AxisLabeler",
    "Bounds",
    "CoordinateMapper",
    "DEFAULT_THEME",
    "EMPTY_BOUNDS",
    "Plot",
    "PlotConfig",
    "PlotConfigError",
    "PlotDataError",
    "PlotError",
    "PlotTheme",
    "RENDERERS",
    "Rect",
    "SeriesSet",
    "TickLabel",
    "draw_area",
    "plot_config_from_options",
    "render",
    "validate_theme",
    "widen",
]
