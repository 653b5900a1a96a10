from __future__ import annotations

from dataclasses import dataclass, fields, replace
from typing import Any, Mapping

from cellplot.cells.symbols import DOT
from cellplot.errors import PlotConfigError
from cellplot.series import CHART_KINDS, MARKER_RESOLUTIONS, ChartKind, MarkerResolution
from cellplot.theme import DEFAULT_THEME, PlotTheme, validate_color


# Marker names used by other terminal plotting toolkits.
_RESOLUTION_ALIASES = {"dot": "coarse", "braille": "fine"}


@dataclass(frozen=True)
class PlotConfig:
    chart_kind: ChartKind = "line"
    marker_resolution: MarkerResolution = "fine"
    horizontal_scale: int = 1
    show_axes: bool = True
    line_colors: tuple[int, ...] = DEFAULT_THEME.lines
    axes_color: int = DEFAULT_THEME.axes
    dot_marker: str = DOT

    def __post_init__(self) -> None:
        if self.chart_kind not in CHART_KINDS:
            raise PlotConfigError(f"unsupported chart kind: {self.chart_kind!r}")
        if self.marker_resolution not in MARKER_RESOLUTIONS:
            raise PlotConfigError(f"unsupported marker resolution: {self.marker_resolution!r}")
        if isinstance(self.horizontal_scale, bool) or not isinstance(self.horizontal_scale, int) or self.horizontal_scale < 1:
            raise PlotConfigError(f"horizontal_scale must be a positive integer, got {self.horizontal_scale!r}")
        if not isinstance(self.show_axes, bool):
            raise PlotConfigError("show_axes must be a bool")
        if not self.line_colors:
            raise PlotConfigError("line_colors must not be empty")
        try:
            for color in self.line_colors:
                validate_color(color, name="line_colors")
            validate_color(self.axes_color, name="axes_color")
        except ValueError as exc:
            raise PlotConfigError(str(exc)) from exc
        if not isinstance(self.dot_marker, str) or len(self.dot_marker) != 1:
            raise PlotConfigError("dot_marker must be a single character")

    @classmethod
    def from_theme(cls, theme: PlotTheme, **changes: Any) -> "PlotConfig":
        return cls(line_colors=theme.lines, axes_color=theme.axes, **changes)

    def replace(self, **changes: Any) -> "PlotConfig":
        return replace(self, **changes)


CONFIG_OPTIONS = frozenset(f.name for f in fields(PlotConfig))


def plot_config_from_options(
    options: Mapping[str, Any],
    *,
    base: PlotConfig | None = None,
    theme: PlotTheme = DEFAULT_THEME,
) -> PlotConfig:
    """Build a config from recognised option names, rejecting anything else."""

    current = base if base is not None else PlotConfig.from_theme(theme)
    changes: dict[str, Any] = {}
    for key, value in options.items():
        if key not in CONFIG_OPTIONS:
            raise PlotConfigError(f"unknown plot option: {key}")
        if key == "marker_resolution":
            value = _RESOLUTION_ALIASES.get(value, value)
        elif key == "line_colors":
            if isinstance(value, (str, bytes)) or not isinstance(value, (list, tuple)):
                raise PlotConfigError("line_colors must be a sequence of colors")
            value = tuple(value)
        changes[key] = value
    return current.replace(**changes)
