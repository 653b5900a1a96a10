from __future__ import annotations

import logging
from typing import Any, Sequence

from cellplot.axes import AxisLabeler, draw_area
from cellplot.bounds import EMPTY_BOUNDS, Bounds, widen
from cellplot.cells.block import Block
from cellplot.cells.buffer import CellBuffer
from cellplot.commands import apply_commands
from cellplot.config import CONFIG_OPTIONS, PlotConfig, plot_config_from_options
from cellplot.errors import PlotConfigError
from cellplot.geometry import Rect
from cellplot.render import render
from cellplot.series import EMPTY_SERIES, SeriesSet
from cellplot.theme import DEFAULT_THEME, PlotTheme


LOGGER = logging.getLogger(__name__)

_DATA_OPTIONS = frozenset({"data", "data_labels"})


class Plot:
    """Line or scatter chart drawn inside a bordered block.

    Bounds are sticky: each redraw widens them to cover the current data and
    they never shrink for the lifetime of the widget. Call ``reset_bounds`` to
    start over. Not safe to redraw concurrently.
    """

    def __init__(
        self,
        rect: Rect,
        *,
        config: PlotConfig | None = None,
        theme: PlotTheme = DEFAULT_THEME,
        title: str = "",
        border: bool = True,
    ) -> None:
        self.block = Block(rect=rect, border=border, title=title)
        self.theme = theme
        self.config = config if config is not None else PlotConfig.from_theme(theme)
        self.data: SeriesSet = EMPTY_SERIES
        self.data_labels: tuple[str, ...] = ()
        self.bounds: Bounds = EMPTY_BOUNDS

    @property
    def inner(self) -> Rect:
        return self.block.inner

    def set_data(self, data: Any, names: Sequence[str] | None = None) -> None:
        self.data = _coerce_data(data, names)

    def set_labels(self, labels: Sequence[str] | None) -> None:
        self.data_labels = _coerce_labels(labels)

    def configure(self, **options: Any) -> None:
        """Apply recognised options; ``data`` and ``data_labels`` update the dataset."""
        unknown = set(options) - CONFIG_OPTIONS - _DATA_OPTIONS
        if unknown:
            raise PlotConfigError(f"unknown plot option: {sorted(unknown)[0]}")
        config_options = {k: v for k, v in options.items() if k in CONFIG_OPTIONS}
        # Everything is validated before any attribute changes.
        config = plot_config_from_options(config_options, base=self.config) if config_options else self.config
        data = _coerce_data(options["data"]) if "data" in options else self.data
        labels = _coerce_labels(options["data_labels"]) if "data_labels" in options else self.data_labels
        self.config = config
        self.data = data
        self.data_labels = labels

    def reset_bounds(self) -> None:
        self.bounds = EMPTY_BOUNDS

    def validate(self) -> None:
        if self.config.chart_kind != "scatter":
            return
        if len(self.data) != 2:
            LOGGER.warning("scatter plot given %d series", len(self.data))
            raise PlotConfigError(f"scatter plot requires exactly 2 series (x, y), got {len(self.data)}")
        x_len, y_len = self.data[0].size, self.data[1].size
        if x_len != y_len:
            LOGGER.warning("scatter plot series lengths differ: %d != %d", x_len, y_len)
            raise PlotConfigError(f"scatter x and y length mismatch: {x_len} != {y_len}")

    def draw_area(self) -> Rect:
        return draw_area(self.inner, self.config.show_axes)

    def redraw(self, buffer: CellBuffer) -> None:
        self.validate()
        self.bounds = widen(self.bounds, self.data, self.config.chart_kind)

        self.block.draw(buffer)
        if self.config.show_axes:
            labeler = AxisLabeler(inner=self.inner, bounds=self.bounds, config=self.config, labels=self.data_labels)
            apply_commands(buffer, labeler.commands())

        area = self.draw_area()
        if not self.bounds.is_defined(self.config.chart_kind):
            LOGGER.debug("skipping plot body: no finite data yet")
            return
        if area.empty:
            LOGGER.debug("skipping plot body: draw area %s is empty", area)
            return
        apply_commands(buffer, render(self.data, self.bounds, area, self.config), canvas_rect=area)


def _coerce_data(data: Any, names: Sequence[str] | None = None) -> SeriesSet:
    return data if isinstance(data, SeriesSet) else SeriesSet.from_values(data, names=names)


def _coerce_labels(labels: Sequence[str] | None) -> tuple[str, ...]:
    return tuple(str(label) for label in labels) if labels else ()
