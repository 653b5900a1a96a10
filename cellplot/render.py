from __future__ import annotations

import logging
from typing import Callable

import numpy as np

from cellplot.bounds import Bounds
from cellplot.cells.buffer import Style
from cellplot.commands import DrawCommand, SetCell, SetLine, SetPoint
from cellplot.config import PlotConfig
from cellplot.geometry import Rect
from cellplot.scales import CoordinateMapper
from cellplot.series import ChartKind, MarkerResolution, SeriesSet
from cellplot.theme import select_color


LOGGER = logging.getLogger(__name__)

Renderer = Callable[[SeriesSet, Bounds, Rect, PlotConfig], list[DrawCommand]]


def _mapper(bounds: Bounds, area: Rect, config: PlotConfig) -> CoordinateMapper:
    return CoordinateMapper(bounds=bounds, area=area, horizontal_scale=config.horizontal_scale)


def render_line_coarse(data: SeriesSet, bounds: Bounds, area: Rect, config: PlotConfig) -> list[DrawCommand]:
    """One dot per sample, stopping at the last sample slot that fits the area."""
    mapper = _mapper(bounds, area, config)
    slots = -(-area.width // config.horizontal_scale)
    out: list[DrawCommand] = []
    for i, values in enumerate(data):
        style = Style(fg=select_color(config.line_colors, i))
        positions = mapper.line_positions(values[:slots])
        keep = mapper.inside(positions)
        dropped = int(np.count_nonzero(positions.valid & ~keep))
        if dropped:
            LOGGER.debug("clipped %d coarse points of series %d", dropped, i)
        for x, y in zip(positions.xs[keep].tolist(), positions.ys[keep].tolist(), strict=False):
            out.append(SetCell(int(x), int(y), config.dot_marker, style))
    return out


def render_line_fine(data: SeriesSet, bounds: Bounds, area: Rect, config: PlotConfig) -> list[DrawCommand]:
    """Join consecutive samples with sub-cell segments; gaps break the line."""
    mapper = _mapper(bounds, area, config)
    out: list[DrawCommand] = []
    for i, values in enumerate(data):
        color = select_color(config.line_colors, i)
        fine = mapper.to_fine(mapper.line_positions(values))
        xs, ys, valid = fine.xs.tolist(), fine.ys.tolist(), fine.valid.tolist()
        for j in range(len(xs)):
            if not valid[j]:
                continue
            prev_ok = j > 0 and valid[j - 1]
            next_ok = j + 1 < len(xs) and valid[j + 1]
            if next_ok:
                out.append(SetLine(xs[j], ys[j], xs[j + 1], ys[j + 1], color))
            elif not prev_ok:
                out.append(SetPoint(xs[j], ys[j], color))
    return out


def _scatter_positions(data: SeriesSet, bounds: Bounds, area: Rect, config: PlotConfig):
    mapper = _mapper(bounds, area, config)
    return mapper, mapper.scatter_positions(data[0], data[1])


def render_scatter_coarse(data: SeriesSet, bounds: Bounds, area: Rect, config: PlotConfig) -> list[DrawCommand]:
    mapper, positions = _scatter_positions(data, bounds, area, config)
    keep = mapper.inside(positions)
    style = Style(fg=select_color(config.line_colors, 0))
    return [
        SetCell(int(x), int(y), config.dot_marker, style)
        for x, y in zip(positions.xs[keep].tolist(), positions.ys[keep].tolist(), strict=False)
    ]


def render_scatter_fine(data: SeriesSet, bounds: Bounds, area: Rect, config: PlotConfig) -> list[DrawCommand]:
    mapper, positions = _scatter_positions(data, bounds, area, config)
    fine = mapper.to_fine(positions)
    color = select_color(config.line_colors, 0)
    return [SetPoint(x, y, color) for x, y in fine.points()]


RENDERERS: dict[tuple[ChartKind, MarkerResolution], Renderer] = {
    ("line", "coarse"): render_line_coarse,
    ("line", "fine"): render_line_fine,
    ("scatter", "coarse"): render_scatter_coarse,
    ("scatter", "fine"): render_scatter_fine,
}


def render(data: SeriesSet, bounds: Bounds, area: Rect, config: PlotConfig) -> list[DrawCommand]:
    return RENDERERS[(config.chart_kind, config.marker_resolution)](data, bounds, area, config)
