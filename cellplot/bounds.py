from __future__ import annotations

from dataclasses import dataclass
import math

from cellplot.series import ChartKind, SeriesSet


@dataclass(frozen=True)
class Bounds:
    """Running extrema of plotted values.

    ``vmin``/``vmax`` cover the value (vertical) domain. ``xmin``/``xmax``
    cover the horizontal domain and are only tracked for scatter plots.
    Unset bounds hold the +inf/-inf sentinels. A domain whose span overflows
    float64 is treated as unset so no label or cell is computed from it.
    """

    vmin: float = math.inf
    vmax: float = -math.inf
    xmin: float = math.inf
    xmax: float = -math.inf

    @property
    def has_values(self) -> bool:
        return math.isfinite(self.vmin) and math.isfinite(self.vmax) and math.isfinite(self.value_span)

    @property
    def has_x(self) -> bool:
        return math.isfinite(self.xmin) and math.isfinite(self.xmax) and math.isfinite(self.x_span)

    def is_defined(self, chart_kind: ChartKind = "line") -> bool:
        if chart_kind == "scatter":
            return self.has_values and self.has_x
        return self.has_values

    @property
    def value_span(self) -> float:
        return self.vmax - self.vmin

    @property
    def x_span(self) -> float:
        return self.xmax - self.xmin


EMPTY_BOUNDS = Bounds()


def widen(bounds: Bounds, data: SeriesSet, chart_kind: ChartKind = "line") -> Bounds:
    """Return ``bounds`` grown to cover ``data``; bounds never shrink.

    Line charts take value extrema over every series. Scatter charts take
    value extrema from the Y series (index 1) and horizontal extrema from the
    X series (index 0). Non-finite samples are ignored, so an empty dataset
    returns ``bounds`` unchanged.
    """

    if chart_kind == "scatter":
        values = data.finite_values([1]) if len(data) > 1 else data.finite_values([])
        xs = data.finite_values([0]) if len(data) > 0 else data.finite_values([])
    else:
        values = data.finite_values()
        xs = None

    vmin, vmax = bounds.vmin, bounds.vmax
    if values.size:
        vmin = min(vmin, float(values.min()))
        vmax = max(vmax, float(values.max()))

    xmin, xmax = bounds.xmin, bounds.xmax
    if xs is not None and xs.size:
        xmin = min(xmin, float(xs.min()))
        xmax = max(xmax, float(xs.max()))

    return Bounds(vmin=vmin, vmax=vmax, xmin=xmin, xmax=xmax)
