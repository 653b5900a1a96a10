from __future__ import annotations

from dataclasses import dataclass

from cellplot.bounds import Bounds
from cellplot.cells.buffer import Style
from cellplot.cells.symbols import BOTTOM_LEFT, HORIZONTAL_DASH, VERTICAL_DASH
from cellplot.commands import DrawCommand, SetCell, SetString
from cellplot.config import PlotConfig
from cellplot.geometry import Rect


X_AXIS_LABELS_HEIGHT = 1
Y_AXIS_LABELS_WIDTH = 4
X_AXIS_LABELS_GAP = 2
Y_AXIS_LABELS_GAP = 1


def draw_area(inner: Rect, show_axes: bool) -> Rect:
    """Plot rectangle left after reserving the label gutter and axis lines."""
    if not show_axes:
        return inner
    return Rect(
        inner.min_x + Y_AXIS_LABELS_WIDTH + 1,
        inner.min_y,
        inner.max_x,
        inner.max_y - X_AXIS_LABELS_HEIGHT - 1,
    )


@dataclass(frozen=True)
class TickLabel:
    text: str
    x: int
    y: int

    @property
    def end(self) -> int:
        return self.x + len(self.text)


@dataclass(frozen=True)
class AxisLabeler:
    """Lays out the axis skeleton and tick labels around a plot's inner rect.

    Y labels sit in a fixed four-column gutter, bottom to top, one every
    ``Y_AXIS_LABELS_GAP + 1`` rows. X labels are packed greedily left to right
    with ``X_AXIS_LABELS_GAP`` blank columns between them, so which indices
    get a label depends on the widths of the labels before them.
    """

    inner: Rect
    bounds: Bounds
    config: PlotConfig
    labels: tuple[str, ...] = ()

    @property
    def origin(self) -> tuple[int, int]:
        return (self.inner.min_x + Y_AXIS_LABELS_WIDTH, self.inner.max_y - X_AXIS_LABELS_HEIGHT - 1)

    @property
    def style(self) -> Style:
        return Style(fg=self.config.axes_color)

    def has_room(self) -> bool:
        return self.inner.width > Y_AXIS_LABELS_WIDTH and self.inner.height > X_AXIS_LABELS_HEIGHT

    def skeleton(self) -> list[DrawCommand]:
        if not self.has_room():
            return []
        style = self.style
        ox, oy = self.origin
        out: list[DrawCommand] = [SetCell(ox, oy, BOTTOM_LEFT, style)]
        for i in range(Y_AXIS_LABELS_WIDTH + 1, self.inner.width):
            out.append(SetCell(self.inner.min_x + i, oy, HORIZONTAL_DASH, style))
        for i in range(self.inner.height - X_AXIS_LABELS_HEIGHT - 1):
            out.append(SetCell(ox, self.inner.min_y + i, VERTICAL_DASH, style))
        return out

    def y_labels(self) -> list[TickLabel]:
        if not self.has_room() or not self.bounds.has_values:
            return []
        drawable_rows = self.inner.height - X_AXIS_LABELS_HEIGHT - 1
        if drawable_rows <= 0:
            return []
        step = Y_AXIS_LABELS_GAP + 1
        vertical_scale = self.bounds.value_span / drawable_rows
        out: list[TickLabel] = []
        k = 0
        while k * step < self.inner.height - 1:
            value = self.bounds.vmin + k * step * vertical_scale
            out.append(TickLabel(f"{value:.2f}", self.inner.min_x, self.inner.max_y - k * step - 2))
            k += 1
        return out

    def x_labels(self) -> list[TickLabel]:
        if not self.has_room() or not self.bounds.is_defined(self.config.chart_kind):
            return []
        if self.config.chart_kind == "scatter":
            return self._scatter_x_labels()
        return self._line_x_labels()

    def _line_x_labels(self) -> list[TickLabel]:
        scale = self.config.horizontal_scale
        x0 = self.inner.min_x + Y_AXIS_LABELS_WIDTH
        row = self.inner.max_y - 1
        first = self.labels[0] if self.labels else "0"
        out = [TickLabel(first[: self.inner.max_x - x0], x0, row)]
        x = x0 + (X_AXIS_LABELS_GAP + len(first) - 1) * scale + 1
        while x < self.inner.max_x - 1:
            index = (x - x0 - 1) // scale + 1
            text = self.labels[index] if len(self.labels) > index else str(index)
            out.append(TickLabel(text[: self.inner.max_x - x], x, row))
            x += (len(text) + X_AXIS_LABELS_GAP) * scale
        return out

    def _scatter_x_labels(self) -> list[TickLabel]:
        scale = self.config.horizontal_scale
        x0 = self.inner.min_x + Y_AXIS_LABELS_WIDTH
        row = self.inner.max_y - 1
        columns = max(1, self.inner.width - Y_AXIS_LABELS_WIDTH - 1)
        out: list[TickLabel] = []
        x = x0
        while x < self.inner.max_x - 1:
            index = (x - x0) // scale
            if len(self.labels) > index:
                text = self.labels[index]
            else:
                text = f"{self.bounds.xmin + index * self.bounds.x_span / columns:.2f}"
            out.append(TickLabel(text[: self.inner.max_x - x], x, row))
            x += (len(text) + X_AXIS_LABELS_GAP) * scale
        return out

    def commands(self) -> list[DrawCommand]:
        out = self.skeleton()
        style = self.style
        for label in self.y_labels() + self.x_labels():
            out.append(SetString(label.x, label.y, label.text, style))
        return out
