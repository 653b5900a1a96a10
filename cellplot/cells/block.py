from __future__ import annotations

from dataclasses import dataclass, field

from cellplot.cells.buffer import Cell, CellBuffer, Style
from cellplot.cells.symbols import (
    BOTTOM_LEFT,
    BOTTOM_RIGHT,
    HORIZONTAL_LINE,
    TOP_LEFT,
    TOP_RIGHT,
    VERTICAL_LINE,
)
from cellplot.geometry import Rect


@dataclass
class Block:
    """Bordered rectangle; ``inner`` is the area left for content."""

    rect: Rect
    border: bool = True
    title: str = ""
    border_style: Style = field(default_factory=Style)
    title_style: Style = field(default_factory=Style)

    @property
    def inner(self) -> Rect:
        if not self.border:
            return self.rect
        inner = self.rect.inset(1, 1, 1, 1)
        if inner.max_x < inner.min_x or inner.max_y < inner.min_y:
            return Rect(inner.min_x, inner.min_y, inner.min_x, inner.min_y)
        return inner

    def draw(self, buffer: CellBuffer) -> None:
        if not self.border or self.rect.width < 2 or self.rect.height < 2:
            return
        r = self.rect
        style = self.border_style
        for x in range(r.min_x + 1, r.max_x - 1):
            buffer.set_cell(Cell(HORIZONTAL_LINE, style), (x, r.min_y))
            buffer.set_cell(Cell(HORIZONTAL_LINE, style), (x, r.max_y - 1))
        for y in range(r.min_y + 1, r.max_y - 1):
            buffer.set_cell(Cell(VERTICAL_LINE, style), (r.min_x, y))
            buffer.set_cell(Cell(VERTICAL_LINE, style), (r.max_x - 1, y))
        buffer.set_cell(Cell(TOP_LEFT, style), (r.min_x, r.min_y))
        buffer.set_cell(Cell(TOP_RIGHT, style), (r.max_x - 1, r.min_y))
        buffer.set_cell(Cell(BOTTOM_LEFT, style), (r.min_x, r.max_y - 1))
        buffer.set_cell(Cell(BOTTOM_RIGHT, style), (r.max_x - 1, r.max_y - 1))
        if self.title:
            # Title stays inside the top border, between the corners.
            room = max(0, r.width - 3)
            buffer.set_string(self.title[:room], self.title_style, (r.min_x + 2, r.min_y))
