from __future__ import annotations

import numpy as np

from cellplot.cells.buffer import Cell, CellBuffer, Style
from cellplot.cells.symbols import BRAILLE_DOTS, BRAILLE_OFFSET, COLOR_CLEAR
from cellplot.geometry import Point, Rect


class BrailleCanvas:
    """Accumulates 2x4 sub-cell dots over a cell rectangle.

    Sub-cell coordinates are ``(2 * cell_x + dx, 4 * cell_y + dy)``. Dots whose
    cell lies outside ``rect`` are dropped.
    """

    def __init__(self, rect: Rect) -> None:
        self.rect = rect
        shape = (rect.height, rect.width)
        self.bits = np.zeros(shape, dtype=np.uint8)
        self.colors = np.full(shape, COLOR_CLEAR, dtype=np.int16)

    def set_point(self, point: Point, color: int) -> None:
        x, y = point
        cx, cy = x // 2, y // 4
        if not self.rect.contains(cx, cy):
            return
        r = cy - self.rect.min_y
        c = cx - self.rect.min_x
        self.bits[r, c] |= BRAILLE_DOTS[y % 4][x % 2]
        self.colors[r, c] = color

    def set_line(self, start: Point, end: Point, color: int) -> None:
        x0, y0 = start
        x1, y1 = end
        dx = abs(x1 - x0)
        sx = 1 if x0 < x1 else -1
        dy = -abs(y1 - y0)
        sy = 1 if y0 < y1 else -1
        err = dx + dy

        while True:
            self.set_point((x0, y0), color)
            if x0 == x1 and y0 == y1:
                break
            e2 = 2 * err
            if e2 >= dy:
                err += dy
                x0 += sx
            if e2 <= dx:
                err += dx
                y0 += sy

    def draw(self, buffer: CellBuffer) -> None:
        rows, cols = np.nonzero(self.bits)
        for r, c in zip(rows.tolist(), cols.tolist(), strict=False):
            glyph = chr(BRAILLE_OFFSET | int(self.bits[r, c]))
            buffer.set_cell(
                Cell(glyph, Style(fg=int(self.colors[r, c]))),
                (c + self.rect.min_x, r + self.rect.min_y),
            )
