from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from cellplot.cells.symbols import (
    BLANK,
    COLOR_CLEAR,
    MODIFIER_BOLD,
    MODIFIER_CLEAR,
    MODIFIER_REVERSE,
    MODIFIER_UNDERLINE,
)
from cellplot.geometry import Point, Rect


@dataclass(frozen=True)
class Style:
    fg: int = COLOR_CLEAR
    bg: int = COLOR_CLEAR
    modifier: int = MODIFIER_CLEAR


DEFAULT_STYLE = Style()


@dataclass(frozen=True)
class Cell:
    glyph: str = BLANK
    style: Style = DEFAULT_STYLE

    def __post_init__(self) -> None:
        if len(self.glyph) != 1:
            raise ValueError("cell glyph must be a single character")


class CellBuffer:
    """Grid of styled glyphs covering ``rect``.

    Writes are plain overwrites; anything outside ``rect`` is dropped.
    """

    def __init__(self, rect: Rect, fill: Cell = Cell()) -> None:
        if rect.empty:
            raise ValueError("buffer rect must have a positive width and height")
        self.rect = rect
        shape = (rect.height, rect.width)
        self.glyphs = np.full(shape, fill.glyph, dtype="<U1")
        self.fg = np.full(shape, fill.style.fg, dtype=np.int16)
        self.bg = np.full(shape, fill.style.bg, dtype=np.int16)
        self.modifiers = np.full(shape, fill.style.modifier, dtype=np.int16)

    @classmethod
    def of_size(cls, width: int, height: int) -> "CellBuffer":
        return cls(Rect.from_size(width, height))

    def _index(self, point: Point) -> tuple[int, int] | None:
        x, y = point
        if not self.rect.contains(x, y):
            return None
        return (y - self.rect.min_y, x - self.rect.min_x)

    def set_cell(self, cell: Cell, point: Point) -> None:
        idx = self._index(point)
        if idx is None:
            return
        self.glyphs[idx] = cell.glyph
        self.fg[idx] = cell.style.fg
        self.bg[idx] = cell.style.bg
        self.modifiers[idx] = cell.style.modifier

    def set_string(self, text: str, style: Style, point: Point) -> None:
        x, y = point
        for offset, ch in enumerate(text):
            self.set_cell(Cell(ch, style), (x + offset, y))

    def get_cell(self, point: Point) -> Cell:
        idx = self._index(point)
        if idx is None:
            raise IndexError(f"point {point} is outside buffer {self.rect}")
        style = Style(fg=int(self.fg[idx]), bg=int(self.bg[idx]), modifier=int(self.modifiers[idx]))
        return Cell(str(self.glyphs[idx]), style)

    def fill(self, cell: Cell, rect: Rect) -> None:
        area = rect.intersect(self.rect)
        if area.empty:
            return
        rows = slice(area.min_y - self.rect.min_y, area.max_y - self.rect.min_y)
        cols = slice(area.min_x - self.rect.min_x, area.max_x - self.rect.min_x)
        self.glyphs[rows, cols] = cell.glyph
        self.fg[rows, cols] = cell.style.fg
        self.bg[rows, cols] = cell.style.bg
        self.modifiers[rows, cols] = cell.style.modifier

    def to_lines(self) -> list[str]:
        return ["".join(row.tolist()) for row in self.glyphs]

    def to_ansi(self) -> str:
        out: list[str] = []
        for r in range(self.rect.height):
            current: tuple[int, int, int] | None = None
            parts: list[str] = []
            for c in range(self.rect.width):
                key = (int(self.fg[r, c]), int(self.bg[r, c]), int(self.modifiers[r, c]))
                if key != current:
                    parts.append(_sgr(*key))
                    current = key
                parts.append(str(self.glyphs[r, c]))
            parts.append("\x1b[0m")
            out.append("".join(parts))
        return "\n".join(out)


def _sgr(fg: int, bg: int, modifier: int) -> str:
    codes = ["0"]
    if modifier & MODIFIER_BOLD:
        codes.append("1")
    if modifier & MODIFIER_UNDERLINE:
        codes.append("4")
    if modifier & MODIFIER_REVERSE:
        codes.append("7")
    if fg >= 0:
        codes.append(f"38;5;{fg}")
    if bg >= 0:
        codes.append(f"48;5;{bg}")
    return f"\x1b[{';'.join(codes)}m"
