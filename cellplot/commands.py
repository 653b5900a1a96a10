from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Union

from cellplot.cells.braille import BrailleCanvas
from cellplot.cells.buffer import Cell, CellBuffer, Style
from cellplot.geometry import Rect


@dataclass(frozen=True)
class SetCell:
    x: int
    y: int
    glyph: str
    style: Style


@dataclass(frozen=True)
class SetString:
    x: int
    y: int
    text: str
    style: Style


@dataclass(frozen=True)
class SetPoint:
    """Sub-cell dot, in braille coordinates."""

    x: int
    y: int
    color: int


@dataclass(frozen=True)
class SetLine:
    """Sub-cell line segment, in braille coordinates."""

    x0: int
    y0: int
    x1: int
    y1: int
    color: int


DrawCommand = Union[SetCell, SetString, SetPoint, SetLine]


def apply_commands(buffer: CellBuffer, commands: Iterable[DrawCommand], canvas_rect: Rect | None = None) -> None:
    """Replay ``commands`` onto ``buffer`` in order.

    Sub-cell commands are collected on a braille canvas covering
    ``canvas_rect`` (the whole buffer by default) and composited once every
    command has been replayed.
    """

    canvas: BrailleCanvas | None = None
    for cmd in commands:
        if isinstance(cmd, SetCell):
            buffer.set_cell(Cell(cmd.glyph, cmd.style), (cmd.x, cmd.y))
        elif isinstance(cmd, SetString):
            buffer.set_string(cmd.text, cmd.style, (cmd.x, cmd.y))
        elif isinstance(cmd, (SetPoint, SetLine)):
            if canvas is None:
                canvas = BrailleCanvas(canvas_rect if canvas_rect is not None else buffer.rect)
            if isinstance(cmd, SetPoint):
                canvas.set_point((cmd.x, cmd.y), cmd.color)
            else:
                canvas.set_line((cmd.x0, cmd.y0), (cmd.x1, cmd.y1), cmd.color)
        else:
            raise TypeError(f"unsupported draw command: {cmd!r}")
    if canvas is not None:
        canvas.draw(buffer)
