from .block import Block
from .braille import BrailleCanvas
from .buffer import DEFAULT_STYLE, Cell, CellBuffer, Style

__all__ = [
    "Block",
    "BrailleCanvas",
    "Cell",
    "CellBuffer",
    "DEFAULT_STYLE",
    "Style",
]
