from __future__ import annotations


# 256-colour palette indices; -1 leaves the terminal default in place.
COLOR_CLEAR = -1
COLOR_BLACK = 0
COLOR_RED = 1
COLOR_GREEN = 2
COLOR_YELLOW = 3
COLOR_BLUE = 4
COLOR_MAGENTA = 5
COLOR_CYAN = 6
COLOR_WHITE = 7

STANDARD_COLORS = (
    COLOR_RED,
    COLOR_GREEN,
    COLOR_YELLOW,
    COLOR_BLUE,
    COLOR_MAGENTA,
    COLOR_CYAN,
    COLOR_WHITE,
)

MODIFIER_CLEAR = 0
MODIFIER_BOLD = 1
MODIFIER_UNDERLINE = 2
MODIFIER_REVERSE = 4

BLANK = " "
DOT = "•"
BOTTOM_LEFT = "└"
TOP_LEFT = "┌"
TOP_RIGHT = "┐"
BOTTOM_RIGHT = "┘"
HORIZONTAL_LINE = "─"
VERTICAL_LINE = "│"
HORIZONTAL_DASH = "┈"
VERTICAL_DASH = "┊"

BRAILLE_OFFSET = 0x2800
# Dot bit for sub-cell (row, column) inside one braille glyph.
BRAILLE_DOTS = (
    (0x01, 0x08),
    (0x02, 0x10),
    (0x04, 0x20),
    (0x40, 0x80),
)
