from __future__ import annotations

from dataclasses import dataclass


Point = tuple[int, int]


@dataclass(frozen=True)
class Rect:
    """Half-open cell rectangle: columns ``min_x..max_x-1``, rows ``min_y..max_y-1``."""

    min_x: int
    min_y: int
    max_x: int
    max_y: int

    @classmethod
    def from_size(cls, width: int, height: int, *, x: int = 0, y: int = 0) -> "Rect":
        return cls(x, y, x + width, y + height)

    @property
    def width(self) -> int:
        return max(0, self.max_x - self.min_x)

    @property
    def height(self) -> int:
        return max(0, self.max_y - self.min_y)

    @property
    def empty(self) -> bool:
        return self.width == 0 or self.height == 0

    def contains(self, x: int, y: int) -> bool:
        return self.min_x <= x < self.max_x and self.min_y <= y < self.max_y

    def inset(self, left: int = 0, top: int = 0, right: int = 0, bottom: int = 0) -> "Rect":
        return Rect(self.min_x + left, self.min_y + top, self.max_x - right, self.max_y - bottom)

    def intersect(self, other: "Rect") -> "Rect":
        x0 = max(self.min_x, other.min_x)
        y0 = max(self.min_y, other.min_y)
        x1 = min(self.max_x, other.max_x)
        y1 = min(self.max_y, other.max_y)
        if x1 <= x0 or y1 <= y0:
            return Rect(x0, y0, x0, y0)
        return Rect(x0, y0, x1, y1)
