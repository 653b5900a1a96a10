from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from cellplot.bounds import Bounds
from cellplot.geometry import Rect


# Sub-cells per character cell along x and y.
FINE_X = 2
FINE_Y = 4


def normalize(values: np.ndarray, vmin: float, vmax: float) -> np.ndarray:
    """Map ``values`` onto [0, 1] over ``vmin..vmax``.

    Spans narrower than one unit are divided by 1 instead, which flattens the
    curve rather than dividing by (near) zero.
    """
    return (np.asarray(values, dtype=np.float64) - vmin) / max(1.0, vmax - vmin)


def scale_to_cells(values: np.ndarray, vmin: float, vmax: float, cells: int) -> np.ndarray:
    return np.floor(normalize(values, vmin, vmax) * cells).astype(np.int64)


@dataclass(frozen=True)
class CellPositions:
    xs: np.ndarray
    ys: np.ndarray
    valid: np.ndarray

    def points(self) -> list[tuple[int, int]]:
        return [(int(x), int(y)) for x, y in zip(self.xs[self.valid].tolist(), self.ys[self.valid].tolist(), strict=False)]


@dataclass(frozen=True)
class CoordinateMapper:
    """Maps samples to cell positions inside ``area``.

    Row 0 of the plot is the bottom row of ``area``; a sample equal to
    ``bounds.vmin`` lands there and one equal to ``bounds.vmax`` lands on the
    top row. ``valid`` marks samples that had finite inputs.
    """

    bounds: Bounds
    area: Rect
    horizontal_scale: int = 1

    def cell_height(self, value: float) -> int:
        return int(self.cell_heights(np.asarray([value], dtype=np.float64))[0])

    def cell_heights(self, values: np.ndarray) -> np.ndarray:
        return scale_to_cells(values, self.bounds.vmin, self.bounds.vmax, self.area.height - 1)

    def line_positions(self, values: np.ndarray) -> CellPositions:
        values = np.asarray(values, dtype=np.float64)
        valid = np.isfinite(values)
        xs = self.area.min_x + np.arange(values.size, dtype=np.int64) * self.horizontal_scale
        heights = self.cell_heights(np.where(valid, values, self.bounds.vmin))
        ys = self.area.max_y - 1 - heights
        return CellPositions(xs=xs, ys=ys, valid=valid)

    def scatter_positions(self, x_values: np.ndarray, y_values: np.ndarray) -> CellPositions:
        x_values = np.asarray(x_values, dtype=np.float64)
        y_values = np.asarray(y_values, dtype=np.float64)
        valid = np.isfinite(x_values) & np.isfinite(y_values)
        columns = scale_to_cells(
            np.where(valid, x_values, self.bounds.xmin),
            self.bounds.xmin,
            self.bounds.xmax,
            self.horizontal_scale * (self.area.width - 1),
        )
        xs = self.area.min_x + columns
        heights = self.cell_heights(np.where(valid, y_values, self.bounds.vmin))
        ys = self.area.max_y - 1 - heights
        return CellPositions(xs=xs, ys=ys, valid=valid)

    def inside(self, positions: CellPositions) -> np.ndarray:
        a = self.area
        xs, ys = positions.xs, positions.ys
        return positions.valid & (xs >= a.min_x) & (xs < a.max_x) & (ys >= a.min_y) & (ys < a.max_y)

    @staticmethod
    def to_fine(positions: CellPositions) -> CellPositions:
        return CellPositions(xs=positions.xs * FINE_X, ys=positions.ys * FINE_Y, valid=positions.valid)
