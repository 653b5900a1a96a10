from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator, Literal, Sequence

import numpy as np

from cellplot.adapters.normalize import normalize_series_list
from cellplot.errors import PlotDataError


ChartKind = Literal["line", "scatter"]
MarkerResolution = Literal["coarse", "fine"]

CHART_KINDS: tuple[ChartKind, ...] = ("line", "scatter")
MARKER_RESOLUTIONS: tuple[MarkerResolution, ...] = ("coarse", "fine")


@dataclass(frozen=True)
class SeriesSet:
    """Ordered, named numeric series supplied fresh on every redraw.

    In line mode each series is a run of Y values indexed by position. In
    scatter mode the first series holds X values and the second Y values.
    """

    series: tuple[np.ndarray, ...] = ()
    names: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if len(self.names) != len(self.series):
            raise PlotDataError(f"series/name count mismatch: {len(self.series)} != {len(self.names)}")
        if len(set(self.names)) != len(self.names):
            raise PlotDataError("series names must be unique")

    @classmethod
    def from_values(cls, values: Any, names: Sequence[str] | None = None) -> "SeriesSet":
        arrays = normalize_series_list(values)
        if names is None:
            resolved = tuple(f"series-{i}" for i in range(len(arrays)))
        else:
            resolved = tuple(str(n) for n in names)
        return cls(series=tuple(arrays), names=resolved)

    def __len__(self) -> int:
        return len(self.series)

    def __iter__(self) -> Iterator[np.ndarray]:
        return iter(self.series)

    def __getitem__(self, index: int) -> np.ndarray:
        return self.series[index]

    @property
    def is_empty(self) -> bool:
        return all(s.size == 0 for s in self.series)

    def finite_values(self, indices: Sequence[int] | None = None) -> np.ndarray:
        chosen = self.series if indices is None else tuple(self.series[i] for i in indices)
        if not chosen:
            return np.empty(0, dtype=np.float64)
        values = np.concatenate(chosen)
        return values[np.isfinite(values)]


EMPTY_SERIES = SeriesSet()
