from __future__ import annotations

from collections.abc import Sequence
from decimal import Decimal
from typing import Any

import numpy as np

from cellplot.errors import PlotDataError


def normalize_series(values: Any, *, label: str = "series") -> np.ndarray:
    """Coerce one series into a 1-D float64 array; ``None`` becomes NaN."""
    if isinstance(values, np.ndarray):
        if values.ndim != 1:
            raise PlotDataError(f"{label} must be 1-D")
        return _coerce_ndarray(values, label=label)

    if isinstance(values, Sequence) and not isinstance(values, (str, bytes, bytearray)):
        arr = np.asarray(values, dtype=object)
        if arr.ndim != 1:
            raise PlotDataError(f"{label} must be 1-D")
        return _coerce_ndarray(arr, label=label)

    raise PlotDataError(f"unsupported {label} input type: {type(values)!r}")


def normalize_series_list(values: Any) -> list[np.ndarray]:
    if isinstance(values, np.ndarray):
        if values.ndim == 1:
            return [normalize_series(values, label="series 0")]
        if values.ndim == 2:
            return [normalize_series(row, label=f"series {i}") for i, row in enumerate(values)]
        raise PlotDataError("array data must be 1-D or 2-D")
    if isinstance(values, Sequence) and not isinstance(values, (str, bytes, bytearray)):
        return [normalize_series(v, label=f"series {i}") for i, v in enumerate(values)]
    raise PlotDataError(f"unsupported data input type: {type(values)!r}")


def _coerce_ndarray(arr: np.ndarray, *, label: str) -> np.ndarray:
    if arr.dtype.kind in {"i", "u", "f", "b"}:
        return arr.astype(np.float64, copy=True)

    out = np.empty(arr.shape[0], dtype=np.float64)
    for i, raw in enumerate(arr.tolist()):
        if raw is None:
            out[i] = np.nan
            continue
        if isinstance(raw, Decimal):
            out[i] = float(raw)
            continue
        if isinstance(raw, (str, bytes, bytearray, list, tuple)):
            raise PlotDataError(f"{label} contains non-numeric value at index {i}: {raw!r}")
        try:
            out[i] = float(raw)
        except (TypeError, ValueError) as exc:
            raise PlotDataError(f"{label} contains non-numeric value at index {i}: {raw!r}") from exc
    return out
