from __future__ import annotations

import logging

import numpy as np

from cellplot import Plot, PlotConfig, Rect
from cellplot.cells import CellBuffer


LINE_DEMO_FRAMES = (30, 60, 120)


def line_demo_series(x: np.ndarray, end: int) -> list[np.ndarray]:
    return [np.sin(x[:end]) * 5.0, np.cos(x[:end]) * 3.0]


def line_demo(width: int = 72, height: int = 18) -> CellBuffer:
    plot = Plot(Rect.from_size(width, height), title="sin / cos")
    x = np.linspace(0.0, 4.0 * np.pi, 120)
    # Grow the window each frame; bounds only ever widen. Each frame starts
    # from a blank buffer, as a render loop would.
    for end in LINE_DEMO_FRAMES:
        buf = CellBuffer.of_size(width, height)
        plot.set_data(line_demo_series(x, end), names=["sin", "cos"])
        plot.redraw(buf)
    return buf


def scatter_demo(width: int = 72, height: int = 18) -> CellBuffer:
    rng = np.random.default_rng(7)
    xs = rng.normal(10.0, 3.0, 200)
    ys = xs * 0.8 + rng.normal(0.0, 1.5, 200)
    plot = Plot(
        Rect.from_size(width, height),
        config=PlotConfig(chart_kind="scatter", marker_resolution="coarse"),
        title="scatter",
    )
    plot.set_data([xs, ys], names=["x", "y"])
    buf = CellBuffer.of_size(width, height)
    plot.redraw(buf)
    return buf


def main() -> None:
    logging.basicConfig(level=logging.INFO)
    print(line_demo().to_ansi())
    print(scatter_demo().to_ansi())


if __name__ == "__main__":
    main()
