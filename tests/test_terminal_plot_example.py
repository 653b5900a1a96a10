from __future__ import annotations

import importlib.util
from pathlib import Path
import unittest

import numpy as np

from cellplot import Plot, Rect
from cellplot.cells import CellBuffer


def _load_demo():
    path = Path(__file__).resolve().parents[1] / "examples" / "plots" / "terminal_plot" / "app_main.py"
    spec = importlib.util.spec_from_file_location("terminal_plot_app_main", path)
    assert spec is not None and spec.loader is not None
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


class TerminalPlotExampleTests(unittest.TestCase):
    def test_line_demo_draws_braille_marks(self) -> None:
        buf = _load_demo().line_demo(width=60, height=14)
        text = "\n".join(buf.to_lines())
        self.assertIn("sin / cos", text)
        self.assertTrue(any(0x2800 < ord(ch) <= 0x28FF for ch in text))

    def test_line_demo_matches_clean_render_of_last_frame(self) -> None:
        demo = _load_demo()
        out = demo.line_demo(width=60, height=14)

        plot = Plot(Rect.from_size(60, 14), title="sin / cos")
        x = np.linspace(0.0, 4.0 * np.pi, 120)
        for end in demo.LINE_DEMO_FRAMES[:-1]:
            plot.set_data(demo.line_demo_series(x, end))
            plot.redraw(CellBuffer.of_size(60, 14))
        expected = CellBuffer.of_size(60, 14)
        plot.set_data(demo.line_demo_series(x, demo.LINE_DEMO_FRAMES[-1]))
        plot.redraw(expected)

        self.assertEqual(out.to_lines(), expected.to_lines())
        self.assertTrue(np.array_equal(out.fg, expected.fg))

    def test_scatter_demo_draws_dots(self) -> None:
        buf = _load_demo().scatter_demo(width=60, height=14)
        self.assertIn("•", "\n".join(buf.to_lines()))


if __name__ == "__main__":
    unittest.main()
