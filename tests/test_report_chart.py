import unittest
from decimal import Decimal
from pathlib import Path
import sys

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "tickerreport" / "src"
sys.path.insert(0, str(SRC))

from tickerreport.report import chart


def _point_rows(text, height):
    rows = text.splitlines()[:height]
    body = [r.split("|", 1)[1] if "|" in r else "" for r in rows]
    return body


class TestChart(unittest.TestCase):
    def test_bounds_are_padded(self):
        low, high = chart.y_bounds([100.0, 200.0])
        self.assertAlmostEqual(low, 99.0)
        self.assertAlmostEqual(high, 202.0)

    def test_empty_input(self):
        self.assertEqual(chart.render_chart([], 40, 10), "")

    def test_canvas_shape_and_labels(self):
        text = chart.render_chart([Decimal("100"), Decimal("200")], 40, 10)
        lines = text.splitlines()
        self.assertEqual(len(lines), 12)
        self.assertTrue(lines[0].lstrip().startswith("202.00"))
        self.assertTrue(lines[9].lstrip().startswith("99.00"))
        self.assertIn("+" + "-" * 40, lines[10])
        self.assertTrue(lines[11].rstrip().endswith("1"))

    def test_rising_series_ends_higher(self):
        height = 10
        text = chart.render_chart([Decimal(v) for v in ("10", "11", "12", "13")], 30, height)
        body = _point_rows(text, height)

        def row_of_column(col):
            for r, line in enumerate(body):
                if len(line) > col and line[col] == chart.POINT:
                    return r
            return None

        first, last = row_of_column(0), row_of_column(29)
        self.assertIsNotNone(first)
        self.assertIsNotNone(last)
        # row 0 is the top of the canvas
        self.assertGreater(first, last)

    def test_single_point(self):
        text = chart.render_chart([Decimal("50")], 20, 5)
        body = _point_rows(text, 5)
        marked = [r for r, line in enumerate(body) if chart.POINT in line]
        self.assertEqual(len(marked), 1)


if __name__ == "__main__":
    unittest.main()
