"""
ASCII step chart of closing prices against their sequence index.
"""
from decimal import Decimal
from typing import List, Sequence, Tuple

POINT = "*"
RISE = "|"
PAD_LOW = 0.99
PAD_HIGH = 1.01


def y_bounds(closes: Sequence[float]) -> Tuple[float, float]:
    """Close range padded by 1% on each side."""
    return min(closes) * PAD_LOW, max(closes) * PAD_HIGH


def _row_for(value: float, y_min: float, y_max: float, height: int) -> int:
    span = y_max - y_min
    if span <= 0:
        return height // 2
    frac = (value - y_min) / span
    row = height - 1 - int(round(frac * (height - 1)))
    return max(0, min(height - 1, row))


def _plot(values: List[float], width: int, height: int, y_min: float, y_max: float) -> List[List[str]]:
    grid = [[" "] * width for _ in range(height)]
    n = len(values)
    prev_row = None
    for x in range(width):
        idx = 0 if n == 1 else x * (n - 1) // (width - 1)
        row = _row_for(values[idx], y_min, y_max, height)
        if prev_row is not None and prev_row != row:
            # vertical step between the previous level and this one
            lo, hi = sorted((prev_row, row))
            for r in range(lo + 1, hi):
                grid[r][x] = RISE
        grid[row][x] = POINT
        prev_row = row
    return grid


def render_chart(closes: Sequence[Decimal], width: int, height: int) -> str:
    """
    Plot closes on a width x height canvas with a labelled y-axis and an
    x-axis marked with the first and last index. Empty input gives "".
    """
    if not closes:
        return ""

    values = [float(c) for c in closes]
    y_min, y_max = y_bounds(values)
    grid = _plot(values, width, height, y_min, y_max)

    top_label = f"{y_max:.2f}"
    bottom_label = f"{y_min:.2f}"
    gutter = max(len(top_label), len(bottom_label))

    lines = []
    for r, cells in enumerate(grid):
        label = ""
        if r == 0:
            label = top_label
        elif r == height - 1:
            label = bottom_label
        lines.append(f"{label:>{gutter}} |" + "".join(cells).rstrip())

    lines.append(" " * gutter + " +" + "-" * width)
    first, last = "0", str(len(values) - 1)
    lines.append(" " * (gutter + 2) + first + last.rjust(width - len(first)))
    return "\n".join(lines)
