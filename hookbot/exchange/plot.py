"""Small ASCII line chart for rate series, drawn with box-drawing characters.

Example (``plot([1.0, 2.0, 3.0, 2.0], height=2)``)::

     3.0000 ┤ ╭╮
     2.0000 ┤╭╯╰
     1.0000 ┼╯
"""

from __future__ import annotations

from typing import Sequence

DEFAULT_HEIGHT = 10
_LABEL_FORMAT = "{:>11.4f} "


def plot(series: Sequence[float], height: int = DEFAULT_HEIGHT) -> str:
    """Render *series* as rows of text, highest values on top.

    Each row starts with a value label and an axis tick; column ``i`` after the
    axis is point ``i`` of the series.
    """
    if not series:
        return ""

    minimum, maximum = min(series), max(series)
    interval = maximum - minimum
    ratio = height / interval if interval else 1.0
    low = round(minimum * ratio)
    high = round(maximum * ratio)
    rows = high - low

    def row_of(value: float) -> int:
        # row 0 is the top line
        return rows - (round(value * ratio) - low)

    grid = [[" "] * len(series) for _ in range(rows + 1)]

    first = row_of(series[0])
    for x in range(len(series) - 1):
        y0, y1 = row_of(series[x]), row_of(series[x + 1])
        if y0 == y1:
            grid[y0][x] = "─"
            continue
        rising = y1 < y0
        grid[y1][x] = "╭" if rising else "╰"
        grid[y0][x] = "╯" if rising else "╮"
        for y in range(min(y0, y1) + 1, max(y0, y1)):
            grid[y][x] = "│"

    lines = []
    for r in range(rows + 1):
        label = _LABEL_FORMAT.format(maximum - r * interval / (rows or 1))
        tick = "┼" if r == first else "┤"
        lines.append((label + tick + "".join(grid[r])).rstrip())
    return "\n".join(lines)
