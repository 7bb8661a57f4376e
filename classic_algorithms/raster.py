"""Line rasterisation: Bresenham's midpoint variant, DDA and generalised Bresenham."""

from __future__ import annotations

from typing import List, Tuple

Point = Tuple[int, int]


def bresenham_line(x1: int, y1: int, x2: int, y2: int) -> List[Point]:
    """Pixels of a line by the first-octant Bresenham rule.

    The walk runs left to right: it starts from whichever end has the smaller x,
    steps x by one and raises y whenever the decision value is not negative.
    The decision value is always taken from (x2 - x1, y2 - y1) as given.
    """
    dx = x2 - x1
    dy = y2 - y1
    p = 2 * dy - dx
    if dx > 0:
        x, y, x_end = x1, y1, x2
    else:
        x, y, x_end = x2, y2, x1

    points: List[Point] = []
    while x <= x_end:
        points.append((x, y))
        x += 1
        if p < 0:
            p += 2 * dy
        else:
            y += 1
            p += 2 * dy - 2 * dx
    return points


def dda_line(x0: int, y0: int, x1: int, y1: int) -> List[Point]:
    """Pixels of a line by the digital differential analyser.

    Coordinates advance by fixed fractional steps and are truncated toward
    zero when plotted; a zero-length line yields its single point.
    """
    dx = x1 - x0
    dy = y1 - y0
    steps = max(abs(dx), abs(dy))
    if steps == 0:
        return [(x0, y0)]
    x_inc = dx / steps
    y_inc = dy / steps
    x, y = float(x0), float(y0)
    points: List[Point] = []
    for _ in range(steps + 1):
        points.append((int(x), int(y)))
        x += x_inc
        y += y_inc
    return points


def generalized_bresenham(x1: int, y1: int, x2: int, y2: int) -> List[Point]:
    """Pixels of a line in any octant, from (x1, y1) to (x2, y2)."""
    dx = abs(x2 - x1)
    dy = abs(y2 - y1)
    if dx == 0 and dy == 0:
        return [(x1, y1)]
    s1 = 1 if x2 - x1 > 0 else -1
    s2 = 1 if y2 - y1 > 0 else -1
    steep = dy > dx
    if steep:
        dx, dy = dy, dx
    d = 2 * dy - dx

    x, y = x1, y1
    points: List[Point] = []
    for _ in range(dx + 1):
        points.append((x, y))
        while d >= 0:
            if steep:
                x += s1
            else:
                y += s2
            d -= 2 * dx
        if steep:
            y += s2
        else:
            x += s1
        d += 2 * dy
    return points