import pytest

from classic_algorithms.raster import bresenham_line, dda_line, generalized_bresenham


def _adjacent(points):
    return all(
        max(abs(ax - bx), abs(ay - by)) == 1
        for (ax, ay), (bx, by) in zip(points, points[1:])
    )


@pytest.mark.parametrize("end", [(5, 2), (7, 7), (9, 0), (10, 3), (4, 1)])
def test_bresenham_first_octant_reaches_end(end):
    x2, y2 = end
    points = bresenham_line(0, 0, x2, y2)
    assert points[0] == (0, 0)
    assert points[-1] == (x2, y2)
    assert len(points) == x2 + 1
    assert [x for x, _ in points] == list(range(0, x2 + 1))
    assert _adjacent(points)


def test_bresenham_y_never_decreases():
    points = bresenham_line(1, 1, 12, 6)
    ys = [y for _, y in points]
    assert ys == sorted(ys)


def test_bresenham_reversed_direction_starts_at_second_point():
    points = bresenham_line(8, 5, 1, 1)
    assert points[0] == (1, 1)
    assert [x for x, _ in points] == list(range(1, 9))


def test_bresenham_vertical_gives_single_column_point():
    assert bresenham_line(3, 2, 3, 9) == [(3, 9)]


def test_dda_driver_example():
    points = dda_line(2, 2, 14, 16)
    assert len(points) == 15
    assert points[0] == (2, 2)
    assert [y for _, y in points] == list(range(2, 17))
    xs = [x for x, _ in points]
    assert xs == sorted(xs)
    assert all(2 <= x <= 14 for x in xs)


@pytest.mark.parametrize("end", [(6, 0), (0, 6), (6, 6)])
def test_dda_axis_and_diagonal_lines_are_exact(end):
    x2, y2 = end
    points = dda_line(0, 0, x2, y2)
    assert points[-1] == (x2, y2)
    assert _adjacent(points)


def test_dda_zero_length():
    assert dda_line(4, 4, 4, 4) == [(4, 4)]


@pytest.mark.parametrize(
    "start,end",
    [
        ((0, 0), (5, 2)),
        ((0, 0), (2, 5)),
        ((5, 2), (0, 0)),
        ((0, 0), (-7, 3)),
        ((1, 1), (-3, -9)),
        ((2, 8), (9, 1)),
        ((0, 0), (6, 0)),
        ((0, 0), (0, -6)),
    ],
)
def test_generalized_bresenham_any_octant(start, end):
    points = generalized_bresenham(*start, *end)
    assert points[0] == start
    assert points[-1] == end
    assert len(points) == max(abs(end[0] - start[0]), abs(end[1] - start[1])) + 1
    assert _adjacent(points)


def test_generalized_matches_first_octant_bresenham():
    assert generalized_bresenham(0, 0, 10, 3) == bresenham_line(0, 0, 10, 3)


def test_generalized_single_point():
    assert generalized_bresenham(3, 3, 3, 3) == [(3, 3)]