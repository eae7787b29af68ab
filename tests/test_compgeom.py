import pytest
from hypothesis import given, strategies as st

from starraster.compgeom import area, in_poly, on_segments, segments_intersect

PATH_X = [0, 4, 4]
PATH_Y = [0, 0, 4]

SQUARE_X = [0, 4, 4, 0]
SQUARE_Y = [0, 0, 4, 4]

coord = st.integers(min_value=-200, max_value=200)


def test_on_segments_finds_horizontal_segment():
    assert on_segments(2, 0, PATH_X, PATH_Y) == 0


def test_on_segments_finds_vertical_segment():
    assert on_segments(4, 2, PATH_X, PATH_Y) == 1


def test_on_segments_shared_vertex_depends_on_direction():
    assert on_segments(4, 0, PATH_X, PATH_Y, 1) == 0
    assert on_segments(4, 0, PATH_X, PATH_Y, -1) == 1


def test_on_segments_missing_point():
    assert on_segments(1, 1, PATH_X, PATH_Y) is None


def test_on_segments_rejects_bad_step():
    with pytest.raises(ValueError):
        on_segments(0, 0, PATH_X, PATH_Y, 2)


def test_area_of_closed_square():
    assert area([0, 2, 2, 0, 0], [0, 0, 2, 2, 0]) == 4.0


@given(st.lists(st.tuples(coord, coord), min_size=2, max_size=20))
def test_area_reversal_negates(points):
    xs = [p[0] for p in points]
    ys = [p[1] for p in points]
    assert area(xs[::-1], ys[::-1]) == -area(xs, ys)


def test_area_rejects_mismatched_lengths():
    with pytest.raises(ValueError):
        area([0, 1, 2], [0, 1])


def test_area_rejects_too_many_vertices():
    with pytest.raises(ValueError):
        area(list(range(1001)), list(range(1001)))


def test_crossing_diagonals_intersect():
    assert segments_intersect(0, 0, 4, 4, 0, 4, 4, 0) is True


def test_lines_meeting_outside_segments_do_not_intersect():
    assert segments_intersect(0, 0, 1, 1, 3, 0, 4, -1) is False


@given(coord, coord, coord, coord, coord, coord)
def test_parallel_segments_never_intersect(x0, y0, dx, dy, ox, oy):
    assert segments_intersect(x0, y0, x0 + dx, y0 + dy, ox, oy, ox + dx, oy + dy) is False


def test_in_poly_vertex():
    assert in_poly(4, 4, SQUARE_X, SQUARE_Y) == "v"


def test_in_poly_interior():
    assert in_poly(2, 2, SQUARE_X, SQUARE_Y) == "i"


def test_in_poly_edge():
    assert in_poly(2, 0, SQUARE_X, SQUARE_Y) == "e"


def test_in_poly_exterior():
    assert in_poly(10, 2, SQUARE_X, SQUARE_Y) == "o"


@given(coord, coord)
def test_in_poly_every_vertex_is_a_vertex(x, y):
    xs = [x, x + 5, x + 5, x]
    ys = [y, y, y + 5, y + 5]
    assert all(in_poly(vx, vy, xs, ys) == "v" for vx, vy in zip(xs, ys))