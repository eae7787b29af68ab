import math

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from starraster.canvas import Canvas, pixel_color
from starraster.curves import (
    aacircle_color,
    aaellipse_color,
    circle_color,
    ellipse_color,
    filled_circle_color,
    filled_ellipse_color,
)

RED = 0xFF0000FF
SIZE = 41
C = 20


def drawn(canvas):
    return {
        (x, y)
        for y in range(canvas.height)
        for x in range(canvas.width)
        if canvas.get_pixel(x, y) != 0
    }


def snapshot(canvas):
    return [[canvas.get_pixel(x, y) for x in range(canvas.width)] for y in range(canvas.height)]


def mirrored(points, cx, cy):
    return (
        {(2 * cx - x, y) for x, y in points} == points
        and {(x, 2 * cy - y) for x, y in points} == points
    )


def rows(points):
    result = {}
    for x, y in points:
        result.setdefault(y, []).append(x)
    return result


@pytest.mark.parametrize(
    "draw",
    [
        lambda c: circle_color(c, C, C, -1, RED),
        lambda c: filled_circle_color(c, C, C, -1, RED),
        lambda c: aacircle_color(c, C, C, -1, RED),
        lambda c: ellipse_color(c, C, C, -1, 3, RED),
        lambda c: ellipse_color(c, C, C, 3, -1, RED),
        lambda c: aaellipse_color(c, C, C, -2, 3, RED),
        lambda c: filled_ellipse_color(c, C, C, 3, -2, RED),
    ],
)
def test_negative_radius_rejected(draw):
    with pytest.raises(ValueError):
        draw(Canvas(SIZE, SIZE))


def test_invalid_color_rejected():
    with pytest.raises(ValueError):
        circle_color(Canvas(SIZE, SIZE), C, C, 5, 1 << 32)


def test_zero_radius_circle_is_single_pixel():
    canvas = Canvas(SIZE, SIZE)
    circle_color(canvas, C, C, 0, RED)
    assert drawn(canvas) == {(C, C)}
    assert canvas.get_pixel(C, C) == RED


def test_circle_touches_axis_extremes():
    canvas = Canvas(SIZE, SIZE)
    circle_color(canvas, C, C, 7, RED)
    points = drawn(canvas)
    assert {(C + 7, C), (C - 7, C), (C, C + 7), (C, C - 7)} <= points
    assert (C, C) not in points


@settings(max_examples=30, deadline=None)
@given(st.integers(min_value=1, max_value=18))
def test_circle_symmetric_and_near_radius(r):
    canvas = Canvas(SIZE, SIZE)
    circle_color(canvas, C, C, r, RED)
    points = drawn(canvas)
    assert mirrored(points, C, C)
    assert {(y, x) for x, y in points} == points
    for x, y in points:
        assert abs(math.hypot(x - C, y - C) - r) < 1.0


def test_circle_outside_clip_draws_nothing():
    canvas = Canvas(SIZE, SIZE)
    circle_color(canvas, -50, -50, 5, RED)
    filled_circle_color(canvas, 200, 10, 5, RED)
    assert drawn(canvas) == set()


def test_translucent_circle_blends():
    canvas = Canvas(SIZE, SIZE)
    canvas.fill(0xFFFFFFFF)
    color = 0x00000080
    circle_color(canvas, C, C, 4, color)
    reference = Canvas(1, 1)
    reference.fill(0xFFFFFFFF)
    pixel_color(reference, 0, 0, color)
    assert canvas.get_pixel(C + 4, C) == reference.get_pixel(0, 0)
    assert canvas.get_pixel(C, C) == 0xFFFFFFFF


@settings(max_examples=30, deadline=None)
@given(st.integers(min_value=1, max_value=18))
def test_filled_circle_rows_contiguous(r):
    canvas = Canvas(SIZE, SIZE)
    filled_circle_color(canvas, C, C, r, RED)
    points = drawn(canvas)
    assert (C, C) in points
    assert {(C - r, C), (C + r, C), (C, C - r), (C, C + r)} <= points
    assert mirrored(points, C, C)
    for xs in rows(points).values():
        assert sorted(xs) == list(range(min(xs), max(xs) + 1))
    for x, y in points:
        assert math.hypot(x - C, y - C) <= r + 0.5


def test_ellipse_degenerate_radii_are_lines():
    canvas = Canvas(SIZE, SIZE)
    ellipse_color(canvas, C, C, 0, 4, RED)
    assert drawn(canvas) == {(C, y) for y in range(C - 4, C + 5)}
    canvas = Canvas(SIZE, SIZE)
    filled_ellipse_color(canvas, C, C, 5, 0, RED)
    assert drawn(canvas) == {(x, C) for x in range(C - 5, C + 6)}


@pytest.mark.parametrize("rx,ry", [(12, 5), (4, 15), (9, 9), (1, 6)])
def test_ellipse_extremes_and_symmetry(rx, ry):
    canvas = Canvas(SIZE, SIZE)
    ellipse_color(canvas, C, C, rx, ry, RED)
    points = drawn(canvas)
    assert {(C + rx, C), (C - rx, C), (C, C + ry), (C, C - ry)} <= points
    assert mirrored(points, C, C)
    assert all(abs(x - C) <= rx and abs(y - C) <= ry for x, y in points)


@pytest.mark.parametrize("rx,ry", [(12, 5), (4, 15), (9, 9)])
def test_filled_ellipse_covers_outline_box(rx, ry):
    canvas = Canvas(SIZE, SIZE)
    filled_ellipse_color(canvas, C, C, rx, ry, RED)
    points = drawn(canvas)
    assert (C, C) in points
    assert {(C + rx, C), (C - rx, C), (C, C + ry), (C, C - ry)} <= points
    assert mirrored(points, C, C)
    assert all(abs(x - C) <= rx and abs(y - C) <= ry for x, y in points)
    for xs in rows(points).values():
        assert sorted(xs) == list(range(min(xs), max(xs) + 1))


@pytest.mark.parametrize("rx,ry", [(12, 5), (5, 12), (8, 8)])
def test_aaellipse_endpoints_and_symmetry(rx, ry):
    canvas = Canvas(SIZE, SIZE)
    aaellipse_color(canvas, C, C, rx, ry, RED)
    assert canvas.get_pixel(C, C - ry) == RED
    assert canvas.get_pixel(C, C + ry) == RED
    points = drawn(canvas)
    assert mirrored(points, C, C)
    assert (C, C) not in points


def test_aacircle_matches_aaellipse():
    first = Canvas(SIZE, SIZE)
    second = Canvas(SIZE, SIZE)
    aacircle_color(first, C, C, 10, RED)
    aaellipse_color(second, C, C, 10, 10, RED)
    assert snapshot(first) == snapshot(second)
    assert len(drawn(first)) > 0


def test_clip_limits_drawing():
    canvas = Canvas(SIZE, SIZE)
    canvas.set_clip(0, 0, C, SIZE)
    filled_circle_color(canvas, C, C, 8, RED)
    points = drawn(canvas)
    assert points
    assert all(x < C for x, _ in points)