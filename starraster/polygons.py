"""Polygons, triangles, pies and Bezier curves drawn onto a :class:`Canvas`.

Colours are packed 0xRRGGBBAA integers. An alpha byte of 255 stores the
colour outright; any other alpha blends it over what is already there.
Points are given as sequences of (x, y) integer pairs.
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence

from .canvas import Canvas, pixel_color, unpack_rgba
from .primitives import aaline_color, hline_color, line_color

Point = tuple[int, int]


def _check_color(color: int) -> None:
    unpack_rgba(color)


def _as_points(points: Iterable[Sequence[int]], minimum: int = 3) -> list[Point]:
    result = [(int(x), int(y)) for x, y in points]
    if len(result) < minimum:
        raise ValueError(f"at least {minimum} points are needed, got {len(result)}")
    return result


def _edges(points: list[Point]):
    """Yield every edge of the closed polygon, the closing edge last."""
    for start, end in zip(points, points[1:]):
        yield start, end
    yield points[-1], points[0]


def polygon_color(canvas: Canvas, points: Iterable[Sequence[int]], color: int) -> None:
    """Draw the closed outline through ``points`` (at least three)."""
    _check_color(color)
    vertices = _as_points(points)
    for (x1, y1), (x2, y2) in _edges(vertices):
        line_color(canvas, x1, y1, x2, y2, color)


def aapolygon_color(canvas: Canvas, points: Iterable[Sequence[int]], color: int) -> None:
    """Draw the closed anti-aliased outline through ``points`` (at least three)."""
    _check_color(color)
    vertices = _as_points(points)
    for (x1, y1), (x2, y2) in _edges(vertices):
        aaline_color(canvas, x1, y1, x2, y2, color, False)


def filled_polygon_color(canvas: Canvas, points: Iterable[Sequence[int]], color: int) -> None:
    """Fill the polygon through ``points`` by scanning rows in 16.16 fixed point."""
    _check_color(color)
    vertices = _as_points(points)
    ys = [y for _, y in vertices]
    miny, maxy = min(ys), max(ys)
    # Edges in the order the scanline test visits them: closing edge first.
    edges = [(vertices[-1], vertices[0])] + list(zip(vertices, vertices[1:]))

    for y in range(miny, maxy + 1):
        crossings = []
        for (ax, ay), (bx, by) in edges:
            if ay < by:
                x1, y1, x2, y2 = ax, ay, bx, by
            elif ay > by:
                x1, y1, x2, y2 = bx, by, ax, ay
            else:
                continue
            if (y1 <= y < y2) or (y == maxy and y1 < y <= y2):
                crossings.append(((65536 * (y - y1)) // (y2 - y1)) * (x2 - x1) + 65536 * x1)
        crossings.sort()
        for start, end in zip(crossings[0::2], crossings[1::2]):
            xa = start + 1
            xa = (xa >> 16) + ((xa & 32768) >> 15)
            xb = end - 1
            xb = (xb >> 16) + ((xb & 32768) >> 15)
            hline_color(canvas, xa, xb, y, color)


def trigon_color(canvas: Canvas, p1: Sequence[int], p2: Sequence[int], p3: Sequence[int], color: int) -> None:
    """Draw the outline of the triangle p1, p2, p3."""
    polygon_color(canvas, (p1, p2, p3), color)


def aatrigon_color(canvas: Canvas, p1: Sequence[int], p2: Sequence[int], p3: Sequence[int], color: int) -> None:
    """Draw the anti-aliased outline of the triangle p1, p2, p3."""
    aapolygon_color(canvas, (p1, p2, p3), color)


def filled_trigon_color(canvas: Canvas, p1: Sequence[int], p2: Sequence[int], p3: Sequence[int], color: int) -> None:
    """Fill the triangle p1, p2, p3."""
    filled_polygon_color(canvas, (p1, p2, p3), color)


def _pie(canvas: Canvas, x: int, y: int, rad: int, start: int, end: int, color: int, filled: bool) -> None:
    _check_color(color)
    if rad < 0:
        raise ValueError(f"radius must not be negative, got {rad}")
    start = int(math.fmod(start, 360))
    end = int(math.fmod(end, 360))
    if rad == 0:
        pixel_color(canvas, x, y, color)
        return

    left, top, right, bottom = canvas.clip_bounds
    x1, x2, y1, y2 = x - rad, x + rad, y - rad, y + rad
    if (x1 < left and x2 < left) or (x1 > right and x2 > right):
        return
    if (y1 < top and y2 < top) or (y1 > bottom and y2 > bottom):
        return

    dr = float(rad)
    delta = 3.0 / dr
    start_angle = start * (2.0 * math.pi / 360.0)
    end_angle = end * (2.0 * math.pi / 360.0)
    if start > end:
        end_angle += 2.0 * math.pi

    angles = []
    angle = start_angle
    while angle <= end_angle:
        angles.append(angle)
        angle += delta

    if not angles:
        pixel_color(canvas, x, y, color)
        return
    if len(angles) == 1:
        pos_x = x + int(dr * math.cos(start_angle))
        pos_y = y + int(dr * math.sin(start_angle))
        line_color(canvas, x, y, pos_x, pos_y, color)
        return

    vertices = [(x, y)] + [
        (x + int(dr * math.cos(a)), y + int(dr * math.sin(a))) for a in angles
    ]
    if filled:
        filled_polygon_color(canvas, vertices, color)
    else:
        polygon_color(canvas, vertices, color)


def pie_color(canvas: Canvas, x: int, y: int, rad: int, start: int, end: int, color: int) -> None:
    """Draw the outline of a pie slice from ``start`` to ``end`` degrees."""
    _pie(canvas, x, y, rad, start, end, color, False)


def filled_pie_color(canvas: Canvas, x: int, y: int, rad: int, start: int, end: int, color: int) -> None:
    """Fill a pie slice from ``start`` to ``end`` degrees."""
    _pie(canvas, x, y, rad, start, end, color, True)


def evaluate_bezier(data: Sequence[float], t: float) -> float:
    """Evaluate the Bezier interpolant of ``data`` at position ``t`` in 0..len(data)."""
    ndata = len(data)
    if ndata == 0:
        raise ValueError("data must not be empty")
    if t < 0.0:
        return float(data[0])
    if t >= float(ndata):
        return float(data[-1])

    mu = t / ndata
    n = ndata - 1
    result = 0.0
    muk = 1.0
    munk = math.pow(1 - mu, float(n))
    for k, value in enumerate(data):
        nn, kn, nkn = n, k, n - k
        blend = muk * munk
        muk *= mu
        munk /= 1 - mu
        while nn >= 1:
            blend *= nn
            nn -= 1
            if kn > 1:
                blend /= kn
                kn -= 1
            if nkn > 1:
                blend /= nkn
                nkn -= 1
        result += value * blend
    return result


def bezier_color(canvas: Canvas, points: Iterable[Sequence[int]], steps: int, color: int) -> None:
    """Draw a Bezier curve through the control ``points`` with ``steps`` segments per point."""
    _check_color(color)
    vertices = _as_points(points)
    if steps < 2:
        raise ValueError(f"steps must be at least 2, got {steps}")
    n = len(vertices)
    stepsize = 1.0 / steps
    xs = [float(px) for px, _ in vertices]
    ys = [float(py) for _, py in vertices]
    closed_x = xs + [xs[0]]
    closed_y = ys + [ys[0]]

    t = 0.0
    x1 = int(evaluate_bezier(closed_x, t))
    y1 = int(evaluate_bezier(closed_y, t))
    for _ in range(n * steps + 1):
        t += stepsize
        x2 = int(evaluate_bezier(xs, t))
        y2 = int(evaluate_bezier(ys, t))
        line_color(canvas, x1, y1, x2, y2, color)
        x1, y1 = x2, y2