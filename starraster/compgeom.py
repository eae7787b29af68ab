"""Basic integer computational geometry: segments, polygon area and point location."""

from __future__ import annotations

from collections.abc import Sequence

MAX_VERTICES = 1000


def _check_pair(xs: Sequence[int], ys: Sequence[int]) -> None:
    if len(xs) != len(ys):
        raise ValueError(f"coordinate lists differ in length: {len(xs)} and {len(ys)}")
    if len(xs) > MAX_VERTICES:
        raise ValueError(f"at most {MAX_VERTICES} vertices are supported, got {len(xs)}")


def _on_segment(qx: int, qy: int, ax: int, ay: int, bx: int, by: int) -> bool:
    if qx == ax and (ay <= qy <= by or ay >= qy >= by):
        return True
    return qy == ay and (ax <= qx <= bx or ax >= qx >= bx)


def on_segments(
    qx: int, qy: int, px: Sequence[int], py: Sequence[int], step: int = 1
) -> int | None:
    """Return the index i of the first horizontal/vertical segment
    (px[i], py[i])-(px[i+1], py[i+1]) holding the point (qx, qy).

    With ``step`` 1 the search starts at the first segment, with -1 at the
    last. Returns None when no segment holds the point.
    """
    if step not in (1, -1):
        raise ValueError(f"step must be 1 or -1, got {step}")
    if len(px) != len(py):
        raise ValueError(f"coordinate lists differ in length: {len(px)} and {len(py)}")
    segments = list(enumerate(zip(px, py, px[1:], py[1:])))
    if step == -1:
        segments.reverse()
    for index, (ax, ay, bx, by) in segments:
        if _on_segment(qx, qy, ax, ay, bx, by):
            return index
    return None


def area(xs: Sequence[int], ys: Sequence[int]) -> float:
    """Signed area enclosed by the path through (xs[i], ys[i]).

    The path is not closed automatically: repeat the first vertex at the end
    for a closed polygon. Counter-clockwise paths (in y-up terms) are positive.
    """
    _check_pair(xs, ys)
    total = 0.0
    for x0, y0, x1, y1 in zip(xs, ys, xs[1:], ys[1:]):
        total += (float(x0) + float(x1)) * (float(y1) - float(y0))
    return total / 2


def segments_intersect(
    x0: int, y0: int, x1: int, y1: int, X0: int, Y0: int, X1: int, Y1: int
) -> bool:
    """Whether segment (x0,y0)-(x1,y1) meets segment (X0,Y0)-(X1,Y1).

    Parallel (including collinear) segments never count as intersecting.
    """
    dx, dy = x1 - x0, y1 - y0
    a, b = -dy, dx
    c = dx * y0 - dy * x0

    dX, dY = X1 - X0, Y1 - Y0
    A, B = -dY, dX
    C = dX * Y0 - dY * X0

    det = a * B - A * b
    if det == 0:
        return False
    invdet = 1.0 / det
    x = invdet * (B * c - b * C)
    y = invdet * (-A * c + a * C)
    return (
        min(x0, x1) <= x <= max(x0, x1)
        and min(y0, y1) <= y <= max(y0, y1)
        and min(X0, X1) <= x <= max(X0, X1)
        and min(Y0, Y1) <= y <= max(Y0, Y1)
    )


def in_poly(qx: int, qy: int, px: Sequence[int], py: Sequence[int]) -> str:
    """Locate the point (qx, qy) relative to the polygon through (px[i], py[i]).

    Returns 'i' strictly inside, 'o' strictly outside, 'e' on an edge but not
    at a vertex, 'v' on a vertex.
    """
    _check_pair(px, py)
    xs = [x - qx for x in px]
    ys = [y - qy for y in py]
    size = len(xs)
    rcross = lcross = 0
    for i in range(size):
        if xs[i] == 0 and ys[i] == 0:
            return "v"
        i1 = (i + size - 1) % size
        rstrad = (ys[i] > 0) != (ys[i1] > 0)
        lstrad = (ys[i] < 0) != (ys[i1] < 0)
        if rstrad or lstrad:
            x = int((xs[i] * ys[i1] - xs[i1] * ys[i]) / float(ys[i1] - ys[i]))
            if rstrad and x > 0:
                rcross += 1
            if lstrad and x < 0:
                lcross += 1
    if rcross % 2 != lcross % 2:
        return "e"
    return "i" if rcross % 2 == 1 else "o"