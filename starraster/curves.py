"""Circles and ellipses drawn onto a :class:`Canvas`.

Colours are packed 0xRRGGBBAA integers. An alpha byte of 255 stores the
colour outright; any other alpha blends it over what is already there.
"""

from __future__ import annotations

import math
import struct

from .canvas import Canvas, pixel_color, pixel_color_weight, unpack_rgba
from .primitives import hline_color, vline_color


def _check_color(color: int) -> None:
    unpack_rgba(color)


def _check_radius(*radii: int) -> None:
    for radius in radii:
        if radius < 0:
            raise ValueError(f"radius must not be negative, got {radius}")


def _cdiv(a: int, b: int) -> int:
    """Integer division truncating towards zero."""
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b >= 0) else -q


def _f32(value: float) -> float:
    """Round a float to single precision."""
    return struct.unpack("f", struct.pack("f", value))[0]


def _box_visible(canvas: Canvas, x1: int, y1: int, x2: int, y2: int) -> bool:
    left, top, right, bottom = canvas.clip_bounds
    if (x1 < left and x2 < left) or (x1 > right and x2 > right):
        return False
    if (y1 < top and y2 < top) or (y1 > bottom and y2 > bottom):
        return False
    return True


def _plot_mirrored(canvas: Canvas, x: int, y: int, dx: int, dy: int, color: int) -> None:
    """Plot (x±dx, y±dy); a zero ``dy`` plots the two points on row ``y`` only."""
    if dy > 0:
        pixel_color(canvas, x - dx, y + dy, color)
        pixel_color(canvas, x + dx, y + dy, color)
        pixel_color(canvas, x - dx, y - dy, color)
        pixel_color(canvas, x + dx, y - dy, color)
    else:
        pixel_color(canvas, x - dx, y, color)
        pixel_color(canvas, x + dx, y, color)


def _hline_mirrored(canvas: Canvas, x1: int, x2: int, y: int, dy: int, color: int) -> None:
    if dy > 0:
        hline_color(canvas, x1, x2, y + dy, color)
        hline_color(canvas, x1, x2, y - dy, color)
    else:
        hline_color(canvas, x1, x2, y, color)


def circle_color(canvas: Canvas, x: int, y: int, r: int, color: int) -> None:
    """Draw the one-pixel outline of a circle (midpoint algorithm)."""
    _check_color(color)
    _check_radius(r)
    if r == 0:
        pixel_color(canvas, x, y, color)
        return
    if not _box_visible(canvas, x - r, y - r, x + r, y + r):
        return

    cx, cy = 0, r
    ocx = ocy = -1
    df = 1 - r
    d_e = 3
    d_se = -2 * r + 5
    while True:
        if ocy != cy or ocx != cx:
            _plot_mirrored(canvas, x, y, cx, cy, color)
            ocy = cy
            _plot_mirrored(canvas, x, y, cy, cx, color)
            ocx = cx
        if df < 0:
            df += d_e
            d_e += 2
            d_se += 2
        else:
            df += d_se
            d_e += 2
            d_se += 4
            cy -= 1
        cx += 1
        if cx > cy:
            break


def aacircle_color(canvas: Canvas, x: int, y: int, r: int, color: int) -> None:
    """Draw an anti-aliased circle outline."""
    aaellipse_color(canvas, x, y, r, r, color)


def filled_circle_color(canvas: Canvas, x: int, y: int, r: int, color: int) -> None:
    """Draw a filled circle as a stack of horizontal runs."""
    _check_color(color)
    _check_radius(r)
    if r == 0:
        pixel_color(canvas, x, y, color)
        return
    if not _box_visible(canvas, x - r, y - r, x + r, y + r):
        return

    cx, cy = 0, r
    ocx = ocy = -1
    df = 1 - r
    d_e = 3
    d_se = -2 * r + 5
    while True:
        if ocy != cy:
            _hline_mirrored(canvas, x - cx, x + cx, y, cy, color)
            ocy = cy
        if ocx != cx:
            if cx != cy:
                _hline_mirrored(canvas, x - cy, x + cy, y, cx, color)
            ocx = cx
        if df < 0:
            df += d_e
            d_e += 2
            d_se += 2
        else:
            df += d_se
            d_e += 2
            d_se += 4
            cy -= 1
        cx += 1
        if cx > cy:
            break


def ellipse_color(canvas: Canvas, x: int, y: int, rx: int, ry: int, color: int) -> None:
    """Draw the one-pixel outline of an axis-aligned ellipse."""
    _check_color(color)
    _check_radius(rx, ry)
    if rx == 0:
        vline_color(canvas, x, y - ry, y + ry, color)
        return
    if ry == 0:
        hline_color(canvas, x - rx, x + rx, y, color)
        return
    if not _box_visible(canvas, x - rx, y - ry, x + rx, y + ry):
        return

    oh = oi = oj = ok = 0xFFFF
    if rx > ry:
        ix, iy = 0, rx * 64
        while True:
            h = (ix + 32) >> 6
            i = (iy + 32) >> 6
            j = _cdiv(h * ry, rx)
            k = _cdiv(i * ry, rx)
            if (ok != k and oj != k) or (oj != j and ok != j) or k != j:
                _plot_mirrored(canvas, x, y, h, k, color)
                ok = k
                _plot_mirrored(canvas, x, y, i, j, color)
                oj = j
            ix = ix + _cdiv(iy, rx)
            iy = iy - _cdiv(ix, rx)
            if i <= h:
                break
    else:
        ix, iy = 0, ry * 64
        while True:
            h = (ix + 32) >> 6
            i = (iy + 32) >> 6
            j = _cdiv(h * rx, ry)
            k = _cdiv(i * rx, ry)
            if (oi != i and oh != i) or (oh != h and oi != h and i != h):
                _plot_mirrored(canvas, x, y, j, i, color)
                oi = i
                _plot_mirrored(canvas, x, y, k, h, color)
                oh = h
            ix = ix + _cdiv(iy, ry)
            iy = iy - _cdiv(ix, ry)
            if i <= h:
                break


def _coverage(num: int, den: int) -> tuple[int, int]:
    """Return (weight, inverse weight) for the fraction |num|/|den|, capped at 1."""
    if den != 0:
        cp = _f32(_f32(float(abs(num))) / _f32(float(abs(den))))
        cp = min(cp, 1.0)
    else:
        cp = 1.0
    weight = int(_f32(cp * 255)) & 0xFF
    return weight, 255 - weight


def aaellipse_color(canvas: Canvas, xc: int, yc: int, rx: int, ry: int, color: int) -> None:
    """Draw an anti-aliased axis-aligned ellipse outline."""
    _check_color(color)
    _check_radius(rx, ry)
    if rx == 0:
        vline_color(canvas, xc, yc - ry, yc + ry, color)
        return
    if ry == 0:
        hline_color(canvas, xc - rx, xc + rx, yc, color)
        return
    if not _box_visible(canvas, xc - rx, yc - ry, xc + rx, yc + ry):
        return

    a2 = rx * rx
    b2 = ry * ry
    ds = 2 * a2
    dt = 2 * b2
    xc2 = 2 * xc
    yc2 = 2 * yc
    dxt = int(a2 / math.sqrt(a2 + b2))

    t = 0
    s = -2 * a2 * ry
    d = 0
    x = xc
    y = yc - ry

    pixel_color(canvas, x, y, color)
    pixel_color(canvas, xc2 - x, y, color)
    pixel_color(canvas, x, yc2 - y, color)
    pixel_color(canvas, xc2 - x, yc2 - y, color)

    for _ in range(dxt):
        x -= 1
        d += t - b2
        if d >= 0:
            ys = y - 1
        elif d - s - a2 > 0:
            if 2 * d - s - a2 >= 0:
                ys = y + 1
            else:
                ys = y
                y += 1
                d -= s + a2
                s += ds
        else:
            y += 1
            ys = y + 1
            d -= s + a2
            s += ds
        t -= dt

        weight, iweight = _coverage(d, s)

        xx = xc2 - x
        pixel_color_weight(canvas, x, y, color, iweight)
        pixel_color_weight(canvas, xx, y, color, iweight)
        pixel_color_weight(canvas, x, ys, color, weight)
        pixel_color_weight(canvas, xx, ys, color, weight)

        yy = yc2 - y
        pixel_color_weight(canvas, x, yy, color, iweight)
        pixel_color_weight(canvas, xx, yy, color, iweight)
        yy = yc2 - ys
        pixel_color_weight(canvas, x, yy, color, weight)
        pixel_color_weight(canvas, xx, yy, color, weight)

    dyt = abs(y - yc)
    for _ in range(dyt):
        y += 1
        d -= s + a2
        if d <= 0:
            xs = x + 1
        elif d + t - b2 < 0:
            if 2 * d + t - b2 <= 0:
                xs = x - 1
            else:
                xs = x
                x -= 1
                d += t - b2
                t -= dt
        else:
            x -= 1
            xs = x - 1
            d += t - b2
            t -= dt
        s += ds

        weight, iweight = _coverage(d, t)

        xx = xc2 - x
        yy = yc2 - y
        pixel_color_weight(canvas, x, y, color, iweight)
        pixel_color_weight(canvas, xx, y, color, iweight)
        pixel_color_weight(canvas, x, yy, color, iweight)
        pixel_color_weight(canvas, xx, yy, color, iweight)

        xx = 2 * xc - xs
        pixel_color_weight(canvas, xs, y, color, weight)
        pixel_color_weight(canvas, xx, y, color, weight)
        pixel_color_weight(canvas, xs, yy, color, weight)
        pixel_color_weight(canvas, xx, yy, color, weight)


def filled_ellipse_color(canvas: Canvas, x: int, y: int, rx: int, ry: int, color: int) -> None:
    """Draw a filled axis-aligned ellipse as a stack of horizontal runs."""
    _check_color(color)
    _check_radius(rx, ry)
    if rx == 0:
        vline_color(canvas, x, y - ry, y + ry, color)
        return
    if ry == 0:
        hline_color(canvas, x - rx, x + rx, y, color)
        return
    if not _box_visible(canvas, x - rx, y - ry, x + rx, y + ry):
        return

    oh = oi = oj = ok = 0xFFFF
    if rx > ry:
        ix, iy = 0, rx * 64
        while True:
            h = (ix + 32) >> 6
            i = (iy + 32) >> 6
            j = _cdiv(h * ry, rx)
            k = _cdiv(i * ry, rx)
            if ok != k and oj != k:
                _hline_mirrored(canvas, x - h, x + h, y, k, color)
                ok = k
            if oj != j and ok != j and k != j:
                _hline_mirrored(canvas, x - i, x + i, y, j, color)
                oj = j
            ix = ix + _cdiv(iy, rx)
            iy = iy - _cdiv(ix, rx)
            if i <= h:
                break
    else:
        ix, iy = 0, ry * 64
        while True:
            h = (ix + 32) >> 6
            i = (iy + 32) >> 6
            j = _cdiv(h * rx, ry)
            k = _cdiv(i * rx, ry)
            if oi != i and oh != i:
                _hline_mirrored(canvas, x - j, x + j, y, i, color)
                oi = i
            if oh != h and oi != h and i != h:
                _hline_mirrored(canvas, x - k, x + k, y, h, color)
                oh = h
            ix = ix + _cdiv(iy, ry)
            iy = iy - _cdiv(ix, ry)
            if i <= h:
                break