"""Lines, rectangles and boxes drawn onto a :class:`Canvas`.

Colours are packed 0xRRGGBBAA integers. An alpha byte of 255 stores the
colour outright; any other alpha blends it over what is already there.
"""

from __future__ import annotations

from .canvas import Canvas, filled_rect_alpha, pixel_color, pixel_color_weight, unpack_rgba

_LEFT = 0x1
_RIGHT = 0x2
_BOTTOM = 0x4
_TOP = 0x8

_MASK32 = 0xFFFFFFFF


def _check_color(color: int) -> None:
    unpack_rgba(color)


def _is_opaque(color: int) -> bool:
    return (color & 0xFF) == 0xFF


def _encode(x: int, y: int, left: int, top: int, right: int, bottom: int) -> int:
    code = 0
    if x < left:
        code |= _LEFT
    elif x > right:
        code |= _RIGHT
    if y < top:
        code |= _TOP
    elif y > bottom:
        code |= _BOTTOM
    return code


def clip_line(
    canvas: Canvas, x1: int, y1: int, x2: int, y2: int
) -> tuple[int, int, int, int] | None:
    """Clip a segment to the canvas clip rectangle.

    Returns the clipped (x1, y1, x2, y2), whose endpoints may come back in
    swapped order, or None when nothing of the segment is visible.
    """
    _, _, cw, ch = canvas.clip
    if cw <= 0 or ch <= 0:
        return None
    left, top, right, bottom = canvas.clip_bounds
    while True:
        code1 = _encode(x1, y1, left, top, right, bottom)
        code2 = _encode(x2, y2, left, top, right, bottom)
        if not (code1 | code2):
            return x1, y1, x2, y2
        if code1 & code2:
            return None
        if not code1:
            x1, x2 = x2, x1
            y1, y2 = y2, y1
            code1, code2 = code2, code1
        m = (y2 - y1) / (x2 - x1) if x2 != x1 else 1.0
        if code1 & _LEFT:
            y1 += int((left - x1) * m)
            x1 = left
        elif code1 & _RIGHT:
            y1 += int((right - x1) * m)
            x1 = right
        elif code1 & _BOTTOM:
            if x2 != x1:
                x1 += int((bottom - y1) / m)
            y1 = bottom
        elif code1 & _TOP:
            if x2 != x1:
                x1 += int((top - y1) / m)
            y1 = top


def hline_color(canvas: Canvas, x1: int, x2: int, y: int, color: int) -> None:
    """Draw the horizontal run x1..x2 (inclusive) on row ``y``."""
    _check_color(color)
    left, top, right, bottom = canvas.clip_bounds
    if (x1 < left and x2 < left) or (x1 > right and x2 > right):
        return
    if y < top or y > bottom:
        return
    x1 = max(x1, left)
    x2 = min(x2, right)
    if x1 > x2:
        x1, x2 = x2, x1
    w = x2 - x1
    if _is_opaque(color):
        for x in range(x1, x2 + 1):
            canvas.set_pixel(x, y, color)
    else:
        filled_rect_alpha(canvas, x1, y, x1 + w, y, color)


def vline_color(canvas: Canvas, x: int, y1: int, y2: int, color: int) -> None:
    """Draw the vertical run y1..y2 (inclusive) in column ``x``."""
    _check_color(color)
    left, top, right, bottom = canvas.clip_bounds
    if x < left or x > right:
        return
    if (y1 < top and y2 < top) or (y1 > bottom and y2 > bottom):
        return
    y1 = max(y1, top)
    y2 = min(y2, bottom)
    if y1 > y2:
        y1, y2 = y2, y1
    h = y2 - y1
    if _is_opaque(color):
        for y in range(y1, y2 + 1):
            canvas.set_pixel(x, y, color)
    else:
        filled_rect_alpha(canvas, x, y1, x, y1 + h, color)


def rectangle_color(canvas: Canvas, x1: int, y1: int, x2: int, y2: int, color: int) -> None:
    """Draw the one-pixel outline of the rectangle with corners (x1, y1) and (x2, y2)."""
    _check_color(color)
    if x1 > x2:
        x1, x2 = x2, x1
    if y1 > y2:
        y1, y2 = y2, y1
    if x1 == x2:
        if y1 == y2:
            pixel_color(canvas, x1, y1, color)
        else:
            vline_color(canvas, x1, y1, y2, color)
        return
    if y1 == y2:
        hline_color(canvas, x1, x2, y1, color)
        return
    hline_color(canvas, x1, x2, y1, color)
    hline_color(canvas, x1, x2, y2, color)
    if y1 + 1 <= y2 - 1:
        vline_color(canvas, x1, y1 + 1, y2 - 1, color)
        vline_color(canvas, x2, y1 + 1, y2 - 1, color)


def box_color(canvas: Canvas, x1: int, y1: int, x2: int, y2: int, color: int) -> None:
    """Fill the rectangle with corners (x1, y1) and (x2, y2), edges included."""
    _check_color(color)
    left, top, right, bottom = canvas.clip_bounds
    if (x1 < left and x2 < left) or (x1 > right and x2 > right):
        return
    if (y1 < top and y2 < top) or (y1 > bottom and y2 > bottom):
        return
    x1 = min(max(x1, left), right)
    x2 = min(max(x2, left), right)
    y1 = min(max(y1, top), bottom)
    y2 = min(max(y2, top), bottom)
    if x1 > x2:
        x1, x2 = x2, x1
    if y1 > y2:
        y1, y2 = y2, y1
    if x1 == x2:
        if y1 == y2:
            pixel_color(canvas, x1, y1, color)
        else:
            vline_color(canvas, x1, y1, y2, color)
        return
    if y1 == y2:
        hline_color(canvas, x1, x2, y1, color)
        return
    if _is_opaque(color):
        for y in range(y1, y2 + 1):
            for x in range(x1, x2 + 1):
                canvas.set_pixel(x, y, color)
    else:
        filled_rect_alpha(canvas, x1, y1, x2, y2, color)


def line_color(canvas: Canvas, x1: int, y1: int, x2: int, y2: int, color: int) -> None:
    """Draw a one-pixel line from (x1, y1) to (x2, y2), both endpoints included."""
    _check_color(color)
    clipped = clip_line(canvas, x1, y1, x2, y2)
    if clipped is None:
        return
    x1, y1, x2, y2 = clipped

    if x1 == x2:
        if y1 == y2:
            pixel_color(canvas, x1, y1, color)
        else:
            vline_color(canvas, x1, min(y1, y2), max(y1, y2), color)
        return
    if y1 == y2:
        hline_color(canvas, min(x1, x2), max(x1, x2), y1, color)
        return

    dx = x2 - x1
    dy = y2 - y1
    sx = 1 if dx >= 0 else -1
    sy = 1 if dy >= 0 else -1

    if _is_opaque(color):
        major_len = sx * dx + 1
        minor_len = sy * dy + 1
        major = (sx, 0)
        minor = (0, sy)
        if major_len < minor_len:
            major_len, minor_len = minor_len, major_len
            major, minor = minor, major
        px, py = x1, y1
        acc = 0
        for _ in range(major_len):
            canvas.set_pixel(px, py, color)
            acc += minor_len
            if acc >= major_len:
                acc -= major_len
                px += minor[0]
                py += minor[1]
            px += major[0]
            py += major[1]
        return

    ax = abs(dx) << 1
    ay = abs(dy) << 1
    x, y = x1, y1
    if ax > ay:
        d = ay - (ax >> 1)
        while x != x2:
            pixel_color(canvas, x, y, color)
            if d > 0 or (d == 0 and sx == 1):
                y += sy
                d -= ax
            x += sx
            d += ay
    else:
        d = ax - (ay >> 1)
        while y != y2:
            pixel_color(canvas, x, y, color)
            if d > 0 or (d == 0 and sy == 1):
                x += sx
                d -= ay
            y += sy
            d += ax
    pixel_color(canvas, x, y, color)


def aaline_color(
    canvas: Canvas, x1: int, y1: int, x2: int, y2: int, color: int, draw_endpoint: bool = True
) -> None:
    """Draw an anti-aliased line (Wu's algorithm with 32-bit fixed point)."""
    _check_color(color)
    clipped = clip_line(canvas, x1, y1, x2, y2)
    if clipped is None:
        return
    x1, y1, x2, y2 = clipped

    xx0, yy0, xx1, yy1 = x1, y1, x2, y2
    if yy0 > yy1:
        xx0, yy0, xx1, yy1 = xx1, yy1, xx0, yy0

    dx = xx1 - xx0
    dy = yy1 - yy0
    if dx >= 0:
        xdir = 1
    else:
        xdir = -1
        dx = -dx

    if dx == 0:
        vline_color(canvas, x1, y1, y2, color)
        return
    if dy == 0:
        hline_color(canvas, x1, x2, y1, color)
        return
    if dx == dy:
        line_color(canvas, x1, y1, x2, y2, color)
        return

    intshift = 24
    erracc = 0
    pixel_color(canvas, x1, y1, color)

    if dy > dx:
        erradj = (((dx << 16) // dy) << 16) & _MASK32
        x0pxdir = xx0 + xdir
        for _ in range(dy - 1):
            previous = erracc
            erracc = (erracc + erradj) & _MASK32
            if erracc <= previous:
                xx0 = x0pxdir
                x0pxdir += xdir
            yy0 += 1
            wgt = (erracc >> intshift) & 0xFF
            pixel_color_weight(canvas, xx0, yy0, color, 255 - wgt)
            pixel_color_weight(canvas, x0pxdir, yy0, color, wgt)
    else:
        erradj = (((dy << 16) // dx) << 16) & _MASK32
        y0p1 = yy0 + 1
        for _ in range(dx - 1):
            previous = erracc
            erracc = (erracc + erradj) & _MASK32
            if erracc <= previous:
                yy0 = y0p1
                y0p1 += 1
            xx0 += xdir
            wgt = (erracc >> intshift) & 0xFF
            pixel_color_weight(canvas, xx0, yy0, color, 255 - wgt)
            pixel_color_weight(canvas, xx0, y0p1, color, wgt)

    if draw_endpoint:
        pixel_color(canvas, x2, y2, color)