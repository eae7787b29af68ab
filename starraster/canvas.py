"""A 32-bit RGBA pixel buffer with clipping and alpha-blended pixel writes.

Pixel values are packed as 0xRRGGBBAA integers.
"""

from __future__ import annotations

_MAX32 = 0xFFFFFFFF


def _check_value(value: int) -> None:
    if not isinstance(value, int) or not 0 <= value <= _MAX32:
        raise ValueError(f"pixel value must fit in 32 bits, got {value!r}")


def _check_byte(name: str, value: int) -> None:
    if not isinstance(value, int) or not 0 <= value <= 255:
        raise ValueError(f"{name} must be an integer in 0..255, got {value!r}")


def pack_rgba(r: int, g: int, b: int, a: int) -> int:
    """Pack four 8-bit channels into a 0xRRGGBBAA integer."""
    for name, value in (("r", r), ("g", g), ("b", b), ("a", a)):
        _check_byte(name, value)
    return (r << 24) | (g << 16) | (b << 8) | a


def unpack_rgba(color: int) -> tuple[int, int, int, int]:
    """Split a 0xRRGGBBAA integer into its (r, g, b, a) channels."""
    _check_value(color)
    return (color >> 24) & 0xFF, (color >> 16) & 0xFF, (color >> 8) & 0xFF, color & 0xFF


def _mix(dst: int, src: int, alpha: int) -> int:
    """Move every channel of ``dst`` towards ``src`` by ``alpha``/256."""
    out = 0
    for shift in (24, 16, 8, 0):
        d = (dst >> shift) & 0xFF
        s = (src >> shift) & 0xFF
        out |= ((d + (((s - d) * alpha) >> 8)) & 0xFF) << shift
    return out


class Canvas:
    """A width x height grid of packed RGBA pixels with a clip rectangle."""

    def __init__(self, width: int, height: int) -> None:
        if not isinstance(width, int) or not isinstance(height, int):
            raise TypeError("canvas dimensions must be integers")
        if width <= 0 or height <= 0:
            raise ValueError(f"canvas dimensions must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self._rows = [[0] * width for _ in range(height)]
        self.clip = (0, 0, width, height)

    def set_clip(self, x: int, y: int, w: int, h: int) -> None:
        """Set the clip rectangle, intersected with the canvas bounds."""
        left = max(x, 0)
        top = max(y, 0)
        right = min(x + w, self.width)
        bottom = min(y + h, self.height)
        self.clip = (left, top, max(right - left, 0), max(bottom - top, 0))

    @property
    def clip_bounds(self) -> tuple[int, int, int, int]:
        """Inclusive (left, top, right, bottom) of the clip rectangle."""
        cx, cy, cw, ch = self.clip
        return cx, cy, cx + cw - 1, cy + ch - 1

    def in_clip(self, x: int, y: int) -> bool:
        left, top, right, bottom = self.clip_bounds
        return left <= x <= right and top <= y <= bottom

    def _check_inside(self, x: int, y: int) -> None:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) is outside a {self.width}x{self.height} canvas")

    def get_pixel(self, x: int, y: int) -> int:
        """Return the packed value at (x, y); raises IndexError off the canvas."""
        self._check_inside(x, y)
        return self._rows[y][x]

    def set_pixel(self, x: int, y: int, value: int) -> None:
        """Store ``value`` at (x, y) without blending; ignored outside the clip."""
        _check_value(value)
        if self.in_clip(x, y):
            self._rows[y][x] = value

    def blend_pixel(self, x: int, y: int, value: int, alpha: int) -> None:
        """Blend ``value`` over (x, y) with weight ``alpha``; 255 stores it outright."""
        _check_value(value)
        _check_byte("alpha", alpha)
        if not self.in_clip(x, y):
            return
        if alpha == 255:
            self._rows[y][x] = value
        else:
            self._rows[y][x] = _mix(self._rows[y][x], value, alpha)

    def _mix_pixel(self, x: int, y: int, value: int, alpha: int) -> None:
        self._rows[y][x] = _mix(self._rows[y][x], value, alpha)

    def fill(self, value: int) -> None:
        """Set every pixel inside the clip rectangle to ``value``."""
        _check_value(value)
        left, top, right, bottom = self.clip_bounds
        for row in self._rows[top : bottom + 1]:
            row[left : right + 1] = [value] * (right - left + 1)


def pixel_color(canvas: Canvas, x: int, y: int, color: int) -> None:
    """Draw one pixel, blending by the colour's own alpha byte."""
    _check_value(color)
    canvas.blend_pixel(x, y, color, color & 0xFF)


def pixel_rgba(canvas: Canvas, x: int, y: int, r: int, g: int, b: int, a: int) -> None:
    """Draw one pixel from channels; opaque colours are stored without blending."""
    color = pack_rgba(r, g, b, a)
    if a == 255:
        canvas.set_pixel(x, y, color)
    else:
        pixel_color(canvas, x, y, color)


def pixel_color_weight(canvas: Canvas, x: int, y: int, color: int, weight: int) -> None:
    """Draw one pixel with its alpha scaled by ``weight``/256."""
    _check_value(color)
    _check_byte("weight", weight)
    alpha = ((color & 0xFF) * weight) >> 8
    pixel_color(canvas, x, y, (color & 0xFFFFFF00) | alpha)


def filled_rect_alpha(canvas: Canvas, x1: int, y1: int, x2: int, y2: int, color: int) -> None:
    """Blend ``color`` over the rectangle x1..x2, y1..y2 (inclusive).

    Every pixel is blended by the colour's alpha byte, even when it is 255.
    Nothing is drawn when x1 > x2 or y1 > y2; pixels outside the clip are skipped.
    """
    _check_value(color)
    alpha = color & 0xFF
    left, top, right, bottom = canvas.clip_bounds
    for y in range(max(y1, top), min(y2, bottom) + 1):
        for x in range(max(x1, left), min(x2, right) + 1):
            canvas._mix_pixel(x, y, color, alpha)