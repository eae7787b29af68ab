# starraster

starraster is a small software rasterizer in pure Python. It has no
dependencies. It draws into an in-memory grid of packed `0xRRGGBBAA` pixels,
and it also has some integer geometry helpers and keyboard and mouse state
trackers.

## Modules

- `starraster.canvas`
  - `Canvas(width, height)`: a pixel buffer with a clip rectangle. Its methods are
    `set_clip`, `in_clip`, `get_pixel`, `set_pixel`, `blend_pixel` and `fill`,
    and `clip_bounds` gives the clip rectangle as inclusive bounds.
  - `pack_rgba` and `unpack_rgba`.
  - Alpha-aware pixel writes: `pixel_color`, `pixel_rgba`, `pixel_color_weight`
    and `filled_rect_alpha`.
- `starraster.rect`: `Rect`, a dataclass with fields `x`, `y`, `w` and `h`. It prints as `(x,y,w,h)`.
- `starraster.primitives`:
  - `clip_line`, which does Cohen–Sutherland clipping.
  - `hline_color`, `vline_color`, `rectangle_color` and `box_color`.
  - `line_color`, a Bresenham line.
  - `aaline_color`, a Wu antialiased line.
- `starraster.curves`:
  - `circle_color`, `aacircle_color` and `filled_circle_color`.
  - `ellipse_color`, `aaellipse_color` and `filled_ellipse_color`.
- `starraster.polygons`:
  - `polygon_color`, `aapolygon_color` and `filled_polygon_color`. Each takes a sequence of `(x, y)` points.
  - `trigon_color`, `aatrigon_color` and `filled_trigon_color`.
  - `pie_color` and `filled_pie_color`. Their angles are in degrees.
  - `evaluate_bezier` and `bezier_color`.
- `starraster.compgeom`:
  - `on_segments`, which returns the index of the segment or `None`.
  - `area`, the signed area of the path. The path is not closed for you.
  - `segments_intersect`. Parallel segments never count as intersecting.
  - `in_poly`, which returns `'i'`, `'o'`, `'e'` or `'v'`.
- `starraster.events`:
  - `EventType` and `InputEvent`.
  - `Keyboard`, which tracks a single held key. While a key is down, other presses are ignored.
  - `Mouse`, which tracks the cursor position and the left, middle and right buttons.
  - Key constants `TAB`, `SPACE`, `UPARROW`, `DOWNARROW`, `LEFTARROW` and `RIGHTARROW`.
- `starraster.constants`: playfield and gameplay constants, for example `W`, `H` and `NUM_STARS`.

## Installing

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Example

```python
from starraster.canvas import Canvas, pack_rgba
from starraster.primitives import line_color
from starraster.curves import filled_circle_color
from starraster.polygons import filled_trigon_color
from starraster.compgeom import in_poly

canvas = Canvas(64, 64)
red = pack_rgba(255, 0, 0, 255)
line_color(canvas, 0, 0, 63, 40, red)
filled_circle_color(canvas, 32, 32, 10, pack_rgba(0, 0, 255, 128))
filled_trigon_color(canvas, (5, 50), (20, 60), (2, 62), red)
print(hex(canvas.get_pixel(0, 0)))  # 0xff0000ff

print(in_poly(1, 1, [0, 4, 4, 0], [0, 0, 4, 4]))  # 'i'
```

## Behaviour

- Every drawing function clips to the canvas clip rectangle. You can change that
  rectangle with `Canvas.set_clip`.
- If a colour's alpha byte is 255, the colour is stored as it is. Any other
  alpha blends the colour with the pixels already on the canvas.
- `ValueError` is raised for:
  - a colour that does not fit in 32 bits
  - a negative radius
  - fewer than three polygon points
  - fewer than two bezier steps
- `IndexError` is raised when `Canvas.get_pixel` is asked for a point off the canvas.

## What it does not do

- starraster does not open a window and cannot show anything on a display.
  You read the results back from a `Canvas` yourself.
- There is no event loop and no source of input. You build `InputEvent` values
  yourself and pass them to `Keyboard.update` or `Mouse.update`.
- There is no text rendering, no image loading and no sound.