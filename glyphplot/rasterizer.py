from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

from glyphplot.style import ShapeStyle

if TYPE_CHECKING:
    from glyphplot.backend import DrawingBackend, Position


def draw_line(backend: DrawingBackend, start: Position, end: Position, style: ShapeStyle) -> None:
    """Bresenham line, both endpoints included, issued as ``draw_pixel`` calls."""
    x0, y0 = int(start[0]), int(start[1])
    x1, y1 = int(end[0]), int(end[1])
    dx = abs(x1 - x0)
    sx = 1 if x0 < x1 else -1
    dy = -abs(y1 - y0)
    sy = 1 if y0 < y1 else -1
    err = dx + dy
    radius = max(0, style.stroke_width // 2)

    while True:
        _draw_square_brush(backend, x0, y0, style, radius)
        if x0 == x1 and y0 == y1:
            break
        e2 = 2 * err
        if e2 >= dy:
            err += dy
            x0 += sx
        if e2 <= dx:
            err += dx
            y0 += sy


def draw_rect(
    backend: DrawingBackend,
    upper_left: Position,
    bottom_right: Position,
    style: ShapeStyle,
    fill: bool,
) -> None:
    xa, xb = sorted((int(upper_left[0]), int(bottom_right[0])))
    ya, yb = sorted((int(upper_left[1]), int(bottom_right[1])))
    if fill:
        for y in range(ya, yb + 1):
            for x in range(xa, xb + 1):
                backend.draw_pixel((x, y), style.color)
        return
    backend.draw_line((xa, ya), (xb, ya), style)
    backend.draw_line((xb, ya), (xb, yb), style)
    backend.draw_line((xb, yb), (xa, yb), style)
    backend.draw_line((xa, yb), (xa, ya), style)


def draw_path(backend: DrawingBackend, points: Sequence[Position], style: ShapeStyle) -> None:
    if len(points) < 2:
        return
    for i in range(len(points) - 1):
        backend.draw_line(points[i], points[i + 1], style)


def draw_circle(backend: DrawingBackend, center: Position, radius: int, style: ShapeStyle, fill: bool) -> None:
    cx, cy = int(center[0]), int(center[1])
    radius = int(radius)
    if radius <= 0:
        backend.draw_pixel((cx, cy), style.color)
        return

    x = radius
    y = 0
    err = 1 - radius
    while x >= y:
        if fill:
            for yy, half in ((cy + y, x), (cy - y, x), (cy + x, y), (cy - x, y)):
                for xx in range(cx - half, cx + half + 1):
                    backend.draw_pixel((xx, yy), style.color)
        else:
            for px, py in (
                (cx + x, cy + y),
                (cx - x, cy + y),
                (cx + x, cy - y),
                (cx - x, cy - y),
                (cx + y, cy + x),
                (cx - y, cy + x),
                (cx + y, cy - x),
                (cx - y, cy - x),
            ):
                backend.draw_pixel((px, py), style.color)
        y += 1
        if err < 0:
            err += 2 * y + 1
        else:
            x -= 1
            err += 2 * (y - x) + 1


def _draw_square_brush(backend: DrawingBackend, x: int, y: int, style: ShapeStyle, radius: int) -> None:
    for yy in range(y - radius, y + radius + 1):
        for xx in range(x - radius, x + radius + 1):
            backend.draw_pixel((xx, yy), style.color)
