from __future__ import annotations

import logging

import numpy as np

from glyphplot.backend import DrawingBackend, Position
from glyphplot.errors import BackendError
from glyphplot.raster.cells import EMPTY, FILLED, HLINE, PIXEL, VLINE, Glyph, Mark, Marker, mark_char, reduce_mark
from glyphplot.sinks import LineSink, StreamLineSink
from glyphplot.style import Color, ShapeStyle, TextStyle


LOGGER = logging.getLogger(__name__)

# Colors at or below this alpha are treated as invisible on an on/off cell grid.
VISIBLE_ALPHA_THRESHOLD = 0.3


class TextCanvas(DrawingBackend):
    """Fixed-size character grid that renders a frame of drawing calls as text.

    Every cell holds one mark; new marks are merged into the cell with
    ``reduce_mark``. Coordinates are clamped into the grid, never rejected.
    """

    def __init__(self, width: int, height: int, sink: LineSink | None = None) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("width and height must be > 0")
        self._width = int(width)
        self._height = int(height)
        self._sink: LineSink = sink if sink is not None else StreamLineSink()
        self._cells = np.full(self._width * self._height, EMPTY, dtype=object)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def get_size(self) -> tuple[int, int]:
        return (self._width, self._height)

    def ensure_prepared(self) -> None:
        return

    def mark_at(self, x: int, y: int) -> Mark:
        if not (0 <= x < self._width and 0 <= y < self._height):
            raise IndexError(f"cell ({x}, {y}) outside {self._width}x{self._height} canvas")
        return self._cells[y * self._width + x]

    def render_lines(self) -> list[str]:
        rows = self._cells.reshape(self._height, self._width)
        return ["".join(mark_char(mark) for mark in row) for row in rows]

    def present(self) -> None:
        LOGGER.debug("presenting %dx%d text canvas", self._width, self._height)
        for row, line in enumerate(self.render_lines()):
            try:
                self._sink.write_line(line)
            except OSError as exc:
                LOGGER.error("text canvas sink failed at row %d: %s", row, exc)
                raise BackendError(f"failed to write row {row}") from exc

    def draw_pixel(self, pos: Position, color: Color) -> None:
        if color.alpha <= VISIBLE_ALPHA_THRESHOLD:
            return
        x, y = self._clamp_cell(pos)
        self._apply(y * self._width + x, PIXEL)

    def draw_rect(self, upper_left: Position, bottom_right: Position, style: ShapeStyle, fill: bool) -> None:
        # Outlined and filled rectangles both render as solid blocks.
        x0 = _clamp(upper_left[0], 0, self._width)
        y0 = _clamp(upper_left[1], 0, self._height)
        x1 = _clamp(bottom_right[0], 0, self._width - 1)
        y1 = _clamp(bottom_right[1], 0, self._height - 1)
        for y in range(y0, y1 + 1):
            for x in range(x0, x1 + 1):
                self._apply(y * self._width + x, FILLED)

    def draw_line(self, start: Position, end: Position, style: ShapeStyle) -> None:
        if start[0] == end[0]:
            x = _clamp(start[0], 0, self._width - 1)
            ya = _clamp(min(start[1], end[1]), 0, self._height)
            yb = _clamp(max(start[1], end[1]), 0, self._height)
            for y in range(ya, yb):
                self._apply(y * self._width + x, VLINE)
            return

        if start[1] == end[1]:
            y = _clamp(start[1], 0, self._height - 1)
            xa = _clamp(min(start[0], end[0]), 0, self._width)
            xb = _clamp(max(start[0], end[0]), 0, self._width)
            for x in range(xa, xb):
                self._apply(y * self._width + x, HLINE)
            return

        super().draw_line(start, end, style)

    def draw_circle(self, center: Position, radius: int, style: ShapeStyle, fill: bool) -> None:
        if style.color.alpha <= VISIBLE_ALPHA_THRESHOLD:
            return
        x, y = self._clamp_cell(center)
        self._apply(y * self._width + x, Marker(solid=fill))

    def draw_text(self, text: str, style: TextStyle, pos: Position) -> None:
        width, height = self.estimate_text_size(text, style)
        anchor = style.anchor
        if anchor.h_pos == "right":
            dx = -width
        elif anchor.h_pos == "center":
            dx = -(width // 2)
        else:
            dx = 0
        if anchor.v_pos == "bottom":
            dy = -height
        elif anchor.v_pos == "center":
            dy = -(height // 2)
        else:
            dy = 0

        # Text advances by linear index, so a string running past the right
        # edge continues on the next row.
        offset = max(0, int(pos[1]) + dy) * self._width + max(0, int(pos[0]) + dx)
        total = self._cells.size
        for idx, char in enumerate(text, start=offset):
            if idx < total:
                self._apply(idx, Glyph(char))

    def _apply(self, idx: int, mark: Mark) -> None:
        self._cells[idx] = reduce_mark(self._cells[idx], mark)

    def _clamp_cell(self, pos: Position) -> tuple[int, int]:
        return _clamp(pos[0], 0, self._width - 1), _clamp(pos[1], 0, self._height - 1)


def _clamp(value: int, lo: int, hi: int) -> int:
    return max(lo, min(int(value), hi))
