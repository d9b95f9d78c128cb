from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

import numpy as np

from glyphplot.backend import DrawingBackend
from glyphplot.scales import (
    CellTransform,
    DataLimits,
    build_transform,
    compute_limits,
    fit_axis_ticks,
    format_ticks_for_axis,
    generate_nice_ticks,
    map_to_cells,
    merge_limits,
)
from glyphplot.style import BLACK, Color, ShapeStyle, TextStyle


SeriesMode = Literal["lines", "markers"]


@dataclass(frozen=True)
class Series:
    x: np.ndarray
    y: np.ndarray
    label: str | None = None
    color: Color = BLACK
    mode: SeriesMode = "lines"

    def __post_init__(self) -> None:
        if self.mode not in ("lines", "markers"):
            raise ValueError(f"unsupported series mode: {self.mode}")
        if self.x.ndim != 1 or self.y.ndim != 1 or self.x.shape != self.y.shape:
            raise ValueError("series x and y must be 1-D arrays of equal length")
        if self.x.size == 0:
            raise ValueError("series must contain at least one point")


@dataclass(frozen=True)
class ChartSpec:
    series: tuple[Series, ...]
    caption: str | None = None
    x_label_count: int | None = None
    y_label_count: int | None = None
    text_style: TextStyle = field(default_factory=TextStyle)
    axis_style: ShapeStyle = field(default_factory=ShapeStyle)


@dataclass(frozen=True)
class ChartLayout:
    """Cell geometry chosen for one chart draw."""

    plot_x0: int
    plot_y0: int
    plot_width: int
    plot_height: int
    axis_row: int
    axis_col: int
    limits: DataLimits


def draw_chart(backend: DrawingBackend, spec: ChartSpec) -> ChartLayout:
    """Lay out and draw a line/marker chart through the drawing-backend contract.

    Rows from the top: optional caption, plot area, x axis, x tick labels.
    Y tick labels sit right-aligned against the y axis.
    """
    if not spec.series:
        raise ValueError("chart needs at least one series")
    backend.ensure_prepared()
    width, height = backend.get_size()

    limits = merge_limits([compute_limits(s.x, s.y) for s in spec.series])
    top = 1 if spec.caption else 0
    axis_row = height - 2
    plot_height = axis_row - top
    if plot_height <= 1:
        raise ValueError(f"backend height {height} is too small for a chart")

    y_target = spec.y_label_count if spec.y_label_count is not None else max(2, plot_height // 2)
    y_ticks = generate_nice_ticks(limits.ymin, limits.ymax, y_target)
    y_labels = format_ticks_for_axis(y_ticks, max_width=max(1, width // 4))
    axis_col = max((len(label) for label in y_labels), default=0)
    plot_x0 = axis_col + 1
    plot_width = width - plot_x0
    if plot_width <= 1:
        raise ValueError(f"backend width {width} is too small for a chart")

    transform = build_transform(limits, plot_width, plot_height)
    layout = ChartLayout(
        plot_x0=plot_x0,
        plot_y0=top,
        plot_width=plot_width,
        plot_height=plot_height,
        axis_row=axis_row,
        axis_col=axis_col,
        limits=limits,
    )

    if spec.caption:
        backend.draw_text(spec.caption, spec.text_style.anchored("center", "top"), (width // 2, 0))

    backend.draw_line((axis_col, axis_row), (width, axis_row), spec.axis_style)
    backend.draw_line((axis_col, top), (axis_col, axis_row + 1), spec.axis_style)

    _, y_rows = map_to_cells(np.zeros_like(y_ticks), y_ticks, transform, plot_width, plot_height)
    right_anchor = spec.text_style.anchored("right", "top")
    for label, row in zip(y_labels, y_rows.tolist(), strict=True):
        backend.draw_text(label, right_anchor, (axis_col, top + row))

    x_ticks, x_labels = fit_axis_ticks(limits.xmin, limits.xmax, plot_width, max_ticks=spec.x_label_count)
    x_cols, _ = map_to_cells(x_ticks, np.zeros_like(x_ticks), transform, plot_width, plot_height)
    center_anchor = spec.text_style.anchored("center", "top")
    for label, col in zip(x_labels, x_cols.tolist(), strict=True):
        backend.draw_text(label, center_anchor, (plot_x0 + col, height - 1))

    for series in spec.series:
        _draw_series(backend, series, layout, transform)
    return layout


def finite_runs(x: np.ndarray, y: np.ndarray) -> list[tuple[int, int]]:
    """Half-open ``(start, end)`` index ranges of consecutive finite points."""
    mask = np.isfinite(x) & np.isfinite(y)
    edges = np.diff(np.concatenate(([0], mask.astype(np.int8), [0])))
    starts = np.flatnonzero(edges == 1)
    ends = np.flatnonzero(edges == -1)
    return [(int(s), int(e)) for s, e in zip(starts.tolist(), ends.tolist(), strict=True)]


def _draw_series(backend: DrawingBackend, series: Series, layout: ChartLayout, transform: CellTransform) -> None:
    style = ShapeStyle(color=series.color)
    # Missing values split a line; each finite run is drawn on its own.
    for start, end in finite_runs(series.x, series.y):
        px, py = map_to_cells(series.x[start:end], series.y[start:end], transform, layout.plot_width, layout.plot_height)
        points = [(layout.plot_x0 + x, layout.plot_y0 + y) for x, y in zip(px.tolist(), py.tolist(), strict=True)]
        if series.mode == "markers":
            for point in points:
                backend.draw_circle(point, 0, style, True)
        elif len(points) == 1:
            backend.draw_pixel(points[0], series.color)
        else:
            backend.draw_path(points, style)
