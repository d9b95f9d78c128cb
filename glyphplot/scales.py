from __future__ import annotations

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class DataLimits:
    xmin: float
    xmax: float
    ymin: float
    ymax: float


@dataclass(frozen=True)
class CellTransform:
    sx: float
    tx: float
    sy: float
    ty: float


def compute_limits(x: np.ndarray, y: np.ndarray, y_buffer_ratio: float = 0.05) -> DataLimits:
    mask = np.isfinite(x) & np.isfinite(y)
    if not np.any(mask):
        raise ValueError("series has no finite points")
    vx = x[mask]
    vy = y[mask]
    xmin = float(np.min(vx))
    xmax = float(np.max(vx))
    ymin = float(np.min(vy))
    ymax = float(np.max(vy))

    if ymin == ymax:
        delta = max(1.0, abs(ymin) * y_buffer_ratio)
        ymin -= delta
        ymax += delta
    else:
        pad = (ymax - ymin) * y_buffer_ratio
        ymin -= pad
        ymax += pad

    if xmin == xmax:
        xmin -= 1.0
        xmax += 1.0

    return DataLimits(xmin=xmin, xmax=xmax, ymin=ymin, ymax=ymax)


def merge_limits(limits: list[DataLimits]) -> DataLimits:
    if not limits:
        raise ValueError("at least one set of limits is required")
    return DataLimits(
        xmin=min(lim.xmin for lim in limits),
        xmax=max(lim.xmax for lim in limits),
        ymin=min(lim.ymin for lim in limits),
        ymax=max(lim.ymax for lim in limits),
    )


def build_transform(limits: DataLimits, width: int, height: int) -> CellTransform:
    if width <= 1 or height <= 1:
        raise ValueError("plot area width/height must be > 1")
    sx = (width - 1) / (limits.xmax - limits.xmin)
    tx = -limits.xmin * sx
    sy = (height - 1) / (limits.ymax - limits.ymin)
    ty = -limits.ymin * sy
    return CellTransform(sx=sx, tx=tx, sy=sy, ty=ty)


def map_to_cells(x: np.ndarray, y: np.ndarray, transform: CellTransform, width: int, height: int) -> tuple[np.ndarray, np.ndarray]:
    """Map data coordinates to cell coordinates inside a ``width`` x ``height`` area.

    Row 0 is the top of the area, so larger y values land on smaller rows.
    Non-finite points are dropped.
    """
    mask = np.isfinite(x) & np.isfinite(y)
    px = np.rint(x[mask] * transform.sx + transform.tx).astype(np.int32)
    py = np.rint(y[mask] * transform.sy + transform.ty).astype(np.int32)
    py = (height - 1) - py
    np.clip(px, 0, width - 1, out=px)
    np.clip(py, 0, height - 1, out=py)
    return px, py


# Multipliers of a power of ten accepted as a tick step.
NICE_STEP_MULTIPLIERS: tuple[float, ...] = (1.0, 2.0, 5.0, 10.0)
MAX_TICK_DECIMALS = 12


def generate_nice_ticks(vmin: float, vmax: float, max_ticks: int) -> np.ndarray:
    """Round-valued ticks inside ``[vmin, vmax]``, at most ``max_ticks`` of them.

    The step is the smallest 1/2/5 x 10**k that keeps the count within budget,
    so a grid with more free cells gets denser ticks.
    """
    if max_ticks <= 0:
        raise ValueError("max_ticks must be > 0")
    if vmin == vmax or max_ticks == 1:
        return np.asarray([vmin], dtype=np.float64)

    step = nice_step((vmax - vmin) / (max_ticks - 1))
    first = np.ceil(vmin / step - 1e-6)
    last = np.floor(vmax / step + 1e-6)
    ticks = np.arange(first, last + 1.0, dtype=np.float64) * step
    ticks[np.isclose(ticks, 0.0, rtol=0.0, atol=step * 1e-9)] = 0.0
    return ticks


def nice_step(raw_step: float) -> float:
    if not np.isfinite(raw_step) or raw_step <= 0:
        raise ValueError("raw_step must be a positive finite number")
    magnitude = 10.0 ** np.floor(np.log10(raw_step))
    for mult in NICE_STEP_MULTIPLIERS:
        step = mult * magnitude
        if step >= raw_step * (1.0 - 1e-9):
            return float(step)
    return float(10.0 * magnitude)


def tick_decimals(step: float) -> int:
    """Fewest decimals that write ``step`` exactly."""
    for decimals in range(MAX_TICK_DECIMALS + 1):
        if abs(round(step, decimals) - step) <= abs(step) * 1e-9:
            return decimals
    return MAX_TICK_DECIMALS


def format_ticks_for_axis(ticks: np.ndarray, *, max_width: int | None = None) -> list[str]:
    """Labels sharing one decimal count; scientific notation when wider than ``max_width`` cells."""
    if ticks.size == 0:
        return []
    step = float(abs(ticks[1] - ticks[0])) if ticks.size > 1 else 0.0
    if step > 0:
        decimals = tick_decimals(step)
        labels = [_fixed_label(float(v), decimals) for v in ticks]
    else:
        labels = [f"{float(v):g}" for v in ticks]
    if max_width is not None and max(len(label) for label in labels) > max_width:
        labels = [f"{float(v):.1e}" for v in ticks]
    return labels


def fit_axis_ticks(vmin: float, vmax: float, cells: int, *, gap: int = 2, max_ticks: int | None = None) -> tuple[np.ndarray, list[str]]:
    """Pick the densest ticks whose labels fit side by side along ``cells`` columns."""
    budget = max(1, cells // 2)
    if max_ticks is not None:
        budget = min(budget, max(1, max_ticks))
    while True:
        ticks = generate_nice_ticks(vmin, vmax, budget)
        labels = format_ticks_for_axis(ticks)
        needed = sum(len(label) + gap for label in labels)
        if budget == 1 or needed <= cells:
            return ticks, labels
        budget -= 1


def _fixed_label(value: float, decimals: int) -> str:
    out = f"{value:.{decimals}f}"
    if float(out) == 0.0:
        return f"{0.0:.{decimals}f}"
    return out

