from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
import tomllib
from typing import Any


DEFAULT_WIDTH = 80
DEFAULT_HEIGHT = 24
DEFAULT_FUNCTIONS: tuple[str, ...] = ("sin", "cos")


@dataclass(frozen=True)
class CanvasConfig:
    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("canvas width and height must be > 0")


@dataclass(frozen=True)
class ChartConfig:
    # None derives a caption from the plotted functions; "" means no caption.
    caption: str | None = None
    functions: tuple[str, ...] = DEFAULT_FUNCTIONS
    x_min: float = -3.14
    x_max: float = 3.14
    samples: int = 200

    def __post_init__(self) -> None:
        if not self.functions:
            raise ValueError("chart.functions must not be empty")
        if self.x_min >= self.x_max:
            raise ValueError("chart.x_min must be < chart.x_max")
        if self.samples < 2:
            raise ValueError("chart.samples must be >= 2")


@dataclass(frozen=True)
class RenderConfig:
    canvas: CanvasConfig = field(default_factory=CanvasConfig)
    chart: ChartConfig = field(default_factory=ChartConfig)


def load_config(path: str | Path) -> RenderConfig:
    """Read a TOML render config with optional ``[canvas]`` and ``[chart]`` tables."""
    config_path = Path(path)
    if not config_path.exists():
        raise FileNotFoundError(f"config not found: {config_path}")
    with config_path.open("rb") as f:
        raw = tomllib.load(f)
    canvas_raw = _coerce_table(raw.get("canvas", {}), "canvas")
    chart_raw = _coerce_table(raw.get("chart", {}), "chart")

    canvas = CanvasConfig(
        width=_coerce_int(canvas_raw.get("width", DEFAULT_WIDTH), "canvas.width"),
        height=_coerce_int(canvas_raw.get("height", DEFAULT_HEIGHT), "canvas.height"),
    )
    defaults = ChartConfig()
    caption = chart_raw.get("caption", defaults.caption)
    if caption is not None and not isinstance(caption, str):
        raise ValueError("chart.caption must be a string")
    chart = ChartConfig(
        caption=caption,
        functions=_coerce_string_tuple(chart_raw.get("functions", list(defaults.functions)), "chart.functions"),
        x_min=_coerce_float(chart_raw.get("x_min", defaults.x_min), "chart.x_min"),
        x_max=_coerce_float(chart_raw.get("x_max", defaults.x_max), "chart.x_max"),
        samples=_coerce_int(chart_raw.get("samples", defaults.samples), "chart.samples"),
    )
    return RenderConfig(canvas=canvas, chart=chart)


def _coerce_table(value: Any, field_name: str) -> dict[str, Any]:
    if not isinstance(value, dict):
        raise ValueError(f"{field_name} must be a table")
    return value


def _coerce_int(value: Any, field_name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{field_name} must be an integer")
    return value


def _coerce_float(value: Any, field_name: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"{field_name} must be a number")
    return float(value)


def _coerce_string_tuple(value: Any, field_name: str) -> tuple[str, ...]:
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise ValueError(f"{field_name} must be a list of strings")
    return tuple(value)
