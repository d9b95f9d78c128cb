from __future__ import annotations

import argparse
from dataclasses import replace
import logging
from pathlib import Path
from typing import Callable

import numpy as np

from glyphplot import ChartSpec, Series, TextCanvas, TextStyle, draw_chart
from glyphplot.config import CanvasConfig, RenderConfig, load_config
from glyphplot.logging_config import setup_logging
from glyphplot.sinks import LineSink, StreamLineSink, TextFileLineSink
from glyphplot.style import BLUE, H_POSITIONS, RED, V_POSITIONS, Color


LOGGER = logging.getLogger("glyphplot.cli")

FUNCTIONS: dict[str, Callable[[np.ndarray], np.ndarray]] = {
    "sin": np.sin,
    "cos": np.cos,
    "tan": np.tan,
    "square": np.square,
    "linear": lambda x: x,
}
FUNCTION_TITLES: dict[str, str] = {
    "sin": "Sine",
    "cos": "Cosine",
    "tan": "Tangent",
    "square": "Square",
    "linear": "Linear",
}
SERIES_COLORS: tuple[Color, ...] = (RED, BLUE, Color.from_rgba255((255, 170, 70, 255)))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="glyphplot")
    parser.add_argument("--log-level", choices=["DEBUG", "INFO", "WARNING", "ERROR"], default="WARNING")
    sub = parser.add_subparsers(dest="command", required=True)

    chart = sub.add_parser("chart", help="Render a chart of sampled functions as text.")
    chart.add_argument("--config", type=Path, default=None, help="TOML file with [canvas] and [chart] tables.")
    chart.add_argument("--width", type=int, default=None)
    chart.add_argument("--height", type=int, default=None)
    chart.add_argument("--caption", default=None)
    chart.add_argument(
        "--function",
        dest="functions",
        action="append",
        choices=sorted(FUNCTIONS),
        default=None,
        help="Function to plot; repeat for several. Default: sin and cos.",
    )
    chart.add_argument("--output", type=Path, default=None, help="Write the frame to this file instead of stdout.")

    text = sub.add_parser("text", help="Render one anchored string on a blank canvas.")
    text.add_argument("text")
    text.add_argument("--width", type=int, default=40)
    text.add_argument("--height", type=int, default=5)
    text.add_argument("--x", type=int, default=0)
    text.add_argument("--y", type=int, default=0)
    text.add_argument("--h-pos", choices=H_POSITIONS, default="left")
    text.add_argument("--v-pos", choices=V_POSITIONS, default="top")
    text.add_argument("--output", type=Path, default=None)
    return parser


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level)

    if args.command == "chart":
        config = load_config(args.config) if args.config is not None else RenderConfig()
        config = _apply_overrides(config, args)
        canvas = TextCanvas(config.canvas.width, config.canvas.height, sink=_build_sink(args.output))
        draw_chart(canvas, build_chart_spec(config))
        canvas.present()
        return

    if args.command == "text":
        canvas = TextCanvas(args.width, args.height, sink=_build_sink(args.output))
        style = TextStyle().anchored(args.h_pos, args.v_pos)
        canvas.draw_text(args.text, style, (args.x, args.y))
        canvas.present()
        return

    raise RuntimeError(f"unsupported command: {args.command}")


def build_chart_spec(config: RenderConfig) -> ChartSpec:
    chart = config.chart
    x = np.linspace(chart.x_min, chart.x_max, chart.samples)
    series = []
    for i, name in enumerate(chart.functions):
        if name not in FUNCTIONS:
            raise ValueError(f"unknown function: {name}")
        series.append(Series(x=x, y=FUNCTIONS[name](x), label=name, color=SERIES_COLORS[i % len(SERIES_COLORS)]))
    LOGGER.info("charting %s over [%s, %s]", ",".join(chart.functions), chart.x_min, chart.x_max)
    caption = chart.caption if chart.caption is not None else default_caption(chart.functions)
    return ChartSpec(series=tuple(series), caption=caption or None)


def default_caption(functions: tuple[str, ...]) -> str:
    titles = [FUNCTION_TITLES.get(name, name) for name in functions]
    if len(titles) <= 2:
        return " and ".join(titles)
    return ", ".join(titles[:-1]) + " and " + titles[-1]


def _apply_overrides(config: RenderConfig, args: argparse.Namespace) -> RenderConfig:
    canvas = CanvasConfig(
        width=args.width if args.width is not None else config.canvas.width,
        height=args.height if args.height is not None else config.canvas.height,
    )
    chart = config.chart
    if args.caption is not None:
        chart = replace(chart, caption=args.caption)
    if args.functions:
        chart = replace(chart, functions=tuple(args.functions))
    return RenderConfig(canvas=canvas, chart=chart)


def _build_sink(output: Path | None) -> LineSink:
    if output is not None:
        return TextFileLineSink(output)
    return StreamLineSink()


if __name__ == "__main__":
    main()
