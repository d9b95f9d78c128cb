from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Sequence, TypeAlias

from glyphplot import rasterizer
from glyphplot.style import Color, ShapeStyle, TextStyle


Position: TypeAlias = tuple[int, int]


class DrawingBackend(ABC):
    """Drawing surface consumed by chart layout code.

    Operations return ``None`` on success and raise ``DrawingError`` when the
    backend cannot complete them. Only the primitives below are required; lines,
    rectangles, paths and circles fall back to the generic rasterizers, which
    reduce everything to ``draw_pixel`` calls.
    """

    @abstractmethod
    def get_size(self) -> tuple[int, int]:
        raise NotImplementedError

    @abstractmethod
    def ensure_prepared(self) -> None:
        raise NotImplementedError

    @abstractmethod
    def present(self) -> None:
        raise NotImplementedError

    @abstractmethod
    def draw_pixel(self, pos: Position, color: Color) -> None:
        raise NotImplementedError

    @abstractmethod
    def draw_text(self, text: str, style: TextStyle, pos: Position) -> None:
        raise NotImplementedError

    def draw_line(self, start: Position, end: Position, style: ShapeStyle) -> None:
        rasterizer.draw_line(self, start, end, style)

    def draw_rect(self, upper_left: Position, bottom_right: Position, style: ShapeStyle, fill: bool) -> None:
        rasterizer.draw_rect(self, upper_left, bottom_right, style, fill)

    def draw_path(self, points: Sequence[Position], style: ShapeStyle) -> None:
        rasterizer.draw_path(self, points, style)

    def draw_circle(self, center: Position, radius: int, style: ShapeStyle, fill: bool) -> None:
        rasterizer.draw_circle(self, center, radius, style, fill)

    def estimate_text_size(self, text: str, style: TextStyle) -> tuple[int, int]:
        """Approximate footprint of ``text``: one cell per character on a single row."""
        return (len(text), 1)
