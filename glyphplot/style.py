from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal


HPos = Literal["left", "center", "right"]
VPos = Literal["top", "center", "bottom"]

H_POSITIONS: tuple[str, ...] = ("left", "center", "right")
V_POSITIONS: tuple[str, ...] = ("top", "center", "bottom")


@dataclass(frozen=True)
class Color:
    r: int
    g: int
    b: int
    alpha: float = 1.0

    def __post_init__(self) -> None:
        if not 0.0 <= self.alpha <= 1.0:
            raise ValueError(f"alpha must be in [0.0, 1.0], got {self.alpha}")

    @classmethod
    def from_rgba255(cls, rgba: tuple[int, int, int, int]) -> Color:
        return cls(r=rgba[0], g=rgba[1], b=rgba[2], alpha=rgba[3] / 255.0)


BLACK = Color(0, 0, 0)
RED = Color(255, 0, 0)
BLUE = Color(62, 149, 255)
TRANSPARENT = Color(0, 0, 0, 0.0)


@dataclass(frozen=True)
class ShapeStyle:
    color: Color = BLACK
    stroke_width: int = 1

    def __post_init__(self) -> None:
        if self.stroke_width < 0:
            raise ValueError("stroke_width must be >= 0")


@dataclass(frozen=True)
class TextAnchor:
    h_pos: HPos = "left"
    v_pos: VPos = "top"

    def __post_init__(self) -> None:
        if self.h_pos not in H_POSITIONS:
            raise ValueError(f"unsupported horizontal anchor: {self.h_pos}")
        if self.v_pos not in V_POSITIONS:
            raise ValueError(f"unsupported vertical anchor: {self.v_pos}")


@dataclass(frozen=True)
class TextStyle:
    """Text style as seen by a backend. Character backends ignore the font metrics."""

    font_family: str = "monospace"
    font_size: float = 10.0
    color: Color = BLACK
    anchor: TextAnchor = field(default_factory=TextAnchor)

    def anchored(self, h_pos: HPos = "left", v_pos: VPos = "top") -> TextStyle:
        return TextStyle(
            font_family=self.font_family,
            font_size=self.font_size,
            color=self.color,
            anchor=TextAnchor(h_pos=h_pos, v_pos=v_pos),
        )
