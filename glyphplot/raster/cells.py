from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias


@dataclass(frozen=True)
class Empty:
    pass


@dataclass(frozen=True)
class HorizontalSegment:
    pass


@dataclass(frozen=True)
class VerticalSegment:
    pass


@dataclass(frozen=True)
class Crossing:
    pass


@dataclass(frozen=True)
class GenericPixel:
    pass


@dataclass(frozen=True)
class Filled:
    pass


@dataclass(frozen=True)
class Glyph:
    char: str

    def __post_init__(self) -> None:
        if len(self.char) != 1:
            raise ValueError(f"glyph must be exactly one character, got {self.char!r}")


@dataclass(frozen=True)
class Marker:
    solid: bool


Mark: TypeAlias = Empty | HorizontalSegment | VerticalSegment | Crossing | GenericPixel | Filled | Glyph | Marker

EMPTY = Empty()
HLINE = HorizontalSegment()
VLINE = VerticalSegment()
CROSSING = Crossing()
PIXEL = GenericPixel()
FILLED = Filled()

FULL_BLOCK = "█"

# Highest priority first. A mark of one of these kinds absorbs anything of a lower kind.
ABSORBING_PRIORITY: tuple[type, ...] = (Filled, Marker, GenericPixel)

_SIMPLE_CHARS: dict[type, str] = {
    Empty: " ",
    HorizontalSegment: "-",
    VerticalSegment: "|",
    Crossing: "+",
    GenericPixel: ".",
    Filled: FULL_BLOCK,
}


def reduce_mark(current: Mark, incoming: Mark) -> Mark:
    """Combine the mark already in a cell with a newly drawn one.

    Rules, first match wins:
      1. a horizontal and a vertical segment meet -> Crossing
      2..4. Filled > Marker > GenericPixel absorb everything below them
      5. otherwise the incoming mark replaces the current one
    """
    if _is_crossing(current, incoming):
        return CROSSING
    for kind in ABSORBING_PRIORITY:
        if isinstance(incoming, kind):
            return incoming
        if isinstance(current, kind):
            return current
    return incoming


def mark_char(mark: Mark) -> str:
    if isinstance(mark, Glyph):
        return mark.char
    if isinstance(mark, Marker):
        return "@" if mark.solid else "O"
    return _SIMPLE_CHARS[type(mark)]


def _is_crossing(a: Mark, b: Mark) -> bool:
    return (isinstance(a, HorizontalSegment) and isinstance(b, VerticalSegment)) or (
        isinstance(a, VerticalSegment) and isinstance(b, HorizontalSegment)
    )
