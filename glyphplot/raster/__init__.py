from .canvas import VISIBLE_ALPHA_THRESHOLD, TextCanvas
from .cells import (
    CROSSING,
    EMPTY,
    FILLED,
    HLINE,
    PIXEL,
    VLINE,
    Crossing,
    Empty,
    Filled,
    GenericPixel,
    Glyph,
    HorizontalSegment,
    Mark,
    Marker,
    VerticalSegment,
    mark_char,
    reduce_mark,
)

__all__ = [
    "CROSSING",
    "Crossing",
    "EMPTY",
    "Empty",
    "FILLED",
    "Filled",
    "GenericPixel",
    "Glyph",
    "HLINE",
    "HorizontalSegment",
    "Mark",
    "Marker",
    "PIXEL",
    "TextCanvas",
    "VISIBLE_ALPHA_THRESHOLD",
    "VLINE",
    "VerticalSegment",
    "mark_char",
    "reduce_mark",
]
