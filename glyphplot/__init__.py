from glyphplot.backend import DrawingBackend, Position
from glyphplot.chart import ChartLayout, ChartSpec, Series, draw_chart
from glyphplot.errors import BackendError, DrawingError
from glyphplot.raster import TextCanvas
from glyphplot.sinks import LineSink, MemoryLineSink, StreamLineSink, TextFileLineSink
from glyphplot.style import Color, ShapeStyle, TextAnchor, TextStyle

__all__ = [
    "BackendError",
    "ChartLayout",
    "ChartSpec",
    "Color",
    "DrawingBackend",
    "DrawingError",
    "LineSink",
    "MemoryLineSink",
    "Position",
    "Series",
    "ShapeStyle",
    "StreamLineSink",
    "TextAnchor",
    "TextCanvas",
    "TextFileLineSink",
    "TextStyle",
    "draw_chart",
]
