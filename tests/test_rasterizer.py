from __future__ import annotations

import unittest

from glyphplot.backend import DrawingBackend, Position
from glyphplot.style import BLACK, Color, ShapeStyle, TextStyle


class _RecordingBackend(DrawingBackend):
    """Backend that only implements the required primitives and records pixels."""

    def __init__(self) -> None:
        self.pixels: list[Position] = []
        self.texts: list[tuple[str, Position]] = []

    def get_size(self) -> tuple[int, int]:
        return (100, 100)

    def ensure_prepared(self) -> None:
        return

    def present(self) -> None:
        return

    def draw_pixel(self, pos: Position, color: Color) -> None:
        self.pixels.append(pos)

    def draw_text(self, text: str, style: TextStyle, pos: Position) -> None:
        self.texts.append((text, pos))


class GenericRasterizerTests(unittest.TestCase):
    def test_line_includes_both_endpoints(self) -> None:
        backend = _RecordingBackend()
        backend.draw_line((0, 0), (4, 2), ShapeStyle(color=BLACK))
        self.assertEqual(backend.pixels[0], (0, 0))
        self.assertEqual(backend.pixels[-1], (4, 2))
        self.assertEqual(len(backend.pixels), 5)

    def test_line_is_continuous(self) -> None:
        backend = _RecordingBackend()
        backend.draw_line((7, 1), (1, 10), ShapeStyle(color=BLACK))
        for (xa, ya), (xb, yb) in zip(backend.pixels, backend.pixels[1:]):
            self.assertLessEqual(abs(xb - xa), 1)
            self.assertLessEqual(abs(yb - ya), 1)

    def test_wide_stroke_stamps_square_brush(self) -> None:
        backend = _RecordingBackend()
        backend.draw_line((5, 5), (5, 5), ShapeStyle(color=BLACK, stroke_width=3))
        self.assertEqual(set(backend.pixels), {(x, y) for x in range(4, 7) for y in range(4, 7)})

    def test_filled_rect_visits_every_cell(self) -> None:
        backend = _RecordingBackend()
        backend.draw_rect((3, 4), (1, 2), ShapeStyle(color=BLACK), True)
        self.assertEqual(sorted(backend.pixels), sorted((x, y) for x in range(1, 4) for y in range(2, 5)))

    def test_outline_rect_skips_interior(self) -> None:
        backend = _RecordingBackend()
        backend.draw_rect((0, 0), (4, 4), ShapeStyle(color=BLACK), False)
        self.assertNotIn((2, 2), backend.pixels)
        self.assertIn((4, 0), backend.pixels)
        self.assertIn((0, 4), backend.pixels)

    def test_path_needs_two_points(self) -> None:
        backend = _RecordingBackend()
        backend.draw_path([(1, 1)], ShapeStyle(color=BLACK))
        self.assertEqual(backend.pixels, [])
        backend.draw_path([(0, 0), (2, 0), (2, 2)], ShapeStyle(color=BLACK))
        self.assertEqual(set(backend.pixels), {(0, 0), (1, 0), (2, 0), (2, 1), (2, 2)})

    def test_circle_outline_and_fill(self) -> None:
        outline = _RecordingBackend()
        outline.draw_circle((10, 10), 3, ShapeStyle(color=BLACK), False)
        self.assertIn((13, 10), outline.pixels)
        self.assertIn((10, 7), outline.pixels)
        self.assertNotIn((10, 10), outline.pixels)

        filled = _RecordingBackend()
        filled.draw_circle((10, 10), 3, ShapeStyle(color=BLACK), True)
        self.assertIn((10, 10), filled.pixels)
        self.assertIn((7, 10), filled.pixels)

    def test_zero_radius_circle_is_a_pixel(self) -> None:
        backend = _RecordingBackend()
        backend.draw_circle((2, 3), 0, ShapeStyle(color=BLACK), False)
        self.assertEqual(backend.pixels, [(2, 3)])

    def test_default_text_size_estimate(self) -> None:
        self.assertEqual(_RecordingBackend().estimate_text_size("four", TextStyle()), (4, 1))


if __name__ == "__main__":
    unittest.main()
