from __future__ import annotations

import io
from pathlib import Path
import tempfile
import unittest
from unittest import mock

import main
from glyphplot.config import ChartConfig, RenderConfig


class MainCliTests(unittest.TestCase):
    def test_text_command_prints_anchored_text(self) -> None:
        out = io.StringIO()
        with mock.patch("sys.stdout", out):
            main.main(["text", "AB", "--width", "5", "--height", "2", "--x", "4", "--h-pos", "right"])
        self.assertEqual(out.getvalue(), "  AB \n     \n")

    def test_chart_command_writes_frame_to_file(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            path = Path(td) / "chart.txt"
            main.main(["chart", "--width", "50", "--height", "15", "--caption", "Waves", "--output", str(path)])
            lines = path.read_text(encoding="utf-8").splitlines()
        self.assertEqual(len(lines), 15)
        self.assertTrue(all(len(line) == 50 for line in lines))
        self.assertIn("Waves", lines[0])
        self.assertIn("+", lines[13])

    def test_chart_command_reads_config_and_applies_overrides(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            config_path = Path(td) / "glyphplot.toml"
            config_path.write_text("[canvas]\nwidth = 30\nheight = 10\n[chart]\ncaption = \"cfg\"\n", encoding="utf-8")
            out = io.StringIO()
            with mock.patch("sys.stdout", out):
                main.main(["chart", "--config", str(config_path), "--height", "12", "--function", "linear"])
        lines = out.getvalue().splitlines()
        self.assertEqual(len(lines), 12)
        self.assertEqual(len(lines[0]), 30)
        self.assertIn("cfg", lines[0])

    def test_function_override_derives_caption(self) -> None:
        out = io.StringIO()
        with mock.patch("sys.stdout", out):
            main.main(["chart", "--width", "50", "--height", "15", "--function", "tan"])
        first = out.getvalue().splitlines()[0]
        self.assertIn("Tangent", first)
        self.assertNotIn("Sine", first)

    def test_caption_defaults_and_overrides(self) -> None:
        self.assertEqual(main.build_chart_spec(RenderConfig()).caption, "Sine and Cosine")
        three = RenderConfig(chart=ChartConfig(functions=("sin", "square", "linear")))
        self.assertEqual(main.build_chart_spec(three).caption, "Sine, Square and Linear")
        self.assertIsNone(main.build_chart_spec(RenderConfig(chart=ChartConfig(caption=""))).caption)
        self.assertEqual(main.build_chart_spec(RenderConfig(chart=ChartConfig(caption="Mine"))).caption, "Mine")

    def test_series_use_palette_colors(self) -> None:
        spec = main.build_chart_spec(RenderConfig(chart=ChartConfig(functions=("sin", "cos", "tan"))))
        self.assertEqual([s.color for s in spec.series], list(main.SERIES_COLORS))

    def test_build_chart_spec_rejects_unknown_function(self) -> None:
        bad = RenderConfig(chart=ChartConfig(functions=("nope",)))
        with self.assertRaises(ValueError):
            main.build_chart_spec(bad)

    def test_unknown_subcommand_exits(self) -> None:
        with mock.patch("sys.stderr", io.StringIO()):
            with self.assertRaises(SystemExit):
                main.main(["paint"])


if __name__ == "__main__":
    unittest.main()
