from __future__ import annotations

import numpy as np

from glyphplot import ChartSpec, Series, TextCanvas, draw_chart
from glyphplot.style import BLUE, RED


DATA = np.asarray(
    [2.0, 2.4, 2.1, 3.0, 2.8, 3.2, 3.6, 3.1, 3.9, 4.3, 4.0, 4.7, 4.5, 4.9, 5.2, 5.0, 5.5, 5.8, 5.4, 6.1],
    dtype=np.float64,
)


def main() -> None:
    x = np.arange(DATA.size, dtype=np.float64)
    canvas = TextCanvas(72, 20)
    spec = ChartSpec(
        series=(
            Series(x=x, y=DATA, label="value", color=RED),
            Series(x=x, y=DATA, label="samples", color=BLUE, mode="markers"),
        ),
        caption="Static 1-D Plot",
    )
    draw_chart(canvas, spec)
    canvas.present()


if __name__ == "__main__":
    main()
