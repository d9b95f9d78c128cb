from __future__ import annotations

from pathlib import Path
import sys
from typing import Literal, Protocol, TextIO


class LineSink(Protocol):
    def write_line(self, line: str) -> None:
        ...


class StreamLineSink:
    """Writes each line to a text stream, ``sys.stdout`` unless told otherwise."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    def write_line(self, line: str) -> None:
        # Resolved per write so redirected stdout is honoured.
        stream = self._stream if self._stream is not None else sys.stdout
        stream.write(line)
        stream.write("\n")
        stream.flush()


class MemoryLineSink:
    def __init__(self) -> None:
        self.lines: list[str] = []

    def write_line(self, line: str) -> None:
        self.lines.append(line)

    def text(self) -> str:
        return "\n".join(self.lines)

    def clear(self) -> None:
        self.lines.clear()


class TextFileLineSink:
    def __init__(self, path: str | Path, mode: Literal["w", "a"] = "w") -> None:
        if mode not in ("w", "a"):
            raise ValueError("mode must be 'w' or 'a'")
        self.path = Path(path)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        if mode == "w":
            self.path.write_text("", encoding="utf-8")

    def write_line(self, line: str) -> None:
        with self.path.open("a", encoding="utf-8") as f:
            f.write(line)
            f.write("\n")
