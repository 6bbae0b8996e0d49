"""Shared test helpers for inspecting buffers and rendered output."""

from __future__ import annotations

import re

from termcanvas.buffer import Buffer
from termcanvas.style import Style, StyleCache

_SGR_RE = re.compile(r"\x1b\[[0-9;]*m")


def strip_sgr(text: str) -> str:
    """Remove SGR escape sequences, leaving only glyphs and newlines."""
    return _SGR_RE.sub("", text)


def count_sgr(text: str) -> int:
    return len(_SGR_RE.findall(text))


def row_text(buf: Buffer, y: int) -> str:
    """Glyphs of row *y*, continuation cells omitted."""
    row = list(buf.rows())[y]
    return "".join(cell.char for cell in row if not cell.is_continuation)


def assert_wide_invariant(buf: Buffer) -> None:
    """Every wide head is followed by a continuation, and vice versa."""
    for y, row in enumerate(buf.rows()):
        for x, cell in enumerate(row):
            if cell.is_continuation:
                assert x > 0 and row[x - 1].width == 2, (
                    f"orphan continuation at ({x}, {y})"
                )
            if cell.width == 2:
                assert x == len(row) - 1 or row[x + 1].is_continuation, (
                    f"wide head without continuation at ({x}, {y})"
                )


class CountingEncoder:
    """StyleEncoder that records how often each style is looked up."""

    def __init__(self) -> None:
        self._inner = StyleCache()
        self.calls: list[Style] = []

    def get(self, style: Style) -> str:
        self.calls.append(style)
        return self._inner.get(style)
