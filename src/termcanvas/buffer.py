"""Cell buffer: a 2-D grid of styled cells with compositing and rendering.

Every mutation keeps double-width glyphs intact: a head cell (``width=2``)
is always followed by its continuation cell in the same row, and
overwriting either half resets the other half to a blank.

A ``Buffer`` is not thread-safe. Give each widget its own buffer and
composite into the shared parent from a single thread.
"""

from __future__ import annotations

import re
from typing import Iterator

from termcanvas.cell import BLANK, Cell, continuation
from termcanvas.config import get_config
from termcanvas.geometry import Point, Rect, Size
from termcanvas.pool import get_string_builder, put_string_builder
from termcanvas.style import RESET, Style, StyleEncoder, get_style_encoder
from termcanvas.width import char_width, is_control_char, string_width

# Wrap tokens: newline, a single non-newline whitespace char, or a word
_WRAP_TOKEN_RE = re.compile(r"\n|[^\S\n]|\S+")


class Buffer:
    """A ``width`` x ``height`` grid of ``Cell`` values.

    Non-positive dimensions fall back to the configured default size
    (80x24 unless overridden).
    """

    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            config = get_config()
            if width <= 0:
                width = config.default_width
            if height <= 0:
                height = config.default_height
        self._width = width
        self._height = height
        self._cells: list[list[Cell]] = [[BLANK] * width for _ in range(height)]

    @classmethod
    def _unsized(cls) -> Buffer:
        """A 0x0 buffer for the pool to reshape; bypasses the default size."""
        buf = cls.__new__(cls)
        buf._width = 0
        buf._height = 0
        buf._cells = []
        return buf

    # -- accessors ----------------------------------------------------------

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def size(self) -> Size:
        return Size(self._width, self._height)

    def valid(self, p: Point) -> bool:
        return 0 <= p.x < self._width and 0 <= p.y < self._height

    def cell(self, p: Point) -> Cell | None:
        """Return the cell at *p*, or ``None`` when out of bounds."""
        if not self.valid(p):
            return None
        return self._cells[p.y][p.x]

    def rows(self) -> Iterator[tuple[Cell, ...]]:
        """Iterate over snapshot tuples of each row."""
        for row in self._cells:
            yield tuple(row)

    def __repr__(self) -> str:
        return f"Buffer({self._width}x{self._height})"

    # -- mutation -----------------------------------------------------------

    def clear(self) -> None:
        """Reset every cell to blank."""
        for row in self._cells:
            row[:] = [BLANK] * self._width

    def _reshape(self, width: int, height: int) -> None:
        # Used by the pool: reuse row lists where possible.
        if width == self._width and height == self._height:
            self.clear()
            return
        rows = self._cells
        del rows[height:]
        for row in rows:
            row[:] = [BLANK] * width
        for _ in range(height - len(rows)):
            rows.append([BLANK] * width)
        self._width = width
        self._height = height

    def _clear_at(self, x: int, y: int) -> None:
        """Blank the cell at (x, y) and the other half of any wide glyph there."""
        row = self._cells[y]
        cell = row[x]
        if cell.is_continuation:
            if x > 0 and row[x - 1].width == 2:
                row[x - 1] = BLANK
        elif cell.width == 2 and x + 1 < self._width:
            row[x + 1] = BLANK
        row[x] = BLANK

    def _put_glyph(self, x: int, y: int, ch: str, w: int, style: Style) -> None:
        # Caller guarantees x + w <= width.
        self._clear_at(x, y)
        if w == 2:
            self._clear_at(x + 1, y)
            self._cells[y][x + 1] = continuation(style)
        self._cells[y][x] = Cell(ch, w, style)

    def set_cell(self, p: Point, cell: Cell) -> bool:
        """Write *cell* at *p*. Returns ``False`` when nothing was written.

        A wide head cell also gets its continuation written; in the last
        column, where there is no room for one, it is stored single-width.
        Continuation cells, zero-width cells and cells holding control
        characters are rejected.
        """
        if not self.valid(p):
            return False
        if cell.is_continuation or cell.width < 1:
            return False
        if any(is_control_char(ch) for ch in cell.char):
            return False
        x, y = p.x, p.y
        self._clear_at(x, y)
        if cell.width == 2:
            if x + 1 < self._width:
                self._clear_at(x + 1, y)
                self._cells[y][x + 1] = continuation(cell.style)
            else:
                cell = Cell(cell.char, 1, cell.style)
        self._cells[y][x] = cell
        return True

    def fill_rect(self, rect: Rect, char: str, style: Style) -> None:
        """Fill *rect* (clamped to the buffer) with single-width *char* cells.

        A wide or control *char* cannot fill one column per cell and is
        replaced by a space.
        """
        if len(char) != 1 or is_control_char(char) or char_width(char) != 1:
            char = " "
        x0 = max(rect.x, 0)
        y0 = max(rect.y, 0)
        x1 = min(rect.x + rect.width, self._width)
        y1 = min(rect.y + rect.height, self._height)
        if x0 >= x1 or y0 >= y1:
            return
        fill = Cell(char, 1, style)
        for y in range(y0, y1):
            row = self._cells[y]
            # Only the edges can split a wide glyph
            self._clear_at(x0, y)
            if x1 - 1 != x0:
                self._clear_at(x1 - 1, y)
            row[x0:x1] = [fill] * (x1 - x0)

    def write_string(self, p: Point, text: str, style: Style) -> int:
        """Write *text* from *p* rightwards. Returns the columns used.

        Writing stops at the row edge, including when a wide character
        would not fit in the last column. Control characters are skipped.
        """
        if not self.valid(p):
            return 0
        x, y = p.x, p.y
        width = self._width
        for ch in text:
            if is_control_char(ch):
                continue
            w = char_width(ch)
            if x + w > width:
                break
            self._put_glyph(x, y, ch, w, style)
            x += w
        return x - p.x

    def write_string_wrapped(
        self, p: Point, max_width: int, text: str, style: Style
    ) -> int:
        """Greedy word-wrap *text* into lines of at most *max_width* columns.

        Lines start at column ``p.x``. ``\\n`` forces a break, a word that
        does not fit moves to the next line, and a word wider than a whole
        line is broken at the edge. Other whitespace is written as a space and
        remaining control characters are skipped. Returns the number of rows
        used.
        """
        if not self.valid(p):
            return 0
        if max_width <= 0:
            max_width = self._width - p.x
        left = p.x
        right = min(p.x + max_width, self._width)
        height = self._height
        x, y = left, p.y
        lines = 1

        for match in _WRAP_TOKEN_RE.finditer(text):
            token = match.group()

            if token == "\n":
                x, y = left, y + 1
                if y >= height:
                    break
                lines += 1
                continue

            if token.isspace():
                # Spaces past the edge are dropped; the next word wraps
                if x < right:
                    self._put_glyph(x, y, " ", 1, style)
                    x += 1
                continue

            token_cols = string_width(token)
            if token_cols == 0:
                continue
            if x > left and x + token_cols > right:
                x, y = left, y + 1
                if y >= height:
                    break
                lines += 1

            for ch in token:
                if is_control_char(ch):
                    continue
                w = char_width(ch)
                if x + w > right and x > left:
                    x, y = left, y + 1
                    if y >= height:
                        break
                    lines += 1
                if x + w > right:
                    # Line is narrower than this glyph
                    continue
                self._put_glyph(x, y, ch, w, style)
                x += w
            if y >= height:
                break

        return min(lines, height - p.y)

    def write_buffer(self, p: Point, other: Buffer | None) -> bool:
        """Copy *other*'s cells verbatim to offset *p*, clipped to this buffer.

        Destination wide glyphs cut by the copied region are not repaired.
        Returns ``False`` only when *other* is ``None``.
        """
        if other is None:
            return False
        src_x0 = max(0, -p.x)
        src_y0 = max(0, -p.y)
        src_x1 = min(other._width, self._width - p.x)
        src_y1 = min(other._height, self._height - p.y)
        if src_x0 >= src_x1 or src_y0 >= src_y1:
            return True
        dst_x0 = p.x + src_x0
        dst_x1 = p.x + src_x1
        for sy in range(src_y0, src_y1):
            self._cells[p.y + sy][dst_x0:dst_x1] = other._cells[sy][src_x0:src_x1]
        return True

    # -- rendering ----------------------------------------------------------

    def render(self, encoder: StyleEncoder | None = None) -> str:
        """Serialize the grid to a newline-separated string with SGR codes.

        An escape sequence is emitted only where the style changes, and any
        open style is reset before each row ends. Trailing blank cells are
        left out.
        """
        if encoder is None:
            encoder = get_style_encoder()
        out = get_string_builder()
        try:
            last_row = self._height - 1
            for y, row in enumerate(self._cells):
                self._render_row(row, out, encoder)
                if y < last_row:
                    out.write("\n")
            return out.getvalue()
        finally:
            put_string_builder(out)

    def _render_row(self, row: list[Cell], out, encoder: StyleEncoder) -> None:
        end = len(row)
        while end > 0 and row[end - 1].is_blank():
            end -= 1

        open_style = ""
        x = 0
        while x < end:
            cell = row[x]
            if cell.is_continuation:
                x += 1
                continue
            if cell is BLANK:
                style_str = ""
            else:
                style_str = encoder.get(cell.style)
            if style_str != open_style:
                if open_style:
                    out.write(RESET)
                if style_str:
                    out.write(style_str)
                open_style = style_str
            out.write(cell.char)
            x += cell.width if cell.width > 0 else 1

        if open_style:
            out.write(RESET)
