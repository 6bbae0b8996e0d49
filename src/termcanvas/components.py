"""Buffer-backed components and a header/content/footer layout manager.

Components draw into a ``Buffer`` inside a given rectangle. The
``LayoutManager`` gives each named component its own pooled sub-buffer and
composites the results into one frame.
"""

from __future__ import annotations

import logging
from typing import Protocol, runtime_checkable

from termcanvas.buffer import Buffer
from termcanvas.cell import Cell
from termcanvas.geometry import Point, Rect
from termcanvas.pool import get_buffer, put_buffer
from termcanvas.style import Style
from termcanvas.width import string_width, truncate_to_width

logger = logging.getLogger(__name__)

HEADER_HEIGHT = 5
FOOTER_HEIGHT = 1


@runtime_checkable
class Renderable(Protocol):
    """Anything that can draw itself into a buffer region."""

    def render(self, buf: Buffer, rect: Rect) -> None:
        ...

    def min_size(self) -> tuple[int, int]:
        ...

    def preferred_size(self) -> tuple[int, int]:
        ...


# ---------------------------------------------------------------------------
# TextComponent
# ---------------------------------------------------------------------------


class TextComponent:
    """Multi-line text, optionally wrapped or centered."""

    def __init__(self, content: str, style: Style | None = None) -> None:
        self.content = content
        self.style = style if style is not None else Style()
        self._wrap = False
        self._center_h = False
        self._center_v = False

    def set_wrap(self, wrap: bool) -> TextComponent:
        self._wrap = wrap
        return self

    def set_center_h(self, center: bool) -> TextComponent:
        self._center_h = center
        return self

    def set_center_v(self, center: bool) -> TextComponent:
        self._center_v = center
        return self

    def render(self, buf: Buffer, rect: Rect) -> None:
        if rect.empty:
            return
        lines = self.content.split("\n")

        top = rect.y
        if self._center_v and len(lines) < rect.height:
            top += (rect.height - len(lines)) // 2

        y = top
        for line in lines:
            if y >= rect.bottom:
                break
            if self._wrap:
                y += buf.write_string_wrapped(Point(rect.x, y), rect.width, line, self.style)
                continue
            line = truncate_to_width(line, rect.width)
            x = rect.x
            if self._center_h:
                x += (rect.width - string_width(line)) // 2
            buf.write_string(Point(x, y), line, self.style)
            y += 1

    def min_size(self) -> tuple[int, int]:
        lines = self.content.split("\n")
        return max(string_width(line) for line in lines), len(lines)

    def preferred_size(self) -> tuple[int, int]:
        return self.min_size()


# ---------------------------------------------------------------------------
# FillComponent
# ---------------------------------------------------------------------------


class FillComponent:
    """Fills its whole rectangle with one character."""

    def __init__(self, char: str, style: Style | None = None) -> None:
        self.char = char
        self.style = style if style is not None else Style()

    def render(self, buf: Buffer, rect: Rect) -> None:
        if rect.empty:
            return
        buf.fill_rect(rect, self.char, self.style)

    def min_size(self) -> tuple[int, int]:
        return 1, 1

    def preferred_size(self) -> tuple[int, int]:
        return 1, 1


# ---------------------------------------------------------------------------
# ImagePlaceholder
# ---------------------------------------------------------------------------

_BORDER_STYLE = Style(foreground="38;5;245")
_LABEL_STYLE = Style(foreground="38;5;86", bold=True)


class ImagePlaceholder:
    """Boxed, dotted stand-in for an image of ``width`` x ``height`` pixels."""

    def __init__(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        self.bg_char = "·"
        self.bg_style = Style(foreground="38;5;244")

    def render(self, buf: Buffer, rect: Rect) -> None:
        if rect.empty:
            return
        buf.fill_rect(rect, self.bg_char, self.bg_style)

        x0, y0 = rect.x, rect.y
        x1, y1 = rect.right - 1, rect.bottom - 1

        for x in range(x0 + 1, x1):
            buf.set_cell(Point(x, y0), Cell("─", 1, _BORDER_STYLE))
            if y1 > y0:
                buf.set_cell(Point(x, y1), Cell("─", 1, _BORDER_STYLE))
        for y in range(y0 + 1, y1):
            buf.set_cell(Point(x0, y), Cell("│", 1, _BORDER_STYLE))
            if x1 > x0:
                buf.set_cell(Point(x1, y), Cell("│", 1, _BORDER_STYLE))

        buf.set_cell(Point(x0, y0), Cell("┌", 1, _BORDER_STYLE))
        if x1 > x0:
            buf.set_cell(Point(x1, y0), Cell("┐", 1, _BORDER_STYLE))
        if y1 > y0:
            buf.set_cell(Point(x0, y1), Cell("└", 1, _BORDER_STYLE))
        if x1 > x0 and y1 > y0:
            buf.set_cell(Point(x1, y1), Cell("┘", 1, _BORDER_STYLE))

        if rect.width > 20 and rect.height > 3:
            label = f"{self.width}x{self.height}"
            label_x = rect.x + (rect.width - len(label)) // 2
            label_y = rect.y + rect.height // 2
            buf.write_string(Point(label_x, label_y), label, _LABEL_STYLE)

    def min_size(self) -> tuple[int, int]:
        return max(self.width, 10), max(self.height, 5)

    def preferred_size(self) -> tuple[int, int]:
        return self.width, self.height


# ---------------------------------------------------------------------------
# LayoutManager
# ---------------------------------------------------------------------------


class LayoutManager:
    """Composites named components into a single frame.

    Each component is drawn into a pooled buffer the size of its layout
    rectangle, then copied into the frame at the rectangle's origin.
    Components are drawn in the order they were added.
    """

    def __init__(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        self._layouts: dict[str, Rect] = {}
        self._components: dict[str, Renderable] = {}

    def set_size(self, width: int, height: int) -> None:
        self.width = width
        self.height = height

    def add_component(self, name: str, component: Renderable) -> None:
        self._components[name] = component

    def set_layout(self, name: str, rect: Rect) -> None:
        self._layouts[name] = rect

    def layout_for(self, name: str) -> Rect | None:
        return self._layouts.get(name)

    def calculate_layout(self) -> None:
        """Header on top, footer at the bottom, content in between."""
        self.set_layout("header", Rect(0, 0, self.width, HEADER_HEIGHT))
        self.set_layout(
            "footer", Rect(0, self.height - FOOTER_HEIGHT, self.width, FOOTER_HEIGHT)
        )
        content_h = max(self.height - HEADER_HEIGHT - FOOTER_HEIGHT, 0)
        self.set_layout("content", Rect(0, HEADER_HEIGHT, self.width, content_h))

    def image_layout(self, content_height_hint: int = 0) -> None:
        """Like ``calculate_layout`` but vertically centers a shorter content area."""
        self.calculate_layout()
        space = max(self.height - HEADER_HEIGHT - FOOTER_HEIGHT, 0)
        content_h = space
        if 0 < content_height_hint < space:
            content_h = content_height_hint
        content_y = HEADER_HEIGHT + (space - content_h) // 2
        self.set_layout("content", Rect(0, content_y, self.width, content_h))

    def render(self) -> str:
        frame = get_buffer(self.width, self.height)
        try:
            for name, component in self._components.items():
                rect = self._layouts.get(name)
                if rect is None:
                    logger.debug("no layout for component %r, skipping", name)
                    continue
                sub = get_buffer(rect.width, rect.height)
                try:
                    component.render(sub, Rect(0, 0, sub.width, sub.height))
                    frame.write_buffer(rect.top_left, sub)
                finally:
                    put_buffer(sub)
            return frame.render()
        finally:
            put_buffer(frame)
