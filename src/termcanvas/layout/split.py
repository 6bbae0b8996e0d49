"""Two-way splits and area transforms (centering, anchoring, padding)."""

from __future__ import annotations

from typing import Callable

from termcanvas.geometry import Area, Rect
from termcanvas.layout.constraints import Constraint


def split_vertical(area: Area, constraint: Constraint) -> tuple[Area, Area]:
    """Split *area* into a top part sized by *constraint* and the bottom remainder.

    Example::

        top, bottom = split_vertical(area, Fixed(5))
        top, bottom = split_vertical(area, Percent(30))
    """
    extent = max(area.height, 0)
    h = min(max(constraint.apply(extent), 0), extent)
    top = Rect(area.x, area.y, area.width, h)
    bottom = Rect(area.x, area.y + h, area.width, extent - h)
    return top, bottom


def split_horizontal(area: Area, constraint: Constraint) -> tuple[Area, Area]:
    """Split *area* into a left part sized by *constraint* and the right remainder."""
    extent = max(area.width, 0)
    w = min(max(constraint.apply(extent), 0), extent)
    left = Rect(area.x, area.y, w, area.height)
    right = Rect(area.x + w, area.y, extent - w, area.height)
    return left, right


# ---------------------------------------------------------------------------
# Positioned sub-rectangles
# ---------------------------------------------------------------------------


def _place(area: Area, x: int, y: int, width: int, height: int) -> Area:
    return Rect(x, y, max(width, 0), max(height, 0)).intersect(area)


def center_rect(area: Area, width: int, height: int) -> Area:
    """A ``width`` x ``height`` rectangle centered in *area*, clipped to it."""
    width = min(max(width, 0), max(area.width, 0))
    height = min(max(height, 0), max(area.height, 0))
    x = area.x + (area.width - width) // 2
    y = area.y + (area.height - height) // 2
    return Rect(x, y, width, height)


def top_left_rect(area: Area, width: int, height: int) -> Area:
    return _place(area, area.x, area.y, width, height)


def top_center_rect(area: Area, width: int, height: int) -> Area:
    x = area.x + (area.width - width) // 2
    return _place(area, x, area.y, width, height)


def top_right_rect(area: Area, width: int, height: int) -> Area:
    return _place(area, area.right - width, area.y, width, height)


def left_center_rect(area: Area, width: int, height: int) -> Area:
    y = area.y + (area.height - height) // 2
    return _place(area, area.x, y, width, height)


def right_center_rect(area: Area, width: int, height: int) -> Area:
    y = area.y + (area.height - height) // 2
    return _place(area, area.right - width, y, width, height)


def bottom_left_rect(area: Area, width: int, height: int) -> Area:
    return _place(area, area.x, area.bottom - height, width, height)


def bottom_center_rect(area: Area, width: int, height: int) -> Area:
    x = area.x + (area.width - width) // 2
    return _place(area, x, area.bottom - height, width, height)


def bottom_right_rect(area: Area, width: int, height: int) -> Area:
    return _place(area, area.right - width, area.bottom - height, width, height)


# ---------------------------------------------------------------------------
# Padding
# ---------------------------------------------------------------------------


def inset(area: Area, top: int, right: int, bottom: int, left: int) -> Area:
    """Shrink *area* by a different amount on each side.

    Over-large insets give a zero-sized area at the offset origin.
    """
    return Rect(
        area.x + left,
        area.y + top,
        max(area.width - left - right, 0),
        max(area.height - top - bottom, 0),
    )


def pad(area: Area, n: int) -> Area:
    """Shrink all four sides of *area* by *n*."""
    return inset(area, n, n, n, n)


Padding = Callable[[Area], Area]


def padding(amount: int) -> Padding:
    return lambda area: pad(area, amount)


def horizontal_padding(amount: int) -> Padding:
    return lambda area: inset(area, 0, amount, 0, amount)


def vertical_padding(amount: int) -> Padding:
    return lambda area: inset(area, amount, 0, amount, 0)


__all__ = [
    "split_vertical",
    "split_horizontal",
    "center_rect",
    "top_left_rect",
    "top_center_rect",
    "top_right_rect",
    "left_center_rect",
    "right_center_rect",
    "bottom_left_rect",
    "bottom_center_rect",
    "bottom_right_rect",
    "inset",
    "pad",
    "Padding",
    "padding",
    "horizontal_padding",
    "vertical_padding",
]
