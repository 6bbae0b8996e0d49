"""Geometry value types: points, sizes and rectangles."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Tuple, TypeAlias


@dataclass(frozen=True)
class Point:
    x: int
    y: int

    def to_tuple(self) -> Tuple[int, int]:
        return (self.x, self.y)

    def __iter__(self) -> Iterator[int]:
        yield from (self.x, self.y)


@dataclass(frozen=True)
class Size:
    width: int
    height: int

    def to_tuple(self) -> Tuple[int, int]:
        return (self.width, self.height)

    def __iter__(self) -> Iterator[int]:
        yield from (self.width, self.height)


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle expressed as origin plus extent."""

    x: int
    y: int
    width: int
    height: int

    @staticmethod
    def from_tuple(t: Tuple[int, int, int, int]) -> Rect:
        x, y, w, h = t
        return Rect(int(x), int(y), int(w), int(h))

    def to_tuple(self) -> Tuple[int, int, int, int]:
        return (self.x, self.y, self.width, self.height)

    def __iter__(self) -> Iterator[int]:
        yield from (self.x, self.y, self.width, self.height)

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def bottom(self) -> int:
        return self.y + self.height

    @property
    def size(self) -> Size:
        return Size(self.width, self.height)

    @property
    def top_left(self) -> Point:
        return Point(self.x, self.y)

    @property
    def bottom_right(self) -> Point:
        return Point(self.right, self.bottom)

    @property
    def empty(self) -> bool:
        return self.width <= 0 or self.height <= 0

    def contains(self, p: Point) -> bool:
        return self.x <= p.x < self.right and self.y <= p.y < self.bottom

    def intersect(self, other: Rect) -> Rect:
        """Overlap of two rectangles, or the zero rect if they do not overlap."""
        x0 = max(self.x, other.x)
        y0 = max(self.y, other.y)
        x1 = min(self.right, other.right)
        y1 = min(self.bottom, other.bottom)
        if x0 >= x1 or y0 >= y1:
            return ZERO_RECT
        return Rect(x0, y0, x1 - x0, y1 - y0)

    def union(self, other: Rect) -> Rect:
        """Smallest rectangle covering both. Empty operands are ignored."""
        if self.empty:
            return other
        if other.empty:
            return self
        x0 = min(self.x, other.x)
        y0 = min(self.y, other.y)
        x1 = max(self.right, other.right)
        y1 = max(self.bottom, other.bottom)
        return Rect(x0, y0, x1 - x0, y1 - y0)


Area: TypeAlias = Rect

ZERO_RECT = Rect(0, 0, 0, 0)


def new_area(min_x: int, min_y: int, max_x: int, max_y: int) -> Area:
    """Build an area from its corners; reversed corners are swapped."""
    if max_x < min_x:
        min_x, max_x = max_x, min_x
    if max_y < min_y:
        min_y, max_y = max_y, min_y
    return Rect(min_x, min_y, max_x - min_x, max_y - min_y)


__all__ = [
    "Point",
    "Size",
    "Rect",
    "Area",
    "ZERO_RECT",
    "new_area",
]
