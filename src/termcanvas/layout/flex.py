"""Flex layout: arrange children along one axis from a list of constraints.

The algorithm:

1. Non-grow children are sized in order. Each one applies its constraint
   to the space still unclaimed and consumes what it gets.
2. Grow children split whatever is left evenly; the remainder of the
   integer division goes to the last grow child.
3. Children are placed one after another along the axis and span the
   full cross-axis extent.

Example::

    areas = row_layout(area, [
        FlexChild(Fixed(20)),
        FlexChild(Grow()).with_grow(),
        FlexChild(Fixed(10)),
    ])
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Sequence

from termcanvas.geometry import Area, Rect
from termcanvas.layout.constraints import Constraint


@dataclass(frozen=True)
class FlexChild:
    """One item in a flex sequence.

    ``shrink`` is accepted for API parity with other flex toolkits and is
    carried through ``with_*`` copies, but no layout reads it: children are
    never sized below what their constraint returns for the remaining space.
    """

    constraint: Constraint
    grow: bool = False
    shrink: bool = False

    def with_grow(self) -> FlexChild:
        return replace(self, grow=True)

    def with_shrink(self) -> FlexChild:
        return replace(self, shrink=True)


def _child_sizes(available: int, children: Sequence[FlexChild]) -> list[int]:
    sizes = [0] * len(children)
    remaining = available
    grow_indices: list[int] = []

    for i, child in enumerate(children):
        if child.grow:
            grow_indices.append(i)
            continue
        size = min(max(child.constraint.apply(remaining), 0), remaining)
        sizes[i] = size
        remaining -= size

    if grow_indices:
        share, extra = divmod(remaining, len(grow_indices))
        for i in grow_indices:
            sizes[i] = share
        sizes[grow_indices[-1]] += extra

    return sizes


def _flex_layout(area: Area, children: Sequence[FlexChild], horizontal: bool) -> list[Area]:
    if not children:
        return []

    available = max(area.width if horizontal else area.height, 0)
    sizes = _child_sizes(available, children)

    areas: list[Area] = []
    if horizontal:
        pos = area.x
        for size in sizes:
            areas.append(Rect(pos, area.y, size, area.height))
            pos += size
    else:
        pos = area.y
        for size in sizes:
            areas.append(Rect(area.x, pos, area.width, size))
            pos += size
    return areas


def row_layout(area: Area, children: Sequence[FlexChild]) -> list[Area]:
    """Lay children out left to right."""
    return _flex_layout(area, children, horizontal=True)


def column_layout(area: Area, children: Sequence[FlexChild]) -> list[Area]:
    """Lay children out top to bottom."""
    return _flex_layout(area, children, horizontal=False)


def flex_row(area: Area, *constraints: Constraint) -> list[Area]:
    """``row_layout`` with each constraint wrapped as a non-grow child."""
    return row_layout(area, [FlexChild(c) for c in constraints])


def flex_column(area: Area, *constraints: Constraint) -> list[Area]:
    """``column_layout`` with each constraint wrapped as a non-grow child."""
    return column_layout(area, [FlexChild(c) for c in constraints])
