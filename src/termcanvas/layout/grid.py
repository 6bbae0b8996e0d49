"""Grid layout: partition an area into a rows x cols matrix of cells.

Cells come back in row-major order::

    config = GridConfig(2, 3).with_col_gap(1)
    cells = grid_layout(area, config)
    # cells[0] = row 0 col 0, cells[1] = row 0 col 1, ... cells[5] = row 1 col 2

Cell extents are ``usable // cols`` and ``usable // rows``. Any remainder is
left unused at the right/bottom edge.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Sequence

from termcanvas.geometry import ZERO_RECT, Area, Rect


@dataclass(frozen=True)
class GridConfig:
    rows: int
    cols: int
    row_gap: int = 0
    col_gap: int = 0

    def with_row_gap(self, gap: int) -> GridConfig:
        return replace(self, row_gap=gap)

    def with_col_gap(self, gap: int) -> GridConfig:
        return replace(self, col_gap=gap)


def grid_layout(area: Area, config: GridConfig) -> list[Area]:
    """Return the ``rows * cols`` cells of *area*, or ``[]`` for a degenerate grid.

    When gaps leave no room for the cells themselves, every cell is
    zero-sized.
    """
    rows, cols = config.rows, config.cols
    if rows <= 0 or cols <= 0 or area.empty:
        return []

    row_gap = max(config.row_gap, 0)
    col_gap = max(config.col_gap, 0)
    usable_w = max(area.width - (cols - 1) * col_gap, 0)
    usable_h = max(area.height - (rows - 1) * row_gap, 0)
    cell_w = usable_w // cols
    cell_h = usable_h // rows

    cells: list[Area] = []
    for row in range(rows):
        y = area.y + row * (cell_h + row_gap)
        for col in range(cols):
            x = area.x + col * (cell_w + col_gap)
            if cell_w and cell_h:
                cells.append(Rect(x, y, cell_w, cell_h))
            else:
                cells.append(ZERO_RECT)
    return cells


def get_cell(cells: Sequence[Area], config: GridConfig, row: int, col: int) -> Area:
    """The cell at (*row*, *col*), or the zero rect when out of range."""
    if not (0 <= row < config.rows and 0 <= col < config.cols):
        return ZERO_RECT
    index = row * config.cols + col
    if index >= len(cells):
        return ZERO_RECT
    return cells[index]


def get_row(cells: Sequence[Area], config: GridConfig, row: int) -> list[Area]:
    if not 0 <= row < config.rows:
        return []
    start = row * config.cols
    return list(cells[start:start + config.cols])


def get_column(cells: Sequence[Area], config: GridConfig, col: int) -> list[Area]:
    if not 0 <= col < config.cols:
        return []
    return [
        cells[index]
        for index in range(col, config.rows * config.cols, config.cols)
        if index < len(cells)
    ]


def span_cell(
    cells: Sequence[Area],
    config: GridConfig,
    row: int,
    col: int,
    col_span: int,
    row_span: int,
) -> Area:
    """Area covering *col_span* columns by *row_span* rows from (*row*, *col*).

    The span runs from the start cell's top-left corner to the bottom-right
    corner of the last covered cell, so it includes the gaps in between.
    Spans running past the grid are clipped to its last row/column.
    """
    if col_span <= 0 or row_span <= 0:
        return ZERO_RECT
    start = get_cell(cells, config, row, col)
    if start.empty:
        return ZERO_RECT
    end_row = min(row + row_span - 1, config.rows - 1)
    end_col = min(col + col_span - 1, config.cols - 1)
    end = get_cell(cells, config, end_row, end_col)
    if end.empty:
        return ZERO_RECT
    return Rect(start.x, start.y, end.right - start.x, end.bottom - start.y)


def fixed_grid(area: Area, cell_width: int, cell_height: int) -> list[Area]:
    """Tile *area* with as many whole ``cell_width`` x ``cell_height`` cells as fit."""
    if area.empty or cell_width <= 0 or cell_height <= 0:
        return []
    rows = area.height // cell_height
    cols = area.width // cell_width
    return [
        Rect(area.x + col * cell_width, area.y + row * cell_height, cell_width, cell_height)
        for row in range(rows)
        for col in range(cols)
    ]


def uniform_grid(area: Area, rows: int, cols: int) -> list[Area]:
    return grid_layout(area, GridConfig(rows, cols))
