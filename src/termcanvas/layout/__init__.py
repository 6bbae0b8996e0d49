"""Constraint-based layout: splits, flex rows/columns and grids.

Every function here is pure; results are new ``Area`` values.
"""

from termcanvas.layout.constraints import (
    Constraint,
    Fixed,
    Grow,
    MaxSize,
    Percent,
    Ratio,
)
from termcanvas.layout.flex import (
    FlexChild,
    column_layout,
    flex_column,
    flex_row,
    row_layout,
)
from termcanvas.layout.grid import (
    GridConfig,
    fixed_grid,
    get_cell,
    get_column,
    get_row,
    grid_layout,
    span_cell,
    uniform_grid,
)
from termcanvas.layout.split import (
    Padding,
    bottom_center_rect,
    bottom_left_rect,
    bottom_right_rect,
    center_rect,
    horizontal_padding,
    inset,
    left_center_rect,
    pad,
    padding,
    right_center_rect,
    split_horizontal,
    split_vertical,
    top_center_rect,
    top_left_rect,
    top_right_rect,
    vertical_padding,
)

__all__ = [
    # Constraints
    "Constraint",
    "Fixed",
    "Grow",
    "MaxSize",
    "Percent",
    "Ratio",
    # Flex
    "FlexChild",
    "column_layout",
    "flex_column",
    "flex_row",
    "row_layout",
    # Grid
    "GridConfig",
    "fixed_grid",
    "get_cell",
    "get_column",
    "get_row",
    "grid_layout",
    "span_cell",
    "uniform_grid",
    # Split and transforms
    "Padding",
    "bottom_center_rect",
    "bottom_left_rect",
    "bottom_right_rect",
    "center_rect",
    "horizontal_padding",
    "inset",
    "left_center_rect",
    "pad",
    "padding",
    "right_center_rect",
    "split_horizontal",
    "split_vertical",
    "top_center_rect",
    "top_left_rect",
    "top_right_rect",
    "vertical_padding",
]
