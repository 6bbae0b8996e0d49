"""termcanvas: cell-buffer compositor and constraint layout engine for terminal UIs."""

# Geometry
from termcanvas.geometry import Area, Point, Rect, Size, ZERO_RECT, new_area

# Cells and styles
from termcanvas.cell import BLANK, Cell
from termcanvas.style import (
    RESET,
    Style,
    StyleCache,
    StyleEncoder,
    build_sgr,
    get_style_encoder,
    set_style_encoder,
)
from termcanvas.width import (
    char_width,
    is_control_char,
    is_wide_char,
    string_width,
    truncate_to_width,
)

# Buffer and pools
from termcanvas.buffer import Buffer
from termcanvas.pool import (
    BufferPool,
    StringBuilderPool,
    get_buffer,
    get_string_builder,
    put_buffer,
    put_string_builder,
)

# Configuration
from termcanvas.config import Config, get_config, set_config

# Layout
from termcanvas.layout import (
    Constraint,
    Fixed,
    FlexChild,
    GridConfig,
    Grow,
    MaxSize,
    Percent,
    Ratio,
    center_rect,
    column_layout,
    fixed_grid,
    flex_column,
    flex_row,
    get_cell,
    get_column,
    get_row,
    grid_layout,
    inset,
    pad,
    row_layout,
    span_cell,
    split_horizontal,
    split_vertical,
    uniform_grid,
)

# Components
from termcanvas.components import (
    FillComponent,
    ImagePlaceholder,
    LayoutManager,
    Renderable,
    TextComponent,
)

__all__ = [
    # Geometry
    "Area",
    "Point",
    "Rect",
    "Size",
    "ZERO_RECT",
    "new_area",
    # Cells and styles
    "BLANK",
    "Cell",
    "RESET",
    "Style",
    "StyleCache",
    "StyleEncoder",
    "build_sgr",
    "get_style_encoder",
    "set_style_encoder",
    "char_width",
    "is_control_char",
    "is_wide_char",
    "string_width",
    "truncate_to_width",
    # Buffer and pools
    "Buffer",
    "BufferPool",
    "StringBuilderPool",
    "get_buffer",
    "get_string_builder",
    "put_buffer",
    "put_string_builder",
    # Configuration
    "Config",
    "get_config",
    "set_config",
    # Layout
    "Constraint",
    "Fixed",
    "FlexChild",
    "GridConfig",
    "Grow",
    "MaxSize",
    "Percent",
    "Ratio",
    "center_rect",
    "column_layout",
    "fixed_grid",
    "flex_column",
    "flex_row",
    "get_cell",
    "get_column",
    "get_row",
    "grid_layout",
    "inset",
    "pad",
    "row_layout",
    "span_cell",
    "split_horizontal",
    "split_vertical",
    "uniform_grid",
    # Components
    "FillComponent",
    "ImagePlaceholder",
    "LayoutManager",
    "Renderable",
    "TextComponent",
]
