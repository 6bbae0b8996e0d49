"""The cell model: one glyph position in a buffer."""

from __future__ import annotations

from dataclasses import dataclass, field

from termcanvas.style import DEFAULT_STYLE, Style


@dataclass(frozen=True)
class Cell:
    """One grid position.

    A double-width glyph is stored as a head cell (``width=2``) followed by
    a continuation cell (``is_continuation=True``, ``width=0``, no glyph).
    """

    char: str = " "
    width: int = 1
    style: Style = field(default=DEFAULT_STYLE)
    is_continuation: bool = False

    def is_blank(self) -> bool:
        """True for the default blank: a space with the default style."""
        return (
            self.char == " "
            and not self.is_continuation
            and self.style.is_default()
        )


BLANK = Cell()


def continuation(style: Style) -> Cell:
    return Cell(char="", width=0, style=style, is_continuation=True)
