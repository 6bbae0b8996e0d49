"""Display-width classification for single characters.

The buffer works one code point per cell, so width is decided per
character: double-width glyphs (East Asian wide and full-width forms,
wide emoji) take two columns and everything else takes one.
"""

from __future__ import annotations

from functools import lru_cache

import wcwidth as _wcwidth


@lru_cache(maxsize=4096)
def _wide(ch: str) -> bool:
    return _wcwidth.wcwidth(ch) == 2


def char_width(ch: str) -> int:
    """Return 2 for a double-width character, else 1.

    Control and combining characters count as one column so that every
    character written to a buffer occupies at least one cell.
    """
    # Fast path: ASCII and Latin-1 are never wide
    if ord(ch) < 0x1100:
        return 1
    return 2 if _wide(ch) else 1


def is_wide_char(ch: str) -> bool:
    return char_width(ch) == 2


def is_control_char(ch: str) -> bool:
    """True for C0 and C1 control characters, including DEL.

    These never reach a buffer cell: newlines and escapes would break the
    one-line-per-row rendering.
    """
    cp = ord(ch)
    return cp < 0x20 or 0x7F <= cp <= 0x9F


def string_width(text: str) -> int:
    """Columns *text* takes once written; control characters take none."""
    return sum(char_width(ch) for ch in text if not is_control_char(ch))


def truncate_to_width(text: str, width: int) -> str:
    """Cut *text* on a character boundary so it fits in *width* columns."""
    if width <= 0:
        return ""
    used = 0
    for i, ch in enumerate(text):
        w = 0 if is_control_char(ch) else char_width(ch)
        if used + w > width:
            return text[:i]
        used += w
    return text
