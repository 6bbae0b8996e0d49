"""Cell styles and their SGR escape encoding.

A ``Style`` is an immutable value. Encoding one into an escape sequence is
done through a ``StyleEncoder``; the default encoder is a process-wide
``StyleCache`` that builds each distinct style's sequence once.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import Protocol

logger = logging.getLogger(__name__)

RESET = "\x1b[0m"


@dataclass(frozen=True)
class Style:
    """Visual attributes of a cell.

    ``foreground`` and ``background`` are pre-formatted SGR parameter
    fragments supplied by the caller (for example ``"38;5;196"`` or
    ``"48;2;0;0;0"``). They are emitted as-is.
    """

    foreground: str = ""
    background: str = ""
    bold: bool = False
    italic: bool = False
    underline: bool = False
    reverse: bool = False

    def is_default(self) -> bool:
        return not (
            self.foreground
            or self.background
            or self.bold
            or self.italic
            or self.underline
            or self.reverse
        )


DEFAULT_STYLE = Style()


def build_sgr(style: Style) -> str:
    """Build the SGR sequence for *style*; the default style yields ``""``."""
    params: list[str] = []
    if style.bold:
        params.append("1")
    if style.italic:
        params.append("3")
    if style.underline:
        params.append("4")
    if style.reverse:
        params.append("7")
    if style.foreground:
        params.append(style.foreground)
    if style.background:
        params.append(style.background)
    if not params:
        return ""
    return "\x1b[" + ";".join(params) + "m"


class StyleEncoder(Protocol):
    """Turns a style into the escape sequence that opens it."""

    def get(self, style: Style) -> str:
        ...


class StyleCache:
    """Memoizing ``StyleEncoder`` keyed by the full ``Style`` value.

    Entries are never evicted. Reads go straight to the dict; inserts are
    serialized so concurrent misses for the same style store one value.
    """

    def __init__(self) -> None:
        self._cache: dict[Style, str] = {}
        self._lock = threading.Lock()

    def get(self, style: Style) -> str:
        cached = self._cache.get(style)
        if cached is not None:
            return cached

        encoded = build_sgr(style)
        with self._lock:
            cached = self._cache.setdefault(style, encoded)
        logger.debug("style cache miss: %r -> %r", style, cached)
        return cached

    def __len__(self) -> int:
        return len(self._cache)

    def __contains__(self, style: object) -> bool:
        return style in self._cache


_global_style_encoder: StyleEncoder | None = None
_init_lock = threading.Lock()


def get_style_encoder() -> StyleEncoder:
    global _global_style_encoder
    if _global_style_encoder is None:
        with _init_lock:
            if _global_style_encoder is None:
                _global_style_encoder = StyleCache()
    return _global_style_encoder


def set_style_encoder(encoder: StyleEncoder | None) -> None:
    """Install a process-wide encoder; ``None`` restores a fresh ``StyleCache``."""
    global _global_style_encoder
    with _init_lock:
        _global_style_encoder = encoder
