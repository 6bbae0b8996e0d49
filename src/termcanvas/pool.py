"""Reusable buffers and string builders.

Both pools are thread-safe free lists. Objects handed back with ``put`` may
hold stale content; ``get`` always resets them before returning.
"""

from __future__ import annotations

import io
import logging
import threading
from typing import TYPE_CHECKING

from termcanvas.config import get_config

if TYPE_CHECKING:
    from termcanvas.buffer import Buffer

logger = logging.getLogger(__name__)


class BufferPool:
    """Free list of ``Buffer`` objects."""

    def __init__(self, max_size: int | None = None) -> None:
        self._max_size = max_size if max_size is not None else get_config().pool_max_size
        self._free: list[Buffer] = []
        self._lock = threading.Lock()

    def get(self, width: int, height: int) -> Buffer:
        """Return a blank buffer of exactly ``width`` x ``height``.

        Unlike ``Buffer(...)``, non-positive dimensions are not replaced by
        the default size; they clamp to zero.
        """
        from termcanvas.buffer import Buffer

        width = max(width, 0)
        height = max(height, 0)
        with self._lock:
            buf = self._free.pop() if self._free else None
        if buf is None:
            buf = Buffer._unsized()
        elif buf.width != width or buf.height != height:
            logger.debug(
                "reshaping pooled buffer %dx%d -> %dx%d",
                buf.width, buf.height, width, height,
            )
        buf._reshape(width, height)
        return buf

    def put(self, buf: Buffer | None) -> None:
        if buf is None:
            return
        with self._lock:
            if len(self._free) >= self._max_size:
                logger.debug("buffer pool full (%d), dropping %r", self._max_size, buf)
                return
            self._free.append(buf)

    def __len__(self) -> int:
        with self._lock:
            return len(self._free)


class StringBuilderPool:
    """Free list of ``io.StringIO`` builders."""

    def __init__(self, max_size: int | None = None) -> None:
        self._max_size = max_size if max_size is not None else get_config().pool_max_size
        self._free: list[io.StringIO] = []
        self._lock = threading.Lock()

    def get(self) -> io.StringIO:
        with self._lock:
            sb = self._free.pop() if self._free else None
        if sb is None:
            return io.StringIO()
        sb.seek(0)
        sb.truncate(0)
        return sb

    def put(self, sb: io.StringIO | None) -> None:
        if sb is None:
            return
        with self._lock:
            if len(self._free) < self._max_size:
                self._free.append(sb)

    def __len__(self) -> int:
        with self._lock:
            return len(self._free)


_buffer_pool: BufferPool | None = None
_string_builder_pool: StringBuilderPool | None = None
_init_lock = threading.Lock()


def get_buffer_pool() -> BufferPool:
    global _buffer_pool
    if _buffer_pool is None:
        with _init_lock:
            if _buffer_pool is None:
                _buffer_pool = BufferPool()
    return _buffer_pool


def get_string_builder_pool() -> StringBuilderPool:
    global _string_builder_pool
    if _string_builder_pool is None:
        with _init_lock:
            if _string_builder_pool is None:
                _string_builder_pool = StringBuilderPool()
    return _string_builder_pool


def get_buffer(width: int, height: int) -> Buffer:
    return get_buffer_pool().get(width, height)


def put_buffer(buf: Buffer | None) -> None:
    get_buffer_pool().put(buf)


def get_string_builder() -> io.StringIO:
    return get_string_builder_pool().get()


def put_string_builder(sb: io.StringIO | None) -> None:
    get_string_builder_pool().put(sb)
