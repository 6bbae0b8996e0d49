"""Tests for buffer and string builder pools."""

from __future__ import annotations

import threading

from termcanvas.buffer import Buffer
from termcanvas.geometry import Point
from termcanvas.pool import (
    BufferPool,
    StringBuilderPool,
    get_buffer,
    get_buffer_pool,
    get_string_builder,
    put_buffer,
    put_string_builder,
)
from termcanvas.style import Style

from .helpers import row_text


# ---------------------------------------------------------------------------
# BufferPool
# ---------------------------------------------------------------------------


class TestBufferPool:
    def test_get_returns_requested_size(self) -> None:
        pool = BufferPool()
        buf = pool.get(7, 3)
        assert isinstance(buf, Buffer)
        assert (buf.width, buf.height) == (7, 3)

    def test_reuses_returned_buffer_and_clears_it(self) -> None:
        pool = BufferPool()
        buf = pool.get(5, 2)
        buf.write_string(Point(0, 0), "dirty", Style(bold=True))
        pool.put(buf)

        again = pool.get(5, 2)
        assert again is buf
        assert all(cell.is_blank() for row in again.rows() for cell in row)

    def test_reshapes_to_new_size(self) -> None:
        pool = BufferPool()
        buf = pool.get(10, 10)
        buf.write_string(Point(0, 0), "stale", Style())
        pool.put(buf)

        again = pool.get(3, 12)
        assert again is buf
        assert (again.width, again.height) == (3, 12)
        assert len(list(again.rows())) == 12
        assert all(len(row) == 3 for row in again.rows())
        assert row_text(again, 0) == "   "

    def test_zero_and_negative_sizes(self) -> None:
        pool = BufferPool()
        buf = pool.get(0, 5)
        assert (buf.width, buf.height) == (0, 5)
        buf = pool.get(-4, -1)
        assert (buf.width, buf.height) == (0, 0)
        assert buf.render() == ""

    def test_put_none_is_noop(self) -> None:
        pool = BufferPool()
        pool.put(None)
        assert len(pool) == 0

    def test_full_pool_drops(self) -> None:
        pool = BufferPool(max_size=2)
        bufs = [pool.get(1, 1) for _ in range(3)]
        for b in bufs:
            pool.put(b)
        assert len(pool) == 2

    def test_max_size_from_config(self) -> None:
        from termcanvas.config import Config, set_config

        set_config(Config(pool_max_size=1))
        pool = BufferPool()
        pool.put(pool.get(1, 1))
        pool.put(Buffer(1, 1))
        assert len(pool) == 1

    def test_concurrent_get_put(self) -> None:
        pool = BufferPool(max_size=4)
        errors: list[str] = []

        def worker(n: int) -> None:
            for _ in range(50):
                buf = pool.get(n + 1, 2)
                if (buf.width, buf.height) != (n + 1, 2):
                    errors.append(f"wrong size {buf!r}")
                if any(not c.is_blank() for row in buf.rows() for c in row):
                    errors.append("not cleared")
                buf.write_string(Point(0, 0), "x" * (n + 1), Style(bold=True))
                pool.put(buf)

        threads = [threading.Thread(target=worker, args=(n,)) for n in range(6)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert errors == []
        assert len(pool) <= 4


# ---------------------------------------------------------------------------
# StringBuilderPool
# ---------------------------------------------------------------------------


class TestStringBuilderPool:
    def test_reused_builder_is_empty(self) -> None:
        pool = StringBuilderPool()
        sb = pool.get()
        sb.write("leftover")
        pool.put(sb)

        again = pool.get()
        assert again is sb
        assert again.getvalue() == ""
        again.write("ab")
        assert again.getvalue() == "ab"

    def test_put_none_is_noop(self) -> None:
        pool = StringBuilderPool()
        pool.put(None)
        assert len(pool) == 0

    def test_full_pool_drops(self) -> None:
        pool = StringBuilderPool(max_size=1)
        a, b = pool.get(), pool.get()
        pool.put(a)
        pool.put(b)
        assert len(pool) == 1


# ---------------------------------------------------------------------------
# Module-level helpers
# ---------------------------------------------------------------------------


class TestGlobalPools:
    def test_buffer_helpers(self) -> None:
        buf = get_buffer(4, 4)
        assert (buf.width, buf.height) == (4, 4)
        put_buffer(buf)
        put_buffer(None)
        assert get_buffer_pool() is get_buffer_pool()

    def test_string_builder_helpers(self) -> None:
        sb = get_string_builder()
        sb.write("x")
        put_string_builder(sb)
        put_string_builder(None)
        assert get_string_builder().getvalue() == ""
