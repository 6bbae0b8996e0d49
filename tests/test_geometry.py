from __future__ import annotations

from termcanvas.geometry import ZERO_RECT, Point, Rect, Size, new_area


class TestRect:
    def test_edges(self) -> None:
        r = Rect(2, 3, 10, 5)
        assert (r.right, r.bottom) == (12, 8)
        assert r.size == Size(10, 5)
        assert r.top_left == Point(2, 3)
        assert r.bottom_right == Point(12, 8)

    def test_tuple_round_trip(self) -> None:
        r = Rect.from_tuple((1, 2, 3, 4))
        assert r.to_tuple() == (1, 2, 3, 4)
        x, y, w, h = r
        assert (x, y, w, h) == (1, 2, 3, 4)

    def test_empty(self) -> None:
        assert ZERO_RECT.empty
        assert Rect(5, 5, 0, 3).empty
        assert Rect(0, 0, 3, -1).empty
        assert not Rect(0, 0, 1, 1).empty

    def test_contains_is_half_open(self) -> None:
        r = Rect(0, 0, 4, 2)
        assert r.contains(Point(0, 0))
        assert r.contains(Point(3, 1))
        assert not r.contains(Point(4, 1))
        assert not r.contains(Point(3, 2))

    def test_intersect(self) -> None:
        a = Rect(0, 0, 10, 10)
        b = Rect(5, 5, 10, 10)
        assert a.intersect(b) == Rect(5, 5, 5, 5)
        assert a.intersect(Rect(10, 0, 5, 5)) == ZERO_RECT

    def test_union(self) -> None:
        a = Rect(0, 0, 2, 2)
        b = Rect(5, 1, 1, 4)
        assert a.union(b) == Rect(0, 0, 6, 5)
        assert a.union(ZERO_RECT) == a
        assert ZERO_RECT.union(b) == b


class TestPointSize:
    def test_iteration(self) -> None:
        assert tuple(Point(1, 2)) == (1, 2)
        assert Size(3, 4).to_tuple() == (3, 4)

    def test_hashable(self) -> None:
        assert len({Point(1, 1), Point(1, 1), Point(2, 1)}) == 2


class TestNewArea:
    def test_from_corners(self) -> None:
        assert new_area(10, 20, 110, 70) == Rect(10, 20, 100, 50)

    def test_reversed_corners(self) -> None:
        assert new_area(110, 70, 10, 20) == Rect(10, 20, 100, 50)
