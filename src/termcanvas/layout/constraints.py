"""Sizing constraints: map an available extent to an allocated extent."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable


@runtime_checkable
class Constraint(Protocol):
    """A sizing rule for one axis."""

    def apply(self, available: int) -> int:
        """Return the allocation out of *available* cells."""
        ...


@dataclass(frozen=True)
class Fixed:
    """Exactly ``size`` cells, clamped to what is available."""

    size: int

    def apply(self, available: int) -> int:
        return min(max(self.size, 0), max(available, 0))


@dataclass(frozen=True)
class Percent:
    """``percent`` of the available space (0..100, truncated)."""

    percent: int

    def apply(self, available: int) -> int:
        available = max(available, 0)
        if self.percent <= 0:
            return 0
        if self.percent >= 100:
            return available
        return available * self.percent // 100


@dataclass(frozen=True)
class Ratio:
    """``numerator / denominator`` of the available space (truncated).

    A non-positive denominator allocates nothing.
    """

    numerator: int
    denominator: int

    def apply(self, available: int) -> int:
        available = max(available, 0)
        if self.denominator <= 0 or self.numerator <= 0:
            return 0
        return min(available * self.numerator // self.denominator, available)


@dataclass(frozen=True)
class Grow:
    """Everything available.

    Inside a flex layout a grow child only sees the space left after its
    siblings are sized.
    """

    def apply(self, available: int) -> int:
        return max(available, 0)


@dataclass(frozen=True)
class MaxSize:
    """At most ``max`` cells; a non-positive ``max`` means unbounded."""

    max: int

    def apply(self, available: int) -> int:
        if available <= 0:
            return 0
        if self.max <= 0:
            return available
        return min(self.max, available)
