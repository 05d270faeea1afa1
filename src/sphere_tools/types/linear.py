"""Closed intervals on the real line.

Provides ``LinearInterval``, a ``[lo, hi]`` range of floats used for
latitude bounds and any other one-dimensional extent.  Emptiness is
encoded structurally: an interval is empty whenever ``lo > hi``, so there
is no separate flag and every operation handles empty operands without
special casing at the call site.

Example::

    from sphere_tools.types import LinearInterval

    a = LinearInterval(0.0, 10.0)
    b = LinearInterval(-5.0, 3.0)

    a.union(b)                 # LinearInterval(-5.0, 10.0)
    a.intersection(b)          # LinearInterval(0.0, 3.0)
    a.contains(10.0)           # True
    a.interior_contains(10.0)  # False
    LinearInterval.empty().contains_interval(LinearInterval.empty())  # True
"""

from __future__ import annotations

import math
from dataclasses import dataclass

__all__ = ["EPSILON", "LinearInterval"]

# Noise level below which two endpoints are considered equal.
EPSILON = 1e-14


@dataclass(frozen=True)
class LinearInterval:
    """A closed interval ``[lo, hi]`` on the real line.

    A single point is represented by ``lo == hi``.  Any pair with
    ``lo > hi`` is empty; ``LinearInterval.empty()`` returns the canonical
    ``(1, 0)`` encoding but all empty encodings compare equal.

    Attributes:
        lo: Lower bound (inclusive).
        hi: Upper bound (inclusive).
    """

    lo: float
    hi: float

    # ------------------------------------------------------------------
    # Factory methods
    # ------------------------------------------------------------------

    @classmethod
    def empty(cls) -> LinearInterval:
        """Return the canonical empty interval."""
        return cls(1.0, 0.0)

    @classmethod
    def from_point(cls, point: float) -> LinearInterval:
        """Create a single-point interval ``[point, point]``."""
        return cls(point, point)

    @classmethod
    def from_point_pair(cls, a: float, b: float) -> LinearInterval:
        """Create the minimal interval containing both *a* and *b*.

        The arguments may be given in either order.
        """
        if a <= b:
            return cls(a, b)
        return cls(b, a)

    # ------------------------------------------------------------------
    # Predicates
    # ------------------------------------------------------------------

    def is_empty(self) -> bool:
        """Return True if the interval contains no points."""
        return self.lo > self.hi

    def bounds(self) -> tuple[float, float]:
        """Return the raw ``(lo, hi)`` pair."""
        return (self.lo, self.hi)

    def equals(self, other: LinearInterval) -> bool:
        """Return True if both intervals contain the same points."""
        return (self.lo == other.lo and self.hi == other.hi) or (
            self.is_empty() and other.is_empty()
        )

    def approx_equals(self, other: LinearInterval, max_error: float = EPSILON) -> bool:
        """Return True if *other* can be reached by moving each endpoint a little.

        The empty interval is considered to be positioned arbitrarily on the
        real line, so any interval no longer than ``2 * max_error`` matches it.

        Args:
            other: Interval to compare against.
            max_error: Largest allowed movement of each endpoint.
        """
        if self.is_empty():
            return other.length() <= 2 * max_error
        if other.is_empty():
            return self.length() <= 2 * max_error
        return abs(other.lo - self.lo) <= max_error and abs(other.hi - self.hi) <= max_error

    def contains(self, point: float) -> bool:
        """Return True if *point* lies within ``[lo, hi]``."""
        return self.lo <= point <= self.hi

    def contains_interval(self, other: LinearInterval) -> bool:
        """Return True if *other* lies entirely within this interval.

        The empty interval is contained by every interval.
        """
        if other.is_empty():
            return True
        return self.lo <= other.lo and other.hi <= self.hi

    def interior_contains(self, point: float) -> bool:
        """Return True if *point* lies strictly inside ``(lo, hi)``."""
        return self.lo < point < self.hi

    def interior_contains_interval(self, other: LinearInterval) -> bool:
        """Return True if *other* lies within the open interior of this interval."""
        if other.is_empty():
            return True
        return self.lo < other.lo and other.hi < self.hi

    def intersects(self, other: LinearInterval) -> bool:
        """Return True if the two closed intervals share at least one point."""
        if self.lo <= other.lo:
            # other.lo is in self, and other is not empty
            return other.lo <= self.hi and other.lo <= other.hi
        # self.lo is in other, and self is not empty
        return self.lo <= other.hi and self.lo <= self.hi

    def interior_intersects(self, other: LinearInterval) -> bool:
        """Return True if the interior of this interval meets *other*.

        Points on the boundary of *other* count, points on the boundary of
        this interval do not.
        """
        return (
            other.lo < self.hi
            and self.lo < other.hi
            and self.lo < self.hi
            and other.lo <= other.hi
        )

    # ------------------------------------------------------------------
    # Measures
    # ------------------------------------------------------------------

    def center(self) -> float:
        """Midpoint of the interval.  The interval must not be empty."""
        assert not self.is_empty(), "center() of an empty interval is undefined"
        return 0.5 * (self.lo + self.hi)

    def length(self) -> float:
        """Length ``hi - lo``.  Negative for empty intervals."""
        return self.hi - self.lo

    def directed_hausdorff_distance(self, other: LinearInterval) -> float:
        """Largest distance from a point of this interval to its nearest point in *other*."""
        if self.is_empty():
            return 0.0
        if other.is_empty():
            return math.inf
        return max(0.0, max(self.hi - other.hi, other.lo - self.lo))

    # ------------------------------------------------------------------
    # Set operations
    # ------------------------------------------------------------------

    def intersection(self, other: LinearInterval) -> LinearInterval:
        """Return the interval of points common to both intervals."""
        # Empty inputs fall out of the formula as an empty result.
        return LinearInterval(max(self.lo, other.lo), min(self.hi, other.hi))

    def union(self, other: LinearInterval) -> LinearInterval:
        """Return the smallest interval containing both intervals."""
        if self.is_empty():
            return other
        if other.is_empty():
            return self
        return LinearInterval(min(self.lo, other.lo), max(self.hi, other.hi))

    def add_point(self, point: float) -> LinearInterval:
        """Return the interval expanded by the minimum amount to contain *point*."""
        if self.is_empty():
            return LinearInterval(point, point)
        if point < self.lo:
            return LinearInterval(point, self.hi)
        if point > self.hi:
            return LinearInterval(self.lo, point)
        return self

    def clamp_point(self, point: float) -> float:
        """Return the point of the interval closest to *point*.

        The interval must not be empty.
        """
        assert not self.is_empty(), "clamp_point() on an empty interval is undefined"
        return max(self.lo, min(self.hi, point))

    def expanded(self, margin: float) -> LinearInterval:
        """Return the interval grown by *margin* on each side.

        A negative margin shrinks the interval and may leave it empty.
        Any expansion of an empty interval stays empty.
        """
        if self.is_empty():
            return self
        return LinearInterval(self.lo - margin, self.hi + margin)

    # ------------------------------------------------------------------
    # Comparison and display
    # ------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LinearInterval):
            return NotImplemented
        return self.equals(other)

    def __hash__(self) -> int:
        if self.is_empty():
            return hash((LinearInterval, "empty"))
        return hash((self.lo, self.hi))

    def __repr__(self) -> str:
        return f"LinearInterval({self.lo}, {self.hi})"

    def __str__(self) -> str:
        return f"[{self.lo:.7f}, {self.hi:.7f}]"
