"""Closed intervals on the unit circle.

Provides ``CircularInterval``, an arc of the circle described by two
angles in radians.  Angles are parameterized over ``[-pi, pi]``; an
interval with ``lo > hi`` is *inverted* and wraps through the +/-pi
seam.  The point at angle pi has two representations, ``pi`` and
``-pi``; the latter is normalized to the former by
``CircularInterval.from_endpoints``.  Two sentinel encodings take
advantage of that:

- the full interval, ``[-pi, pi]``
- the empty interval, ``[pi, -pi]``

Emptiness and fullness are exact numeric identities, never approximate
conditions, so every comparison against ``2 * pi`` below is exact.

Example::

    import math
    from sphere_tools.types import CircularInterval

    seam = CircularInterval.from_endpoints(3.0, -3.0)
    seam.is_inverted()          # True
    seam.length()               # 2 * pi - 6
    seam.contains(math.pi)      # True
    seam.contains(0.0)          # False

    CircularInterval.full().union(seam)    # full
    CircularInterval.empty().union(seam)   # seam
"""

from __future__ import annotations

import math
from dataclasses import dataclass

__all__ = ["EPSILON", "CircularInterval", "positive_distance"]

PI = math.pi
TWO_PI = 2.0 * math.pi

# Noise level below which two endpoints are considered equal.  Also used
# to absorb one bit of rounding per endpoint when expanding.
EPSILON = 1e-14


def positive_distance(a: float, b: float) -> float:
    """Return the forward angular distance from *a* to *b*, in ``[0, 2*pi]``.

    Computed as ``(b + pi) - (a - pi)`` when ``b < a`` rather than
    ``b - a + 2*pi``, which loses precision near the seam.
    """
    d = b - a
    if d >= 0:
        return d
    return (b + PI) - (a - PI)


@dataclass(frozen=True)
class CircularInterval:
    """A closed arc ``[lo, hi]`` of the unit circle, angles in radians.

    The direct constructor stores the fields as given; use
    :meth:`from_endpoints` to apply the ``-pi`` to ``pi`` normalization.

    Every valid instance is exactly one of empty, full, normal
    (``lo <= hi``) or inverted (``lo > hi``, wrapping through the seam).

    Attributes:
        lo: Counter-clockwise start angle.
        hi: Counter-clockwise end angle.
    """

    lo: float
    hi: float

    # ------------------------------------------------------------------
    # Factory methods
    # ------------------------------------------------------------------

    @classmethod
    def empty(cls) -> CircularInterval:
        """Return the empty interval ``[pi, -pi]``."""
        return cls(PI, -PI)

    @classmethod
    def full(cls) -> CircularInterval:
        """Return the full interval ``[-pi, pi]``."""
        return cls(-PI, PI)

    @classmethod
    def from_endpoints(cls, lo: float, hi: float) -> CircularInterval:
        """Create an interval from two angles in ``[-pi, pi]``.

        An endpoint of ``-pi`` is rewritten to ``pi`` unless the other
        endpoint makes the pair the full or empty sentinel.  Inverted
        intervals may be created this way.
        """
        assert abs(lo) <= PI and abs(hi) <= PI, f"endpoints must lie in [-pi, pi]: {lo}, {hi}"
        new_lo = PI if lo == -PI and hi != PI else lo
        new_hi = PI if hi == -PI and lo != PI else hi
        return cls(new_lo, new_hi)

    @classmethod
    def from_point(cls, point: float) -> CircularInterval:
        """Create a single-point interval; ``-pi`` is stored as ``pi``."""
        if point == -PI:
            point = PI
        return cls(point, point)

    @classmethod
    def from_point_pair(cls, a: float, b: float) -> CircularInterval:
        """Create the minimal interval containing angles *a* and *b*.

        Of the two arcs joining the points the shorter one is chosen.
        """
        assert abs(a) <= PI and abs(b) <= PI, f"points must lie in [-pi, pi]: {a}, {b}"
        if a == -PI:
            a = PI
        if b == -PI:
            b = PI
        if positive_distance(a, b) <= PI:
            return cls(a, b)
        return cls(b, a)

    # ------------------------------------------------------------------
    # Predicates
    # ------------------------------------------------------------------

    def is_valid(self) -> bool:
        """Return True if the endpoints form a legal encoding."""
        return (
            abs(self.lo) <= PI
            and abs(self.hi) <= PI
            and not (self.lo == -PI and self.hi != PI)
            and not (self.hi == -PI and self.lo != PI)
        )

    def is_full(self) -> bool:
        """Return True for the full interval."""
        return self.hi - self.lo == TWO_PI

    def is_empty(self) -> bool:
        """Return True for the empty interval."""
        return self.lo - self.hi == TWO_PI

    def is_inverted(self) -> bool:
        """Return True if ``lo > hi``.  The empty interval is inverted too."""
        return self.lo > self.hi

    def bounds(self) -> tuple[float, float]:
        """Return the raw ``(lo, hi)`` pair."""
        return (self.lo, self.hi)

    def equals(self, other: CircularInterval) -> bool:
        """Return True if both intervals contain the same points."""
        return (self.lo == other.lo and self.hi == other.hi) or (
            self.is_empty() and other.is_empty()
        )

    def approx_equals(self, other: CircularInterval, max_error: float = EPSILON) -> bool:
        """Return True if *other* can be reached by moving each endpoint a little.

        The endpoints of the empty and full intervals are considered to be
        positioned arbitrarily, so a sufficiently short interval matches the
        empty one and a sufficiently long one matches the full one.

        Args:
            other: Interval to compare against.
            max_error: Largest allowed angular movement of each endpoint.
        """
        if self.is_empty():
            return other.length() <= 2 * max_error
        if other.is_empty():
            return self.length() <= 2 * max_error
        if self.is_full():
            return other.length() >= 2 * (PI - max_error)
        if other.is_full():
            return self.length() >= 2 * (PI - max_error)
        # The length check rejects endpoint moves that invert the interval.
        return (
            abs(math.remainder(other.lo - self.lo, TWO_PI)) <= max_error
            and abs(math.remainder(other.hi - self.hi, TWO_PI)) <= max_error
            and abs(self.length() - other.length()) <= 2 * max_error
        )

    def fast_contains(self, point: float) -> bool:
        """Return True if the interval contains *point*.

        Skips the ``-pi`` remapping of :meth:`contains`; callers must pass
        angles already in ``(-pi, pi]``.
        """
        if self.is_inverted():
            return (point >= self.lo or point <= self.hi) and not self.is_empty()
        return self.lo <= point <= self.hi

    def contains(self, point: float) -> bool:
        """Return True if the interval contains the angle *point* in ``[-pi, pi]``."""
        assert abs(point) <= PI, f"angle must lie in [-pi, pi]: {point}"
        if point == -PI:
            return self.fast_contains(PI)
        return self.fast_contains(point)

    def contains_interval(self, other: CircularInterval) -> bool:
        """Return True if *other* lies entirely within this interval."""
        if self.is_inverted():
            if other.is_inverted():
                return other.lo >= self.lo and other.hi <= self.hi
            return (other.lo >= self.lo or other.hi <= self.hi) and not self.is_empty()
        if other.is_inverted():
            return self.is_full() or other.is_empty()
        return other.lo >= self.lo and other.hi <= self.hi

    def interior_contains(self, point: float) -> bool:
        """Return True if the open interior contains the angle *point*."""
        assert abs(point) <= PI, f"angle must lie in [-pi, pi]: {point}"
        if point == -PI:
            point = PI
        if self.is_inverted():
            return point > self.lo or point < self.hi
        return (self.lo < point < self.hi) or self.is_full()

    def interior_contains_interval(self, other: CircularInterval) -> bool:
        """Return True if *other* lies within the open interior of this interval."""
        if self.is_inverted():
            if other.is_inverted():
                return (other.lo > self.lo and other.hi < self.hi) or other.is_empty()
            return other.lo > self.lo or other.hi < self.hi
        if other.is_inverted():
            return self.is_full() or other.is_empty()
        return (other.lo > self.lo and other.hi < self.hi) or self.is_full()

    def intersects(self, other: CircularInterval) -> bool:
        """Return True if the two intervals share at least one point."""
        if self.is_empty() or other.is_empty():
            return False
        if self.is_inverted():
            # Two inverted intervals both contain pi.
            return other.is_inverted() or other.lo <= self.hi or other.hi >= self.lo
        if other.is_inverted():
            return other.lo <= self.hi or other.hi >= self.lo
        return other.lo <= self.hi and other.hi >= self.lo

    def interior_intersects(self, other: CircularInterval) -> bool:
        """Return True if the interior of this interval meets *other*.

        Points on the boundary of *other* count.
        """
        if self.is_empty() or other.is_empty() or self.lo == self.hi:
            return False
        if self.is_inverted():
            return other.is_inverted() or other.lo < self.hi or other.hi > self.lo
        if other.is_inverted():
            return other.lo < self.hi or other.hi > self.lo
        return (other.lo < self.hi and other.hi > self.lo) or self.is_full()

    # ------------------------------------------------------------------
    # Measures
    # ------------------------------------------------------------------

    def center(self) -> float:
        """Midpoint of the interval.  Meaningless for full and empty intervals."""
        c = 0.5 * (self.lo + self.hi)
        if not self.is_inverted():
            return c
        if c <= 0:
            return c + PI
        return c - PI

    def length(self) -> float:
        """Length of the arc.

        Returns:
            The arc length in ``[0, 2*pi]``, or ``-1`` for the empty interval.
        """
        length = self.hi - self.lo
        if length >= 0.0:
            return length
        length += TWO_PI
        if length > 0:
            return length
        return -1.0

    def complement(self) -> CircularInterval:
        """Return the closure of the set of points not in this interval.

        The complement of a single point is the full interval; the full and
        empty intervals complement each other.
        """
        if self.lo == self.hi:
            return CircularInterval.full()
        return CircularInterval(self.hi, self.lo)

    def complement_center(self) -> float:
        """Return the midpoint of the complement without constructing it."""
        if self.lo != self.hi:
            return self.complement().center()
        if self.hi <= 0:
            return self.hi + PI
        return self.hi - PI

    def directed_hausdorff_distance(self, other: CircularInterval) -> float:
        """Largest angular distance from a point of this interval to *other*.

        Returns 0 when this interval is empty or contained in *other*, and
        pi (the largest distance on the circle) when *other* is empty.
        """
        if other.contains_interval(self):
            return 0.0
        if other.is_empty():
            return PI

        other_complement_center = other.complement_center()
        if self.contains(other_complement_center):
            return positive_distance(other.hi, other_complement_center)

        # Realized by either the two hi endpoints or the two lo endpoints.
        if CircularInterval.from_endpoints(other.hi, self.hi).contains(other_complement_center):
            hi_hi = 0.0
        else:
            hi_hi = positive_distance(other.hi, self.hi)
        if CircularInterval.from_endpoints(self.lo, other.lo).contains(other_complement_center):
            lo_lo = 0.0
        else:
            lo_lo = positive_distance(self.lo, other.lo)
        return max(hi_hi, lo_lo)

    # ------------------------------------------------------------------
    # Set operations
    # ------------------------------------------------------------------

    def union(self, other: CircularInterval) -> CircularInterval:
        """Return the smallest interval containing both intervals."""
        if other.is_empty():
            return self
        if self.fast_contains(other.lo):
            if self.fast_contains(other.hi):
                # Either other is inside self, or together they cover the circle.
                if self.contains_interval(other):
                    return self
                return CircularInterval.full()
            return CircularInterval(self.lo, other.hi)
        if self.fast_contains(other.hi):
            return CircularInterval(other.lo, self.hi)

        # Neither endpoint of other is in self: self is inside other, or disjoint.
        if self.is_empty() or other.fast_contains(self.lo):
            return other

        # Join across whichever gap between the two arcs is smaller.
        if positive_distance(other.hi, self.lo) < positive_distance(self.hi, other.lo):
            return CircularInterval(other.lo, self.hi)
        return CircularInterval(self.lo, other.hi)

    def intersection(self, other: CircularInterval) -> CircularInterval:
        """Return the smallest interval containing the common points of both."""
        if other.is_empty():
            return CircularInterval.empty()
        if self.fast_contains(other.lo):
            if self.fast_contains(other.hi):
                # Either other is inside self, or they overlap twice and the
                # shorter of the two covers both overlapping pieces.
                if other.length() < self.length():
                    return other
                return self
            return CircularInterval(other.lo, self.hi)
        if self.fast_contains(other.hi):
            return CircularInterval(self.lo, other.hi)

        # Neither endpoint of other is in self: self is inside other, or disjoint.
        if other.fast_contains(self.lo):
            return self
        return CircularInterval.empty()

    def add_point(self, point: float) -> CircularInterval:
        """Return the interval expanded by the minimum amount to contain *point*.

        Angles outside ``[-pi, pi]`` are ignored.
        """
        if abs(point) > PI:
            return self
        if point == -PI:
            point = PI
        if self.fast_contains(point):
            return self
        if self.is_empty():
            return CircularInterval(point, point)
        if positive_distance(point, self.lo) < positive_distance(self.hi, point):
            return CircularInterval(point, self.hi)
        return CircularInterval(self.lo, point)

    def expanded(self, margin: float) -> CircularInterval:
        """Return the interval grown by *margin* on each side.

        A negative margin shrinks the interval.  The result may be empty or
        full; the full interval stays full and the empty interval stays
        empty under any margin.
        """
        if margin >= 0:
            if self.is_empty():
                return self
            # Full after expansion, allowing one bit of rounding per endpoint.
            if self.length() + 2 * margin + 2 * EPSILON >= TWO_PI:
                return CircularInterval.full()
        else:
            if self.is_full():
                return self
            # Empty after shrinking, allowing one bit of rounding per endpoint.
            if self.length() + 2 * margin - 2 * EPSILON <= 0:
                return CircularInterval.empty()

        lo = math.remainder(self.lo - margin, TWO_PI)
        hi = math.remainder(self.hi + margin, TWO_PI)
        if lo <= -PI:
            return CircularInterval.from_endpoints(PI, hi)
        return CircularInterval.from_endpoints(lo, hi)

    # ------------------------------------------------------------------
    # Comparison and display
    # ------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CircularInterval):
            return NotImplemented
        return self.equals(other)

    def __hash__(self) -> int:
        if self.is_empty():
            return hash((CircularInterval, "empty"))
        return hash((self.lo, self.hi))

    def __repr__(self) -> str:
        return f"CircularInterval({self.lo}, {self.hi})"

    def __str__(self) -> str:
        return f"[{self.lo:.7f}, {self.hi:.7f}]"
