"""Latitude-longitude bounding rectangles.

A ``LatLngRect`` pairs a ``LinearInterval`` of latitudes with a
``CircularInterval`` of longitudes, both in radians.  Containment and
intersection of two rectangles reduce to the componentwise interval
operations, which lets region-covering code prune candidates without
exact spherical predicates.

Example::

    from sphere_tools.rect import LatLngRect

    europe = LatLngRect.from_degrees(35.0, -10.0, 70.0, 40.0)
    pacific = LatLngRect.from_degrees(-40.0, 150.0, 40.0, -120.0)  # crosses 180

    pacific.lng.is_inverted()                   # True
    europe.intersects(pacific)                  # False
    europe.union(pacific).contains(europe)      # True
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from .types import EPSILON, CircularInterval, LinearInterval
from .units import degrees, radians

__all__ = ["LatLngRect", "VALID_LAT_RANGE"]

HALF_PI = math.pi / 2

# Latitudes a valid rectangle may span.
VALID_LAT_RANGE = LinearInterval(-HALF_PI, HALF_PI)


def _clamp(angle: float, limit: float) -> float:
    # Degree conversion can overshoot the limit by an ulp.
    return max(-limit, min(limit, angle))


@dataclass(frozen=True)
class LatLngRect:
    """A closed latitude-longitude rectangle on the sphere.

    The rectangle is empty when its latitude interval is empty.  Longitude
    intervals may be inverted, in which case the rectangle crosses the
    180 degree meridian.

    Attributes:
        lat: Latitude range in radians, within ``[-pi/2, pi/2]``.
        lng: Longitude range in radians.
    """

    lat: LinearInterval
    lng: CircularInterval

    @classmethod
    def empty(cls) -> LatLngRect:
        """Return the empty rectangle."""
        return cls(LinearInterval.empty(), CircularInterval.empty())

    @classmethod
    def full(cls) -> LatLngRect:
        """Return the rectangle covering the whole sphere."""
        return cls(VALID_LAT_RANGE, CircularInterval.full())

    @classmethod
    def from_point(cls, lat: float, lng: float) -> LatLngRect:
        """Create a rectangle containing the single point ``(lat, lng)``."""
        return cls(LinearInterval.from_point(lat), CircularInterval.from_point(lng))

    @classmethod
    def from_degrees(
        cls, lat_lo: float, lng_lo: float, lat_hi: float, lng_hi: float
    ) -> LatLngRect:
        """Create a rectangle from corner coordinates given in degrees.

        Coordinates are clamped to the valid latitude and longitude ranges.

        Args:
            lat_lo: Southern latitude.
            lng_lo: Western longitude.
            lat_hi: Northern latitude.
            lng_hi: Eastern longitude; may be less than *lng_lo* to cross 180.
        """
        return cls(
            LinearInterval(_clamp(radians(lat_lo), HALF_PI), _clamp(radians(lat_hi), HALF_PI)),
            CircularInterval.from_endpoints(
                _clamp(radians(lng_lo), math.pi), _clamp(radians(lng_hi), math.pi)
            ),
        )

    # ------------------------------------------------------------------
    # Predicates
    # ------------------------------------------------------------------

    def is_valid(self) -> bool:
        """Return True if the latitudes are in range and emptiness agrees."""
        return (
            abs(self.lat.lo) <= HALF_PI
            and abs(self.lat.hi) <= HALF_PI
            and self.lng.is_valid()
            and self.lat.is_empty() == self.lng.is_empty()
        )

    def is_empty(self) -> bool:
        return self.lat.is_empty()

    def is_full(self) -> bool:
        return self.lat == VALID_LAT_RANGE and self.lng.is_full()

    def is_point(self) -> bool:
        return self.lat.lo == self.lat.hi and self.lng.lo == self.lng.hi

    def lo(self) -> tuple[float, float]:
        """South-west corner as ``(lat, lng)``."""
        return (self.lat.lo, self.lng.lo)

    def hi(self) -> tuple[float, float]:
        """North-east corner as ``(lat, lng)``."""
        return (self.lat.hi, self.lng.hi)

    def center(self) -> tuple[float, float]:
        """Center as ``(lat, lng)``.  The rectangle must not be empty."""
        return (self.lat.center(), self.lng.center())

    def size(self) -> tuple[float, float]:
        """Angular extent as ``(lat_span, lng_span)``."""
        return (self.lat.length(), self.lng.length())

    def contains_point(self, lat: float, lng: float) -> bool:
        """Return True if the point ``(lat, lng)`` lies in the rectangle."""
        assert abs(lat) <= HALF_PI, f"latitude out of range: {lat}"
        return self.lat.contains(lat) and self.lng.contains(lng)

    def interior_contains_point(self, lat: float, lng: float) -> bool:
        assert abs(lat) <= HALF_PI, f"latitude out of range: {lat}"
        return self.lat.interior_contains(lat) and self.lng.interior_contains(lng)

    def contains(self, other: LatLngRect) -> bool:
        """Return True if *other* lies entirely within this rectangle."""
        return self.lat.contains_interval(other.lat) and self.lng.contains_interval(other.lng)

    def interior_contains(self, other: LatLngRect) -> bool:
        return self.lat.interior_contains_interval(
            other.lat
        ) and self.lng.interior_contains_interval(other.lng)

    def intersects(self, other: LatLngRect) -> bool:
        """Return True if the rectangles share at least one point."""
        return self.lat.intersects(other.lat) and self.lng.intersects(other.lng)

    def interior_intersects(self, other: LatLngRect) -> bool:
        return self.lat.interior_intersects(other.lat) and self.lng.interior_intersects(
            other.lng
        )

    def approx_equals(self, other: LatLngRect, max_error: float = EPSILON) -> bool:
        return self.lat.approx_equals(other.lat, max_error) and self.lng.approx_equals(
            other.lng, max_error
        )

    # ------------------------------------------------------------------
    # Set operations
    # ------------------------------------------------------------------

    def union(self, other: LatLngRect) -> LatLngRect:
        """Return the smallest rectangle containing both rectangles."""
        return LatLngRect(self.lat.union(other.lat), self.lng.union(other.lng))

    def intersection(self, other: LatLngRect) -> LatLngRect:
        """Return the smallest rectangle containing the intersection."""
        lat = self.lat.intersection(other.lat)
        lng = self.lng.intersection(other.lng)
        if lat.is_empty() or lng.is_empty():
            return LatLngRect.empty()
        return LatLngRect(lat, lng)

    def add_point(self, lat: float, lng: float) -> LatLngRect:
        """Return the rectangle expanded to include the point ``(lat, lng)``."""
        return LatLngRect(self.lat.add_point(lat), self.lng.add_point(lng))

    def expanded(self, lat_margin: float, lng_margin: float) -> LatLngRect:
        """Return the rectangle grown by the given margins on each side.

        Negative margins shrink it.  Latitudes are clamped to the valid
        range, and the result is empty if either component becomes empty.
        """
        lat = self.lat.expanded(lat_margin)
        lng = self.lng.expanded(lng_margin)
        if lat.is_empty() or lng.is_empty():
            return LatLngRect.empty()
        return LatLngRect(lat.intersection(VALID_LAT_RANGE), lng)

    def polar_closure(self) -> LatLngRect:
        """Return the rectangle with full longitude if it touches a pole."""
        if self.lat.lo == -HALF_PI or self.lat.hi == HALF_PI:
            return LatLngRect(self.lat, CircularInterval.full())
        return self

    def __str__(self) -> str:
        return (
            f"[Lo[{degrees(self.lat.lo):.7f}, {degrees(self.lng.lo):.7f}], "
            f"Hi[{degrees(self.lat.hi):.7f}, {degrees(self.lng.hi):.7f}]]"
        )
