"""Interval value types for sphere-tools.

This package provides the bounding-range primitives used across the
sphere-tools codebase: closed intervals on the real line and on the
unit circle.
"""

from __future__ import annotations

from .circular import CircularInterval, positive_distance
from .linear import EPSILON, LinearInterval

__all__ = ["EPSILON", "CircularInterval", "LinearInterval", "positive_distance"]
