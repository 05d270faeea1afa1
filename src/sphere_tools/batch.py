"""Vectorized interval queries over numpy arrays.

The scalar predicates on ``LinearInterval`` and ``CircularInterval`` are
cheap, but calling them per element from Python dominates when testing
large point sets.  These helpers evaluate the same predicates with numpy
broadcasting and return boolean arrays.
"""

from __future__ import annotations

import numpy as np

from .types import CircularInterval, LinearInterval

__all__ = ["linear_contains", "circular_contains", "linear_bound"]


def linear_contains(interval: LinearInterval, values: np.ndarray) -> np.ndarray:
    """Elementwise ``interval.contains(v)`` for every value in *values*."""
    values = np.asarray(values, dtype=np.float64)
    return (values >= interval.lo) & (values <= interval.hi)


def circular_contains(interval: CircularInterval, angles: np.ndarray) -> np.ndarray:
    """Elementwise ``interval.contains(a)`` for angles in ``[-pi, pi]``.

    Angles equal to ``-pi`` are treated as ``pi``.
    """
    angles = np.asarray(angles, dtype=np.float64)
    angles = np.where(angles == -np.pi, np.pi, angles)
    if interval.is_inverted():
        if interval.is_empty():
            return np.zeros(angles.shape, dtype=bool)
        return (angles >= interval.lo) | (angles <= interval.hi)
    return (angles >= interval.lo) & (angles <= interval.hi)


def linear_bound(values: np.ndarray) -> LinearInterval:
    """Return the smallest ``LinearInterval`` containing all *values*.

    An empty array yields the empty interval.
    """
    values = np.asarray(values, dtype=np.float64)
    if values.size == 0:
        return LinearInterval.empty()
    return LinearInterval(float(values.min()), float(values.max()))
