"""
sphere-tools: Interval arithmetic for spherical geometry.

This package provides the bounding-range primitives a spherical-geometry
toolkit uses to approximate regions, test containment and compute
overlaps without exact geometric predicates.

Modules:
    types: LinearInterval (real line) and CircularInterval (unit circle)
    rect: LatLngRect, a latitude interval paired with a longitude interval
    batch: numpy-vectorized containment over many points
    units: angle constants, normalization and display formatting
    config: TOML configuration loading
    cli: the `sphere-tools` / `sph` command

Quick Start::

    import math
    from sphere_tools import CircularInterval, LinearInterval, LatLngRect

    LinearInterval(0, 10).union(LinearInterval(-5, 3))    # [-5, 10]

    seam = CircularInterval.from_endpoints(3.0, -3.0)     # wraps through pi
    seam.contains(math.pi)                                # True

    rect = LatLngRect(LinearInterval(-0.5, 0.5), seam)
    rect.contains_point(0.0, -math.pi)                    # True
"""

__version__ = "0.1.0"

from sphere_tools.rect import LatLngRect
from sphere_tools.types import CircularInterval, LinearInterval, positive_distance

__all__ = [
    "__version__",
    "CircularInterval",
    "LinearInterval",
    "LatLngRect",
    "positive_distance",
]
