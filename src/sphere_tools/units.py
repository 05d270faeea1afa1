"""
Angle units for sphere-tools.

Provides the radian/degree conversion constants shared by every module,
angle normalization, and configurable angle display (radians vs degrees)
for CLI output.  Supports layered configuration:
CLI flag > Environment variable > Config file > Default (radians).

All internal angles in sphere-tools are stored in radians.
"""

from __future__ import annotations

import math
import os
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .config import Config
    from .types import CircularInterval, LinearInterval

__all__ = [
    "AngleUnit",
    "AngleFormatter",
    "RADIANS_PER_DEGREE",
    "DEGREES_PER_RADIAN",
    "degrees",
    "radians",
    "normalize_angle",
    "get_angle_formatter",
    "format_angle",
    "format_interval",
]

# Conversion constants
RADIANS_PER_DEGREE = math.pi / 180.0
DEGREES_PER_RADIAN = 180.0 / math.pi

# Environment variable for unit preference
UNITS_ENV_VAR = "SPHERE_TOOLS_ANGLE_UNITS"

DEFAULT_PRECISION = 7


def degrees(angle_rad: float) -> float:
    """Convert radians to degrees."""
    return angle_rad * DEGREES_PER_RADIAN


def radians(angle_deg: float) -> float:
    """Convert degrees to radians."""
    return angle_deg * RADIANS_PER_DEGREE


def normalize_angle(angle_rad: float) -> float:
    """Return the equivalent angle in ``[0, 2*pi)``."""
    rad = math.fmod(angle_rad, 2.0 * math.pi)
    if rad < 0.0:
        rad += 2.0 * math.pi
    return rad


class AngleUnit(Enum):
    """Angle unit for display output."""

    RADIANS = "radians"
    DEGREES = "degrees"

    @classmethod
    def from_string(cls, value: str | None) -> AngleUnit | None:
        """Parse an angle unit from a string value.

        Args:
            value: String like "rad", "radians", "deg", "degrees", or None

        Returns:
            AngleUnit or None if value is None or invalid
        """
        if value is None:
            return None
        value = value.lower().strip()
        if value in ("rad", "radian", "radians"):
            return cls.RADIANS
        if value in ("deg", "degree", "degrees"):
            return cls.DEGREES
        return None


@dataclass
class AngleFormatter:
    """Formatter for angles with a configurable display unit.

    The default (radians, 7 decimals) reproduces the canonical
    ``"[%.7f, %.7f]"`` interval rendering.

    Examples:
        >>> fmt = AngleFormatter(AngleUnit.RADIANS)
        >>> fmt.format(1.5)
        '1.5000000'

        >>> fmt = AngleFormatter(AngleUnit.DEGREES, precision=2)
        >>> fmt.format(math.pi, include_unit=True)
        '180.00 deg'
    """

    unit: AngleUnit = AngleUnit.RADIANS
    precision: int = DEFAULT_PRECISION

    def format(self, angle_rad: float, include_unit: bool = False) -> str:
        """Format a radian value in the configured unit.

        Args:
            angle_rad: Angle in radians
            include_unit: Whether to append a unit suffix (default: False)
        """
        value = self.convert_to_display(angle_rad)
        text = f"{value:.{self.precision}f}"
        if include_unit:
            return f"{text} {self.unit_suffix}"
        return text

    def format_interval(self, interval: LinearInterval | CircularInterval) -> str:
        """Format an interval as ``[lo, hi]`` from its raw fields.

        Sentinel encodings (empty, full) are shown as stored, not as words.
        """
        return f"[{self.format(interval.lo)}, {self.format(interval.hi)}]"

    @property
    def unit_suffix(self) -> str:
        """Short unit suffix for this formatter."""
        return "deg" if self.unit == AngleUnit.DEGREES else "rad"

    def convert_to_display(self, angle_rad: float) -> float:
        """Convert a radian value to the display unit."""
        if self.unit == AngleUnit.DEGREES:
            return degrees(angle_rad)
        return angle_rad

    def convert_from_display(self, value: float) -> float:
        """Convert a display unit value back to radians."""
        if self.unit == AngleUnit.DEGREES:
            return radians(value)
        return value


# Global formatter instance (set by CLI initialization)
_current_formatter: AngleFormatter | None = None


def get_angle_formatter(
    cli_units: str | None = None,
    config: Config | None = None,
) -> AngleFormatter:
    """Get an angle formatter based on precedence: CLI > env > config > default.

    Args:
        cli_units: Angle unit from CLI flag (highest priority)
        config: Config object to read display.angle_units from

    Returns:
        Configured AngleFormatter instance
    """
    # Priority 1: CLI argument
    unit = AngleUnit.from_string(cli_units)

    # Priority 2: Environment variable
    if unit is None:
        unit = AngleUnit.from_string(os.environ.get(UNITS_ENV_VAR))

    # Priority 3: Config file
    if unit is None and config is not None:
        unit = AngleUnit.from_string(config.display.angle_units)

    # Priority 4: Default to radians
    if unit is None:
        unit = AngleUnit.RADIANS

    precision = DEFAULT_PRECISION
    if config is not None:
        precision = config.display.precision

    return AngleFormatter(unit=unit, precision=precision)


def set_current_formatter(formatter: AngleFormatter) -> None:
    """Set the global angle formatter for the current session."""
    global _current_formatter
    _current_formatter = formatter


def get_current_formatter() -> AngleFormatter:
    """Get the current global angle formatter, or a default radian formatter."""
    if _current_formatter is None:
        return AngleFormatter()
    return _current_formatter


def format_angle(angle_rad: float, include_unit: bool = False) -> str:
    """Format an angle using the current formatter."""
    return get_current_formatter().format(angle_rad, include_unit)


def format_interval(interval: LinearInterval | CircularInterval) -> str:
    """Format an interval using the current formatter."""
    return get_current_formatter().format_interval(interval)
