"""Rectangle command for sphere-tools CLI.

Evaluates latitude-longitude rectangle operations.  Corners are given in
degrees as ``LAT_LO LNG_LO LAT_HI LNG_HI``; a western longitude greater
than the eastern one describes a rectangle crossing the 180 meridian.

Usage:
    sphere-tools rect info 35 -10 70 40
    sphere-tools rect contains -40 150 40 -120 0 180
    sphere-tools rect union 35 -10 70 40 -40 150 40 -120
    sphere-tools rect intersect 0 0 10 10 5 5 20 20 --format json
"""

from __future__ import annotations

import argparse
import logging
import math
from typing import Any

from sphere_tools.config import Config
from sphere_tools.exceptions import SphereToolsError
from sphere_tools.rect import HALF_PI, LatLngRect
from sphere_tools.units import degrees, get_current_formatter, radians

from .utils import check_range, output_result, parse_float, print_error

logger = logging.getLogger(__name__)

OPERATIONS = {
    "info": 0,
    "contains": 2,
    "union": 4,
    "intersect": 4,
}


def main(argv: list[str] | None = None, config: Config | None = None) -> int:
    """Main entry point for the rect command."""
    parser = argparse.ArgumentParser(
        prog="sphere-tools rect",
        description="Evaluate a latitude-longitude rectangle operation (degrees)",
    )
    parser.add_argument("operation", choices=sorted(OPERATIONS), help="Operation to evaluate")
    parser.add_argument("coords", nargs="+", help="LAT_LO LNG_LO LAT_HI LNG_HI [operands]")
    parser.add_argument(
        "--format",
        "-f",
        choices=["text", "json"],
        default=None,
        help="Output format (default: from config, else text)",
    )
    args = parser.parse_args(argv)
    if config is None:
        config = Config.load()
    output_format = args.format or config.defaults.format

    try:
        expected = 4 + OPERATIONS[args.operation]
        if len(args.coords) != expected:
            raise SphereToolsError(
                f"'{args.operation}' takes {expected} coordinates, got {len(args.coords)}",
                context={"coords": args.coords},
            )
        values = [parse_float(v, f"coordinate {i + 1}") for i, v in enumerate(args.coords)]
        _validate(values)
        rect = LatLngRect.from_degrees(*values[:4])
        rows = _run(args.operation, rect, values[4:], output_format == "json")
    except SphereToolsError as e:
        print_error(e)
        return 1

    output_result(f"rect {args.operation} {rect}", rows, output_format)
    return 0


def _validate(values: list[float]) -> None:
    lats = {f"coordinate {i + 1}": v for i, v in enumerate(values) if i % 2 == 0}
    lngs = {f"coordinate {i + 1}": v for i, v in enumerate(values) if i % 2 == 1}
    check_range(lats, 90.0, "degrees latitude")
    check_range(lngs, 180.0, "degrees longitude")


def _rect_value(rect: LatLngRect, as_json: bool) -> Any:
    if as_json:
        return {
            "lat": [degrees(rect.lat.lo), degrees(rect.lat.hi)],
            "lng": [degrees(rect.lng.lo), degrees(rect.lng.hi)],
            "text": str(rect),
        }
    return str(rect)


def _run(operation: str, rect: LatLngRect, numbers: list[float], as_json: bool) -> dict[str, Any]:
    fmt = get_current_formatter()
    logger.debug("rect %s %s %s", operation, rect, numbers)
    rows: dict[str, Any] = {"rect": _rect_value(rect, as_json)}

    if operation == "info":
        rows["valid"] = rect.is_valid()
        rows["empty"] = rect.is_empty()
        rows["full"] = rect.is_full()
        rows["point"] = rect.is_point()
        if not rect.is_empty():
            lat_span, lng_span = rect.size()
            center_lat, center_lng = rect.center()
            for key, angle in (
                ("lat_span", lat_span),
                ("lng_span", lng_span),
                ("center_lat", center_lat),
                ("center_lng", center_lng),
            ):
                # JSON carries degrees, like the rect corners
                rows[key] = degrees(angle) if as_json else fmt.format(angle)
    elif operation == "contains":
        # Degree conversion can overshoot the limits by an ulp.
        lat = max(-HALF_PI, min(HALF_PI, radians(numbers[0])))
        lng = max(-math.pi, min(math.pi, radians(numbers[1])))
        rows["contains"] = rect.contains_point(lat, lng)
        rows["interior_contains"] = rect.interior_contains_point(lat, lng)
    else:
        other = LatLngRect.from_degrees(*numbers)
        rows["other"] = _rect_value(other, as_json)
        if operation == "union":
            rows["result"] = _rect_value(rect.union(other), as_json)
        else:
            rows["result"] = _rect_value(rect.intersection(other), as_json)
        rows["intersects"] = rect.intersects(other)
        rows["contains"] = rect.contains(other)
    return rows
