"""Interval commands for sphere-tools CLI.

Provides the ``linear`` and ``circular`` commands, which evaluate one
interval operation and print the result:

Usage:
    sphere-tools linear info 0 10
    sphere-tools linear union 0 10 -5 3
    sphere-tools linear relate 0 10 2 3 --format json
    sphere-tools circular info 3.0 -3.0
    sphere-tools circular add 170 -170 180 --degrees
    sphere-tools circular complement 0 1.5
"""

from __future__ import annotations

import argparse
import logging
import math
from typing import Any

from sphere_tools.config import Config
from sphere_tools.exceptions import SphereToolsError
from sphere_tools.types import CircularInterval, LinearInterval
from sphere_tools.units import AngleFormatter, AngleUnit, get_current_formatter, radians

from .utils import check_range, output_result, parse_float, print_error

logger = logging.getLogger(__name__)

# Number of extra operands each operation takes after LO HI
LINEAR_OPERATIONS = {
    "info": 0,
    "contains": 1,
    "add": 1,
    "clamp": 1,
    "expand": 1,
    "union": 2,
    "intersect": 2,
    "relate": 2,
}

CIRCULAR_OPERATIONS = {
    "info": 0,
    "contains": 1,
    "add": 1,
    "expand": 1,
    "complement": 0,
    "union": 2,
    "intersect": 2,
    "relate": 2,
}


def _build_parser(prog: str, operations: dict[str, int], angles: bool) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog=prog, description="Evaluate an interval operation")
    parser.add_argument("operation", choices=sorted(operations), help="Operation to evaluate")
    parser.add_argument("lo", help="Lower endpoint")
    parser.add_argument("hi", help="Upper endpoint")
    parser.add_argument("operands", nargs="*", help="Extra operands of the operation")
    parser.add_argument(
        "--format",
        "-f",
        choices=["text", "json"],
        default=None,
        help="Output format (default: from config, else text)",
    )
    if angles:
        parser.add_argument(
            "--degrees",
            action="store_true",
            help="Input angles are in degrees (default: radians)",
        )
    return parser


def _check_arity(operation: str, operands: list[str], operations: dict[str, int]) -> None:
    expected = operations[operation]
    if len(operands) != expected:
        raise SphereToolsError(
            f"'{operation}' takes {expected} operand(s) after LO HI, got {len(operands)}",
            context={"operation": operation, "operands": operands},
        )


def _linear_formatter() -> AngleFormatter:
    # Linear values are plain numbers, never converted to degrees.
    return AngleFormatter(AngleUnit.RADIANS, get_current_formatter().precision)


def _interval_value(
    interval: LinearInterval | CircularInterval, fmt: AngleFormatter, as_json: bool
) -> Any:
    text = fmt.format_interval(interval)
    if as_json:
        return {"lo": interval.lo, "hi": interval.hi, "text": text}
    return text


def _angle_value(angle: float, fmt: AngleFormatter, as_json: bool) -> Any:
    # JSON carries radians, like the interval endpoints
    return angle if as_json else fmt.format(angle)


# ----------------------------------------------------------------------
# linear
# ----------------------------------------------------------------------


def linear_main(argv: list[str] | None = None, config: Config | None = None) -> int:
    """Main entry point for the linear command."""
    parser = _build_parser("sphere-tools linear", LINEAR_OPERATIONS, angles=False)
    args = parser.parse_args(argv)
    if config is None:
        config = Config.load()
    output_format = args.format or config.defaults.format

    try:
        _check_arity(args.operation, args.operands, LINEAR_OPERATIONS)
        interval = LinearInterval(parse_float(args.lo, "lo"), parse_float(args.hi, "hi"))
        numbers = [parse_float(v, f"operand {i + 1}") for i, v in enumerate(args.operands)]
        rows = _run_linear(args.operation, interval, numbers, config, output_format == "json")
    except SphereToolsError as e:
        print_error(e)
        return 1

    output_result(f"linear {args.operation} {interval}", rows, output_format)
    return 0


def _run_linear(
    operation: str,
    interval: LinearInterval,
    numbers: list[float],
    config: Config,
    as_json: bool,
) -> dict[str, Any]:
    fmt = _linear_formatter()
    logger.debug("linear %s %r %s", operation, interval, numbers)
    rows: dict[str, Any] = {"interval": _interval_value(interval, fmt, as_json)}

    if operation == "info":
        rows["empty"] = interval.is_empty()
        rows["length"] = interval.length()
        if not interval.is_empty():
            rows["center"] = interval.center()
    elif operation == "contains":
        (point,) = numbers
        rows["contains"] = interval.contains(point)
        rows["interior_contains"] = interval.interior_contains(point)
    elif operation == "add":
        rows["result"] = _interval_value(interval.add_point(numbers[0]), fmt, as_json)
    elif operation == "clamp":
        if interval.is_empty():
            raise SphereToolsError(
                "Cannot clamp to an empty interval",
                context={"interval": str(interval)},
                suggestions=["Pass LO <= HI"],
            )
        rows["result"] = interval.clamp_point(numbers[0])
    elif operation == "expand":
        rows["result"] = _interval_value(interval.expanded(numbers[0]), fmt, as_json)
    else:
        other = LinearInterval(numbers[0], numbers[1])
        rows["other"] = _interval_value(other, fmt, as_json)
        if operation == "union":
            rows["result"] = _interval_value(interval.union(other), fmt, as_json)
        elif operation == "intersect":
            rows["result"] = _interval_value(interval.intersection(other), fmt, as_json)
        else:
            rows.update(_relations(interval, other, config.tolerance.max_error))
    return rows


# ----------------------------------------------------------------------
# circular
# ----------------------------------------------------------------------


def circular_main(argv: list[str] | None = None, config: Config | None = None) -> int:
    """Main entry point for the circular command."""
    parser = _build_parser("sphere-tools circular", CIRCULAR_OPERATIONS, angles=True)
    args = parser.parse_args(argv)
    if config is None:
        config = Config.load()
    output_format = args.format or config.defaults.format

    try:
        _check_arity(args.operation, args.operands, CIRCULAR_OPERATIONS)
        angles = {"lo": parse_float(args.lo, "lo"), "hi": parse_float(args.hi, "hi")}
        numbers = [parse_float(v, f"operand {i + 1}") for i, v in enumerate(args.operands)]
        # expand takes a margin, every other operand is an angle on the circle
        if args.operation != "expand":
            angles.update((f"operand {i + 1}", v) for i, v in enumerate(numbers))

        if args.degrees:
            check_range(angles, 180.0, "degrees")
            lo, hi = _clamp_angle(radians(angles["lo"])), _clamp_angle(radians(angles["hi"]))
            numbers = [radians(v) for v in numbers]
        else:
            check_range(angles, math.pi, "radians")
            lo, hi = angles["lo"], angles["hi"]
        if args.operation != "expand":
            numbers = [_clamp_angle(v) for v in numbers]

        interval = CircularInterval.from_endpoints(lo, hi)
        rows = _run_circular(args.operation, interval, numbers, config, output_format == "json")
    except SphereToolsError as e:
        print_error(e)
        return 1

    output_result(f"circular {args.operation} {interval}", rows, output_format)
    return 0


def _clamp_angle(angle: float) -> float:
    # Degree conversion can overshoot pi by an ulp.
    return max(-math.pi, min(math.pi, angle))


def _run_circular(
    operation: str,
    interval: CircularInterval,
    numbers: list[float],
    config: Config,
    as_json: bool,
) -> dict[str, Any]:
    fmt = get_current_formatter()
    logger.debug("circular %s %r %s", operation, interval, numbers)
    rows: dict[str, Any] = {"interval": _interval_value(interval, fmt, as_json)}

    if operation == "info":
        rows["valid"] = interval.is_valid()
        rows["empty"] = interval.is_empty()
        rows["full"] = interval.is_full()
        rows["inverted"] = interval.is_inverted() and not interval.is_empty()
        length = interval.length()
        rows["length"] = _angle_value(length, fmt, as_json) if length >= 0 else -1.0
        if not (interval.is_empty() or interval.is_full()):
            rows["center"] = _angle_value(interval.center(), fmt, as_json)
        rows["complement_center"] = _angle_value(interval.complement_center(), fmt, as_json)
    elif operation == "contains":
        (point,) = numbers
        rows["contains"] = interval.contains(point)
        rows["interior_contains"] = interval.interior_contains(point)
    elif operation == "add":
        rows["result"] = _interval_value(interval.add_point(numbers[0]), fmt, as_json)
    elif operation == "expand":
        rows["result"] = _interval_value(interval.expanded(numbers[0]), fmt, as_json)
    elif operation == "complement":
        rows["result"] = _interval_value(interval.complement(), fmt, as_json)
    else:
        other = CircularInterval.from_endpoints(numbers[0], numbers[1])
        rows["other"] = _interval_value(other, fmt, as_json)
        if operation == "union":
            rows["result"] = _interval_value(interval.union(other), fmt, as_json)
        elif operation == "intersect":
            rows["result"] = _interval_value(interval.intersection(other), fmt, as_json)
        else:
            rows.update(_relations(interval, other, config.tolerance.max_error))
    return rows


def _relations(
    interval: LinearInterval | CircularInterval,
    other: LinearInterval | CircularInterval,
    max_error: float,
) -> dict[str, Any]:
    """Every binary predicate between two intervals of the same kind."""
    distance = interval.directed_hausdorff_distance(other)
    return {
        "equals": interval.equals(other),
        "approx_equals": interval.approx_equals(other, max_error),
        "contains": interval.contains_interval(other),
        "interior_contains": interval.interior_contains_interval(other),
        "intersects": interval.intersects(other),
        "interior_intersects": interval.interior_intersects(other),
        # infinite when other is an empty linear interval
        "hausdorff_distance": distance if math.isfinite(distance) else None,
    }
