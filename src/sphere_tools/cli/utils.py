"""Shared utilities for CLI commands."""

from __future__ import annotations

import json
import math
import sys
from typing import Any

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from sphere_tools.exceptions import ParseError, SphereToolsError, ValidationError

__all__ = [
    "parse_float",
    "check_range",
    "print_error",
    "format_error",
    "output_result",
]


def parse_float(text: str, argument: str) -> float:
    """Parse a command-line number.

    Raises:
        ParseError: If *text* is not a finite number
    """
    try:
        value = float(text)
    except ValueError as e:
        raise ParseError(
            "Expected a number", argument=argument, value=text
        ) from e
    if not math.isfinite(value):
        raise ParseError(
            "Expected a finite number",
            argument=argument,
            value=text,
            suggestions=["Use the empty/full forms of the command instead of inf or nan"],
        )
    return value


def check_range(values: dict[str, float], limit: float, unit: str) -> None:
    """Check that every named value lies in ``[-limit, limit]``.

    Raises:
        ValidationError: Listing every value that is out of range
    """
    errors = [
        f"{name} = {value} is outside [-{limit:g}, {limit:g}] {unit}"
        for name, value in values.items()
        if abs(value) > limit
    ]
    if errors:
        raise ValidationError(errors, context={"limit": limit, "unit": unit})


def format_error(e: Exception) -> str:
    """Format an exception for user-friendly display (plain text)."""
    if isinstance(e, SphereToolsError):
        return f"Error: {e}"
    return f"Error: {type(e).__name__}: {e}"


def print_error(e: Exception) -> None:
    """Print an exception to stderr."""
    print(format_error(e), file=sys.stderr)


def output_result(title: str, rows: dict[str, Any], output_format: str) -> None:
    """Print a result mapping as JSON or as a two-column table.

    Args:
        title: Table title (text output only)
        rows: Ordered property name -> value mapping
        output_format: "json" or "text"
    """
    if output_format == "json":
        print(json.dumps(rows, indent=2, allow_nan=False))
        return

    table = Table(title=escape(title), show_header=False)
    table.add_column("Property", style="dim")
    table.add_column("Value")
    for key, value in rows.items():
        if isinstance(value, bool):
            text = "[green]yes[/green]" if value else "[red]no[/red]"
        elif value is None:
            text = "[dim]n/a[/dim]"
        else:
            text = escape(str(value))
        table.add_row(key, text)

    Console().print(table)
