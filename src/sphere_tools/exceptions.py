"""
Custom exception hierarchy for sphere-tools.

The interval and rectangle value types never raise: empty operands give
well-defined results and precondition violations are debug assertions.
These exceptions belong to the tooling around them (argument parsing,
input validation, configuration) and carry context and suggestions so
the CLI can print actionable messages.

Example::

    from sphere_tools.exceptions import ValidationError

    raise ValidationError(
        ["Longitude 200.0 is outside [-180, 180]"],
        context={"argument": "lng_hi"},
        suggestions=["Wrap longitudes into [-180, 180] before passing them"],
    )
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional


class SphereToolsError(Exception):
    """
    Base exception for all sphere-tools errors.

    Attributes:
        context: Dictionary of contextual information (argument, value, etc.)
        suggestions: List of actionable suggestions for fixing the error
    """

    def __init__(
        self,
        message: str,
        context: Optional[Dict[str, Any]] = None,
        suggestions: Optional[List[str]] = None,
    ):
        self.message = message
        self.context = context or {}
        self.suggestions = suggestions or []
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the error message with context and suggestions."""
        parts = [self.message]

        if self.context:
            parts.append("\n\nContext:")
            for key, value in self.context.items():
                parts.append(f"\n  {key}: {value}")

        if self.suggestions:
            parts.append("\n\nSuggestions:")
            for suggestion in self.suggestions:
                parts.append(f"\n  - {suggestion}")

        return "".join(parts)

    def __str__(self) -> str:
        return self._format_message()


class ParseError(SphereToolsError):
    """
    A command-line value could not be parsed.

    Example::

        raise ParseError(
            "Expected a number",
            argument="lo",
            value="abc",
        )
    """

    def __init__(
        self,
        message: str,
        context: Optional[Dict[str, Any]] = None,
        suggestions: Optional[List[str]] = None,
        argument: Optional[str] = None,
        value: Optional[str] = None,
    ):
        ctx = context or {}
        if argument is not None and "argument" not in ctx:
            ctx["argument"] = argument
        if value is not None and "value" not in ctx:
            ctx["value"] = value

        super().__init__(message, ctx, suggestions)


class ValidationError(SphereToolsError):
    """
    Input validation failed with one or more errors.

    Collects every problem with a set of inputs instead of stopping at the
    first one.

    Attributes:
        errors: List of individual validation error messages
    """

    def __init__(
        self,
        errors: List[str],
        context: Optional[Dict[str, Any]] = None,
        suggestions: Optional[List[str]] = None,
    ):
        self.errors = errors
        message = f"Validation failed with {len(errors)} error(s):\n"
        message += "\n".join(f"  {i + 1}. {e}" for i, e in enumerate(errors))
        super().__init__(message, context, suggestions)


class ConfigurationError(SphereToolsError):
    """
    Configuration or settings error.

    Raised when configuration is invalid, missing, or unreadable.
    """

    pass


__all__ = [
    "SphereToolsError",
    "ParseError",
    "ValidationError",
    "ConfigurationError",
]
