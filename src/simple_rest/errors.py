"""Typed exceptions for simple-rest.

All package errors inherit from RestError.
They carry structured context so callers can log them consistently.
"""

from __future__ import annotations

from typing import Any


class RestError(Exception):
    """Base exception for all simple-rest errors."""

    def __init__(self, message: str, *, context: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def __str__(self) -> str:
        if self.context:
            ctx = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
            return f"{self.message} ({ctx})"
        return self.message


class MissingArgumentError(RestError, ValueError):
    """A required argument was None.

    Raised before the client handle is touched, so a failed call
    leaves the handle exactly as it was.
    """

    def __init__(self, argument: str, *, message: str | None = None):
        super().__init__(
            message or f"Required argument '{argument}' is missing",
            context={"argument": argument},
        )
        self.argument = argument


class ConfigError(RestError):
    """Configuration could not be loaded or is inconsistent."""

    def __init__(self, message: str, *, variable: str | None = None, value: Any = None):
        context: dict[str, Any] = {}
        if variable:
            context["variable"] = variable
        if value is not None:
            # Truncate long values for readability
            str_val = str(value)
            context["value"] = str_val[:100] + "..." if len(str_val) > 100 else str_val
        super().__init__(message, context=context)
        self.variable = variable
        self.value = value


def require(value: Any, argument: str) -> None:
    """Raise MissingArgumentError if value is None."""
    if value is None:
        raise MissingArgumentError(argument)
