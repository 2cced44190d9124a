#!/usr/bin/env python3
"""Custom exceptions for date/time conversion and calendar operations.

All exceptions carry a `.details` dict (default `{}`) for machine-parseable error
context, so callers can inspect the offending value without parsing messages.

Every exception also subclasses ValueError, which keeps `except ValueError`
call sites working.
"""

from __future__ import annotations

from typing import Any

from chronokit.utils.loguru_setup import logger


class ChronokitError(Exception):
    """Base exception for all chronokit errors.

    Attributes:
        message: Human-readable error message.
        details: Machine-parseable error context (dict, default ``{}``).
    """

    def __init__(self, message="chronokit error occurred", *, details: dict[str, Any] | None = None) -> None:
        """Initialize ChronokitError with an error message.

        Args:
            message: Error description.
            details: Machine-parseable context (argument, value, pattern, etc.).
        """
        self.message = message
        self.details = details or {}
        super().__init__(self.message)
        logger.error(f"{type(self).__name__}: {message}")


class InvalidArgumentError(ChronokitError, ValueError):
    """Raised when a required argument is missing or fails a precondition."""

    def __init__(self, message="Invalid argument", *, details: dict[str, Any] | None = None) -> None:
        """Initialize InvalidArgumentError.

        Args:
            message: Error description.
            details: Context such as the argument name and rejected value.
        """
        super().__init__(message, details=details)


class ParseError(ChronokitError, ValueError):
    """Raised when text does not conform to the expected format pattern."""

    def __init__(self, message="Text could not be parsed", *, details: dict[str, Any] | None = None) -> None:
        """Initialize ParseError.

        Args:
            message: Error description.
            details: Context such as the text and pattern.
        """
        super().__init__(message, details=details)


class FormatError(ChronokitError, ValueError):
    """Raised when a format pattern string is malformed."""

    def __init__(self, message="Malformed format pattern", *, details: dict[str, Any] | None = None) -> None:
        """Initialize FormatError.

        Args:
            message: Error description.
            details: Context such as the pattern and offending position.
        """
        super().__init__(message, details=details)


__all__ = [
    "ChronokitError",
    "FormatError",
    "InvalidArgumentError",
    "ParseError",
]
