"""Exceptions raised while parsing and loading themes."""

from __future__ import annotations

from pathlib import Path


class ThemeError(Exception):
    """Base class for theme errors."""


class InvalidColorSyntax(ThemeError, ValueError):
    """Raised when a string is not a valid color."""

    def __init__(self, value: object) -> None:
        """Initialize the error.

        Args:
            value: The raw value that failed to parse.
        """
        self.value = value
        super().__init__(f"Invalid color: {value!r}")


class InvalidFieldValue(ThemeError, ValueError):
    """Raised when a non-color field holds a value outside its domain."""

    def __init__(self, field: str, value: object, expected: str) -> None:
        """Initialize the error.

        Args:
            field: Name of the offending field.
            value: The raw value found in the theme.
            expected: Human readable description of the accepted values.
        """
        self.field = field
        self.value = value
        self.expected = expected
        super().__init__(f"Invalid value for {field!r}: {value!r} (expected {expected})")


class ThemeFileError(ThemeError):
    """Raised when a theme file cannot be read or decoded."""

    def __init__(self, path: Path, reason: str) -> None:
        """Initialize the error.

        Args:
            path: The theme file that failed to load.
            reason: What went wrong while reading or decoding it.
        """
        self.path = path
        self.reason = reason
        super().__init__(f"{path}: {reason}")
