"""Structured errors for the strings consistency check."""

from __future__ import annotations
from typing import Any


class StringsCheckError(Exception):
    """Base class for check related issues."""

    def __init__(self, message: str, *, context: dict[str, Any] | None = None):
        super().__init__(message)
        self.context = context or {}


class InvalidSearchRootError(StringsCheckError):
    """Raised when the search root is not an existing directory."""


class BaseLanguageMissingError(StringsCheckError):
    """Raised when no strings file in the base language was discovered."""


class UnreadableStringsFileError(StringsCheckError):
    """Raised when a strings file exists but cannot be read or decoded."""
