"""Errors raised by the column pipeline before any output is produced."""
from __future__ import annotations

from typing import Any


class ColkitError(ValueError):
    """Base class; ``value`` holds the offending input."""

    def __init__(self, message: str, value: Any = None):
        super().__init__(message)
        self.value = value


class InvalidPattern(ColkitError):
    pass


class MissingHeaderForTitleColumn(ColkitError):
    pass


class InvalidColumnSelector(ColkitError):
    pass


class ConfigurationError(ColkitError):
    pass
