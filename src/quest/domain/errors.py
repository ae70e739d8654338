"""Domain errors raised by case loading and the verdict stage."""

from __future__ import annotations


class CaseFileError(ValueError):
    """Raised when start-up case data cannot be loaded or is inconsistent."""


class InvalidAccusationError(ValueError):
    """Raised when the accused name is empty after trimming the line terminator."""
