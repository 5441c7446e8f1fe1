# src/ljprobe/core/exceptions.py
"""Exception hierarchy for potential calculations."""

from typing import Optional


class LJProbeError(Exception):
    """Base class for all errors raised by ljprobe."""


class FileError(LJProbeError, OSError):
    """Structure file is missing, unreadable or has no content after the header."""


class ParseError(LJProbeError):
    """A selected ATOM/CA row holds a field that cannot be coerced."""

    def __init__(self, message: str, line_number: Optional[int] = None):
        if line_number is not None:
            message = f"Line {line_number}: {message}"
        super().__init__(message)
        self.line_number = line_number


class EmptySelectionError(LJProbeError):
    """No row of the structure file matched the ATOM + CA selection."""


class ConfigurationError(LJProbeError, ValueError):
    """Invalid potential parameters."""


class NumericDegeneracyError(LJProbeError, ArithmeticError):
    """Query point coincides with a residue position (zero distance)."""

    def __init__(self, message: str, residue_index: Optional[int] = None):
        super().__init__(message)
        self.residue_index = residue_index
