"""
Error Taxonomy - Fatal Conditions of a Detection Run.

Every failure the pipeline can hit maps to exactly one subclass of
SpreaderDetectorError. Each class carries a ``category`` string that the
CLI uses to pick the user-facing message from configuration.

Design Notes:
    - Errors are never retried or skipped
    - Line numbers are 1-based and refer to the offending input file
    - The underlying low-level exception is chained via ``raise ... from``
"""

from __future__ import annotations

from typing import Optional


class SpreaderDetectorError(Exception):
    """Base class for all detection errors."""

    category = "error"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class UsageError(SpreaderDetectorError):
    """Raised when the command line is invalid."""

    category = "usage"


class InputFileError(SpreaderDetectorError):
    """Raised when an input file cannot be opened or read."""

    category = "input_file"

    def __init__(self, path: str, reason: str = "cannot be opened") -> None:
        super().__init__(f"Input file {path!r} {reason}")
        self.path = path


class OutputFileError(SpreaderDetectorError):
    """Raised when the output file cannot be opened, written or closed."""

    category = "output_file"

    def __init__(self, path: str, reason: str = "cannot be written") -> None:
        super().__init__(f"Output file {path!r} {reason}")
        self.path = path


class MalformedRecordError(SpreaderDetectorError):
    """Raised when an input line does not parse into a record."""

    category = "malformed_record"

    def __init__(
        self,
        message: str,
        line_number: Optional[int] = None,
        line: Optional[str] = None,
    ) -> None:
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)
        self.line_number = line_number
        self.line = line


class ResourceExhaustedError(SpreaderDetectorError):
    """Raised when memory runs out while growing the record store."""

    category = "resource"


class UnknownIdentifierError(SpreaderDetectorError):
    """Raised when a meeting references an identifier missing from the roster."""

    category = "unknown_identifier"

    def __init__(self, identifier: int, line_number: Optional[int] = None) -> None:
        message = f"unknown person identifier {identifier}"
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)
        self.identifier = identifier
        self.line_number = line_number


class InvalidMeetingError(SpreaderDetectorError):
    """Raised when a meeting's distance or duration cannot yield a factor."""

    category = "invalid_meeting"

    def __init__(self, message: str, line_number: Optional[int] = None) -> None:
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)
        self.line_number = line_number


class StoreOrderError(SpreaderDetectorError):
    """Raised when the store is not in the ordering an operation requires."""

    category = "store_order"


class ConfigurationError(SpreaderDetectorError):
    """Raised when a configuration file is unreadable or fails validation."""

    category = "configuration"

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"Config file {path!r} {reason}")
        self.path = path
