"""
Field Parsing - Strict Conversion of Whitespace-Delimited Fields.

Shared by the people and meetings parsers. Every failure raises
MalformedRecordError tagged with the source line.
"""

from __future__ import annotations

import math
from typing import List

from spreader_detector.domain.errors import MalformedRecordError


def split_fields(line: str, expected: int, layout: str, line_number: int) -> List[str]:
    """Split ``line`` on whitespace and require exactly ``expected`` fields."""
    fields = line.split()
    if len(fields) != expected:
        raise MalformedRecordError(
            f"expected {expected} fields ({layout}), got {len(fields)}",
            line_number,
            line,
        )
    return fields


def parse_identifier(text: str, field: str, line_number: int, line: str) -> int:
    """Parse a base-10 unsigned integer."""
    if not (text.isascii() and text.isdigit()):
        raise MalformedRecordError(
            f"{field} must be a base-10 unsigned integer, got {text!r}",
            line_number,
            line,
        )
    return int(text)


def parse_number(text: str, field: str, line_number: int, line: str) -> float:
    """Parse a finite decimal number."""
    try:
        value = float(text)
    except ValueError:
        raise MalformedRecordError(
            f"{field} must be a decimal number, got {text!r}", line_number, line
        ) from None
    if not math.isfinite(value):
        raise MalformedRecordError(
            f"{field} must be finite, got {text!r}", line_number, line
        )
    return value
