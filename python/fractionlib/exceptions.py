# FractionLib - Exceptions
# Copyright (c) 2025 FractionLib Contributors. All rights reserved.

"""Exception hierarchy for FractionLib.

Every error derives from FractionLibError and from the closest builtin
exception, so callers can catch either ``DivideByZeroError`` or plain
``ZeroDivisionError``.
"""

from __future__ import annotations
from typing import Optional, Any


# Format specifiers understood by Rational.__format__
SUPPORTED_FORMATS = {
    'G': "default form '(N / D)'",
    'S': "default form '(N / D)'",
    'B': "mixed form '(Q + R / D)'",
    'H': "integer part only",
}


class FractionLibError(Exception):
    """Base class for all FractionLib exceptions."""
    pass


class DivideByZeroError(FractionLibError, ZeroDivisionError):
    """Raised when an operation would produce a zero denominator."""
    pass


class InvalidArgumentError(FractionLibError, ValueError):
    """Raised for negative square-root inputs or negative step counts."""
    pass


class RationalOverflowError(FractionLibError, OverflowError):
    """Raised when a value does not fit the range of a truncating conversion."""

    def __init__(self, message: str, operand: Optional[str] = None, value: Optional[Any] = None):
        if operand:
            message = f"{message} (operand: {operand})"
        super().__init__(message)
        self.operand = operand
        self.value = value


class FractionFormatError(FractionLibError, ValueError):
    """Raised for unparsable text or an unsupported format specifier."""

    def __init__(
        self,
        message: str,
        text: Optional[str] = None,
        format_spec: Optional[str] = None,
    ):
        full_message = message
        suggestion = _get_suggestion(text, format_spec)
        if suggestion:
            full_message += f"\n  Suggestion: {suggestion}"
        super().__init__(full_message)
        self.text = text
        self.format_spec = format_spec
        self.suggestion = suggestion


def _get_suggestion(text: Optional[str], format_spec: Optional[str]) -> Optional[str]:
    """Get a helpful hint for a formatting or parsing failure."""
    if format_spec is not None:
        options = ', '.join(f"'{k}' ({v})" for k, v in SUPPORTED_FORMATS.items())
        return f"Supported format specifiers: {options}."
    if text is None:
        return None
    if '.' in text or 'e' in text.lower():
        return "Decimal and exponent notation are not accepted. Write the value as 'a/b'."
    if '/' not in text:
        return "Expected a fraction of the form 'a/b' or '(a/b)'."
    return None
