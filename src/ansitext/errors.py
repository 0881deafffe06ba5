"""Errors raised while converting ANSI byte streams."""

from __future__ import annotations


class AnsiConversionError(Exception):
    """Base class for fatal conversion errors."""


class ParseError(AnsiConversionError, ValueError):
    """An escape sequence carried parameters that cannot be resolved.

    Raised when a numeric parameter exceeds ``MAX_PARAMETER`` or when an
    extended color code (38/48) is missing its sub-parameters.
    """


class DecodeError(AnsiConversionError, UnicodeError):
    """Accumulated text bytes are not valid UTF-8."""

    def __init__(self, data: bytes, reason: str) -> None:
        super().__init__(f"invalid UTF-8 in text run {data!r}: {reason}")
        self.data = data
        self.reason = reason
