"""Escape-sequence mode tracking and parameter accumulation."""

from __future__ import annotations

import enum
from typing import List

from ansitext.errors import ParseError

# Largest parameter an unsigned machine word can address
MAX_PARAMETER = 2**64 - 1
_MAX_PARAMETER_DIGITS = len(str(MAX_PARAMETER))


class ScanMode(enum.Enum):
    """Whether the scanner is reading literal text or an escape sequence."""

    TEXT = "text"
    ESCAPE = "escape"


class SequenceParser:
    """Tracks the scan mode and collects the numeric parameters of a CSI sequence.

    Digits are buffered until a ``;`` or the ``m`` terminator closes the
    parameter; an empty parameter reads as 0.
    """

    def __init__(self) -> None:
        self.mode = ScanMode.TEXT
        self._digits = bytearray()
        self._params: List[int] = []

    @property
    def in_escape(self) -> bool:
        return self.mode is ScanMode.ESCAPE

    @property
    def params(self) -> List[int]:
        """Parameters completed so far in the current sequence."""
        return list(self._params)

    def _clear(self) -> None:
        self._digits.clear()
        self._params = []

    def begin(self) -> None:
        """Start a new sequence after an escape-introducer byte."""
        self._clear()
        self.mode = ScanMode.ESCAPE

    def push_digit(self, byte: int) -> None:
        self._digits.append(byte)

    def end_parameter(self) -> None:
        """Close the current parameter and append it to the list.

        Raises:
            ParseError: The parameter exceeds ``MAX_PARAMETER``.
        """
        digits = bytes(self._digits)
        self._digits.clear()
        if not digits:
            self._params.append(0)
            return

        stripped = digits.lstrip(b"0") or b"0"
        if len(stripped) > _MAX_PARAMETER_DIGITS or int(stripped) > MAX_PARAMETER:
            raise ParseError(f"escape parameter {digits.decode('ascii')} is out of range")
        self._params.append(int(stripped))

    def finish(self) -> List[int]:
        """Close the sequence on its terminator and return its parameters."""
        self.end_parameter()
        params = self._params
        self._clear()
        self.mode = ScanMode.TEXT
        return params

    def abort(self) -> None:
        """Discard a malformed sequence and return to text mode."""
        self._clear()
        self.mode = ScanMode.TEXT
