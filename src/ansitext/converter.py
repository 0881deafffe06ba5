"""Conversion of ANSI-colored byte streams into styled documents.

The conversion is a single pass over the input. Literal bytes are collected
into runs; ``ESC [ params m`` sequences update the active style; newlines
close lines. Only SGR sequences are interpreted: any other byte inside an
escape sequence abandons the sequence.
"""

from __future__ import annotations

import logging
from typing import Iterable, Union

from rich.style import Style

from ansitext.assembler import DocumentAssembler
from ansitext.document import Document
from ansitext.sequence import ScanMode, SequenceParser
from ansitext.sgr import resolve_sgr

logger = logging.getLogger(__name__)

ESC = 0x1B
NEWLINE = 0x0A
CSI_MARKER = ord("[")
SEPARATOR = ord(";")
SGR_TERMINATOR = ord("m")
DIGIT_ZERO = ord("0")
DIGIT_NINE = ord("9")

AnsiInput = Union[bytes, bytearray, memoryview, str, Iterable[int]]


def convert(data: AnsiInput) -> Document:
    """Convert bytes containing ANSI SGR sequences into a ``Document``.

    Args:
        data: Raw bytes, or any iterable of byte values. A ``str`` is encoded
            as UTF-8 first. Iterators are consumed.

    Returns:
        The document, one line per newline plus a final line for trailing text.

    Raises:
        ParseError: A parameter is out of range or an extended color is
            missing its sub-parameters.
        DecodeError: A run of text is not valid UTF-8.

    Example:
        >>> document = convert(b"\\x1b[31mAAA")
        >>> document[0].text
        'AAA'
    """
    if isinstance(data, str):
        data = data.encode("utf-8")

    sequence = SequenceParser()
    assembler = DocumentAssembler()
    style = Style.null()
    last_byte = 0

    for byte in data:
        if not sequence.in_escape and last_byte == ESC and byte != CSI_MARKER:
            sequence.mode = ScanMode.ESCAPE

        if not sequence.in_escape and byte != NEWLINE and byte != ESC:
            assembler.accumulate(byte, style)

        elif byte == ESC:
            assembler.flush()
            sequence.begin()

        elif byte == NEWLINE:
            assembler.end_line(style)

        elif byte == SEPARATOR:
            sequence.end_parameter()

        elif DIGIT_ZERO <= byte <= DIGIT_NINE:
            sequence.push_digit(byte)

        elif byte == SGR_TERMINATOR:
            style = resolve_sgr(sequence.finish()).apply(style)

        elif byte == CSI_MARKER:
            pass

        else:
            # Not an SGR sequence: drop it, along with this byte
            logger.debug(
                "Discarding malformed escape sequence at byte 0x%02x (params %r)",
                byte,
                sequence.params,
            )
            sequence.abort()

        last_byte = byte

    document = assembler.finish(style)
    logger.debug("Converted ANSI input into %d lines", len(document))
    return document


ansi_to_document = convert
