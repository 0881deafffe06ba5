"""Builds a Document from classified text bytes."""

from __future__ import annotations

from typing import List

from rich.style import Style

from ansitext.document import Document, Line, Run, make_run
from ansitext.errors import DecodeError


class DocumentAssembler:
    """Accumulates same-style text into runs, runs into lines and lines into a document.

    Text is held in two buffers. The current run collects bytes since the last
    escape sequence; on an escape it is moved into the committed buffer without
    being finalized, so text on either side of a sequence that leaves the style
    unchanged ends up in one run. Committed text becomes a run only when a byte
    arrives under a different style, or when the line or stream ends; in the
    latter case it takes the style active at that point.
    """

    def __init__(self) -> None:
        self._current = bytearray()
        self._committed = bytearray()
        self._committed_style: Style = Style.null()
        self._runs: List[Run] = []
        self._lines: List[Line] = []

    def _finalize_committed(self, style: Style) -> None:
        if not self._committed:
            return
        data = bytes(self._committed)
        try:
            text = data.decode("utf-8")
        except UnicodeDecodeError as e:
            raise DecodeError(data, e.reason) from e
        self._runs.append(make_run(text, style))
        self._committed.clear()

    def accumulate(self, byte: int, style: Style) -> None:
        """Add a literal text byte written in *style*."""
        if not self._current:
            if self._committed and self._committed_style != style:
                self._finalize_committed(self._committed_style)
            self._committed_style = style
        self._current.append(byte)

    def flush(self) -> None:
        """Move the current run into the committed buffer."""
        if self._current:
            self._committed += self._current
            self._current.clear()

    def _take_line(self, style: Style) -> Line:
        self.flush()
        self._finalize_committed(style)
        line = Line(self._runs)
        self._runs = []
        return line

    def end_line(self, style: Style) -> None:
        """Finish the current line, giving leftover text the active *style*.

        A line without text is still recorded.
        """
        self._lines.append(self._take_line(style))

    def finish(self, style: Style) -> Document:
        """Flush trailing content in the active *style* and return the document."""
        self.flush()
        if self._committed or self._runs:
            self._lines.append(self._take_line(style))
        return Document(tuple(self._lines))
