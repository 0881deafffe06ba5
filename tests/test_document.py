"""Tests for the Document container."""

import pytest
from rich.segment import Segment
from rich.style import Style
from rich.text import Span
from textual.strip import Strip

from ansitext import Document, convert


class TestDocument:
    def test_empty(self):
        document = Document()
        assert len(document) == 0
        assert document.plain == ""

    def test_indexing_and_iteration(self):
        first = Strip([Segment("a", Style.null())])
        second = Strip([])
        document = Document((first, second))
        assert document[0] == first
        assert list(document) == [first, second]

    def test_equal_by_content(self):
        assert convert(b"\x1b[31mA\nB") == convert(b"\x1b[31mA\nB")

    def test_unhashable(self):
        with pytest.raises(TypeError):
            hash(convert(b"A"))

    def test_plain(self):
        document = convert(b"\x1b[31mred\x1b[0m text\n\nend")
        assert document.plain == "red text\n\nend"


class TestToText:
    def test_spans_follow_runs(self):
        text = convert(b"\x1b[31mAAA\nBB").to_text()
        assert text.plain == "AAA\nBB"
        assert text.spans == [Span(0, 3, Style(color="red")), Span(4, 6, Style(color="red"))]

    def test_trailing_reset_leaves_no_span(self):
        text = convert(b"\x1b[31mAAA\x1b[0m\nBB").to_text()
        assert text.plain == "AAA\nBB"
        assert text.spans == []

    def test_multiple_styles_on_one_line(self):
        text = convert(b"x\x1b[1my\x1b[32mz").to_text()
        assert text.plain == "xyz"
        assert text.spans == [
            Span(1, 2, Style(bold=True)),
            Span(2, 3, Style(bold=True, color="green")),
        ]
