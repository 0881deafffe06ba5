"""The converted document: lines of styled runs.

A run is a rich ``Segment`` (text plus style) and a line is a textual
``Strip``, so lines can be handed directly to textual widgets.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Tuple

from rich.segment import Segment
from rich.style import Style
from rich.text import Text
from textual.strip import Strip

Run = Segment
Line = Strip


def make_run(text: str, style: Style) -> Run:
    return Segment(text, style)


@dataclass(frozen=True)
class Document:
    """Ordered lines produced by one conversion.

    Documents compare by content but are unhashable, like the ``Strip``
    lines they hold.
    """

    lines: Tuple[Line, ...] = ()

    __hash__ = None  # type: ignore[assignment]

    def __len__(self) -> int:
        return len(self.lines)

    def __iter__(self) -> Iterator[Line]:
        return iter(self.lines)

    def __getitem__(self, index: int) -> Line:
        return self.lines[index]

    @property
    def plain(self) -> str:
        """Document text without styles, lines joined by newlines."""
        return "\n".join(line.text for line in self.lines)

    def to_text(self) -> Text:
        """Build a rich ``Text`` carrying the run styles as spans."""
        text = Text(end="")
        for row, line in enumerate(self.lines):
            if row:
                text.append("\n")
            for run in line:
                text.append(run.text, run.style)
        return text
