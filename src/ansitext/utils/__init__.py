"""Shared utilities."""

from __future__ import annotations

from ansitext.utils.text import normalize_line_endings

__all__ = [
    "normalize_line_endings",
]
