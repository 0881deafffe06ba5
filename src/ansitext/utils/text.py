"""Utility functions and helpers for ansitext."""

from __future__ import annotations


def normalize_line_endings(data: bytes) -> bytes:
    """Convert CRLF and lone CR line endings to LF (common in PTY output)."""
    return data.replace(b"\r\n", b"\n").replace(b"\r", b"\n")
