from __future__ import annotations

from .base import PatchError


class MalformedHunkHeader(PatchError):
    """A hunk header did not match `a<N> <K>` / `d<N> <K>`, or its body was cut short."""

    kind = "MalformedHunkHeader"

    def __init__(self, line: str, lineno: int, reason: str = "invalid hunk header"):
        self.line = line
        self.lineno = lineno
        super().__init__(f"{reason} at patch line {lineno}: {line!r}")


class OutOfRangeHunk(PatchError):
    """A hunk targets lines beyond the buffer's current extent."""

    kind = "OutOfRangeHunk"

    def __init__(self, hunk, index: int, target: int, line_count: int):
        self.hunk = hunk
        self.index = index
        self.target = target
        self.line_count = line_count
        super().__init__(
            f"hunk #{index + 1} ({hunk}) targets line index {target}, "
            f"buffer has {line_count} lines"
        )
