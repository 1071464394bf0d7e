from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Union


@dataclass(frozen=True)
class Add:
    """Insert `lines` immediately after original line `at` (0 means the top)."""

    at: int
    count: int
    lines: List[str] = field(default_factory=list)

    def __str__(self) -> str:
        return f"a{self.at} {self.count}"


@dataclass(frozen=True)
class Delete:
    """Remove `count` lines starting at original line `at` (1-based)."""

    at: int
    count: int

    def __str__(self) -> str:
        return f"d{self.at} {self.count}"


Hunk = Union[Add, Delete]
