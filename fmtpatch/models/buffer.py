"""Line-addressable buffers the patch engine mutates."""
from __future__ import annotations

from typing import Iterable, List, Optional, Protocol, Sequence, runtime_checkable

from ..utils.text import join_lines, split_lines


@runtime_checkable
class LineAddressableBuffer(Protocol):
    """
    Minimal capability the engine needs from a host buffer.

    Lines carry their own terminator ("foo\\n"), so joining them reproduces the
    text exactly. The point set by `seek_to_line` is where the next insert or
    delete happens.
    """

    def line_count(self) -> int: ...

    def seek_to_line(self, index: int) -> None: ...

    def insert_lines(self, lines: Sequence[str]) -> None: ...

    def delete_lines(self, count: int) -> None: ...

    def get_lines(self) -> List[str]: ...


class LineBuffer:
    """In-memory buffer backed by a plain list of lines."""

    def __init__(self, lines: Optional[Iterable[str]] = None):
        self.lines: List[str] = list(lines or [])
        self.point = 0
        # Bumped on every mutation; untouched buffers keep their version.
        self.version = 0

    @classmethod
    def from_text(cls, text: str) -> "LineBuffer":
        return cls(split_lines(text))

    def text(self) -> str:
        return join_lines(self.lines)

    def line_count(self) -> int:
        return len(self.lines)

    def get_lines(self) -> List[str]:
        return list(self.lines)

    def seek_to_line(self, index: int) -> None:
        if not 0 <= index <= len(self.lines):
            raise IndexError(f"line index {index} outside 0..{len(self.lines)}")
        self.point = index

    def insert_lines(self, lines: Sequence[str]) -> None:
        if not lines:
            return
        self.lines[self.point:self.point] = list(lines)
        self.point += len(lines)
        self.version += 1

    def delete_lines(self, count: int) -> None:
        if count < 0:
            raise ValueError("count must be non-negative")
        if self.point + count > len(self.lines):
            raise IndexError(
                f"cannot delete {count} lines at {self.point}; buffer has {len(self.lines)}"
            )
        if count == 0:
            return
        del self.lines[self.point:self.point + count]
        self.version += 1

    def __repr__(self) -> str:
        return f"{type(self).__name__}(lines={len(self.lines)}, version={self.version})"


class FileBuffer(LineBuffer):
    """A LineBuffer loaded from disk that can write itself back."""

    def __init__(self, path: str, lines: Optional[Iterable[str]] = None, encoding: str = "utf-8"):
        super().__init__(lines)
        self.path = path
        self.encoding = encoding
        self._saved_version = self.version

    @classmethod
    def from_path(cls, path: str, encoding: str = "utf-8") -> "FileBuffer":
        # newline="" keeps CRLF and a missing final newline intact
        with open(path, "r", encoding=encoding, newline="") as f:
            return cls(path, split_lines(f.read()), encoding=encoding)

    @property
    def modified(self) -> bool:
        return self.version != self._saved_version

    def save(self) -> None:
        with open(self.path, "w", encoding=self.encoding, newline="") as f:
            f.write(self.text())
        self._saved_version = self.version
