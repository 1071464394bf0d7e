from .buffer import FileBuffer, LineAddressableBuffer, LineBuffer
from .hunk import Add, Delete, Hunk
from .span import LineSpan

__all__ = [
    "Add",
    "Delete",
    "Hunk",
    "LineSpan",
    "LineAddressableBuffer",
    "LineBuffer",
    "FileBuffer",
]
