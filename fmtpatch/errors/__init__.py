from .base import PatchError
from .patch import MalformedHunkHeader, OutOfRangeHunk
from .tool import DiffFailed, FormatterFailed, ReferenceUnreadable, ToolNotFound

__all__ = [
    "PatchError",
    "ToolNotFound",
    "FormatterFailed",
    "DiffFailed",
    "ReferenceUnreadable",
    "MalformedHunkHeader",
    "OutOfRangeHunk",
]
