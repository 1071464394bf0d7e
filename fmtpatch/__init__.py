from .core import (
    ALREADY_FORMATTED,
    APPLIED,
    ERROR,
    ApplyResult,
    apply_full,
    apply_region,
    format_buffer,
)
from .differ import DiffTool, LineDiffer, SequenceDiffer
from .errors import (
    DiffFailed,
    FormatterFailed,
    MalformedHunkHeader,
    OutOfRangeHunk,
    PatchError,
    ReferenceUnreadable,
    ToolNotFound,
)
from .formatter import Diagnostic, Formatter
from .models import Add, Delete, FileBuffer, LineAddressableBuffer, LineBuffer, LineSpan
from .patch import PatchState, apply_hunks, parse_rcs_patch, replace_region
from .tree import TreeSummary, format_tree

__all__ = [
    "apply_full",
    "apply_region",
    "format_buffer",
    "format_tree",
    "parse_rcs_patch",
    "apply_hunks",
    "replace_region",
    "ApplyResult",
    "APPLIED",
    "ALREADY_FORMATTED",
    "ERROR",
    "PatchState",
    "TreeSummary",
    "Add",
    "Delete",
    "LineSpan",
    "LineAddressableBuffer",
    "LineBuffer",
    "FileBuffer",
    "LineDiffer",
    "DiffTool",
    "SequenceDiffer",
    "Formatter",
    "Diagnostic",
    "PatchError",
    "ToolNotFound",
    "FormatterFailed",
    "DiffFailed",
    "MalformedHunkHeader",
    "OutOfRangeHunk",
    "ReferenceUnreadable",
]
