# fmtpatch/differ.py
"""
Line differs producing the RCS (`diff -n`) hunk stream the patch parser reads.

`DiffTool` shells out to an external `diff`; `SequenceDiffer` computes the same
notation in-process with difflib for hosts without one.
"""
from __future__ import annotations

import difflib
import logging
from dataclasses import dataclass
from typing import List, Protocol, Sequence, Tuple

from ._logging import resolve_logger
from .errors.tool import DiffFailed
from .models.hunk import Add, Delete, Hunk
from .patch.parser import format_rcs_patch
from .system import run_tool
from .utils.text import split_lines

__all__ = ["LineDiffer", "DiffTool", "SequenceDiffer", "rcs_hunks"]


class LineDiffer(Protocol):
    def diff(self, before_path: str, after_path: str, *, logger=None, log: bool = False) -> str:
        """Return the RCS hunk stream turning `before_path` into `after_path` ('' if equal)."""
        ...


@dataclass
class DiffTool:
    """External `diff` invoked in RCS mode."""

    executable: str = "diff"
    flags: Tuple[str, ...] = ("-n",)
    encoding: str = "utf-8"

    def diff(self, before_path: str, after_path: str, *, logger=None, log: bool = False) -> str:
        log = resolve_logger(logger=logger, enabled=log, name=__name__, level=logging.DEBUG)
        argv = [self.executable, *self.flags, before_path, after_path]
        log.debug(f"Running differ: {argv}")
        proc = run_tool(argv)
        stderr = proc.stderr.decode(self.encoding, errors="replace")
        log.debug(f"Differ exited with {proc.returncode}")

        if proc.returncode == 0:
            return ""
        if proc.returncode == 1 and proc.stdout:
            return proc.stdout.decode(self.encoding)
        raise DiffFailed(self.executable, proc.returncode, stderr)


def rcs_hunks(before: Sequence[str], after: Sequence[str]) -> List[Hunk]:
    """Compute Add/Delete hunks (original coordinates, ascending) between two line lists."""
    hunks: List[Hunk] = []
    sm = difflib.SequenceMatcher(None, list(before), list(after), autojunk=False)
    for tag, i1, i2, j1, j2 in sm.get_opcodes():
        if tag in ("replace", "delete"):
            hunks.append(Delete(at=i1 + 1, count=i2 - i1))
        if tag in ("replace", "insert"):
            hunks.append(Add(at=i2, count=j2 - j1, lines=list(after[j1:j2])))
    return hunks


@dataclass
class SequenceDiffer:
    """In-process LineDiffer built on difflib.SequenceMatcher."""

    encoding: str = "utf-8"

    def diff(self, before_path: str, after_path: str, *, logger=None, log: bool = False) -> str:
        log = resolve_logger(logger=logger, enabled=log, name=__name__, level=logging.DEBUG)
        with open(before_path, "r", encoding=self.encoding, newline="") as f:
            before = split_lines(f.read())
        with open(after_path, "r", encoding=self.encoding, newline="") as f:
            after = split_lines(f.read())
        hunks = rcs_hunks(before, after)
        log.debug(f"SequenceDiffer produced {len(hunks)} hunks")
        return format_rcs_patch(hunks)
