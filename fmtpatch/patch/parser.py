# fmtpatch/patch/parser.py
from __future__ import annotations

import logging
import re
from typing import List

from .._logging import resolve_logger
from ..errors.patch import MalformedHunkHeader
from ..models.hunk import Add, Delete, Hunk
from ..utils.text import split_lines

__all__ = ["parse_rcs_patch", "format_rcs_patch"]

HUNK_HEADER_RE = re.compile(r"^([ad])(\d+) (\d+)$", re.ASCII)


def parse_rcs_patch(patch: str, *, logger=None, log: bool = False) -> List[Hunk]:
    """
    Parse an RCS-style (`diff -n`) hunk stream into Add/Delete hunks.

    `a<N> <K>` is followed by K body lines taken verbatim, even when they look
    like headers; `d<N> <K>` has no body. Body lines keep their newline so the
    inserted text is byte-identical to the formatter's output.

    Raises:
        MalformedHunkHeader: on any line that is not a valid header where one
            is expected, or when an add body is cut short. Nothing parsed so
            far is returned.
    """
    log = resolve_logger(logger=logger, enabled=log, name=__name__, level=logging.DEBUG)

    lines = split_lines(patch)
    hunks: List[Hunk] = []
    i = 0
    while i < len(lines):
        header = lines[i].rstrip("\n")
        m = HUNK_HEADER_RE.match(header)
        if not m:
            raise MalformedHunkHeader(header, i + 1)
        action, at, count = m.group(1), int(m.group(2)), int(m.group(3))
        if action == "a":
            body = lines[i + 1:i + 1 + count]
            if len(body) < count:
                raise MalformedHunkHeader(
                    header, i + 1, reason=f"expected {count} body lines, got {len(body)}"
                )
            hunks.append(Add(at=at, count=count, lines=body))
            i += 1 + count
        else:
            hunks.append(Delete(at=at, count=count))
            i += 1

    log.debug(f"Parsed {len(hunks)} hunks from {len(lines)} patch lines")
    return hunks


def format_rcs_patch(hunks: List[Hunk]) -> str:
    """Render hunks back into `diff -n` text."""
    out: List[str] = []
    for h in hunks:
        out.append(f"{h}\n")
        if isinstance(h, Add):
            out.extend(h.lines)
    return "".join(out)
