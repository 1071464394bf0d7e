# fmtpatch/core.py
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Optional

from ._logging import resolve_logger
from .differ import DiffTool, LineDiffer
from .errors import OutOfRangeHunk, PatchError, ReferenceUnreadable
from .formatter import Formatter
from .models.buffer import LineAddressableBuffer
from .models.span import LineSpan
from .patch import apply_hunks, parse_rcs_patch, replace_region
from .system import staged_tempfile
from .utils.text import join_lines

APPLIED = "applied"
ALREADY_FORMATTED = "already_formatted"
ERROR = "error"


@dataclass
class ApplyResult:
    """Outcome of bringing a buffer in line with reformatted text."""

    status: str  # "applied", "already_formatted" or "error"
    hunks_applied: int = 0
    error: Optional[PatchError] = None

    @classmethod
    def failed(cls, error: PatchError) -> "ApplyResult":
        applied = error.index if isinstance(error, OutOfRangeHunk) else 0
        return cls(status=ERROR, hunks_applied=applied, error=error)

    @property
    def ok(self) -> bool:
        return self.status != ERROR

    @property
    def error_kind(self) -> Optional[str]:
        return self.error.kind if self.error is not None else None

    @property
    def message(self) -> str:
        if self.error is not None:
            return str(self.error)
        if self.status == ALREADY_FORMATTED:
            return "Buffer is already formatted"
        return f"Applied {self.hunks_applied} hunk(s)"

    def raise_for_error(self) -> None:
        if self.error is not None:
            raise self.error


def _read_reference(path: str, encoding: str) -> str:
    try:
        with open(path, "r", encoding=encoding, newline="") as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise ReferenceUnreadable(path, str(e)) from e


def apply_full(
    buffer: LineAddressableBuffer,
    reference_path: str,
    *,
    differ: Optional[LineDiffer] = None,
    encoding: str = "utf-8",
    logger=None,
    log: bool = False,
) -> ApplyResult:
    """
    Edit `buffer` until it matches the file at `reference_path`, touching only
    the lines the differ reports as changed.

    The buffer text is staged to a temp file, diffed against the reference in
    RCS notation, parsed, then patched in place. Engine failures are returned
    as an error ApplyResult rather than raised, including a reference that is
    missing or not valid in `encoding` (ReferenceUnreadable); after
    OutOfRangeHunk the buffer keeps the hunks applied before the failing one.
    """
    log = resolve_logger(logger=logger, enabled=log, name=__name__, level=logging.DEBUG)
    differ = differ or DiffTool()

    original = join_lines(buffer.get_lines())
    try:
        reference = _read_reference(reference_path, encoding)
        if original == reference:
            log.debug("Buffer already matches reference; nothing to do")
            return ApplyResult(status=ALREADY_FORMATTED)

        with staged_tempfile(original, prefix="fmtpatch-orig-", encoding=encoding) as before_path:
            patch = differ.diff(before_path, reference_path, logger=log)
        hunks = parse_rcs_patch(patch, logger=log)
        if not hunks:
            return ApplyResult(status=ALREADY_FORMATTED)
        state = apply_hunks(buffer, hunks, logger=log)
    except PatchError as e:
        log.debug(f"apply_full failed: {e.kind}: {e}")
        return ApplyResult.failed(e)

    return ApplyResult(status=APPLIED, hunks_applied=state.applied)


def apply_region(
    buffer: LineAddressableBuffer,
    span: LineSpan,
    reference_path: str,
    *,
    encoding: str = "utf-8",
    logger=None,
    log: bool = False,
) -> ApplyResult:
    """
    Replace the lines in `span` with the contents of `reference_path`.

    The reference must be the reformatted version of exactly those lines.
    """
    log = resolve_logger(logger=logger, enabled=log, name=__name__, level=logging.DEBUG)
    lines = buffer.get_lines()
    if span.end > len(lines):
        raise ValueError(f"span [{span.start}, {span.end}) exceeds buffer of {len(lines)} lines")

    try:
        reference = _read_reference(reference_path, encoding)
    except ReferenceUnreadable as e:
        log.debug(f"apply_region failed: {e.kind}: {e}")
        return ApplyResult.failed(e)

    if join_lines(lines[span.start:span.end]) == reference:
        log.debug("Region already matches reference; nothing to do")
        return ApplyResult(status=ALREADY_FORMATTED)

    replace_region(buffer, span, reference, logger=log)
    return ApplyResult(status=APPLIED, hunks_applied=1)


def format_buffer(
    buffer: LineAddressableBuffer,
    formatter: Formatter,
    *,
    span: Optional[LineSpan] = None,
    differ: Optional[LineDiffer] = None,
    filename: Optional[str] = None,
    encoding: str = "utf-8",
    logger=None,
    log: bool = False,
) -> ApplyResult:
    """
    Run `formatter` over the buffer's text (or just `span`) and patch the
    result back in.

    The text is staged to a temp file carrying `filename`'s extension, the
    formatter rewrites it in place, and the rewritten file becomes the
    reference for apply_full/apply_region. Formatter diagnostics mention
    `filename` rather than the temp file. Nothing in the buffer changes when
    the formatter fails.
    """
    log = resolve_logger(logger=logger, enabled=log, name=__name__, level=logging.DEBUG)
    lines = buffer.get_lines()
    if span is not None:
        if span.end > len(lines):
            raise ValueError(f"span [{span.start}, {span.end}) exceeds buffer of {len(lines)} lines")
        lines = lines[span.start:span.end]
    suffix = os.path.splitext(filename)[1] if filename else ".txt"

    try:
        with staged_tempfile(
            join_lines(lines), prefix="fmtpatch-fmt-", suffix=suffix or ".txt", encoding=encoding
        ) as formatted_path:
            formatter.run(formatted_path, display_name=filename, logger=log)
            if span is None:
                return apply_full(buffer, formatted_path, differ=differ, encoding=encoding, logger=log)
            return apply_region(buffer, span, formatted_path, encoding=encoding, logger=log)
    except PatchError as e:
        log.debug(f"format_buffer failed: {e.kind}: {e}")
        return ApplyResult.failed(e)
