# fmtpatch/patch/region.py
from __future__ import annotations

import logging

from .._logging import resolve_logger
from ..models.buffer import LineAddressableBuffer
from ..models.span import LineSpan
from ..utils.text import split_lines

__all__ = ["replace_region"]


def replace_region(
    buffer: LineAddressableBuffer,
    span: LineSpan,
    replacement: str,
    *,
    logger=None,
    log: bool = False,
) -> None:
    """
    Swap the lines in `span` for `replacement` wholesale, with no diffing.

    Only meaningful when `replacement` was produced from exactly those lines.
    """
    log = resolve_logger(logger=logger, enabled=log, name=__name__, level=logging.DEBUG)
    total = buffer.line_count()
    if span.end > total:
        raise ValueError(f"span [{span.start}, {span.end}) exceeds buffer of {total} lines")

    new_lines = split_lines(replacement)
    log.debug(f"Replacing lines [{span.start}, {span.end}) with {len(new_lines)} lines")
    buffer.seek_to_line(span.start)
    buffer.delete_lines(len(span))
    buffer.insert_lines(new_lines)
