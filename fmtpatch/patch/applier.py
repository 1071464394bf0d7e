# fmtpatch/patch/applier.py
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence

from .._logging import resolve_logger
from ..errors.patch import OutOfRangeHunk
from ..models.buffer import LineAddressableBuffer
from ..models.hunk import Add, Delete, Hunk

__all__ = ["PatchState", "apply_hunks"]


@dataclass
class PatchState:
    """Position bookkeeping for a single apply call."""

    # Net lines deleted minus lines inserted so far (adds decrement, deletes
    # increment), so `at - offset` maps an original line to the current buffer.
    offset: int = 0
    applied: int = 0


def _apply_add(buffer: LineAddressableBuffer, hunk: Add, index: int, state: PatchState) -> None:
    state.offset -= hunk.count
    target = hunk.at - hunk.count - state.offset
    if not 0 <= target <= buffer.line_count():
        # Undo the bookkeeping; this hunk leaves nothing behind
        state.offset += hunk.count
        raise OutOfRangeHunk(hunk, index, target, buffer.line_count())
    buffer.seek_to_line(target)
    buffer.insert_lines(hunk.lines)


def _apply_delete(buffer: LineAddressableBuffer, hunk: Delete, index: int, state: PatchState) -> None:
    start = hunk.at - state.offset - 1
    total = buffer.line_count()
    if start < 0 or start + hunk.count > total:
        raise OutOfRangeHunk(hunk, index, start, total)
    state.offset += hunk.count
    buffer.seek_to_line(start)
    buffer.delete_lines(hunk.count)


def apply_hunks(
    buffer: LineAddressableBuffer,
    hunks: Sequence[Hunk],
    *,
    logger=None,
    log: bool = False,
) -> PatchState:
    """
    Replay parsed hunks onto `buffer` in place, in the order given.

    Hunk coordinates refer to the unmodified text; a running offset translates
    them to the buffer as it is being edited. Lines outside the hunks are
    never touched.

    Returns the final PatchState.

    Raises:
        OutOfRangeHunk: when a hunk falls outside the buffer. Hunks before it
            stay applied; there is no rollback.
    """
    log = resolve_logger(logger=logger, enabled=log, name=__name__, level=logging.DEBUG)
    state = PatchState()
    log.debug(f"Applying {len(hunks)} hunks to a {buffer.line_count()}-line buffer")

    for index, hunk in enumerate(hunks):
        if isinstance(hunk, Add):
            _apply_add(buffer, hunk, index, state)
        elif isinstance(hunk, Delete):
            _apply_delete(buffer, hunk, index, state)
        else:
            raise TypeError(f"unsupported hunk type: {type(hunk).__name__}")
        state.applied += 1
        log.debug(f"  [{index}] {hunk} -> offset={state.offset}")

    return state
