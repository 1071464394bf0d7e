# fmtpatch/tree.py
import logging
import os
from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional, Sequence

from ._logging import resolve_logger
from .core import ALREADY_FORMATTED, format_buffer
from .differ import LineDiffer
from .formatter import Formatter
from .models.buffer import FileBuffer
from .utils.gitignore import get_gitignore, is_ignored


@dataclass
class TreeSummary:
    """Outcome of formatting every matching file below a root directory."""

    formatted: List[str] = field(default_factory=list)
    unchanged: List[str] = field(default_factory=list)
    failed: List[str] = field(default_factory=list)
    # relative path -> error string (when failed)
    errors: Dict[str, str] = field(default_factory=dict)


def iter_source_files(root: str, suffixes: Sequence[str]) -> Iterator[str]:
    """Yield files under `root` ending in one of `suffixes`, skipping .gitignore'd paths, in sorted order."""
    spec = get_gitignore(root)
    for current, dirs, files in os.walk(root):
        dirs[:] = sorted(d for d in dirs if not is_ignored(spec, root, os.path.join(current, d)))
        for name in sorted(files):
            full_path = os.path.join(current, name)
            if name.endswith(tuple(suffixes)) and not is_ignored(spec, root, full_path):
                yield full_path


def format_tree(
    root: str,
    formatter: Formatter,
    *,
    suffixes: Sequence[str],
    differ: Optional[LineDiffer] = None,
    dry_run: bool = False,
    logger=None,
    log: bool = False,
) -> TreeSummary:
    """
    Format each matching file below `root` through the patch engine and save
    the ones that changed.

    Failures are recorded per file and never stop the walk. With
    dry_run=True, files that would change are reported as formatted but
    left untouched on disk.
    """
    log = resolve_logger(logger=logger, enabled=log, name=__name__, level=logging.DEBUG)
    summary = TreeSummary()

    for full_path in iter_source_files(root, suffixes):
        rel = os.path.relpath(full_path, root).replace(os.sep, "/")
        try:
            buffer = FileBuffer.from_path(full_path)
        except (OSError, UnicodeDecodeError) as e:
            summary.failed.append(rel)
            summary.errors[rel] = str(e)
            continue

        result = format_buffer(buffer, formatter, differ=differ, filename=full_path, logger=log)
        if not result.ok:
            summary.failed.append(rel)
            summary.errors[rel] = result.message
        elif result.status == ALREADY_FORMATTED:
            summary.unchanged.append(rel)
        else:
            if not dry_run:
                buffer.save()
            summary.formatted.append(rel)
        log.debug(f"{rel}: {result.status}")

    return summary
