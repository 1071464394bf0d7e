# fmtpatch/utils/gitignore.py
import os
from typing import List

import pathspec


def get_gitignore(path: str) -> pathspec.PathSpec:
    """
    Compile the nearest .gitignore found walking upward from `path` (a file or
    a directory). '.git/' is always ignored, even when no .gitignore exists or
    it cannot be read.
    """
    defaults: List[str] = [".git/"]
    lines: List[str] = list(defaults)

    base = os.path.abspath(path or ".")
    if os.path.isfile(base):
        base = os.path.dirname(base)

    cur = base
    while True:
        gi = os.path.join(cur, ".gitignore")
        try:
            if os.path.exists(gi):
                with open(gi, "r", encoding="utf-8", errors="ignore") as f:
                    lines.extend(f.read().splitlines())
                break
        except OSError:
            # Unreadable .gitignore: keep walking upward
            pass
        parent = os.path.dirname(cur)
        if parent == cur:
            break
        cur = parent

    return pathspec.GitIgnoreSpec.from_lines(lines)


def is_ignored(spec: pathspec.PathSpec, root: str, full_path: str) -> bool:
    """Match `full_path` against `spec` using a POSIX path relative to `root`."""
    relative_path = os.path.relpath(full_path, root).replace(os.sep, "/")
    # Trailing '/' lets directory patterns like 'build/' match
    probe = relative_path + ("/" if os.path.isdir(full_path) else "")
    return spec.match_file(probe)
