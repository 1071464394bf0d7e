"""
Process and temp-file helpers shared by the formatter and differ wrappers.

Public API:
  - write_tempfile(text, *, suffix=".txt", prefix="fmtpatch-", dir=None, encoding="utf-8") -> str
  - staged_tempfile(text, ...) -> context manager yielding a path, removed on exit
  - which(cmd) -> str | None
  - run_tool(argv) -> subprocess.CompletedProcess (raises ToolNotFound)
"""
from __future__ import annotations

import contextlib
import os
import subprocess
import tempfile
from typing import Iterator, List, Optional, Sequence

from ..errors.tool import ToolNotFound

__all__ = ["write_tempfile", "staged_tempfile", "remove_quietly", "which", "run_tool"]


def write_tempfile(
    text: str,
    *,
    suffix: str = ".txt",
    prefix: str = "fmtpatch-",
    dir: str | None = None,
    encoding: str = "utf-8",
) -> str:
    """
    Write `text` to a new temporary file and return its absolute path.

    The text is written without newline translation, so the file holds exactly
    the buffer's bytes. The caller owns the file and must remove it.
    """
    if suffix and not suffix.startswith("."):
        suffix = f".{suffix}"
    fd, path = tempfile.mkstemp(prefix=prefix, suffix=suffix, dir=dir)
    try:
        with os.fdopen(fd, "w", encoding=encoding, newline="") as f:
            f.write(text)
    except Exception:
        with contextlib.suppress(OSError):
            os.remove(path)
        raise
    return os.path.realpath(path)


def remove_quietly(path: Optional[str]) -> None:
    if path:
        with contextlib.suppress(FileNotFoundError):
            os.remove(path)


@contextlib.contextmanager
def staged_tempfile(
    text: str,
    *,
    suffix: str = ".txt",
    prefix: str = "fmtpatch-",
    dir: str | None = None,
    encoding: str = "utf-8",
) -> Iterator[str]:
    """Like write_tempfile, but the file is deleted when the block exits, however it exits."""
    path = write_tempfile(text, suffix=suffix, prefix=prefix, dir=dir, encoding=encoding)
    try:
        yield path
    finally:
        remove_quietly(path)


def which(cmd: str) -> Optional[str]:
    """Resolve `cmd` on PATH (or as a direct path) to an executable, or None."""
    if os.path.dirname(cmd):
        return cmd if os.path.isfile(cmd) and os.access(cmd, os.X_OK) else None
    paths = os.environ.get("PATH", "").split(os.pathsep)
    exts = [""]
    if os.name == "nt":
        pathext = os.environ.get("PATHEXT", ".EXE;.BAT;.CMD").split(";")
        exts += [e.lower() for e in pathext if e]
    for folder in paths:
        if not folder:
            continue
        full = os.path.join(folder, cmd)
        for e in exts:
            candidate = full + e
            if os.path.isfile(candidate) and os.access(candidate, os.X_OK):
                return candidate
    return None


def run_tool(argv: Sequence[str]) -> subprocess.CompletedProcess:
    """
    Run an external tool to completion and capture raw stdout/stderr bytes.

    Output is not decoded here: text mode would translate '\\r\\n', and the
    patch engine needs the tool's bytes untouched.

    Raises:
        ToolNotFound: when argv[0] cannot be found or executed.
    """
    args: List[str] = list(argv)
    executable = args[0]
    resolved = which(executable)
    if resolved is None:
        raise ToolNotFound(executable)
    try:
        return subprocess.run([resolved] + args[1:], capture_output=True, check=False)
    except FileNotFoundError as e:
        raise ToolNotFound(executable) from e
