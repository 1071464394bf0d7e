from __future__ import annotations

from typing import List, Optional, Sequence

from .base import PatchError


class ToolNotFound(PatchError):
    """The formatter or differ executable could not be located."""

    kind = "ToolNotFound"

    def __init__(self, executable: str):
        self.executable = executable
        super().__init__(f"Executable not found: '{executable}'")


class FormatterFailed(PatchError):
    kind = "FormatterFailed"

    def __init__(
        self,
        executable: str,
        returncode: int,
        stderr: str = "",
        diagnostics: Optional[Sequence] = None,
    ):
        self.executable = executable
        self.returncode = returncode
        self.stderr = stderr
        self.diagnostics: List = list(diagnostics or [])
        detail = stderr.strip().splitlines()[0] if stderr.strip() else "no output"
        super().__init__(f"'{executable}' exited with status {returncode}: {detail}")


class DiffFailed(PatchError):
    kind = "DiffFailed"

    def __init__(self, executable: str, returncode: int, stderr: str = ""):
        self.executable = executable
        self.returncode = returncode
        self.stderr = stderr
        msg = f"'{executable}' exited with status {returncode}"
        if stderr.strip():
            msg += f": {stderr.strip()}"
        super().__init__(msg)


class ReferenceUnreadable(PatchError):
    """The reformatted text could not be read back (missing file or undecodable bytes)."""

    kind = "ReferenceUnreadable"

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot read reformatted text from '{path}': {reason}")
