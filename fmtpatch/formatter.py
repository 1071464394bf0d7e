# fmtpatch/formatter.py
from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from ._logging import resolve_logger
from .errors.tool import FormatterFailed
from .system import run_tool

__all__ = ["Formatter", "Diagnostic", "parse_diagnostics"]

_DIAG_RE = re.compile(r"^(?P<path>.+?):(?P<line>\d+)(?::(?P<col>\d+))?:\s*(?P<msg>.*)$")


@dataclass
class Diagnostic:
    """One `file:line[:col]: message` complaint printed by a formatter."""

    path: str
    line: int
    column: Optional[int]
    message: str

    def __str__(self) -> str:
        pos = f"{self.line}:{self.column}" if self.column is not None else f"{self.line}"
        return f"{self.path}:{pos}: {self.message}"


def parse_diagnostics(stderr: str) -> List[Diagnostic]:
    """
    Pull structured diagnostics out of formatter stderr.

    Lines that don't look like `file:line[:col]: msg` are skipped.
    """
    out: List[Diagnostic] = []
    for raw in stderr.splitlines():
        m = _DIAG_RE.match(raw.strip())
        if not m:
            continue
        col = m.group("col")
        out.append(Diagnostic(m.group("path"), int(m.group("line")), int(col) if col else None, m.group("msg")))
    return out


@dataclass
class Formatter:
    """
    An external reformatting tool run in place on a file.

    The command line is `command [options...] write_flag path`, e.g.
    `gofmt -s -w /tmp/x.go`.
    """

    command: str
    options: Tuple[str, ...] = field(default_factory=tuple)
    write_flag: str = "-w"
    encoding: str = "utf-8"

    def argv(self, path: str) -> List[str]:
        args = [self.command, *self.options]
        if self.write_flag:
            args.append(self.write_flag)
        args.append(path)
        return args

    def run(self, path: str, *, display_name: str | None = None, logger=None, log: bool = False) -> None:
        """
        Reformat `path` in place.

        Raises:
            ToolNotFound: the formatter executable is missing.
            FormatterFailed: nonzero exit; carries stderr and parsed diagnostics.
        """
        log = resolve_logger(logger=logger, enabled=log, name=__name__, level=logging.DEBUG)
        argv = self.argv(path)
        log.debug(f"Running formatter: {argv}")
        proc = run_tool(argv)
        if proc.returncode != 0:
            stderr = proc.stderr.decode(self.encoding, errors="replace")
            # Report against the user's file, not the staging copy
            if display_name:
                stderr = stderr.replace(path, display_name)
            diagnostics = parse_diagnostics(stderr)
            log.debug(f"Formatter failed ({proc.returncode}) with {len(diagnostics)} diagnostics")
            raise FormatterFailed(self.command, proc.returncode, stderr, diagnostics)
