"""
Opt-in logging for the patch engine.

Library code never configures global logging. Callers either pass their own
logger or flip `log=True`:

    from fmtpatch._logging import resolve_logger

    def apply_something(..., logger=None, log: bool = False):
        log = resolve_logger(logger=logger, enabled=log, name=__name__)
        log.debug("applying %d hunks", n)  # silent unless opted in

Nothing is written to stdout/stderr by default.
"""
from __future__ import annotations

import logging


class NoopLogger:
    def debug(self, *args, **kwargs):  # type: ignore[no-untyped-def]
        pass

    info = warning = error = exception = critical = debug


def resolve_logger(
    logger: logging.Logger | None = None,
    *,
    enabled: bool = False,
    name: str | None = None,
    level: int = logging.INFO,
) -> logging.Logger | NoopLogger:
    """
    Pick the logger a call should write to.

    - An explicit `logger` always wins (anything with a .debug(...) works).
    - `enabled=True` returns the named stdlib logger at `level`, propagating to
      the root so pytest's caplog sees its records.
    - Otherwise a NoopLogger.
    """
    if logger is not None:
        return logger
    if enabled:
        lg = logging.getLogger(name or "fmtpatch")
        lg.setLevel(level)
        lg.propagate = True
        return lg
    return NoopLogger()
