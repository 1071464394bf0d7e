import logging

from fmtpatch import LineBuffer, SequenceDiffer, apply_full
from fmtpatch._logging import NoopLogger, resolve_logger
from fmtpatch.patch import parse_rcs_patch


def test_resolve_logger_default_noop():
    lg = resolve_logger()
    assert isinstance(lg, NoopLogger)
    lg.debug("hello")
    lg.info("world")


def test_resolve_logger_enabled_creates_logger(caplog):
    with caplog.at_level(logging.INFO):
        lg = resolve_logger(enabled=True, name="fmtpatch.test")
        lg.info("test message")
    assert any("test message" in rec.message for rec in caplog.records)


def test_resolve_logger_uses_passed_logger():
    custom = logging.getLogger("x")
    assert resolve_logger(logger=custom) is custom


def test_engine_is_silent_by_default(caplog):
    with caplog.at_level(logging.DEBUG):
        parse_rcs_patch("d1 1\n")
    assert not caplog.records


def test_caller_logger_receives_pipeline_messages(tmp_path, caplog):
    ref = tmp_path / "ref.txt"
    ref.write_text("b\n")
    custom = logging.getLogger("fmtpatch.caller")
    with caplog.at_level(logging.DEBUG, logger="fmtpatch.caller"):
        apply_full(LineBuffer.from_text("a\n"), str(ref), differ=SequenceDiffer(), logger=custom)
    messages = [rec.message for rec in caplog.records]
    assert any("Parsed 2 hunks" in m for m in messages)
    assert any("Applying 2 hunks" in m for m in messages)
