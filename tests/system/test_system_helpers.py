import os
import sys

import pytest

from fmtpatch.errors import ToolNotFound
from fmtpatch.system import run_tool, staged_tempfile, which, write_tempfile


def test_write_tempfile_keeps_exact_bytes():
    path = write_tempfile("a\r\nb", suffix="go")
    try:
        assert path.endswith(".go")
        with open(path, "rb") as f:
            assert f.read() == b"a\r\nb"
    finally:
        os.remove(path)


def test_staged_tempfile_removed_after_block():
    with staged_tempfile("hello") as path:
        assert os.path.exists(path)
    assert not os.path.exists(path)


def test_staged_tempfile_removed_on_error():
    with pytest.raises(RuntimeError):
        with staged_tempfile("hello") as path:
            raise RuntimeError("boom")
    assert not os.path.exists(path)


def test_which_resolves_interpreter_path():
    assert which(sys.executable) == sys.executable
    assert which("no-such-tool-fmtpatch-xyz") is None


def test_run_tool_missing_executable_raises_tool_not_found():
    with pytest.raises(ToolNotFound) as exc:
        run_tool(["no-such-tool-fmtpatch-xyz", "--version"])
    assert exc.value.executable == "no-such-tool-fmtpatch-xyz"


def test_run_tool_captures_raw_bytes():
    proc = run_tool([sys.executable, "-c", "import sys; sys.stdout.buffer.write(b'x\\r\\n'); sys.exit(3)"])
    assert proc.returncode == 3
    assert proc.stdout == b"x\r\n"
