# conftest.py - pytest configuration
import sys
import textwrap

import pytest

from fmtpatch import Formatter, LineBuffer


@pytest.fixture
def abcd_buffer():
    return LineBuffer(["a\n", "b\n", "c\n", "d\n"])


@pytest.fixture
def strip_formatter(tmp_path):
    """A Formatter that strips trailing whitespace in place (python script, no write flag)."""
    script = tmp_path / "strip_ws.py"
    script.write_text(
        textwrap.dedent(
            """
            import sys
            path = sys.argv[-1]
            with open(path, encoding="utf-8", newline="") as f:
                text = f.read()
            out = "".join(line.rstrip() + "\\n" for line in text.splitlines())
            with open(path, "w", encoding="utf-8", newline="") as f:
                f.write(out)
            """
        )
    )
    return Formatter(command=sys.executable, options=(str(script),), write_flag="")


@pytest.fixture
def broken_formatter(tmp_path):
    """A Formatter that reports a syntax error against the file it was given and exits 2."""
    script = tmp_path / "broken.py"
    script.write_text(
        textwrap.dedent(
            """
            import sys
            sys.stderr.write(sys.argv[-1] + ":2:5: expected ';', found 'x'\\n")
            sys.exit(2)
            """
        )
    )
    return Formatter(command=sys.executable, options=(str(script),), write_flag="")


@pytest.fixture
def garbage_formatter(tmp_path):
    """A Formatter that 'succeeds' but leaves bytes that are not valid UTF-8 in the file."""
    script = tmp_path / "garbage.py"
    script.write_text(
        textwrap.dedent(
            """
            import sys
            with open(sys.argv[-1], "wb") as f:
                f.write(b"\\xff\\n")
            """
        )
    )
    return Formatter(command=sys.executable, options=(str(script),), write_flag="")
