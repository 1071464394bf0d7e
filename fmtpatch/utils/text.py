import re
from typing import Iterable, List

_LINE_RE = re.compile(r"[^\n]*\n|[^\n]+$")


def split_lines(text: str) -> List[str]:
    """
    Split text into lines that keep their trailing '\\n'.

    Only '\\n' separates lines (as `diff` counts them); '\\r' stays inside the
    line. A final line without a newline is kept as-is, so
    ``join_lines(split_lines(t)) == t`` for every string.
    """
    if not text:
        return []
    return _LINE_RE.findall(text)


def join_lines(lines: Iterable[str]) -> str:
    return "".join(lines)
