# fmtpatch/utils/__init__.py
from .gitignore import get_gitignore, is_ignored
from .text import join_lines, split_lines

__all__ = [
    "get_gitignore",
    "is_ignored",
    "join_lines",
    "split_lines",
]
