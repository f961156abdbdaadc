# src/env_guard/parser.py
"""
parser.py
Tolerant line-oriented parser for .env / .env.example content.

Supports:
- KEY=value
- KEY= (empty value)
- KEY (no '=', treated as empty value)
- single/double quoted values
- inline comments after unquoted values (" #")
- comment lines, the last one directly above a declaration becomes its description
- Windows line endings
"""
import re
from enum import Enum
from typing import List, Optional

from .entry import Entry

_LINE_BREAK = re.compile(r"\r?\n")
# whitespace plus the byte order mark some editors put at the start of the file
_EDGE_SPACE = re.compile(r"^[\s\ufeff]+|[\s\ufeff]+$")
_INLINE_COMMENT = " #"
_QUOTES = ('"', "'")


def _trim(text: str) -> str:
    return _EDGE_SPACE.sub("", text)


class CommentState(Enum):
    NONE = "none"
    PENDING = "pending"


class _PendingComment:
    """Single-slot holder for the comment waiting to be claimed by the next entry."""

    def __init__(self):
        self.state = CommentState.NONE
        self.text = None

    def set(self, text: str):
        # a newer comment line always replaces the older one
        self.state = CommentState.PENDING
        self.text = text

    def clear(self):
        self.state = CommentState.NONE
        self.text = None

    def take(self) -> Optional[str]:
        text = self.text if self.state is CommentState.PENDING else None
        self.clear()
        return text


def parse_value(raw_value: str) -> str:
    """Strip quotes and inline comments from the right-hand side of '='."""
    value = _trim(raw_value)
    if not value:
        return ""

    for quote in _QUOTES:
        if value.startswith(quote):
            end = value.find(quote, 1)
            if end != -1:
                return value[1:end]
            # unterminated: keep everything after the opening quote
            return value[1:]

    idx = value.find(_INLINE_COMMENT)
    if idx != -1:
        return _trim(value[:idx])
    return value


def parse_env_content(content: str) -> List[Entry]:
    """
    Parse env file text into entries, in source order.
    Never raises; malformed lines are interpreted best-effort or skipped.
    """
    entries = []
    pending = _PendingComment()

    for idx, raw in enumerate(_LINE_BREAK.split(content), start=1):
        line = _trim(raw)

        if not line:
            pending.clear()
            continue

        if line.startswith("#"):
            pending.set(_trim(line[1:]))
            continue

        if "=" in line:
            key, raw_value = line.split("=", 1)
            key = _trim(key)
            value = parse_value(raw_value)
        else:
            key, value = line, ""

        if not key:
            pending.clear()
            continue

        entries.append(Entry(key=key, value=value, line=idx, comment=pending.take()))

    return entries
