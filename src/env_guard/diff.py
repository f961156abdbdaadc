# src/env_guard/diff.py
import re
from typing import Iterable, List, Optional, Pattern

from .entry import Entry


def _try_compile(pattern: str) -> Optional[Pattern]:
    try:
        return re.compile(pattern)
    # huge repeat counts and deep nesting fail outside re.error
    except (re.error, OverflowError, RecursionError):
        return None


def compile_patterns(patterns: Optional[Iterable[str]]) -> List[Pattern]:
    """Compile ignore patterns, silently dropping the ones that are not valid regexes."""
    if not patterns:
        return []
    compiled = (_try_compile(p) for p in patterns)
    return [rx for rx in compiled if rx is not None]


def is_ignored(key: str, regexes: List[Pattern]) -> bool:
    # unanchored search: "TEST_" matches anywhere in the key, "^TEST_" only as prefix
    return any(rx.search(key) for rx in regexes)


def find_missing_keys(
        template_entries: List[Entry],
        env_entries: List[Entry],
        ignore_patterns: Optional[Iterable[str]] = None,
    ) -> List[Entry]:
    """
    Return template entries whose key is absent from env_entries and
    not matched by any ignore pattern. Template order is kept.
    """
    env_keys = {e.key for e in env_entries}
    regexes = compile_patterns(ignore_patterns)

    return [
        entry for entry in template_entries
        if entry.key not in env_keys and not is_ignored(entry.key, regexes)
    ]
