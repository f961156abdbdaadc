import re

import pytest

from env_guard.diff import compile_patterns, find_missing_keys, is_ignored
from env_guard.entry import Entry


def entries(*keys):
    return [Entry(key=k, value="", line=i) for i, k in enumerate(keys, start=1)]


def keys(result):
    return [e.key for e in result]


def test_missing_keys_in_template_order():
    result = find_missing_keys(entries("A", "B", "C"), entries("A"))
    assert keys(result) == ["B", "C"]


def test_no_missing_when_identical():
    template = entries("A", "B", "C")
    assert find_missing_keys(template, template) == []


def test_empty_template():
    assert find_missing_keys([], entries("A", "B")) == []


def test_empty_env_returns_everything():
    template = entries("A", "B", "C")
    assert find_missing_keys(template, []) == template


def test_extra_env_keys_are_not_reported():
    assert keys(find_missing_keys(entries("A"), entries("A", "EXTRA"))) == []


def test_duplicate_env_keys_collapse():
    assert keys(find_missing_keys(entries("A", "B"), entries("A", "A"))) == ["B"]


def test_entries_passed_through_unchanged():
    template = [Entry(key="API_KEY", value="changeme", line=7, comment="API key")]
    result = find_missing_keys(template, [])
    assert result[0] is template[0]


@pytest.mark.parametrize("patterns", [None, []])
def test_no_patterns_same_as_empty(patterns):
    template, env = entries("A", "B", "C"), entries("B")
    assert find_missing_keys(template, env, patterns) == find_missing_keys(template, env)


def test_anchored_pattern_excludes_prefix():
    result = find_missing_keys(entries("DB_HOST", "OPTIONAL_KEY"), [], ["^OPTIONAL_"])
    assert keys(result) == ["DB_HOST"]


def test_unanchored_pattern_matches_anywhere():
    result = find_missing_keys(entries("TEST_A", "MY_TEST_B", "PROD"), [], ["TEST_"])
    assert keys(result) == ["PROD"]


def test_invalid_pattern_is_ignored():
    assert keys(find_missing_keys(entries("A"), [], ["[invalid"])) == ["A"]


def test_invalid_pattern_does_not_disable_valid_ones():
    result = find_missing_keys(entries("A", "SKIP_ME", "B"), [], ["[invalid", "^SKIP_", "(unclosed"])
    assert keys(result) == ["A", "B"]


@pytest.mark.parametrize("bad", [
    "a{4294967296}",
    "(" * 2000 + ")" * 2000,
    "[invalid",
])
def test_uncompilable_pattern_never_raises(bad):
    result = find_missing_keys(entries("A", "SKIP_ME"), [], [bad, "^SKIP"])
    assert keys(result) == ["A"]
    assert [rx.pattern for rx in compile_patterns([bad, "^SKIP"])] == ["^SKIP"]


def test_compile_patterns_drops_invalid():
    compiled = compile_patterns(["^A", "[bad", "B$"])
    assert [rx.pattern for rx in compiled] == ["^A", "B$"]
    assert all(isinstance(rx, re.Pattern) for rx in compiled)


def test_compile_patterns_empty():
    assert compile_patterns(None) == []
    assert compile_patterns([]) == []


def test_is_ignored():
    regexes = compile_patterns(["^DEBUG", "_LOCAL$"])
    assert is_ignored("DEBUG_SQL", regexes)
    assert is_ignored("DB_LOCAL", regexes)
    assert not is_ignored("MY_DEBUG", regexes)
    assert not is_ignored("ANYTHING", [])
