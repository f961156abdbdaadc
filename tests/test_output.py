import json

from env_guard.entry import CheckResult, Entry
from env_guard.output import (Color, MAX_DISPLAY_KEYS, check_response, format_check_report,
                              missing_summary, skipped_response, status_text, to_json)


def make_missing(n):
    return [Entry(key=f"KEY_{i}", value="", line=i) for i in range(1, n + 1)]


def test_status_text():
    assert status_text(0) == "✔ .env OK"
    assert status_text(3) == "⚠ .env: 3 missing"
    assert status_text(3, color=True) == f"{Color.YELLOW}⚠ .env: 3 missing{Color.RESET}"


def test_missing_summary_short():
    assert missing_summary(make_missing(2)) == "2 missing variable(s): KEY_1, KEY_2"


def test_missing_summary_truncates():
    summary = missing_summary(make_missing(MAX_DISPLAY_KEYS + 3))
    assert summary.startswith(f"{MAX_DISPLAY_KEYS + 3} missing variable(s): KEY_1,")
    assert f"KEY_{MAX_DISPLAY_KEYS}" in summary
    assert f"KEY_{MAX_DISPLAY_KEYS + 1}" not in summary
    assert summary.endswith("(+3 more)")


def test_report_lists_keys_with_comments():
    result = CheckResult(
        missing=[Entry(key="DB_HOST", value="", line=2, comment="Database host")],
        template_path=".env.example",
        env_path=".env",
    )
    report = format_check_report(result)
    assert "⚠ .env: 1 missing" in report
    assert "DB_HOST  (.env.example:2)" in report
    assert "Database host" in report


def test_report_ok():
    assert format_check_report(CheckResult()) == "✔ .env OK"


def test_check_response_carries_result():
    result = CheckResult(missing=make_missing(1), template_path="t", env_path="e")
    data = json.loads(to_json(check_response(result)))
    assert data["tool"] == "env-guard"
    assert data["action"] == "check"
    assert data["success"] is False
    assert data["details"] == result.to_dict()
    assert data["errors"] == [
        {"type": "missing_key", "key": "KEY_1", "line": 1, "message": "Missing key: KEY_1"},
    ]


def test_check_response_clean():
    data = check_response(CheckResult(template_path="t", env_path="e"))
    assert data["success"] is True
    assert data["errors"] == []
    assert data["details"]["missing_count"] == 0


def test_skipped_response():
    data = skipped_response(".env.example")
    assert data["success"] is True
    assert data["details"] == {"template": ".env.example", "skipped": True}
    assert data["warnings"] == ["Template file not found: .env.example"]
