# src/env_guard/output.py
import json
from typing import List

from .entry import CheckResult, Entry

VERSION = "0.3.0"
MAX_DISPLAY_KEYS = 10


class Color:
    RESET = "\033[0m"
    RED = "\033[91m"
    GREEN = "\033[92m"
    YELLOW = "\033[93m"
    BLUE = "\033[94m"


def status_text(missing_count: int, color: bool = False) -> str:
    """One-line status, the CLI equivalent of a status bar item."""
    if missing_count == 0:
        text, col = "✔ .env OK", Color.GREEN
    else:
        text, col = f"⚠ .env: {missing_count} missing", Color.YELLOW
    return f"{col}{text}{Color.RESET}" if color else text


def missing_summary(missing: List[Entry]) -> str:
    keys = [e.key for e in missing[:MAX_DISPLAY_KEYS]]
    extra = len(missing) - MAX_DISPLAY_KEYS
    suffix = f" (+{extra} more)" if extra > 0 else ""
    return f"{len(missing)} missing variable(s): {', '.join(keys)}{suffix}"


def format_check_report(result: CheckResult, color: bool = False) -> str:
    out = [status_text(result.count, color=color)]
    if result.ok:
        return "\n".join(out)

    out.append(missing_summary(result.missing))
    out.append("")
    for e in result.missing:
        out.append(f"   ➤ {e.key}  ({result.template_path}:{e.line})")
        if e.comment:
            out.append(f"      {e.comment}")
    return "\n".join(out)


def print_check_report(result: CheckResult, quiet: bool = False, color: bool = False):
    if quiet and result.ok:
        return
    print(format_check_report(result, color=color))


def to_json(data, pretty=False):
    """Convert result dict into JSON string."""
    if pretty:
        return json.dumps(data, indent=4, ensure_ascii=False)
    return json.dumps(data, separators=(",", ":"), ensure_ascii=False)


def _envelope(action: str, success: bool, errors=None, warnings=None, details=None) -> dict:
    return {
        "tool": "env-guard",
        "version": VERSION,
        "action": action,
        "success": success,
        "errors": errors or [],
        "warnings": warnings or [],
        "details": details or {},
    }


def check_response(result: CheckResult, action: str = "check") -> dict:
    """JSON envelope for a finished check; each missing key is one error."""
    errors = [
        {"type": "missing_key", "key": e.key, "line": e.line, "message": f"Missing key: {e.key}"}
        for e in result.missing
    ]
    return _envelope(action, result.ok, errors=errors, details=result.to_dict())


def skipped_response(template_file: str, action: str = "check") -> dict:
    """JSON envelope when there is no template, so nothing was compared."""
    return _envelope(action, True, warnings=[f"Template file not found: {template_file}"],
                     details={"template": template_file, "skipped": True})
