# src/env_guard/wizard.py
"""
wizard.py
Interactive fill-in of missing variables. Answers are appended to the env file;
skipped keys are appended commented out so they stay visible.
"""
import logging
import os
from typing import Callable, List, Optional

from .entry import Entry

logger = logging.getLogger(__name__)

# prompt(message, hint, default) -> value, or None to skip the key
PromptFn = Callable[[str, Optional[str], str], Optional[str]]

EMPTY_ANSWERS = ('""', "''")


def format_env_line(key: str, value: str) -> str:
    return f"{key}={value}"


def format_skipped_line(key: str) -> str:
    return f"# {key}="


def console_prompt(message: str, hint: Optional[str], default: str) -> Optional[str]:
    """
    Read one value from stdin.
    Empty input keeps the default, "" sets an empty value, EOF (Ctrl-D) skips the key.
    """
    if hint:
        print(f"  {hint}")
    suffix = f" [{default}, \"\" for empty]" if default else ""
    try:
        answer = input(f"{message}{suffix}: ")
    except EOFError:
        print()
        return None
    if answer.strip() in EMPTY_ANSWERS:
        return ""
    return answer if answer else default


def append_to_env_file(path: str, lines: List[str]):
    """Append lines to the env file, adding a newline separator if the file doesn't end with one."""
    existing = ""
    if os.path.exists(path):
        with open(path, "r", encoding="utf-8", errors="replace") as f:
            existing = f.read()

    separator = "\n" if existing and not existing.endswith("\n") else ""
    with open(path, "a", encoding="utf-8") as f:
        f.write(separator + "\n".join(lines) + "\n")


def run_input_wizard(missing: List[Entry], env_path: str,
                     prompt: Optional[PromptFn] = None) -> List[str]:
    prompt = prompt or console_prompt
    lines = []
    total = len(missing)

    for i, entry in enumerate(missing, start=1):
        message = f"({i}/{total}) Enter value for {entry.key}"
        value = prompt(message, entry.comment, entry.value)

        if value is None:
            lines.append(format_skipped_line(entry.key))
            logger.info(f"Skipped: {entry.key}")
        else:
            lines.append(format_env_line(entry.key, value))
            logger.info(f"Added: {entry.key}")

    if not lines:
        return lines

    append_to_env_file(env_path, lines)
    logger.info(f"Appended {len(lines)} variable(s) to {env_path}")
    return lines
