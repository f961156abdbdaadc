# src/env_guard/checker.py
import logging
import os
from typing import Optional

from .config_loader import Settings
from .diff import find_missing_keys
from .entry import CheckResult
from .parser import parse_env_content

logger = logging.getLogger(__name__)


def read_file_safe(path: str) -> Optional[str]:
    """
    Read a text file, returning None if it doesn't exist or can't be opened.
    Bytes that are not valid UTF-8 become U+FFFD instead of failing the read.
    """
    try:
        with open(path, "r", encoding="utf-8", errors="replace") as f:
            return f.read()
    except OSError:
        return None


def run_check(repo_root: str, settings: Settings) -> Optional[CheckResult]:
    """
    Compare settings.template_file against settings.env_file under repo_root.
    Returns None when the template does not exist (nothing to check).
    A missing env file counts as empty, so every template key is reported.
    """
    template_path = os.path.join(repo_root, settings.template_file)
    env_path = os.path.join(repo_root, settings.env_file)

    template_content = read_file_safe(template_path)
    if template_content is None:
        logger.info(f"Template file not found: {settings.template_file}")
        return None

    env_content = read_file_safe(env_path)
    if env_content is None:
        logger.info(f"Env file not found, treating as empty: {settings.env_file}")
        env_content = ""

    template_entries = parse_env_content(template_content)
    env_entries = parse_env_content(env_content)
    missing = find_missing_keys(template_entries, env_entries, settings.ignore_patterns)

    logger.info(f"Check complete: {len(missing)} missing variable(s)")
    for entry in missing:
        logger.info(f"  Missing key: {entry.key}")

    return CheckResult(missing=missing, template_path=template_path, env_path=env_path)
