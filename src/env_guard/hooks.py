"""
hooks.py - install a git post-checkout hook that re-runs the check on branch switch
"""
import os
import stat
from pathlib import Path

POST_CHECKOUT_TEMPLATE = """#!/bin/sh
# installed by env-guard
# $3 is 1 for a branch checkout, 0 for a file checkout
if [ "$3" = "1" ]; then
    env-guard --root "$(git rev-parse --show-toplevel)" check --trigger branch-switch || true
fi
"""


def hook_path(repo_root: str) -> Path:
    return Path(repo_root) / ".git" / "hooks" / "post-checkout"


def install_hook(repo_root: str = ".", overwrite: bool = False) -> str:
    git_dir = Path(repo_root) / ".git"
    if not git_dir.is_dir():
        raise FileNotFoundError(f"Not a git work tree: {os.path.abspath(repo_root)}")

    out = hook_path(repo_root)
    out.parent.mkdir(parents=True, exist_ok=True)
    if out.exists() and not overwrite:
        raise FileExistsError(str(out))

    out.write_text(POST_CHECKOUT_TEMPLATE, encoding="utf-8")
    mode = out.stat().st_mode
    out.chmod(mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    return str(out)
