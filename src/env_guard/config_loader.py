# src/env_guard/config_loader.py
import logging
import os
from dataclasses import asdict, dataclass, field, replace
from typing import List, Optional

import yaml

logger = logging.getLogger(__name__)

CONFIG_FILENAME = ".envguard.yml"

DEFAULT_CONFIG = {
    "template_file": ".env.example",
    "env_file": ".env",
    "ignore_patterns": [],
    "check_on_open": True,
    "check_on_save": True,
    "check_on_branch_switch": True,
}

TRIGGERS = ("manual", "open", "save", "branch-switch")


@dataclass
class Settings:
    template_file: str = ".env.example"
    env_file: str = ".env"
    ignore_patterns: List[str] = field(default_factory=list)
    check_on_open: bool = True
    check_on_save: bool = True
    check_on_branch_switch: bool = True

    def should_run(self, trigger: str = "manual") -> bool:
        if trigger == "open":
            return self.check_on_open
        if trigger == "save":
            return self.check_on_save
        if trigger == "branch-switch":
            return self.check_on_branch_switch
        return True

    def with_overrides(self, template_file: Optional[str] = None, env_file: Optional[str] = None,
                       ignore_patterns: Optional[List[str]] = None) -> "Settings":
        """Return a copy with command-line values applied on top."""
        changes = {}
        if template_file:
            changes["template_file"] = template_file
        if env_file:
            changes["env_file"] = env_file
        if ignore_patterns:
            # CLI patterns extend the configured ones
            changes["ignore_patterns"] = list(dict.fromkeys(self.ignore_patterns + list(ignore_patterns)))
        return replace(self, **changes)

    def to_dict(self) -> dict:
        return asdict(self)


def _coerce(key, value):
    default = DEFAULT_CONFIG[key]
    if isinstance(default, bool):
        return value if isinstance(value, bool) else None
    if isinstance(default, list):
        if isinstance(value, list) and all(isinstance(v, str) for v in value):
            return list(value)
        return None
    return value if isinstance(value, str) and value.strip() else None


def load_settings(repo_root: str) -> Settings:
    """
    Load .envguard.yml from repo_root (if present) and merge it over the defaults.
    Bad values fall back to the default for that key; an unreadable file means all defaults.
    """
    cfg = {k: (list(v) if isinstance(v, list) else v) for k, v in DEFAULT_CONFIG.items()}
    path = os.path.join(repo_root, CONFIG_FILENAME)
    if not os.path.exists(path):
        return Settings(**cfg)

    try:
        with open(path, "r", encoding="utf-8") as fh:
            user = yaml.safe_load(fh) or {}
    except (OSError, yaml.YAMLError) as e:
        logger.warning(f"Could not read {path}, using defaults: {e}")
        return Settings(**cfg)

    if not isinstance(user, dict):
        logger.warning(f"{path} must contain a mapping, using defaults")
        return Settings(**cfg)

    for key in DEFAULT_CONFIG:
        if key not in user:
            continue
        value = _coerce(key, user[key])
        if value is None:
            logger.warning(f"Invalid value for '{key}' in {path}: {user[key]!r}")
            continue
        cfg[key] = value

    return Settings(**cfg)


def dump_settings(settings: Settings) -> str:
    return yaml.safe_dump(settings.to_dict(), default_flow_style=False, sort_keys=False)
