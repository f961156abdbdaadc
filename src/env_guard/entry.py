# src/env_guard/entry.py
from dataclasses import dataclass, field
from typing import List, Optional


@dataclass(frozen=True)
class Entry:
    """A single declared variable from an env-style file."""
    key: str
    value: str
    line: int  # 1-indexed source line of the KEY=value pair
    comment: Optional[str] = None  # preceding comment line, used as description


@dataclass
class CheckResult:
    """Result of comparing a template file against the actual env file."""
    missing: List[Entry] = field(default_factory=list)
    template_path: str = ""
    env_path: str = ""

    @property
    def count(self) -> int:
        return len(self.missing)

    @property
    def ok(self) -> bool:
        return not self.missing

    def to_dict(self) -> dict:
        return {
            "template": self.template_path,
            "env": self.env_path,
            "missing_count": self.count,
            "missing": [
                {"key": e.key, "value": e.value, "line": e.line, "comment": e.comment}
                for e in self.missing
            ],
        }
