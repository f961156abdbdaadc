import sys
import pathlib

# Ensure src/ is importable in tests without installing
SRC = pathlib.Path(__file__).resolve().parents[1] / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

import pytest


class Workspace:
    def __init__(self, root: pathlib.Path):
        self.root = root

    def write(self, name, content):
        path = self.root / name
        path.write_text(content, encoding="utf-8")
        return path

    def read(self, name):
        return (self.root / name).read_text(encoding="utf-8")


@pytest.fixture
def workspace(tmp_path):
    return Workspace(tmp_path)
