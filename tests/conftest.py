"""
Shared test fixtures and configuration.
"""

from pathlib import Path

import pytest


@pytest.fixture
def make_tree(tmp_path: Path):
    """Create files (and their parent dirs) under ``tmp_path``.

    Paths ending in ``/`` are created as directories.
    """

    def _make(*paths: str) -> Path:
        for rel in paths:
            target = tmp_path / rel
            if rel.endswith("/"):
                target.mkdir(parents=True, exist_ok=True)
            else:
                target.parent.mkdir(parents=True, exist_ok=True)
                target.write_text("")
        return tmp_path

    return _make
