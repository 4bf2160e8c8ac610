"""Pytest configuration and fixtures for GrimRepo tests."""

from pathlib import Path
from typing import List

import pytest


@pytest.fixture
def full_dirs() -> List[str]:
    """Every standard directory."""
    return [
        "src/",
        "tests/",
        "docs/",
        "examples/",
        ".gitlab/",
        ".github/",
        "scripts/",
        ".well-known/",
    ]


@pytest.fixture
def full_files() -> List[str]:
    """Every standard community file."""
    return [
        "LICENSE",
        "LICENSE.txt",
        "README.md",
        "CONTRIBUTING.md",
        "CODE_OF_CONDUCT.md",
        "SECURITY.md",
        "CHANGELOG.md",
        "MAINTAINERS.md",
        ".well-known/security.txt",
    ]


@pytest.fixture
def rsr_files() -> List[str]:
    """The minimum file set that passes the RSR gate."""
    return [
        "README.md",
        "LICENSE.txt",
        "SECURITY.md",
        "CONTRIBUTING.md",
        "CODE_OF_CONDUCT.md",
    ]


@pytest.fixture
def make_repo(tmp_path):
    """Create a repository tree on disk from directory and file lists."""
    def _make(dirs: List[str], files: List[str]) -> Path:
        root = tmp_path / "repo"
        root.mkdir()
        for d in dirs:
            (root / d).mkdir(parents=True, exist_ok=True)
        for f in files:
            path = root / f
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(f"{f}\n", encoding="utf-8")
        return root
    return _make
