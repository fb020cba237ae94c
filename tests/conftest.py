"""Shared pytest fixtures for pratt tests."""

from pathlib import Path

import pytest

MANIFEST_TEXT = """
[parser]
capacity = 16

[[cases]]
input = "a+b*c"
expected = "abc*+"

[[cases]]
input = "(a"
error = "unmatched_delimiter"
"""


@pytest.fixture
def manifest_path(tmp_path: Path) -> Path:
    """Write a valid pratt.toml and return its path."""
    path = tmp_path / "pratt.toml"
    path.write_text(MANIFEST_TEXT)
    return path


@pytest.fixture
def write_manifest(tmp_path: Path):
    """Return a helper that writes pratt.toml with the given text."""

    def _write(text: str) -> Path:
        path = tmp_path / "pratt.toml"
        path.write_text(text)
        return path

    return _write
