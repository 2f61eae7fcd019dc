"""Shared fixtures for the cuebin test suite.

All sheets and bin files are written under pytest's tmp_path so every test
works on its own directory tree.
"""

import pathlib
import textwrap

import pytest

SECTOR = 2352


@pytest.fixture
def write_sheet(tmp_path):
    """Write a cue sheet into tmp_path and return its path."""

    def _write(content: str, name: str = "disc.cue") -> pathlib.Path:
        path = tmp_path / name
        path.write_text(textwrap.dedent(content).lstrip(), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def make_bin(tmp_path):
    """Create a bin file of the given number of sectors filled with one byte."""

    def _make(name: str, sectors: int = 1, fill: int = 0) -> pathlib.Path:
        path = tmp_path / name
        path.write_bytes(bytes([fill]) * (SECTOR * sectors))
        return path

    return _make
