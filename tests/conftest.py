"""
Pytest configuration and shared fixtures.
"""

import tempfile
from pathlib import Path

import pytest

from chuk_mcp_piano.core import Accidental, Note, NoteLetter


@pytest.fixture
def temp_dir() -> Path:
    """Create a temporary directory for test outputs."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def all_notes() -> list[Note]:
    """Every letter/accidental combination in octaves 0-8."""
    return [
        Note(letter, accidental, octave)
        for octave in range(9)
        for letter in NoteLetter
        for accidental in Accidental
    ]
