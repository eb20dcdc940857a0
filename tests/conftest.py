"""
Pytest configuration and shared fixtures.
"""

import tempfile
from pathlib import Path

import pytest

from chuk_mcp_scales.catalog import ScaleCatalog


@pytest.fixture
def temp_dir() -> Path:
    """Create a temporary directory for test outputs."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def temp_midi_path(temp_dir: Path) -> Path:
    """Path for a temporary MIDI file."""
    return temp_dir / "test.mid"


@pytest.fixture
def library_path() -> Path:
    """Path to the built-in scale library."""
    return Path(__file__).parent.parent / "src" / "chuk_mcp_scales" / "catalog" / "library"


@pytest.fixture
def catalog(temp_dir: Path, library_path: Path) -> ScaleCatalog:
    """Empty catalog backed by a temporary directory."""
    return ScaleCatalog(temp_dir / "scales", library_path)
