"""
conftest.py
-----------
Shared pytest fixtures for paste renamer tests.

Provides fixtures for:
- Temporary directories and vault layouts
- A fixed clock for deterministic names
- Notice capture
"""
import pytest
from datetime import datetime
from pathlib import Path
from tempfile import TemporaryDirectory


# ----- Path Fixtures -----

@pytest.fixture
def tmp_dir():
    """Create a temporary directory for test file operations."""
    with TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def vault(tmp_dir):
    """Vault with an attachments folder and one note."""
    root = tmp_dir / "vault"
    (root / "assets").mkdir(parents=True)
    (root / "Trip.md").write_text(TRIP_NOTE, encoding="utf-8")
    return root


@pytest.fixture
def pasted_image(vault):
    """A freshly pasted image in the vault's assets folder."""
    image = vault / "assets" / "Pasted image 20221026172752.png"
    image.write_bytes(b"\x89PNG\r\n\x1a\n")
    return image


# ----- Clock Fixtures -----

@pytest.fixture
def fixed_now():
    """Fixed time used for DATE placeholders."""
    return datetime(2022, 10, 26, 17, 27, 52)


# ----- Notice Fixtures -----

@pytest.fixture
def notices():
    """List collecting user-visible notices."""
    return []


# ----- Sample Note Content -----

TRIP_NOTE = """---
title: Trip
imageNameKey: lisbon
---

# Trip

Day one:
![[assets/Pasted image 20221026172752.png]]
More text.
"""

# 0-based index of the embed line in TRIP_NOTE
TRIP_LINK_LINE = 8


@pytest.fixture
def trip_link_line():
    return TRIP_LINK_LINE
