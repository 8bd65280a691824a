"""Shared test fixtures and configuration."""

import sys
from datetime import datetime, timezone
from pathlib import Path

import pytest

# Add src and the project root (for media_format.py) to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))
sys.path.insert(0, str(Path(__file__).parent.parent / 'src'))


@pytest.fixture
def fixed_now():
    """A fixed UTC instant for timestamp tests."""
    return datetime(2024, 12, 1, 10, 30, 15, 123000, tzinfo=timezone.utc)
