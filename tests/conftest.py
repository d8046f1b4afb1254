"""Pytest configuration and fixtures for Timespan tests."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Add the parent directory to sys.path so timespan can be imported
# without needing to install the package
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


@pytest.fixture
def one_day_nanos() -> int:
    """Nanoseconds in 24 hours."""
    return 86_400_000_000_000
