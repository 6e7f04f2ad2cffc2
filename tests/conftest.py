"""Pytest configuration and fixtures for datevalue tests."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Add the parent directory to sys.path so datevalue can be imported
# without needing to install the package
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from datevalue import DateValue  # noqa: E402


@pytest.fixture
def new_year_2000() -> DateValue:
    """Saturday, January 1, 2000."""
    return DateValue(1, 1, 2000)


@pytest.fixture
def leap_day() -> DateValue:
    """Thursday, February 29, 2024."""
    return DateValue(2, 29, 2024)
