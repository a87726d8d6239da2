"""
Pytest Configuration and Shared Fixtures.

This module contains fixtures available to all tests.
"""

from __future__ import annotations

from datetime import date
from pathlib import Path

import pytest

from validated_primitives.config.models import ParsingConfig
from validated_primitives.date_ranges import DateRange


@pytest.fixture
def fixtures_path() -> Path:
    """Directory holding sample configuration files."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def sample_config_path(fixtures_path: Path) -> Path:
    """Path to sample configuration file."""
    return fixtures_path / "sample_config.yaml"


@pytest.fixture
def default_parsing() -> ParsingConfig:
    """Default (month-first) parsing settings."""
    return ParsingConfig()


@pytest.fixture
def day_first_parsing() -> ParsingConfig:
    """European style parsing settings."""
    return ParsingConfig(day_first=True)


@pytest.fixture
def year_2024() -> DateRange:
    """Inclusive range covering calendar year 2024."""
    _, date_range = DateRange.try_create(date(2024, 1, 1), date(2024, 12, 31))
    assert date_range is not None
    return date_range


@pytest.fixture
def year_2024_exclusive() -> DateRange:
    """Range over 2024 excluding both end points."""
    _, date_range = DateRange.try_create(
        date(2024, 1, 1),
        date(2024, 12, 31),
        start_inclusive=False,
        end_inclusive=False,
    )
    assert date_range is not None
    return date_range


@pytest.fixture
def reference_date() -> date:
    """Standard 'today' for tests that compare against the current day."""
    return date(2024, 12, 15)
