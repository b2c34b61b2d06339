"""Shared pytest fixtures."""

from datetime import datetime, timezone

import pytest

from timeunit import TimeUnit


@pytest.fixture
def ninety_minutes() -> TimeUnit:
    """A TimeUnit whose preferred unit is not its largest whole unit."""
    return TimeUnit.parse("90m")


@pytest.fixture
def reference_time() -> datetime:
    """A fixed, timezone-aware starting point for date math."""
    return datetime(2024, 1, 1, 0, 0, tzinfo=timezone.utc)
