"""Shared test fixtures."""

from datetime import datetime, timezone

import pytest


@pytest.fixture
def y2k():
    return datetime(2000, 1, 1, tzinfo=timezone.utc)


@pytest.fixture
def midsummer_2023():
    """Exactly half of the way through 2023."""
    return datetime(2023, 7, 2, 12, 0, 0, tzinfo=timezone.utc)


SAMPLE_DATES = [
    datetime(1970, 1, 1, tzinfo=timezone.utc),
    datetime(1999, 12, 31, 23, 59, 59, tzinfo=timezone.utc),
    datetime(2000, 2, 29, 6, 30, tzinfo=timezone.utc),
    datetime(2001, 1, 1, tzinfo=timezone.utc),
    datetime(2023, 7, 2, 12, 0, tzinfo=timezone.utc),
    datetime(2024, 12, 31, 23, 59, 59, 999000, tzinfo=timezone.utc),
    datetime(1066, 10, 14, 9, 0, tzinfo=timezone.utc),
    datetime(9999, 6, 1, tzinfo=timezone.utc),
]
