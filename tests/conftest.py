from datetime import date

import pytest

from kundali.core.chart import BirthDetails

# Pinned "today" so dasha labels do not drift with the calendar
TODAY = date(2026, 10, 19)


def _angle_diff(a: float, b: float) -> float:
    delta = abs((a - b) % 360.0)
    return 360.0 - delta if delta > 180 else delta


@pytest.fixture
def angle_diff():
    """Smallest separation between two longitudes, in degrees."""
    return _angle_diff


@pytest.fixture
def today():
    return TODAY


@pytest.fixture
def delhi_details():
    return BirthDetails(date="1990-06-15", time="14:30", place="New Delhi",
                        latitude=28.6139, longitude=77.2090)
