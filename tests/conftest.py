"""
Shared fixtures for the Italian holiday calculator tests.
"""

import pytest

from italian_holidays.core.calculator import WorkdayCalculator
from italian_holidays.core.calendar import HolidayCalendar


@pytest.fixture
def calendar():
    """Create a HolidayCalendar instance."""
    return HolidayCalendar()


@pytest.fixture
def calculator(calendar):
    """Create a WorkdayCalculator instance."""
    return WorkdayCalculator(calendar)
