"""
Core business logic for Italian holidays and working days.
"""

from italian_holidays.core.calculator import WorkdayCalculator
from italian_holidays.core.calendar import HolidayCalendar, fixed_holidays, same_day_and_month
from italian_holidays.core.easter import (
    easter_for_year,
    monday_after_easter,
    monday_after_easter_for_year,
    pasquetta_for_year,
    pasquetta_from_pasqua,
)

__all__ = [
    "HolidayCalendar",
    "WorkdayCalculator",
    "easter_for_year",
    "fixed_holidays",
    "monday_after_easter",
    "monday_after_easter_for_year",
    "pasquetta_for_year",
    "pasquetta_from_pasqua",
    "same_day_and_month",
]
