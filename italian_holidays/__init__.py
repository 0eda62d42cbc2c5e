"""
Italian public holidays, Easter computation and working-day arithmetic.
"""

from italian_holidays.core import (
    HolidayCalendar,
    WorkdayCalculator,
    easter_for_year,
    fixed_holidays,
    monday_after_easter,
    monday_after_easter_for_year,
    pasquetta_for_year,
    pasquetta_from_pasqua,
    same_day_and_month,
)
from italian_holidays.core.date_format import format_italian, format_italian_short, parse_date

__version__ = "0.1.0"

__all__ = [
    "HolidayCalendar",
    "WorkdayCalculator",
    "easter_for_year",
    "fixed_holidays",
    "format_italian",
    "format_italian_short",
    "monday_after_easter",
    "monday_after_easter_for_year",
    "parse_date",
    "pasquetta_for_year",
    "pasquetta_from_pasqua",
    "same_day_and_month",
]
