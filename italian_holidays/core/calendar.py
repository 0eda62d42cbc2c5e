"""
Italian holiday calendar: holiday, weekend and working-day checks plus
working-day arithmetic.
"""

import logging
from datetime import date, timedelta
from functools import lru_cache
from typing import List, Tuple

from italian_holidays.core.easter import (
    easter_for_year,
    monday_after_easter,
    monday_after_easter_for_year,
)
from italian_holidays.data.holiday_data import (
    EASTER_NAMES,
    FIXED_HOLIDAYS,
    PASQUETTA_NAMES,
    WEEKDAY_NAMES,
)
from italian_holidays.data.schemas import DayInfo, DayType, Holiday

logger = logging.getLogger(__name__)


def same_day_and_month(first: date, second: date) -> bool:
    """Check if two dates share the same day and month, ignoring the year."""
    return first.month == second.month and first.day == second.day


def fixed_holidays(year: int) -> List[date]:
    """Return the ten fixed holidays instantiated for ``year``."""
    return [date(year, month, day) for month, day, _, _ in FIXED_HOLIDAYS]


@lru_cache(maxsize=256)
def _holidays_for_year(year: int) -> Tuple[Holiday, ...]:
    entries = [
        Holiday(holiday_date=date(year, month, day), name=name, name_english=english)
        for month, day, name, english in FIXED_HOLIDAYS
    ]
    easter = easter_for_year(year)
    entries.append(
        Holiday(
            holiday_date=easter,
            name=EASTER_NAMES[0],
            name_english=EASTER_NAMES[1],
            is_movable=True,
        )
    )
    entries.append(
        Holiday(
            holiday_date=monday_after_easter(easter),
            name=PASQUETTA_NAMES[0],
            name_english=PASQUETTA_NAMES[1],
            is_movable=True,
        )
    )
    # Stable sort: coinciding holidays are both kept
    return tuple(sorted(entries, key=lambda h: h.holiday_date))


class HolidayCalendar:
    """
    Stateless calendar of Italian national public holidays.

    Holidays are the ten fixed dates in ``FIXED_HOLIDAYS`` plus Easter
    Sunday and Easter Monday, always twelve entries per year. Overlapping
    dates are not merged.
    """

    def is_holiday(self, day: date) -> bool:
        """
        Check if a given date is a holiday.

        Args:
            day: Date to check.

        Returns:
            True if the date matches a fixed holiday, Easter or Pasquetta.
        """
        for holiday in fixed_holidays(day.year):
            if same_day_and_month(day, holiday):
                return True

        easter = easter_for_year(day.year)
        return same_day_and_month(day, easter) or same_day_and_month(
            day, monday_after_easter(easter)
        )

    def is_weekend(self, day: date) -> bool:
        """Check if a given date is a Saturday or Sunday."""
        return day.weekday() >= 5

    def is_weekend_or_holiday(self, day: date) -> bool:
        return self.is_weekend(day) or self.is_holiday(day)

    def is_working_day(self, day: date) -> bool:
        return not self.is_weekend_or_holiday(day)

    def easter_for_year(self, year: int) -> date:
        return easter_for_year(year)

    def monday_after_easter(self, easter: date) -> date:
        return monday_after_easter(easter)

    def monday_after_easter_for_year(self, year: int) -> date:
        return monday_after_easter_for_year(year)

    def pasquetta_for_year(self, year: int) -> date:
        """Alias for :meth:`monday_after_easter_for_year`."""
        return monday_after_easter_for_year(year)

    def pasquetta_from_pasqua(self, pasqua: date) -> date:
        """Alias for :meth:`monday_after_easter`."""
        return monday_after_easter(pasqua)

    def add_working_days(self, day: date, working_days: int) -> date:
        """
        Move a date by a number of working days.

        Steps one calendar day at a time (backwards for negative values) and
        counts a day only when the day landed on is a working day. The start
        date itself is never inspected, so ``working_days == 0`` returns
        ``day`` unchanged even on a weekend or holiday.

        Args:
            day: Date to start from. It is not modified.
            working_days: Working days to add; negative values subtract.

        Returns:
            A new date ``|working_days|`` working days away from ``day``.
        """
        step = timedelta(days=1 if working_days > 0 else -1)
        target = abs(working_days)
        counter = 0
        current = day
        while counter < target:
            current += step
            if self.is_working_day(current):
                counter += 1

        logger.debug("%s %+d working days -> %s", day, working_days, current)
        return current

    def subtract_working_days(self, day: date, working_days: int) -> date:
        """Equivalent to ``add_working_days(day, -working_days)``."""
        return self.add_working_days(day, -working_days)

    def holidays_for_year(self, year: int) -> List[Holiday]:
        """
        Get all twelve holidays for a year, sorted by date.

        Args:
            year: Year to get holidays for.

        Returns:
            List of Holiday objects; duplicates on shared dates are kept.
        """
        return list(_holidays_for_year(year))

    def holidays_between(self, start: date, end: date) -> List[Holiday]:
        """Get the holidays within an inclusive date range."""
        result = []
        for year in range(start.year, end.year + 1):
            result.extend(
                h for h in _holidays_for_year(year) if start <= h.holiday_date <= end
            )
        return result

    def holiday_names(self, day: date, language: str = "it") -> List[str]:
        """Names of every holiday falling on ``day``."""
        return [
            h.name_english if language == "en" and h.name_english else h.name
            for h in _holidays_for_year(day.year)
            if same_day_and_month(day, h.holiday_date)
        ]

    def describe_day(self, day: date, language: str = "it") -> DayInfo:
        """
        Classify a date as working day, weekend, holiday or both.

        Args:
            day: Date to classify.
            language: Language for holiday names ('it' or 'en').

        Returns:
            DayInfo with the flags and matching holiday names.
        """
        weekend = self.is_weekend(day)
        holiday = self.is_holiday(day)

        if weekend and holiday:
            day_type = DayType.WEEKEND_HOLIDAY
        elif holiday:
            day_type = DayType.HOLIDAY
        elif weekend:
            day_type = DayType.WEEKEND
        else:
            day_type = DayType.WORKING_DAY

        return DayInfo(
            day=day,
            weekday=WEEKDAY_NAMES[day.weekday()],
            day_type=day_type,
            is_weekend=weekend,
            is_holiday=holiday,
            is_working_day=not (weekend or holiday),
            holiday_names=self.holiday_names(day, language) if holiday else [],
        )

    def clear_cache(self) -> None:
        """Clear the per-year holiday cache."""
        _holidays_for_year.cache_clear()
