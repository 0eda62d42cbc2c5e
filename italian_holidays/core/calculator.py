"""
Working-day calculator built on the Italian holiday calendar.
"""

import logging
from datetime import date, timedelta
from typing import List

from italian_holidays.core.calendar import HolidayCalendar
from italian_holidays.data.schemas import (
    Holiday,
    WorkdayCountRequest,
    WorkdayCountResult,
    WorkingDaysRequest,
    WorkingDaysResult,
)

logger = logging.getLogger(__name__)


class WorkdayCalculator:
    """Shifts dates by working days and counts working days in a period."""

    def __init__(self, calendar: HolidayCalendar):
        """
        Initialize the workday calculator.

        Args:
            calendar: Holiday calendar used for day classification.
        """
        self.calendar = calendar

    def shift(self, request: WorkingDaysRequest) -> WorkingDaysResult:
        """
        Add (or subtract, when negative) working days to a start date.

        Args:
            request: WorkingDaysRequest with start date and working days.

        Returns:
            WorkingDaysResult with the target date and the skipped days.
        """
        start = request.start_date
        result_date = self.calendar.add_working_days(start, request.working_days)

        # Days strictly after start, up to and including result_date
        skipped_weekend_days = 0
        skipped_holidays: List[Holiday] = []
        if result_date != start:
            step = timedelta(days=1 if result_date > start else -1)
            lo, hi = sorted((start + step, result_date))
            holidays_in_path = self.calendar.holidays_between(lo, hi)
            current = start
            while current != result_date:
                current += step
                if self.calendar.is_weekend(current):
                    skipped_weekend_days += 1
                elif self.calendar.is_holiday(current):
                    skipped_holidays.extend(
                        h for h in holidays_in_path if h.holiday_date == current
                    )

        warnings = []
        if request.working_days != 0 and not self.calendar.is_working_day(start):
            warnings.append(
                f"Start date {start.isoformat()} is not a working day and is not counted."
            )

        logger.debug(
            "Shifted %s by %d working days to %s", start, request.working_days, result_date
        )

        return WorkingDaysResult(
            start_date=start,
            working_days=request.working_days,
            result_date=result_date,
            calendar_days_elapsed=(result_date - start).days,
            skipped_weekend_days=skipped_weekend_days,
            skipped_holidays=skipped_holidays,
            warnings=warnings,
        )

    def count(self, request: WorkdayCountRequest) -> WorkdayCountResult:
        """
        Count working days in an inclusive date range.

        Args:
            request: WorkdayCountRequest with the date range.

        Returns:
            WorkdayCountResult with calculated working days and breakdown.
        """
        holidays = self.calendar.holidays_between(request.start_date, request.end_date)

        calendar_days = (request.end_date - request.start_date).days + 1

        saturdays = 0
        sundays = 0
        holidays_on_workdays = 0
        working_days = 0

        for offset in range(calendar_days):
            current = request.start_date + timedelta(days=offset)
            weekday = current.weekday()
            if weekday == 5:  # Saturday
                saturdays += 1
            elif weekday == 6:  # Sunday
                sundays += 1
            elif self.calendar.is_holiday(current):
                holidays_on_workdays += 1
            else:
                working_days += 1

        logger.debug(
            "Counted %d working days between %s and %s",
            working_days,
            request.start_date,
            request.end_date,
        )

        return WorkdayCountResult(
            start_date=request.start_date,
            end_date=request.end_date,
            calendar_days=calendar_days,
            weekend_days=saturdays + sundays,
            holidays_count=holidays_on_workdays,
            working_days=working_days,
            holidays=holidays,
            weekends_detail={"saturdays": saturdays, "sundays": sundays},
        )

    def add_simple(self, start_date: date, working_days: int) -> WorkingDaysResult:
        """Simplified shift for CLI and API usage."""
        return self.shift(WorkingDaysRequest(start_date=start_date, working_days=working_days))

    def count_simple(self, start_date: date, end_date: date) -> WorkdayCountResult:
        """Simplified count for CLI and API usage."""
        return self.count(WorkdayCountRequest(start_date=start_date, end_date=end_date))
