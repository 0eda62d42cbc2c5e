"""
Tests for the workday calculator.
"""

from datetime import date

import pytest
from pydantic import ValidationError

from italian_holidays.data.schemas import WorkdayCountRequest, WorkingDaysRequest


class TestShift:
    """Tests for WorkdayCalculator.shift."""

    def test_over_easter(self, calculator):
        """Friday before Easter 2024 plus one working day."""
        result = calculator.shift(
            WorkingDaysRequest(start_date=date(2024, 3, 29), working_days=1)
        )

        assert result.result_date == date(2024, 4, 2)
        assert result.calendar_days_elapsed == 4
        # Easter Sunday counts as a weekend day
        assert result.skipped_weekend_days == 2
        assert [h.holiday_date for h in result.skipped_holidays] == [date(2024, 4, 1)]
        assert result.warnings == []

    def test_backwards_over_easter(self, calculator):
        result = calculator.add_simple(date(2024, 4, 2), -1)

        assert result.result_date == date(2024, 3, 29)
        assert result.calendar_days_elapsed == -4
        assert result.skipped_weekend_days == 2
        assert len(result.skipped_holidays) == 1

    def test_zero(self, calculator):
        result = calculator.add_simple(date(2024, 1, 6), 0)

        assert result.result_date == date(2024, 1, 6)
        assert result.calendar_days_elapsed == 0
        assert result.skipped_weekend_days == 0
        assert result.skipped_holidays == []
        assert result.warnings == []

    def test_warns_on_non_working_start(self, calculator):
        result = calculator.add_simple(date(2024, 1, 6), 1)

        assert result.result_date == date(2024, 1, 8)
        assert len(result.warnings) == 1
        assert "not a working day" in result.warnings[0]


class TestCount:
    """Tests for WorkdayCalculator.count."""

    def test_first_week_2024(self, calculator):
        """New Year on Monday, Epiphany on Saturday."""
        result = calculator.count_simple(date(2024, 1, 1), date(2024, 1, 7))

        assert result.calendar_days == 7
        assert result.weekend_days == 2
        assert result.holidays_count == 1
        assert result.working_days == 4
        assert len(result.holidays) == 2

    def test_april_2024(self, calculator):
        result = calculator.count(
            WorkdayCountRequest(start_date=date(2024, 4, 1), end_date=date(2024, 4, 30))
        )

        assert result.calendar_days == 30
        assert result.weekend_days == 8
        assert result.weekends_detail == {"saturdays": 4, "sundays": 4}
        assert result.holidays_count == 2
        assert result.working_days == 20

    def test_full_year_2024(self, calculator):
        result = calculator.count_simple(date(2024, 1, 1), date(2024, 12, 31))

        assert result.calendar_days == 366
        assert result.weekend_days == 104
        assert result.holidays_count == 8
        assert result.working_days == 254
        assert len(result.holidays) == 12

    def test_single_holiday(self, calculator):
        result = calculator.count_simple(date(2024, 4, 25), date(2024, 4, 25))

        assert result.calendar_days == 1
        assert result.working_days == 0
        assert result.holidays_count == 1

    def test_consistent_with_shift(self, calculator):
        """Counting from the day after start to the shifted date yields n."""
        start = date(2024, 3, 1)
        shifted = calculator.add_simple(start, 45).result_date
        result = calculator.count_simple(date(2024, 3, 2), shifted)
        assert result.working_days == 45

    def test_range_ending_on_last_representable_date(self, calculator):
        """Counting up to 9999-12-31 never steps past the end date."""
        result = calculator.count_simple(date(9999, 12, 27), date(9999, 12, 31))

        assert result.calendar_days == 5
        assert result.holidays_count + result.working_days + result.weekend_days == 5

    def test_rejects_inverted_range(self):
        with pytest.raises(ValidationError):
            WorkdayCountRequest(start_date=date(2024, 5, 1), end_date=date(2024, 4, 1))
