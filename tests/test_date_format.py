"""
Tests for date parsing and Italian formatting.
"""

from datetime import date

import pytest

from italian_holidays.core.date_format import (
    format_date,
    format_italian,
    format_italian_short,
    parse_date,
)
from italian_holidays.data.schemas import DateFormat


class TestParseDate:
    """Tests for parse_date."""

    @pytest.mark.parametrize("text", ["2024-04-25", "25/04/2024", "25.04.2024", " 2024-04-25 "])
    def test_accepted_formats(self, text):
        assert parse_date(text) == date(2024, 4, 25)

    def test_rejects_unknown_format(self):
        with pytest.raises(ValueError, match="Invalid date format"):
            parse_date("2024/04/25")

    def test_rejects_impossible_date(self):
        with pytest.raises(ValueError):
            parse_date("31/02/2024")


class TestFormatting:
    """Tests for Italian formatting."""

    def test_italian(self):
        assert format_italian(date(2024, 3, 5)) == "05/03/2024"

    def test_italian_short(self):
        assert format_italian_short(date(2024, 3, 5)) == "05/03/24"
        assert format_italian_short(date(2000, 12, 26)) == "26/12/00"

    def test_format_date_styles(self):
        day = date(2024, 12, 8)
        assert format_date(day, DateFormat.ISO) == "2024-12-08"
        assert format_date(day, DateFormat.ITALIAN) == "08/12/2024"
        assert format_date(day, DateFormat.ITALIAN_SHORT) == "08/12/24"
