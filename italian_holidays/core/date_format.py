"""
Date parsing and Italian-style formatting helpers.
"""

from datetime import date, datetime

from italian_holidays.data.schemas import DateFormat

INPUT_FORMATS = ["%Y-%m-%d", "%d/%m/%Y", "%d.%m.%Y"]


def parse_date(date_str: str) -> date:
    """Parse date string in various formats."""
    for fmt in INPUT_FORMATS:
        try:
            return datetime.strptime(date_str.strip(), fmt).date()
        except ValueError:
            continue
    raise ValueError(
        f"Invalid date format: {date_str}. Use YYYY-MM-DD, DD/MM/YYYY, or DD.MM.YYYY"
    )


def format_italian(day: date) -> str:
    """Format a date as dd/mm/yyyy (UNI EN 28601)."""
    return f"{day.day:02d}/{day.month:02d}/{day.year:04d}"


def format_italian_short(day: date) -> str:
    """Format a date as dd/mm/yy."""
    return f"{day.day:02d}/{day.month:02d}/{day.year % 100:02d}"


def format_date(day: date, style: DateFormat = DateFormat.ITALIAN) -> str:
    if style == DateFormat.ISO:
        return day.isoformat()
    if style == DateFormat.ITALIAN_SHORT:
        return format_italian_short(day)
    return format_italian(day)
