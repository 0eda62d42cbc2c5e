"""
Data models and reference tables for the Italian holiday calculator.
"""

from italian_holidays.data.schemas import (
    Config,
    DateFormat,
    DayInfo,
    DayType,
    Holiday,
    WorkdayCountRequest,
    WorkdayCountResult,
    WorkingDaysRequest,
    WorkingDaysResult,
)

__all__ = [
    "Config",
    "DateFormat",
    "DayInfo",
    "DayType",
    "Holiday",
    "WorkdayCountRequest",
    "WorkdayCountResult",
    "WorkingDaysRequest",
    "WorkingDaysResult",
]
