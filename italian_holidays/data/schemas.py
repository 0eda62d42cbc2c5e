"""
Data models for the Italian holiday calculator using Pydantic.
"""

from datetime import date, datetime
from enum import Enum
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class DayType(str, Enum):
    """Classification of a single calendar day."""

    WORKING_DAY = "working_day"
    WEEKEND = "weekend"
    HOLIDAY = "holiday"
    WEEKEND_HOLIDAY = "weekend_holiday"


class DateFormat(str, Enum):
    """Date rendering styles for console and export output."""

    ISO = "iso"  # 2024-03-31
    ITALIAN = "italian"  # 31/03/2024
    ITALIAN_SHORT = "italian_short"  # 31/03/24


class Holiday(BaseModel):
    """Represents an Italian public holiday."""

    model_config = ConfigDict(frozen=True)

    holiday_date: date = Field(..., description="Date of the holiday")
    name: str = Field(..., description="Name of the holiday in Italian")
    name_english: Optional[str] = Field(default=None, description="Name in English")
    is_movable: bool = Field(default=False, description="Whether the date depends on Easter")

    def to_dict(self) -> dict:
        """JSON-serializable form used by the API, MCP tools and exports."""
        return {
            "date": self.holiday_date.isoformat(),
            "name": self.name,
            "name_english": self.name_english,
            "is_movable": self.is_movable,
        }


class DayInfo(BaseModel):
    """Classification of a single date."""

    day: date = Field(..., description="The classified date")
    weekday: str = Field(..., description="English weekday name")
    day_type: DayType = Field(..., description="Overall classification")
    is_weekend: bool
    is_holiday: bool
    is_working_day: bool
    holiday_names: List[str] = Field(default_factory=list, description="Names of matching holidays")


class WorkingDaysRequest(BaseModel):
    """Request to move a date by a number of working days."""

    start_date: date = Field(..., description="Date to start counting from")
    working_days: int = Field(..., description="Working days to add; negative values subtract")


class WorkingDaysResult(BaseModel):
    """Result of adding or subtracting working days."""

    start_date: date
    working_days: int
    result_date: date
    calendar_days_elapsed: int = Field(..., description="Signed calendar-day distance to result_date")
    skipped_weekend_days: int = Field(..., ge=0)
    skipped_holidays: List[Holiday] = Field(default_factory=list)
    calculation_timestamp: datetime = Field(
        default_factory=datetime.now, description="When the calculation was performed"
    )
    warnings: List[str] = Field(default_factory=list)


class WorkdayCountRequest(BaseModel):
    """Request model for counting working days in an inclusive range."""

    start_date: date = Field(..., description="Start date of the period")
    end_date: date = Field(..., description="End date of the period")

    @field_validator("end_date")
    @classmethod
    def validate_date_range(cls, v: date, info) -> date:
        """Ensure end_date is after start_date."""
        if "start_date" in info.data and v < info.data["start_date"]:
            raise ValueError("end_date must be after or equal to start_date")
        return v


class WorkdayCountResult(BaseModel):
    """Complete result of a working-day count."""

    start_date: date
    end_date: date
    calendar_days: int = Field(..., ge=0, description="Total calendar days in range")
    weekend_days: int = Field(..., ge=0, description="Saturdays and Sundays in range")
    holidays_count: int = Field(..., ge=0, description="Holidays falling on weekdays")
    working_days: int = Field(..., ge=0, description="Calculated working days")
    holidays: List[Holiday] = Field(default_factory=list, description="Holidays in the range")
    weekends_detail: Dict[str, int] = Field(
        default_factory=dict, description="Breakdown of Saturdays and Sundays"
    )
    calculation_timestamp: datetime = Field(default_factory=datetime.now)


class Config(BaseModel):
    """Configuration for the Italian holiday calculator."""

    holiday_language: str = Field(default="it", description="Language for holiday names: it or en")
    output_format: str = Field(default="json", description="Default output format: json or csv")
    output_directory: str = Field(default="results", description="Directory for output files")
    date_format: DateFormat = Field(default=DateFormat.ITALIAN, description="Date rendering style")
    api_host: str = Field(default="0.0.0.0", description="API server host")
    api_port: int = Field(default=8000, ge=1, le=65535, description="API server port")

    @field_validator("holiday_language")
    @classmethod
    def validate_language(cls, v: str) -> str:
        """Only Italian and English names are available."""
        v = v.lower()
        if v not in ("it", "en"):
            raise ValueError("holiday_language must be 'it' or 'en'")
        return v

    @field_validator("output_format")
    @classmethod
    def validate_output_format(cls, v: str) -> str:
        if v not in ("json", "csv"):
            raise ValueError("output_format must be 'json' or 'csv'")
        return v
