"""
FastAPI REST API for the Italian holiday calculator.
"""

from datetime import date
from typing import List, Optional

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field

from italian_holidays import __version__
from italian_holidays.config.manager import ConfigManager
from italian_holidays.core.calculator import WorkdayCalculator
from italian_holidays.core.calendar import HolidayCalendar
from italian_holidays.data.schemas import DayInfo

# Load configuration
config_manager = ConfigManager()
config = config_manager.load_config()

# Initialize components
calendar = HolidayCalendar()
calculator = WorkdayCalculator(calendar)

MIN_YEAR = 1583  # first full Gregorian year
MAX_YEAR = 9999


# API Models
class AddWorkingDaysRequest(BaseModel):
    """Request model for adding working days."""

    start_date: date = Field(..., description="Date to start counting from")
    working_days: int = Field(..., description="Working days to add; negative values subtract")


class AddWorkingDaysResponse(BaseModel):
    """Response model for adding working days."""

    start_date: date
    working_days: int
    result_date: date
    calendar_days_elapsed: int
    skipped_weekend_days: int
    skipped_holidays: List[dict]
    warnings: List[str]


class CountRequest(BaseModel):
    """Request model for counting working days."""

    start_date: date = Field(..., description="Start date of the period")
    end_date: date = Field(..., description="End date of the period")


class CountResponse(BaseModel):
    """Response model for counting working days."""

    start_date: date
    end_date: date
    calendar_days: int
    weekend_days: int
    saturdays: int
    sundays: int
    holidays_count: int
    working_days: int
    holidays: List[dict]


class HolidayResponse(BaseModel):
    """Response model for a single holiday."""

    date: date
    name: str
    name_english: Optional[str]
    is_movable: bool


class EasterResponse(BaseModel):
    """Response model for Easter dates."""

    year: int
    easter: date
    pasquetta: date


def _validate_year(year: int) -> None:
    if year < MIN_YEAR or year > MAX_YEAR:
        raise HTTPException(
            status_code=400,
            detail=f"Year must be between {MIN_YEAR} and {MAX_YEAR}",
        )


# FastAPI app
app = FastAPI(
    title="Italian Holidays API",
    description="Italian public holidays, Easter and working-day arithmetic",
    version=__version__,
)


@app.get("/")
async def root():
    """API root endpoint with basic info."""
    return {
        "name": "Italian Holidays API",
        "version": __version__,
        "endpoints": {
            "GET /holidays/{year}": "List the holidays for a year",
            "GET /easter/{year}": "Easter and Pasquetta for a year",
            "GET /days/{day}": "Classify a date",
            "POST /working-days/add": "Add or subtract working days",
            "POST /working-days/count": "Count working days in a period",
        },
    }


@app.get("/holidays/{year}", response_model=List[HolidayResponse])
async def get_holidays(year: int):
    """
    Get all twelve holidays for a specific year.

    Args:
        year: Year (e.g., 2024, 2025)
    """
    _validate_year(year)

    return [HolidayResponse(**h.to_dict()) for h in calendar.holidays_for_year(year)]


@app.get("/easter/{year}", response_model=EasterResponse)
async def get_easter(year: int):
    """Get Easter Sunday and Easter Monday for a year."""
    _validate_year(year)

    easter = calendar.easter_for_year(year)
    return EasterResponse(year=year, easter=easter, pasquetta=calendar.monday_after_easter(easter))


@app.get("/days/{day}", response_model=DayInfo)
async def check_day(day: date):
    """Classify a date as working day, weekend or holiday."""
    return calendar.describe_day(day, language=config.holiday_language)


@app.post("/working-days/add", response_model=AddWorkingDaysResponse)
async def add_working_days(request: AddWorkingDaysRequest):
    """
    Add working days to a date.

    Negative values step backwards. Zero returns the start date unchanged.
    """
    try:
        result = calculator.add_simple(request.start_date, request.working_days)
    except (ValueError, OverflowError) as e:
        raise HTTPException(status_code=400, detail=str(e))

    return AddWorkingDaysResponse(
        start_date=result.start_date,
        working_days=result.working_days,
        result_date=result.result_date,
        calendar_days_elapsed=result.calendar_days_elapsed,
        skipped_weekend_days=result.skipped_weekend_days,
        skipped_holidays=[h.to_dict() for h in result.skipped_holidays],
        warnings=result.warnings,
    )


@app.post("/working-days/count", response_model=CountResponse)
async def count_working_days(request: CountRequest):
    """Count working days between two dates (inclusive)."""
    if request.end_date < request.start_date:
        raise HTTPException(
            status_code=400,
            detail="end_date must be after or equal to start_date",
        )

    result = calculator.count_simple(request.start_date, request.end_date)

    return CountResponse(
        start_date=result.start_date,
        end_date=result.end_date,
        calendar_days=result.calendar_days,
        weekend_days=result.weekend_days,
        saturdays=result.weekends_detail.get("saturdays", 0),
        sundays=result.weekends_detail.get("sundays", 0),
        holidays_count=result.holidays_count,
        working_days=result.working_days,
        holidays=[h.to_dict() for h in result.holidays],
    )


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "version": __version__}
