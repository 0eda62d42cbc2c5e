"""
MCP Server for the Italian holiday calculator.

Exposes holiday lookups and working-day arithmetic as MCP tools.

Supports two transport modes:
- stdio: For local desktop client integration
- sse: For HTTP-based integration (Docker, remote servers)
"""

import argparse
import logging
import os
from datetime import date

from mcp.server.fastmcp import FastMCP

from italian_holidays.config.manager import ConfigManager
from italian_holidays.core.calculator import WorkdayCalculator
from italian_holidays.core.calendar import HolidayCalendar

logger = logging.getLogger(__name__)

# Load configuration
config_manager = ConfigManager()
config = config_manager.load_config()

# Initialize components
calendar = HolidayCalendar()
calculator = WorkdayCalculator(calendar)


def get_holidays(year: int) -> dict:
    """
    Get the Italian national public holidays for a year.

    Args:
        year: Year to get holidays for (e.g., 2026)

    Returns:
        Dictionary with the year, the holiday count (always 12) and the
        list of holidays with date, Italian and English name.
    """
    try:
        holidays = calendar.holidays_for_year(year)
    except ValueError as e:
        return {"error": str(e)}

    return {
        "year": year,
        "holiday_count": len(holidays),
        "holidays": [h.to_dict() for h in holidays],
    }


def get_easter(year: int) -> dict:
    """
    Compute Easter Sunday and Easter Monday (Pasquetta) for a year.

    Args:
        year: Gregorian year (e.g., 2024)
    """
    try:
        easter = calendar.easter_for_year(year)
    except ValueError as e:
        return {"error": str(e)}

    return {
        "year": year,
        "easter": easter.isoformat(),
        "pasquetta": calendar.monday_after_easter(easter).isoformat(),
    }


def check_day(day: str) -> dict:
    """
    Tell whether a date is a working day, a weekend day or a holiday.

    Args:
        day: Date in format YYYY-MM-DD (e.g., "2024-04-25")
    """
    try:
        parsed = date.fromisoformat(day)
    except ValueError as e:
        return {"error": f"Invalid date format. Use YYYY-MM-DD. Details: {str(e)}"}

    info = calendar.describe_day(parsed, language=config.holiday_language)
    return info.model_dump(mode="json")


def add_working_days(start_date: str, working_days: int) -> dict:
    """
    Add working days to a date, skipping weekends and Italian holidays.

    The start date itself is never counted. Negative values go backwards
    and zero returns the start date unchanged.

    Args:
        start_date: Date in format YYYY-MM-DD (e.g., "2024-01-05")
        working_days: Number of working days to add (negative to subtract)

    Examples:
        >>> add_working_days("2024-01-05", 1)  # Friday -> Monday 2024-01-08
    """
    try:
        start = date.fromisoformat(start_date)
    except ValueError as e:
        return {"error": f"Invalid date format. Use YYYY-MM-DD. Details: {str(e)}"}

    try:
        result = calculator.add_simple(start, working_days)
    except (ValueError, OverflowError) as e:
        logger.error(f"Working-day shift failed: {e}")
        return {"error": str(e)}

    return {
        "start_date": result.start_date.isoformat(),
        "working_days": result.working_days,
        "result_date": result.result_date.isoformat(),
        "calendar_days_elapsed": result.calendar_days_elapsed,
        "skipped_weekend_days": result.skipped_weekend_days,
        "skipped_holidays": [h.to_dict() for h in result.skipped_holidays],
        "warnings": result.warnings,
    }


def count_working_days(start_date: str, end_date: str) -> dict:
    """
    Count working days between two dates (inclusive).

    Args:
        start_date: Start date in format YYYY-MM-DD
        end_date: End date in format YYYY-MM-DD
    """
    try:
        start = date.fromisoformat(start_date)
        end = date.fromisoformat(end_date)
    except ValueError as e:
        return {"error": f"Invalid date format. Use YYYY-MM-DD. Details: {str(e)}"}

    if end < start:
        return {"error": "end_date must be after or equal to start_date"}

    result = calculator.count_simple(start, end)
    return {
        "start_date": result.start_date.isoformat(),
        "end_date": result.end_date.isoformat(),
        "calendar_days": result.calendar_days,
        "weekend_days": result.weekend_days,
        "holidays_count": result.holidays_count,
        "working_days": result.working_days,
        "holidays": [h.to_dict() for h in result.holidays],
    }


TOOLS = [get_holidays, get_easter, check_day, add_working_days, count_working_days]


def create_mcp_server(host: str = "127.0.0.1", port: int = 8000) -> FastMCP:
    """Create and configure the MCP server with tools."""
    mcp = FastMCP("Italian Holidays", host=host, port=port)
    for tool in TOOLS:
        mcp.tool()(tool)
    return mcp


def main():
    """Run the MCP server with configurable transport.

    Transport can be set via:
    - Command line: --transport sse --port 8080
    - Environment: MCP_TRANSPORT=sse MCP_PORT=8080 MCP_HOST=0.0.0.0
    """
    parser = argparse.ArgumentParser(description="Italian Holidays MCP Server")
    parser.add_argument(
        "--transport",
        choices=["stdio", "sse"],
        default=os.environ.get("MCP_TRANSPORT", "stdio"),
        help="Transport mode: stdio (default) or sse for HTTP",
    )
    parser.add_argument(
        "--host",
        default=os.environ.get("MCP_HOST", "0.0.0.0"),
        help="Host to bind to (SSE mode only, default: 0.0.0.0)",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=int(os.environ.get("MCP_PORT", "8080")),
        help="Port to listen on (SSE mode only, default: 8080)",
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    logger.info(f"Starting MCP server with {args.transport} transport")

    mcp = create_mcp_server(host=args.host, port=args.port)
    mcp.run(transport=args.transport)


if __name__ == "__main__":
    main()
