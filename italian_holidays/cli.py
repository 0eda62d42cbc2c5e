"""
CLI interface for the Italian holiday calculator.
"""

import logging
import sys
from datetime import date
from typing import Optional

import click

from italian_holidays import __version__
from italian_holidays.config.manager import ConfigManager
from italian_holidays.core.calculator import WorkdayCalculator
from italian_holidays.core.calendar import HolidayCalendar
from italian_holidays.core.date_format import parse_date
from italian_holidays.data.schemas import Config
from italian_holidays.output.exporter import ResultExporter
from italian_holidays.output.formatter import ConsoleFormatter

logging.basicConfig(
    level=logging.WARNING,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

FORMAT_CHOICES = click.Choice(["console", "json", "csv", "both"])


def load_config(config_path: Optional[str]) -> Config:
    """Load configuration from file and environment."""
    return ConfigManager(config_path).load_config()


def make_formatter(cfg: Config) -> ConsoleFormatter:
    return ConsoleFormatter(language=cfg.holiday_language, date_format=cfg.date_format)


def resolve_format(format: Optional[str], output: Optional[str], cfg: Config) -> str:
    """An explicit --format wins; a bare --output exports in the configured format."""
    if format:
        return format
    return cfg.output_format if output else "console"


def fail(formatter: ConsoleFormatter, error: Exception) -> None:
    """Report an error and exit with status 1."""
    if isinstance(error, ValueError):
        formatter.print_error(str(error))
    else:
        formatter.print_error(f"Unexpected error: {error}")
        logger.debug("Detailed error:", exc_info=error)
    sys.exit(1)


@click.group()
@click.version_option(version=__version__, prog_name="italian-holidays")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
def main(verbose):
    """Italian Holidays - public holidays, Easter and working-day arithmetic."""
    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)


@main.command()
@click.option(
    "--year", "-y",
    type=int,
    default=None,
    help="Year to show holidays for (default: current year)",
)
@click.option(
    "--output", "-o",
    type=click.Path(),
    help="Output file path; written as JSON or CSV per output.format in config (optional)",
)
@click.option(
    "--config", "-c",
    type=click.Path(exists=True),
    help="Path to config file (optional)",
)
def holidays(year, output, config):
    """List the twelve national holidays for a year."""
    formatter = ConsoleFormatter()

    try:
        cfg = load_config(config)
        formatter = make_formatter(cfg)

        if year is None:
            year = date.today().year

        holiday_list = HolidayCalendar().holidays_for_year(year)
        formatter.print_holidays_for_year(year, holiday_list)

        if output:
            exporter = ResultExporter(output_directory=cfg.output_directory)
            path = exporter.export_holidays(holiday_list, cfg.output_format, output)
            formatter.print_success(f"Holidays saved to {path}")

    except Exception as e:
        fail(formatter, e)


@main.command()
@click.option(
    "--year", "-y",
    type=int,
    default=None,
    help="Year to compute Easter for (default: current year)",
)
@click.option(
    "--config", "-c",
    type=click.Path(exists=True),
    help="Path to config file (optional)",
)
def easter(year, config):
    """Show Easter Sunday and Pasquetta for a year."""
    formatter = ConsoleFormatter()

    try:
        formatter = make_formatter(load_config(config))

        if year is None:
            year = date.today().year

        calendar = HolidayCalendar()
        easter_date = calendar.easter_for_year(year)
        formatter.print_easter(year, easter_date, calendar.monday_after_easter(easter_date))

    except Exception as e:
        fail(formatter, e)


@main.command()
@click.argument("day")
@click.option(
    "--config", "-c",
    type=click.Path(exists=True),
    help="Path to config file (optional)",
)
def check(day, config):
    """Tell whether DAY is a working day, weekend or holiday."""
    formatter = ConsoleFormatter()

    try:
        cfg = load_config(config)
        formatter = make_formatter(cfg)

        info = HolidayCalendar().describe_day(parse_date(day), language=cfg.holiday_language)
        formatter.print_day_info(info)

    except Exception as e:
        fail(formatter, e)


def _run_shift(start, working_days, output, format, config):
    formatter = ConsoleFormatter()

    try:
        cfg = load_config(config)
        formatter = make_formatter(cfg)

        calculator = WorkdayCalculator(HolidayCalendar())
        result = calculator.add_simple(parse_date(start), working_days)
        format = resolve_format(format, output, cfg)

        if format in ("console", "both"):
            formatter.print_shift_result(result)

        _export(formatter, cfg, result, output, format)

    except Exception as e:
        fail(formatter, e)


def _export(formatter, cfg, result, output, format):
    if format not in ("json", "csv", "both"):
        return

    exporter = ResultExporter(output_directory=cfg.output_directory)
    if format == "json":
        path = exporter.export_json(result, output)
        formatter.print_success(f"Result saved to {path}")
    elif format == "csv":
        path = exporter.export_csv(result, output)
        formatter.print_success(f"Result saved to {path}")
    else:
        json_path, csv_path = exporter.export_both(result)
        formatter.print_success(f"Results saved to:\n  - {json_path}\n  - {csv_path}")


@main.command()
@click.argument("start")
@click.argument("working_days", type=int)
@click.option("--output", "-o", type=click.Path(), help="Output file path (optional)")
@click.option(
    "--format", "-f",
    type=FORMAT_CHOICES,
    default=None,
    help="Output format (default: console, or output.format from config when --output is given)",
)
@click.option(
    "--config", "-c",
    type=click.Path(exists=True),
    help="Path to config file (optional)",
)
def add(start, working_days, output, format, config):
    """Add WORKING_DAYS working days to START.

    Negative values go backwards; pass them after `--`, e.g. `add -- 2024-01-08 -1`.
    """
    _run_shift(start, working_days, output, format, config)


@main.command()
@click.argument("start")
@click.argument("working_days", type=int)
@click.option("--output", "-o", type=click.Path(), help="Output file path (optional)")
@click.option(
    "--format", "-f",
    type=FORMAT_CHOICES,
    default=None,
    help="Output format (default: console, or output.format from config when --output is given)",
)
@click.option(
    "--config", "-c",
    type=click.Path(exists=True),
    help="Path to config file (optional)",
)
def subtract(start, working_days, output, format, config):
    """Subtract WORKING_DAYS working days from START."""
    _run_shift(start, -working_days, output, format, config)


@main.command()
@click.argument("start")
@click.argument("end")
@click.option("--output", "-o", type=click.Path(), help="Output file path (optional)")
@click.option(
    "--format", "-f",
    type=FORMAT_CHOICES,
    default=None,
    help="Output format (default: console, or output.format from config when --output is given)",
)
@click.option(
    "--config", "-c",
    type=click.Path(exists=True),
    help="Path to config file (optional)",
)
def count(start, end, output, format, config):
    """Count working days between START and END (inclusive)."""
    formatter = ConsoleFormatter()

    try:
        cfg = load_config(config)
        formatter = make_formatter(cfg)

        start_date = parse_date(start)
        end_date = parse_date(end)

        if end_date < start_date:
            formatter.print_error("End date must be after start date")
            sys.exit(1)

        calculator = WorkdayCalculator(HolidayCalendar())
        result = calculator.count_simple(start_date, end_date)
        format = resolve_format(format, output, cfg)

        if format in ("console", "both"):
            formatter.print_count_result(result)

        _export(formatter, cfg, result, output, format)

    except Exception as e:
        fail(formatter, e)


@main.command()
@click.option(
    "--host", "-h",
    default=None,
    help="Host to bind to (default: from config or 0.0.0.0)",
)
@click.option(
    "--port", "-p",
    type=int,
    default=None,
    help="Port to bind to (default: from config or 8000)",
)
@click.option(
    "--config", "-c",
    type=click.Path(exists=True),
    help="Path to config file (optional)",
)
def serve(host, port, config):
    """Start the FastAPI server."""
    formatter = ConsoleFormatter()

    try:
        import uvicorn

        cfg = load_config(config)

        api_host = host or cfg.api_host
        api_port = port or cfg.api_port

        formatter.console.print(f"Starting API server at http://{api_host}:{api_port}")
        formatter.console.print("Press Ctrl+C to stop")
        formatter.console.print()

        uvicorn.run(
            "italian_holidays.api:app",
            host=api_host,
            port=api_port,
            reload=False,
        )

    except ImportError:
        formatter.print_error("uvicorn is required for the API server. Install it with: pip install uvicorn")
        sys.exit(1)
    except Exception as e:
        fail(formatter, e)


if __name__ == "__main__":
    main()
