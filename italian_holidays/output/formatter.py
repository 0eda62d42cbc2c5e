"""
Console output formatting using Rich.
"""

from datetime import date
from typing import List, Optional

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from italian_holidays.core.date_format import format_date
from italian_holidays.data.holiday_data import WEEKDAY_NAMES, WEEKDAY_NAMES_IT
from italian_holidays.data.schemas import (
    DateFormat,
    DayInfo,
    DayType,
    Holiday,
    WorkdayCountResult,
    WorkingDaysResult,
)

DAY_TYPE_STYLES = {
    DayType.WORKING_DAY: ("Working day", "bold green"),
    DayType.WEEKEND: ("Weekend", "bold yellow"),
    DayType.HOLIDAY: ("Holiday", "bold red"),
    DayType.WEEKEND_HOLIDAY: ("Holiday on a weekend", "bold red"),
}


class ConsoleFormatter:
    """Formats output for console display using Rich."""

    def __init__(
        self,
        console: Optional[Console] = None,
        language: str = "it",
        date_format: DateFormat = DateFormat.ITALIAN,
    ):
        """
        Initialize the console formatter.

        Args:
            console: Rich console to print to; a new one is created if omitted.
            language: Language for holiday and weekday names ('it' or 'en').
            date_format: Style used to render dates.
        """
        self.console = console or Console()
        self.language = language
        self.date_format = date_format

    def _fmt(self, day: date) -> str:
        return format_date(day, self.date_format)

    def _weekday(self, day: date) -> str:
        names = WEEKDAY_NAMES_IT if self.language == "it" else WEEKDAY_NAMES
        return names[day.weekday()]

    def _holiday_name(self, holiday: Holiday) -> str:
        if self.language == "en" and holiday.name_english:
            return holiday.name_english
        return holiday.name

    def print_holidays(self, holidays: List[Holiday], title: str = "Holidays") -> None:
        """
        Print a table of holidays.

        Args:
            holidays: List of holidays to display.
            title: Table title.
        """
        holiday_table = Table(title=f"[bold]{title}[/bold]")
        holiday_table.add_column("Date", style="cyan", width=12)
        holiday_table.add_column("Day", style="dim", width=12)
        holiday_table.add_column("Name", style="white")
        holiday_table.add_column("Movable", style="dim", justify="center")

        for holiday in holidays:
            holiday_table.add_row(
                self._fmt(holiday.holiday_date),
                self._weekday(holiday.holiday_date),
                self._holiday_name(holiday),
                "yes" if holiday.is_movable else "",
            )

        self.console.print(holiday_table)

    def print_holidays_for_year(self, year: int, holidays: List[Holiday]) -> None:
        """Print all holidays for a year."""
        self.console.print()
        self.console.rule(f"[bold blue]Italian Public Holidays {year}[/bold blue]")
        self.console.print()
        self.print_holidays(holidays, title=f"{len(holidays)} holidays")
        self.console.print()

    def print_easter(self, year: int, easter: date, pasquetta: date) -> None:
        """Print Easter and Easter Monday for a year."""
        table = Table(show_header=False, box=None)
        table.add_column("Label", style="cyan", width=20)
        table.add_column("Value", style="white")
        table.add_row("Easter (Pasqua):", f"{self._fmt(easter)} ({self._weekday(easter)})")
        table.add_row(
            "Pasquetta:", f"{self._fmt(pasquetta)} ({self._weekday(pasquetta)})"
        )
        self.console.print(Panel(table, title=f"[bold]Easter {year}[/bold]"))

    def print_day_info(self, info: DayInfo) -> None:
        """
        Print the classification of a single day.

        Args:
            info: DayInfo to display.
        """
        label, style = DAY_TYPE_STYLES[info.day_type]

        table = Table(show_header=False, box=None)
        table.add_column("Label", style="cyan", width=16)
        table.add_column("Value", style="white")
        table.add_row("Date:", f"{self._fmt(info.day)} ({self._weekday(info.day)})")
        table.add_row("Type:", Text(label, style=style))
        if info.holiday_names:
            table.add_row("Holiday:", ", ".join(info.holiday_names))

        self.console.print(Panel(table, title="[bold]Day Check[/bold]"))

    def print_shift_result(self, result: WorkingDaysResult) -> None:
        """
        Print the result of adding or subtracting working days.

        Args:
            result: WorkingDaysResult to display.
        """
        self.console.print()
        self.console.rule("[bold blue]Working Days Calculation[/bold blue]")
        self.console.print()

        table = Table(show_header=False, box=None)
        table.add_column("Label", style="cyan", width=22)
        table.add_column("Value", style="white")

        table.add_row(
            "Start:", f"{self._fmt(result.start_date)} ({self._weekday(result.start_date)})"
        )
        table.add_row("Working days:", f"{result.working_days:+d}")
        table.add_row("Calendar days:", f"{result.calendar_days_elapsed:+d}")
        table.add_row("Weekend days skipped:", str(result.skipped_weekend_days))
        table.add_row("Holidays skipped:", str(len(result.skipped_holidays)))
        table.add_row("", "─" * 15)
        table.add_row(
            Text("Result:", style="bold green"),
            Text(
                f"{self._fmt(result.result_date)} ({self._weekday(result.result_date)})",
                style="bold green",
            ),
        )

        self.console.print(Panel(table, title="[bold]Result[/bold]"))

        if result.skipped_holidays:
            self.print_holidays(result.skipped_holidays, title="Holidays Skipped")

        self._print_warnings(result.warnings)
        self.console.print()

    def print_count_result(self, result: WorkdayCountResult) -> None:
        """
        Print a working-day count for a period.

        Args:
            result: WorkdayCountResult to display.
        """
        self.console.print()
        self.console.rule("[bold blue]Working Days in Period[/bold blue]")
        self.console.print()

        calc_table = Table(show_header=False, box=None)
        calc_table.add_column("Label", style="cyan", width=20)
        calc_table.add_column("Value", style="white", justify="right")

        calc_table.add_row(
            "Period:", f"{self._fmt(result.start_date)} - {self._fmt(result.end_date)}"
        )
        calc_table.add_row("Calendar Days:", str(result.calendar_days))
        calc_table.add_row(
            "Weekend Days:",
            f"- {result.weekend_days} ({result.weekends_detail.get('saturdays', 0)} Sat, "
            f"{result.weekends_detail.get('sundays', 0)} Sun)",
        )
        calc_table.add_row("Holidays (on workdays):", f"- {result.holidays_count}")
        calc_table.add_row("", "─" * 15)
        calc_table.add_row(
            Text("Working Days:", style="bold green"),
            Text(str(result.working_days), style="bold green"),
        )

        self.console.print(Panel(calc_table, title="[bold]Calculation[/bold]"))

        if result.holidays:
            self.print_holidays(result.holidays, title="Holidays in Period")

        self.console.print()

    def _print_warnings(self, warnings: List[str]) -> None:
        if warnings:
            self.console.print()
            for warning in warnings:
                self.console.print(f"[yellow]Warning:[/yellow] {warning}")

    def print_error(self, message: str) -> None:
        """Print an error message."""
        self.console.print(f"[bold red]Error:[/bold red] {message}")

    def print_success(self, message: str) -> None:
        """Print a success message."""
        self.console.print(f"[bold green]Success:[/bold green] {message}")
