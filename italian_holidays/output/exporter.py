"""
Export functionality for holiday and working-day results.
"""

import csv
import json
import logging
from datetime import datetime
from pathlib import Path
from typing import List, Optional, Tuple, Union

from italian_holidays.data.schemas import Holiday, WorkdayCountResult, WorkingDaysResult

logger = logging.getLogger(__name__)

Result = Union[WorkingDaysResult, WorkdayCountResult]


class ResultExporter:
    """Exports calculation results and holiday lists to JSON and CSV."""

    def __init__(
        self,
        output_directory: str = "results",
        timestamp_format: str = "%Y%m%d_%H%M%S",
    ):
        """
        Initialize the result exporter.

        Args:
            output_directory: Directory for output files.
            timestamp_format: Format string for timestamps in filenames.
        """
        self.output_directory = output_directory
        self.timestamp_format = timestamp_format

    def _resolve_path(self, prefix: str, extension: str, output_path: Optional[str]) -> Path:
        if output_path:
            file_path = Path(output_path)
            file_path.parent.mkdir(parents=True, exist_ok=True)
            return file_path

        output_dir = Path(self.output_directory)
        output_dir.mkdir(parents=True, exist_ok=True)
        timestamp = datetime.now().strftime(self.timestamp_format)
        return output_dir / f"{prefix}_{timestamp}.{extension}"

    @staticmethod
    def _prefix(result: Result) -> str:
        return "shift" if isinstance(result, WorkingDaysResult) else "workdays"

    def export_json(self, result: Result, output_path: Optional[str] = None) -> str:
        """
        Export a result to a JSON file.

        Args:
            result: WorkingDaysResult or WorkdayCountResult to export.
            output_path: Optional specific output path.

        Returns:
            Path to the exported file.
        """
        file_path = self._resolve_path(self._prefix(result), "json", output_path)

        with open(file_path, "w", encoding="utf-8") as f:
            json.dump(self.result_to_dict(result), f, indent=2, ensure_ascii=False)

        logger.info(f"Exported result to: {file_path}")
        return str(file_path)

    def export_csv(self, result: Result, output_path: Optional[str] = None) -> str:
        """
        Export a result to a single-row CSV file.

        Args:
            result: WorkingDaysResult or WorkdayCountResult to export.
            output_path: Optional specific output path.

        Returns:
            Path to the exported file.
        """
        file_path = self._resolve_path(self._prefix(result), "csv", output_path)

        if isinstance(result, WorkingDaysResult):
            header = [
                "Start Date",
                "Working Days",
                "Result Date",
                "Calendar Days Elapsed",
                "Weekend Days Skipped",
                "Holidays Skipped",
            ]
            row = [
                result.start_date.isoformat(),
                result.working_days,
                result.result_date.isoformat(),
                result.calendar_days_elapsed,
                result.skipped_weekend_days,
                len(result.skipped_holidays),
            ]
        else:
            header = [
                "Start Date",
                "End Date",
                "Calendar Days",
                "Weekend Days",
                "Saturdays",
                "Sundays",
                "Holidays Count",
                "Working Days",
            ]
            row = [
                result.start_date.isoformat(),
                result.end_date.isoformat(),
                result.calendar_days,
                result.weekend_days,
                result.weekends_detail.get("saturdays", 0),
                result.weekends_detail.get("sundays", 0),
                result.holidays_count,
                result.working_days,
            ]

        with open(file_path, "w", newline="", encoding="utf-8") as f:
            writer = csv.writer(f)
            writer.writerow(header)
            writer.writerow(row)

        logger.info(f"Exported result to: {file_path}")
        return str(file_path)

    def export_both(self, result: Result) -> Tuple[str, str]:
        """Export a result to both JSON and CSV, returning (json_path, csv_path)."""
        return self.export_json(result), self.export_csv(result)

    def export_holidays_csv(
        self, holidays: List[Holiday], output_path: Optional[str] = None
    ) -> str:
        """
        Export a holiday list to a CSV file.

        Args:
            holidays: List of holidays to export.
            output_path: Optional specific output path.

        Returns:
            Path to the exported file.
        """
        file_path = self._resolve_path("holidays", "csv", output_path)

        with open(file_path, "w", newline="", encoding="utf-8") as f:
            writer = csv.writer(f)
            writer.writerow(["Date", "Name", "English Name", "Is Movable"])
            for holiday in holidays:
                writer.writerow([
                    holiday.holiday_date.isoformat(),
                    holiday.name,
                    holiday.name_english or "",
                    holiday.is_movable,
                ])

        logger.info(f"Exported {len(holidays)} holidays to: {file_path}")
        return str(file_path)

    def export_holidays_json(
        self, holidays: List[Holiday], output_path: Optional[str] = None
    ) -> str:
        """
        Export a holiday list to a JSON file.

        Args:
            holidays: List of holidays to export.
            output_path: Optional specific output path.

        Returns:
            Path to the exported file.
        """
        file_path = self._resolve_path("holidays", "json", output_path)

        with open(file_path, "w", encoding="utf-8") as f:
            json.dump([h.to_dict() for h in holidays], f, indent=2, ensure_ascii=False)

        logger.info(f"Exported {len(holidays)} holidays to: {file_path}")
        return str(file_path)

    def export_holidays(
        self, holidays: List[Holiday], export_format: str, output_path: Optional[str] = None
    ) -> str:
        """Export a holiday list as 'json' or 'csv'."""
        if export_format == "csv":
            return self.export_holidays_csv(holidays, output_path)
        return self.export_holidays_json(holidays, output_path)

    def result_to_dict(self, result: Result) -> dict:
        """
        Convert a result to a JSON-serializable dictionary.

        Args:
            result: Result to convert.

        Returns:
            Dictionary representation.
        """
        if isinstance(result, WorkingDaysResult):
            return {
                "start_date": result.start_date.isoformat(),
                "working_days": result.working_days,
                "result_date": result.result_date.isoformat(),
                "calculation": {
                    "calendar_days_elapsed": result.calendar_days_elapsed,
                    "skipped_weekend_days": result.skipped_weekend_days,
                    "skipped_holidays": [
                        h.to_dict() for h in result.skipped_holidays
                    ],
                },
                "metadata": {
                    "calculation_timestamp": result.calculation_timestamp.isoformat(),
                    "warnings": result.warnings,
                },
            }

        return {
            "start_date": result.start_date.isoformat(),
            "end_date": result.end_date.isoformat(),
            "calculation": {
                "calendar_days": result.calendar_days,
                "weekend_days": result.weekend_days,
                "weekends_detail": result.weekends_detail,
                "holidays_count": result.holidays_count,
                "working_days": result.working_days,
            },
            "holidays": [h.to_dict() for h in result.holidays],
            "metadata": {
                "calculation_timestamp": result.calculation_timestamp.isoformat(),
            },
        }
