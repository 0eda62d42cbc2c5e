"""
Output formatting and export functionality.
"""

from italian_holidays.output.exporter import ResultExporter
from italian_holidays.output.formatter import ConsoleFormatter

__all__ = ["ConsoleFormatter", "ResultExporter"]
