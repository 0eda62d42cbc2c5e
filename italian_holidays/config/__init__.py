"""
Configuration loading for the Italian holiday calculator.
"""

from italian_holidays.config.manager import ConfigManager

__all__ = ["ConfigManager"]
