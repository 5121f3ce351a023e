"""
Output formatting and export functionality.
"""

from nth_workday.output.formatter import ConsoleFormatter
from nth_workday.output.exporter import ResultExporter

__all__ = ["ConsoleFormatter", "ResultExporter"]
