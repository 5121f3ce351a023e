"""
Export functionality for working day lookup results.
"""

import csv
import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Optional, Tuple

from nth_workday.data.schemas import NthWorkingDayResult

logger = logging.getLogger(__name__)


class ResultExporter:
    """Exports lookup results to JSON and CSV."""

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

    def _ensure_output_dir(self) -> Path:
        """Ensure output directory exists and return path."""
        output_path = Path(self.output_directory)
        output_path.mkdir(parents=True, exist_ok=True)
        return output_path

    def _generate_filename(self, prefix: str, extension: str) -> str:
        """Generate a filename with timestamp."""
        timestamp = datetime.now().strftime(self.timestamp_format)
        return f"{prefix}_{timestamp}.{extension}"

    def _resolve_path(self, output_path: Optional[str], extension: str) -> Path:
        if output_path:
            file_path = Path(output_path)
            file_path.parent.mkdir(parents=True, exist_ok=True)
            return file_path
        return self._ensure_output_dir() / self._generate_filename("nth_workday", extension)

    def export_json(
        self, result: NthWorkingDayResult, output_path: Optional[str] = None
    ) -> str:
        """
        Export result to JSON file.

        Args:
            result: NthWorkingDayResult to export.
            output_path: Optional specific output path.

        Returns:
            Path to the exported file.
        """
        file_path = self._resolve_path(output_path, "json")

        with open(file_path, "w", encoding="utf-8") as f:
            json.dump(self.result_to_dict(result), f, indent=2, ensure_ascii=False)

        logger.info("Exported JSON result to %s", file_path)
        return str(file_path)

    def export_csv(
        self, result: NthWorkingDayResult, output_path: Optional[str] = None
    ) -> str:
        """
        Export result to CSV file.

        Args:
            result: NthWorkingDayResult to export.
            output_path: Optional specific output path.

        Returns:
            Path to the exported file.
        """
        file_path = self._resolve_path(output_path, "csv")

        with open(file_path, "w", newline="", encoding="utf-8") as f:
            writer = csv.writer(f)

            writer.writerow([
                "Nth",
                "Month",
                "Year",
                "Date",
                "Weekday",
                "Working Weekdays",
                "Excluded Days",
                "Working Days In Month",
            ])

            writer.writerow([
                result.nth,
                result.month,
                result.year,
                result.working_date.isoformat(),
                result.weekday.label,
                " ".join(w.label for w in result.working_weekdays),
                " ".join(str(d) for d in result.excluded_days) if result.excluded_days is not None else "",
                result.working_days_in_month,
            ])

        logger.info("Exported CSV result to %s", file_path)
        return str(file_path)

    def export_both(self, result: NthWorkingDayResult) -> Tuple[str, str]:
        """
        Export result to both JSON and CSV.

        Returns:
            Tuple of (json_path, csv_path).
        """
        return self.export_json(result), self.export_csv(result)

    def result_to_dict(self, result: NthWorkingDayResult) -> dict:
        """
        Convert a result to a JSON-serializable dictionary.

        Args:
            result: NthWorkingDayResult to convert.

        Returns:
            Dictionary representation.
        """
        return {
            "query": {
                "nth": result.nth,
                "month": result.month,
                "month_name": result.month_name,
                "year": result.year,
                "working_weekdays": [w.label for w in result.working_weekdays],
                "excluded_days": result.excluded_days,
            },
            "result": {
                "date": result.working_date.isoformat(),
                "weekday": result.weekday.label,
                "working_days_in_month": result.working_days_in_month,
            },
            "metadata": {
                "calculation_timestamp": result.calculation_timestamp.isoformat(),
            },
        }
