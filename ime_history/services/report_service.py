"""Report service for recovered history in text and delimited formats."""

import csv
from datetime import datetime
from pathlib import Path

from ime_history.config import IMEHistoryConfig
from ime_history.models import HistoryLine


class ReportService:
    """Format recovered history as a text report, CSV or TSV."""

    def __init__(self, config: IMEHistoryConfig):
        self.config = config

    def format_timestamp(self, timestamp: datetime) -> str:
        """Render a timestamp with the configured pattern."""
        return timestamp.strftime(self.config.timestamp_format)

    def format_line(self, line: HistoryLine) -> str:
        """Render one history line as ``<date> <time> <text>``."""
        return f"{self.format_timestamp(line.timestamp)} {line.text}"

    def format_report(self, lines: list[HistoryLine]) -> str:
        """Render the full report, every line followed by the line terminator.

        Args:
            lines: History lines in file order

        Returns:
            Report text ("" when there are no lines)
        """
        terminator = self.config.line_terminator
        return "".join(f"{self.format_line(line)}{terminator}" for line in lines)

    def write_report(self, lines: list[HistoryLine], output_path: Path) -> int:
        """Write the text report to a file.

        Args:
            lines: History lines in file order
            output_path: Path for the output text file

        Returns:
            Number of lines written
        """
        with open(output_path, "w", newline="", encoding=self.config.export_encoding) as f:
            f.write(self.format_report(lines))
        return len(lines)

    def export_csv(self, lines: list[HistoryLine], output_path: Path) -> int:
        """Export history lines to CSV format.

        Args:
            lines: History lines in file order
            output_path: Path for the output CSV file

        Returns:
            Number of rows written (excluding header)
        """
        return self._write_delimited(lines, output_path, ",")

    def export_tsv(self, lines: list[HistoryLine], output_path: Path) -> int:
        """Export history lines to TSV format.

        Args:
            lines: History lines in file order
            output_path: Path for the output TSV file

        Returns:
            Number of rows written (excluding header)
        """
        return self._write_delimited(lines, output_path, "\t")

    def _write_delimited(self, lines: list[HistoryLine], output_path: Path, delimiter: str) -> int:
        """Write history lines to a delimited file with ISO-8601 timestamps."""
        with open(output_path, "w", newline="", encoding=self.config.export_encoding) as f:
            writer = csv.writer(f, delimiter=delimiter)
            writer.writerow(["Timestamp", "Text"])
            for line in lines:
                writer.writerow([line.timestamp.isoformat(), line.text])
        return len(lines)
