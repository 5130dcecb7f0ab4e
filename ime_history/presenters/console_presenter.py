"""Console presenter for CLI output."""

import sys

from ime_history.models import DecodeResult


class ConsolePresenter:
    """Present output to console (CLI implementation).

    Report lines go to stdout; status messages go to stderr so the report
    can be redirected on its own.
    """

    def show_info(self, message: str) -> None:
        """Display an informational message."""
        print(message, file=sys.stderr)

    def show_success(self, message: str) -> None:
        """Display a success message."""
        print(f"[OK] {message}", file=sys.stderr)

    def show_warning(self, message: str) -> None:
        """Display a warning message."""
        print(f"[WARN] {message}", file=sys.stderr)

    def show_error(self, message: str) -> None:
        """Display an error message."""
        print(f"[ERROR] {message}", file=sys.stderr)

    def show_report(self, lines: list[str]) -> None:
        """Display formatted history lines."""
        for line in lines:
            print(line)

    def show_summary(self, result: DecodeResult) -> None:
        """Display the statistics of a decode run."""
        print("\nDecode Complete:", file=sys.stderr)
        print(f"  Sentence records: {result.header.entry_count}", file=sys.stderr)
        print(f"  Substitutions: {result.substitutions_read}", file=sys.stderr)
        print(f"  History lines: {len(result.lines)}", file=sys.stderr)
        print(f"  Bytes consumed: {result.bytes_consumed}", file=sys.stderr)

        if result.warnings:
            print("\nWarnings:", file=sys.stderr)
            for warning in result.warnings:
                print(f"  {warning}", file=sys.stderr)
