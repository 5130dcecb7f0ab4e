"""CLI command for exporting recovered history to CSV or TSV."""

from pathlib import Path

from ime_history.config import create_default_config
from ime_history.exceptions import IMEHistoryException
from ime_history.orchestration import HistoryDecoder
from ime_history.presenters import ConsolePresenter
from ime_history.services import ReportService
from ime_history.utils import resolve_history_path


def export_command(args) -> int:
    """Execute the export subcommand.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 = success, 1 = failure)
    """
    config = create_default_config(
        history_path=args.path,
        use_local_time=args.local_time,
    )
    presenter = ConsolePresenter()
    report_service = ReportService(config)

    history_path = resolve_history_path(config.history_path)

    if args.verbose:
        presenter.show_info(f"Reading {history_path}")
    output_path = Path(args.output)

    try:
        result = HistoryDecoder(config).decode_file(history_path)
    except IMEHistoryException as e:
        presenter.show_error(f"Error: {e}")
        return 1
    except OSError as e:
        presenter.show_error(f"Could not read {history_path}: {e}")
        return 1

    if args.format == "tsv":
        count = report_service.export_tsv(result.lines, output_path)
    else:
        count = report_service.export_csv(result.lines, output_path)

    presenter.show_success(f"Exported {count} lines to {output_path}")

    if args.verbose:
        presenter.show_summary(result)

    return 0
