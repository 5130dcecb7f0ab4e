"""CLI command for printing the recovered history report."""

from pathlib import Path

from ime_history.config import create_default_config
from ime_history.exceptions import DecodeError, IMEHistoryException
from ime_history.orchestration import HistoryDecoder
from ime_history.presenters import ConsolePresenter
from ime_history.services import ReportService
from ime_history.utils import resolve_history_path


def dump_command(args) -> int:
    """Execute the dump subcommand.

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
    decoder = HistoryDecoder(config)

    history_path = resolve_history_path(config.history_path)

    if args.verbose:
        presenter.show_info(f"Reading {history_path}")

    try:
        result = decoder.decode_file(history_path)
    except DecodeError as e:
        # Surface whatever was recovered before the fault
        presenter.show_report([report_service.format_line(line) for line in e.partial_lines])
        presenter.show_error(f"Error: {e}")
        return 1
    except IMEHistoryException as e:
        presenter.show_error(f"Error: {e}")
        return 1
    except OSError as e:
        presenter.show_error(f"Could not read {history_path}: {e}")
        return 1

    if result.has_warnings:
        presenter.show_warning(
            f"{len(result.warnings)} text block(s) contained malformed UTF-16 and were repaired"
        )

    if args.output:
        output_path = Path(args.output)
        count = report_service.write_report(result.lines, output_path)
        presenter.show_success(f"Wrote {count} lines to {output_path}")
    else:
        presenter.show_report([report_service.format_line(line) for line in result.lines])

    if args.verbose:
        presenter.show_summary(result)

    return 0
