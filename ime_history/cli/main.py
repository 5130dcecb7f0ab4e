"""Main CLI entry point for ime_history."""

import argparse
import logging
import sys

from ime_history import __version__
from ime_history.cli.commands import dump, export


def main(argv=None):
    """Main CLI entry point with subcommands."""
    parser = argparse.ArgumentParser(
        prog="ime-history",
        description="Recover Japanese IME input history from JpnIHDS.dat",
        epilog="Use 'ime-history <command> --help' for command-specific help",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Options shared by every subcommand
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "path",
        nargs="?",
        default="",
        help="Path to JpnIHDS.dat (default: %%APPDATA%%\\Microsoft\\InputMethod\\Shared)",
    )
    common.add_argument(
        "--local-time",
        action="store_true",
        help="Show timestamps in the local time zone instead of UTC",
    )
    common.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging and print a decode summary",
    )

    # ime-history dump [path]
    dump_parser = subparsers.add_parser(
        "dump",
        parents=[common],
        help="Print the recovered history",
        description="Print one line per recovered conversion: date, time and text",
    )
    dump_parser.add_argument("-o", "--output", help="Write the report to a file instead")

    # ime-history export [path] --output FILE
    export_parser = subparsers.add_parser(
        "export",
        parents=[common],
        help="Export the recovered history to CSV or TSV",
        description="Export recovered history with ISO-8601 timestamps",
    )
    export_parser.add_argument("-o", "--output", required=True, help="Output file path")
    export_parser.add_argument(
        "--format",
        choices=["csv", "tsv"],
        default="csv",
        help="Output format (default: csv)",
    )

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    # Dispatch to appropriate command
    if args.command == "dump":
        return dump.dump_command(args)
    elif args.command == "export":
        return export.export_command(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
