"""Errors-as-text entry point for embedding the decoder in other tools."""

import os
import traceback

from ime_history.config import create_default_config
from ime_history.exceptions import HistoryFileNotFoundError
from ime_history.orchestration import HistoryDecoder
from ime_history.services import ReportService
from ime_history.utils import resolve_history_path


def execute(file_name: str = "") -> str:
    """Decode a history file and return the report, never raising.

    Args:
        file_name: Path to JpnIHDS.dat; blank uses the default location

    Returns:
        The text report, a one-line message naming a missing file, or the
        exception type, message and traceback for any other failure
    """
    try:
        config = create_default_config(history_path=file_name)
        history_path = resolve_history_path(config.history_path)
        result = HistoryDecoder(config).decode_file(history_path)
        return ReportService(config).format_report(result.lines)
    except HistoryFileNotFoundError as e:
        return f"Failed to read IME history: file does not exist {e.path}"
    except Exception as e:
        return f"{_qualified_name(e)}: {e}{os.linesep}{traceback.format_exc()}"


def _qualified_name(error: Exception) -> str:
    """Get the module-qualified type name of an exception."""
    cls = type(error)
    if cls.__module__ == "builtins":
        return cls.__qualname__
    return f"{cls.__module__}.{cls.__qualname__}"
