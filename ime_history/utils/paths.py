"""History file location utilities."""

import os
from collections.abc import Mapping
from pathlib import Path

HISTORY_FILE_SUBPATH = Path("Microsoft", "InputMethod", "Shared", "JpnIHDS.dat")


def default_history_path(environ: Mapping[str, str] | None = None) -> Path:
    """Get the default location of the IME history file.

    Args:
        environ: Environment mapping to read APPDATA from (default: os.environ)

    Returns:
        %APPDATA%\\Microsoft\\InputMethod\\Shared\\JpnIHDS.dat, falling back to
        the roaming profile under the home directory when APPDATA is unset
    """
    env = os.environ if environ is None else environ
    appdata = env.get("APPDATA", "").strip()
    roaming_dir = Path(appdata) if appdata else Path.home() / "AppData" / "Roaming"
    return roaming_dir / HISTORY_FILE_SUBPATH


def resolve_history_path(file_name: str | Path | None) -> Path:
    """Resolve a user-supplied path, using the default location when blank."""
    if file_name is None or not str(file_name).strip():
        return default_history_path()
    return Path(file_name)
