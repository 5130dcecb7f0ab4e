"""Configuration classes for IME History."""

import os
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class IMEHistoryConfig:
    """Immutable configuration for history recovery.

    All configuration is frozen (immutable) so a single instance can be
    shared between the decoder, report service and presenters.
    """

    # Input settings
    history_path: Path | None = None  # None = platform default location

    # Report settings
    timestamp_format: str = "%Y/%m/%d %I:%M:%S"  # 12-hour hour field, no AM/PM
    use_local_time: bool = False  # Render in the local zone instead of UTC
    line_terminator: str = os.linesep

    # Export settings
    export_encoding: str = "utf-8"

    def __post_init__(self):
        """Convert string paths to Path objects if needed."""
        if isinstance(self.history_path, str):
            object.__setattr__(
                self,
                "history_path",
                Path(self.history_path) if self.history_path.strip() else None,
            )
