"""Default configuration values for IME History."""

from .config import IMEHistoryConfig


def create_default_config(**overrides) -> IMEHistoryConfig:
    """Create a default configuration with optional overrides.

    Args:
        **overrides: Keyword arguments to override default values

    Returns:
        IMEHistoryConfig with defaults and overrides applied

    Example:
        config = create_default_config(
            use_local_time=True,
            line_terminator="\\n"
        )
    """
    return IMEHistoryConfig(**overrides)
