"""Windows FILETIME conversion."""

from datetime import datetime, timedelta, timezone

# FILETIME counts 100-nanosecond ticks since this instant
FILETIME_EPOCH = datetime(1601, 1, 1, tzinfo=timezone.utc)


def filetime_to_datetime(ticks: int, local: bool = False) -> datetime:
    """Convert a FILETIME value to an aware datetime.

    Sub-microsecond precision is truncated.

    Args:
        ticks: 100-nanosecond intervals since 1601-01-01 UTC
        local: Convert to the machine's local time zone instead of UTC

    Returns:
        Timezone-aware datetime

    Raises:
        OverflowError: If the value is beyond the range of datetime
    """
    dt = FILETIME_EPOCH + timedelta(microseconds=ticks // 10)
    if local:
        return dt.astimezone()
    return dt
