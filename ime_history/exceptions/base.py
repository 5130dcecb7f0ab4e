"""Base exception classes for IME History."""


class IMEHistoryException(Exception):
    """Base exception for all IME History errors.

    All custom exceptions in the ime_history package should inherit
    from this base class for consistent error handling.
    """

    pass
