"""Interface protocols for IME History."""

from .presenter import PresenterProtocol
from .progress import ProgressCallback

__all__ = ["PresenterProtocol", "ProgressCallback"]
