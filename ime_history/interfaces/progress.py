"""Progress callback protocol for progress reporting."""

from typing import Protocol


class ProgressCallback(Protocol):
    """Interface for progress reporting while walking sentence records.

    This protocol allows the decoder to report progress without knowing
    how it will be displayed.
    """

    def on_start(self, total: int, description: str) -> None:
        """Called when an operation starts.

        Args:
            total: Total number of items to process
            description: Description of the operation
        """
        ...

    def on_progress(self, current: int, item_description: str) -> None:
        """Called when an item is processed.

        Args:
            current: Current item number (1-based)
            item_description: Description of the current item
        """
        ...

    def on_complete(self) -> None:
        """Called when an operation completes."""
        ...
