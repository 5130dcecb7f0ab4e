"""Null presenter for testing (no output)."""

from ime_history.models import DecodeResult


class NullPresenter:
    """Present output to nowhere (testing implementation)."""

    def show_info(self, message: str) -> None:
        """Display an informational message (no-op)."""
        pass

    def show_success(self, message: str) -> None:
        """Display a success message (no-op)."""
        pass

    def show_warning(self, message: str) -> None:
        """Display a warning message (no-op)."""
        pass

    def show_error(self, message: str) -> None:
        """Display an error message (no-op)."""
        pass

    def show_report(self, lines: list[str]) -> None:
        """Display formatted history lines (no-op)."""
        pass

    def show_summary(self, result: DecodeResult) -> None:
        """Display the statistics of a decode run (no-op)."""
        pass


class NullProgressCallback:
    """Null implementation of progress callback (testing)."""

    def on_start(self, total: int, description: str) -> None:
        """Called when an operation starts (no-op)."""
        pass

    def on_progress(self, current: int, item_description: str) -> None:
        """Called when an item is processed (no-op)."""
        pass

    def on_complete(self) -> None:
        """Called when an operation completes (no-op)."""
        pass
