"""Presenter protocol for output abstraction."""

from typing import Protocol

from ime_history.models import DecodeResult


class PresenterProtocol(Protocol):
    """Interface for presenting output to user.

    This protocol abstracts all output operations, allowing the same
    commands to work with different presentation layers (CLI, tests, etc).
    """

    def show_info(self, message: str) -> None:
        """Display an informational message.

        Args:
            message: The informational message to display
        """
        ...

    def show_success(self, message: str) -> None:
        """Display a success message.

        Args:
            message: The success message to display
        """
        ...

    def show_warning(self, message: str) -> None:
        """Display a warning message.

        Args:
            message: The warning message to display
        """
        ...

    def show_error(self, message: str) -> None:
        """Display an error message.

        Args:
            message: The error message to display
        """
        ...

    def show_report(self, lines: list[str]) -> None:
        """Display formatted history lines.

        Args:
            lines: Report lines, without line terminators
        """
        ...

    def show_summary(self, result: DecodeResult) -> None:
        """Display the statistics of a decode run.

        Args:
            result: The decode result to summarize
        """
        ...
