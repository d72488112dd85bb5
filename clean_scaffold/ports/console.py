"""Console port for user facing output."""

from __future__ import annotations

from typing import Protocol


class ConsolePort(Protocol):
    """Port for console/terminal operations."""

    def print(self, message: str, style: str | None = None) -> None:
        """Print a message, optionally styled."""
        ...

    def print_error(self, message: str) -> None:
        """Print an error message."""
        ...

    def print_warning(self, message: str) -> None:
        """Print a warning message."""
        ...

    def print_success(self, message: str) -> None:
        """Print a success message."""
        ...

    def print_table(
        self, headers: list[str], rows: list[list[str]], title: str | None = None
    ) -> None:
        """Print a formatted table.

        Args:
            headers: Table column headers
            rows: Table data rows
            title: Optional table title
        """
        ...
