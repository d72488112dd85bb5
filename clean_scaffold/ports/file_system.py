"""File system port for reading templates and emitting generated files."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class FileSystemPort(Protocol):
    """Port for file system operations."""

    def read_file(self, path: str) -> str:
        """Read a whole text file.

        Args:
            path: File path

        Returns:
            File contents

        Raises:
            FileNotFoundError: If file doesn't exist
            IOError: If unable to read file
        """
        ...

    def write_file(self, path: str, content: str) -> None:
        """Write a text file, truncating any existing content.

        Args:
            path: File path
            content: Content to write

        Raises:
            IOError: If unable to write file
        """
        ...

    def create_directory(self, path: str) -> None:
        """Create a directory and its missing parents.

        Args:
            path: Directory path

        Raises:
            IOError: If unable to create directory
        """
        ...

    def path_exists(self, path: str) -> bool:
        """Check if a path exists.

        Args:
            path: Path to check

        Returns:
            True if path exists, False otherwise
        """
        ...
