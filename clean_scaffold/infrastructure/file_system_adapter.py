"""File system adapter implementation."""

from __future__ import annotations

from pathlib import Path


class FileSystemAdapter:
    """Adapter for file system operations on UTF-8 text files."""

    def __init__(self, encoding: str = "utf-8"):
        self._encoding = encoding

    def read_file(self, path: str) -> str:
        """Read a whole text file."""
        try:
            return Path(path).read_text(encoding=self._encoding)
        except FileNotFoundError as e:
            raise FileNotFoundError(f"File not found: {path}") from e
        except (OSError, UnicodeDecodeError) as e:
            raise OSError(f"Unable to read file {path}: {e}") from e

    def write_file(self, path: str, content: str) -> None:
        """Write a text file, truncating any existing content."""
        try:
            Path(path).write_text(content, encoding=self._encoding)
        except OSError as e:
            raise OSError(f"Unable to write file {path}: {e}") from e

    def create_directory(self, path: str) -> None:
        """Create a directory and its missing parents."""
        try:
            Path(path).mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise OSError(f"Unable to create directory {path}: {e}") from e

    def path_exists(self, path: str) -> bool:
        """Check if a path exists."""
        return Path(path).exists()
