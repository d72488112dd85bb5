"""Environment port for process environment and .env files."""

from __future__ import annotations

from typing import Protocol


class EnvironmentPort(Protocol):
    """Port for reading settings from the process environment."""

    def get_environment_variable(self, name: str, default: str | None = None) -> str | None:
        """Get an environment variable value.

        Args:
            name: Environment variable name
            default: Default value if not found

        Returns:
            Environment variable value or default
        """
        ...

    def load_env_file(self, path: str, override: bool = False) -> bool:
        """Load variables from a .env file into the environment.

        Args:
            path: Path to the .env file
            override: Replace variables that are already set

        Returns:
            True if at least one variable was loaded, False otherwise
        """
        ...
