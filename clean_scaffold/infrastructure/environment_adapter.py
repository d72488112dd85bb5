"""Environment adapter implementation."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from dotenv import load_dotenv

logger = logging.getLogger(__name__)


class EnvironmentAdapter:
    """Adapter reading the process environment and .env files."""

    def get_environment_variable(self, name: str, default: str | None = None) -> str | None:
        """Get an environment variable value."""
        return os.environ.get(name, default)

    def load_env_file(self, path: str, override: bool = False) -> bool:
        """Load variables from a .env file into the environment.

        A missing file is not an error; the process environment is used as is.
        """
        env_path = Path(path)
        if not env_path.is_file():
            logger.debug("No env file at %s", env_path)
            return False

        loaded = load_dotenv(env_path, override=override)
        logger.debug("Loaded env file %s", env_path)
        return loaded
