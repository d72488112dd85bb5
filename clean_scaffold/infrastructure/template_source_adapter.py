"""Template source adapter resolving template paths from the environment."""

from __future__ import annotations

import logging
from pathlib import Path

from clean_scaffold.domain.exceptions import TemplateConfigError, TemplateReadError
from clean_scaffold.domain.models import TemplateShape
from clean_scaffold.ports.environment import EnvironmentPort
from clean_scaffold.ports.file_system import FileSystemPort

logger = logging.getLogger(__name__)


class EnvTemplateSource:
    """Loads templates from the paths named by ``<SHAPE>_TEMPLATE`` variables."""

    def __init__(
        self,
        environment: EnvironmentPort,
        file_system: FileSystemPort,
        base_dir: str | None = None,
    ):
        """Initialize the template source.

        Args:
            environment: Environment port holding the template variables
            file_system: File system port used to read the templates
            base_dir: Directory that relative template paths resolve against
        """
        self._environment = environment
        self._file_system = file_system
        self._base_dir = base_dir

    def location(self, shape: TemplateShape) -> str:
        """Get the configured template path of a shape."""
        value = self._environment.get_environment_variable(shape.env_var)
        if not value or not value.strip():
            raise TemplateConfigError(shape.env_var)

        path = Path(value.strip())
        if self._base_dir and not path.is_absolute():
            path = Path(self._base_dir) / path
        return str(path)

    def load(self, shape: TemplateShape) -> str:
        """Read the template of a shape."""
        path = self.location(shape)
        logger.debug("Loading %s template from %s", shape.name, path)
        try:
            return self._file_system.read_file(path)
        except OSError as e:
            raise TemplateReadError(path, str(e)) from e
