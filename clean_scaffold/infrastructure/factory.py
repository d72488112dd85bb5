"""Factory for creating infrastructure adapters."""

from __future__ import annotations

from typing import Any

from rich.console import Console

from clean_scaffold.infrastructure.configuration_adapter import ConfigurationAdapter
from clean_scaffold.infrastructure.console_adapter import ConsoleAdapter
from clean_scaffold.infrastructure.environment_adapter import EnvironmentAdapter
from clean_scaffold.infrastructure.file_system_adapter import FileSystemAdapter
from clean_scaffold.infrastructure.registration_formats import SequelizeRegistrationFormat
from clean_scaffold.infrastructure.template_source_adapter import EnvTemplateSource
from clean_scaffold.ports.console import ConsolePort
from clean_scaffold.ports.environment import EnvironmentPort
from clean_scaffold.ports.file_system import FileSystemPort
from clean_scaffold.ports.registration_format import RegistrationFormatPort
from clean_scaffold.ports.template_source import TemplateSourcePort


class InfrastructureFactory:
    """Factory for creating infrastructure adapters following hexagonal architecture."""

    @staticmethod
    def create_console(console: Console | None = None) -> ConsolePort:
        """Create a console adapter.

        Args:
            console: Optional Rich console instance

        Returns:
            ConsolePort implementation
        """
        return ConsoleAdapter(console)

    @staticmethod
    def create_environment() -> EnvironmentPort:
        """Create an environment adapter."""
        return EnvironmentAdapter()

    @staticmethod
    def create_file_system() -> FileSystemPort:
        """Create a file system adapter."""
        return FileSystemAdapter()

    @staticmethod
    def create_configuration() -> ConfigurationAdapter:
        """Create an entity definition loader."""
        return ConfigurationAdapter()

    @staticmethod
    def create_registration_format() -> RegistrationFormatPort:
        """Create the sequelize aggregator format."""
        return SequelizeRegistrationFormat()

    @staticmethod
    def create_template_source(
        environment: EnvironmentPort,
        file_system: FileSystemPort,
        base_dir: str | None = None,
    ) -> TemplateSourcePort:
        """Create a template source reading paths from the environment.

        Args:
            environment: Environment port holding the template variables
            file_system: File system port used to read templates
            base_dir: Directory relative template paths resolve against

        Returns:
            TemplateSourcePort implementation
        """
        return EnvTemplateSource(environment, file_system, base_dir)

    @classmethod
    def create_all_adapters(
        cls, console: Console | None = None, templates_dir: str | None = None
    ) -> dict[str, Any]:
        """Create all infrastructure adapters.

        Args:
            console: Optional Rich console instance
            templates_dir: Directory relative template paths resolve against

        Returns:
            Dictionary of all adapters keyed by port name
        """
        environment = cls.create_environment()
        file_system = cls.create_file_system()
        return {
            "console": cls.create_console(console),
            "environment": environment,
            "file_system": file_system,
            "configuration": cls.create_configuration(),
            "registration_format": cls.create_registration_format(),
            "template_source": cls.create_template_source(
                environment, file_system, templates_dir
            ),
        }
