"""Infrastructure layer for clean-scaffold."""

from clean_scaffold.infrastructure.configuration_adapter import ConfigurationAdapter
from clean_scaffold.infrastructure.console_adapter import ConsoleAdapter
from clean_scaffold.infrastructure.environment_adapter import EnvironmentAdapter
from clean_scaffold.infrastructure.factory import InfrastructureFactory
from clean_scaffold.infrastructure.file_system_adapter import FileSystemAdapter
from clean_scaffold.infrastructure.registration_formats import SequelizeRegistrationFormat
from clean_scaffold.infrastructure.template_source_adapter import EnvTemplateSource

__all__ = [
    "ConfigurationAdapter",
    "ConsoleAdapter",
    "EnvTemplateSource",
    "EnvironmentAdapter",
    "FileSystemAdapter",
    "InfrastructureFactory",
    "SequelizeRegistrationFormat",
]
