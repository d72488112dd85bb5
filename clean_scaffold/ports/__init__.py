"""Ports (interfaces) for clean-scaffold following hexagonal architecture."""

from clean_scaffold.ports.console import ConsolePort
from clean_scaffold.ports.environment import EnvironmentPort
from clean_scaffold.ports.file_system import FileSystemPort
from clean_scaffold.ports.registration_format import RegistrationFormatPort
from clean_scaffold.ports.template_source import TemplateSourcePort

__all__ = [
    "ConsolePort",
    "EnvironmentPort",
    "FileSystemPort",
    "RegistrationFormatPort",
    "TemplateSourcePort",
]
