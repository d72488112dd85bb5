"""Scaffold application service."""

from __future__ import annotations

import logging
import os

from clean_scaffold.domain.aggregator import AggregatorPatcher
from clean_scaffold.domain.layout import AGGREGATOR_FILE_NAME, LAYOUT, destination_for
from clean_scaffold.domain.models import EntityName, GeneratedFile, PropertySet, TemplateShape
from clean_scaffold.domain.template_engine import TemplateEngine
from clean_scaffold.ports.console import ConsolePort
from clean_scaffold.ports.file_system import FileSystemPort
from clean_scaffold.ports.template_source import TemplateSourcePort

logger = logging.getLogger(__name__)


class ScaffoldService:
    """Application service generating the layered files of one entity.

    Work is strictly sequential and stops at the first error. Files written
    before the error are left in place.
    """

    def __init__(
        self,
        console: ConsolePort,
        file_system: FileSystemPort,
        template_source: TemplateSourcePort,
        patcher: AggregatorPatcher,
        aggregator_file: str = AGGREGATOR_FILE_NAME,
    ):
        """Initialize scaffold service.

        Args:
            console: Console port for user interaction
            file_system: File system port for file operations
            template_source: Source of the template texts
            patcher: Patcher registering the entity in the aggregator file
            aggregator_file: File name of the aggregator in infrastructure/config
        """
        self._console = console
        self._file_system = file_system
        self._engine = TemplateEngine(template_source)
        self._patcher = patcher
        self._aggregator_file = aggregator_file

    def plan(
        self, entity: EntityName, root: str, include_aggregator: bool = True
    ) -> list[tuple[str, str]]:
        """List the files a run would touch, in order, without any I/O.

        Returns:
            List of (shape name or "AGGREGATOR", path) pairs
        """
        planned = []
        for step in LAYOUT:
            directory = os.path.join(root, step.directory)
            if step.patches_aggregator:
                if include_aggregator:
                    planned.append(
                        ("AGGREGATOR", os.path.join(directory, self._aggregator_file))
                    )
                continue
            for shape in step.shapes:
                planned.append((shape.name, os.path.join(root, destination_for(shape, entity))))
        return planned

    def generate(
        self,
        entity: EntityName,
        properties: PropertySet,
        root: str,
        include_aggregator: bool = True,
    ) -> list[GeneratedFile]:
        """Generate every file of the entity under a project root.

        Args:
            entity: Entity to generate
            properties: Validated fields of the entity
            root: Project root directory
            include_aggregator: Whether to patch the aggregator file

        Returns:
            The files written, in order

        Raises:
            TemplateConfigError: If a template location is not configured
            TemplateReadError: If a template cannot be read
            RegistrationBlockNotFoundError: If the aggregator has no model list
            OSError: If a directory or file cannot be created or written
        """
        self._console.print(f"[cyan]Generating {entity.singular} ({entity.plural})[/cyan]")
        logger.info(
            "Generating %s with %d fields under %s", entity.singular, len(properties), root
        )

        written: list[GeneratedFile] = []
        for step in LAYOUT:
            directory = os.path.join(root, step.directory)
            self._ensure_directory(directory)

            if step.patches_aggregator:
                if include_aggregator:
                    path = os.path.join(directory, self._aggregator_file)
                    written.append(self.patch_aggregator(entity, path))
                continue

            for shape in step.shapes:
                path = os.path.join(root, destination_for(shape, entity))
                written.append(self.render_file(shape, entity, properties, path))

        self._console.print_success(
            f"{entity.singular} generated successfully ({len(written)} files)"
        )
        return written

    def render_file(
        self, shape: TemplateShape, entity: EntityName, properties: PropertySet, path: str
    ) -> GeneratedFile:
        """Render one shape and write it to a path, overwriting any old file."""
        content = self._engine.render_shape(shape, entity, properties)
        self._ensure_directory(os.path.dirname(path))
        self._file_system.write_file(path, content)
        logger.info("Wrote %s", path)
        self._console.print(f"  Created: {path}")
        return GeneratedFile(shape=shape, path=path, content=content)

    def patch_aggregator(self, entity: EntityName, path: str) -> GeneratedFile:
        """Register the entity in an existing aggregator file.

        The file is only written once the patch succeeded.

        Raises:
            FileNotFoundError: If the aggregator file does not exist
            RegistrationBlockNotFoundError: If it has no registration list
        """
        existing = self._file_system.read_file(path)
        if self._patcher.is_registered(existing, entity):
            logger.info("%s already registered in %s", entity.singular, path)
            self._console.print(f"  Unchanged: {path}")
            return GeneratedFile(shape=None, path=path, content=existing)

        patched = self._patcher.patch(existing, entity)
        self._file_system.write_file(path, patched)
        logger.info("Registered %s in %s", entity.singular, path)
        self._console.print(f"  Updated: {path}")
        return GeneratedFile(shape=None, path=path, content=patched)

    def _ensure_directory(self, directory: str) -> None:
        if directory and not self._file_system.path_exists(directory):
            self._file_system.create_directory(directory)
