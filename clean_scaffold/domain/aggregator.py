"""Aggregator patcher registering a new entity in an existing file."""

from __future__ import annotations

import logging

from clean_scaffold.domain.models import EntityName
from clean_scaffold.ports.registration_format import RegistrationFormatPort

logger = logging.getLogger(__name__)


class AggregatorPatcher:
    """Domain service adding an entity's import and registration entry.

    Both steps are plain text transforms and are idempotent, so patching
    already-patched text returns it unchanged. The file is never parsed as
    code; the registration format decides what the list looks like.
    """

    def __init__(self, registration_format: RegistrationFormatPort):
        """Initialize the patcher.

        Args:
            registration_format: Format of the aggregator's registration list
        """
        self._format = registration_format

    def patch(self, existing_text: str, entity: EntityName) -> str:
        """Apply the import step and the registration step.

        Args:
            existing_text: Current aggregator content
            entity: Entity to register

        Returns:
            Patched content

        Raises:
            RegistrationBlockNotFoundError: If the registration list is missing
        """
        text = self.add_import(existing_text, entity)
        return self.add_registration(text, entity)

    def add_import(self, text: str, entity: EntityName) -> str:
        """Prepend the entity's import line unless the text already has it."""
        import_line = self._format.import_line(entity)
        if import_line in text:
            logger.debug("Import for %s already present", entity.singular)
            return text
        return import_line + text

    def add_registration(self, text: str, entity: EntityName) -> str:
        """Append the entity to the registration list unless already listed."""
        block = self._format.locate(text)
        entries = self._format.parse_entries(block.inner)
        if entity.singular in entries:
            logger.debug("%s already registered", entity.singular)
            return text

        entries.append(entity.singular)
        return text[: block.start] + self._format.serialize_entries(entries) + text[block.end :]

    def is_registered(self, text: str, entity: EntityName) -> bool:
        """Check whether both the import and the list entry are present."""
        if self._format.import_line(entity) not in text:
            return False
        block = self._format.locate(text)
        return entity.singular in self._format.parse_entries(block.inner)
