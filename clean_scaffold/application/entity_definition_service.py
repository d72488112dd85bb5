"""Entity definition application service."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from clean_scaffold.domain.exceptions import FieldValidationError, InvalidEntityNameError
from clean_scaffold.domain.field_validator import FieldSpecValidator
from clean_scaffold.domain.models import EntityName, PropertySet


class EntityDefinitionService:
    """Application service turning raw entity definitions into domain objects."""

    def __init__(self, validator: FieldSpecValidator | None = None):
        """Initialize entity definition service.

        Args:
            validator: Field validator, a default one when omitted
        """
        self._validator = validator or FieldSpecValidator()

    def create_entity_name(self, singular: str, plural: str | None = None) -> EntityName:
        """Build an EntityName.

        The plural is taken as given. Only when it is omitted is an ``s``
        appended to the singular.

        Raises:
            InvalidEntityNameError: If either token is empty or has whitespace
        """
        if plural is None:
            plural = f"{singular}s"
        for token in (singular, plural):
            if not isinstance(token, str):
                raise InvalidEntityNameError(str(token), "must be a string")
            if not token or any(ch.isspace() for ch in token):
                raise InvalidEntityNameError(token, "must be non-empty and contain no whitespace")
        return EntityName(singular=singular, plural=plural)

    def parse_field_option(self, option: str) -> dict[str, Any]:
        """Parse the ``name:STORAGE:language[:@Attr,@Attr]`` short form.

        Raises:
            FieldValidationError: If the option does not have 3 or 4 parts
        """
        parts = option.split(":")
        if len(parts) not in (3, 4):
            raise FieldValidationError(
                f"Invalid field declaration {option!r}, expected name:STORAGE:type[:@Attr,...]",
                details={"field": option},
            )
        attributes = parts[3] if len(parts) == 4 else ""
        return {
            "name": parts[0].strip(),
            "storage_type": parts[1].strip(),
            "language_type": parts[2].strip(),
            "attributes": [tag.strip() for tag in attributes.split(",") if tag.strip()],
        }

    def build_properties(self, declarations: Iterable[Mapping[str, Any]]) -> PropertySet:
        """Validate field declarations into a PropertySet."""
        return self._validator.build_property_set(declarations)

    def from_options(
        self, singular: str, plural: str | None, field_options: Iterable[str]
    ) -> tuple[EntityName, PropertySet]:
        """Build the entity from CLI options."""
        entity = self.create_entity_name(singular, plural)
        declarations = [self.parse_field_option(option) for option in field_options]
        return entity, self.build_properties(declarations)

    def from_mapping(self, document: Mapping[str, Any]) -> tuple[EntityName, PropertySet]:
        """Build the entity from a loaded definition document.

        Args:
            document: Mapping with ``name``, optional ``plural`` and ``fields``

        Returns:
            Tuple of (entity name, validated properties)
        """
        entity = self.create_entity_name(document.get("name") or "", document.get("plural"))
        return entity, self.build_properties(document.get("fields") or [])
