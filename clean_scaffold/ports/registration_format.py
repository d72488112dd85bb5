"""Registration format port describing how an aggregator file lists entities."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from clean_scaffold.domain.models import EntityName, RegistrationBlock


@runtime_checkable
class RegistrationFormatPort(Protocol):
    """Port for reading and writing the registration list of an aggregator."""

    def import_line(self, entity: EntityName) -> str:
        """Build the canonical import line for an entity.

        Args:
            entity: Entity being registered

        Returns:
            Import statement, including its trailing newline
        """
        ...

    def locate(self, text: str) -> RegistrationBlock:
        """Find the registration list in aggregator text.

        Args:
            text: Whole aggregator file content

        Returns:
            Location and inner text of the list

        Raises:
            RegistrationBlockNotFoundError: If the text has no such list
        """
        ...

    def parse_entries(self, inner: str) -> list[str]:
        """Split the inner text of the list into entries.

        Args:
            inner: Text between the list delimiters

        Returns:
            Registered names in their current order
        """
        ...

    def serialize_entries(self, entries: list[str]) -> str:
        """Render a complete registration list.

        Args:
            entries: Registered names in order

        Returns:
            Replacement text for the located block
        """
        ...
