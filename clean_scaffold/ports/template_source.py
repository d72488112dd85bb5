"""Template source port resolving a template shape to its raw text."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from clean_scaffold.domain.models import TemplateShape


class TemplateSourcePort(Protocol):
    """Port for loading template text."""

    def location(self, shape: TemplateShape) -> str:
        """Get the configured location of a shape's template.

        Raises:
            TemplateConfigError: If no location is configured
        """
        ...

    def load(self, shape: TemplateShape) -> str:
        """Load the raw text of a shape's template.

        Args:
            shape: Template shape to load

        Returns:
            Template text, placeholders untouched

        Raises:
            TemplateConfigError: If no location is configured
            TemplateReadError: If the template cannot be read
        """
        ...
