"""Template engine performing literal placeholder substitution."""

from __future__ import annotations

import logging
from collections.abc import Mapping

from clean_scaffold.domain.fragments import FieldSource, fragments_for
from clean_scaffold.domain.models import EntityName, TemplateShape
from clean_scaffold.ports.template_source import TemplateSourcePort

logger = logging.getLogger(__name__)


def placeholder(name: str) -> str:
    """Wrap a placeholder name in braces, e.g. ``NAME_UPPER`` -> ``{NAME_UPPER}``."""
    return "{" + name + "}"


def entity_tokens(entity: EntityName) -> dict[str, str]:
    """Get the entity name placeholders in substitution order."""
    return {
        "NAME_UPPER": entity.singular,
        "NAME_UPPER_PLURAL": entity.plural,
        "NAME_LOWER": entity.lower,
        "NAME_LOWER_PLURAL": entity.lower_plural,
    }


class TemplateEngine:
    """Renders opaque templates by replacing a fixed set of placeholders.

    Substitution is literal and replaces every occurrence. Placeholders the
    engine does not know are left as they are, and template text is never
    validated.
    """

    def __init__(self, template_source: TemplateSourcePort | None = None):
        """Initialize the engine.

        Args:
            template_source: Source used by render_shape to load templates
        """
        self._template_source = template_source

    def render(
        self,
        template_text: str,
        entity: EntityName,
        fragments: Mapping[str, str] | None = None,
    ) -> str:
        """Substitute entity tokens, then shape fragments, into a template.

        Args:
            template_text: Raw template content
            entity: Entity whose name tokens are substituted
            fragments: Placeholder name (without braces) to rendered text

        Returns:
            Rendered content
        """
        content = template_text
        for name, value in entity_tokens(entity).items():
            content = content.replace(placeholder(name), value)
        for name, value in (fragments or {}).items():
            content = content.replace(placeholder(name), value)
        return content

    def render_shape(
        self, shape: TemplateShape, entity: EntityName, properties: FieldSource
    ) -> str:
        """Load the template of a shape and render it for an entity.

        Raises:
            TemplateConfigError: If no location is configured for the shape
            TemplateReadError: If the template cannot be read
            RuntimeError: If the engine was created without a template source
        """
        if self._template_source is None:
            raise RuntimeError("TemplateEngine has no template source configured")

        template_text = self._template_source.load(shape)
        fragments = fragments_for(shape, properties, entity)
        logger.debug(
            "Rendering %s for %s with placeholders %s",
            shape.name,
            entity.singular,
            ", ".join(fragments) or "-",
        )
        return self.render(template_text, entity, fragments)
