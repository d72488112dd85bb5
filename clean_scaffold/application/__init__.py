"""Application layer for clean-scaffold - Contains use cases and application services."""

from clean_scaffold.application.entity_definition_service import EntityDefinitionService
from clean_scaffold.application.scaffold_service import ScaffoldService

__all__ = [
    "EntityDefinitionService",
    "ScaffoldService",
]
