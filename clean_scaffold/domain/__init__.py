"""Domain layer for clean-scaffold - Contains business logic and entities."""

from clean_scaffold.domain.aggregator import AggregatorPatcher
from clean_scaffold.domain.exceptions import (
    EmptyNameError,
    EmptyPropertySetError,
    FieldValidationError,
    InvalidEntityNameError,
    RegistrationBlockNotFoundError,
    ScaffoldError,
    TemplateConfigError,
    TemplateReadError,
    UnknownAttributeError,
    UnknownLanguageTypeError,
    UnknownStorageTypeError,
)
from clean_scaffold.domain.field_validator import FieldSpecValidator, validate_field
from clean_scaffold.domain.models import (
    EntityName,
    FieldAttribute,
    FieldSpec,
    GeneratedFile,
    LanguageType,
    PropertySet,
    RegistrationBlock,
    StorageType,
    TemplateShape,
)
from clean_scaffold.domain.template_engine import TemplateEngine

__all__ = [
    # Models
    "EntityName",
    "FieldAttribute",
    "FieldSpec",
    "GeneratedFile",
    "LanguageType",
    "PropertySet",
    "RegistrationBlock",
    "StorageType",
    "TemplateShape",
    # Services
    "AggregatorPatcher",
    "FieldSpecValidator",
    "TemplateEngine",
    "validate_field",
    # Errors
    "EmptyNameError",
    "EmptyPropertySetError",
    "FieldValidationError",
    "InvalidEntityNameError",
    "RegistrationBlockNotFoundError",
    "ScaffoldError",
    "TemplateConfigError",
    "TemplateReadError",
    "UnknownAttributeError",
    "UnknownLanguageTypeError",
    "UnknownStorageTypeError",
]
