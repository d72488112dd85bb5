"""Domain-specific exceptions for clean-scaffold."""


class ScaffoldError(Exception):
    """Base exception for all clean-scaffold errors."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class FieldValidationError(ScaffoldError):
    """A field declaration or entity definition was rejected."""

    pass


class EmptyNameError(FieldValidationError):
    """Raised when a field name is blank after trimming."""

    def __init__(self, name: str = ""):
        super().__init__("Field name cannot be empty", details={"name": name})


class UnknownStorageTypeError(FieldValidationError):
    """Raised when a storage type is not a known Sequelize DataType."""

    def __init__(self, storage_type: str, field_name: str | None = None):
        super().__init__(
            f"Invalid database type: {storage_type}",
            details={"storage_type": storage_type, "field": field_name},
        )
        self.storage_type = storage_type


class UnknownLanguageTypeError(FieldValidationError):
    """Raised when a language type is not a known TypeScript type."""

    def __init__(self, language_type: str, field_name: str | None = None):
        super().__init__(
            f"Invalid JavaScript type: {language_type}",
            details={"language_type": language_type, "field": field_name},
        )
        self.language_type = language_type


class UnknownAttributeError(FieldValidationError):
    """Raised for the first attribute tag outside the decorator vocabulary."""

    def __init__(self, tag: str, field_name: str | None = None):
        super().__init__(
            f"Invalid attribute: {tag}",
            details={"attribute": tag, "field": field_name},
        )
        self.tag = tag


class EmptyPropertySetError(FieldValidationError):
    """Raised when an entity declares no fields."""

    def __init__(self):
        super().__init__("An entity needs at least one field")


class InvalidEntityNameError(FieldValidationError):
    """Raised when the singular or plural entity token is unusable."""

    def __init__(self, value: str, reason: str):
        super().__init__(f"Invalid entity name {value!r}: {reason}", details={"value": value})


class TemplateConfigError(ScaffoldError):
    """Raised when no template location is configured for a shape."""

    def __init__(self, variable: str):
        super().__init__(f"{variable} not set in .env file", details={"variable": variable})
        self.variable = variable


class TemplateReadError(ScaffoldError):
    """Raised when a configured template cannot be read."""

    def __init__(self, path: str, reason: str):
        super().__init__(f"Unable to read template {path}: {reason}", details={"path": path})
        self.path = path


class RegistrationBlockNotFoundError(ScaffoldError):
    """Raised when the aggregator text has no registration list to patch."""

    def __init__(self, pattern: str):
        super().__init__(
            "Registration block not found in aggregator file", details={"pattern": pattern}
        )
        self.pattern = pattern
