"""Domain models for clean-scaffold following DDD principles."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field, field_validator

IDENTIFIER_FIELD_NAME = "id"


class StorageType(str, Enum):
    """Value object representing the Sequelize column data types."""

    INTEGER = "INTEGER"
    BIGINT = "BIGINT"
    FLOAT = "FLOAT"
    REAL = "REAL"
    DOUBLE = "DOUBLE"
    DECIMAL = "DECIMAL"
    STRING = "STRING"
    TEXT = "TEXT"
    BOOLEAN = "BOOLEAN"
    DATE = "DATE"
    DATEONLY = "DATEONLY"
    TIME = "TIME"
    UUID = "UUID"
    JSON = "JSON"


class LanguageType(str, Enum):
    """Value object representing the TypeScript primitive type names."""

    NUMBER = "number"
    STRING = "string"
    BOOLEAN = "boolean"
    FLOAT = "float"
    DOUBLE = "double"
    DATE = "Date"
    OBJECT = "object"
    FUNCTION = "function"
    UNDEFINED = "undefined"
    SYMBOL = "symbol"
    NULL = "null"


class FieldAttribute(str, Enum):
    """Value object representing a sequelize-typescript column decorator."""

    PRIMARY_KEY = "@PrimaryKey"
    AUTO_INCREMENT = "@AutoIncrement"
    UNIQUE = "@Unique"
    INDEX = "@Index"
    CREATED_AT = "@CreatedAt"
    UPDATED_AT = "@UpdatedAt"
    DELETED_AT = "@DeletedAt"
    FOREIGN_KEY = "@ForeignKey"
    BELONGS_TO = "@BelongsTo"
    HAS_MANY = "@HasMany"
    HAS_ONE = "@HasOne"
    DEFAULT_SCOPE = "@DefaultScope"
    SCOPES = "@Scopes"
    ALLOW_NULL = "@AllowNull"
    COMMENT = "@Comment"
    DEFAULT = "@Default"
    LENGTH = "@Length"
    REFERENCES = "@References"


class TemplateShape(str, Enum):
    """Value object representing one kind of generated file.

    The value is the environment variable that holds the template location.
    """

    MODEL = "MODEL_TEMPLATE"
    INTERFACE_REPOSITORY = "INTERFACE_REPOSITORY_TEMPLATE"
    REPOSITORY = "REPOSITORY_TEMPLATE"
    ADD_USE_CASE = "ADD_USE_CASE_TEMPLATE"
    GETS_USE_CASE = "GETS_USE_CASE_TEMPLATE"
    DELETE_USE_CASE = "DELETE_USE_CASE_TEMPLATE"
    UPDATE_USE_CASE = "UPDATE_USE_CASE_TEMPLATE"
    REQUEST_UTILS = "REQUEST_UTILS_TEMPLATE"
    TYPES_UTILS = "TYPES_UTILS_TEMPLATE"
    CONTROLLERS = "CONTROLLERS_TEMPLATE"
    ROUTES = "ROUTES_TEMPLATE"

    @property
    def env_var(self) -> str:
        """Name of the environment variable holding the template path."""
        return self.value


class FieldSpec(BaseModel):
    """Value object representing one declared field of an entity."""

    attributes: tuple[FieldAttribute, ...] = Field(
        default=(), description="Column decorators in rendering order"
    )
    name: str = Field(..., description="Property name as written in generated code")
    storage_type: StorageType = Field(..., description="Sequelize DataType of the column")
    language_type: LanguageType = Field(..., description="TypeScript type of the property")

    @property
    def is_identifier(self) -> bool:
        """Whether the persistence layer assigns this field's value.

        Only the reserved name counts, whatever the attributes. Identifier
        fields are kept out of every request-shaped fragment.
        """
        return self.name == IDENTIFIER_FIELD_NAME

    model_config = {"frozen": True}


class PropertySet(BaseModel):
    """Aggregate holding the ordered fields of one entity."""

    fields: tuple[FieldSpec, ...] = Field(
        ..., min_length=1, description="Fields in declaration order"
    )

    def __len__(self) -> int:
        return len(self.fields)

    def names(self) -> list[str]:
        """Get the field names in declaration order, duplicates included."""
        return [field.name for field in self.fields]

    def record_fields(self) -> list[FieldSpec]:
        """Get every field, as stored in a full record."""
        return list(self.fields)

    def request_fields(self) -> list[FieldSpec]:
        """Get the fields a caller supplies in a request."""
        return [field for field in self.fields if not field.is_identifier]

    model_config = {"frozen": True}


class EntityName(BaseModel):
    """Value object holding the singular and plural tokens of an entity."""

    singular: str = Field(..., min_length=1, description="Singular name, e.g. Widget")
    plural: str = Field(..., min_length=1, description="Plural name, e.g. Widgets")

    @field_validator("singular", "plural")
    @classmethod
    def validate_token(cls, v: str) -> str:
        """Reject tokens that are blank or contain whitespace."""
        if not v.strip() or any(ch.isspace() for ch in v):
            raise ValueError("Entity name tokens must be non-empty and contain no whitespace")
        return v

    @property
    def lower(self) -> str:
        return self.singular.lower()

    @property
    def lower_plural(self) -> str:
        return self.plural.lower()

    model_config = {"frozen": True}


class ScaffoldSettings(BaseModel):
    """Value object for the settings of one generation run."""

    project_root: str = Field(default=".", description="Root of the target project")
    env_file: str = Field(default=".env", description="File holding the template locations")
    templates_dir: str | None = Field(
        None, description="Directory that relative template paths resolve against"
    )
    aggregator_file: str = Field(
        default="sequelize.ts", min_length=1, description="Aggregator file name"
    )
    patch_aggregator: bool = Field(default=True, description="Register the entity")

    @field_validator("aggregator_file")
    @classmethod
    def validate_aggregator_file(cls, v: str) -> str:
        """Ensure the aggregator is a bare file name."""
        if "/" in v or "\\" in v:
            raise ValueError("aggregator_file must be a file name, not a path")
        return v

    model_config = {"frozen": True}


class RegistrationBlock(BaseModel):
    """Value object locating the registration list inside aggregator text."""

    start: int = Field(..., ge=0, description="Offset of the first character of the block")
    end: int = Field(..., ge=0, description="Offset just past the block")
    inner: str = Field(..., description="Text between the list delimiters")

    model_config = {"frozen": True}


class GeneratedFile(BaseModel):
    """Value object representing one file written during a run."""

    shape: TemplateShape | None = Field(
        None, description="Template shape, None for the aggregator file"
    )
    path: str = Field(..., description="Destination path")
    content: str = Field(..., description="Final file content")

    model_config = {"frozen": True}
