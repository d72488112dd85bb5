"""Unit tests for domain models."""

import pytest
from pydantic import ValidationError

from clean_scaffold.domain.models import (
    EntityName,
    FieldAttribute,
    FieldSpec,
    LanguageType,
    PropertySet,
    ScaffoldSettings,
    StorageType,
    TemplateShape,
)


class TestVocabularies:
    """Test the closed enumerations."""

    def test_storage_types(self):
        """Test all Sequelize data types are defined."""
        assert [t.value for t in StorageType] == [
            "INTEGER",
            "BIGINT",
            "FLOAT",
            "REAL",
            "DOUBLE",
            "DECIMAL",
            "STRING",
            "TEXT",
            "BOOLEAN",
            "DATE",
            "DATEONLY",
            "TIME",
            "UUID",
            "JSON",
        ]

    def test_language_types(self):
        """Test TypeScript type names keep their case."""
        assert LanguageType.DATE == "Date"
        assert LanguageType.NUMBER == "number"
        assert len(LanguageType) == 11

    def test_attributes_are_decorators(self):
        """Test every attribute tag is a decorator."""
        assert len(FieldAttribute) == 18
        assert all(tag.value.startswith("@") for tag in FieldAttribute)

    def test_template_shape_env_vars(self):
        """Test each shape names its template variable."""
        assert TemplateShape.MODEL.env_var == "MODEL_TEMPLATE"
        assert TemplateShape.GETS_USE_CASE.env_var == "GETS_USE_CASE_TEMPLATE"
        assert all(shape.env_var.endswith("_TEMPLATE") for shape in TemplateShape)


class TestFieldSpec:
    """Test FieldSpec value object."""

    def test_frozen_model(self):
        """Test FieldSpec is immutable."""
        field = FieldSpec(name="content", storage_type="STRING", language_type="string")
        with pytest.raises(ValidationError):
            field.name = "other"

    def test_identifier_by_name(self):
        """Test a field named id is an identifier whatever its attributes."""
        field = FieldSpec(name="id", storage_type="INTEGER", language_type="number")
        assert field.is_identifier is True

    def test_primary_key_alone_not_identifier(self):
        """Test a primary key with another name is not the identifier."""
        field = FieldSpec(
            attributes=(FieldAttribute.PRIMARY_KEY,),
            name="uuid",
            storage_type="UUID",
            language_type="string",
        )
        assert field.is_identifier is False

    def test_regular_field(self):
        """Test an ordinary field is not an identifier."""
        field = FieldSpec(
            attributes=(FieldAttribute.UNIQUE,),
            name="email",
            storage_type="STRING",
            language_type="string",
        )
        assert field.is_identifier is False


class TestPropertySet:
    """Test PropertySet aggregate."""

    def test_order_preserved(self, properties):
        """Test fields keep declaration order."""
        assert properties.names() == ["id", "content", "name"]
        assert len(properties) == 3
        assert properties.fields[1].name == "content"

    def test_request_fields_exclude_identifier(self, properties):
        """Test request fields drop the identifier."""
        assert [f.name for f in properties.request_fields()] == ["content", "name"]
        assert [f.name for f in properties.record_fields()] == ["id", "content", "name"]

    def test_empty_rejected(self):
        """Test a PropertySet needs at least one field."""
        with pytest.raises(ValidationError):
            PropertySet(fields=())

    def test_duplicate_names_allowed(self):
        """Test duplicate names are kept verbatim."""
        field = FieldSpec(name="tag", storage_type="STRING", language_type="string")
        assert PropertySet(fields=(field, field)).names() == ["tag", "tag"]


class TestEntityName:
    """Test EntityName value object."""

    def test_lower_forms(self):
        """Test lower-case forms are plain case folding."""
        entity = EntityName(singular="BlogPost", plural="BlogPosts")
        assert entity.lower == "blogpost"
        assert entity.lower_plural == "blogposts"

    def test_plural_not_inflected(self):
        """Test the plural is used as given."""
        entity = EntityName(singular="Person", plural="People")
        assert entity.plural == "People"

    @pytest.mark.parametrize("token", ["", "   ", "Blog Post"])
    def test_invalid_tokens(self, token):
        """Test blank tokens and tokens with whitespace are rejected."""
        with pytest.raises(ValidationError):
            EntityName(singular=token, plural="Posts")


class TestScaffoldSettings:
    """Test ScaffoldSettings value object."""

    def test_defaults(self):
        """Test settings defaults."""
        settings = ScaffoldSettings()
        assert settings.project_root == "."
        assert settings.env_file == ".env"
        assert settings.aggregator_file == "sequelize.ts"
        assert settings.patch_aggregator is True

    def test_aggregator_must_be_file_name(self):
        """Test the aggregator setting rejects paths."""
        with pytest.raises(ValidationError):
            ScaffoldSettings(aggregator_file="config/sequelize.ts")
