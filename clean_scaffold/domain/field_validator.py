"""Domain service validating field declarations."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from clean_scaffold.domain.exceptions import (
    EmptyNameError,
    EmptyPropertySetError,
    FieldValidationError,
    UnknownAttributeError,
    UnknownLanguageTypeError,
    UnknownStorageTypeError,
)
from clean_scaffold.domain.models import (
    FieldAttribute,
    FieldSpec,
    LanguageType,
    PropertySet,
    StorageType,
)


class FieldSpecValidator:
    """Domain service turning raw field declarations into FieldSpec objects."""

    def validate(
        self,
        attributes: Iterable[str | FieldAttribute],
        name: str,
        storage_type: str | StorageType,
        language_type: str | LanguageType,
    ) -> FieldSpec:
        """Validate one field declaration.

        Checks run in a fixed order and the first failure wins: name, storage
        type, language type, then attributes in declaration order.

        Args:
            attributes: Decorator tags, e.g. ``["@PrimaryKey"]``
            name: Property name
            storage_type: Sequelize DataType name, e.g. ``"INTEGER"``
            language_type: TypeScript type name, e.g. ``"number"``

        Returns:
            Immutable FieldSpec keeping the attribute order

        Raises:
            FieldValidationError: If the name is not a string
            EmptyNameError: If the name is blank
            UnknownStorageTypeError: If the storage type is unknown
            UnknownLanguageTypeError: If the language type is unknown
            UnknownAttributeError: For the first unknown attribute tag
        """
        if not isinstance(name, str):
            raise FieldValidationError(
                f"Field name must be a string, got {name!r}", details={"name": name}
            )
        if not name.strip():
            raise EmptyNameError(name)

        try:
            storage = StorageType(storage_type)
        except ValueError:
            raise UnknownStorageTypeError(str(storage_type), name) from None

        try:
            language = LanguageType(language_type)
        except ValueError:
            raise UnknownLanguageTypeError(str(language_type), name) from None

        tags: list[FieldAttribute] = []
        for tag in attributes:
            try:
                tags.append(FieldAttribute(tag))
            except ValueError:
                raise UnknownAttributeError(str(tag), name) from None

        return FieldSpec(
            attributes=tuple(tags),
            name=name,
            storage_type=storage,
            language_type=language,
        )

    def validate_declaration(self, declaration: Mapping[str, Any]) -> FieldSpec:
        """Validate a field declared as a mapping.

        The mapping uses the keys ``name``, ``storage_type``,
        ``language_type`` and optionally ``attributes`` (a list, or a
        comma-separated string).
        """
        attributes = declaration.get("attributes") or []
        if isinstance(attributes, str):
            attributes = [tag.strip() for tag in attributes.split(",") if tag.strip()]
        elif not isinstance(attributes, (list, tuple)):
            raise FieldValidationError(
                f"Field attributes must be a list, got {attributes!r}",
                details={"attributes": attributes},
            )
        return self.validate(
            attributes,
            declaration.get("name", ""),
            declaration.get("storage_type", ""),
            declaration.get("language_type", ""),
        )

    def build_property_set(self, declarations: Iterable[Mapping[str, Any]]) -> PropertySet:
        """Validate declarations in order and collect them into a PropertySet.

        Raises:
            FieldValidationError: On the first invalid declaration, or when
                no declarations are given
        """
        fields = tuple(self.validate_declaration(d) for d in declarations)
        if not fields:
            raise EmptyPropertySetError()
        return PropertySet(fields=fields)


def validate_field(
    attributes: Iterable[str | FieldAttribute],
    name: str,
    storage_type: str | StorageType,
    language_type: str | LanguageType,
) -> FieldSpec:
    """Shortcut for ``FieldSpecValidator().validate(...)``."""
    return FieldSpecValidator().validate(attributes, name, storage_type, language_type)
