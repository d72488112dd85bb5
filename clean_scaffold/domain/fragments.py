"""Fragment renderer deriving the dynamic template blocks from a field list.

Every renderer is a pure function over an iterable of ``FieldSpec`` (usually
a ``PropertySet``). Entries are joined by a per-kind separator: nothing is
emitted before the first entry or after the last one, so an empty field
list always renders as an empty string.

The tabs at the end of each separator are the continuation indentation of
the surrounding template, whose first entry is already indented.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable

from clean_scaffold.domain.models import EntityName, FieldSpec, PropertySet, TemplateShape

MODEL_SEPARATOR = "\n\n"
ADD_SEPARATOR = "\n\n\n\t\t\t"
UPDATE_SEPARATOR = "\n\t\t"
TYPE_SEPARATOR = "\n\t"
CONTROLLER_SEPARATOR = "\n\t\t\t\t"

FieldSource = PropertySet | Iterable[FieldSpec]


def _fields(properties: FieldSource) -> list[FieldSpec]:
    if isinstance(properties, PropertySet):
        return properties.record_fields()
    return list(properties)


def _request_fields(properties: FieldSource) -> list[FieldSpec]:
    return [field for field in _fields(properties) if not field.is_identifier]


def render_model_field(field: FieldSpec) -> str:
    """Render the decorators and column declaration of one model property."""
    lines = [f"\t{attribute.value}" for attribute in field.attributes]
    lines.append(f"\t@Column(DataType.{field.storage_type.value.upper()})")
    lines.append(f"\t{field.name}!: {field.language_type.value};")
    return "\n".join(lines)


def render_model_properties(properties: FieldSource) -> str:
    """Render the full attribute block of the model class."""
    return MODEL_SEPARATOR.join(render_model_field(f) for f in _fields(properties))


def render_add_assignments(properties: FieldSource) -> str:
    """Render the object literal entries built by the add use case."""
    return ADD_SEPARATOR.join(
        f"{f.name}: request.{f.name}," for f in _request_fields(properties)
    )


def render_update_assignments(properties: FieldSource, entity: EntityName) -> str:
    """Render the property assignments performed by the update use case."""
    return UPDATE_SEPARATOR.join(
        f"{entity.lower}.{f.name} = request.{f.name};" for f in _request_fields(properties)
    )


def render_type_attributes(properties: FieldSource) -> str:
    """Render the full record type declaration, identifier included."""
    return TYPE_SEPARATOR.join(
        f"{f.name}: {f.language_type.value};" for f in _fields(properties)
    )


def render_type_details(properties: FieldSource) -> str:
    """Render the request type declaration, identifier excluded."""
    return TYPE_SEPARATOR.join(
        f"{f.name}: {f.language_type.value};" for f in _request_fields(properties)
    )


def render_controller_assignments(properties: FieldSource) -> str:
    """Render the request body mapping of the controller."""
    return CONTROLLER_SEPARATOR.join(
        f"{f.name}: req.body.{f.name}," for f in _request_fields(properties)
    )


_SHAPE_FRAGMENTS: dict[TemplateShape, dict[str, Callable[[FieldSource, EntityName], str]]] = {
    TemplateShape.MODEL: {
        "DYNAMIC_PROPERTIES": lambda p, e: render_model_properties(p),
    },
    TemplateShape.ADD_USE_CASE: {
        "DYNAMIC_ADD_PROPERTIES": lambda p, e: render_add_assignments(p),
    },
    TemplateShape.UPDATE_USE_CASE: {
        "DYNAMIC_UPDATE_PROPERTIES": render_update_assignments,
    },
    TemplateShape.TYPES_UTILS: {
        "DYNAMIC_PROPERTIES_ATTRIBUTES": lambda p, e: render_type_attributes(p),
        "DYNAMIC_PROPERTIES_DETAILS": lambda p, e: render_type_details(p),
    },
    TemplateShape.CONTROLLERS: {
        "DYNAMIC_PROPERTIES_DETAILS": lambda p, e: render_controller_assignments(p),
    },
}


def fragments_for(
    shape: TemplateShape, properties: FieldSource, entity: EntityName
) -> dict[str, str]:
    """Render every dynamic fragment of one template shape.

    Returns:
        Mapping of placeholder name (without braces) to rendered text; empty
        for shapes that only use the entity name placeholders
    """
    fields = _fields(properties)
    return {
        placeholder: render(fields, entity)
        for placeholder, render in _SHAPE_FRAGMENTS.get(shape, {}).items()
    }
