"""Directory layout of a generated clean architecture project."""

from __future__ import annotations

from pydantic import BaseModel, Field

from clean_scaffold.domain.models import EntityName, TemplateShape

AGGREGATOR_FILE_NAME = "sequelize.ts"


class LayoutStep(BaseModel):
    """Value object for one directory of the layout and what goes into it."""

    directory: str = Field(..., description="Directory relative to the project root")
    shapes: tuple[TemplateShape, ...] = Field(default=(), description="Shapes rendered here")
    patches_aggregator: bool = Field(
        default=False, description="Whether the aggregator file lives here"
    )

    model_config = {"frozen": True}


LAYOUT: tuple[LayoutStep, ...] = (
    LayoutStep(directory="core/interfaces", shapes=(TemplateShape.INTERFACE_REPOSITORY,)),
    LayoutStep(
        directory="core/use_cases",
        shapes=(
            TemplateShape.ADD_USE_CASE,
            TemplateShape.GETS_USE_CASE,
            TemplateShape.DELETE_USE_CASE,
            TemplateShape.UPDATE_USE_CASE,
        ),
    ),
    LayoutStep(
        directory="core/utils",
        shapes=(TemplateShape.REQUEST_UTILS, TemplateShape.TYPES_UTILS),
    ),
    LayoutStep(directory="presentation/controllers", shapes=(TemplateShape.CONTROLLERS,)),
    LayoutStep(directory="infrastructure/config", patches_aggregator=True),
    LayoutStep(directory="infrastructure/models", shapes=(TemplateShape.MODEL,)),
    LayoutStep(directory="infrastructure/repositories", shapes=(TemplateShape.REPOSITORY,)),
    LayoutStep(directory="infrastructure/routes", shapes=(TemplateShape.ROUTES,)),
)


def file_name_for(shape: TemplateShape, entity: EntityName) -> str:
    """Get the file name of a shape, relative to its layout directory.

    Use cases and utils go into a per-entity subdirectory.
    """
    names = {
        TemplateShape.INTERFACE_REPOSITORY: f"I{entity.singular}Repository.ts",
        TemplateShape.ADD_USE_CASE: f"{entity.singular}/Add{entity.singular}.ts",
        TemplateShape.GETS_USE_CASE: f"{entity.singular}/Get{entity.plural}.ts",
        TemplateShape.DELETE_USE_CASE: f"{entity.singular}/Delete{entity.singular}.ts",
        TemplateShape.UPDATE_USE_CASE: f"{entity.singular}/Update{entity.singular}.ts",
        TemplateShape.REQUEST_UTILS: f"{entity.singular}/Request.ts",
        TemplateShape.TYPES_UTILS: f"{entity.singular}/types.ts",
        TemplateShape.CONTROLLERS: f"{entity.lower}Controllers.ts",
        TemplateShape.MODEL: f"{entity.lower}Model.ts",
        TemplateShape.REPOSITORY: f"{entity.lower}Repository.ts",
        TemplateShape.ROUTES: f"{entity.lower}Routes.ts",
    }
    return names[shape]


def destination_for(shape: TemplateShape, entity: EntityName) -> str:
    """Get the path of a shape's output file relative to the project root."""
    for step in LAYOUT:
        if shape in step.shapes:
            return f"{step.directory}/{file_name_for(shape, entity)}"
    raise ValueError(f"Shape {shape.name} has no place in the layout")

