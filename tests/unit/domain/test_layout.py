"""Unit tests for the generated project layout."""

import pytest

from clean_scaffold.domain.layout import AGGREGATOR_FILE_NAME, LAYOUT, destination_for
from clean_scaffold.domain.models import EntityName, TemplateShape


class TestLayout:
    """Test layout order and destinations."""

    def test_directory_order(self):
        """Test directories are visited in generation order."""
        assert [step.directory for step in LAYOUT] == [
            "core/interfaces",
            "core/use_cases",
            "core/utils",
            "presentation/controllers",
            "infrastructure/config",
            "infrastructure/models",
            "infrastructure/repositories",
            "infrastructure/routes",
        ]

    def test_every_shape_placed_once(self):
        """Test each template shape is rendered exactly once."""
        placed = [shape for step in LAYOUT for shape in step.shapes]
        assert sorted(placed) == sorted(TemplateShape)
        assert len(placed) == len(set(placed))

    def test_single_aggregator_step(self):
        """Test only the config directory patches the aggregator."""
        steps = [step.directory for step in LAYOUT if step.patches_aggregator]
        assert steps == ["infrastructure/config"]
        assert AGGREGATOR_FILE_NAME == "sequelize.ts"

    @pytest.mark.parametrize(
        "shape,expected",
        [
            (TemplateShape.INTERFACE_REPOSITORY, "core/interfaces/IWidgetRepository.ts"),
            (TemplateShape.ADD_USE_CASE, "core/use_cases/Widget/AddWidget.ts"),
            (TemplateShape.GETS_USE_CASE, "core/use_cases/Widget/GetWidgets.ts"),
            (TemplateShape.DELETE_USE_CASE, "core/use_cases/Widget/DeleteWidget.ts"),
            (TemplateShape.UPDATE_USE_CASE, "core/use_cases/Widget/UpdateWidget.ts"),
            (TemplateShape.REQUEST_UTILS, "core/utils/Widget/Request.ts"),
            (TemplateShape.TYPES_UTILS, "core/utils/Widget/types.ts"),
            (TemplateShape.CONTROLLERS, "presentation/controllers/widgetControllers.ts"),
            (TemplateShape.MODEL, "infrastructure/models/widgetModel.ts"),
            (TemplateShape.REPOSITORY, "infrastructure/repositories/widgetRepository.ts"),
            (TemplateShape.ROUTES, "infrastructure/routes/widgetRoutes.ts"),
        ],
    )
    def test_destinations(self, shape, expected, entity):
        """Test each shape's path relative to the project root."""
        assert destination_for(shape, entity) == expected

    def test_plural_used_for_list_use_case(self):
        """Test the list use case is named after the plural."""
        entity = EntityName(singular="Person", plural="People")
        assert destination_for(TemplateShape.GETS_USE_CASE, entity) == (
            "core/use_cases/Person/GetPeople.ts"
        )
