"""Unit tests for the aggregator patcher."""

import pytest

from clean_scaffold.domain.aggregator import AggregatorPatcher
from clean_scaffold.domain.exceptions import RegistrationBlockNotFoundError
from clean_scaffold.domain.models import EntityName
from clean_scaffold.infrastructure.registration_formats import SequelizeRegistrationFormat

WIDGET_IMPORT = 'import { Widget } from "@infrastructure/models/widgetModel";\n'


class TestAggregatorPatcher:
    """Test AggregatorPatcher with the Sequelize format."""

    def setup_method(self):
        """Set up test fixtures."""
        self.patcher = AggregatorPatcher(SequelizeRegistrationFormat())

    def test_widget_scenario(self, aggregator_text, entity):
        """Test the import is prepended and the model appended."""
        patched = self.patcher.patch(aggregator_text, entity)

        assert patched.startswith(WIDGET_IMPORT)
        assert patched.count(WIDGET_IMPORT) == 1
        assert "models: [Note, Widget]," in patched
        assert patched[len(WIDGET_IMPORT) :] == aggregator_text.replace(
            "models: [Note]", "models: [Note, Widget]"
        )

    def test_idempotent(self, aggregator_text, entity):
        """Test patching twice gives the same text as patching once."""
        once = self.patcher.patch(aggregator_text, entity)
        assert self.patcher.patch(once, entity) == once

    def test_empty_list(self, entity):
        """Test registering into an empty list."""
        patched = self.patcher.patch("export default { models: [] };\n", entity)
        assert patched == WIDGET_IMPORT + "export default { models: [Widget] };\n"

    def test_trailing_comma_dropped(self, entity):
        """Test a trailing comma does not leave an empty entry."""
        patched = self.patcher.add_registration("models: [Note, ],", entity)
        assert patched == "models: [Note, Widget],"

    def test_whitespace_normalized(self, entity):
        """Test list spacing is rewritten to the canonical form."""
        patched = self.patcher.add_registration("models:[ Note ,User ]", entity)
        assert patched == "models: [Note, User, Widget]"

    def test_multi_line_list_not_found(self, entity):
        """Test a list spanning several lines is reported as missing."""
        text = "models: [\n  Note,\n  User,\n],\n"
        with pytest.raises(RegistrationBlockNotFoundError):
            self.patcher.patch(text, entity)

    def test_multi_line_single_entry_not_found(self, entity):
        """Test a one-entry list spanning several lines is not collapsed."""
        text = "export default {\n  models: [\n    Note,\n  ],\n};\n"
        with pytest.raises(RegistrationBlockNotFoundError):
            self.patcher.add_registration(text, entity)

    def test_multi_line_empty_list_not_found(self, entity):
        """Test an empty list with its bracket on the next line is not matched."""
        with pytest.raises(RegistrationBlockNotFoundError):
            self.patcher.add_registration("models: [\n]", entity)

    def test_missing_block(self, entity):
        """Test text without a models list fails."""
        with pytest.raises(RegistrationBlockNotFoundError) as exc_info:
            self.patcher.patch("export const x = 1;\n", entity)
        assert "models" in exc_info.value.pattern

    def test_only_first_block_patched(self, entity):
        """Test only the first models list is changed."""
        text = "a = { models: [Note] };\nb = { models: [User] };\n"
        patched = self.patcher.add_registration(text, entity)
        assert patched == "a = { models: [Note, Widget] };\nb = { models: [User] };\n"

    def test_existing_import_not_duplicated(self, entity):
        """Test an import already present elsewhere in the file is kept as is."""
        text = "// header\n" + WIDGET_IMPORT + "models: [Note]"
        patched = self.patcher.patch(text, entity)
        assert patched == "// header\n" + WIDGET_IMPORT + "models: [Note, Widget]"

    def test_already_listed_without_import(self, entity):
        """Test a listed entity still gets its import."""
        patched = self.patcher.patch("models: [Widget]", entity)
        assert patched == WIDGET_IMPORT + "models: [Widget]"

    def test_entry_match_is_exact(self):
        """Test a name that is a prefix of a listed entry is still added."""
        entity = EntityName(singular="Note", plural="Notes")
        patched = self.patcher.add_registration("models: [NoteTag]", entity)
        assert patched == "models: [NoteTag, Note]"

    def test_is_registered(self, aggregator_text, entity):
        """Test registration detection needs both the import and the entry."""
        assert self.patcher.is_registered(aggregator_text, entity) is False
        imported = self.patcher.add_import(aggregator_text, entity)
        assert self.patcher.is_registered(imported, entity) is False
        patched = self.patcher.patch(aggregator_text, entity)
        assert self.patcher.is_registered(patched, entity) is True
