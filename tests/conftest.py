"""Pytest configuration and shared fixtures for clean-scaffold tests."""

import tempfile
from collections.abc import Generator
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from clean_scaffold.domain.field_validator import FieldSpecValidator
from clean_scaffold.domain.models import EntityName, PropertySet

AGGREGATOR_TEXT = """import { Sequelize } from "sequelize-typescript";
import { Note } from "@infrastructure/models/noteModel";

export const sequelize = new Sequelize({
  dialect: "postgres",
  models: [Note],
});
"""


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for testing.

    Yields:
        Path to the temporary directory
    """
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def entity() -> EntityName:
    """Create the Widget entity name."""
    return EntityName(singular="Widget", plural="Widgets")


@pytest.fixture
def properties() -> PropertySet:
    """Create the id/content/name field list.

    Returns:
        A valid PropertySet with an auto-increment primary key
    """
    validator = FieldSpecValidator()
    return PropertySet(
        fields=(
            validator.validate(["@PrimaryKey", "@AutoIncrement"], "id", "INTEGER", "number"),
            validator.validate([], "content", "STRING", "string"),
            validator.validate([], "name", "STRING", "string"),
        )
    )


@pytest.fixture
def aggregator_text() -> str:
    """Sequelize config registering one unrelated model."""
    return AGGREGATOR_TEXT


@pytest.fixture
def mock_console() -> MagicMock:
    """Create a mock console adapter.

    Returns:
        A mocked console adapter
    """
    mock = MagicMock()
    mock.print = MagicMock()
    mock.print_error = MagicMock()
    mock.print_success = MagicMock()
    mock.print_warning = MagicMock()
    mock.print_table = MagicMock()
    return mock


@pytest.fixture
def mock_file_system() -> MagicMock:
    """Create a mock file system adapter.

    Returns:
        A mocked file system adapter
    """
    mock = MagicMock()
    mock.read_file = MagicMock(return_value=AGGREGATOR_TEXT)
    mock.write_file = MagicMock()
    mock.create_directory = MagicMock()
    mock.path_exists = MagicMock(return_value=True)
    return mock


@pytest.fixture
def mock_environment() -> MagicMock:
    """Create a mock environment adapter with no variables set."""
    mock = MagicMock()
    mock.get_environment_variable = MagicMock(return_value=None)
    mock.load_env_file = MagicMock(return_value=False)
    return mock
