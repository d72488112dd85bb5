"""Configuration adapter loading entity definition documents."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import yaml

REQUIRED_FIELD_KEYS = ("name", "storage_type", "language_type")


class ConfigurationAdapter:
    """Adapter for entity definition files in YAML or JSON."""

    def load_configuration(self, path: str) -> dict[str, Any]:
        """Load an entity definition from the specified path."""
        config_path = Path(path)

        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {path}")

        try:
            content = config_path.read_text(encoding="utf-8")
            if path.endswith(".json"):
                data = json.loads(content)
            else:
                data = yaml.safe_load(content) or {}
        except (OSError, ValueError, yaml.YAMLError) as e:
            raise ValueError(f"Invalid configuration file {path}: {e}") from e

        if not isinstance(data, dict):
            raise ValueError(f"Invalid configuration file {path}: expected a mapping")
        return data

    def validate_configuration(self, config: dict[str, Any]) -> tuple[bool, list[str]]:
        """Validate the structure of an entity definition.

        Only the document shape is checked here; field values are validated
        by the domain when the definition is turned into a PropertySet.
        """
        errors = []

        name = config.get("name")
        if not name or not isinstance(name, str):
            errors.append("name must be a non-empty string")

        plural = config.get("plural")
        if plural is not None and (not plural or not isinstance(plural, str)):
            errors.append("plural must be a non-empty string when given")

        fields = config.get("fields")
        if not isinstance(fields, list) or not fields:
            errors.append("fields must be a non-empty list")
            fields = []

        for index, field in enumerate(fields):
            if not isinstance(field, dict):
                errors.append(f"fields[{index}] must be a mapping")
                continue
            for key in REQUIRED_FIELD_KEYS:
                if key not in field:
                    errors.append(f"fields[{index}] is missing required key: {key}")
                elif not isinstance(field[key], str):
                    errors.append(f"fields[{index}].{key} must be a string")
            attributes = field.get("attributes", [])
            if attributes is not None and not isinstance(attributes, (list, str)):
                errors.append(f"fields[{index}].attributes must be a list")

        is_valid = len(errors) == 0
        return is_valid, errors
