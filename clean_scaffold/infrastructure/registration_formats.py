"""Registration format implementations for aggregator files."""

from __future__ import annotations

import re

from clean_scaffold.domain.exceptions import RegistrationBlockNotFoundError
from clean_scaffold.domain.models import EntityName, RegistrationBlock


class SequelizeRegistrationFormat:
    """Format of a sequelize-typescript config listing models in ``models: [...]``.

    The list must be written on a single line. A list spread over several
    lines is reported as missing instead of being rewritten.
    """

    MODELS_PATTERN = re.compile(r"models:\s*\[[^\S\n]*(.*?)[^\S\n]*]")

    def __init__(self, models_import_prefix: str = "@infrastructure/models"):
        """Initialize the format.

        Args:
            models_import_prefix: Module path the model files are imported from
        """
        self._models_import_prefix = models_import_prefix

    def import_line(self, entity: EntityName) -> str:
        """Build ``import { Widget } from "@infrastructure/models/widgetModel";``."""
        return (
            f"import {{ {entity.singular} }} from "
            f'"{self._models_import_prefix}/{entity.lower}Model";\n'
        )

    def locate(self, text: str) -> RegistrationBlock:
        """Find the first ``models: [...]`` literal."""
        match = self.MODELS_PATTERN.search(text)
        if match is None:
            raise RegistrationBlockNotFoundError(self.MODELS_PATTERN.pattern)
        return RegistrationBlock(start=match.start(), end=match.end(), inner=match.group(1))

    def parse_entries(self, inner: str) -> list[str]:
        """Split on commas, dropping blanks left by trailing commas."""
        return [entry.strip() for entry in inner.split(",") if entry.strip()]

    def serialize_entries(self, entries: list[str]) -> str:
        """Render ``models: [A, B]``."""
        return f"models: [{', '.join(entries)}]"
