"""Creation of the project's pyproject.toml from a template."""

from __future__ import annotations

import enum
import logging

from famg.git import GitError
from famg.templated import TemplateError, TemplatedFileResult, create_templated_file

logger = logging.getLogger(__name__)

FILENAME = "pyproject.toml"
COMMIT_MESSAGE = "feat(init): add pyproject.toml"


class PyprojectResult(enum.Enum):
    """Outcome of creating pyproject.toml."""

    CREATED = "pyproject.toml created successfully"
    EXISTS = "pyproject.toml already exists"

    def __str__(self):
        return self.value


class PyprojectError(Exception):
    """pyproject.toml could not be rendered, written or committed."""


def create_pyproject(config, template_path):
    """Render ``template_path`` into ``pyproject.toml`` and commit it.

    An existing ``pyproject.toml`` is left alone.
    """
    try:
        result = create_templated_file(config, FILENAME, template_path, COMMIT_MESSAGE)
    except (TemplateError, GitError, OSError) as exc:
        logger.error("Failed to create %s: %s", FILENAME, exc)
        raise PyprojectError("Error creating pyproject.toml") from exc
    if result is TemplatedFileResult.EXISTS:
        return PyprojectResult.EXISTS
    return PyprojectResult.CREATED