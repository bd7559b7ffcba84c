"""Creation of the project's virtual environment configuration."""

from __future__ import annotations

import enum
import logging
import os

from famg.git import GitError
from famg.templated import TemplateError, TemplatedFileResult, create_templated_file

logger = logging.getLogger(__name__)

VENV_DIR = ".ve3"
RELPATH = VENV_DIR + "/pyvenv.cfg"
COMMIT_MESSAGE = "feat(init): add pyvenv.cfg"


class PyvenvResult(enum.Enum):
    """Outcome of creating pyvenv.cfg."""

    CREATED = "pyvenv.cfg created successfully"
    EXISTS = "pyvenv.cfg already exists"

    def __str__(self):
        return self.value


class PyvenvError(Exception):
    """pyvenv.cfg could not be rendered, written or committed."""


def create_pyvenv(config, template_path):
    """Render ``template_path`` into ``.ve3/pyvenv.cfg`` and commit it.

    The ``.ve3`` directory is created when missing; an existing
    ``pyvenv.cfg`` is left alone.
    """
    try:
        os.makedirs(os.path.join(config.path, VENV_DIR), mode=0o755, exist_ok=True)
    except OSError as exc:
        logger.error("Failed to create %s directory: %s", VENV_DIR, exc)
        raise PyvenvError("Error creating pyvenv.cfg") from exc
    try:
        result = create_templated_file(config, RELPATH, template_path, COMMIT_MESSAGE)
    except (TemplateError, GitError, OSError) as exc:
        logger.error("Failed to create %s: %s", RELPATH, exc)
        raise PyvenvError("Error creating pyvenv.cfg") from exc
    if result is TemplatedFileResult.EXISTS:
        return PyvenvResult.EXISTS
    return PyvenvResult.CREATED