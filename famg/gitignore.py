"""Writing and committing the project's .gitignore."""

from __future__ import annotations

import enum
import logging
import os

from famg.git import GitError, commit_file

logger = logging.getLogger(__name__)

COMMIT_MESSAGE = "feat(init): add .gitignore file"


class GitignoreResult(enum.Enum):
    """Outcome of populating .gitignore."""

    POPULATED = ".gitignore populated successfully"
    EXISTS = ".gitignore already exists"

    def __str__(self):
        return self.value


class GitignoreError(Exception):
    """The .gitignore file could not be written or committed."""


def populate_gitignore(config, content):
    """Write ``content`` to ``.gitignore`` in the project and commit it.

    An existing ``.gitignore`` is never overwritten.
    """
    target = os.path.join(config.path, ".gitignore")
    if os.path.exists(target):
        return GitignoreResult.EXISTS
    try:
        with open(target, "w", encoding="utf-8") as handle:
            handle.write(content)
    except OSError as exc:
        logger.error("Error writing .gitignore: %s", exc)
        raise GitignoreError("Error populating .gitignore") from exc
    try:
        commit_file(config.path, ".gitignore", COMMIT_MESSAGE)
    except GitError as exc:
        raise GitignoreError("Error populating .gitignore") from exc
    return GitignoreResult.POPULATED