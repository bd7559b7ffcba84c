"""The full scaffolding sequence for a new project."""

from __future__ import annotations

import logging
import os

from famg.folder import FolderError, FolderResult, create_folder
from famg.git import GitError, GitRepoResult, create_git_repo
from famg.gitignore import GitignoreError, GitignoreResult, populate_gitignore
from famg.pyproject import PyprojectError, PyprojectResult, create_pyproject
from famg.pyvenv import PyvenvError, PyvenvResult, create_pyvenv
from famg.templated import TemplateError, TemplatedFileResult, create_templated_file

logger = logging.getLogger(__name__)

_MAKEFILE_CREATED = "Makefile created successfully"
_MAKEFILE_EXISTS = "Makefile already exists"


class FlowStopped(Exception):
    """A step did not create what it should have; ``completed`` lists earlier steps."""

    def __init__(self, message, completed=()):
        super().__init__(message)
        self.message = message
        self.completed = list(completed)


def main_flow(config, templates_dir):
    """Create the folder, repository, .gitignore, Makefile, pyproject.toml and pyvenv.cfg.

    Returns the messages of all steps; raises ``FlowStopped`` at the first
    step that does not create its target.
    """
    templates = os.fspath(templates_dir)

    def gitignore():
        with open(os.path.join(templates, "gitignore.tmpl"), encoding="utf-8") as handle:
            return populate_gitignore(config, handle.read())

    def makefile():
        logger.info("Creating Makefile with config: name=%s path=%s", config.name, config.path)
        result = create_templated_file(
            config, "Makefile", os.path.join(templates, "Makefile.tmpl"),
            "feat(init): add Makefile",
        )
        return _MAKEFILE_CREATED if result is TemplatedFileResult.CREATED else _MAKEFILE_EXISTS

    # (step, wanted result, errors it may raise, message reported for those errors)
    steps = [
        (lambda: create_folder(config), FolderResult.CREATED, FolderError, None),
        (lambda: create_git_repo(config), GitRepoResult.CREATED, GitError, None),
        (gitignore, GitignoreResult.POPULATED, (OSError, GitignoreError),
         "Error populating .gitignore"),
        (makefile, _MAKEFILE_CREATED, (TemplateError, GitError, OSError),
         "Error creating Makefile"),
        (lambda: create_pyproject(config, os.path.join(templates, "pyproject.toml.tmpl")),
         PyprojectResult.CREATED, PyprojectError, None),
        (lambda: create_pyvenv(config, os.path.join(templates, "pyvenv.cfg.tmpl")),
         PyvenvResult.CREATED, PyvenvError, None),
    ]
    completed = []
    for step, wanted, errors, failure in steps:
        try:
            result = step()
        except errors as exc:
            if failure is not None:
                logger.error("%s: %s", failure, exc)
            raise FlowStopped(failure or str(exc), completed) from exc
        if result != wanted:
            raise FlowStopped(str(result), completed)
        completed.append(str(result))
    return completed