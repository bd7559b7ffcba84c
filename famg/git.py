"""Git repository initialisation and committing of generated files."""

from __future__ import annotations

import enum
import logging
import os
import shutil
import subprocess

logger = logging.getLogger(__name__)


class GitRepoResult(enum.Enum):
    """Outcome of initialising the repository."""

    CREATED = "Git repository created successfully"
    EXISTS = "Git repository already exists"

    def __str__(self):
        return self.value


class GitError(Exception):
    """A git command failed."""


class GitNotInstalledError(GitError):
    """No git executable was found on the search path."""


def _run_git(args, cwd):
    subprocess.run(
        ["git", *args],
        cwd=os.fspath(cwd),
        check=True,
        capture_output=True,
        text=True,
    )


def create_git_repo(config):
    """Run ``git init`` in ``config.path`` unless it already holds a repository."""
    path = os.path.abspath(config.path)
    if shutil.which("git") is None:
        raise GitNotInstalledError("Git is not installed")
    if os.path.exists(os.path.join(path, ".git")):
        return GitRepoResult.EXISTS
    try:
        _run_git(["init"], path)
    except (subprocess.CalledProcessError, OSError) as exc:
        raise GitError("Error initializing git repository") from exc
    return GitRepoResult.CREATED


def commit_file(repo, relpath, message):
    """Force-add ``relpath`` in ``repo`` and commit it with ``message``."""
    relpath = os.fspath(relpath)
    try:
        _run_git(["add", "-f", relpath], repo)
    except (subprocess.CalledProcessError, OSError) as exc:
        logger.error("Failed to add %s: %s", relpath, exc)
        raise GitError(f"Failed to add {relpath}") from exc
    try:
        _run_git(["commit", "-m", message], repo)
    except (subprocess.CalledProcessError, OSError) as exc:
        logger.error("Failed to commit %s: %s", relpath, exc)
        raise GitError(f"Failed to commit {relpath}") from exc