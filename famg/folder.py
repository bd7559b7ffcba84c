"""Creation of the project folder."""

from __future__ import annotations

import enum
import os


class FolderResult(enum.Enum):
    """Outcome of creating the project folder."""

    CREATED = "Folder created successfully"
    EXISTS = "Folder already exists"

    def __str__(self):
        return self.value


class FolderError(Exception):
    """The project folder could not be created."""

    def __init__(self, message, *, permission_denied=False):
        super().__init__(message)
        self.permission_denied = permission_denied


def create_folder(config):
    """Create ``config.path`` and any missing parents.

    Returns ``FolderResult.EXISTS`` without touching anything when the path
    is already there. Raises ``FolderError`` when creation fails.
    """
    path = os.path.abspath(config.path)
    if os.path.exists(path):
        return FolderResult.EXISTS
    try:
        os.makedirs(path, mode=0o755)
    except PermissionError as exc:
        raise FolderError("Insufficient permissions", permission_denied=True) from exc
    except OSError as exc:
        raise FolderError("Unknown error creating folder") from exc
    return FolderResult.CREATED