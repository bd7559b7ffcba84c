"""Settings describing the project folder to scaffold."""

from __future__ import annotations

import os
from dataclasses import dataclass


@dataclass(frozen=True)
class Config:
    """Where the project goes and what it is called."""

    path: str
    name: str
    full_name: str
    parent_path: str

    @classmethod
    def from_parent(cls, parent_path, name, full_name):
        """Build a config for a folder called ``name`` inside ``parent_path``."""
        parent = os.path.abspath(parent_path)
        return cls(os.path.join(parent, name), name, full_name, parent)