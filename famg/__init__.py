"""Scaffold a new project folder with git and files rendered from templates."""

__version__ = "0.1.0"
__all__ = ["__version__"]