[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "famg"
version = "0.1.0"
description = "Scaffold a new project folder with git, .gitignore, Makefile, pyproject.toml and pyvenv.cfg"
requires-python = ">=3.10"
dependencies = []
keywords = ["scaffold", "project", "generator", "git", "template"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Code Generators",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
famg = "famg.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["famg"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
