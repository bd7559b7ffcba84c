# famg

`famg` scaffolds a new project directory. In one run it:

1. creates the project folder under a parent directory;
2. initialises a git repository in it (`git init`);
3. writes a `.gitignore` and commits it;
4. renders a `Makefile` from a template and commits it;
5. renders `pyproject.toml` from a template and commits it;
6. creates `.ve3/`, renders `.ve3/pyvenv.cfg` from a template and commits it.

Each file is force-added (`git add -f`) and committed on its own, with messages
such as `feat(init): add Makefile`.

A step stops the run if its folder or file is already there, or if it fails.
The reason is printed (for example `Folder already exists`) and the later
steps are skipped. Progress is logged to standard error.

## Requirements

- Python 3.10 or later
- `git` on your `PATH`, with a user name and e-mail configured so that commits
  can be made

## Installation

```
pip install .
```

## Usage

```
famg --parent-path=../ --name=famg-todo-app --fullname="Famg Todo App" --templates-dir=./templates
```

This creates `../famg-todo-app`, makes it a git repository and commits the
generated files one at a time.

| Option            | Meaning                                                             |
|-------------------|---------------------------------------------------------------------|
| `--parent-path`   | Directory in which the new folder is created                        |
| `--name`          | Name of the folder (and project) to create                          |
| `--fullname`      | Human-readable full name of the project                             |
| `--templates-dir` | Directory holding the templates (default `pkg/flow/templates`)      |
| `--config-file`   | Not supported: giving it is reported as a usage error (status 2)    |

Unless `--parent-path`, `--name` and `--fullname` are all given, the command
prints its help and exits with status 1. Otherwise it exits with status 0,
also when a step stopped the run.

## Templates

The templates directory must contain:

- `gitignore.tmpl` – copied into `.gitignore` as is;
- `Makefile.tmpl`, `pyproject.toml.tmpl`, `pyvenv.cfg.tmpl` – rendered.

Rendered templates use a small `{{ ... }}` syntax (`famg.templated`):

- `{{.Name}}`, `{{.FullName}}`, `{{.Path}}`, `{{.ParentPath}}` – fields of the
  project configuration; `{{.}}` is the whole context;
- string literals (`"text"`), integers, `true` and `false`;
- pipelines through functions, such as `{{.Name | ToUpper}}` (`ToUpper` is the
  only function provided by default);
- `{{- ` and ` -}}` to trim whitespace around an action, and
  `{{/* comments */}}`.

An unknown field or function, or an unclosed action, raises
`famg.templated.TemplateError`.

## Using it from Python

```python
from famg.config import Config
from famg.flow import main_flow, FlowStopped

config = Config.from_parent("../", "famg-todo-app", "Famg Todo App")
try:
    messages = main_flow(config, "templates")
except FlowStopped as stop:
    print(stop.message)
    print("completed:", stop.completed)
```

`main_flow` returns the success messages of all six steps. `FlowStopped`
carries the reason in `message` and the messages of the steps that did finish
in `completed`.

Each step can also be run by itself:

- `famg.folder.create_folder(config)` – `FolderResult`, or `FolderError`
  (with `permission_denied`);
- `famg.git.create_git_repo(config)` – `GitRepoResult`, or `GitError` /
  `GitNotInstalledError`;
- `famg.git.commit_file(repo, relpath, message)` – force-add and commit one file;
- `famg.gitignore.populate_gitignore(config, content)` – `GitignoreResult`, or
  `GitignoreError`;
- `famg.pyproject.create_pyproject(config, template_path)` – `PyprojectResult`,
  or `PyprojectError`;
- `famg.pyvenv.create_pyvenv(config, template_path)` – `PyvenvResult`, or
  `PyvenvError`;
- `famg.templated.render_template(text, context, functions)`,
  `render_file(path, context, functions)` and
  `create_templated_file(config, relpath, template_path, message)`.

Existing files are never overwritten: the steps return their `EXISTS` result
instead.

## What it does not do

- It ships no templates. You supply the directory with the four template files
  above.
- It does not read configuration files; all settings come from the command line
  options or from `Config`.
- It does not build the virtual environment itself; it only writes
  `.ve3/pyvenv.cfg`.