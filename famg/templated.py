"""A small template renderer and creation of files rendered from templates.

Supports ``{{.Field}}``, ``.``, literals, pipelines such as
``{{.Name | ToUpper}}``, ``{{- -}}`` trimming and ``{{/* comments */}}``.
"""

from __future__ import annotations

import enum
import json
import logging
import os
import re
from collections.abc import Mapping

from famg.git import commit_file

logger = logging.getLogger(__name__)

STANDARD_FUNCTIONS = {"ToUpper": str.upper}

_ACTION = re.compile(r"\{\{(?:(-)\s+)?(.*?)(?:\s+(-))?\}\}", re.DOTALL)
_WORD = re.compile(r'"(?:\\.|[^"\\])*"|\||[^\s|]+')
_SPACE = " \t\r\n"
_NOTHING = object()


class TemplateError(Exception):
    """A template could not be read, parsed or executed."""


class TemplatedFileResult(enum.Enum):
    """Outcome of creating a file from a template."""

    CREATED = "created"
    EXISTS = "exists"

    def __str__(self):
        return self.value


def render_template(text, context, functions=None):
    """Render ``text`` against ``context`` (a mapping or an object)."""
    funcs = dict(STANDARD_FUNCTIONS if functions is None else functions)
    pieces = []
    pos = 0
    trim_next = False
    for match in _ACTION.finditer(text):
        literal = text[pos:match.start()]
        if trim_next:
            literal = literal.lstrip(_SPACE)
        if match.group(1):
            literal = literal.rstrip(_SPACE)
        pieces.append(literal)
        pieces.append(_evaluate(match.group(2).strip(), context, funcs))
        trim_next = bool(match.group(3))
        pos = match.end()
    tail = text[pos:]
    if "{{" in tail:
        raise TemplateError("unclosed action")
    pieces.append(tail.lstrip(_SPACE) if trim_next else tail)
    return "".join(pieces)


def render_file(path, context, functions=None):
    """Read the template at ``path`` and render it."""
    try:
        with open(path, encoding="utf-8") as handle:
            text = handle.read()
    except OSError as exc:
        raise TemplateError(f"cannot read template {os.fspath(path)}: {exc}") from exc
    return render_template(text, context, functions)


def create_templated_file(config, relpath, template_path, message):
    """Render ``template_path`` into ``relpath`` inside the project and commit it."""
    target = os.path.join(config.path, relpath)
    if os.path.exists(target):
        logger.info("%s already exists: %s", relpath, target)
        return TemplatedFileResult.EXISTS
    context = {
        "Path": config.path,
        "Name": config.name,
        "FullName": config.full_name,
        "ParentPath": config.parent_path,
    }
    content = render_file(template_path, context)
    with open(target, "w", encoding="utf-8") as handle:
        handle.write(content)
    commit_file(config.path, relpath, message)
    logger.info("%s created successfully: %s", relpath, target)
    return TemplatedFileResult.CREATED


def _evaluate(action, context, functions):
    if action.startswith("/*"):
        if action.endswith("*/"):
            return ""
        raise TemplateError("unclosed comment")
    commands = [[]]
    for word in _WORD.findall(action):
        if word == "|":
            commands.append([])
        else:
            commands[-1].append(word)
    if any(not command for command in commands):
        raise TemplateError("missing command in pipeline")
    value = _NOTHING
    for command in commands:
        value = _run_command(command, context, functions, value)
    if value is None:
        return "<no value>"
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _run_command(words, context, functions, piped):
    head, *rest = words
    if head in functions:
        args = [_term(word, context, functions) for word in rest]
        if piped is not _NOTHING:
            args.append(piped)
        return _call(head, functions[head], args)
    if piped is not _NOTHING or rest:
        raise TemplateError(f"can't give argument to non-function {head}")
    return _term(head, context, functions)


def _call(name, function, args):
    try:
        return function(*args)
    except Exception as exc:
        raise TemplateError(f"error calling {name}: {exc}") from exc


def _term(word, context, functions):
    if word == ".":
        return context
    if word.startswith("."):
        value = context
        for field in word[1:].split("."):
            try:
                value = value[field] if isinstance(value, Mapping) else getattr(value, field)
            except (KeyError, AttributeError) as exc:
                raise TemplateError(f"can't evaluate field {field}") from exc
        return value
    if word.startswith('"'):
        try:
            return json.loads(word)
        except ValueError as exc:
            raise TemplateError(f"bad string literal {word}") from exc
    if word in ("true", "false"):
        return word == "true"
    try:
        return int(word)
    except ValueError:
        pass
    if word in functions:
        return _call(word, functions[word], [])
    raise TemplateError(f'function "{word}" not defined')