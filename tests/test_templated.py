import os
import subprocess
from types import SimpleNamespace

import pytest

from famg.config import Config
from famg.git import GitError
from famg.templated import (
    TemplatedFileResult,
    TemplateError,
    create_templated_file,
    render_file,
    render_template,
)


class FakeGit:
    def __init__(self):
        self.calls = []
        self.fail_on = None

    def __call__(self, args, cwd=None, **kwargs):
        self.calls.append((list(args), cwd))
        if self.fail_on is not None and args[1] == self.fail_on:
            raise subprocess.CalledProcessError(1, args)
        return subprocess.CompletedProcess(args, 0, "", "")


@pytest.fixture
def fake_git(monkeypatch):
    fake = FakeGit()
    monkeypatch.setattr(subprocess, "run", fake)
    return fake


@pytest.fixture
def config(tmp_path):
    cfg = Config.from_parent(str(tmp_path), "demo", "Demo Project")
    os.mkdir(cfg.path)
    return cfg


def test_plain_text_passes_through():
    text = "no actions here\n$(shell uname -s)\n${ VAR }"
    assert render_template(text, {}) == text


def test_field_substitution():
    assert render_template("override PROJECT = {{.Name}}", {"Name": "demo"}) == (
        "override PROJECT = demo"
    )


def test_pipeline_to_upper():
    text = "${ {{.Name | ToUpper}}_SERVER_PORT}"
    assert render_template(text, {"Name": "demo"}) == "${ DEMO_SERVER_PORT}"


def test_function_call_with_argument():
    assert render_template("{{ToUpper .Name}}", {"Name": "abc"}) == "ABC"


def test_custom_functions_replace_standard_ones():
    functions = {"Twice": lambda s: s + s}
    assert render_template("{{.Name | Twice}}", {"Name": "ab"}, functions) == "abab"
    with pytest.raises(TemplateError):
        render_template("{{.Name | ToUpper}}", {"Name": "ab"}, functions)


def test_attribute_context_and_chained_fields():
    context = SimpleNamespace(Owner=SimpleNamespace(Name="team"))
    assert render_template("{{.Owner.Name}}", context) == "team"


def test_dot_is_whole_context():
    assert render_template("[{{.}}]", "value") == "[value]"


def test_trim_markers_remove_whitespace():
    text = "a  \n{{- .Name -}}\n  b"
    assert render_template(text, {"Name": "X"}) == "aXb"


def test_comment_is_dropped():
    assert render_template("a{{/* note */}}b", {}) == "ab"


def test_missing_field_raises():
    with pytest.raises(TemplateError):
        render_template("{{.Missing}}", {"Name": "demo"})


def test_missing_attribute_raises():
    with pytest.raises(TemplateError):
        render_template("{{.Missing}}", SimpleNamespace(Name="demo"))


def test_unknown_function_raises():
    with pytest.raises(TemplateError):
        render_template("{{.Name | Shout}}", {"Name": "demo"})


def test_control_actions_are_rejected():
    with pytest.raises(TemplateError):
        render_template("{{if .Name}}x{{end}}", {"Name": "demo"})


def test_unclosed_action_raises():
    with pytest.raises(TemplateError):
        render_template("value {{.Name", {"Name": "demo"})


def test_argument_to_field_raises():
    with pytest.raises(TemplateError):
        render_template('{{.Name "x"}}', {"Name": "demo"})


def test_render_file_reads_template(tmp_path):
    template = tmp_path / "t.tmpl"
    template.write_text("name = {{.Name}}\n", encoding="utf-8")
    assert render_file(template, {"Name": "demo"}) == "name = demo\n"


def test_render_file_missing_raises(tmp_path):
    with pytest.raises(TemplateError):
        render_file(tmp_path / "absent.tmpl", {})


def test_create_templated_file_writes_and_commits(fake_git, config, tmp_path):
    template = tmp_path / "pyproject.toml.tmpl"
    template.write_text(
        'name = "{{.Name}}"\ndescription = "{{.FullName}}"\n', encoding="utf-8"
    )
    result = create_templated_file(
        config, "pyproject.toml", template, "feat(init): add pyproject.toml"
    )
    assert result is TemplatedFileResult.CREATED
    with open(os.path.join(config.path, "pyproject.toml"), encoding="utf-8") as handle:
        assert handle.read() == 'name = "demo"\ndescription = "Demo Project"\n'
    assert fake_git.calls == [
        (["git", "add", "-f", "pyproject.toml"], config.path),
        (["git", "commit", "-m", "feat(init): add pyproject.toml"], config.path),
    ]


def test_create_templated_file_keeps_existing(fake_git, config, tmp_path):
    template = tmp_path / "t.tmpl"
    template.write_text("{{.Name}}", encoding="utf-8")
    target = os.path.join(config.path, "out.txt")
    with open(target, "w", encoding="utf-8") as handle:
        handle.write("old")
    assert create_templated_file(config, "out.txt", template, "m") is (
        TemplatedFileResult.EXISTS
    )
    with open(target, encoding="utf-8") as handle:
        assert handle.read() == "old"
    assert fake_git.calls == []


def test_create_templated_file_bad_template_leaves_nothing(fake_git, config, tmp_path):
    template = tmp_path / "t.tmpl"
    template.write_text("{{.Unknown}}", encoding="utf-8")
    with pytest.raises(TemplateError):
        create_templated_file(config, "out.txt", template, "m")
    assert not os.path.exists(os.path.join(config.path, "out.txt"))
    assert fake_git.calls == []


def test_create_templated_file_git_failure(fake_git, config, tmp_path):
    template = tmp_path / "t.tmpl"
    template.write_text("{{.Name}}", encoding="utf-8")
    fake_git.fail_on = "commit"
    with pytest.raises(GitError):
        create_templated_file(config, "out.txt", template, "m")
    assert os.path.exists(os.path.join(config.path, "out.txt"))


def test_create_templated_file_in_subfolder(fake_git, config, tmp_path):
    os.mkdir(os.path.join(config.path, ".ve3"))
    template = tmp_path / "pyvenv.cfg.tmpl"
    template.write_text("home = {{.ParentPath}}\n", encoding="utf-8")
    relpath = ".ve3/pyvenv.cfg"
    assert create_templated_file(config, relpath, template, "m") is (
        TemplatedFileResult.CREATED
    )
    with open(os.path.join(config.path, relpath), encoding="utf-8") as handle:
        assert handle.read() == f"home = {config.parent_path}\n"
    assert fake_git.calls[0][0] == ["git", "add", "-f", relpath]