"""Shared test fixtures."""

import subprocess
from pathlib import Path

import pytest

from gitpick.models.core import Command
from gitpick.models.state import CommandConfig, Settings


@pytest.fixture
def settings(tmp_path):
    """Settings with plain pagers and an isolated template cache."""
    return Settings(
        fzf_default_opts=("--ansi",),
        pager=("cat",),
        show_pager=("cat",),
        diff_pager=("cat",),
        blame_pager=("cat",),
        ignore_pager=("cat",),
        enter_pager=("less", "-r"),
        log_format="%h %s",
        copy_cmd=("pbcopy",),
        gi_repo_local=tmp_path / "gi",
    )


@pytest.fixture
def make_config():
    """Factory for CommandConfig values."""

    def _make(command: Command, **overrides) -> CommandConfig:
        return CommandConfig(command=command, **overrides)

    return _make


@pytest.fixture
def make_picker(settings, make_config):
    """Build a picker class with default config and the given args."""

    def _make(picker_cls, args=(), **overrides):
        return picker_cls(settings, make_config(picker_cls.command, **overrides), list(args))

    return _make


@pytest.fixture
def mock_subprocess(mocker):
    """Mock subprocess.run returning success by default."""
    mock = mocker.patch("subprocess.run")
    mock.return_value = subprocess.CompletedProcess([], 0, stdout="", stderr="")
    return mock


@pytest.fixture
def mock_git(mocker):
    """Mock every git call made through gitpick.git.repo.run_git."""
    mock = mocker.patch("gitpick.git.repo.subprocess.run")
    mock.return_value = subprocess.CompletedProcess([], 0, stdout="", stderr="")
    return mock


@pytest.fixture
def reset_config_cache():
    import gitpick.config.settings as settings_mod

    settings_mod._config = None
    settings_mod._loaded_sources = []
    yield
    settings_mod._config = None
    settings_mod._loaded_sources = []


@pytest.fixture
def templates(tmp_path) -> Path:
    """A small ignore-template tree."""
    root = tmp_path / "gi" / "templates"
    (root / "community").mkdir(parents=True)
    (root / "Python.gitignore").write_text("__pycache__/\n*.pyc\n")
    (root / "Node.gitignore").write_text("node_modules/")
    (root / "community" / "Python.gitignore").write_text("# community python\n")
    (root / "Python.patch").write_text("!.python-version\n")
    return root


class FakeGit:
    """Answers git calls by argv prefix and records them.

    Unmatched calls succeed with empty output. The longest matching prefix wins.
    """

    def __init__(self, mock):
        self.mock = mock
        self.responses: list[tuple[list[str], subprocess.CompletedProcess]] = []
        mock.side_effect = self._run

    def respond(self, *prefix: str, stdout: str = "", returncode: int = 0, stderr: str = ""):
        result = subprocess.CompletedProcess([], returncode, stdout=stdout, stderr=stderr)
        self.responses.append((list(prefix), result))
        self.responses.sort(key=lambda item: len(item[0]), reverse=True)

    def _run(self, argv, *args, **kwargs):
        for prefix, result in self.responses:
            if argv[1 : 1 + len(prefix)] == prefix:
                return result
        return subprocess.CompletedProcess(argv, 0, stdout="", stderr="")

    @property
    def calls(self) -> list[list[str]]:
        """git argv (without 'git') of every call so far."""
        return [c.args[0][1:] for c in self.mock.call_args_list]


@pytest.fixture
def fake_git(mock_git):
    return FakeGit(mock_git)
