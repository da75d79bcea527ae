"""Tests for gitpick.picker.pipeline."""

import pytest

from gitpick.git.repo import CommandFailed
from gitpick.models.core import Command, Ordering, Selection
from gitpick.picker.ordering import tag_positions
from gitpick.picker.pipeline import Picker, run_hook, run_picker


class RecordingPicker(Picker):
    command = Command.ADD
    summary = "test picker"
    multi = True
    empty_message = "Nothing to record."
    lines: list[str] = []
    direct_code = None

    def __init__(self, settings, config, args=()):
        super().__init__(settings, config, args)
        self.acted: list[list[str]] = []
        self.action_code = 0

    def direct(self):
        return self.direct_code

    def list_candidates(self):
        return list(self.lines)

    def act(self, targets):
        self.acted.append(targets)
        return self.action_code


@pytest.fixture
def in_repo(mocker):
    mocker.patch("gitpick.picker.pipeline.is_inside_work_tree", return_value=True)
    mocker.patch("gitpick.picker.pipeline.fzf_available", return_value=True)


@pytest.fixture
def picker(settings, make_config):
    RecordingPicker.lines = ["alpha", "beta", "gamma"]
    RecordingPicker.direct_code = None
    RecordingPicker.ordering = Ordering.AS_SELECTED
    return RecordingPicker(settings, make_config(Command.ADD))


def selection_of(picker, *positions):
    candidates = tag_positions(picker.lines)
    return Selection(candidates=[candidates[p] for p in positions])


class TestRunPicker:
    def test_outside_repo_fails_fast(self, mocker, picker, capsys):
        mocker.patch("gitpick.picker.pipeline.is_inside_work_tree", return_value=False)
        select = mocker.patch("gitpick.picker.pipeline.select")
        assert run_picker(picker) == 1
        select.assert_not_called()
        assert "Not a git repository" in capsys.readouterr().err

    def test_direct_bypasses_picker(self, mocker, in_repo, picker):
        picker.direct_code = 3
        select = mocker.patch("gitpick.picker.pipeline.select")
        assert run_picker(picker) == 3
        select.assert_not_called()

    def test_empty_list_is_nothing_to_do(self, mocker, in_repo, picker, capsys):
        picker.lines = []
        select = mocker.patch("gitpick.picker.pipeline.select")
        assert run_picker(picker) == 0
        select.assert_not_called()
        assert "Nothing to record." in capsys.readouterr().err

    def test_missing_fzf(self, mocker, picker):
        mocker.patch("gitpick.picker.pipeline.is_inside_work_tree", return_value=True)
        mocker.patch("gitpick.picker.pipeline.fzf_available", return_value=False)
        assert run_picker(picker) == 1

    @pytest.mark.parametrize("fzf_code", [1, 130])
    def test_cancel_is_success(self, mocker, in_repo, picker, fzf_code):
        mocker.patch(
            "gitpick.picker.pipeline.select",
            return_value=Selection(returncode=fzf_code, cancelled=True),
        )
        assert run_picker(picker) == 0
        assert picker.acted == []

    def test_fzf_error_surfaces(self, mocker, in_repo, picker):
        mocker.patch("gitpick.picker.pipeline.select", return_value=Selection(returncode=2))
        assert run_picker(picker) == 2
        assert picker.acted == []

    def test_action_gets_selection(self, mocker, in_repo, picker):
        mocker.patch("gitpick.picker.pipeline.select", return_value=selection_of(picker, 2, 0))
        assert run_picker(picker) == 0
        assert picker.acted == [["gamma", "alpha"]]

    def test_action_failure_propagates(self, mocker, in_repo, picker):
        picker.action_code = 128
        mocker.patch("gitpick.picker.pipeline.select", return_value=selection_of(picker, 1))
        assert run_picker(picker) == 128

    def test_ordering_applied(self, mocker, in_repo, picker):
        picker.ordering = Ordering.NEWEST_FIRST
        mocker.patch("gitpick.picker.pipeline.select", return_value=selection_of(picker, 0, 2, 1))
        run_picker(picker)
        assert picker.acted == [["gamma", "beta", "alpha"]]

    def test_viewer_runs_no_action(self, mocker, in_repo, picker):
        picker.viewer = True
        mocker.patch("gitpick.picker.pipeline.select", return_value=selection_of(picker, 0))
        assert run_picker(picker) == 0
        assert picker.acted == []

    def test_action_override(self, mocker, in_repo, settings, make_config):
        RecordingPicker.lines = ["alpha", "beta"]
        RecordingPicker.direct_code = None
        picker = RecordingPicker(settings, make_config(Command.ADD, action=("echo", "picked")))
        mocker.patch("gitpick.picker.pipeline.select", return_value=selection_of(picker, 1))
        run_argv = mocker.patch("gitpick.picker.pipeline.run_argv", return_value=5)
        assert run_picker(picker) == 5
        run_argv.assert_called_once_with(["echo", "picked", "beta"])
        assert picker.acted == []

    def test_lister_failure_surfaces_git_error(self, mocker, in_repo, picker, capsys):
        failure = CommandFailed(
            ["git", "log", "HEAD...no-such-branch"],
            128,
            "fatal: ambiguous argument 'HEAD...no-such-branch'\n",
        )
        mocker.patch.object(picker, "list_candidates", side_effect=failure)
        select = mocker.patch("gitpick.picker.pipeline.select")
        assert run_picker(picker) == 128
        err = capsys.readouterr().err
        assert "fatal: ambiguous argument" in err
        assert "Nothing to record." not in err
        select.assert_not_called()

    def test_lister_override(self, mocker, settings, make_config):
        picker = RecordingPicker(settings, make_config(Command.ADD, lister=("ls",)))
        lines_of = mocker.patch("gitpick.picker.pipeline.lines_of", return_value=["x", "y"])
        candidates = picker.candidates()
        lines_of.assert_called_once_with(("ls",))
        assert [c.text for c in candidates] == ["x", "y"]


class TestFzfArgv:
    def test_multi_flag(self, picker):
        assert "-m" in picker.fzf_argv()

    def test_single_flag(self, picker):
        picker.multi = False
        assert "+m" in picker.fzf_argv()

    def test_preview_calls_back_into_gitpick(self, picker):
        argv = picker.fzf_argv()
        preview = argv[argv.index("--preview") + 1]
        assert " _preview add {2..}" in preview

    def test_args_forwarded_quoted(self, settings, make_config):
        p = RecordingPicker(settings, make_config(Command.ADD), ["it's here"])
        argv = p.fzf_argv()
        preview = argv[argv.index("--preview") + 1]
        assert preview.endswith("""{2..} 'it'"'"'s here'""")

    def test_enter_binding_for_viewers(self, picker):
        picker.viewer = True
        binds = picker.bindings()
        assert binds[0].startswith("enter:execute(")
        assert "_enter add" in binds[0]

    def test_copy_binding(self, picker):
        picker.copyable = True
        binds = picker.bindings()
        assert any(b.startswith("ctrl-y:execute-silent(") and "_copy" in b for b in binds)

    def test_user_fzf_opts_last(self, settings, make_config):
        p = RecordingPicker(settings, make_config(Command.ADD, fzf_opts=("--height=40%",)))
        assert p.fzf_argv()[-1] == "--height=40%"


class TestPreview:
    def test_pipes_git_through_pager(self, mocker, picker):
        picker.preview_args = lambda target, full: ["show", target]
        pipeline = mocker.patch("gitpick.picker.pipeline.pipeline", return_value=0)
        picker.preview("alpha")
        pipeline.assert_called_once_with(["git", "show", "alpha"], ("cat",), ())

    def test_full_page_adds_enter_pager(self, mocker, picker):
        picker.preview_args = lambda target, full: ["show", target]
        pipeline = mocker.patch("gitpick.picker.pipeline.pipeline", return_value=0)
        picker.preview("alpha", full=True)
        pipeline.assert_called_once_with(["git", "show", "alpha"], ("cat",), ("less", "-r"))

    def test_no_preview_args(self, mocker, picker):
        pipeline = mocker.patch("gitpick.picker.pipeline.pipeline")
        assert picker.preview("alpha") == 0
        pipeline.assert_not_called()

    def test_preview_override(self, mocker, settings, make_config):
        p = RecordingPicker(settings, make_config(Command.ADD, preview=("cat", "-n")))
        run_argv = mocker.patch("gitpick.picker.pipeline.run_argv", return_value=0)
        p.preview("notes.txt")
        run_argv.assert_called_once_with(["cat", "-n", "notes.txt"])


class TestRunHook:
    def test_preview(self, mocker, picker):
        preview = mocker.patch.object(picker, "preview", return_value=0)
        run_hook("_preview", picker, "alpha")
        preview.assert_called_once_with("alpha")

    def test_enter(self, mocker, picker):
        preview = mocker.patch.object(picker, "preview", return_value=0)
        run_hook("_enter", picker, "alpha")
        preview.assert_called_once_with("alpha", full=True)

    def test_copy(self, mocker, picker):
        copy = mocker.patch("gitpick.picker.pipeline.copy_to_clipboard", return_value=0)
        run_hook("_copy", picker, "alpha extra")
        copy.assert_called_once_with("alpha", ("pbcopy",))

    def test_unknown(self, picker):
        assert run_hook("_nope", picker, "alpha") == 1
