"""Tests for the log and diff viewers."""

from gitpick.commands.log import (
    DiffPicker,
    LogPicker,
    format_name_status,
    paths_after_separator,
    split_diff_args,
)

REVISIONS = {"HEAD~3", "main", "main..topic"}


def fake_is_rev(arg):
    return arg in REVISIONS


class TestPathsAfterSeparator:
    def test_none(self):
        assert paths_after_separator(["--author=me"]) == []

    def test_paths(self):
        assert paths_after_separator(["main", "--", "src", "docs"]) == ["src", "docs"]


class TestSplitDiffArgs:
    def test_empty(self):
        assert split_diff_args([], fake_is_rev) == ([], [])

    def test_two_revisions_and_paths(self):
        assert split_diff_args(["HEAD~3", "main", "--", "src"], fake_is_rev) == (
            ["HEAD~3", "main"],
            ["src"],
        )

    def test_files_only(self):
        assert split_diff_args(["src/app.py"], fake_is_rev) == ([], ["src/app.py"])

    def test_range(self):
        assert split_diff_args(["main..topic", "README.md"], fake_is_rev) == (
            ["main..topic"],
            ["README.md"],
        )

    def test_at_most_two_revisions(self):
        commits, files = split_diff_args(["HEAD~3", "main", "main..topic"], fake_is_rev)
        assert commits == ["HEAD~3", "main"]
        assert files == ["main..topic"]


class TestFormatNameStatus:
    def test_modified(self):
        assert format_name_status("M\tsrc/app.py") == "[M]  src/app.py"

    def test_rename(self):
        assert format_name_status("R100\told.py\tnew.py") == "[R100]  old.py -> new.py"


class TestLogPicker:
    def test_is_viewer(self, make_picker):
        picker = make_picker(LogPicker)
        assert picker.viewer is True
        assert any(b.startswith("enter:execute(") for b in picker.bindings())

    def test_lister_uses_graph_and_opts(self, fake_git, make_picker):
        fake_git.respond("log", stdout="* abc1234 first\n")
        picker = make_picker(LogPicker, ["main"], git_opts=("--no-merges",))
        assert picker.list_candidates() == ["* abc1234 first"]
        assert fake_git.calls == [
            ["log", "--graph", "--color=always", "--format=%h %s", "--no-merges", "main"]
        ]

    def test_target_is_sha(self, make_picker):
        assert make_picker(LogPicker).target("| * abc1234 (HEAD) msg") == "abc1234"

    def test_graph_line_has_no_target(self, mocker, make_picker):
        pipeline = mocker.patch("gitpick.picker.pipeline.pipeline")
        assert make_picker(LogPicker).preview("|\\") == 0
        pipeline.assert_not_called()

    def test_preview_context(self, make_picker):
        picker = make_picker(LogPicker, ["--", "src"])
        assert picker.preview_args("abc1234", full=False) == [
            "show",
            "--color=always",
            "-U3",
            "abc1234",
            "--",
            "src",
        ]
        assert "-U10" in picker.preview_args("abc1234", full=True)


class TestDiffPicker:
    def test_lists_name_status(self, fake_git, make_picker):
        fake_git.respond("-c", stdout="M\tsrc/app.py\nA\tnew file.txt\n")
        picker = make_picker(DiffPicker)
        assert picker.list_candidates() == ["[M]  src/app.py", "[A]  new file.txt"]
        assert fake_git.calls[-1] == [
            "-c",
            "core.quotePath=false",
            "diff",
            "--name-status",
            "--",
        ]

    def test_commit_args(self, fake_git, make_picker):
        fake_git.respond("rev-parse", "--quiet", "README.md", returncode=128)
        picker = make_picker(DiffPicker, ["main", "README.md"])
        assert picker.commits == ["main"]
        assert picker.files == ["README.md"]
        args = picker.preview_args("README.md", full=False)
        assert args == ["diff", "--color=always", "-U3", "main", "--", ":(top)README.md"]

    def test_target_is_path(self, make_picker):
        assert make_picker(DiffPicker).target("[M]  src/app.py") == "src/app.py"

    def test_uses_diff_pager(self, make_picker, settings):
        assert make_picker(DiffPicker).preview_pager() == settings.diff_pager
