"""Commit pickers that rewrite or replay history."""

import os
from typing import Optional

from gitpick.config.settings import build_command_config
from gitpick.git.branch import list_branches
from gitpick.git.history import chronological_log_lines, log_lines, unpicked_commits
from gitpick.git.repo import has_staged_changes, rebase_base, run_git
from gitpick.models.core import Command, Ordering
from gitpick.picker.pipeline import Picker, run_picker
from gitpick.ui.output import error, log
from gitpick.utils.formatting import extract_sha

# Keep input order while filtering: the list is already chronological
HISTORY_FZF_OPTS = ("+s", "--tiebreak=index")


class CommitPicker(Picker):
    """Shared preview and target handling for pickers over log lines."""

    copyable = True
    extra_fzf_opts = HISTORY_FZF_OPTS

    def target(self, line: str) -> str:
        return extract_sha(line)

    def preview_args(self, target: str, full: bool) -> list[str]:
        context = self.settings.fullscreen_context if full else self.settings.preview_context
        return ["show", "--color=always", f"-U{context}", target]


class CherryPickPicker(CommitPicker):
    """Pick commits from another branch; applied oldest first."""

    command = Command.CHERRY_PICK
    summary = "cherry-pick commits from a branch"
    multi = True
    ordering = Ordering.OLDEST_FIRST
    # Input is oldest first; --tac shows the newest next to the prompt
    extra_fzf_opts = (*HISTORY_FZF_OPTS, "--tac")

    def __init__(self, settings, config, args=()):
        super().__init__(settings, config, args)
        self.source = self.args[0] if self.args else ""
        self.empty_message = f"No commits to cherry-pick from {self.source}."

    def direct(self) -> Optional[int]:
        if not self.source:
            error("Please specify the branch to cherry-pick from: gitpick cherry-pick <branch>")
            return 1
        return None

    def list_candidates(self) -> list[str]:
        return unpicked_commits(self.settings, self.source, self.args[1:])

    def act(self, targets: list[str]) -> int:
        return self.git("cherry-pick", *self.config.git_opts, *targets)


class CherryPickFromBranchPicker(Picker):
    """Pick a branch, then pick commits from it."""

    command = Command.CHERRY_PICK_FROM_BRANCH
    summary = "choose a branch, then cherry-pick from it"
    empty_message = "No branches to cherry-pick from."
    extra_fzf_opts = HISTORY_FZF_OPTS

    def direct(self) -> Optional[int]:
        if not self.args:
            return None
        return self.pick_from(self.args[0])

    def list_candidates(self) -> list[str]:
        return list_branches(check=True)

    def preview_args(self, target: str, full: bool) -> list[str]:
        return [
            "log",
            "--graph",
            "--color=always",
            f"--format={self.settings.log_format}",
            f"HEAD..{target}",
        ]

    def act(self, targets: list[str]) -> int:
        return self.pick_from(targets[0])

    def pick_from(self, branch: str) -> int:
        config = build_command_config(Command.CHERRY_PICK)
        return run_picker(CherryPickPicker(self.settings, config, [branch]))


class RebasePicker(CommitPicker):
    """Start an interactive rebase that includes the picked commit."""

    command = Command.REBASE
    summary = "interactive rebase from a commit"
    empty_message = "No commits to rebase."

    def list_candidates(self) -> list[str]:
        return log_lines(self.settings, self.args)

    def act(self, targets: list[str]) -> int:
        return self.git("rebase", "-i", *self.config.git_opts, *rebase_base(targets[0]))


class FixupPicker(CommitPicker):
    """Fold the staged changes into the picked commit."""

    command = Command.FIXUP
    summary = "fixup a commit with the staged changes"
    empty_message = "No commits to fix up."

    def direct(self) -> Optional[int]:
        if not has_staged_changes():
            log("Nothing to fixup: there are no staged changes.")
            return 0
        return None

    def list_candidates(self) -> list[str]:
        return log_lines(self.settings, self.args)

    def act(self, targets: list[str]) -> int:
        sha = targets[0]
        code = self.git("commit", *self.config.git_opts, "--fixup", sha)
        if code != 0:
            return code
        # Accept the generated todo list as-is
        env = {**os.environ, "GIT_SEQUENCE_EDITOR": ":"}
        result = run_git(
            ["rebase", "--autostash", "-i", "--autosquash", *rebase_base(sha)],
            capture=False,
            env=env,
        )
        return result.returncode


class RevertCommitPicker(CommitPicker):
    """Revert picked commits; applied newest first."""

    command = Command.REVERT_COMMIT
    summary = "revert commits"
    multi = True
    ordering = Ordering.NEWEST_FIRST
    empty_message = "No commits to revert."
    # Input is oldest first; --tac shows the newest next to the prompt
    extra_fzf_opts = (*HISTORY_FZF_OPTS, "--tac")

    def direct(self) -> Optional[int]:
        if not self.args:
            return None
        return self.git("revert", *self.config.git_opts, *self.args)

    def list_candidates(self) -> list[str]:
        return chronological_log_lines(self.settings)

    def act(self, targets: list[str]) -> int:
        return self.git("revert", *self.config.git_opts, *targets)
