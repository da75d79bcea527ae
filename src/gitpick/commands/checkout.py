"""Branch, tag and commit checkout pickers, plus branch deletion."""

from typing import Optional

from gitpick.commands.history import CommitPicker
from gitpick.git.branch import (
    checkout_branch,
    checkout_or_create,
    get_current_branch,
    list_branches,
    list_local_branches,
)
from gitpick.git.history import log_lines
from gitpick.git.repo import git_lines
from gitpick.models.core import Command
from gitpick.picker.pipeline import Picker


class RefPicker(Picker):
    """Pickers over branch or tag names; preview shows the ref's history."""

    extra_fzf_opts = ("+s", "--tiebreak=index")

    def preview_args(self, target: str, full: bool) -> list[str]:
        return [
            "log",
            "--graph",
            "--color=always",
            f"--format={self.settings.log_format}",
            target,
            "--",
        ]

    def direct(self) -> Optional[int]:
        if not self.args:
            return None
        return checkout_or_create(self.args, self.config.git_opts)


class CheckoutBranchPicker(RefPicker):
    """Switch branches; remote branches get a local tracking branch."""

    command = Command.CHECKOUT_BRANCH
    summary = "check out a branch"
    empty_message = "No branches to check out."

    def list_candidates(self) -> list[str]:
        return list_branches(check=True)

    def act(self, targets: list[str]) -> int:
        return checkout_branch(targets[0], self.config.git_opts)


class CheckoutTagPicker(RefPicker):
    """Check out a tag (detached HEAD)."""

    command = Command.CHECKOUT_TAG
    summary = "check out a tag"
    empty_message = "No tags to check out."

    def list_candidates(self) -> list[str]:
        return git_lines(["tag", "--list", "--sort=-version:refname"], check=True)

    def act(self, targets: list[str]) -> int:
        return self.git("checkout", *self.config.git_opts, targets[0])


class CheckoutCommitPicker(CommitPicker):
    """Check out a commit (detached HEAD)."""

    command = Command.CHECKOUT_COMMIT
    summary = "check out a commit"
    empty_message = "No commits to check out."

    def direct(self) -> Optional[int]:
        if not self.args:
            return None
        return checkout_or_create(self.args, self.config.git_opts)

    def list_candidates(self) -> list[str]:
        return log_lines(self.settings)

    def act(self, targets: list[str]) -> int:
        return self.git("checkout", *self.config.git_opts, targets[0])


class BranchDeletePicker(RefPicker):
    """Force-delete local branches other than the current one."""

    command = Command.BRANCH_DELETE
    summary = "delete local branches"
    multi = True
    empty_message = "No branches to delete."

    def direct(self) -> Optional[int]:
        if not self.args:
            return None
        return self.act(self.args)

    def list_candidates(self) -> list[str]:
        current = get_current_branch()
        return [b for b in list_local_branches(check=True) if b != current]

    def act(self, targets: list[str]) -> int:
        return self.git("branch", "-D", *self.config.git_opts, *targets)
