"""Blame picker."""

from typing import Optional

from gitpick.git.repo import git_lines
from gitpick.models.core import Command
from gitpick.picker.pipeline import Picker
from gitpick.picker.process import pipeline
from gitpick.utils.formatting import strip_ansi


class BlamePicker(Picker):
    """Pick a tracked file and show `git blame` for it."""

    command = Command.BLAME
    summary = "blame a tracked file"
    empty_message = "No tracked files to blame."

    def direct(self) -> Optional[int]:
        if not self.args:
            return None
        return pipeline(
            ["git", "blame", *self.config.git_opts, *self.args], self.settings.blame_pager
        )

    def list_candidates(self) -> list[str]:
        return git_lines(["-c", "core.quotePath=false", "ls-files"], check=True)

    def target(self, line: str) -> str:
        return strip_ansi(line).strip()

    def preview_args(self, target: str, full: bool) -> list[str]:
        return ["blame", "--date=short", *self.config.git_opts, "--", target]

    def preview_pager(self) -> tuple[str, ...]:
        return self.settings.blame_pager

    def act(self, targets: list[str]) -> int:
        return pipeline(
            ["git", "blame", *self.config.git_opts, "--", targets[0]], self.settings.blame_pager
        )
