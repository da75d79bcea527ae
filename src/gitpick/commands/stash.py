"""Stash pickers."""

import argparse
from typing import Optional, Sequence

from gitpick.commands.staging import file_diff_args
from gitpick.git.repo import git_entries, git_lines, repo_root, top_pathspec
from gitpick.models.core import Command
from gitpick.picker.pipeline import Picker
from gitpick.utils.formatting import strip_ansi


class StashShowPicker(Picker):
    """Browse stash entries; enter opens the full stash diff."""

    command = Command.STASH_SHOW
    summary = "browse stash entries"
    viewer = True
    empty_message = "No stash entries."
    extra_fzf_opts = ("+s", "--tiebreak=index")

    def direct(self) -> Optional[int]:
        if not self.args:
            return None
        return self.git("stash", "show", *self.config.git_opts, *self.args)

    def list_candidates(self) -> list[str]:
        return git_lines(["stash", "list"], check=True)

    def target(self, line: str) -> str:
        """'stash@{0}: WIP on main: ...' -> 'stash@{0}'."""
        return strip_ansi(line).split(":", 1)[0].strip()

    def preview_args(self, target: str, full: bool) -> list[str]:
        context = self.settings.fullscreen_context if full else self.settings.preview_context
        return [
            "stash",
            "show",
            "--color=always",
            "--ext-diff",
            "--patch-with-stat",
            f"-U{context}",
            *self.config.git_opts,
            target,
        ]

    def preview_pager(self) -> tuple[str, ...]:
        return self.settings.diff_pager


def parse_stash_push_args(args: Sequence[str]) -> argparse.Namespace:
    """Split stash-push args into the message, extra stash flags and paths.

    Unknown options (--keep-index, ...) are passed through to `git stash push`.
    """
    parser = argparse.ArgumentParser(
        prog="gitpick stash-push",
        description="Stash selected files. Without paths, pick them interactively.",
    )
    parser.add_argument("-m", "--message", help="Stash message")
    parser.add_argument("paths", nargs="*", metavar="PATH", help="Paths to stash")
    options, extra = parser.parse_known_args(list(args))
    options.flags = [arg for arg in extra if arg.startswith("-") and arg != "--"]
    options.paths = [
        arg for arg in [*options.paths, *extra] if arg != "--" and arg not in options.flags
    ]
    return options


class StashPushPicker(Picker):
    """Stash selected modified or untracked files."""

    command = Command.STASH_PUSH
    summary = "stash selected files"
    multi = True
    empty_message = "Nothing to stash."

    def __init__(self, settings, config, args=()):
        super().__init__(settings, config, args)
        self.options = parse_stash_push_args(self.args)

    def direct(self) -> Optional[int]:
        if not self.options.paths:
            return None
        return self.stash(self.options.paths)

    def list_candidates(self) -> list[str]:
        entries = git_entries(
            [
                "-c",
                "core.quotePath=false",
                "ls-files",
                "-z",
                "--full-name",
                "--exclude-standard",
                "--modified",
                "--others",
                repo_root() or ".",
            ],
            check=True,
        )
        # Unmerged paths are listed once per stage
        return list(dict.fromkeys(entries))

    def target(self, line: str) -> str:
        return strip_ansi(line).strip()

    def preview_args(self, target: str, full: bool) -> list[str]:
        context = self.settings.fullscreen_context if full else self.settings.preview_context
        return file_diff_args(target, context)

    def preview_pager(self) -> tuple[str, ...]:
        return self.settings.diff_pager

    def act(self, targets: list[str]) -> int:
        # Listed paths are relative to the repository root
        return self.stash([top_pathspec(t) for t in targets])

    def stash(self, pathspecs: Sequence[str]) -> int:
        message = ["-m", self.options.message] if self.options.message else []
        return self.git(
            "stash",
            "push",
            *message,
            "-u",
            *self.options.flags,
            *self.config.git_opts,
            "--",
            *pathspecs,
        )
