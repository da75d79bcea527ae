"""Working-tree pickers: add, reset, checkout-file, clean."""

import os
from pathlib import Path
from typing import Optional, Sequence

from gitpick.git.repo import git_entries, git_lines, repo_root, short_status, top_pathspec
from gitpick.models.core import Command
from gitpick.picker.pipeline import Picker
from gitpick.picker.process import page_text
from gitpick.utils.formatting import extract_bracketed_path, strip_ansi

UNTRACKED = "??"
PREVIEW_LIMIT = 200
# Status codes whose porcelain entry is followed by the original path
RENAMED = ("R", "C")


def parse_porcelain(entries: Sequence[str]) -> list[tuple[str, str]]:
    """(XY, path) pairs from `git status --porcelain -z` fields.

    Paths are relative to the repository root and never quoted. Renames and
    copies report the new path; the original path that follows is skipped.
    """
    pairs = []
    fields = iter(entries)
    for entry in fields:
        xy, path = entry[:2], entry[3:]
        if xy[0] in RENAMED or xy[1] in RENAMED:
            next(fields, None)
        pairs.append((xy, path))
    return pairs


def worktree_status(paths: Sequence[str] = (), check: bool = False) -> list[tuple[str, str]]:
    return parse_porcelain(git_entries(["status", "--porcelain", "-z", "--", *paths], check=check))


def file_diff_args(path: str, context: int) -> list[str]:
    """Diff of one worktree file given relative to the repository root.

    Untracked files diff against /dev/null.
    """
    status = worktree_status([top_pathspec(path)])
    if status and status[0][0] == UNTRACKED:
        root = repo_root()
        full = os.path.join(root, path) if root else path
        return ["diff", "--color=always", f"-U{context}", "--no-index", "--", "/dev/null", full]
    return ["diff", "--color=always", f"-U{context}", "--", top_pathspec(path)]


def format_status_line(xy: str, path: str) -> str:
    """(' M', 'src/app.py') -> '[ M]  src/app.py'."""
    return f"[{xy}]  {path}"


def has_worktree_change(xy: str) -> bool:
    """Status entries `git add` can act on: unstaged, untracked or unmerged."""
    return xy[1] != " " or "U" in xy


class AddPicker(Picker):
    """Stage files with unstaged changes."""

    command = Command.ADD
    summary = "stage changed files"
    multi = True
    empty_message = "Nothing to add."

    def direct(self) -> Optional[int]:
        if not self.args:
            return None
        code = self.git("add", *self.config.git_opts, *self.args)
        short_status()
        return code

    def list_candidates(self) -> list[str]:
        return [
            format_status_line(xy, path)
            for xy, path in worktree_status(check=True)
            if has_worktree_change(xy)
        ]

    def target(self, line: str) -> str:
        return extract_bracketed_path(line)

    def preview_args(self, target: str, full: bool) -> list[str]:
        context = self.settings.fullscreen_context if full else self.settings.preview_context
        return file_diff_args(target, context)

    def preview_pager(self) -> tuple[str, ...]:
        return self.settings.diff_pager

    def act(self, targets: list[str]) -> int:
        # Listed paths are relative to the repository root
        paths = [top_pathspec(t) for t in targets]
        code = self.git("add", *self.config.git_opts, "--", *paths)
        short_status()
        return code


class ResetPicker(Picker):
    """Unstage staged files."""

    command = Command.RESET
    summary = "unstage staged files"
    multi = True
    empty_message = "Nothing to unstage."

    def direct(self) -> Optional[int]:
        if not self.args:
            return None
        code = self.git("reset", "-q", *self.config.git_opts, "HEAD", "--", *self.args)
        short_status()
        return code

    def list_candidates(self) -> list[str]:
        return git_lines(
            ["-c", "core.quotePath=false", "diff", "--cached", "--name-only"], check=True
        )

    def target(self, line: str) -> str:
        return strip_ansi(line).strip()

    def preview_args(self, target: str, full: bool) -> list[str]:
        context = self.settings.fullscreen_context if full else self.settings.preview_context
        return ["diff", "--cached", "--color=always", f"-U{context}", "--", top_pathspec(target)]

    def preview_pager(self) -> tuple[str, ...]:
        return self.settings.diff_pager

    def act(self, targets: list[str]) -> int:
        # Listed paths are relative to the repository root
        paths = [top_pathspec(t) for t in targets]
        code = self.git("reset", "-q", *self.config.git_opts, "HEAD", "--", *paths)
        short_status()
        return code


class CheckoutFilePicker(Picker):
    """Discard worktree changes to tracked files."""

    command = Command.CHECKOUT_FILE
    summary = "discard changes to modified files"
    multi = True
    empty_message = "No modified files to check out."

    def direct(self) -> Optional[int]:
        if not self.args:
            return None
        return self.act(self.args)

    def list_candidates(self) -> list[str]:
        root = repo_root()
        paths = [root] if root else []
        return git_lines(
            ["-c", "core.quotePath=false", "ls-files", "--modified", *paths], check=True
        )

    def target(self, line: str) -> str:
        return strip_ansi(line).strip()

    def preview_args(self, target: str, full: bool) -> list[str]:
        context = self.settings.fullscreen_context if full else self.settings.preview_context
        return ["diff", "--color=always", f"-U{context}", "--", target]

    def preview_pager(self) -> tuple[str, ...]:
        return self.settings.diff_pager

    def act(self, targets: list[str]) -> int:
        return self.git("checkout", *self.config.git_opts, "--", *targets)


WOULD_REMOVE = "Would remove "


class CleanPicker(Picker):
    """Delete untracked and ignored files."""

    command = Command.CLEAN
    summary = "remove untracked files"
    multi = True
    empty_message = "Nothing to clean."

    def direct(self) -> Optional[int]:
        if not self.args:
            return None
        return self.act(self.args)

    def list_candidates(self) -> list[str]:
        lines = git_lines(["-c", "core.quotePath=false", "clean", "-xdffn"], check=True)
        return [line.removeprefix(WOULD_REMOVE) for line in lines]

    def target(self, line: str) -> str:
        return strip_ansi(line).strip()

    def preview(self, line: str, full: bool = False) -> int:
        if self.config.preview:
            return super().preview(line, full)
        path = Path(self.target(line))
        if path.is_dir():
            text = "\n".join(sorted(os.listdir(path))) + "\n"
        elif path.is_file():
            with open(path, errors="replace") as f:
                text = "".join(f.readlines()[:PREVIEW_LIMIT])
        else:
            return 0
        return page_text(text, self.settings.enter_pager if full else ())

    def act(self, targets: list[str]) -> int:
        return self.git("clean", "-xdff", *self.config.git_opts, "--", *targets)
