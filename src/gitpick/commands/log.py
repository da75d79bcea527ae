"""History and diff viewers."""

from typing import Callable

from gitpick.git.history import log_lines
from gitpick.git.repo import git_lines, is_revision, top_pathspec
from gitpick.models.core import Command
from gitpick.picker.pipeline import Picker
from gitpick.utils.formatting import extract_bracketed_path, extract_sha


def paths_after_separator(args: list[str]) -> list[str]:
    """Everything after a literal '--' in args."""
    if "--" not in args:
        return []
    return args[args.index("--") + 1 :]


class LogPicker(Picker):
    """Browse history; enter opens the commit in the full-page pager."""

    command = Command.LOG
    summary = "browse commit history"
    viewer = True
    copyable = True
    empty_message = "No commits to show."
    extra_fzf_opts = ("-e", "+s", "--tiebreak=index")

    def list_candidates(self) -> list[str]:
        return log_lines(self.settings, [*self.config.git_opts, *self.args])

    def target(self, line: str) -> str:
        return extract_sha(line)

    def preview_args(self, target: str, full: bool) -> list[str]:
        context = self.settings.fullscreen_context if full else self.settings.preview_context
        return [
            "show",
            "--color=always",
            f"-U{context}",
            target,
            "--",
            *paths_after_separator(self.args),
        ]


def split_diff_args(
    args: list[str], is_rev: Callable[[str], bool] = is_revision
) -> tuple[list[str], list[str]]:
    """Split diff arguments into up to two leading revisions and path filters.

    'HEAD~3 main -- src' -> (['HEAD~3', 'main'], ['src'])
    'src/app.py'         -> ([], ['src/app.py'])
    """
    if "--" in args:
        split = args.index("--")
        head, files = args[:split], args[split + 1 :]
    else:
        head, files = args, []

    commits: list[str] = []
    for arg in head[:2]:
        if not is_rev(arg):
            break
        commits.append(arg)
    return commits, head[len(commits) :] + files


def format_name_status(line: str) -> str:
    """'M<TAB>path' -> '[M]  path', 'R100<TAB>old<TAB>new' -> '[R100]  old -> new'."""
    status, *paths = line.split("\t")
    return f"[{status}]  {' -> '.join(paths)}"


class DiffPicker(Picker):
    """Review changed files one diff at a time."""

    command = Command.DIFF
    summary = "review changes file by file"
    viewer = True
    empty_message = "No changes to show."

    def __init__(self, settings, config, args=()):
        super().__init__(settings, config, args)
        self.commits, self.files = split_diff_args(self.args)

    def list_candidates(self) -> list[str]:
        lines = git_lines(
            [
                "-c",
                "core.quotePath=false",
                "diff",
                "--name-status",
                *self.config.git_opts,
                *self.commits,
                "--",
                *self.files,
            ],
            check=True,
        )
        return [format_name_status(line) for line in lines]

    def target(self, line: str) -> str:
        return extract_bracketed_path(line)

    def preview_args(self, target: str, full: bool) -> list[str]:
        context = self.settings.fullscreen_context if full else self.settings.preview_context
        return [
            "diff",
            "--color=always",
            f"-U{context}",
            *self.config.git_opts,
            *self.commits,
            "--",
            top_pathspec(target),
        ]

    def preview_pager(self) -> tuple[str, ...]:
        return self.settings.diff_pager
