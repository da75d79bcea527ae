"""History listings for the commit pickers. Failing git calls raise CommandFailed."""

from typing import Sequence

from gitpick.git.repo import git_lines
from gitpick.models.state import Settings


def log_lines(settings: Settings, args: Sequence[str] = (), graph: bool = True) -> list[str]:
    """Formatted `git log`, newest first, graph drawn when enabled."""
    cmd = ["log", "--color=always", f"--format={settings.log_format}"]
    if graph and settings.log_graph:
        cmd.insert(1, "--graph")
    return git_lines([*cmd, *args], check=True)


def chronological_log_lines(settings: Settings, args: Sequence[str] = ()) -> list[str]:
    """Formatted `git log`, oldest first. git cannot draw a graph in this order."""
    return git_lines(
        ["log", "--reverse", "--color=always", f"--format={settings.log_format}", *args],
        check=True,
    )


def unpicked_commits(settings: Settings, target: str, args: Sequence[str] = ()) -> list[str]:
    """Commits on target whose changes are not on HEAD yet, oldest first."""
    return git_lines(
        [
            "log",
            "--reverse",
            "--right-only",
            "--cherry-pick",
            "--no-merges",
            "--color=always",
            f"--format={settings.log_format}",
            *args,
            f"HEAD...{target}",
        ],
        check=True,
    )
