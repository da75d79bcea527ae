"""Thin wrappers around git subprocess calls."""

import subprocess
from typing import Optional, Sequence

from gitpick.utils.debug import debug_enabled, debug_log


def run_git(args: Sequence[str], capture: bool = True, env: Optional[dict] = None):
    """Run git with an explicit argv.

    capture=True returns the CompletedProcess with text output; capture=False
    lets git talk to the terminal (editors, progress) and still returns the
    CompletedProcess so callers can read the exit code.
    """
    argv = ["git", *args]
    if capture:
        result = subprocess.run(argv, capture_output=True, text=True, env=env)
    else:
        result = subprocess.run(argv, env=env)
    debug_log(debug_enabled(), "git", {"argv": argv, "returncode": result.returncode})
    return result


class CommandFailed(Exception):
    """A lister command exited non-zero."""

    def __init__(self, argv: Sequence[str], returncode: int, stderr: str = ""):
        self.argv = list(argv)
        self.returncode = returncode
        self.stderr = stderr.strip()
        super().__init__(self.stderr or f"{self.argv[0]} exited with status {returncode}")


def _checked(args: Sequence[str], check: bool) -> Optional[str]:
    result = run_git(args)
    if result.returncode == 0:
        return result.stdout
    if check:
        raise CommandFailed(["git", *args], result.returncode, result.stderr or "")
    return None


def git_lines(args: Sequence[str], check: bool = False) -> list[str]:
    """Non-empty stdout lines of a git command.

    On failure returns [], or raises CommandFailed when check is set.
    """
    stdout = _checked(args, check)
    if stdout is None:
        return []
    return [line for line in stdout.split("\n") if line.strip()]


def git_entries(args: Sequence[str], check: bool = False) -> list[str]:
    """NUL-separated stdout fields of a `-z` git command, unquoted."""
    stdout = _checked(args, check)
    if stdout is None:
        return []
    return [entry for entry in stdout.split("\0") if entry]


def is_inside_work_tree() -> bool:
    result = run_git(["rev-parse", "--is-inside-work-tree"])
    return result.returncode == 0 and result.stdout.strip() == "true"


def resolves_to_commit(ref: str) -> bool:
    """True if ref names an existing branch, tag or commit."""
    if not ref or ref.startswith("-"):
        return False
    result = run_git(["rev-parse", "--verify", "--quiet", f"{ref}^{{commit}}"])
    return result.returncode == 0


def has_staged_changes() -> bool:
    return run_git(["diff", "--cached", "--quiet"]).returncode != 0


def is_root_commit(sha: str) -> bool:
    roots = git_lines(["rev-list", "--max-parents=0", "HEAD"])
    full = run_git(["rev-parse", sha]).stdout.strip()
    return full in roots


def rebase_base(sha: str) -> list[str]:
    """Argument for `git rebase -i` that includes sha itself in the todo list."""
    return ["--root"] if is_root_commit(sha) else [f"{sha}~"]


def short_status() -> int:
    """Print `git status --short` to the terminal."""
    return run_git(["status", "--short"], capture=False).returncode


def is_revision(arg: str) -> bool:
    """True if arg parses as a revision or range (HEAD~2, main..topic)."""
    if not arg or arg.startswith("-"):
        return False
    return run_git(["rev-parse", "--quiet", arg, "--"]).returncode == 0


def repo_root() -> str:
    result = run_git(["rev-parse", "--show-toplevel"])
    return result.stdout.strip() if result.returncode == 0 else ""


def top_pathspec(path: str) -> str:
    """Pathspec for a path relative to the repository root, valid from any cwd."""
    return f":(top){path}"
