"""Branch listing and checkout helpers."""

from typing import Optional, Sequence

from gitpick.git.repo import git_lines, resolves_to_commit, run_git, short_status
from gitpick.ui.output import log

REMOTES_PREFIX = "remotes/"
TRACK_PREFIX = "track/"


def get_current_branch() -> str:
    """Get current git branch name."""
    result = run_git(["branch", "--show-current"])
    return result.stdout.strip() if result.returncode == 0 else ""


def parse_branch_lines(lines: Sequence[str]) -> list[str]:
    """Branch names from `git branch` output.

    Strips the current (*) and worktree (+) markers and skips symbolic
    refs (origin/HEAD -> ...) and detached HEAD entries.
    """
    names = []
    for line in lines:
        name = line.strip().lstrip("*+ ")
        if not name or " -> " in name or name.startswith("("):
            continue
        names.append(name)
    return names


def list_branches(git_opts: Sequence[str] = (), check: bool = False) -> list[str]:
    """Branches for the checkout picker, local and remote unless git_opts say otherwise."""
    args = ["branch", "--color=never", *(git_opts or ["--all"])]
    return parse_branch_lines(git_lines(args, check=check))


def list_local_branches(check: bool = False) -> list[str]:
    return parse_branch_lines(git_lines(["branch", "--color=never"], check=check))


def list_remotes() -> list[str]:
    return git_lines(["remote"])


def split_remote_branch(name: str, remotes: Sequence[str]) -> Optional[tuple[str, str]]:
    """('origin', 'feature/x') for 'remotes/origin/feature/x', None for local branches."""
    if not name.startswith(REMOTES_PREFIX):
        return None
    rest = name[len(REMOTES_PREFIX) :]
    # Longest remote first: remote names may contain slashes
    for remote in sorted(remotes, key=len, reverse=True):
        if rest.startswith(f"{remote}/"):
            return remote, rest[len(remote) + 1 :]
    return None


def find_next_suffix(branches: Sequence[str], base: str) -> int:
    """Find next available numeric suffix for base branch name."""
    max_suffix = 1
    for b in branches:
        if b == base:
            max_suffix = max(max_suffix, 1)
        elif b.startswith(f"{base}-"):
            suffix_part = b[len(base) + 1 :]
            if suffix_part.isdigit():
                max_suffix = max(max_suffix, int(suffix_part))
    return max_suffix + 1


def choose_tracking_name(short: str, existing: Sequence[str]) -> str:
    """Local name for tracking a remote branch without clobbering existing ones.

    'feature' if free, else 'track/feature', else 'track/feature-N'.
    """
    if short not in existing:
        return short
    alternate = f"{TRACK_PREFIX}{short}"
    if alternate not in existing:
        return alternate
    return f"{alternate}-{find_next_suffix(existing, alternate)}"


def checkout_branch(name: str, git_opts: Sequence[str] = ()) -> int:
    """Check out a picked branch, creating a tracking branch for remote ones."""
    remote_branch = split_remote_branch(name, list_remotes())
    if remote_branch is None:
        return run_git(["checkout", *git_opts, name], capture=False).returncode

    remote, short = remote_branch
    upstream = f"{remote}/{short}"
    local_name = choose_tracking_name(short, list_local_branches())
    if local_name == short:
        log(f"Tracking {upstream} as {local_name}")
        return run_git(["checkout", *git_opts, "--track", upstream], capture=False).returncode
    log(f"Local branch {short} exists, tracking {upstream} as {local_name}")
    return run_git(
        ["checkout", *git_opts, "-b", local_name, "--track", upstream], capture=False
    ).returncode


def checkout_or_create(args: Sequence[str], git_opts: Sequence[str] = ()) -> int:
    """Check out args[0] if it resolves, otherwise create a branch with that name."""
    target = args[0]
    if target == "-" or resolves_to_commit(target):
        code = run_git(["checkout", *git_opts, *args], capture=False).returncode
    else:
        log(f"No reference named {target}, creating branch")
        code = run_git(["checkout", *git_opts, "-b", *args], capture=False).returncode
    short_status()
    return code
