"""Git operations used by the pickers."""

from gitpick.git.branch import (
    checkout_branch,
    checkout_or_create,
    choose_tracking_name,
    find_next_suffix,
    get_current_branch,
    list_branches,
    list_local_branches,
    split_remote_branch,
)
from gitpick.git.history import chronological_log_lines, log_lines, unpicked_commits
from gitpick.git.repo import (
    git_lines,
    has_staged_changes,
    is_inside_work_tree,
    rebase_base,
    resolves_to_commit,
    run_git,
    short_status,
)

__all__ = [
    # Repo
    "run_git",
    "git_lines",
    "is_inside_work_tree",
    "resolves_to_commit",
    "has_staged_changes",
    "rebase_base",
    "short_status",
    # Branch
    "get_current_branch",
    "list_branches",
    "list_local_branches",
    "split_remote_branch",
    "find_next_suffix",
    "choose_tracking_name",
    "checkout_branch",
    "checkout_or_create",
    # History
    "log_lines",
    "chronological_log_lines",
    "unpicked_commits",
]
