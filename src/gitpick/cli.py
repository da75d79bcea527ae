"""CLI entry point and command dispatch."""

import os
import sys
from importlib.metadata import version as get_version
from typing import Mapping, Optional, Sequence

try:
    __version__ = get_version("gitpick")
except Exception:
    __version__ = "dev"

from gitpick.commands import PICKERS
from gitpick.config.settings import build_command_config, build_settings
from gitpick.models.core import Command
from gitpick.picker.pipeline import HOOKS, Picker, run_hook, run_picker


def usage() -> str:
    width = max(len(c.value) for c in Command)
    lines = ["usage: gitpick <command> [args...]", "", "Commands:"]
    for command in Command:
        lines.append(f"  {command.value:<{width}}  {PICKERS[command].summary}")
    lines += [
        "",
        "Examples:",
        "  gitpick log                     Browse history, enter for the full commit",
        "  gitpick add                     Pick files to stage",
        "  gitpick cherry-pick main        Pick commits on main missing from HEAD",
        "  gitpick checkout-branch topic   Check out topic, or create it",
        "  gitpick ignore python > .gitignore",
        "",
        "Environment:",
        "  GITPICK_<COMMAND>_GIT_OPTS      Extra flags for the command's git call",
        "  GITPICK_<COMMAND>_FZF_OPTS      Extra fzf options for one command",
        "  GITPICK_FZF_DEFAULT_OPTS        Extra fzf options for every command",
        "  GITPICK_PAGER                   Pager for previews (default: core.pager)",
    ]
    return "\n".join(lines)


def make_picker(
    command: Command, args: Sequence[str], env: Optional[Mapping[str, str]] = None
) -> Picker:
    """Build settings and command config once and hand them to the command's picker."""
    settings = build_settings(env)
    if settings.debug:
        # Subprocess wrappers and fzf hook processes read the flag from the environment
        os.environ.setdefault("GITPICK_DEBUG", "1")
    config = build_command_config(command, env)
    return PICKERS[command](settings, config, args)


def dispatch_hook(argv: Sequence[str]) -> int:
    """Serve an fzf callback: <hook> <command> <line> [args...]."""
    if len(argv) < 3:
        return 1
    hook, name, line, *args = argv
    command = Command.from_name(name)
    if command is None:
        return 1
    return run_hook(hook, make_picker(command, args), line)


def main(argv: Optional[Sequence[str]] = None) -> int:
    argv = list(sys.argv[1:] if argv is None else argv)

    if argv and argv[0] in ("-h", "--help"):
        print(usage())
        return 0
    if argv and argv[0] in ("-V", "--version"):
        print(f"gitpick {__version__}")
        return 0
    if argv and argv[0] in HOOKS:
        return dispatch_hook(argv)

    command = Command.from_name(argv[0] if argv else None)
    if command is None:
        print(usage(), file=sys.stderr)
        return 1

    return run_picker(make_picker(command, argv[1:]))


if __name__ == "__main__":
    sys.exit(main())
