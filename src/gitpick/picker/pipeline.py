"""The generic picker: list -> preview -> select -> act."""

from typing import Optional, Sequence

from gitpick.git.repo import CommandFailed, is_inside_work_tree, run_git
from gitpick.models.core import Candidate, Command, Ordering
from gitpick.models.state import CommandConfig, Settings
from gitpick.picker.fzf import build_fzf_argv, fzf_available, select
from gitpick.picker.ordering import order_selection, tag_positions
from gitpick.picker.process import (
    copy_to_clipboard,
    hook_command,
    lines_of,
    pipeline,
    run_argv,
)
from gitpick.ui.output import error, log
from gitpick.utils.formatting import first_field

PREVIEW_HOOK = "_preview"
ENTER_HOOK = "_enter"
COPY_HOOK = "_copy"
HOOKS = (PREVIEW_HOOK, ENTER_HOOK, COPY_HOOK)


class Picker:
    """Base for every command.

    Subclasses provide the lister, how a line maps to the action target, the
    preview for one target and the action. Class attributes describe the
    interaction: multi-select, ordering policy, whether the picker is a pure
    viewer (no action, enter opens the full page).
    """

    command: Command
    summary: str = ""
    multi: bool = False
    ordering: Ordering = Ordering.AS_SELECTED
    viewer: bool = False
    copyable: bool = False
    requires_repo: bool = True
    empty_message: str = "Nothing to do."
    extra_fzf_opts: tuple[str, ...] = ()

    def __init__(self, settings: Settings, config: CommandConfig, args: Sequence[str] = ()):
        self.settings = settings
        self.config = config
        self.args = list(args)

    # -- capability ------------------------------------------------------

    def direct(self) -> Optional[int]:
        """Run without the picker when args already name the target.

        Returns the exit code, or None when interactive selection is needed.
        """
        return None

    def list_candidates(self) -> list[str]:
        raise NotImplementedError

    def target(self, line: str) -> str:
        """What the action and preview operate on for one displayed line."""
        return first_field(line)

    def preview_args(self, target: str, full: bool) -> list[str]:
        """git argv (without 'git') rendering one target. Must not mutate state."""
        return []

    def preview_pager(self) -> tuple[str, ...]:
        return self.settings.show_pager

    def act(self, targets: list[str]) -> int:
        raise NotImplementedError

    # -- fzf wiring ------------------------------------------------------

    def fzf_options(self) -> list[str]:
        return ["-m" if self.multi else "+m", *self.extra_fzf_opts]

    def bindings(self) -> list[str]:
        enter = hook_command(ENTER_HOOK, self.command.value, self.args)
        binds = [f"{'enter' if self.viewer else 'ctrl-o'}:execute({enter})"]
        if self.copyable:
            copy = hook_command(COPY_HOOK, self.command.value, self.args)
            binds.append(f"ctrl-y:execute-silent({copy})")
        return binds

    def fzf_argv(self) -> list[str]:
        preview = hook_command(PREVIEW_HOOK, self.command.value, self.args)
        return build_fzf_argv(
            self.settings.fzf_default_opts,
            self.fzf_options(),
            preview,
            self.bindings(),
            self.config.fzf_opts,
        )

    # -- pipeline steps --------------------------------------------------

    def candidates(self) -> list[Candidate]:
        lines = lines_of(self.config.lister) if self.config.lister else self.list_candidates()
        return tag_positions(lines)

    def preview(self, line: str, full: bool = False) -> int:
        target = self.target(line)
        if not target:
            return 0
        if self.config.preview:
            return run_argv([*self.config.preview, target])
        args = self.preview_args(target, full)
        if not args:
            return 0
        enter = self.settings.enter_pager if full else ()
        return pipeline(["git", *args], self.preview_pager(), enter)

    def copy(self, line: str) -> int:
        return copy_to_clipboard(self.target(line), self.settings.copy_cmd)

    def run_action(self, selected: Sequence[Candidate]) -> int:
        targets = [self.target(c.text) for c in selected]
        targets = [t for t in targets if t]
        if not targets:
            return 0
        if self.config.action:
            return run_argv([*self.config.action, *targets])
        return self.act(targets)

    def git(self, *args: str) -> int:
        """Run git attached to the terminal and return its exit code."""
        return run_git(list(args), capture=False).returncode


def run_picker(picker: Picker) -> int:
    """Drive one picker to completion and return the command's exit code."""
    if picker.requires_repo and not is_inside_work_tree():
        error("Not a git repository (or any of the parent directories)")
        return 1

    code = picker.direct()
    if code is not None:
        return code

    try:
        candidates = picker.candidates()
    except CommandFailed as exc:
        error(str(exc))
        return exc.returncode
    if not candidates:
        log(picker.empty_message)
        return 0

    if not fzf_available():
        error("fzf not found. Install it from https://github.com/junegunn/fzf")
        return 1

    selection = select(candidates, picker.fzf_argv())
    if selection.cancelled:
        return 0
    if selection.returncode != 0:
        error(f"fzf exited with status {selection.returncode}")
        return selection.returncode
    if picker.viewer:
        return 0

    ordered = order_selection(selection.candidates, picker.ordering)
    return picker.run_action(ordered)


def run_hook(hook: str, picker: Picker, line: str) -> int:
    """Serve one fzf callback for the highlighted line."""
    if hook == PREVIEW_HOOK:
        return picker.preview(line)
    if hook == ENTER_HOOK:
        return picker.preview(line, full=True)
    if hook == COPY_HOOK:
        return picker.copy(line)
    error(f"Unknown hook: {hook}")
    return 1
