"""Generic picker pipeline and fzf plumbing."""

from gitpick.picker.ordering import order_selection, resolve_selection, tag_positions
from gitpick.picker.pipeline import HOOKS, Picker, run_hook, run_picker

__all__ = [
    "Picker",
    "run_picker",
    "run_hook",
    "HOOKS",
    "tag_positions",
    "resolve_selection",
    "order_selection",
]
