"""Interactive selection through fzf."""

import shutil
import subprocess
from typing import Sequence

from gitpick.models.core import TAG_SEPARATOR, Candidate, Selection
from gitpick.picker.ordering import resolve_selection
from gitpick.utils.debug import debug_enabled, debug_log

# fzf exit codes: 1 = no match, 130 = aborted by the user
CANCEL_CODES = (1, 130)


def fzf_available() -> bool:
    return shutil.which("fzf") is not None


def build_fzf_argv(
    default_opts: Sequence[str],
    picker_opts: Sequence[str],
    preview: str,
    bindings: Sequence[str],
    extra_opts: Sequence[str] = (),
) -> list[str]:
    """Compose fzf argv: global defaults, tag handling, picker options, user extras last."""
    argv = [
        "fzf",
        *default_opts,
        f"--delimiter={TAG_SEPARATOR}",
        "--with-nth=2..",
        *picker_opts,
    ]
    if preview:
        argv += ["--preview", preview]
    for binding in bindings:
        argv += ["--bind", binding]
    argv += list(extra_opts)
    return argv


def select(candidates: Sequence[Candidate], argv: Sequence[str]) -> Selection:
    """Feed tagged candidates to fzf and map its output back to candidates."""
    payload = "\n".join(c.tagged for c in candidates)
    debug_log(debug_enabled(), "fzf", list(argv))
    result = subprocess.run(list(argv), input=payload, stdout=subprocess.PIPE, text=True)
    if result.returncode in CANCEL_CODES:
        return Selection(returncode=result.returncode, cancelled=True)
    if result.returncode != 0:
        return Selection(returncode=result.returncode)
    picked = resolve_selection(result.stdout.split("\n"), candidates)
    return Selection(candidates=picked, returncode=0, cancelled=not picked)
