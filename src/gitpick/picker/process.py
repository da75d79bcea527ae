"""Subprocess composition: pagers, clipboard, callbacks into gitpick."""

import shlex
import subprocess
import sys
from typing import Sequence

from gitpick.git.repo import CommandFailed
from gitpick.ui.output import error
from gitpick.utils.debug import debug_enabled, debug_log

# fzf field expression for the displayed text (field 1 is the position tag)
LINE_PLACEHOLDER = "{2..}"
# Shell convention for "command not found"
NOT_FOUND = 127


def self_command() -> list[str]:
    """argv that re-enters gitpick under the current interpreter."""
    return [sys.executable, "-m", "gitpick"]


def hook_command(hook: str, command: str, args: Sequence[str] = ()) -> str:
    """Command string fzf runs for a preview or key binding.

    Only fixed words and shell-quoted user arguments are spliced in; the
    highlighted line reaches the hook through fzf's own quoted placeholder.
    """
    cmd = f"{shlex.join([*self_command(), hook, command])} {LINE_PLACEHOLDER}"
    if args:
        cmd += f" {shlex.join(args)}"
    return cmd


def _not_found(argv: Sequence[str]) -> int:
    error(f"{argv[0]} not found. Check the command configured for it.")
    return NOT_FOUND


def pipeline(*stages: Sequence[str]) -> int:
    """Run stages connected stdout-to-stdin, the last one on the terminal.

    Empty stages are skipped. Returns the first non-zero exit code, or 127
    when a stage's executable does not exist.
    """
    argvs = [list(stage) for stage in stages if stage]
    debug_log(debug_enabled(), "pipeline", argvs)
    if not argvs:
        return 0
    procs: list[subprocess.Popen] = []
    upstream = None
    missing = None
    for i, argv in enumerate(argvs):
        last = i == len(argvs) - 1
        try:
            proc = subprocess.Popen(argv, stdin=upstream, stdout=None if last else subprocess.PIPE)
        except FileNotFoundError:
            missing = argv
            break
        finally:
            if upstream is not None:
                upstream.close()
        upstream = proc.stdout
        procs.append(proc)
    codes = [proc.wait() for proc in procs]
    if missing is not None:
        return _not_found(missing)
    return next((code for code in codes if code), 0)


def page_text(text: str, *pagers: Sequence[str]) -> int:
    """Send already-rendered text through the pager stages."""
    argvs = [list(p) for p in pagers if p]
    if not argvs:
        sys.stdout.write(text)
        sys.stdout.flush()
        return 0
    if len(argvs) == 1:
        try:
            return subprocess.run(argvs[0], input=text, text=True).returncode
        except FileNotFoundError:
            return _not_found(argvs[0])
    # Feed the first stage ourselves, chain the rest
    try:
        first = subprocess.Popen(
            argvs[0], stdin=subprocess.PIPE, stdout=subprocess.PIPE, text=True
        )
    except FileNotFoundError:
        return _not_found(argvs[0])
    try:
        rest = subprocess.Popen(argvs[1], stdin=first.stdout)
    except FileNotFoundError:
        first.kill()
        first.wait()
        return _not_found(argvs[1])
    finally:
        if first.stdout:
            first.stdout.close()
    if first.stdin:
        first.stdin.write(text)
        first.stdin.close()
    return first.wait() or rest.wait()


def copy_to_clipboard(text: str, copy_cmd: Sequence[str]) -> int:
    try:
        result = subprocess.run(list(copy_cmd), input=text, text=True)
    except FileNotFoundError:
        return _not_found(copy_cmd)
    return result.returncode


def run_argv(argv: Sequence[str]) -> int:
    """Run a user-configured override argv attached to the terminal."""
    debug_log(debug_enabled(), "override", list(argv))
    try:
        return subprocess.run(list(argv)).returncode
    except FileNotFoundError:
        return _not_found(argv)


def lines_of(argv: Sequence[str]) -> list[str]:
    """Non-empty stdout lines of an override lister argv.

    Raises CommandFailed when the lister fails or does not exist.
    """
    try:
        result = subprocess.run(list(argv), capture_output=True, text=True)
    except FileNotFoundError:
        raise CommandFailed(argv, NOT_FOUND, f"{argv[0]} not found") from None
    debug_log(debug_enabled(), "lister", {"argv": list(argv), "returncode": result.returncode})
    if result.returncode != 0:
        raise CommandFailed(argv, result.returncode, result.stderr)
    return [line for line in result.stdout.split("\n") if line.strip()]
