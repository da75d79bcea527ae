"""Terminal output helpers with colors.

Messages go to stderr: stdout carries picker content (ignore templates,
status listings) and must stay clean for redirection.
"""

import sys

# Colors
RED = "\033[0;31m"
GREEN = "\033[0;32m"
YELLOW = "\033[1;33m"
BLUE = "\033[0;34m"
GRAY = "\033[90m"
NC = "\033[0m"


def _emit(color: str, msg: str) -> None:
    print(f"{color}[gitpick]{NC} {msg}", file=sys.stderr)


def log(msg: str) -> None:
    _emit(BLUE, msg)


def success(msg: str) -> None:
    _emit(GREEN, msg)


def warn(msg: str) -> None:
    _emit(YELLOW, msg)


def error(msg: str) -> None:
    _emit(RED, msg)
