"""UI components for terminal output."""

from gitpick.ui.output import (
    BLUE,
    GRAY,
    GREEN,
    NC,
    RED,
    YELLOW,
    error,
    log,
    success,
    warn,
)

__all__ = [
    # Colors
    "RED",
    "GREEN",
    "YELLOW",
    "BLUE",
    "GRAY",
    "NC",
    # Functions
    "log",
    "success",
    "warn",
    "error",
]
