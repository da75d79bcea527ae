"""Data models for gitpick."""

from gitpick.models.core import Candidate, Command, Ordering, Selection
from gitpick.models.state import CommandConfig, Settings

__all__ = [
    # Core
    "Command",
    "Candidate",
    "Ordering",
    "Selection",
    # State
    "CommandConfig",
    "Settings",
]
